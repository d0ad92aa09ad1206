"""CALL { ... } subquery formatting."""

INDENT = "  "


def indent_subquery(subquery: str) -> str:
    """Indent every line of a finalized query except the first.

    Two spaces are inserted after each newline that is not the last
    character of the text.

    Args:
        subquery: Finalized text of the nested query

    Returns:
        The re-indented text
    """
    last = len(subquery) - 1
    parts: list[str] = []
    for i, char in enumerate(subquery):
        parts.append(char)
        if char == "\n" and i != last:
            parts.append(INDENT)
    return "".join(parts)


def render_call_block(subquery: str) -> str:
    """Wrap a finalized query in an indented CALL block.

    Example:
        ```python
        render_call_block("MATCH (n)\\nRETURN n")
        # 'CALL {\\n  MATCH (n)\\n  RETURN n\\n}\\n'
        ```
    """
    return "CALL {\n" + INDENT + indent_subquery(subquery) + "\n}\n"
