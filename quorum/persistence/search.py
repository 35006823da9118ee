"""Helpers for case-insensitive substring search."""

LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """Build an ILIKE pattern matching ``text`` literally anywhere.

    ``%``, ``_`` and the escape character itself are escaped, so user input
    is never read as a wildcard. Use together with ``escape=LIKE_ESCAPE``.
    """
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
