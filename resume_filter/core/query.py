"""Keyword query normalization."""

QUERY_SEPARATOR = ","


def parse_query(raw: str) -> tuple[str, ...]:
    """Split a comma-separated query into distinct search terms.

    Terms are lower-cased and stripped; empty pieces are dropped and
    duplicates collapse to their first occurrence.

    Args:
        raw: Query as typed by the user.

    Returns:
        Distinct search terms, possibly empty.
    """
    terms = (piece.strip() for piece in (raw or "").lower().split(QUERY_SEPARATOR))
    return tuple(dict.fromkeys(t for t in terms if t))
