"""Rating handling for the report SQL.

Ratings are stored as text so that the ``'Not Rated'`` sentinel can live in
the same column as the numeric scores.  Anything that is not a plain
integer is treated as *absent*: it never meets a threshold and never
contributes to an average.
"""

_SQL_INTEGER_PATTERN = r"^\s*[0-9]+\s*$"


def safe_rating_sql(column: str) -> str:
    """SQL expression casting *column* to INTEGER, or NULL if it can't."""
    return (
        f"CASE WHEN {column} ~ '{_SQL_INTEGER_PATTERN}' "
        f"THEN CAST(TRIM({column}) AS INTEGER) END"
    )
