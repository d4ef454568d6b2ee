from typing import Any, Mapping

from jobly.errors import BadRequestError


def quote_identifier(name: str) -> str:
    """Double-quote a column name, doubling any embedded quotes."""
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def escape_like(term: str, escape: str = "\\") -> str:
    """Escape LIKE wildcards so ``term`` matches literally."""
    return (
        term.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


def sql_for_partial_update(
    data: Mapping[str, Any], js_to_sql: Mapping[str, str]
) -> tuple[str, list[Any]]:
    """Build the SET clause and bind values for a partial UPDATE.

    Only the keys present in ``data`` are updated. ``js_to_sql`` maps the
    API field names that differ from their column names; any other key is
    used as the column name verbatim.

    Returns ``(set_cols, values)``. Placeholders run ``$1 .. $n`` in the
    iteration order of ``data``, so the caller binds its own lookup key at
    ``$n + 1``.

    Raises BadRequestError if ``data`` is empty.

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        ('"first_name"=$1, "age"=$2', ['Aliya', 32])
    """
    keys = list(data)
    if not keys:
        raise BadRequestError("No data supplied")

    cols = [
        f"{quote_identifier(js_to_sql.get(key, key))}=${idx}"
        for idx, key in enumerate(keys, start=1)
    ]
    return ", ".join(cols), [data[key] for key in keys]
