"""SQL fragment builders for parameterized queries.

Field names are interpolated into the SQL text and must come from trusted
code, never from request data. Values are always passed as parameters.
"""

from typing import Any


def build_where_clause(
    conditions: dict[str, Any],
    param_map: dict[str, str] | None = None
) -> tuple[str, list[Any]]:
    """Build a WHERE clause joined with AND.

    Args:
        conditions: Mapping of field name to value. None values are skipped.
        param_map: Optional custom SQL fragment per field (e.g. "b.owner = ?").

    Returns:
        Tuple of (clause, params). Clause is "1=1" when nothing applies.
    """
    param_map = param_map or {}
    fragments = []
    params = []

    for field, value in conditions.items():
        if value is None:
            continue
        fragments.append(param_map.get(field, f"{field} = ?"))
        params.append(value)

    if not fragments:
        return "1=1", []

    return " AND ".join(fragments), params


def build_update_clause(
    data: dict[str, Any],
    exclude: set[str] | None = None
) -> tuple[str, list[Any]]:
    """Build the SET part of an UPDATE statement.

    Args:
        data: Mapping of field name to new value. None values are skipped.
        exclude: Field names never written (e.g. {"id"}).

    Returns:
        Tuple of (clause, params). Clause is "" when nothing to update.
    """
    exclude = exclude or set()
    fragments = []
    params = []

    for field, value in data.items():
        if field in exclude or value is None:
            continue
        fragments.append(f"{field} = ?")
        params.append(value)

    return ", ".join(fragments), params
