"""Parameterized statement builders shared by every catalog resource.

Only column *names* are ever written into SQL text, and only after they
have been checked against the resource's allow-list.  Every *value* is
bound as a ``%s`` parameter, in the order the placeholders appear.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping

from modules.core.exceptions import ValidationError


@dataclass(frozen=True)
class Statement:
    """A SQL string plus the positional parameters it binds."""

    sql: str
    params: List[Any] = field(default_factory=list)


def _check_columns(columns: Iterable[str], allowed: Iterable[str]) -> None:
    permitted = set(allowed)
    for column in columns:
        if column not in permitted:
            raise ValidationError(f"Unknown field: {column}")


def build_insert(
    table: str, fields: Mapping[str, Any], allowed: Iterable[str]
) -> Statement:
    """``INSERT ... RETURNING *`` for the given column/value mapping."""
    if not fields:
        raise ValidationError("No fields to insert")
    _check_columns(fields, allowed)

    columns = ", ".join(fields)
    placeholders = ", ".join("%s" for _ in fields)
    return Statement(
        sql=f"INSERT INTO {table} ({columns}) VALUES ({placeholders}) RETURNING *",
        params=list(fields.values()),
    )


def build_update(
    table: str,
    id: Any,
    fields: Mapping[str, Any],
    allowed: Iterable[str],
    empty_message: str = "No fields to update",
) -> Statement:
    """Build a partial ``UPDATE`` for a single row.

    Assignments follow the mapping's insertion order, one placeholder per
    value.  ``updated_at`` is always refreshed by the store clock and is
    never bound to a parameter.  The id is bound last because the
    ``WHERE`` clause comes after the ``SET`` list.

    Raises:
        ValidationError: ``empty_message`` if ``fields`` is empty, or
            ``Unknown field: <name>`` for a column outside ``allowed``.
    """
    if not fields:
        raise ValidationError(empty_message)
    _check_columns(fields, allowed)

    assignments = [f"{column} = %s" for column in fields]
    assignments.append("updated_at = CURRENT_TIMESTAMP")
    return Statement(
        sql=(
            f"UPDATE {table} SET {', '.join(assignments)} "
            "WHERE id = %s RETURNING *"
        ),
        params=[*fields.values(), id],
    )


def build_delete(table: str, id: Any) -> Statement:
    return Statement(
        sql=f"DELETE FROM {table} WHERE id = %s RETURNING *",
        params=[id],
    )
