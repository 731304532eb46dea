"""Translate UI grid filter/sort descriptors into SQLAlchemy query clauses.

Filter descriptors carry ``field``, ``action`` and ``value``; sort descriptors
carry ``field`` and ``direction``. Both come from a dynamic filter builder, so
compilation is permissive: descriptors that cannot be interpreted are skipped
instead of rejected.

Filter semantics:
- ``searchFields`` + ``contains``: case-insensitive substring match on any of
  the searchable fields or any line of business (a single OR group; when
  several are sent the last one wins).
- ``in``: value is a member of the given list.
- ``equals``: ``status`` matches any of the upper-cased values; any other
  field is compared with the first value only.
- ``contains``: only honoured for the handler and underwriter fields.

Per-field conditions are keyed by store field, so a later descriptor on the
same field replaces the earlier one.
"""

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy import and_, false, func, or_, select, true
from sqlalchemy.sql.elements import ColumnElement

from app.db.models.policy import Policy as PolicyModel
from app.db.models.policy import PolicyLineOfBusiness as LineOfBusinessModel
from app.domain.field_mapping import map_field

logger = logging.getLogger(__name__)

SEARCH_FIELDS = "searchFields"
STATUS_FIELD = "status"
LINE_OF_BUSINESS_FIELD = "line_of_business"

# Fields matched by the free-text search box (besides line of business)
SEARCHABLE_FIELDS = ("named_insured", "MNPID", "MBU_handler", "producing_UW")
# Fields accepting a plain ``contains`` filter
CONTAINS_FIELDS = ("MBU_handler", "producing_UW")

ACTION_EQUALS = "equals"
ACTION_IN = "in"
ACTION_CONTAINS = "contains"

ASCENDING = "ascending"
DESCENDING = "descending"


def _column(field: str):
    return PolicyModel.__table__.c.get(field)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _icontains(column, value: str) -> ColumnElement:
    return column.ilike(f"%{_escape_like(value)}%", escape="\\")


def _any_line_of_business(condition: ColumnElement) -> ColumnElement:
    return PolicyModel.lines_of_business.any(condition)


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _search_term(value: Any) -> str | None:
    """A ``contains`` value is a single string; a list contributes its first element."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and value and isinstance(value[0], str):
        return value[0]
    return None


def _membership(field: str, values: list) -> ColumnElement:
    if field == LINE_OF_BUSINESS_FIELD:
        return _any_line_of_business(LineOfBusinessModel.name.in_(values))
    column = _column(field)
    if column is None:
        # Unknown fields are absent from every record
        return false()
    return column.in_(values)


def _equality(field: str, value: Any) -> ColumnElement:
    if field == LINE_OF_BUSINESS_FIELD:
        return _any_line_of_business(LineOfBusinessModel.name == value)
    column = _column(field)
    if column is None:
        return false()
    return column == value


def _search_group(term: str) -> ColumnElement:
    return or_(
        *[_icontains(_column(field), term) for field in SEARCHABLE_FIELDS],
        _any_line_of_business(_icontains(LineOfBusinessModel.name, term)),
    )


def _field_condition(field: str, action: str, value: Any) -> ColumnElement | None:
    if action == ACTION_IN:
        return _membership(field, _as_list(value))

    if action == ACTION_EQUALS:
        values = _as_list(value)
        if field == STATUS_FIELD:
            return _membership(
                field, [item.upper() for item in values if isinstance(item, str)]
            )
        if not values:
            return None
        return _equality(field, values[0])

    if action == ACTION_CONTAINS:
        if field not in CONTAINS_FIELDS:
            return None
        term = _search_term(value)
        if term is None:
            return None
        return _icontains(_column(field), term)

    return None


def compile_filters(filters: Iterable | None) -> ColumnElement:
    """Compile filter descriptors into a single WHERE predicate.

    An empty or fully ignored list compiles to a predicate matching every
    policy.
    """
    conditions: dict[str, ColumnElement] = {}
    search_group: ColumnElement | None = None

    for entry in filters or ():
        field = getattr(entry, "field", None)
        action = getattr(entry, "action", None)
        value = getattr(entry, "value", None)
        logger.debug(f"Processing filter: field={field!r} action={action!r} value={value!r}")

        if not field or not action:
            logger.debug("Skipping filter without field or action")
            continue

        if field == SEARCH_FIELDS and action == ACTION_CONTAINS:
            term = _search_term(value)
            if term is not None:
                search_group = _search_group(term)
            continue

        field = map_field(field)
        condition = _field_condition(field, action, value)
        if condition is None:
            logger.debug(f"Ignoring {action!r} filter on {field!r}")
            continue
        conditions[field] = condition

    clauses = list(conditions.values())
    if search_group is not None:
        clauses.append(search_group)
    return and_(true(), *clauses)


def compile_sorts(sorts: Iterable | None) -> list[tuple[str, str]]:
    """Compile sort descriptors into ordered ``(store_field, direction)`` pairs.

    ``asc`` sorts ascending and anything else descending. A repeated field
    keeps its first position and takes the last direction.
    """
    spec: dict[str, str] = {}
    for entry in sorts or ():
        field = getattr(entry, "field", None)
        if not field:
            continue
        direction = getattr(entry, "direction", None)
        spec[map_field(field)] = ASCENDING if direction == "asc" else DESCENDING
    return list(spec.items())


def order_by_clauses(sort_spec: list[tuple[str, str]]) -> list:
    """Build ORDER BY clauses for a compiled sort.

    Line of business orders by the smallest value ascending and the largest
    descending. Unknown fields are skipped. Policy id is always the final
    tie-breaker so pages are stable.
    """
    clauses = []
    for field, direction in sort_spec:
        if field == LINE_OF_BUSINESS_FIELD:
            aggregate = func.min if direction == ASCENDING else func.max
            expression = (
                select(aggregate(LineOfBusinessModel.name))
                .where(LineOfBusinessModel.policy_id == PolicyModel.id)
                .scalar_subquery()
            )
        else:
            expression = _column(field)
            if expression is None:
                continue
        # Missing values sort first ascending and last descending on every backend
        if direction == ASCENDING:
            clauses.append(expression.asc().nulls_first())
        else:
            clauses.append(expression.desc().nulls_last())
    clauses.append(PolicyModel.id.asc())
    return clauses
