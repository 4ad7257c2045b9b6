"""Translate user filters into SQLAlchemy WHERE clauses.

Pure functions: nothing here touches a session. Each builder returns a single
boolean clause that ``UserRepository.search`` can apply as-is.
"""
from __future__ import annotations

from typing import Iterable
from sqlalchemy import String, and_, func, true
from sqlalchemy.sql.elements import ColumnElement

from roster.models.user import User
from roster.schemas.filter import DateFilter, UserFilter, UserNameFuzzyFilter

__all__ = [
    "SORTABLE_FIELDS",
    "build_filter_clause",
    "build_name_fuzzy_clause",
    "build_date_clause",
    "full_name_expression",
]

# Public sort names accepted by listing endpoints, mapped to columns.
SORTABLE_FIELDS = {
    "id": User.id,
    "first_name": User.first_name,
    "middle_name": User.middle_name,
    "last_name": User.last_name,
    "email": User.email,
    "phone_number": User.phone_number,
    "role": User.role,
    "updated": User.updated,
    "created_at": User.created_at,
}


def _in(column, values: Iterable | None) -> ColumnElement[bool] | None:
    if not values:
        return None
    return column.in_(list(values))


def build_date_clause(column, date_filter: DateFilter | None) -> ColumnElement[bool] | None:
    if date_filter is None or date_filter.is_empty:
        return None
    parts: list[ColumnElement[bool]] = []
    if date_filter.start is not None:
        parts.append(column >= date_filter.start if date_filter.start_inclusive else column > date_filter.start)
    if date_filter.end is not None:
        parts.append(column <= date_filter.end if date_filter.end_inclusive else column < date_filter.end)
    return and_(*parts)


def build_filter_clause(user_filter: UserFilter) -> ColumnElement[bool]:
    """AND together every populated field; an empty filter matches all rows."""
    # emails match regardless of case, the way the unique index compares them
    emails = {e.strip().lower() for e in user_filter.emails} if user_filter.emails else None
    parts = [
        _in(User.id, user_filter.ids),
        _in(User.first_name, user_filter.first_names),
        _in(User.last_name, user_filter.last_names),
        _in(User.middle_name, user_filter.middle_names),
        _in(func.lower(User.email), emails),
        build_date_clause(User.updated, user_filter.date_filter),
    ]
    clauses = [p for p in parts if p is not None]
    if not clauses:
        return true()
    return and_(*clauses)


def _name_part(column):
    # "<part> " when the part has text, "" otherwise
    trimmed = func.nullif(func.trim(column, type_=String), "", type_=String)
    return func.coalesce(trimmed.concat(" "), "", type_=String)


def full_name_expression() -> ColumnElement[str]:
    """SQL rendering of ``User.name``: non-blank parts joined by single spaces."""
    joined = _name_part(User.first_name).concat(_name_part(User.middle_name)).concat(_name_part(User.last_name))
    return func.rtrim(joined, type_=String)


def build_name_fuzzy_clause(fuzzy: UserNameFuzzyFilter) -> ColumnElement[bool]:
    """Case-insensitive substring match on the full name; wildcards are literal."""
    return full_name_expression().icontains(fuzzy.name, autoescape=True)
