"""Store-agnostic user filters.

Translation into SQL lives in ``roster.repositories.predicates``; nothing here
knows about the backing store.
"""
import uuid
from datetime import datetime
from pydantic import BaseModel, model_validator
from typing import Optional


class DateFilter(BaseModel):
    """Range over a timestamp column. Either bound may be omitted."""
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    start_inclusive: bool = True
    end_inclusive: bool = False

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError("date filter start must not be after end")
        return self

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None


class UserFilter(BaseModel):
    ids: Optional[set[uuid.UUID]] = None
    first_names: Optional[set[str]] = None
    last_names: Optional[set[str]] = None
    middle_names: Optional[set[str]] = None
    emails: Optional[set[str]] = None
    date_filter: Optional[DateFilter] = None


class UserNameFuzzyFilter(BaseModel):
    name: str
