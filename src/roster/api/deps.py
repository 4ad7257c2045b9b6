"""Centralized FastAPI dependency definitions for the API layer.

Routers should import dependencies from here instead of directly from
their underlying implementation modules. This provides:

* A stable import surface (refactors in lower layers don't ripple up)
* Easier test overrides via ``app.dependency_overrides[deps.get_db]``
* Explicit wiring of ``UserService`` collaborators per request

Add new dependency callables here as the API grows.
"""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from roster.core.config import get_settings
from roster.core.pagination import PageRequest
from roster.core.security import get_credential_transform
from roster.db.session import get_db
from roster.repositories.predicates import SORTABLE_FIELDS
from roster.repositories.user import UserRepository
from roster.services.user import UserService

__all__ = ["get_db", "get_user_service", "get_page_request"]

_settings = get_settings()
_transform = get_credential_transform()
_service_logger = logging.getLogger("roster.services.user")


def get_user_service(session: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(UserRepository(session), _transform, _service_logger)


def get_page_request(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(_settings.default_page_size, ge=1, le=_settings.max_page_size),
    sort: Optional[list[str]] = Query(None, description="field[,asc|desc]; repeatable"),
) -> PageRequest:
    try:
        return PageRequest.of(page, size, sort, allowed=SORTABLE_FIELDS)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
