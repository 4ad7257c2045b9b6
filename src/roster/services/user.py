"""User service layer.

``UserService`` wraps a ``UserStore`` with the account business rules:
credential transform on create, merge-on-valid-field updates, delete with a
post-check, and authentication. Missing records surface as
``DataNotFoundError`` and failed logins as ``InvalidCredentialsError``; any
other store error propagates untouched.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from roster.core.errors import DataNotFoundError, InvalidCredentialsError
from roster.core.pagination import PageRequest, update_page_headers
from roster.core.security import CredentialTransform, credentials_match
from roster.core.validation import is_valid
from roster.models.user import User
from roster.repositories.predicates import build_filter_clause, build_name_fuzzy_clause
from roster.repositories.user import UserStore
from roster.schemas.filter import UserFilter, UserNameFuzzyFilter
from roster.schemas.user import UserAuth, UserCreate, UserRead, UserUpdate

__all__ = ["UserService"]

_MERGEABLE_FIELDS = ("first_name", "middle_name", "last_name", "phone_number")


class UserService:
    def __init__(
        self,
        store: UserStore,
        transform: CredentialTransform,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.transform = transform
        self.logger = logger or logging.getLogger(__name__)

    async def create(self, request: UserCreate) -> UserRead:
        user = User(
            id=uuid.uuid4(),
            first_name=request.first_name,
            middle_name=request.middle_name,
            last_name=request.last_name,
            phone_number=request.phone_number,
            email=request.email,
            role=request.role,
            password=self.transform.transform(request.password),
            updated=None,
        )
        user = await self.store.save(user)
        self.logger.info("created user '%s'", user.id, extra={"event": "user.created", "user_id": user.id})
        return UserRead.model_validate(user)

    async def retrieve(self, id: uuid.UUID) -> UserRead:
        user = await self._get_user(id)
        self.logger.info("found user '%s'", id, extra={"event": "user.found", "user_id": id})
        return UserRead.model_validate(user)

    async def retrieve_by_name(self, name: str, page_request: PageRequest, response) -> list[UserRead]:
        clause = build_name_fuzzy_clause(UserNameFuzzyFilter(name=name))
        return await self._search_page(clause, page_request, response)

    async def retrieve_by_filter(self, user_filter: UserFilter, page_request: PageRequest, response) -> list[UserRead]:
        clause = build_filter_clause(user_filter)
        return await self._search_page(clause, page_request, response)

    async def update(self, id: uuid.UUID, request: UserUpdate) -> UserRead:
        user = await self._get_user(id)
        user.updated = datetime.now(timezone.utc)
        for field in _MERGEABLE_FIELDS:
            value = getattr(request, field)
            if is_valid(value):
                setattr(user, field, value)

        updated = await self.store.save(user)
        self.logger.info("updated user '%s'", updated.id, extra={"event": "user.updated", "user_id": updated.id})
        return UserRead.model_validate(updated)

    async def delete(self, id: uuid.UUID) -> bool:
        user = await self._get_user(id)
        await self.store.delete_by_id(user.id)

        is_deleted = await self.store.get(id) is None
        if is_deleted:
            self.logger.info("deleted user '%s'", id, extra={"event": "user.deleted", "user_id": id})
        else:
            self.logger.warning("failed to delete user '%s'", id, extra={"event": "user.delete_failed", "user_id": id})
        return is_deleted

    async def authenticate(self, request: UserAuth) -> None:
        self.logger.debug("authenticating %s", request.email)

        clause = build_filter_clause(UserFilter(emails={request.email}))
        users = await self.store.search(clause)
        user = next(iter(users), None)
        if user is None:
            self.logger.debug("email not on record")
            raise InvalidCredentialsError()

        if not credentials_match(user.password, self.transform.transform(request.password)):
            self.logger.debug("invalid password")
            raise InvalidCredentialsError()

        self.logger.info(
            "successfully authenticated %s", request.email,
            extra={"event": "user.authenticated", "user_id": user.id},
        )

    async def _search_page(self, clause, page_request: PageRequest, response) -> list[UserRead]:
        page = (await self.store.search(clause, page_request)).map(UserRead.model_validate)
        self.logger.info("found %d user(s)", len(page.items), extra={"event": "user.search", "count": len(page.items)})
        if response is not None:
            update_page_headers(response, page)
        return list(page.items)

    async def _get_user(self, id: uuid.UUID) -> User:
        user = await self.store.get(id)
        if user is None:
            message = f"user '{id}' doesn't exist"
            self.logger.warning(message, extra={"event": "user.not_found", "user_id": id})
            raise DataNotFoundError(message)
        return user
