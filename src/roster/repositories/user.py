import uuid
from typing import Optional, Protocol
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from sqlalchemy.sql.elements import ColumnElement
from roster.core.pagination import Page, PageRequest
from roster.models.user import User
from roster.repositories.predicates import SORTABLE_FIELDS

__all__ = [
    "UserStore",
    "UserRepository",
]


class UserStore(Protocol):
    """What ``UserService`` needs from persistence."""

    async def get(self, id: uuid.UUID) -> Optional[User]: ...

    async def delete_by_id(self, id: uuid.UUID) -> None: ...

    async def save(self, user: User) -> User: ...

    async def search(
        self, clause: ColumnElement[bool], page_request: PageRequest | None = None
    ) -> Page[User] | list[User]:
        """Paged when ``page_request`` is given, otherwise every match."""
        ...


class UserRepository:
    """SQLAlchemy-backed ``UserStore`` bound to one ``AsyncSession``.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, id: uuid.UUID) -> Optional[User]:
        res = await self.session.execute(select(User).where(User.id == id))
        return res.scalar_one_or_none()

    async def delete_by_id(self, id: uuid.UUID) -> None:
        await self.session.execute(delete(User).where(User.id == id))
        await self.session.flush()

    async def save(self, user: User) -> User:
        self.session.add(user)
        # Flush + refresh so server defaults are loaded before serialization;
        # lazy loads under async SQLAlchemy raise MissingGreenlet.
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def search(self, clause: ColumnElement[bool], page_request: PageRequest | None = None):
        stmt = select(User).where(clause)
        if page_request is None:
            res = await self.session.execute(stmt.order_by(User.created_at, User.id))
            return list(res.scalars().all())

        count = await self.session.execute(select(func.count()).select_from(User).where(clause))
        total = int(count.scalar_one())
        stmt = stmt.order_by(*_order_by(page_request)).offset(page_request.offset).limit(page_request.size)
        res = await self.session.execute(stmt)
        return Page(
            items=list(res.scalars().all()),
            total_elements=total,
            page=page_request.page,
            size=page_request.size,
        )


def _order_by(page_request: PageRequest) -> list:
    orders = []
    for name, direction in page_request.sort:
        column = SORTABLE_FIELDS.get(name)
        if column is None:
            raise ValueError(f"cannot sort by '{name}'")
        orders.append(column.desc() if direction == "desc" else column.asc())
    # stable tail so pages never overlap
    orders.extend([User.created_at.asc(), User.id.asc()])
    return orders
