import uuid
from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from roster.api import deps
from roster.core.errors import DataNotFoundError
from roster.core.pagination import PageRequest
from roster.schemas.filter import DateFilter, UserFilter
from roster.schemas.user import UserCreate, UserRead, UserUpdate
from roster.services.user import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _user_filter(
    ids: Optional[list[uuid.UUID]] = Query(None),
    first_names: Optional[list[str]] = Query(None),
    middle_names: Optional[list[str]] = Query(None),
    last_names: Optional[list[str]] = Query(None),
    emails: Optional[list[str]] = Query(None),
    updated_after: Optional[datetime] = Query(None, description="Lower bound on `updated`"),
    updated_before: Optional[datetime] = Query(None, description="Upper bound on `updated`"),
    after_inclusive: bool = Query(True),
    before_inclusive: bool = Query(False),
) -> UserFilter:
    date_filter = None
    if updated_after is not None or updated_before is not None:
        try:
            date_filter = DateFilter(
                start=updated_after,
                end=updated_before,
                start_inclusive=after_inclusive,
                end_inclusive=before_inclusive,
            )
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return UserFilter(
        ids=set(ids) if ids else None,
        first_names=set(first_names) if first_names else None,
        middle_names=set(middle_names) if middle_names else None,
        last_names=set(last_names) if last_names else None,
        emails=set(emails) if emails else None,
        date_filter=date_filter,
    )


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED,
             summary="Create a user",
             description="Create a user; the password is stored transformed. Email must be unique.")
async def create_user_route(
    payload: UserCreate,
    session: AsyncSession = Depends(deps.get_db),
    service: UserService = Depends(deps.get_user_service),
):
    try:
        user = await service.create(payload)
        await session.commit()
        return user
    except IntegrityError:
        await session.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")


@router.get("/", response_model=list[UserRead], summary="List users",
            description="Filter users by exact-match field sets and an `updated` range. Paged; totals in headers.")
async def list_users_route(
    response: Response,
    user_filter: UserFilter = Depends(_user_filter),
    page_request: PageRequest = Depends(deps.get_page_request),
    service: UserService = Depends(deps.get_user_service),
):
    return await service.retrieve_by_filter(user_filter, page_request, response)


@router.get("/name/{name}", response_model=list[UserRead], summary="Search users by name",
            description="Case-insensitive partial match on first, middle or last name. Paged; totals in headers.")
async def search_users_by_name_route(
    name: str,
    response: Response,
    page_request: PageRequest = Depends(deps.get_page_request),
    service: UserService = Depends(deps.get_user_service),
):
    return await service.retrieve_by_name(name, page_request, response)


@router.get("/{user_id}", response_model=UserRead, summary="Get a user")
async def get_user_route(user_id: uuid.UUID, service: UserService = Depends(deps.get_user_service)):
    try:
        return await service.retrieve(user_id)
    except DataNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message)


@router.patch("/{user_id}", response_model=UserRead,
              summary="Update a user",
              description="Overwrite name parts and phone number; blank or missing fields are left untouched.")
async def update_user_route(
    user_id: uuid.UUID,
    payload: UserUpdate,
    session: AsyncSession = Depends(deps.get_db),
    service: UserService = Depends(deps.get_user_service),
):
    try:
        user = await service.update(user_id, payload)
        await session.commit()
        return user
    except DataNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message)


@router.delete("/{user_id}", response_model=bool, summary="Delete a user",
               description="Returns whether the user is gone after the delete.")
async def delete_user_route(
    user_id: uuid.UUID,
    session: AsyncSession = Depends(deps.get_db),
    service: UserService = Depends(deps.get_user_service),
):
    try:
        deleted = await service.delete(user_id)
        await session.commit()
        return deleted
    except DataNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message)
