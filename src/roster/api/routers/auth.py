from fastapi import APIRouter, Depends, HTTPException, Response, status
from roster.api import deps
from roster.core.errors import InvalidCredentialsError
from roster.schemas.user import UserAuth
from roster.services.user import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/", status_code=status.HTTP_204_NO_CONTENT, summary="Check credentials",
             description="Succeeds with 204 when the email/password pair matches a stored user.")
async def authenticate_route(payload: UserAuth, service: UserService = Depends(deps.get_user_service)):
    try:
        await service.authenticate(payload)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
