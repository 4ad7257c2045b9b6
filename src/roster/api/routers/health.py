from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from roster.api import deps
from roster.services.health import check_db

router = APIRouter(prefix="/health", tags=["health"])

@router.get("/liveness")
async def liveness():
    """The process is up; says nothing about the database."""
    return {"status": "ok"}

@router.get("/readiness")
async def readiness(response: Response, session: AsyncSession = Depends(deps.get_db)):
    """Ready only when the user store answers."""
    if await check_db(session):
        return {"status": "ready", "database": "ok"}
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return {"status": "degraded", "database": "unavailable"}
