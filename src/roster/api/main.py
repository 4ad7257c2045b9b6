from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from roster.core.config import get_settings
from roster.core.logging import configure_logging
from roster.core.pagination import (
    PAGE_NUMBER_HEADER,
    PAGE_SIZE_HEADER,
    TOTAL_COUNT_HEADER,
    TOTAL_PAGES_HEADER,
)
from roster.api.routers import (
    auth,
    health,
    users,
)

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name)

if settings.enable_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        # pagination totals must be readable from browsers
        expose_headers=[TOTAL_COUNT_HEADER, TOTAL_PAGES_HEADER, PAGE_NUMBER_HEADER, PAGE_SIZE_HEADER],
    )

def _include(router):
    app.include_router(router, prefix=settings.api_prefix)

_include(health.router)
_include(users.router)
_include(auth.router)

@app.get("/")
async def root():
    return {"service": settings.app_name, "status": "ok"}
