"""Console entry point: ``roster-api`` serves the app with uvicorn."""
from roster.core.config import get_settings
from roster.core.logging import configure_logging
import uvicorn


def main():  # pragma: no cover
    settings = get_settings()
    configure_logging(settings.log_level)
    # log_config=None keeps uvicorn on the JSON handler installed above
    uvicorn.run(
        "roster.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        log_config=None,
        reload=False,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
