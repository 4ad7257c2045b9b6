# Re-export primary service layer entry points for convenience.
from .user import UserService
from .health import check_db

__all__ = [
    "UserService",
    "check_db",
]
