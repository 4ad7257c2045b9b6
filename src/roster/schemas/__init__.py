from .filter import DateFilter, UserFilter, UserNameFuzzyFilter
from .user import UserAuth, UserCreate, UserRead, UserUpdate

__all__ = [
    "DateFilter",
    "UserFilter",
    "UserNameFuzzyFilter",
    "UserAuth",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
