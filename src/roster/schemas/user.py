import uuid
from datetime import datetime
from pydantic import BaseModel, Field, field_validator, validate_email
from typing import Optional
from roster.models.user import Role
from .base import ORMBase

class UserCreate(BaseModel):
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: str
    role: Role = Role.MEMBER
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        # Reject malformed addresses but store exactly what was typed;
        # lookups compare case-insensitively.
        value = value.strip()
        validate_email(value)
        return value


class UserUpdate(BaseModel):
    # Fields that are missing or blank leave the stored value untouched.
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None


class UserRead(ORMBase):
    id: uuid.UUID
    name: str
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: str
    role: Role
    updated: Optional[datetime] = None


class UserAuth(BaseModel):
    email: str
    password: str
