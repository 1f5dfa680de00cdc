from __future__ import annotations

from typing import Annotated, Optional

from pydantic import ConfigDict, Field, StringConstraints

from ..common.schemas import RequestSchema
from ..core.enums import Role

# Passwords are taken verbatim; every other field is trimmed explicitly
Trimmed = Annotated[str, StringConstraints(strip_whitespace=True)]


class CredentialSchema(RequestSchema):
    model_config = ConfigDict(str_strip_whitespace=False)


class LoginRequest(CredentialSchema):
    username: Trimmed = Field(min_length=1)
    password: str = Field(min_length=1)


class UserCreate(CredentialSchema):
    username: Trimmed = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)
    name: Trimmed = Field(min_length=1, max_length=100)
    email: Trimmed = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    role: Role = Role.STAFF


class UserUpdate(UserCreate):
    # Blank or missing password keeps the current one
    password: Optional[str] = None
