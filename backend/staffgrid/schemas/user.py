"""User Schemas — account creation and public user view.

Invariants:
    - UserCreate.username: 3-150 chars, stripped
    - UserResponse never carries the password
"""

from pydantic import BaseModel, Field, field_validator

from staffgrid.core.entities import User


class UserCreate(BaseModel):
    """User creation — username and opaque credential."""
    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=1, max_length=255)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v


class UserResponse(BaseModel):
    """User as returned by the API."""
    id: str
    username: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id, username=user.username)
