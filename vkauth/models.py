from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    app_id: str = Field(..., description="VK application ID")
    app_secret: str = Field(..., description="VK application secret key")
    redirect_url: str = Field(..., description="Redirect URI registered for the application")
    scope: str = Field(..., description="Comma-separated list of requested permissions")


class AccessToken(BaseModel):
    access_token: str = Field(..., description="VK access token")
    email: str | None = Field(None, description="User email, present when the email scope was granted")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user_id: int


class Gender(str, Enum):
    UNKNOWN = "unknown"
    MALE = "male"
    FEMALE = "female"


class UserProfile(BaseModel):
    id: int
    name: str
    photo: str | None = None
    gender: Gender = Gender.UNKNOWN
    birthday: date | None = None


class VKUser(BaseModel):
    """A single record of the users.get response."""

    id: int = Field(..., validation_alias=AliasChoices("id", "uid"))
    first_name: str = ""
    last_name: str = ""
    photo_max: str | None = None
    sex: int = 0
    bdate: str | None = None


class UsersResponse(BaseModel):
    response: list[VKUser] = Field(default_factory=list)
