from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from conduit.domain.users.entities import Profile, User


class RequestModel(BaseModel):
    # Unknown keys are kept so the decoder can reject them when configured to.
    model_config = ConfigDict(extra="allow")


class NewUser(RequestModel):
    username: str = ""
    email: str = ""
    password: str = ""


class NewUserRequest(RequestModel):
    user: NewUser = Field(default_factory=NewUser)


class LoginUser(RequestModel):
    email: str = ""
    password: str = ""


class LoginUserRequest(RequestModel):
    user: LoginUser = Field(default_factory=LoginUser)


class UpdateUser(RequestModel):
    email: str | None = None
    token: str = ""
    username: str = ""
    bio: str | None = None
    image: str | None = None


class UpdateUserRequest(RequestModel):
    user: UpdateUser = Field(default_factory=UpdateUser)


class UserDTO(BaseModel):
    model_config = ConfigDict(validate_by_name=True)

    id: int = 0
    email: str = ""
    username: str = ""
    created_at: str = Field("", alias="createdAt")
    updated_at: str = Field("", alias="updatedAt")
    token: str | None = None
    bio: str | None = None
    image: str | None = None

    @classmethod
    def from_user(cls, user: User, token: str | None = None) -> UserDTO:
        return cls(
            id=user.id,
            email=user.email,
            username=user.username,
            created_at=user.created_at,
            updated_at=user.updated_at,
            token=token,
            bio=user.bio,
            image=user.image,
        )

    def to_response(self) -> dict[str, Any]:
        payload = self.model_dump(by_alias=True)
        if not self.token:
            payload.pop("token")
        return {"user": payload}


class ProfileDTO(BaseModel):
    username: str
    bio: str | None = None
    image: str | None = None
    following: bool = False

    @classmethod
    def from_profile(cls, profile: Profile) -> ProfileDTO:
        return cls(
            username=profile.username,
            bio=profile.bio,
            image=profile.image,
            following=profile.following,
        )

    def to_response(self) -> dict[str, Any]:
        return {"profile": self.model_dump()}
