from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.auth.models import User


class SUserRegister(BaseModel):
    # Presence is checked on registration, not by the schema
    name: Any = Field(default=None, description="Display name")
    email: Any = Field(default=None, description="Email, unique among users")
    password: Any = Field(default=None, description="Password")


class SUserAuth(BaseModel):
    email: Any = Field(default=None, description="Email")
    password: Any = Field(default=None, description="Password")


class SUserInfo(BaseModel):
    id: str = Field(description="User ID")
    name: Any = Field(description="Display name")
    email: Any = Field(description="Email")

    model_config = ConfigDict(from_attributes=True)


class SUserRegisterResponse(BaseModel):
    data: User


class SUserAccessResponse(BaseModel):
    msg: str
    data: SUserInfo
