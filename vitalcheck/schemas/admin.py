from typing import Optional
from pydantic import BaseModel, ConfigDict


# Request schemas
class AdminLogin(BaseModel):
    email: str
    password: str


class AdminRegister(BaseModel):
    name: str
    email: str
    password: str


# Response schemas
class AdminPublic(BaseModel):
    """Public projection of an administrator; never carries the password hash."""
    id: int
    email: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    token: str
    admin: AdminPublic


class TokenPayload(BaseModel):
    adminId: Optional[int] = None
