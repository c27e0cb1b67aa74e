"""Pydantic schemas for Gett API payloads."""

from typing import Optional
from pydantic import BaseModel


class StorageInfo(BaseModel):
    """Storage quota of an account, in bytes."""
    used: Optional[int] = None
    limit: Optional[int] = None
    extra: Optional[int] = None


class UserInfo(BaseModel):
    """Account profile returned alongside the tokens."""
    userid: Optional[str] = None
    fullname: Optional[str] = None
    email: Optional[str] = None
    storage: Optional[StorageInfo] = None


class LoginRequest(BaseModel):
    """Request body for a credential login."""
    apikey: str
    email: str
    password: str


class RefreshLoginRequest(BaseModel):
    """Request body for a refresh token login."""
    refreshtoken: str


class LoginResponse(BaseModel):
    """Response model for /users/login."""
    accesstoken: str
    refreshtoken: Optional[str] = None
    expires: Optional[int] = None
    user: Optional[UserInfo] = None


class UploadInfo(BaseModel):
    """Upload endpoints attached to a freshly created file."""
    puturl: Optional[str] = None
    posturl: Optional[str] = None
