"""Schemas for team members"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from taskboard.models.member import MemberRole


class MemberCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    role: MemberRole = MemberRole.MEMBER
    avatar_url: Optional[str] = Field(None, alias="avatarUrl")

    class Config:
        populate_by_name = True
        use_enum_values = True
        validate_default = True


class MemberUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    role: Optional[MemberRole] = None
    avatar_url: Optional[str] = Field(None, alias="avatarUrl")

    class Config:
        populate_by_name = True
        use_enum_values = True


class MemberResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str
    avatar_url: Optional[str] = Field(None, alias="avatarUrl")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
