from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime

from src.api.models.enums import UserRole


class UserRegister(BaseModel):
    """Schema for user registration"""
    email: EmailStr
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    password: str = Field(..., min_length=8, max_length=100)
    full_name: str = Field(..., min_length=1, max_length=200)
    role: UserRole


class UserLogin(BaseModel):
    """Schema for user login"""
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    """Schema for user response (the password hash is never serialized)"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    phone: Optional[str]
    full_name: str
    role: UserRole
    is_verified: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime
