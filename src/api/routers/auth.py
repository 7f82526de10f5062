from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from src.api.core.database import get_db
from src.api.repositories.users import UserRepository
from src.api.schemas.user import UserRegister, UserLogin, UserResponse

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_data: UserRegister,
    db: AsyncSession = Depends(get_db)
):
    """
    Register a new user

    - email must be unique (409 otherwise)
    - phone, when given, must be unique (409 otherwise)
    - password must be at least 8 characters
    """
    return await UserRepository(db).register(user_data)


@router.post("/login", response_model=Optional[UserResponse])
async def login_user(
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """
    Check a user's credentials

    Returns the user, or null when the email is unknown, the account is
    inactive or the password does not match.
    """
    return await UserRepository(db).login(credentials)
