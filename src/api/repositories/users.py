from typing import Optional
import logging

from sqlalchemy import select

from src.api.core.database import commit_and_refresh
from src.api.core.exceptions import ConflictError
from src.api.core.security import get_password_hash, verify_password
from src.api.models.user import User
from src.api.repositories.base import BaseRepository
from src.api.schemas.user import UserRegister, UserLogin

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    model = User
    label = "User"

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_phone(self, phone: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.phone == phone))
        return result.scalar_one_or_none()

    async def register(self, data: UserRegister) -> User:
        """
        Create a user account

        New accounts start unverified and active. Duplicate email or phone
        raises ConflictError before anything is written.
        """
        if await self.get_by_email(data.email) is not None:
            raise ConflictError("User with this email already exists")

        if data.phone and await self.get_by_phone(data.phone) is not None:
            raise ConflictError("User with this phone number already exists")

        user = User(
            email=data.email,
            phone=data.phone or None,
            password_hash=get_password_hash(data.password),
            full_name=data.full_name,
            role=data.role,
            is_verified=False,
            is_active=True
        )
        user = await commit_and_refresh(self.session, user)
        logger.info(f"Registered user {user.id} with role {user.role}")
        return user

    async def login(self, data: UserLogin) -> Optional[User]:
        """
        Check credentials

        Unknown email, inactive account and wrong password all return None
        so the caller cannot tell which one it was.
        """
        user = await self.get_by_email(data.email)
        if user is None or not user.is_active:
            return None

        if not verify_password(data.password, user.password_hash):
            return None

        return user
