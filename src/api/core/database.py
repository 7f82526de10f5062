from typing import AsyncGenerator, TypeVar
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from src.api.config import settings
from src.api.core.exceptions import ConflictError

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    pool_pre_ping=True,
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

Base = declarative_base()

ModelT = TypeVar("ModelT")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency providing one session per request

    Usage:
        @router.get("/")
        async def handler(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with AsyncSessionLocal() as session:
        yield session


async def commit_and_refresh(session: AsyncSession, instance: ModelT) -> ModelT:
    """
    Persist a single new row and reload server-generated columns

    Uniqueness violations reported by the store are rolled back and
    re-raised as ConflictError with the driver message preserved.
    """
    session.add(instance)
    try:
        await session.commit()
    except IntegrityError as e:
        await session.rollback()
        logger.warning(f"Integrity violation on {type(instance).__name__}: {e.orig}")
        raise ConflictError(f"{type(instance).__name__} violates a uniqueness constraint: {e.orig}") from e
    await session.refresh(instance)
    return instance
