from typing import Any, Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.exceptions import NotFoundError


class BaseRepository:
    """
    Session-injected data access for one entity

    Subclasses set `model` and `label`; the session is owned by the caller
    (one per request via get_db, or one per test).
    """

    model: Type[Any]
    label: str = "Record"

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, entity_id: int) -> Optional[Any]:
        return await self.session.get(self.model, entity_id)

    async def require(self, entity_id: int) -> Any:
        """Fetch by id or raise NotFoundError naming the entity"""
        return await self._require(self.model, entity_id, self.label)

    async def _require(self, model: Type[Any], entity_id: int, label: str) -> Any:
        entity = await self.session.get(model, entity_id)
        if entity is None:
            raise NotFoundError(f"{label} with id {entity_id} not found")
        return entity
