from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.database import get_db
from src.api.repositories.community_events import CommunityEventRepository
from src.api.schemas.community import CommunityEventCreate, CommunityEventResponse

router = APIRouter()


@router.post("/", response_model=CommunityEventResponse, status_code=status.HTTP_201_CREATED)
async def create_community_event(
    event_data: CommunityEventCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a community event

    New events are active with no participants yet.
    """
    return await CommunityEventRepository(db).create(event_data)


@router.get("/", response_model=list[CommunityEventResponse])
async def get_community_events(db: AsyncSession = Depends(get_db)):
    """
    List active community events, latest event date first
    """
    return await CommunityEventRepository(db).list_active()
