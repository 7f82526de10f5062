from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.database import get_db
from src.api.repositories.insurance_policies import InsurancePolicyRepository
from src.api.schemas.finance import InsurancePolicyCreate, InsurancePolicyResponse

router = APIRouter()


@router.post("/", response_model=InsurancePolicyResponse, status_code=status.HTTP_201_CREATED)
async def create_insurance_policy(
    policy_data: InsurancePolicyCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create an insurance policy for a partnership

    Policy numbers are unique (409 on reuse).
    """
    return await InsurancePolicyRepository(db).create(policy_data)


@router.get("/partnership/{partnership_id}", response_model=list[InsurancePolicyResponse])
async def list_insurance_policies(
    partnership_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    List the insurance policies of a partnership, latest start date first
    """
    return await InsurancePolicyRepository(db).list_for_partnership(partnership_id)
