from typing import List
import logging

from sqlalchemy import select

from src.api.core.database import commit_and_refresh
from src.api.models.finance import InsurancePolicy
from src.api.models.partnership import Partnership
from src.api.repositories.base import BaseRepository
from src.api.schemas.finance import InsurancePolicyCreate

logger = logging.getLogger(__name__)


class InsurancePolicyRepository(BaseRepository):
    model = InsurancePolicy
    label = "Insurance policy"

    async def create(self, data: InsurancePolicyCreate) -> InsurancePolicy:
        """
        Register a policy for a partnership

        A reused policy number is rejected by the unique constraint and
        surfaces as ConflictError.
        """
        await self._require(Partnership, data.partnership_id, "Partnership")

        policy = InsurancePolicy(
            partnership_id=data.partnership_id,
            policy_number=data.policy_number,
            coverage_amount=data.coverage_amount,
            premium_amount=data.premium_amount,
            start_date=data.start_date,
            end_date=data.end_date,
            coverage_details=data.coverage_details,
            is_active=True
        )
        policy = await commit_and_refresh(self.session, policy)
        logger.info(f"Created insurance policy {policy.policy_number} for partnership {policy.partnership_id}")
        return policy

    async def list_for_partnership(self, partnership_id: int) -> List[InsurancePolicy]:
        result = await self.session.execute(
            select(InsurancePolicy)
            .where(InsurancePolicy.partnership_id == partnership_id)
            .order_by(InsurancePolicy.start_date.desc(), InsurancePolicy.id.desc())
        )
        return list(result.scalars().all())
