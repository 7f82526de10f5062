from typing import List
import logging

from sqlalchemy import select

from src.api.core.database import commit_and_refresh
from src.api.core.exceptions import InvalidRoleError
from src.api.models.partnership import Partnership
from src.api.models.user import User
from src.api.repositories.base import BaseRepository
from src.api.schemas.partnership import PartnershipCreate

logger = logging.getLogger(__name__)


class PartnershipRepository(BaseRepository):
    model = Partnership
    label = "Partnership"

    async def create(self, data: PartnershipCreate) -> Partnership:
        """
        Open a partnership for a partner-role user

        Starts at 0% progress in the "planning" phase with status "pending".
        """
        partner = await self._require(User, data.partner_id, "Partner")
        if partner.role != "partner":
            raise InvalidRoleError(f"User {partner.id} is not a partner (role: {partner.role})")

        partnership = Partnership(
            partner_id=data.partner_id,
            investment_amount=data.investment_amount,
            start_date=data.start_date,
            end_date=data.end_date,
            estimated_return=data.estimated_return,
            current_progress=0,
            current_phase="planning",
            status="pending"
        )
        partnership = await commit_and_refresh(self.session, partnership)
        logger.info(f"Created partnership {partnership.id} for partner {partner.id}")
        return partnership

    async def list_for_partner(self, partner_id: int) -> List[Partnership]:
        """Partnerships owned by a partner, oldest first"""
        result = await self.session.execute(
            select(Partnership)
            .where(Partnership.partner_id == partner_id)
            .order_by(Partnership.id)
        )
        return list(result.scalars().all())
