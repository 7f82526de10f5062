from typing import List
import logging

from sqlalchemy import select

from src.api.core.database import commit_and_refresh
from src.api.models.finance import FinancialRecord
from src.api.models.partnership import Partnership
from src.api.repositories.base import BaseRepository
from src.api.schemas.finance import FinancialRecordCreate

logger = logging.getLogger(__name__)


class FinancialRecordRepository(BaseRepository):
    model = FinancialRecord
    label = "Financial record"

    async def create(self, data: FinancialRecordCreate) -> FinancialRecord:
        await self._require(Partnership, data.partnership_id, "Partnership")

        record = FinancialRecord(
            partnership_id=data.partnership_id,
            expense_type=data.expense_type,
            amount=data.amount,
            description=data.description,
            transaction_date=data.transaction_date,
            receipt_url=data.receipt_url or None
        )
        record = await commit_and_refresh(self.session, record)
        logger.info(f"Recorded {record.expense_type} expense {record.id} for partnership {record.partnership_id}")
        return record

    async def list_for_partnership(self, partnership_id: int) -> List[FinancialRecord]:
        result = await self.session.execute(
            select(FinancialRecord)
            .where(FinancialRecord.partnership_id == partnership_id)
            .order_by(FinancialRecord.transaction_date.desc(), FinancialRecord.id.desc())
        )
        return list(result.scalars().all())
