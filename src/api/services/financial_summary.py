"""
Financial aggregation for partnerships

Expense totals come from the partnership's financial records; revenue is a
planning projection from total plot area, the configured yield per hectare
and the configured market price per ton. All arithmetic is Decimal.
"""

from decimal import Decimal
from typing import Dict, Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.config import settings
from src.api.models.finance import FinancialRecord
from src.api.repositories.farm_plots import FarmPlotRepository
from src.api.repositories.financial_records import FinancialRecordRepository
from src.api.repositories.partnerships import PartnershipRepository
from src.api.schemas.finance import ExpenseSummary, FinancialSummary
from src.utils.logger import get_logger

logger = get_logger(__name__)

ZERO = Decimal("0")


def summarize_expenses(records: Iterable[FinancialRecord]) -> ExpenseSummary:
    """
    Group expenses by type and total them

    Only expense types that have at least one record appear in the
    breakdown; with no records the total is 0 and the breakdown is empty.
    """
    breakdown: Dict[str, Decimal] = {}
    for record in records:
        breakdown[record.expense_type] = breakdown.get(record.expense_type, ZERO) + record.amount

    total = sum(breakdown.values(), ZERO)
    return ExpenseSummary(total_expenses=total, expense_breakdown=breakdown)


def project_revenue(
    total_area: Decimal,
    estimated_yield: Decimal,
    market_price: Decimal
) -> Decimal:
    """Projected revenue = hectares x tons per hectare x price per ton"""
    return total_area * estimated_yield * market_price


class FinancialSummaryService:
    """Read-only financial summary for one partnership"""

    def __init__(
        self,
        session: AsyncSession,
        estimated_yield: Optional[Decimal] = None,
        market_price: Optional[Decimal] = None
    ):
        self.partnerships = PartnershipRepository(session)
        self.records = FinancialRecordRepository(session)
        self.plots = FarmPlotRepository(session)
        self.estimated_yield = estimated_yield if estimated_yield is not None else settings.ESTIMATED_YIELD_TONS_PER_HECTARE
        self.market_price = market_price if market_price is not None else settings.MARKET_PRICE_PER_TON

    async def total_area(self, partnership_id: int) -> Decimal:
        plots = await self.plots.list_for_partnership(partnership_id)
        return sum((plot.area_hectares for plot in plots), ZERO)

    async def compute(self, partnership_id: int) -> FinancialSummary:
        """
        Compute the financial summary of a partnership

        Raises:
            NotFoundError: If the partnership does not exist
        """
        await self.partnerships.require(partnership_id)

        expenses = summarize_expenses(await self.records.list_for_partnership(partnership_id))
        total_area = await self.total_area(partnership_id)

        summary = FinancialSummary(
            total_expenses=expenses.total_expenses,
            expense_breakdown=expenses.expense_breakdown,
            estimated_yield=self.estimated_yield,
            current_market_price=self.market_price,
            projected_revenue=project_revenue(total_area, self.estimated_yield, self.market_price)
        )
        logger.debug(
            f"Partnership {partnership_id}: expenses={summary.total_expenses} "
            f"area={total_area}ha projected_revenue={summary.projected_revenue}"
        )
        return summary
