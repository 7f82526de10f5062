"""
Tests for expense aggregation and revenue projection
Run with: pytest tests/services/test_financial_summary.py -v
"""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.api.core.exceptions import NotFoundError
from src.api.repositories import FinancialRecordRepository
from src.api.schemas.finance import FinancialRecordCreate
from src.api.services.financial_summary import (
    FinancialSummaryService,
    project_revenue,
    summarize_expenses,
)
from tests.helpers import seed_partnership, seed_plot, seed_user


def expense(expense_type, amount):
    return SimpleNamespace(expense_type=expense_type, amount=Decimal(amount))


class TestSummarizeExpenses:
    """Test grouping and totals without a database"""

    def test_groups_by_type(self):
        summary = summarize_expenses([
            expense("seeds", "5000"),
            expense("fertilizer", "3000"),
            expense("seeds", "2000"),
        ])
        assert summary.expense_breakdown == {"seeds": Decimal("7000"), "fertilizer": Decimal("3000")}
        assert summary.total_expenses == Decimal("10000")

    def test_no_records(self):
        summary = summarize_expenses([])
        assert summary.total_expenses == 0
        assert summary.expense_breakdown == {}

    def test_exact_decimal_sum(self):
        summary = summarize_expenses([expense("labor", "0.10")] * 3)
        assert summary.total_expenses == Decimal("0.30")

    def test_total_matches_breakdown(self):
        summary = summarize_expenses([
            expense("labor", "120.25"),
            expense("equipment", "4300.00"),
            expense("land_rental", "900.75"),
            expense("labor", "80.00"),
        ])
        assert summary.total_expenses == sum(summary.expense_breakdown.values())
        assert set(summary.expense_breakdown) == {"labor", "equipment", "land_rental"}


class TestProjectRevenue:
    def test_formula(self):
        assert project_revenue(Decimal("4"), Decimal("5"), Decimal("12000")) == Decimal("240000")

    def test_no_area(self):
        assert project_revenue(Decimal("0"), Decimal("5"), Decimal("12000")) == 0


@pytest.mark.anyio
class TestFinancialSummaryService:
    """Test the service against a real session"""

    async def test_projection_uses_total_area(self, session):
        partner = await seed_user(session)
        partnership = await seed_partnership(session, partner.id)
        await seed_plot(session, partnership.id, area="2.5")
        await seed_plot(session, partnership.id, area="1.5", name="South Field")

        summary = await FinancialSummaryService(session).compute(partnership.id)
        assert summary.estimated_yield == Decimal("5")
        assert summary.current_market_price == Decimal("12000")
        assert summary.projected_revenue == Decimal("240000")

    async def test_custom_yield_and_price(self, session):
        partner = await seed_user(session)
        partnership = await seed_partnership(session, partner.id)
        await seed_plot(session, partnership.id, area="2")

        service = FinancialSummaryService(session, estimated_yield=Decimal("4.5"), market_price=Decimal("10000"))
        summary = await service.compute(partnership.id)
        assert summary.projected_revenue == Decimal("90000")

    async def test_only_own_records_counted(self, session):
        partner = await seed_user(session)
        mine = await seed_partnership(session, partner.id)
        theirs = await seed_partnership(session, partner.id)

        records = FinancialRecordRepository(session)
        for partnership_id, amount in [(mine.id, "700"), (theirs.id, "9999"), (mine.id, "300")]:
            await records.create(FinancialRecordCreate(
                partnership_id=partnership_id,
                expense_type="labor",
                amount=Decimal(amount),
                description="wages",
                transaction_date=datetime(2024, 5, 1, 8, 0),
            ))

        summary = await FinancialSummaryService(session).compute(mine.id)
        assert summary.total_expenses == Decimal("1000")
        assert summary.expense_breakdown == {"labor": Decimal("1000")}

    async def test_idempotent(self, session):
        partner = await seed_user(session)
        partnership = await seed_partnership(session, partner.id)
        await seed_plot(session, partnership.id, area="3.25")

        service = FinancialSummaryService(session)
        assert await service.compute(partnership.id) == await service.compute(partnership.id)

    async def test_unknown_partnership(self, session):
        with pytest.raises(NotFoundError):
            await FinancialSummaryService(session).compute(31415)
