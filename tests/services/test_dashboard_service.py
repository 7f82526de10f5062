"""
Tests for partner dashboard composition
Run with: pytest tests/services/test_dashboard_service.py -v
"""

from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from src.api.core.exceptions import NotFoundError
from src.api.models.farm import FarmActivity
from src.api.models.finance import FinancialRecord
from src.api.models.notification import Notification
from src.api.models.risk import RiskAlert
from src.api.services.dashboard import DashboardService
from tests.helpers import at, seed_partnership, seed_plot, seed_user

pytestmark = pytest.mark.anyio


async def test_no_partnership(session):
    partner = await seed_user(session)
    with pytest.raises(NotFoundError, match="Partnership not found for this partner"):
        await DashboardService(session).get_partner_dashboard(partner.id)


async def test_empty_sections(session):
    partner = await seed_user(session)
    partnership = await seed_partnership(session, partner.id)

    dashboard = await DashboardService(session).get_partner_dashboard(partner.id)
    assert dashboard.partnership.id == partnership.id
    assert dashboard.farm_plots == []
    assert dashboard.recent_activities == []
    assert dashboard.financial_summary.total_expenses == 0
    assert dashboard.financial_summary.expense_breakdown == {}
    assert dashboard.notifications == []
    assert dashboard.risk_alerts == []


async def test_recent_activities_limited_and_named(session):
    """Only the ten most recently logged activities, with creator names"""
    partner = await seed_user(session)
    farmer = await seed_user(session, role="farmer", full_name="Juan Dela Cruz")
    partnership = await seed_partnership(session, partner.id)
    north = await seed_plot(session, partnership.id)
    south = await seed_plot(session, partnership.id, name="South Field")

    for day in range(1, 13):
        session.add(FarmActivity(
            farm_plot_id=north.id if day % 2 else south.id,
            activity_type="watering",
            description=f"Day {day} irrigation",
            activity_date=at(day),
            created_by=farmer.id,
            created_at=at(day, hour=18),
        ))
    await session.commit()

    dashboard = await DashboardService(session).get_partner_dashboard(partner.id)
    assert [a.description for a in dashboard.recent_activities] == [f"Day {day} irrigation" for day in range(12, 2, -1)]
    assert {a.creator_name for a in dashboard.recent_activities} == {"Juan Dela Cruz"}


async def test_activities_of_other_partnerships_excluded(session):
    partner = await seed_user(session)
    farmer = await seed_user(session, role="farmer")
    mine = await seed_partnership(session, partner.id)
    other_partner = await seed_user(session)
    theirs = await seed_partnership(session, other_partner.id)
    my_plot = await seed_plot(session, mine.id)
    their_plot = await seed_plot(session, theirs.id)

    for plot in (my_plot, their_plot):
        session.add(FarmActivity(
            farm_plot_id=plot.id,
            activity_type="planting",
            description=f"Planting on plot {plot.id}",
            activity_date=at(2),
            created_by=farmer.id,
        ))
    await session.commit()

    dashboard = await DashboardService(session).get_partner_dashboard(partner.id)
    assert [a.farm_plot_id for a in dashboard.recent_activities] == [my_plot.id]
    assert [p.id for p in dashboard.farm_plots] == [my_plot.id]


async def test_notifications_limited(session):
    partner = await seed_user(session)
    await seed_partnership(session, partner.id)

    for n in range(25):
        session.add(Notification(
            user_id=partner.id,
            title=f"Update {n}",
            message="Progress report",
            notification_type="progress_update",
            created_at=datetime(2024, 6, 1, 0, n),
        ))
    await session.commit()

    dashboard = await DashboardService(session).get_partner_dashboard(partner.id)
    assert len(dashboard.notifications) == 20
    assert dashboard.notifications[0].title == "Update 24"
    assert dashboard.notifications[-1].title == "Update 5"


async def test_custom_limits(session):
    partner = await seed_user(session)
    await seed_partnership(session, partner.id)
    for n in range(5):
        session.add(Notification(
            user_id=partner.id,
            title=f"Update {n}",
            message="Progress report",
            notification_type="general",
        ))
    await session.commit()

    dashboard = await DashboardService(session, notifications_limit=2).get_partner_dashboard(partner.id)
    assert len(dashboard.notifications) == 2


async def test_expenses_and_risk_alerts(session):
    partner = await seed_user(session)
    partnership = await seed_partnership(session, partner.id)
    plot = await seed_plot(session, partnership.id)

    session.add_all([
        FinancialRecord(
            partnership_id=partnership.id,
            expense_type=expense_type,
            amount=Decimal(amount),
            description=expense_type,
            transaction_date=at(1),
        )
        for expense_type, amount in [("seeds", "5000"), ("fertilizer", "3000"), ("seeds", "2000")]
    ])
    session.add_all([
        RiskAlert(
            farm_plot_id=plot.id,
            risk_type="pest",
            severity_level=severity,
            title=f"Alert {day}",
            description="Brown planthopper sighting",
            alert_date=at(day),
            created_at=at(day),
        )
        for day, severity in [(3, 5), (9, 1), (6, 3)]
    ])
    await session.commit()

    dashboard = await DashboardService(session).get_partner_dashboard(partner.id)
    assert dashboard.financial_summary.expense_breakdown == {"seeds": Decimal("7000"), "fertilizer": Decimal("3000")}
    assert dashboard.financial_summary.total_expenses == Decimal("10000")
    # newest first, not ranked by severity
    assert [a.title for a in dashboard.risk_alerts] == ["Alert 9", "Alert 6", "Alert 3"]


async def test_resolve_partnership(session):
    partner = await seed_user(session)
    first = await seed_partnership(session, partner.id)
    second = await seed_partnership(session, partner.id)
    service = DashboardService(session)

    assert (await service.resolve_partnership(partner.id)).id == first.id
    assert (await service.resolve_partnership(partner.id, second.id)).id == second.id

    with pytest.raises(NotFoundError):
        await service.resolve_partnership(partner.id, second.id + 100)


async def test_failing_fetch_aborts(session):
    """No partial dashboard when one section cannot be loaded"""
    partner = await seed_user(session)
    await seed_partnership(session, partner.id)
    service = DashboardService(session)

    with patch.object(
        service.notifications,
        "list_for_user",
        AsyncMock(side_effect=RuntimeError("store unavailable"))
    ):
        with pytest.raises(RuntimeError, match="store unavailable"):
            await service.get_partner_dashboard(partner.id)
