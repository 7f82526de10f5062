"""Payload builders and seeders shared by the test modules"""

from datetime import date, datetime
from decimal import Decimal
from itertools import count

from src.api.repositories import (
    FarmPlotRepository,
    PartnershipRepository,
    UserRepository,
)
from src.api.schemas.farm import FarmPlotCreate
from src.api.schemas.partnership import PartnershipCreate
from src.api.schemas.user import UserRegister

API = "/api/v1"
PASSWORD = "harvest-2024"

_seq = count(1)


def user_payload(role="partner", **overrides):
    n = next(_seq)
    payload = {
        "email": f"{role}{n}@example.com",
        "password": PASSWORD,
        "full_name": f"{role.title()} {n}",
        "role": role,
    }
    payload.update(overrides)
    return payload


def partnership_payload(partner_id, **overrides):
    payload = {
        "partner_id": partner_id,
        "investment_amount": "50000.00",
        "start_date": "2024-01-01",
        "end_date": "2024-12-31",
        "estimated_return": "65000.00",
    }
    payload.update(overrides)
    return payload


def plot_payload(partnership_id, **overrides):
    payload = {
        "partnership_id": partnership_id,
        "plot_name": "North Field",
        "location_coordinates": '{"lat": 15.48, "lng": 120.97}',
        "area_hectares": "2.5",
        "soil_type": "loam",
    }
    payload.update(overrides)
    return payload


def register(client, role="partner", **overrides):
    response = client.post(f"{API}/auth/register", json=user_payload(role, **overrides))
    assert response.status_code == 201, response.text
    return response.json()


def create_partnership(client, partner_id, **overrides):
    response = client.post(f"{API}/partnerships/", json=partnership_payload(partner_id, **overrides))
    assert response.status_code == 201, response.text
    return response.json()


def create_plot(client, partnership_id, **overrides):
    response = client.post(f"{API}/farm-plots/", json=plot_payload(partnership_id, **overrides))
    assert response.status_code == 201, response.text
    return response.json()


async def seed_user(session, role="partner", **overrides):
    return await UserRepository(session).register(UserRegister(**user_payload(role, **overrides)))


async def seed_partnership(session, partner_id):
    return await PartnershipRepository(session).create(PartnershipCreate(
        partner_id=partner_id,
        investment_amount=Decimal("50000.00"),
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        estimated_return=Decimal("65000.00"),
    ))


async def seed_plot(session, partnership_id, area="2.5", name="North Field"):
    return await FarmPlotRepository(session).create(FarmPlotCreate(
        partnership_id=partnership_id,
        plot_name=name,
        location_coordinates='{"lat": 15.48, "lng": 120.97}',
        area_hectares=Decimal(area),
    ))


def at(day, hour=8):
    """A fixed timestamp in June 2024"""
    return datetime(2024, 6, day, hour, 0, 0)
