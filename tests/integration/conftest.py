from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("TIMEZONE", "America/Sao_Paulo")


@pytest.fixture(scope="session")
def app_instance():
    """FastAPI app; the lifespan isn't run, tests own the database."""
    from app.main import app  # type: ignore

    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory database for each test."""
    from tortoise import Tortoise, connections

    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={"app": ["app.models"]},
        use_tz=True,
        timezone="UTC",
    )
    await Tortoise.generate_schemas()
    yield
    await connections.close_all()


@pytest_asyncio.fixture
async def client(app_instance, db):
    """HTTP client bound to the ASGI app."""
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def fleet(db):
    """A vehicle, three destinations and a helper to log trips."""
    from app.models import Destination, Trip, Vehicle

    vehicle = await Vehicle.create(registration_number="MH12AB1234", make="Tata", model="Ace")
    destinations = {
        name: await Destination.create(name=name)
        for name in ("Pune Depot", "Mumbai Port", "Nashik Yard")
    }

    async def log_trip(
        start: datetime,
        distance: float,
        duration_hours: float = 2.0,
        stops=("Pune Depot",),
        start_km: float = 1000.0,
        trip_vehicle=None,
        **kwargs,
    ) -> Trip:
        return await Trip.create(
            vehicle=trip_vehicle or vehicle,
            trip_serial_number=kwargs.pop("trip_serial_number", f"T-{start:%m%d%H%M}"),
            trip_start_date=start,
            trip_end_date=start + timedelta(hours=duration_hours),
            start_km=start_km,
            end_km=start_km + distance,
            destinations=[str(destinations[name].id) for name in stops],
            **kwargs,
        )

    return {"vehicle": vehicle, "destinations": destinations, "log_trip": log_trip}


@pytest.fixture
def recent():
    """Start of a day well inside the default analysis window."""
    today = datetime.now(timezone.utc).replace(hour=8, minute=0, second=0, microsecond=0)
    return today - timedelta(days=5)
