"""
Shared fixtures: an app over a fresh SQLite file database per test
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

import isd.models  # noqa: F401
from isd.config import Settings
from isd.database import Base, sync_url
from isd.main import create_app


class FakeClock:
    """Settable UTC clock for token expiry"""

    def __init__(self):
        self.now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def database_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'isd.db'}"
    engine = create_engine(sync_url(url))
    Base.metadata.create_all(engine)
    engine.dispose()
    return url


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(database_url, clock):
    settings = Settings(DATABASE_URL=database_url, APP_ENV="test", LOG_LEVEL="WARNING")
    app = create_app(settings, clock=clock)
    with TestClient(app) as test_client:
        yield test_client


CLUB = {
    "name": "Jakarta Fencing Club",
    "country": "Indonesia",
    "province": "DKI Jakarta",
    "district": "Jakarta Selatan",
    "establish_date": "2010-05-17",
    "logo": "https://cdn.example.com/logos/jfc.png",
    "address": "Jl. Sudirman 1",
    "pic": "Budi",
    "email_pic": "budi@example.com",
    "discipline": "fencing",
    "phone_number": "+62211234567",
    "active": "TRUE",
}


@pytest.fixture
def club_payload():
    return dict(CLUB)


@pytest.fixture
def club_id(client, club_payload):
    response = client.post("/v1/club", json=club_payload)
    assert response.status_code == 201
    return response.json()["id"]
