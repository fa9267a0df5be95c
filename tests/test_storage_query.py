import pytest

from isd.config import Settings
from isd.database import create_database, sync_url
from isd.storage import build_in_clause
from isd.storage.base import redact


def test_build_in_clause():
    condition, params = build_in_clause("c.id", "club_id", ["a", "b", "c"])

    assert condition == "c.id IN (:club_id_0,:club_id_1,:club_id_2)"
    assert params == {"club_id_0": "a", "club_id_1": "b", "club_id_2": "c"}


def test_build_in_clause_single_value():
    assert build_in_clause("id", "account_id", ("x",)) == (
        "id IN (:account_id_0)",
        {"account_id_0": "x"},
    )


def test_build_in_clause_needs_values():
    with pytest.raises(ValueError):
        build_in_clause("id", "club_id", [])


def test_redact_hides_secrets():
    assert redact({"email": "a@b.c", "password": "pw", "token": "t"}) == {
        "email": "a@b.c",
        "password": "***",
        "token": "***",
    }
    assert redact(None) == {}


@pytest.mark.parametrize("url, expected", [
    ("postgresql://u:p@db/isd", "postgresql+psycopg2://u:p@db/isd"),
    ("postgres://u:p@db/isd", "postgresql+psycopg2://u:p@db/isd"),
    ("sqlite+aiosqlite:///./isd.db", "sqlite:///./isd.db"),
    ("sqlite:///./isd.db", "sqlite:///./isd.db"),
])
def test_sync_url(url, expected):
    assert sync_url(url) == expected


def test_postgres_pool_options():
    settings = Settings(
        DATABASE_URL="postgresql://u:p@db/isd",
        DB_MAX_CONNECTIONS=50,
        DB_CONN_MAX_LIFETIME=3600,
    )

    database = create_database(settings)

    assert database.options == {
        "min_size": 1,
        "max_size": 50,
        "max_inactive_connection_lifetime": 3600,
    }


def test_sqlite_has_no_pool_options():
    database = create_database(Settings(DATABASE_URL="sqlite:///./isd.db"))

    assert database.options == {}
