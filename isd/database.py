"""
Database Connection and Model Base
Uses PostgreSQL with asyncpg (SQLite with aiosqlite in tests)
"""

import logging

from databases import Database
from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

from isd.config import Settings

logger = logging.getLogger(__name__)

# Metadata for models
metadata = MetaData()

# Base class for models
Base = declarative_base(metadata=metadata)


def create_database(settings: Settings) -> Database:
    """
    Build the async database handle for the configured URL

    The PostgreSQL pool is bounded by DB_MAX_CONNECTIONS. asyncpg has no
    maximum connection age, so DB_CONN_MAX_LIFETIME is applied as the idle
    timeout: a pooled connection unused for that many seconds is closed.
    """
    url = settings.DATABASE_URL

    if url.startswith(("postgresql", "postgres")):
        db_options = {
            "min_size": settings.DB_MIN_CONNECTIONS,
            "max_size": settings.DB_MAX_CONNECTIONS,
            "max_inactive_connection_lifetime": settings.DB_CONN_MAX_LIFETIME,
        }
        # Supabase pooler (pgbouncer) in transaction mode cannot use prepared statements
        if "pooler.supabase.com" in url:
            db_options["statement_cache_size"] = 0
    else:
        db_options = {}

    return Database(url, **db_options)


def sync_url(url: str) -> str:
    """Translate an async DATABASE_URL into one usable by a sync SQLAlchemy engine"""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg2://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg2://", 1)
    if url.startswith("sqlite+aiosqlite://"):
        return url.replace("sqlite+aiosqlite://", "sqlite://", 1)
    return url


async def connect_db(database: Database):
    """Connect to database on startup"""
    await database.connect()
    logger.info("Database connected")


async def disconnect_db(database: Database):
    """Disconnect from database on shutdown"""
    await database.disconnect()
    logger.info("Database disconnected")


async def enforce_foreign_keys(database: Database, connection):
    """SQLite checks foreign keys only when enabled on each connection"""
    if database.url.dialect == "sqlite":
        await connection.execute("PRAGMA foreign_keys = ON")
