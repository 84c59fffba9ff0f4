"""
Alembic Migration Environment
==============================

What:  Runs the ucsb_api migrations against the configured database.
How:   The URL comes from ucsb_api settings (DATABASE_URL), never from
       alembic.ini. Online runs go through an async engine and
       connection.run_sync(). SQLite gets batch mode so ALTERs work there.

Usage:
    cd backend && alembic upgrade head
    cd backend && alembic revision --autogenerate -m "add column"
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

import ucsb_api.models  # noqa: F401  (populates Base.metadata)
from ucsb_api.config import settings
from ucsb_api.database import Base

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)

DATABASE_URL = settings.database_url
IS_SQLITE = DATABASE_URL.startswith("sqlite")


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        render_as_batch=IS_SQLITE,
        **kwargs,
    )


def run_offline() -> None:
    """`alembic upgrade head --sql`: print the DDL instead of executing it."""
    _configure(url=DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_online() -> None:
    engine = create_async_engine(DATABASE_URL, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
