from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from src.config.settings import get_settings
from src.infrastructure.db.metadata import metadata

config = context.config

if config.config_file_name:
    fileConfig(config.config_file_name)


def do_run_migrations(**options) -> None:
    context.configure(target_metadata=metadata, **options)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online(url: str) -> None:
    engine = create_async_engine(url, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(lambda conn: do_run_migrations(connection=conn))
    await engine.dispose()


url = get_settings().database_url
if context.is_offline_mode():
    do_run_migrations(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
else:
    asyncio.run(run_migrations_online(url))
