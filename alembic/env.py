"""Alembic environment for the users table.

Migrations are hand-written SQL (see versions/), so there is no metadata to
autogenerate from. Online runs reuse the service's own engine factory so
migrations connect with the same PG_* settings as the running app.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from config.settings import settings
from src.uc_common.database import create_engine

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def _configure(**kwargs) -> None:  # type: ignore[no-untyped-def]
    context.configure(target_metadata=None, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def migrate_offline() -> None:
    """Emit the users DDL as SQL text (alembic upgrade --sql)."""
    _configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )


def _migrate_on(connection: Connection) -> None:
    _configure(connection=connection)


async def migrate_online() -> None:
    engine = create_engine(settings)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate_on)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    migrate_offline()
else:
    asyncio.run(migrate_online())
