# alembic/env.py
from logging.config import fileConfig

from sqlalchemy import create_engine

from alembic import context

from auction_server.core.config import load_settings
from auction_server.database import Base
from auction_server import models  # noqa: F401  (registers the tables)

# Alembic Config object, gives access to the values in alembic.ini.
config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

DATABASE_URL = load_settings().database_url


def sync_url(url: str) -> str:
    """Alembic runs synchronously, so the async driver suffix is dropped."""
    for async_driver in ("+asyncpg", "+aiosqlite"):
        if async_driver in url:
            return url.replace(async_driver, "")
    return url


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    Emits the SQL to the script output instead of executing it against a
    database connection.
    """
    context.configure(
        url=sync_url(DATABASE_URL),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = create_engine(sync_url(DATABASE_URL))

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
