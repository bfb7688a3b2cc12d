# 📄 File: migrations/env.py
# 🧭 Purpose (Layman Explanation):
# Tells Alembic how to connect to the database and apply schema changes safely in
# development and production.
# 🧪 Purpose (Technical Summary):
# Alembic environment for the SoundCave schema. Loads Settings for the connection URL,
# imports every module's models into DatabaseBase.metadata, and runs migrations over
# an async engine.
# 🔗 Dependencies:
# - alembic (migration tool)
# - SQLAlchemy async engine (asyncpg / aiosqlite drivers)
# - soundcave.shared.config (settings and declarative base)
# 🔄 Connected Modules / Calls From:
# - alembic CLI commands (upgrade, downgrade, revision)

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from soundcave.shared.config.database import DatabaseBase
from soundcave.shared.config.settings import get_settings

# Import all module models to ensure they're included in autogenerate
from soundcave.modules.user_management.infrastructure.database.models import UserModel  # noqa: F401
from soundcave.modules.catalog.infrastructure.database.models import (  # noqa: F401
    AlbumModel,
    ArtistModel,
    MusicLikeModel,
    MusicModel,
)
from soundcave.modules.social.infrastructure.database.models import FollowModel  # noqa: F401
from soundcave.modules.playlists.infrastructure.database.models import (  # noqa: F401
    PlaylistModel,
    PlaylistSongModel,
)
from soundcave.modules.media.infrastructure.database.models import ImageModel  # noqa: F401

# This is the Alembic Config object
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Set the target metadata for 'autogenerate' support
target_metadata = DatabaseBase.metadata


def get_database_url() -> str:
    """Database URL from application settings (DATABASE_URL or DB_* parts)."""
    return get_settings().database_url


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Calls to context.execute() here emit the given string to the script output.
    """
    url = get_database_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        compare_server_default=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        # SQLite needs batch mode for ALTER TABLE
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Run migrations over an async engine."""
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_database_url()

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


# Determine which mode to run migrations in
if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
