"""
Alembic Environment Configuration

Runs the schema migrations for the books table.

The database URL comes from the application settings (DB_HOST, DB_PORT,
DB_NAME, DB_USER, DB_PASSWORD, DB_CHARSET), not from alembic.ini.

COMMANDS:
- alembic upgrade head            # Create the books table
- alembic upgrade head --sql      # Print the DDL instead of running it
- alembic downgrade base          # Drop it again
- alembic current                 # Show current revision
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from catalog.config import get_settings
from catalog.database import metadata
import catalog.models  # noqa: F401 - registers the books table

settings = get_settings()

config = context.config

# Override sqlalchemy.url from settings (not alembic.ini).
# ConfigParser treats '%' as interpolation, so it has to be doubled.
database_url = settings.database_url.render_as_string(hide_password=False)
config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = metadata


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Generates SQL without connecting to the database:
        alembic upgrade head --sql > migration.sql
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """
    Run migrations against the configured database.

    A caller may hand in an open connection through
    config.attributes["connection"]; it is used instead of the settings URL.
    """
    connection = config.attributes.get("connection")
    if connection is not None:
        do_run_migrations(connection)
        return

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,  # Don't pool connections for migrations
    )

    with connectable.connect() as connection:
        do_run_migrations(connection)


def do_run_migrations(connection) -> None:
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
