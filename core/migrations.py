"""
Versioned schema migrations for the PostgreSQL note store.

Each migration is applied at most once and recorded in schema_migrations
together with its statements, inside one transaction. Statements are
written to be idempotent as well (IF NOT EXISTS) so a database created by
an older release, or a concurrent startup, never aborts initialization.
"""

import logging
from dataclasses import dataclass, field

import psycopg2

from clients.postgres_client import PostgresClient
from core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Migration:
    """One schema step."""

    version: int
    name: str
    statements: tuple[str, ...]


@dataclass
class MigrationReport:
    """Outcome of an initialization run."""

    from_version: int
    to_version: int
    applied: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.applied)


MIGRATIONS: tuple[Migration, ...] = (
    Migration(
        version=1,
        name="create_notes",
        statements=(
            """
            CREATE TABLE IF NOT EXISTS notes (
                id BIGSERIAL PRIMARY KEY,
                title TEXT NOT NULL,
                content TEXT NOT NULL DEFAULT '',
                created_at TIMESTAMPTZ NOT NULL DEFAULT now()
            )
            """,
            """
            CREATE INDEX IF NOT EXISTS notes_created_at_idx
            ON notes (created_at DESC, id DESC)
            """,
        ),
    ),
    Migration(
        version=2,
        name="add_mood",
        statements=(
            "ALTER TABLE notes ADD COLUMN IF NOT EXISTS mood TEXT",
        ),
    ),
    Migration(
        version=3,
        name="add_background_color",
        statements=(
            "ALTER TABLE notes ADD COLUMN IF NOT EXISTS background_color TEXT NOT NULL DEFAULT '#ffffff'",
        ),
    ),
)

LATEST_VERSION = MIGRATIONS[-1].version

_CREATE_VERSION_TABLE = """
    CREATE TABLE IF NOT EXISTS schema_migrations (
        version INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        applied_at TIMESTAMPTZ NOT NULL DEFAULT now()
    )
"""

_RECORD_VERSION = """
    INSERT INTO schema_migrations (version, name)
    VALUES (%s, %s)
    ON CONFLICT (version) DO NOTHING
"""


def current_version(db: PostgresClient) -> int:
    """Highest applied migration version, 0 for an empty database."""
    return db.execute_scalar("SELECT COALESCE(MAX(version), 0) FROM schema_migrations") or 0


def migrate(db: PostgresClient, migrations: tuple[Migration, ...] = MIGRATIONS) -> MigrationReport:
    """
    Apply pending migrations in version order.

    Returns:
        MigrationReport describing what ran

    Raises:
        StoreError: a migration failed; earlier migrations stay applied
    """
    try:
        db.execute(_CREATE_VERSION_TABLE)
        start = current_version(db)
    except psycopg2.Error as e:
        logger.error(f"Could not read schema version: {e}")
        raise StoreError("Database schema could not be initialized") from e

    report = MigrationReport(from_version=start, to_version=start)

    for migration in sorted(migrations, key=lambda m: m.version):
        if migration.version <= start:
            continue

        record = (_RECORD_VERSION, (migration.version, migration.name))
        try:
            db.execute_script([*migration.statements, record])
        except psycopg2.Error as e:
            logger.error(f"Migration {migration.version} ({migration.name}) failed: {e}")
            raise StoreError("Database schema could not be initialized") from e

        logger.info(f"Applied migration {migration.version} ({migration.name})")
        report.applied.append(migration.name)
        report.to_version = migration.version

    return report
