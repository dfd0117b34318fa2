from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Engine


TIMESTAMPED_TABLES = ("users", "contractors")

UPDATED_AT_FUNCTION = """
CREATE OR REPLACE FUNCTION update_updated_at_column()
RETURNS TRIGGER AS $$
BEGIN
    -- ORM updates stamp updated_at themselves; only fill it in for raw SQL updates.
    IF NEW.updated_at IS NOT DISTINCT FROM OLD.updated_at THEN
        NEW.updated_at = TIMEZONE('utc', CLOCK_TIMESTAMP());
    END IF;
    RETURN NEW;
END;
$$ language 'plpgsql'
"""


def _trigger_exists(conn, trigger_name: str) -> bool:
    row = conn.execute(
        text("SELECT 1 FROM pg_trigger WHERE tgname = :name"),
        {"name": trigger_name},
    ).fetchone()
    return row is not None


def _install_updated_at_trigger(conn, table_name: str) -> None:
    trigger_name = f"update_{table_name}_updated_at"
    if _trigger_exists(conn, trigger_name):
        return
    conn.execute(
        text(
            f"""
            CREATE TRIGGER {trigger_name}
                BEFORE UPDATE ON {table_name}
                FOR EACH ROW
                EXECUTE FUNCTION update_updated_at_column()
            """
        )
    )


def run_runtime_migrations(engine: Engine) -> None:
    # SQLite relies on the ORM-side onupdate for updated_at.
    if engine.dialect.name != "postgresql":
        return

    with engine.begin() as conn:
        conn.execute(text(UPDATED_AT_FUNCTION))
        for table_name in TIMESTAMPED_TABLES:
            _install_updated_at_trigger(conn, table_name)
