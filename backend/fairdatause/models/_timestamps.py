from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class utc_now(FunctionElement):
    """Naive UTC timestamp evaluated by the database, whatever its TimeZone."""

    type = DateTime()
    inherit_cache = True


@compiles(utc_now)
def _utc_now_default(_element, _compiler, **_kw) -> str:
    # SQLite's CURRENT_TIMESTAMP is already UTC.
    return "CURRENT_TIMESTAMP"


@compiles(utc_now, "postgresql")
def _utc_now_postgresql(_element, _compiler, **_kw) -> str:
    return "TIMEZONE('utc', CURRENT_TIMESTAMP)"
