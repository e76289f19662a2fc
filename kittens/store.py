"""
kittens/store.py -- SQLAlchemy-backed persistence layer for kitten records.

Uses SQLAlchemy Core (not ORM) so the dataclass in kittens/models.py remains
the authoritative domain representation. Swapping SQLite for PostgreSQL is a
connection string change.

Pattern: Repository + Data Mapper. KittenStore is the repository; _row_to_kitten
is the mapper. Route handlers never touch SQL directly.

The kittens table is registered on auth.store.metadata so the owner_id foreign
key to users.id resolves within one schema.

Security: all queries use bound parameters. No f-strings in SQL.

Usage:
    store = KittenStore()                               # DATABASE_URL default
    store = KittenStore("postgresql://user:pw@host/db") # PostgreSQL
    kitten_id = store.create_kitten(kitten)
    kitten = store.get_kitten(kitten_id)
    store.delete_kitten(kitten_id, owner_id=kitten.owner_id)
    store.close()
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.engine import Engine

from auth.store import make_engine, metadata
from core.config import get_settings
from kittens.models import Kitten

logger = logging.getLogger("cyberkittens.kittens")

# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

_kittens = Table(
    "kittens",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("age", Integer, nullable=False),
    Column("color", String(100), nullable=False),
    Column("owner_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("created_at", String(32), nullable=False),
)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class KittenStore:
    """Repository for Kitten entities."""

    def __init__(self, db_url: str | None = None) -> None:
        self.engine: Engine = make_engine(db_url or get_settings().database_url)
        metadata.create_all(self.engine)

    def create_kitten(self, kitten: Kitten) -> int:
        """Insert a kitten and return its assigned ID.

        Raises sqlalchemy.exc.IntegrityError if owner_id does not reference an
        existing user.
        """
        with self.engine.connect() as conn:
            result = conn.execute(
                _kittens.insert().values(
                    name=kitten.name,
                    age=kitten.age,
                    color=kitten.color,
                    owner_id=kitten.owner_id,
                    created_at=_now_iso(),
                )
            )
            conn.commit()
            return result.inserted_primary_key[0]

    def get_kitten(self, kitten_id: int) -> Kitten | None:
        """Return the kitten with this ID, or None. No ownership filter."""
        with self.engine.connect() as conn:
            row = conn.execute(_kittens.select().where(_kittens.c.id == kitten_id)).fetchone()
        return _row_to_kitten(row) if row is not None else None

    def list_kittens(self, owner_id: int) -> list[Kitten]:
        """Return every kitten owned by owner_id, oldest first."""
        with self.engine.connect() as conn:
            rows = conn.execute(
                _kittens.select().where(_kittens.c.owner_id == owner_id).order_by(_kittens.c.id)
            ).fetchall()
        return [_row_to_kitten(r) for r in rows]

    def delete_kitten(self, kitten_id: int, owner_id: int) -> bool:
        """Delete a kitten. owner_id is part of the WHERE clause.

        A caller that passes the wrong owner deletes nothing, even if the
        route-level ownership check were bypassed.

        Returns True if a row was deleted, False if not found or wrong owner.
        """
        with self.engine.connect() as conn:
            result = conn.execute(
                _kittens.delete().where((_kittens.c.id == kitten_id) & (_kittens.c.owner_id == owner_id))
            )
            conn.commit()
        if result.rowcount > 0:
            logger.info("Deleted kitten %d (owner %d)", kitten_id, owner_id)
            return True
        return False

    def close(self) -> None:
        self.engine.dispose()


# ---------------------------------------------------------------------------
# Row mapper (Data Mapper pattern)
# ---------------------------------------------------------------------------


def _row_to_kitten(row) -> Kitten:
    return Kitten(
        id=row.id,
        name=row.name,
        age=row.age,
        color=row.color,
        owner_id=row.owner_id,
        created_at=row.created_at,
    )
