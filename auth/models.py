"""
auth/models.py -- Domain dataclass for the user entity.

Pattern: Data class (pure data container, zero logic). Mirrors kittens/models.py
-- dataclasses own domain shape; stores and routes do the work.

Layer rule: no imports from api/, web/, or kittens/.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A registered account. Owns zero or more kittens.

    hashed_password is the bcrypt hash; the plaintext is never stored.
    id is None before the record is written to the database.
    """

    username: str
    hashed_password: str
    id: int | None = None
    created_at: str | None = None
