"""
kittens/models.py -- Domain dataclass for kitten records.

Pure data container with zero logic. Ownership checks live in the route layer
(api/routes/kittens.py); persistence lives in kittens/store.py.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Kitten:
    """A kitten owned by exactly one user.

    owner_id is the id of the User who created it. Only that user may read
    or delete the record.

    id is None before the record is written to the database.
    """

    name: str
    age: int
    color: str
    owner_id: int
    id: int | None = None
    created_at: str = ""  # ISO 8601, set by store on insert
