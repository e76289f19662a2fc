"""
api/routes/kittens.py -- Kitten CRUD routes.

Routes:
  GET    /kittens              -- list the caller's kittens
  POST   /kittens              -- create a kitten owned by the caller
  GET    /kittens/{kitten_id}  -- read one kitten (owner only)
  DELETE /kittens/{kitten_id}  -- delete one kitten (owner only)

Every route requires a Bearer token (router-level dependency).

Ownership:
  A kitten that exists but belongs to someone else is answered with 401
  "not_owner". A kitten that does not exist is answered with 404. The delete
  path also passes owner_id to the store, whose WHERE clause requires both
  id and owner to match.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response

from api.models import KittenCreate, KittenResponse
from auth.dependencies import get_current_user
from auth.models import User
from kittens.models import Kitten
from kittens.store import KittenStore

router = APIRouter(dependencies=[Depends(get_current_user)])

# Ids outside the signed 64-bit range cannot exist in the table and would
# overflow the SQLite driver, so they are rejected with 422 up front.
KittenId = Annotated[int, Path(ge=1, le=2**63 - 1)]


def _owned_kitten(store: KittenStore, kitten_id: int, user: User) -> Kitten:
    """Fetch a kitten and enforce the owner match. Raises 404 or 401."""
    kitten = store.get_kitten(kitten_id)
    if kitten is None:
        raise HTTPException(
            status_code=404,
            detail={"code": "not_found", "message": f"Kitten {kitten_id} not found."},
        )
    if kitten.owner_id != user.id:
        raise HTTPException(
            status_code=401,
            detail={"code": "not_owner", "message": "You do not own this kitten."},
        )
    return kitten


@router.get("/kittens", response_model=list[KittenResponse])
def list_kittens(request: Request, current_user: User = Depends(get_current_user)) -> list[KittenResponse]:
    """Return the caller's kittens, oldest first."""
    store: KittenStore = request.app.state.kitten_store
    return [KittenResponse.from_kitten(k) for k in store.list_kittens(current_user.id)]


@router.post("/kittens", response_model=KittenResponse, status_code=201)
def create_kitten(
    request: Request,
    body: KittenCreate,
    current_user: User = Depends(get_current_user),
) -> KittenResponse:
    """Create a kitten. The owner is always the authenticated caller."""
    store: KittenStore = request.app.state.kitten_store
    kitten_id = store.create_kitten(
        Kitten(name=body.name, age=body.age, color=body.color, owner_id=current_user.id)
    )
    return KittenResponse.from_kitten(store.get_kitten(kitten_id))


@router.get("/kittens/{kitten_id}", response_model=KittenResponse)
def get_kitten(
    request: Request,
    kitten_id: KittenId,
    current_user: User = Depends(get_current_user),
) -> KittenResponse:
    store: KittenStore = request.app.state.kitten_store
    return KittenResponse.from_kitten(_owned_kitten(store, kitten_id, current_user))


@router.delete("/kittens/{kitten_id}", status_code=204)
def delete_kitten(
    request: Request,
    kitten_id: KittenId,
    current_user: User = Depends(get_current_user),
) -> Response:
    """Delete a kitten the caller owns. Responds 204 with no body."""
    store: KittenStore = request.app.state.kitten_store
    _owned_kitten(store, kitten_id, current_user)
    if not store.delete_kitten(kitten_id, owner_id=current_user.id):
        # Deleted by a concurrent request between the check and the delete
        raise HTTPException(
            status_code=404,
            detail={"code": "not_found", "message": f"Kitten {kitten_id} not found."},
        )
    return Response(status_code=204)
