"""
Hunter API routes.

Hunters are listed without their PINs. Login compares the submitted PIN
against the stored one as plain text; PINs are not hashed.

Date: 2026-10-19
"""

import secrets

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from logic.errors import StorageError
from logic.store import EntitySet, JsonStore
from server.deps import get_store

router = APIRouter()


class LoginRequest(BaseModel):
    """Request model for hunter login."""

    name: str
    pin: str


@router.get("/api/hunters")
def list_hunters(store: JsonStore = Depends(get_store)):
    """Get all hunters, without PINs."""
    try:
        hunters = store.load(EntitySet.HUNTERS)
    except StorageError:
        raise HTTPException(500, "Failed to load hunters")
    return [h.public() for h in hunters]


@router.post("/api/login")
def login(data: LoginRequest, store: JsonStore = Depends(get_store)):
    """Log a hunter in by name and PIN.

    Returns:
        The hunter's public record.

    Raises:
        HTTPException: 401 if no hunter matches the name and PIN.
    """
    try:
        hunters = store.load(EntitySet.HUNTERS)
    except StorageError:
        raise HTTPException(500, "Login failed")

    hunter = next(
        (
            h
            for h in hunters
            if h.name == data.name and secrets.compare_digest(h.pin.encode(), data.pin.encode())
        ),
        None,
    )
    if hunter is None:
        raise HTTPException(401, "Invalid credentials")

    return hunter.public()
