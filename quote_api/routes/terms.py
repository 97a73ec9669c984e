# This project was developed with assistance from AI tools.
"""Financing term routes (list + create)."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas.term import Term, TermCreate
from ..services.store import TERMS_TABLE, StoreError, TableStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/terms", response_model=list[Term])
async def list_terms(store: TableStore = Depends(get_store)) -> list[dict[str, Any]]:
    """Return every financing term."""
    try:
        return await store.select_all(TERMS_TABLE)
    except StoreError as exc:
        logger.exception("Failed to list terms")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching terms",
        ) from exc


@router.post("/terms", response_model=Term, status_code=status.HTTP_201_CREATED)
async def create_term(body: TermCreate, store: TableStore = Depends(get_store)) -> dict[str, Any]:
    """Create a term. All three fields are required."""
    if not body.is_complete():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Weeks, normal rate and punctual rate are required.",
        )
    try:
        return await store.insert(TERMS_TABLE, body.model_dump())
    except StoreError as exc:
        logger.exception("Failed to create term weeks=%s", body.weeks)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error creating term",
        ) from exc
