# This project was developed with assistance from AI tools.
"""Credit quote route."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas.quote import QuoteRequest, QuoteResponse
from ..services.quote import build_quote
from ..services.store import StoreError, TableStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/quote", response_model=QuoteResponse)
async def calculate_quote(
    req: QuoteRequest, store: TableStore = Depends(get_store)
) -> QuoteResponse:
    """Weekly normal and punctual payments for a product over a term.

    Any failure, an unknown SKU or term included, fails the whole request
    with 500.
    """
    try:
        return await build_quote(store, req.sku, req.weeks)
    except (StoreError, ArithmeticError) as exc:
        logger.exception("Failed to calculate quote sku=%s weeks=%s", req.sku, req.weeks)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error calculating quote",
        ) from exc
