# This project was developed with assistance from AI tools.
"""Credit quote calculation.

``calculate_payments`` is pure math, no I/O. ``build_quote`` fetches the
product and the term it needs from the store, one round trip each.
"""

from typing import Any

from ..schemas.quote import QuoteResponse
from .store import PRODUCTS_TABLE, TERMS_TABLE, TableStore


def calculate_payments(
    price: float, normal_rate: float, punctual_rate: float, weeks: float
) -> QuoteResponse:
    """Weekly payment: price plus interest at each rate, spread over ``weeks``.

    ``weeks`` of zero raises ZeroDivisionError.
    """
    normal_payment = (price * normal_rate + price) / weeks
    punctual_payment = (price * punctual_rate + price) / weeks
    return QuoteResponse(normal_payment=normal_payment, punctual_payment=punctual_payment)


async def build_quote(store: TableStore, sku: Any, weeks: Any) -> QuoteResponse:
    """Quote a product over a term.

    The divisor is the matched term's ``weeks``, numerically equal to the
    requested one.

    Raises:
        RecordNotFoundError: the sku or the weeks has no matching row.
        StoreError: any other store failure.
    """
    product = await store.select_one(PRODUCTS_TABLE, "sku", sku)
    term = await store.select_one(TERMS_TABLE, "weeks", weeks)
    return calculate_payments(
        price=product["price"],
        normal_rate=term["normal_rate"],
        punctual_rate=term["punctual_rate"],
        weeks=term["weeks"],
    )
