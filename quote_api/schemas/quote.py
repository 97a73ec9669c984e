# This project was developed with assistance from AI tools.
"""Credit quote schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QuoteRequest(BaseModel):
    """Input for the quote calculator.

    Fields are untyped so a bad ``sku`` or ``weeks`` fails the store lookup
    (500) rather than request parsing.
    """

    sku: Any = None
    weeks: Any = None


class QuoteResponse(BaseModel):
    """Weekly payment amounts for one product financed over one term."""

    model_config = ConfigDict(populate_by_name=True)

    normal_payment: float = Field(alias="normalPayment")
    punctual_payment: float = Field(alias="punctualPayment")
