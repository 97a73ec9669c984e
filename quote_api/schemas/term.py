# This project was developed with assistance from AI tools.
"""Financing term schemas."""

from pydantic import BaseModel


class Term(BaseModel):
    """A financing term: duration in weeks plus its two interest rates.

    ``id`` and ``created_at`` are store-managed columns, passed through when
    the row carries them.
    """

    id: int | None = None
    weeks: int | float
    normal_rate: float
    punctual_rate: float
    created_at: str | None = None


class TermCreate(BaseModel):
    """Body for POST /api/terms. Presence is checked by the route."""

    weeks: int | float | None = None
    normal_rate: float | None = None
    punctual_rate: float | None = None

    def is_complete(self) -> bool:
        return bool(self.weeks and self.normal_rate and self.punctual_rate)
