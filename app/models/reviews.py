# app/models/reviews.py

from typing import Optional

from pydantic import BaseModel, field_validator


class BookReviewIn(BaseModel):
    """
    Request body for create and update. `id` is accepted but ignored;
    missing fields fall through to the validation predicate.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    rating: float = 0

    @field_validator("rating", mode="before")
    @classmethod
    def reject_boolean_rating(cls, value):
        if isinstance(value, bool):
            raise ValueError("rating must be a number, not a boolean")
        return value


class BookReviewOut(BaseModel):
    id: int
    title: str
    rating: float
