# app/validation.py

from typing import Optional, Protocol

MIN_RATING = 1
MAX_RATING = 5


class ReviewLike(Protocol):
    title: Optional[str]
    rating: float


def is_valid_review(review: ReviewLike) -> bool:
    """
    True when the title is non-blank and the rating is within [1, 5].
    """
    title = review.title
    if title is None or not title.strip():
        return False
    return MIN_RATING <= review.rating <= MAX_RATING
