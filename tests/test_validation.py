import pytest
from pydantic import ValidationError

from app.models.reviews import BookReviewIn
from app.validation import is_valid_review


@pytest.mark.parametrize("rating", [1, 1.5, 3, 4.99, 5])
def test_ratings_within_range_are_valid(rating):
    assert is_valid_review(BookReviewIn(title="Dune", rating=rating))


@pytest.mark.parametrize("rating", [0, 0.99, 5.01, 6, -1, float("nan")])
def test_ratings_outside_range_are_invalid(rating):
    assert not is_valid_review(BookReviewIn(title="Dune", rating=rating))


@pytest.mark.parametrize("title", [None, "", "   ", "\t\n"])
def test_blank_titles_are_invalid(title):
    assert not is_valid_review(BookReviewIn(title=title, rating=3))


def test_missing_fields_fall_back_to_invalid_defaults():
    review = BookReviewIn()
    assert review.title is None
    assert review.rating == 0
    assert not is_valid_review(review)


def test_id_does_not_affect_validity():
    assert is_valid_review(BookReviewIn(id=-7, title="Emma", rating=2))


@pytest.mark.parametrize("rating", [True, False])
def test_boolean_rating_is_rejected_at_parse_time(rating):
    with pytest.raises(ValidationError):
        BookReviewIn(title="Dune", rating=rating)
