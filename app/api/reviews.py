# app/api/reviews.py

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response
from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from app.db.engine import get_engine
from app.db.schema import book_reviews
from app.models.reviews import BookReviewIn, BookReviewOut
from app.validation import is_valid_review

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reviews", tags=["reviews"])

INVALID_REVIEW_DETAIL = "Title must not be blank and rating must be between 1 and 5"

# Ids outside the signed 64-bit range cannot exist in the table.
ReviewId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def _row_to_review(row) -> BookReviewOut:
    return BookReviewOut(
        id=row["id"],
        title=row["title"],
        rating=row["rating"],
    )


def _require_valid(review: BookReviewIn) -> None:
    if not is_valid_review(review):
        logger.info("Rejected review title=%r rating=%r", review.title, review.rating)
        raise HTTPException(status_code=422, detail=INVALID_REVIEW_DETAIL)


def _not_found(review_id: int) -> HTTPException:
    logger.info("Review %s not found", review_id)
    return HTTPException(status_code=404, detail="Review not found")


@router.get("", response_model=List[BookReviewOut])
def list_reviews(engine: Engine = Depends(get_engine)) -> List[BookReviewOut]:
    """
    Return every stored review in the store's natural order.
    """
    with engine.connect() as conn:
        rows = conn.execute(select(book_reviews)).mappings().all()

    return [_row_to_review(row) for row in rows]


@router.get("/summary", response_model=List[BookReviewOut])
def review_summary(engine: Engine = Depends(get_engine)) -> List[BookReviewOut]:
    """
    One record per title with the average rating rounded to two places.
    Ids are renumbered 1..N and do not refer to stored rows.
    """
    with engine.connect() as conn:
        stmt = (
            select(
                book_reviews.c.title,
                func.avg(book_reviews.c.rating).label("avg_rating"),
            )
            .group_by(book_reviews.c.title)
            .order_by(book_reviews.c.title)
        )

        rows = conn.execute(stmt).mappings().all()

    return [
        BookReviewOut(
            id=position,
            title=row["title"],
            rating=round(float(row["avg_rating"]), 2),
        )
        for position, row in enumerate(rows, start=1)
    ]


@router.get("/{review_id}", response_model=BookReviewOut)
def get_review(review_id: ReviewId, engine: Engine = Depends(get_engine)) -> BookReviewOut:
    """
    Look up a single review by id.
    """
    with engine.connect() as conn:
        stmt = select(book_reviews).where(book_reviews.c.id == review_id)
        row = conn.execute(stmt).mappings().first()

    if row is None:
        raise _not_found(review_id)

    return _row_to_review(row)


@router.post("", response_model=BookReviewOut, status_code=201)
def create_review(
    review: BookReviewIn,
    request: Request,
    response: Response,
    engine: Engine = Depends(get_engine),
) -> BookReviewOut:
    """
    Store a new review. Any id in the body is ignored; the store assigns one.
    """
    _require_valid(review)

    with engine.begin() as conn:
        result = conn.execute(
            book_reviews.insert().values(title=review.title, rating=review.rating)
        )
        new_id = result.inserted_primary_key[0]

    logger.info("Created review %s for %r", new_id, review.title)

    response.headers["Location"] = str(request.url_for("get_review", review_id=new_id))
    return BookReviewOut(id=new_id, title=review.title, rating=review.rating)


@router.put("/{review_id}")
def update_review(
    review_id: ReviewId,
    review: BookReviewIn,
    engine: Engine = Depends(get_engine),
) -> Response:
    """
    Replace title and rating of an existing review; the id never changes.
    """
    _require_valid(review)

    with engine.begin() as conn:
        exists = conn.execute(
            select(book_reviews.c.id).where(book_reviews.c.id == review_id)
        ).first()

        if exists is None:
            raise _not_found(review_id)

        conn.execute(
            book_reviews.update()
            .where(book_reviews.c.id == review_id)
            .values(title=review.title, rating=review.rating)
        )

    logger.info("Updated review %s", review_id)
    return Response(status_code=200)


@router.delete("/{review_id}")
def delete_review(review_id: ReviewId, engine: Engine = Depends(get_engine)) -> Response:
    """
    Remove a review by id; deleting an id that is already gone is a 404.
    """
    with engine.begin() as conn:
        exists = conn.execute(
            select(book_reviews.c.id).where(book_reviews.c.id == review_id)
        ).first()

        if exists is None:
            raise _not_found(review_id)

        conn.execute(book_reviews.delete().where(book_reviews.c.id == review_id))

    logger.info("Deleted review %s", review_id)
    return Response(status_code=200)
