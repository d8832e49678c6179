# scripts/ingest.py
"""
Bulk-load book reviews from a CSV with `Title` and `Rating` columns.

Rows are checked with the same predicate the API applies to writes;
rows that fail it are counted and skipped, not loaded.

Usage:
    python -m scripts.ingest [path/to/reviews.csv]
"""

import csv
import logging
import sys

from pydantic import ValidationError

from app.config import get_settings
from app.db.engine import build_engine
from app.db.schema import book_reviews, metadata
from app.logging_config import configure_logging
from app.models.reviews import BookReviewIn
from app.validation import is_valid_review

logger = logging.getLogger(__name__)

FILE_PATH = "data/reviews.csv"
MAX_EXAMPLES = 5


def parse_rating(value):
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    return float(value)


def parse_reviews_csv(file_path: str = FILE_PATH):
    reviews_list = []

    n_rows = 0
    n_invalid = 0
    n_errors = 0
    invalid_examples = []
    error_examples = []

    with open(file_path, newline="") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            try:
                rating = parse_rating(row["Rating"])
                review = BookReviewIn(
                    title=(row["Title"] or "").strip(),
                    rating=rating if rating is not None else 0,
                )
            except (KeyError, ValueError, ValidationError) as e:
                n_errors += 1
                if len(error_examples) < MAX_EXAMPLES:
                    error_examples.append(
                        {
                            "row_number": n_rows,
                            "row": dict(row),
                            "error": repr(e),
                        }
                    )
                continue

            if not is_valid_review(review):
                n_invalid += 1
                if len(invalid_examples) < MAX_EXAMPLES:
                    invalid_examples.append(
                        f"Row {n_rows}: title={review.title!r} rating={review.rating!r}"
                    )
                continue

            reviews_list.append({"title": review.title, "rating": review.rating})

    stats = {
        "n_rows": n_rows,
        "n_reviews": len(reviews_list),
        "n_invalid": n_invalid,
        "n_errors": n_errors,
        "invalid_examples": invalid_examples,
        "error_examples": error_examples,
    }
    return reviews_list, stats


def load_into_db(engine, reviews_list) -> int:
    """
    Insert parsed reviews in a single transaction; returns the row count.
    """
    metadata.create_all(engine)
    if not reviews_list:
        return 0

    with engine.begin() as conn:
        conn.execute(book_reviews.insert(), reviews_list)

    return len(reviews_list)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    file_path = argv[0] if argv else FILE_PATH

    settings = get_settings()
    configure_logging(settings.log_level)

    reviews_list, stats = parse_reviews_csv(file_path)
    loaded = load_into_db(build_engine(settings), reviews_list)

    logger.info("Total CSV rows read:   %s", stats["n_rows"])
    logger.info("Reviews loaded:        %s", loaded)
    logger.info("Rows failing checks:   %s", stats["n_invalid"])
    logger.info("Rows with errors:      %s", stats["n_errors"])

    for example in stats["invalid_examples"]:
        logger.warning("Rejected review: %s", example)

    if stats["error_examples"]:
        logger.warning("Example errors:")
        for ex in stats["error_examples"]:
            logger.warning("Row %s: %s", ex["row_number"], ex["error"])


if __name__ == "__main__":
    main()
