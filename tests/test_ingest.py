import pytest
from sqlalchemy import select

from app.db.engine import build_engine
from app.db.schema import book_reviews
from scripts.ingest import load_into_db, parse_reviews_csv


@pytest.fixture
def reviews_csv(tmp_path):
    path = tmp_path / "reviews.csv"
    path.write_text(
        "Title,Rating\n"
        "Dune,5\n"
        " Emma ,3.5\n"
        ",4\n"
        "Dune,7\n"
        "Middlemarch,lots\n"
        "Middlemarch,\n"
    )
    return path


def test_parse_reviews_csv_counts_rows(reviews_csv):
    reviews_list, stats = parse_reviews_csv(str(reviews_csv))

    assert reviews_list == [
        {"title": "Dune", "rating": 5.0},
        {"title": "Emma", "rating": 3.5},
    ]
    assert stats["n_rows"] == 6
    assert stats["n_reviews"] == 2
    # blank title, rating 7, and the empty rating (defaults to 0)
    assert stats["n_invalid"] == 3
    assert stats["n_errors"] == 1
    assert stats["error_examples"][0]["row_number"] == 5


def test_load_into_db_inserts_reviews(settings, reviews_csv):
    engine = build_engine(settings)
    reviews_list, _ = parse_reviews_csv(str(reviews_csv))

    loaded = load_into_db(engine, reviews_list)

    with engine.connect() as conn:
        rows = conn.execute(select(book_reviews.c.title, book_reviews.c.rating)).all()

    assert loaded == 2
    assert sorted(tuple(row) for row in rows) == [("Dune", 5.0), ("Emma", 3.5)]


def test_loaded_reviews_are_served_by_api(settings, client, reviews_csv):
    reviews_list, _ = parse_reviews_csv(str(reviews_csv))
    load_into_db(build_engine(settings), reviews_list)

    summary = client.get("/api/reviews/summary").json()

    assert summary == [
        {"id": 1, "title": "Dune", "rating": 5.0},
        {"id": 2, "title": "Emma", "rating": 3.5},
    ]


def test_load_into_db_with_nothing_to_load(settings):
    assert load_into_db(build_engine(settings), []) == 0
