# app/db/schema.py

from sqlalchemy import MetaData, Table, Column, Integer, Float, Text

metadata = MetaData()

# No CHECK on rating: rows written under older validation rules stay readable.
book_reviews = Table(
    "book_reviews",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("rating", Float, nullable=False),
)
