from locallibrary.extensions import db
from locallibrary.models.book import Book
from locallibrary.repositories.base import apply_query_options, store_guard


class BookRepo:
    @staticmethod
    @store_guard
    def list_all(filters=None, fields=None):
        q = apply_query_options(Book.query, Book, filters, fields)
        return q.order_by(Book.title.asc()).all()

    @staticmethod
    @store_guard
    def exists(book_id: int) -> bool:
        return db.session.get(Book, book_id) is not None

    @staticmethod
    @store_guard
    def list_by_genre(genre_id: int):
        return (
            Book.query
            .filter(Book.genres.any(id=genre_id))
            .order_by(Book.title.asc())
            .all()
        )
