from locallibrary.models.book import Book, book_genres
from locallibrary.models.genre import Genre
from locallibrary.models.book_instance import BookInstance

__all__ = ["Book", "book_genres", "Genre", "BookInstance"]
