from flask import current_app

from locallibrary.models.genre import Genre
from locallibrary.repositories.book_repo import BookRepo
from locallibrary.repositories.genre_repo import GenreRepo


class GenreService:
    @staticmethod
    def list_genres():
        return GenreRepo.list_all()

    @staticmethod
    def get_genre(genre_id: int):
        return GenreRepo.get(genre_id)

    @staticmethod
    def get_genre_with_books(genre_id: int):
        genre = GenreRepo.get(genre_id)
        return genre, BookRepo.list_by_genre(genre_id)

    @staticmethod
    def create_genre(name: str):
        """
        Returns: (genre, created)
        - Aynı isimde (büyük/küçük harf duyarlı) kayıt varsa yeni kayıt açmaz, onu döner.
        """
        found = GenreRepo.find_one(name=name)
        if found:
            current_app.logger.info(f"[genre] '{name}' already exists (id={found.id})")
            return found, False

        genre = GenreRepo.create(Genre(name=name))
        current_app.logger.info(f"[genre] created id={genre.id}")
        return genre, True

    @staticmethod
    def update_genre(genre_id: int, name: str):
        genre = GenreRepo.update_by_id(genre_id, {"name": name})
        current_app.logger.info(f"[genre] updated id={genre.id}")
        return genre

    @staticmethod
    def delete_genre(genre_id: int):
        """
        Returns: (deleted, genre, books)
        - Türe bağlı kitap varsa silmez, o kitapları döner.
        """
        genre = GenreRepo.get(genre_id)
        books = BookRepo.list_by_genre(genre_id)
        if books:
            current_app.logger.info(
                f"[genre] delete refused id={genre_id}: referenced by {len(books)} book(s)"
            )
            return False, genre, books

        GenreRepo.delete_by_id(genre_id)
        current_app.logger.info(f"[genre] deleted id={genre_id}")
        return True, genre, []
