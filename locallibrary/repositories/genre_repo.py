from locallibrary.errors import ConstraintError, NotFoundError
from locallibrary.extensions import db
from locallibrary.models.genre import Genre
from locallibrary.repositories.base import apply_query_options, store_guard


def _check_required(name):
    if not name:
        raise ConstraintError("Genre name is required")


class GenreRepo:
    @staticmethod
    @store_guard
    def list_all(filters=None, fields=None):
        q = apply_query_options(Genre.query, Genre, filters, fields)
        return q.order_by(Genre.name.asc()).all()

    @staticmethod
    @store_guard
    def get(genre_id: int):
        genre = db.session.get(Genre, genre_id)
        if not genre:
            raise NotFoundError("Genre not found")
        return genre

    @staticmethod
    @store_guard
    def find_one(**filters):
        return Genre.query.filter_by(**filters).first()

    @staticmethod
    @store_guard
    def create(genre: Genre):
        _check_required(genre.name)
        db.session.add(genre)
        db.session.commit()
        return genre

    @staticmethod
    @store_guard
    def update_by_id(genre_id: int, values: dict):
        genre = GenreRepo.get(genre_id)
        _check_required(values.get("name", genre.name))
        for k in ["name"]:
            if k in values:
                setattr(genre, k, values[k])
        db.session.commit()
        return genre

    @staticmethod
    @store_guard
    def delete_by_id(genre_id: int):
        genre = GenreRepo.get(genre_id)
        db.session.delete(genre)
        db.session.commit()
