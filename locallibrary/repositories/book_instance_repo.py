from sqlalchemy.orm import joinedload

from locallibrary.errors import ConstraintError, NotFoundError
from locallibrary.extensions import db
from locallibrary.models.book_instance import BookInstance
from locallibrary.repositories.base import apply_query_options, store_guard
from locallibrary.repositories.book_repo import BookRepo

FIELDS = ["book_id", "imprint", "status", "due_back"]


def _check_required(book_id, imprint):
    if not book_id:
        raise ConstraintError("Book must be specified")
    if not imprint:
        raise ConstraintError("Imprint must be specified")
    if not BookRepo.exists(book_id):
        raise ConstraintError("Book not found")


class BookInstanceRepo:
    @staticmethod
    @store_guard
    def list_all(filters=None, fields=None, expand_book=False):
        q = apply_query_options(BookInstance.query, BookInstance, filters, fields)
        if expand_book:
            q = q.options(joinedload(BookInstance.book))
        return q.order_by(BookInstance.id.asc()).all()

    @staticmethod
    @store_guard
    def get(instance_id: int, expand_book=False):
        q = BookInstance.query.filter_by(id=instance_id)
        if expand_book:
            q = q.options(joinedload(BookInstance.book))
        instance = q.first()
        if not instance:
            raise NotFoundError("Book copy not found")
        return instance

    @staticmethod
    @store_guard
    def create(instance: BookInstance):
        _check_required(instance.book_id, instance.imprint)
        db.session.add(instance)
        db.session.commit()
        return instance

    @staticmethod
    @store_guard
    def update_by_id(instance_id: int, values: dict):
        instance = BookInstanceRepo.get(instance_id)
        _check_required(
            values.get("book_id", instance.book_id),
            values.get("imprint", instance.imprint),
        )
        for k in FIELDS:
            if k in values:
                setattr(instance, k, values[k])
        db.session.commit()
        return instance

    @staticmethod
    @store_guard
    def delete_by_id(instance_id: int):
        instance = BookInstanceRepo.get(instance_id)
        db.session.delete(instance)
        db.session.commit()
