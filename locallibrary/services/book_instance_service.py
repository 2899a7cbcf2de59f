from flask import current_app

from locallibrary.errors import ConstraintError
from locallibrary.models.book_instance import BookInstance
from locallibrary.repositories.book_instance_repo import BookInstanceRepo
from locallibrary.repositories.book_repo import BookRepo

DEFAULT_STATUS = "Maintenance"


def _book_id(raw) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ConstraintError("Book not found")


def _values(data: dict) -> dict:
    return {
        "book_id": _book_id(data.get("book")),
        "imprint": data.get("imprint"),
        "status": data.get("status") or DEFAULT_STATUS,
        "due_back": data.get("due_back"),
    }


class BookInstanceService:
    @staticmethod
    def list_instances():
        return BookInstanceRepo.list_all(expand_book=True)

    @staticmethod
    def get_instance(instance_id: int):
        return BookInstanceRepo.get(instance_id, expand_book=True)

    @staticmethod
    def list_book_choices():
        return BookRepo.list_all(fields=("title",))

    @staticmethod
    def create_instance(data: dict):
        instance = BookInstanceRepo.create(BookInstance(**_values(data)))
        current_app.logger.info(f"[bookinstance] created id={instance.id}")
        return instance

    @staticmethod
    def update_instance(instance_id: int, data: dict):
        instance = BookInstanceRepo.update_by_id(instance_id, _values(data))
        current_app.logger.info(f"[bookinstance] updated id={instance.id}")
        return instance

    @staticmethod
    def delete_instance(instance_id: int):
        BookInstanceRepo.delete_by_id(instance_id)
        current_app.logger.info(f"[bookinstance] deleted id={instance_id}")
