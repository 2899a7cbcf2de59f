# locallibrary/controllers/book_instance_controller.py

from flask import Blueprint, redirect, render_template, request, url_for

from locallibrary.models.book_instance import STATUSES
from locallibrary.services.book_instance_service import BookInstanceService
from locallibrary.validation import BOOK_INSTANCE_RULES, validate

bookinstance_bp = Blueprint("bookinstances", __name__, url_prefix="/catalog")


def _render_form(title: str, **context):
    return render_template(
        "bookinstance_form.html",
        title=title,
        book_list=BookInstanceService.list_book_choices(),
        statuses=STATUSES,
        **context,
    )


def _submitted(result, instance_id=None) -> dict:
    # Hatalı formda kullanıcının girdiği değerler kaybolmasın
    return {
        "id": instance_id,
        "book_id": result.data["book"],
        "imprint": result.data["imprint"],
        "status": result.data["status"],
        "due_back_iso": (request.form.get("due_back") or "").strip(),
    }


@bookinstance_bp.get("/bookinstances")
def bookinstance_list():
    return render_template(
        "bookinstance_list.html",
        title="Book Instance List",
        bookinstance_list=BookInstanceService.list_instances(),
    )


@bookinstance_bp.get("/bookinstance/<int:instance_id>")
def bookinstance_detail(instance_id: int):
    instance = BookInstanceService.get_instance(instance_id)
    return render_template(
        "bookinstance_detail.html",
        title=f"Copy: {instance.book.title}",
        bookinstance=instance,
    )


@bookinstance_bp.get("/bookinstance/create")
def bookinstance_create_get():
    return _render_form("Create BookInstance")


@bookinstance_bp.post("/bookinstance/create")
def bookinstance_create_post():
    result = validate(request.form, BOOK_INSTANCE_RULES)

    if not result.is_empty():
        return _render_form(
            "Create BookInstance",
            selected_book=result.data["book"],
            bookinstance=_submitted(result),
            errors=result.errors,
        )

    instance = BookInstanceService.create_instance(result.data)
    return redirect(instance.url)


@bookinstance_bp.get("/bookinstance/<int:instance_id>/delete")
def bookinstance_delete_get(instance_id: int):
    instance = BookInstanceService.get_instance(instance_id)
    return render_template(
        "bookinstance_delete.html",
        title="Delete BookInstance",
        bookinstance=instance,
    )


@bookinstance_bp.post("/bookinstance/<int:instance_id>/delete")
def bookinstance_delete_post(instance_id: int):
    BookInstanceService.delete_instance(instance_id)
    return redirect(url_for("bookinstances.bookinstance_list"))


@bookinstance_bp.get("/bookinstance/<int:instance_id>/update")
def bookinstance_update_get(instance_id: int):
    instance = BookInstanceService.get_instance(instance_id)
    return _render_form(
        "Update BookInstance",
        selected_book=instance.book_id,
        bookinstance=instance,
    )


@bookinstance_bp.post("/bookinstance/<int:instance_id>/update")
def bookinstance_update_post(instance_id: int):
    BookInstanceService.get_instance(instance_id)
    result = validate(request.form, BOOK_INSTANCE_RULES)

    if not result.is_empty():
        return _render_form(
            "Update BookInstance",
            selected_book=result.data["book"],
            bookinstance=_submitted(result, instance_id),
            errors=result.errors,
        )

    instance = BookInstanceService.update_instance(instance_id, result.data)
    return redirect(instance.url)
