# locallibrary/controllers/genre_controller.py

from flask import Blueprint, redirect, render_template, request, url_for

from locallibrary.services.genre_service import GenreService
from locallibrary.validation import GENRE_CREATE_RULES, GENRE_UPDATE_RULES, validate

genre_bp = Blueprint("genres", __name__, url_prefix="/catalog")


@genre_bp.get("/genres")
def genre_list():
    return render_template(
        "genre_list.html",
        title="Genre List",
        genre_list=GenreService.list_genres(),
    )


@genre_bp.get("/genre/<int:genre_id>")
def genre_detail(genre_id: int):
    genre, books = GenreService.get_genre_with_books(genre_id)
    return render_template(
        "genre_detail.html",
        title="Genre Detail",
        genre=genre,
        genre_books=books,
    )


@genre_bp.get("/genre/create")
def genre_create_get():
    return render_template("genre_form.html", title="Create Genre")


@genre_bp.post("/genre/create")
def genre_create_post():
    result = validate(request.form, GENRE_CREATE_RULES)

    if not result.is_empty():
        # form tekrar, girilen değerlerle
        return render_template(
            "genre_form.html",
            title="Create Genre",
            genre={"name": result.data["name"]},
            errors=result.errors,
        )

    # aynı isimde kayıt varsa onun sayfasına git
    genre, _created = GenreService.create_genre(result.data["name"])
    return redirect(genre.url)


@genre_bp.get("/genre/<int:genre_id>/delete")
def genre_delete_get(genre_id: int):
    genre, books = GenreService.get_genre_with_books(genre_id)
    return render_template(
        "genre_delete.html",
        title="Delete Genre",
        genre=genre,
        genre_books=books,
    )


@genre_bp.post("/genre/<int:genre_id>/delete")
def genre_delete_post(genre_id: int):
    deleted, genre, books = GenreService.delete_genre(genre_id)
    if not deleted:
        return render_template(
            "genre_delete.html",
            title="Delete Genre",
            genre=genre,
            genre_books=books,
        )
    return redirect(url_for("genres.genre_list"))


@genre_bp.get("/genre/<int:genre_id>/update")
def genre_update_get(genre_id: int):
    genre = GenreService.get_genre(genre_id)
    return render_template("genre_form.html", title="Update Genre", genre=genre)


@genre_bp.post("/genre/<int:genre_id>/update")
def genre_update_post(genre_id: int):
    # kayıt yoksa 404, form hiç gösterilmez
    GenreService.get_genre(genre_id)
    result = validate(request.form, GENRE_UPDATE_RULES)

    if not result.is_empty():
        return render_template(
            "genre_form.html",
            title="Update Genre",
            genre={"id": genre_id, "name": result.data["name"]},
            errors=result.errors,
        )

    genre = GenreService.update_genre(genre_id, result.data["name"])
    return redirect(genre.url)
