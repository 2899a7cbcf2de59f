from flask import Blueprint, redirect, url_for

web_bp = Blueprint("web", __name__)


@web_bp.get("/")
def root():
    return redirect(url_for("genres.genre_list"))


@web_bp.get("/catalog")
def catalog_root():
    return redirect(url_for("genres.genre_list"))
