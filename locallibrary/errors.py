# locallibrary/errors.py
# Katalog hata sınıfları + uygulama genelindeki hata sınırı (error.html)

from __future__ import annotations

from flask import render_template
from werkzeug.exceptions import InternalServerError, NotFound


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str = "Unexpected error"):
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    # id ile kayıt bulunamadı
    status_code = 404


class StoreError(CatalogError):
    # veritabanı / driver hatası
    status_code = 500


class ConstraintError(CatalogError):
    # zorunlu alan eksik veya referans çözülemedi
    status_code = 400


def _render_error(title: str, message: str, status: int):
    return render_template(
        "error.html",
        title=title,
        message=message,
        status=status,
    ), status


def register_error_handlers(app):
    @app.errorhandler(CatalogError)
    def _catalog_error(e: CatalogError):
        if isinstance(e, StoreError):
            app.logger.exception(f"[errors] store failure: {e.message}")
        else:
            app.logger.info(f"[errors] {type(e).__name__}: {e.message}")
        return _render_error("Error", e.message, e.status_code)

    @app.errorhandler(NotFound)
    def _not_found(e: NotFound):
        return _render_error("Not Found", "Page not found", 404)

    # yakalanmamış her şey (template hatası, lazy load vb.) buraya düşer
    @app.errorhandler(InternalServerError)
    def _internal_error(e: InternalServerError):
        original = getattr(e, "original_exception", None) or e
        app.logger.exception(f"[errors] unhandled: {original}")
        return _render_error("Error", "Internal server error", 500)
