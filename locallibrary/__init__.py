import logging

import click
from flask import Flask, jsonify

from locallibrary.config import Config
from locallibrary.errors import register_error_handlers
from locallibrary.extensions import db, migrate

from locallibrary.controllers.web_controller import web_bp
from locallibrary.controllers.genre_controller import genre_bp
from locallibrary.controllers.book_instance_controller import bookinstance_bp


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # 1) Extension'lar (modeller migrate'ten önce import edilmeli)
    db.init_app(app)
    from locallibrary import models  # noqa: F401
    migrate.init_app(app, db)

    # 2) Blueprintler
    app.register_blueprint(web_bp)
    app.register_blueprint(genre_bp)
    app.register_blueprint(bookinstance_bp)

    # 3) Hata sınırı
    register_error_handlers(app)

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    @app.cli.command("init-db")
    def init_db_command():
        """Create all tables (without migrations)."""
        db.create_all()
        click.echo("Initialized the database.")

    return app
