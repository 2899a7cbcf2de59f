"""Shared fixtures: an app on in-memory SQLite with a few seeded books."""
from __future__ import annotations

import pytest

from locallibrary import create_app
from locallibrary.config import TestConfig
from locallibrary.extensions import db
from locallibrary.models import Book, BookInstance, Genre


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(app):
    """Two genres (one referenced by a book, one free) and two books."""
    with app.app_context():
        fantasy = Genre(name="Fantasy")
        poetry = Genre(name="Poetry")
        wind = Book(title="The Name of the Wind", author="Patrick Rothfuss", genres=[fantasy])
        apes = Book(title="Apes and Angels", author="Ben Bova")
        db.session.add_all([fantasy, poetry, wind, apes])
        db.session.commit()
        return {
            "fantasy": fantasy.id,
            "poetry": poetry.id,
            "wind": wind.id,
            "apes": apes.id,
        }


def count(app, model) -> int:
    with app.app_context():
        return db.session.query(model).count()


def fetch(app, model, record_id):
    with app.app_context():
        obj = db.session.get(model, record_id)
        if obj is not None:
            db.session.expunge(obj)
        return obj


def add_instance(app, **values) -> int:
    with app.app_context():
        instance = BookInstance(**values)
        db.session.add(instance)
        db.session.commit()
        return instance.id
