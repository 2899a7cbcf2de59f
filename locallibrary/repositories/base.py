from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import load_only

from locallibrary.errors import ConstraintError, StoreError
from locallibrary.extensions import db


def store_guard(fn):
    """DB hatasında rollback yapar, StoreError/ConstraintError olarak fırlatır."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except IntegrityError as e:
            db.session.rollback()
            raise ConstraintError(f"Constraint violated: {e.orig}") from e
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StoreError(f"Database error: {e}") from e
    return wrapper


def apply_query_options(query, model, filters=None, fields=None):
    if filters:
        query = query.filter_by(**filters)
    if fields:
        query = query.options(load_only(*[getattr(model, f) for f in fields]))
    return query
