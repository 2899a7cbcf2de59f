"""Tests for the form field validation chains."""
from __future__ import annotations

from datetime import date

import pytest

from locallibrary.validation import (
    BOOK_INSTANCE_RULES,
    GENRE_CREATE_RULES,
    GENRE_UPDATE_RULES,
    ValidationError,
    field,
    validate,
    validate_or_raise,
)


def test_genre_name_is_trimmed_before_length_check():
    result = validate({"name": "   "}, GENRE_CREATE_RULES)

    assert not result.is_empty()
    assert result.data["name"] == ""
    assert result.errors == [{"param": "name", "msg": "Genre name required", "value": ""}]


def test_genre_name_is_escaped():
    result = validate({"name": "  <b>Sci & Fi</b> "}, GENRE_CREATE_RULES)

    assert result.is_empty()
    assert result.data["name"] == "&lt;b&gt;Sci &amp; Fi&lt;/b&gt;"


def test_missing_field_counts_as_empty():
    result = validate({}, GENRE_CREATE_RULES)

    assert result.mapped() == {"name": ["Genre name required"]}


def test_update_rules_require_three_characters():
    assert not validate({"name": "ab"}, GENRE_UPDATE_RULES).is_empty()
    assert validate({"name": "abc"}, GENRE_UPDATE_RULES).is_empty()


def test_blank_optional_date_is_absent_not_an_error():
    form = {"book": "1", "imprint": "Gollancz, 2007", "status": "Available", "due_back": ""}
    result = validate(form, BOOK_INSTANCE_RULES)

    assert result.is_empty()
    assert result.data["due_back"] is None


def test_iso_date_is_parsed_to_calendar_date():
    form = {"book": "1", "imprint": "Gollancz", "status": "Loaned", "due_back": "2023-05-01"}
    result = validate(form, BOOK_INSTANCE_RULES)

    assert result.is_empty()
    assert result.data["due_back"] == date(2023, 5, 1)


def test_iso_datetime_is_truncated_to_date():
    result = _due_back("2023-05-01T10:30:00")

    assert result.data["due_back"] == date(2023, 5, 1)


def test_malformed_date_is_rejected():
    form = {"book": "1", "imprint": "Gollancz", "status": "Loaned", "due_back": "next tuesday"}
    result = validate(form, BOOK_INSTANCE_RULES)

    assert result.mapped() == {"due_back": ["Invalid date"]}
    assert result.data["due_back"] is None


def test_book_instance_collects_every_failure_in_order():
    result = validate({"book": " ", "imprint": "", "status": "", "due_back": "x"}, BOOK_INSTANCE_RULES)

    assert [e["param"] for e in result.errors] == ["book", "imprint", "due_back"]
    assert result.data["status"] == ""


def test_chain_without_message_uses_default():
    result = validate({"code": "a"}, [field("code").min_length(2)])

    assert result.errors[0]["msg"] == "Invalid value"


def test_validate_or_raise():
    assert validate_or_raise({"name": "Poetry"}, GENRE_CREATE_RULES) == {"name": "Poetry"}

    with pytest.raises(ValidationError) as exc_info:
        validate_or_raise({"name": ""}, GENRE_CREATE_RULES)

    assert exc_info.value.result.mapped() == {"name": ["Genre name required"]}
    assert "Genre name required" in str(exc_info.value)


def _due_back(raw):
    return validate({"due_back": raw}, [
        field("due_back", "Invalid date").optional(check_falsy=True).is_iso8601().to_date(),
    ])


def test_reduced_precision_iso_dates_are_accepted():
    assert _due_back("2023-05").data["due_back"] == date(2023, 5, 1)
    assert _due_back("2023").data["due_back"] == date(2023, 1, 1)
    assert _due_back("2023-13").mapped() == {"due_back": ["Invalid date"]}


def test_offset_datetime_is_normalized_to_utc_day():
    result = _due_back("2023-05-01T23:00-05:00")

    assert result.is_empty()
    assert result.data["due_back"] == date(2023, 5, 2)
