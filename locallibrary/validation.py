# locallibrary/validation.py
# Form alanları: her alan için sırayla çalışan trim/escape/kontrol zinciri.
# optional(check_falsy=True) boş değerde zinciri atlar, hata üretmez.

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from markupsafe import escape as _html_escape

DEFAULT_MESSAGE = "Invalid value"

# "2023" ve "2023-05" gibi kısaltılmış ISO-8601 biçimleri
_REDUCED_ISO = re.compile(r"^(\d{4})(?:-(0[1-9]|1[0-2]))?$")


def _parse_iso8601(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None

    m = _REDUCED_ISO.match(value)
    if m:
        return datetime(int(m.group(1)), int(m.group(2) or 1), 1)

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None

    # offset'li değer UTC takvim gününe çevrilir
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed


class FieldChain:
    def __init__(self, name: str, message: Optional[str] = None) -> None:
        self.name = name
        self.message = message or DEFAULT_MESSAGE
        self._steps: List[tuple[str, Callable[[Any], Any], Optional[str]]] = []
        self._optional = False
        self._check_falsy = False

    # -- sanitizers -------------------------------------------------------
    def trim(self) -> "FieldChain":
        self._steps.append(("sanitize", lambda v: v.strip() if isinstance(v, str) else v, None))
        return self

    def escape(self) -> "FieldChain":
        self._steps.append(("sanitize", lambda v: str(_html_escape(v)) if isinstance(v, str) else v, None))
        return self

    def to_date(self) -> "FieldChain":
        def _to_date(v):
            if isinstance(v, date):
                return v
            parsed = _parse_iso8601(v)
            return parsed.date() if parsed else None

        self._steps.append(("sanitize", _to_date, None))
        return self

    # -- validators -------------------------------------------------------
    def min_length(self, minimum: int, message: Optional[str] = None) -> "FieldChain":
        self._steps.append(
            ("check", lambda v: isinstance(v, str) and len(v) >= minimum, message)
        )
        return self

    def is_iso8601(self, message: Optional[str] = None) -> "FieldChain":
        self._steps.append(("check", lambda v: _parse_iso8601(v) is not None, message))
        return self

    # -- modifiers --------------------------------------------------------
    def optional(self, check_falsy: bool = False) -> "FieldChain":
        self._optional = True
        self._check_falsy = check_falsy
        return self

    def _skip(self, raw: Any) -> bool:
        if not self._optional:
            return False
        if self._check_falsy:
            return not raw
        return raw is None

    def run(self, form: Mapping[str, Any]) -> tuple[Any, List[Dict[str, Any]]]:
        raw = form.get(self.name)
        if self._skip(raw):
            return None, []

        value = "" if raw is None else raw
        errors: List[Dict[str, Any]] = []
        for kind, fn, message in self._steps:
            if kind == "sanitize":
                value = fn(value)
            elif not fn(value):
                errors.append({
                    "param": self.name,
                    "msg": message or self.message,
                    "value": value,
                })
        return value, errors


def field(name: str, message: Optional[str] = None) -> FieldChain:
    return FieldChain(name, message)


class ValidationResult:
    def __init__(self, data: Dict[str, Any], errors: List[Dict[str, Any]]) -> None:
        self.data = data
        self.errors = errors

    def is_empty(self) -> bool:
        return not self.errors

    def mapped(self) -> Dict[str, List[str]]:
        out: Dict[str, List[str]] = {}
        for err in self.errors:
            out.setdefault(err["param"], []).append(err["msg"])
        return out


class ValidationError(Exception):
    # başarısız ValidationResult ile fırlatılır

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        segments = [f"{k}: {'; '.join(v)}" for k, v in result.mapped().items()]
        super().__init__("; ".join(segments))


def validate(form: Mapping[str, Any], chains: List[FieldChain]) -> ValidationResult:
    data: Dict[str, Any] = {}
    errors: List[Dict[str, Any]] = []
    for chain in chains:
        value, chain_errors = chain.run(form)
        data[chain.name] = value
        errors.extend(chain_errors)
    return ValidationResult(data, errors)


def validate_or_raise(form: Mapping[str, Any], chains: List[FieldChain]) -> Dict[str, Any]:
    result = validate(form, chains)
    if not result.is_empty():
        raise ValidationError(result)
    return result.data


# Handler kural setleri

GENRE_CREATE_RULES = [
    field("name", "Genre name required").trim().min_length(1).escape(),
]

GENRE_UPDATE_RULES = [
    field("name", "Genre name must contain at least 3 characters").trim().min_length(3).escape(),
]


BOOK_INSTANCE_RULES = [
    field("book", "Book must be specified").trim().min_length(1).escape(),
    field("imprint", "Imprint must be specified").trim().min_length(1).escape(),
    field("status").escape(),
    field("due_back", "Invalid date").optional(check_falsy=True).is_iso8601().to_date(),
]
