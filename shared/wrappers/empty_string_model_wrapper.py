import re
from datetime import date, datetime
from typing import Any, Union, get_args, get_origin
from uuid import UUID

from pydantic import BaseModel, model_validator

# direction marks and BOMs pasted in from spreadsheets
INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def _accepts(annotation: Any, *types) -> bool:
    """True when the annotation is one of `types` or an Optional/Union containing one."""
    if annotation in types:
        return True
    return get_origin(annotation) is Union and any(a in types for a in get_args(annotation))


def deep_clean(value: Any):
    """Strip strings and invisible characters; blank strings become None."""
    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}
    if isinstance(value, list):
        return [deep_clean(v) for v in value]
    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return cleaned or None
    return value


def safe_parse_date(value: Any):
    """ISO date (or datetime) string to a date; anything unparseable is None."""
    if value is None or isinstance(value, (date, datetime)):
        return value
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        return None


class EmptyStringModel(BaseModel):
    """
    Base for query parameter models.

    Incoming blanks are treated as missing and bad dates are dropped. After
    validation, missing text and id filters read as "" so callers can test
    them with a plain truthiness check; dates stay None.
    """
    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if not isinstance(values, dict):
            return values

        values = deep_clean(values)
        for field_name, field in cls.model_fields.items():
            if field_name in values and _accepts(field.annotation, date, datetime):
                values[field_name] = safe_parse_date(values[field_name])
        return values

    @model_validator(mode="after")
    def blank_missing_filters(self):
        for field_name, field in type(self).model_fields.items():
            if getattr(self, field_name) is None and _accepts(field.annotation, str, UUID):
                object.__setattr__(self, field_name, "")
        return self
