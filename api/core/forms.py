"""
Raw form data -> typed record.

`safe_parse()` never raises for bad input. It returns a `ParseResult` that
either carries the validated model or every field error found, keyed by the
name the form submitted (the field alias when one is set).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_ERROR_KEY = "_form"


@dataclass(frozen=True)
class ParseResult(Generic[ModelT]):
    value: ModelT | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.value is not None and not self.errors


def _field_names(model: type[BaseModel]) -> dict[str, str]:
    names: dict[str, str] = {}
    for name, info in model.model_fields.items():
        alias = info.validation_alias if isinstance(info.validation_alias, str) else info.alias
        names[name] = alias or name
    return names


def flatten_errors(model: type[BaseModel], exc: ValidationError) -> dict[str, list[str]]:
    names = _field_names(model)
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        key = str(loc[0]) if loc else FORM_ERROR_KEY
        key = names.get(key, key)
        messages = errors.setdefault(key, [])
        message = str(error.get("msg") or "Invalid value.")
        if message not in messages:
            messages.append(message)
    return errors


def safe_parse(model: type[ModelT], form: Mapping[str, Any]) -> ParseResult[ModelT]:
    raw = {name: form.get(name) for name in _field_names(model).values()}
    try:
        value = model.model_validate(raw)
    except ValidationError as exc:
        return ParseResult(errors=flatten_errors(model, exc))
    return ParseResult(value=value)
