"""
Customer form schema.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

# Letters (including accented Latin), spaces, apostrophes, hyphens and periods.
NAME_PATTERN = re.compile(r"[A-Za-z\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u024F' .\-]+")

URL_PATTERN = re.compile(r"^(https?)://(?=.*\.[a-z]{2,})[^\s$.?#].[^\s]*$", re.IGNORECASE)


class CustomerForm(BaseModel):
    name: str
    email: str | None = None
    url: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise PydanticCustomError("name_required", "Name is a required field")
        value = value.strip()
        if len(value) < 1:
            raise PydanticCustomError("name_too_short", "Name must contain at least 1 character.")
        if NAME_PATTERN.fullmatch(value) is None:
            raise PydanticCustomError("name_invalid", "Name can only have valid characters.")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise PydanticCustomError("email_type", "Invalid Email")
        return value

    @field_validator("url", mode="before")
    @classmethod
    def _check_url(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        if not isinstance(value, str) or URL_PATTERN.fullmatch(value) is None:
            raise PydanticCustomError("url_invalid", "Please enter a valid URL")
        return value
