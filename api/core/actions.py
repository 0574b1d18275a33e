"""
Result values returned by form actions.

A handler either fails with an `ActionState` the form can re-display, or
succeeds. Create/update success navigates away (`Redirect`); delete success
returns `None` because the list is refreshed in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse, Response


@dataclass(frozen=True)
class ActionState:
    errors: dict[str, list[str]] = field(default_factory=dict)
    message: str | None = None

    def to_dict(self) -> dict:
        payload: dict = {}
        if self.errors:
            payload["errors"] = {name: list(messages) for name, messages in self.errors.items()}
        if self.message is not None:
            payload["message"] = self.message
        return payload


@dataclass(frozen=True)
class Redirect:
    location: str


ActionResult = Union[ActionState, Redirect, None]


def to_response(result: ActionResult) -> Response:
    """
    Render an action result as an HTTP response.
    """
    if isinstance(result, Redirect):
        # 303 makes the browser follow up with a GET.
        return RedirectResponse(result.location, status_code=status.HTTP_303_SEE_OTHER)

    if result is None:
        return JSONResponse({"ok": True})

    status_code = (
        status.HTTP_422_UNPROCESSABLE_ENTITY
        if result.errors
        else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(result.to_dict(), status_code=status_code)
