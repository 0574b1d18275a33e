"""
Sign-in endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from . import dependencies, schemas, security, service

router = APIRouter()

LOGIN_PATH = "/login"


@router.post("/login")
async def login(request: Request) -> Response:
    form = await request.form()
    outcome = await service.authenticate(None, form)
    if not outcome.ok:
        return JSONResponse(
            {"message": outcome.error},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    target = service.login_redirect_target(form.get("redirectTo"))
    response = RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        dependencies.ACCESS_TOKEN_COOKIE,
        outcome.session.access_token,
        max_age=security.access_token_expire_minutes() * 60,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
async def logout() -> Response:
    response = RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(dependencies.ACCESS_TOKEN_COOKIE)
    return response


@router.get("/me")
async def me(
    access_token: str = Depends(dependencies.get_access_token),
) -> schemas.UserResponse:
    return await service.me(access_token)
