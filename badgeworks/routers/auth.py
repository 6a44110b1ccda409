import logging

from fastapi import APIRouter, HTTPException, Response, status

from badgeworks.core.config import settings
from badgeworks.schemas.auth import LoginIn
from badgeworks.security import verify_admin_key, create_admin_token

log = logging.getLogger("auth")
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("")
def login(payload: LoginIn, response: Response):
    # nunca loguear la clave recibida
    if not verify_admin_key(payload.key):
        log.warning("login de admin rechazado")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid key")

    response.set_cookie(
        key=settings.AUTH_COOKIE,
        value=create_admin_token(),
        max_age=settings.AUTH_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
        path="/",
    )
    return {"success": True}


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.AUTH_COOKIE, path="/")
    return {"success": True}
