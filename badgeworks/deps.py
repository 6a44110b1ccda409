import logging

from fastapi import Cookie, Header, HTTPException, status

from badgeworks.ai.providers import get_image_provider as _image_provider, get_text_provider as _text_provider
from badgeworks.ai.providers import ImageProvider, TextProvider
from badgeworks.core.config import settings
from badgeworks.core.errors import ProviderError
from badgeworks.core.storage import Storage, get_storage as _storage
from badgeworks.db import get_db
from badgeworks.security import verify_admin_key, is_admin_token

__all__ = ["get_db", "require_admin", "get_text_provider", "get_image_provider", "get_storage"]

log = logging.getLogger("deps")
PROVIDER_NOT_CONFIGURED = "AI provider not configured"


def require_admin(
    authorization: str | None = Header(default=None),
    admin_auth: str | None = Cookie(default=None, alias=settings.AUTH_COOKIE),
) -> None:
    """Capacidad única de admin: `Authorization: Bearer <ADMIN_KEY>` o cookie firmada."""
    if authorization and authorization.startswith("Bearer "):
        if verify_admin_key(authorization[len("Bearer "):].strip()):
            return
    if is_admin_token(admin_auth):
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_text_provider() -> TextProvider:
    try:
        return _text_provider()
    except ProviderError:
        # el detalle (nombre/clave mal configurados) solo va al log
        log.exception("proveedor de texto mal configurado")
        raise HTTPException(status_code=500, detail=PROVIDER_NOT_CONFIGURED)


def get_image_provider() -> ImageProvider:
    try:
        return _image_provider()
    except ProviderError:
        log.exception("proveedor de imagen mal configurado")
        raise HTTPException(status_code=500, detail=PROVIDER_NOT_CONFIGURED)


def get_storage() -> Storage:
    return _storage()
