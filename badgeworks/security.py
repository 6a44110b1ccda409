import hashlib
import hmac
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt

from badgeworks.core.config import settings

ALGORITHM = "HS256"
ADMIN_SUBJECT = "admin"


def _key_fingerprint() -> str:
    # cambia si se rota ADMIN_KEY -> las cookies anteriores dejan de valer
    return hashlib.sha256(settings.ADMIN_KEY.encode()).hexdigest()[:16]


def verify_admin_key(candidate: str | None) -> bool:
    """Comparación en tiempo constante contra ADMIN_KEY; sin ADMIN_KEY nadie es admin."""
    if not settings.ADMIN_KEY or not candidate:
        return False
    return hmac.compare_digest(candidate.encode(), settings.ADMIN_KEY.encode())


def create_admin_token(expires_delta: timedelta | None = None) -> str:
    expires_delta = expires_delta or timedelta(seconds=settings.AUTH_COOKIE_MAX_AGE)
    expire = datetime.now(tz=timezone.utc) + expires_delta
    to_encode = {"sub": ADMIN_SUBJECT, "akf": _key_fingerprint(), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_admin_token(token: str) -> dict:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])


def is_admin_token(token: str | None) -> bool:
    if not token or not settings.ADMIN_KEY:
        return False
    try:
        payload = decode_admin_token(token)
    except JWTError:
        return False
    return payload.get("sub") == ADMIN_SUBJECT and payload.get("akf") == _key_fingerprint()
