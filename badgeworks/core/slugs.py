import re
import secrets
import string
import time

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")

PERMALINK_ALPHABET = string.ascii_lowercase + string.digits
PERMALINK_LENGTH = 8
SLUG_BASE_MAX = 40   # deja sitio para el sufijo de timestamp (columna de 100)


def slugify(name: str, max_length: int = SLUG_BASE_MAX) -> str:
    base = _NON_ALNUM_RE.sub("-", (name or "").lower()).strip("-")
    base = base[:max_length].strip("-")
    return base or "badge"


def _base36(n: int) -> str:
    digits = string.digits + string.ascii_lowercase
    if n == 0:
        return "0"
    out = []
    while n:
        n, r = divmod(n, 36)
        out.append(digits[r])
    return "".join(reversed(out))


def generate_slug(name: str, now: float | None = None) -> str:
    """
    slug = <nombre normalizado>-<epoch en ms, base 36>.
    El sufijo desambigua nombres repetidos; si aun así choca, lo rechaza
    la restricción única de la tabla (no hay reintento).
    """
    millis = int((time.time() if now is None else now) * 1000)
    return f"{slugify(name)}-{_base36(millis)}"


def generate_permalink() -> str:
    return "".join(secrets.choice(PERMALINK_ALPHABET) for _ in range(PERMALINK_LENGTH))
