# badgeworks/core/utils_imgs.py
import base64
import binascii
import io
import logging
from dataclasses import dataclass

import requests
from PIL import Image, ImageDraw, ImageFont, ImageOps, UnidentifiedImageError

from badgeworks.core.errors import ImageProcessingError
from badgeworks.core.storage import Storage

log = logging.getLogger("images")

FULL_SIZE = (1024, 1024)
THUMB_SIZE = (512, 512)
THUMB_WEBP_QUALITY = 90
OG_SIZE = (1200, 630)
_TRANSPARENT = (255, 255, 255, 0)


@dataclass
class StoredBadgeImages:
    image_url: str
    thumb_url: str


# ------------- descarga -------------------------------------
def fetch_image_bytes(url: str, timeout: int = 60) -> bytes:
    """Descarga la imagen generada. Acepta http(s) y data: (proveedores que devuelven bytes inline)."""
    if url.startswith("data:"):
        try:
            header, payload = url.split(",", 1)
            if ";base64" not in header:
                raise ValueError("data: URL sin base64")
            return base64.b64decode(payload, validate=True)
        except (ValueError, binascii.Error) as e:
            raise ImageProcessingError(f"data: URL inválida: {e}") from e
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise ImageProcessingError(f"Failed to fetch image: {e}") from e
    if resp.status_code != 200:
        raise ImageProcessingError(f"Failed to fetch image: HTTP {resp.status_code}")
    return resp.content


# ------------- redimensionado --------------------------------
def _open_rgba(raw: bytes) -> Image.Image:
    try:
        img = Image.open(io.BytesIO(raw))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ImageProcessingError(f"imagen ilegible: {e}") from e
    return img.convert("RGBA")


def _contain_padded(img: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Ajusta dentro de `size` sin recortar y rellena con transparente (fit=contain)."""
    fitted = ImageOps.contain(img, size, Image.Resampling.LANCZOS)
    canvas = Image.new("RGBA", size, _TRANSPARENT)
    canvas.paste(fitted, ((size[0] - fitted.width) // 2, (size[1] - fitted.height) // 2), fitted)
    return canvas


def render_badge_assets(raw: bytes) -> tuple[bytes, bytes]:
    """Devuelve (full PNG 1024x1024, thumb WebP 512x512)."""
    img = _open_rgba(raw)

    full_buf = io.BytesIO()
    _contain_padded(img, FULL_SIZE).save(full_buf, "PNG")

    thumb_buf = io.BytesIO()
    _contain_padded(img, THUMB_SIZE).save(thumb_buf, "WEBP", quality=THUMB_WEBP_QUALITY)
    return full_buf.getvalue(), thumb_buf.getvalue()


def process_and_store_badge(image_url: str, slug: str, storage: Storage) -> StoredBadgeImages:
    """
    Descarga, genera las dos versiones y las guarda bajo badges/<slug>/.
    Si falla la segunda escritura la primera queda como está (sin limpieza).
    """
    raw = fetch_image_bytes(image_url)
    full_png, thumb_webp = render_badge_assets(raw)
    image_url_out = storage.put(f"badges/{slug}/full.png", full_png, "image/png")
    thumb_url_out = storage.put(f"badges/{slug}/thumb.webp", thumb_webp, "image/webp")
    log.info("badge %s guardada (%d + %d bytes)", slug, len(full_png), len(thumb_webp))
    return StoredBadgeImages(image_url=image_url_out, thumb_url=thumb_url_out)


# ------------- tarjeta social (og:image) ---------------------
def _font(size: int):
    for name in ("DejaVuSans-Bold.ttf", "arial.ttf"):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def _fit_text(draw: ImageDraw.ImageDraw, text: str, font, max_width: int) -> str:
    if draw.textlength(text, font=font) <= max_width:
        return text
    while text and draw.textlength(text + "…", font=font) > max_width:
        text = text[:-1]
    return text.rstrip() + "…"


def _draw_centered(draw: ImageDraw.ImageDraw, y: int, text: str, font, fill, max_width: int) -> int:
    text = _fit_text(draw, text, font, max_width)
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    draw.text(((OG_SIZE[0] - (right - left)) / 2, y), text, fill=fill, font=font)
    return y + (bottom - top)


def render_award_card_png(details: dict, badge_bytes: bytes | None = None) -> bytes:
    """
    Tarjeta 1200x630 para og:image / twitter:image.
    `details` es la fila de get_award_details (badge_name, person_name, ...).
    """
    w, h = OG_SIZE
    img = Image.new("RGB", OG_SIZE, color=(248, 250, 252))
    draw = ImageDraw.Draw(img)
    # degradado vertical suave #F8FAFC -> #E2E8F0
    for y in range(h):
        t = y / (h - 1)
        shade = (int(248 - 22 * t), int(250 - 18 * t), int(252 - 12 * t))
        draw.line([(0, y), (w, y)], fill=shade)

    y = 40
    if badge_bytes:
        try:
            badge = _contain_padded(_open_rgba(badge_bytes), (300, 300))
            img.paste(badge, ((w - 300) // 2, y), badge)
        except ImageProcessingError as e:
            log.warning("og: no se pudo dibujar la insignia: %s", e)
    y += 300 + 24

    max_w = w - 160
    y = _draw_centered(draw, y, details.get("badge_name") or "", _font(48), (30, 58, 138), max_w) + 18
    y = _draw_centered(draw, y, f"Awarded to {details.get('person_name') or ''}", _font(28), (100, 116, 139), max_w) + 12
    y = _draw_centered(draw, y, details.get("project_name") or "", _font(24), (148, 163, 184), max_w) + 14
    citation = (details.get("citation") or "").strip()
    if citation:
        _draw_centered(draw, y, f"“{citation}”", _font(20), (100, 116, 139), max_w)

    footer = _font(18)
    _draw_centered(draw, h - 40, "Badges with Personality", footer, (148, 163, 184), max_w)

    out = io.BytesIO()
    img.save(out, "PNG")
    return out.getvalue()
