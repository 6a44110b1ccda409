from pathlib import Path

from badgeworks.core.config import settings

# Raíz del paquete badgeworks/
APP_DIR = Path(__file__).resolve().parents[1]
REPO_ROOT = APP_DIR.parent

# === MEDIA: imágenes de insignias cuando STORAGE_BACKEND=local ===
# Se puede mover con la var de entorno MEDIA_DIR
MEDIA_DIR = Path(settings.MEDIA_DIR or REPO_ROOT / "static").resolve()
MEDIA_DIR.mkdir(parents=True, exist_ok=True)
(MEDIA_DIR / "badges").mkdir(parents=True, exist_ok=True)

MEDIA_URL_PREFIX = "/media"

# === Plantillas HTML de las páginas públicas ===
TEMPLATES_DIR = APP_DIR / "templates"
