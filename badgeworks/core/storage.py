# badgeworks/core/storage.py
"""
Dónde terminan las imágenes procesadas de cada insignia.

- LocalStorage: archivos bajo MEDIA_DIR servidos en /media (desarrollo, VPS).
- BlobStorage: object store HTTP (API REST de Vercel Blob) -> URL pública.
"""
import logging
from pathlib import Path
from typing import Protocol

import requests

from badgeworks.core.config import settings, Settings
from badgeworks.core.errors import StorageError
from badgeworks.core.settings_static import MEDIA_DIR, MEDIA_URL_PREFIX

log = logging.getLogger("storage")


class Storage(Protocol):
    def put(self, path: str, data: bytes, content_type: str) -> str:
        """Guarda `data` en `path` (p.ej. badges/<slug>/full.png) y devuelve la URL pública."""
        ...

    def read(self, url: str) -> bytes:
        """Lee de vuelta un objeto a partir de la URL que devolvió put()."""
        ...


class LocalStorage:
    def __init__(self, root: Path = MEDIA_DIR, url_prefix: str = MEDIA_URL_PREFIX):
        self.root = Path(root).resolve()
        self.url_prefix = url_prefix.rstrip("/")

    def _resolve(self, path: str) -> Path:
        dest = (self.root / path.lstrip("/")).resolve()
        # evita salir de root con ../
        if self.root not in dest.parents:
            raise StorageError(f"ruta fuera del almacenamiento: {path}")
        return dest

    def put(self, path: str, data: bytes, content_type: str) -> str:
        dest = self._resolve(path)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(data)
        except OSError as e:
            raise StorageError(f"no se pudo escribir {dest}: {e}") from e
        return f"{self.url_prefix}/{dest.relative_to(self.root).as_posix()}"

    def read(self, url: str) -> bytes:
        if not url.startswith(self.url_prefix + "/"):
            raise StorageError(f"URL no pertenece al almacenamiento local: {url}")
        path = self._resolve(url[len(self.url_prefix) + 1:])
        try:
            return path.read_bytes()
        except OSError as e:
            raise StorageError(f"no se pudo leer {path}: {e}") from e


class BlobStorage:
    def __init__(self, token: str, api_url: str, session: requests.Session | None = None):
        self.token = (token or "").strip()
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()

    def put(self, path: str, data: bytes, content_type: str) -> str:
        if not self.token:
            raise StorageError("BLOB_READ_WRITE_TOKEN no está definido")
        try:
            resp = self.session.put(
                f"{self.api_url}/{path.lstrip('/')}",
                data=data,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "x-content-type": content_type,
                    "x-add-random-suffix": "0",
                    "x-api-version": "7",
                },
                timeout=60,
            )
        except requests.RequestException as e:
            raise StorageError(f"[blob] request failed: {e}") from e
        if resp.status_code != 200:
            raise StorageError(f"[blob] non-200: {resp.status_code} body={resp.text[:400]}")
        url = (resp.json() or {}).get("url")
        if not url:
            raise StorageError("[blob] respuesta sin url")
        return url

    def read(self, url: str) -> bytes:
        try:
            resp = self.session.get(url, timeout=60)
        except requests.RequestException as e:
            raise StorageError(f"[blob] request failed: {e}") from e
        if resp.status_code != 200:
            raise StorageError(f"[blob] non-200: {resp.status_code}")
        return resp.content


def get_storage(cfg: Settings = settings) -> Storage:
    backend = cfg.STORAGE_BACKEND
    if backend == "blob":
        return BlobStorage(cfg.BLOB_READ_WRITE_TOKEN, cfg.BLOB_API_URL)
    if backend != "local":
        log.warning("STORAGE_BACKEND=%r desconocido; usando local", backend)
    return LocalStorage()
