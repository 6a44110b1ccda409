# badgeworks/ai/providers.py
"""
Proveedores de IA detrás de dos interfaces pequeñas:

- TextProvider.complete_json(system, user) -> str   (texto que debería ser JSON)
- ImageProvider.generate_image(prompt, quality) -> str   (URL http(s) o data:)

La elección es explícita (TEXT_PROVIDER / IMAGE_PROVIDER en la config),
no depende de qué API key esté presente. Sin reintentos: un fallo se
propaga como ProviderError.
"""
import logging
from typing import Protocol

import requests

from badgeworks.core.config import settings, Settings
from badgeworks.core.errors import ProviderError

log = logging.getLogger("ai")

OPENAI_BASE_URL = "https://api.openai.com/v1"
ANTHROPIC_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_VERSION = "2023-06-01"
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

MAX_BRIEF_TOKENS = 500


def _post_json(session: requests.Session, provider: str, url: str, *,
               payload: dict, headers: dict | None = None,
               params: dict | None = None, timeout: int = 60) -> dict:
    try:
        resp = session.post(url, params=params, headers=headers, json=payload, timeout=timeout)
    except requests.RequestException as e:
        raise ProviderError(f"[{provider}] request failed: {e}") from e
    if resp.status_code != 200:
        raise ProviderError(f"[{provider}] non-200: {resp.status_code} body={resp.text[:400]}")
    try:
        return resp.json()
    except ValueError as e:
        raise ProviderError(f"[{provider}] respuesta no es JSON") from e


class TextProvider(Protocol):
    name: str
    model: str

    def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        """Devuelve el texto crudo del modelo (se espera un objeto JSON)."""
        ...


class ImageProvider(Protocol):
    name: str
    model: str

    def generate_image(self, prompt: str, quality: str = "standard") -> str:
        """Devuelve una URL (http(s) o data:) con la imagen generada."""
        ...


class _BaseProvider:
    name = "base"
    key_env = ""

    def __init__(self, api_key: str, model: str, session: requests.Session | None = None):
        self.api_key = (api_key or "").strip()
        self.model = (model or "").strip()
        self.session = session or requests.Session()  # una sesión por proveedor

    def ensure_ready(self):
        if not self.api_key:
            raise ProviderError(f"{self.key_env} no está definido ({self.name} deshabilitado).")
        if not self.model:
            raise ProviderError(f"Modelo de {self.name} no está definido.")


# ------------------ Texto ------------------
class OpenAITextProvider(_BaseProvider):
    name = "openai"
    key_env = "OPENAI_API_KEY"

    def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        self.ensure_ready()
        data = _post_json(
            self.session, self.name, f"{OPENAI_BASE_URL}/chat/completions",
            headers={"Authorization": f"Bearer {self.api_key}"},
            payload={
                "model": self.model,
                "messages": [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                "response_format": {"type": "json_object"},
                "max_tokens": MAX_BRIEF_TOKENS,
            },
        )
        try:
            return data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"[openai] respuesta inesperada: {str(data)[:400]}") from e


class AnthropicTextProvider(_BaseProvider):
    name = "anthropic"
    key_env = "ANTHROPIC_API_KEY"

    def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        self.ensure_ready()
        data = _post_json(
            self.session, self.name, f"{ANTHROPIC_BASE_URL}/messages",
            headers={"x-api-key": self.api_key, "anthropic-version": ANTHROPIC_VERSION},
            payload={
                "model": self.model,
                "max_tokens": MAX_BRIEF_TOKENS,
                "system": system_prompt,
                "messages": [{"role": "user", "content": user_prompt}],
            },
        )
        blocks = data.get("content")
        if not isinstance(blocks, list):
            raise ProviderError(f"[anthropic] respuesta inesperada: {str(data)[:400]}")
        return "".join(b.get("text", "") for b in blocks if isinstance(b, dict) and b.get("type") == "text")


def _gemini_parts(provider: str, data: dict) -> list:
    try:
        cand = (data.get("candidates") or [])[0]
    except IndexError as e:
        raise ProviderError(f"[{provider}] sin candidatos: {str(data)[:400]}") from e
    return (cand.get("content") or {}).get("parts") or []


class GeminiTextProvider(_BaseProvider):
    name = "gemini"
    key_env = "GEMINI_API_KEY"

    def complete_json(self, system_prompt: str, user_prompt: str) -> str:
        self.ensure_ready()
        data = _post_json(
            self.session, self.name, f"{GEMINI_BASE_URL}/{self.model}:generateContent",
            params={"key": self.api_key},
            payload={
                "systemInstruction": {"parts": [{"text": system_prompt}]},
                "generationConfig": {"temperature": 0.7, "responseMimeType": "application/json"},
                "contents": [{"parts": [{"text": user_prompt}]}],
            },
        )
        # Concatena todos los .text por si vinieran fragmentados
        parts = _gemini_parts(self.name, data)
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict)).strip()


# ------------------ Imagen ------------------
class OpenAIImageProvider(_BaseProvider):
    name = "openai"
    key_env = "OPENAI_API_KEY"

    def generate_image(self, prompt: str, quality: str = "standard") -> str:
        self.ensure_ready()
        payload = {
            "model": self.model,
            "prompt": prompt,
            "n": 1,
            "size": "1024x1024",
            "quality": quality or "standard",
        }
        if self.model.startswith("dall-e-3"):
            payload["style"] = "natural"
        data = _post_json(
            self.session, self.name, f"{OPENAI_BASE_URL}/images/generations",
            headers={"Authorization": f"Bearer {self.api_key}"},
            payload=payload,
            timeout=120,
        )
        items = data.get("data") or []
        url = items[0].get("url") if items and isinstance(items[0], dict) else None
        if not url:
            raise ProviderError("[openai] Failed to generate image (sin url)")
        return url


class GeminiImageProvider(_BaseProvider):
    name = "gemini"
    key_env = "GEMINI_API_KEY"

    def generate_image(self, prompt: str, quality: str = "standard") -> str:
        # Gemini no tiene niveles de calidad; devuelve bytes inline -> data: URL
        self.ensure_ready()
        data = _post_json(
            self.session, self.name, f"{GEMINI_BASE_URL}/{self.model}:generateContent",
            params={"key": self.api_key},
            payload={"contents": [{"parts": [{"text": prompt}]}]},
            timeout=120,
        )
        for p in _gemini_parts(self.name, data):
            inline = p.get("inlineData") or p.get("inline_data")
            if inline and inline.get("data"):
                mime = inline.get("mimeType") or inline.get("mime_type") or "image/png"
                return f"data:{mime};base64,{inline['data']}"
        raise ProviderError("[gemini] Failed to generate image (sin inlineData)")


# ------------------ Registro ------------------
_TEXT_PROVIDERS = {
    "openai": lambda s: OpenAITextProvider(s.OPENAI_API_KEY, s.OPENAI_TEXT_MODEL),
    "anthropic": lambda s: AnthropicTextProvider(s.ANTHROPIC_API_KEY, s.ANTHROPIC_MODEL),
    "gemini": lambda s: GeminiTextProvider(s.GEMINI_API_KEY, s.GEMINI_MODEL),
}

_IMAGE_PROVIDERS = {
    "openai": lambda s: OpenAIImageProvider(s.OPENAI_API_KEY, s.OPENAI_IMAGE_MODEL),
    "gemini": lambda s: GeminiImageProvider(s.GEMINI_API_KEY, s.GEMINI_IMAGE_MODEL),
}


def get_text_provider(name: str | None = None, cfg: Settings = settings) -> TextProvider:
    key = (name or cfg.TEXT_PROVIDER).strip().lower()
    factory = _TEXT_PROVIDERS.get(key)
    if factory is None:
        raise ProviderError(f"TEXT_PROVIDER desconocido: {key!r} (opciones: {', '.join(_TEXT_PROVIDERS)})")
    return factory(cfg)


def get_image_provider(name: str | None = None, cfg: Settings = settings) -> ImageProvider:
    key = (name or cfg.IMAGE_PROVIDER).strip().lower()
    factory = _IMAGE_PROVIDERS.get(key)
    if factory is None:
        raise ProviderError(f"IMAGE_PROVIDER desconocido: {key!r} (opciones: {', '.join(_IMAGE_PROVIDERS)})")
    return factory(cfg)
