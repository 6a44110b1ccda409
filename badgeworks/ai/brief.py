# badgeworks/ai/brief.py
import json
import logging
import re

from badgeworks.ai.prompts import build_brief_system_prompt, build_brief_user_prompt, style_description
from badgeworks.ai.providers import TextProvider
from badgeworks.core.style_templates import combine_template_with_brief
from badgeworks.schemas.brief import BadgeBrief, SHORT_TITLE_MAX

log = logging.getLogger("ai")

# paleta fija por estilo para el brief de respaldo: primary, accent, bg
FALLBACK_PALETTES = {
    "round-medal-minimal": ("#1E3A8A", "#F59E0B", "#F8FAFC"),
    "shield-crest-modern": ("#0F766E", "#FACC15", "#F1F5F9"),
    "ribbon-plaque": ("#7C2D12", "#EAB308", "#FFFBEB"),
}
_DEFAULT_PALETTE = FALLBACK_PALETTES["round-medal-minimal"]


def extract_json_object(text: str) -> dict:
    """
    Limpia la respuesta del modelo y devuelve el objeto JSON.
    - quita cercas ``` y el prefijo 'json'
    - si el parse directo falla, recorta del primer '{' al último '}'
    Lanza ValueError si no hay un objeto JSON legible.
    """
    t = (text or "").strip()
    if not t:
        raise ValueError("respuesta vacía")

    if t.startswith("```"):
        t = t.strip("`").strip()
        if t.lower().startswith("json"):
            t = t[4:].strip()
    # a veces ponen la palabra 'json' como primera línea
    t = re.sub(r"^\s*json\s*[\r\n]+", "", t, flags=re.I)

    try:
        data = json.loads(t)
    except ValueError:
        first, last = t.find("{"), t.rfind("}")
        if first == -1 or last <= first:
            raise ValueError(f"sin objeto JSON: {t[:200]}")
        data = json.loads(t[first:last + 1])

    if not isinstance(data, dict):
        raise ValueError("el JSON no es un objeto")
    return data


def validate_brief(data) -> BadgeBrief:
    """Valida contra el esquema; lanza pydantic.ValidationError (subclase de ValueError)."""
    return BadgeBrief.model_validate(data)


def _fallback_title(name: str) -> str:
    title = ""
    for word in (name or "").split():
        candidate = f"{title} {word}".strip()
        if len(candidate) > SHORT_TITLE_MAX:
            break
        title = candidate
    return title or (name or "").strip()[:SHORT_TITLE_MAX].strip() or "Achievement"


def fallback_brief(name: str, description: str, style: str) -> BadgeBrief:
    """Brief determinista a partir del input; se usa cuando el modelo no devuelve JSON válido."""
    title = _fallback_title(name)
    words = (description or "").split()[:8]
    icon = f"a bold symbol representing {' '.join(words)}" if words else "a bold five-pointed star"
    primary, accent, bg = FALLBACK_PALETTES.get(style, _DEFAULT_PALETTE)
    return BadgeBrief(
        short_title=title,
        icon_concept=icon,
        colors={"primary": primary, "accent": accent, "bg": bg},
        image_prompt=(
            f"A {style_description(style)} achievement badge titled '{title}', "
            f"featuring {icon}, in {primary} with {accent} accents on a {bg} background"
        ),
    )


def enhance_description(description: str, style_template: str | None = None,
                        reference_style: str | None = None) -> str:
    if not (style_template or reference_style):
        return description
    guide = combine_template_with_brief(style_template or "", reference_style)
    if not guide:
        return description
    return f"{description}\n\nStyle Guide: {guide}"


def generate_badge_brief(provider: TextProvider, name: str, description: str, style: str, *,
                         style_template: str | None = None,
                         reference_style: str | None = None) -> BadgeBrief:
    """
    Una sola llamada al proveedor de texto. Errores del proveedor se propagan
    (ProviderError); JSON ilegible o fuera de esquema -> brief de respaldo.
    """
    user_prompt = build_brief_user_prompt(name, enhance_description(description, style_template, reference_style))
    log.info("brief: provider=%s model=%s style=%s", provider.name, provider.model, style)
    raw = provider.complete_json(build_brief_system_prompt(style), user_prompt)
    try:
        return validate_brief(extract_json_object(raw))
    except ValueError as e:
        log.warning("brief: respuesta inválida (%s); usando brief de respaldo", str(e)[:300])
        return fallback_brief(name, description, style)
