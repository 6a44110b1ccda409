# badgeworks/ai/image.py
import logging
import random

from badgeworks.ai.prompts import build_badge_image_prompt
from badgeworks.ai.providers import ImageProvider
from badgeworks.core.style_templates import combine_template_with_brief
from badgeworks.schemas.brief import BadgeBrief

log = logging.getLogger("ai")


def generate_badge_image(provider: ImageProvider, brief: BadgeBrief, style: str, *,
                         quality: str | None = None,
                         style_template: str | None = None,
                         reference_style: str | None = None) -> tuple[str, str]:
    """Devuelve (url_de_la_imagen, prompt_exacto_usado). Una llamada, sin reintentos."""
    style_guide = combine_template_with_brief(style_template) if style_template else ""
    prompt = build_badge_image_prompt(
        brief, style,
        style_guide=style_guide,
        reference_style=reference_style,
        quality=quality or "standard",
    )
    log.info("image: provider=%s model=%s quality=%s", provider.name, provider.model, quality or "standard")
    url = provider.generate_image(prompt, quality=quality or "standard")
    return url, prompt


def random_seed() -> int:
    # solo informativo: los proveedores no aceptan semilla
    return random.randint(0, 999_999)
