# badgeworks/ai/prompts.py
from badgeworks.schemas.brief import BadgeBrief, SHORT_TITLE_MAX

STYLE_DESCRIPTIONS = {
    "round-medal-minimal": "circular medal with scalloped edges, minimalist design",
    "shield-crest-modern": "shield or crest shape, modern heraldic style",
    "ribbon-plaque": "rectangular plaque with ribbon banner, achievement certificate style",
}

# lo que el modelo de imagen debe evitar (se repite explícito en cada prompt)
NEGATIVE_CONSTRAINTS = [
    "no duplicate or repeated badges",
    "no photorealism",
    "no busy or detailed backgrounds",
    "no tiny or unreadable text",
    "no extra words besides the title",
    "no watermarks or signatures",
    "no mockups, hands or tables holding the badge",
]


def style_description(style: str) -> str:
    return STYLE_DESCRIPTIONS.get(style, "clean modern badge")


def build_brief_system_prompt(style: str) -> str:
    return f"""You are a badge art director. Produce a SINGLE, concise visual brief for an AI image model to generate a clean, app-style achievement badge.

Constraints:
- Style: {style} ({style_description(style)})
- Text: 3 words or fewer, at most {SHORT_TITLE_MAX} characters (short title)
- Icon: 1 strong symbol matching the project description
- Palette: modern, high-contrast, accessible; every color as a hex code like #1E3A8A
- Layout: centered icon, clear title, whitespace

Output JSON only:
{{
  "short_title": "...",
  "icon_concept": "...",
  "colors": {{ "primary": "#RRGGBB", "accent": "#RRGGBB", "bg": "#RRGGBB" }},
  "image_prompt": "..."
}}"""


def build_brief_user_prompt(name: str, description: str) -> str:
    return f"Create a badge brief for:\nName: {name}\nDescription: {description}"


def build_badge_image_prompt(
    brief: BadgeBrief,
    style: str,
    *,
    style_guide: str = "",
    reference_style: str | None = None,
    quality: str = "standard",
) -> str:
    """
    Prompt largo en lenguaje natural para el modelo de imagen:
    título, icono, paleta, estilo, reglas de composición y lista negativa.
    """
    c = brief.colors
    lines = [
        f"Generate a single flat, minimal {style} achievement badge ({style_description(style)}).",
        f"Central icon: {brief.icon_concept}.",
        f'Title: "{brief.short_title}" in bold sans-serif lettering, spelled exactly like that.',
        f"Palette: primary {c.primary}, accent {c.accent}, background {c.bg}.",
        f"Art direction: {brief.image_prompt}",
        "Aesthetic: app-badge, clean, vector-like, high contrast.",
    ]
    if style_guide:
        lines.append(f"Style guide:\n{style_guide}")
    if reference_style:
        lines.append(f"Reference style notes: {reference_style}")
    if quality == "hd":
        lines.append("Render with crisp edges and fine, well-defined detail.")
    lines += [
        "Composition: exactly ONE badge, centered, fully visible with even margins on every side.",
        "Background: transparent or plain solid white, nothing else around the badge.",
        "Avoid: " + "; ".join(NEGATIVE_CONSTRAINTS) + ".",
    ]
    return "\n".join(lines)
