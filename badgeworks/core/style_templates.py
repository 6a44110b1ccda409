from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class StyleTemplate:
    id: str
    name: str
    description: str
    visual_style: str
    color_guidance: str
    icon_style: str
    typography: str
    layout_rules: str
    examples: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


STYLE_TEMPLATES: dict[str, StyleTemplate] = {
    "flat-modern": StyleTemplate(
        id="flat-modern",
        name="Flat Modern",
        description="Clean, minimalist design with solid colors",
        visual_style="Flat design aesthetic, no gradients or shadows, solid fill colors, geometric shapes",
        color_guidance="Use maximum 3 colors, high contrast between elements, vibrant but not neon",
        icon_style="Simple geometric icon, single color, centered, takes up 40% of badge area",
        typography="Bold sans-serif font, all caps for title, clean and readable",
        layout_rules="Centered composition, generous whitespace, icon above text, symmetrical",
        examples=["Material Design badges", "iOS app achievement badges"],
    ),
    "vintage-stamp": StyleTemplate(
        id="vintage-stamp",
        name="Vintage Stamp",
        description="Classic postal stamp or certificate style",
        visual_style="Vintage certificate aesthetic, ornamental borders, aged paper texture feel",
        color_guidance="Muted colors, sepia tones or deep rich colors like burgundy and navy",
        icon_style="Detailed line art or engraving style icon, classical illustration",
        typography="Serif or decorative font, mix of sizes, formal certificate style",
        layout_rules="Ornate border, central emblem, text ribbons or banners",
        examples=["Postal stamps", "University certificates", "Classical medals"],
    ),
    "gaming-achievement": StyleTemplate(
        id="gaming-achievement",
        name="Gaming Achievement",
        description="Video game style achievement badge",
        visual_style="Video game UI aesthetic, crisp edges, slight metallic sheen, star or gem accents",
        color_guidance="Gold, silver, bronze metallic colors with bright accent colors",
        icon_style="Detailed game-style icon, can have subtle highlights, action-oriented",
        typography="Bold gaming font, slightly stylized, easy to read at small sizes",
        layout_rules="Circular or shield shape, stars or points indicators, level/tier suggestion",
        examples=["Xbox achievements", "PlayStation trophies", "Steam badges"],
    ),
    "corporate-professional": StyleTemplate(
        id="corporate-professional",
        name="Corporate Professional",
        description="Business and professional certification style",
        visual_style="Professional, trustworthy, clean lines, subtle sophistication",
        color_guidance="Corporate blues, grays, single accent color, conservative palette",
        icon_style="Simplified professional icon, abstract or symbolic, minimal detail",
        typography="Professional sans-serif, clean and modern, excellent readability",
        layout_rules="Structured grid, clear hierarchy, plenty of negative space",
        examples=["LinkedIn certifications", "Professional badges", "Corporate awards"],
    ),
    "playful-cartoon": StyleTemplate(
        id="playful-cartoon",
        name="Playful Cartoon",
        description="Fun, animated style for casual achievements",
        visual_style="Cartoon illustration style, rounded edges, friendly and approachable",
        color_guidance="Bright, cheerful colors, pastels or vibrant primaries, fun combinations",
        icon_style="Cute character or mascot style, expressive, slightly exaggerated",
        typography="Rounded, friendly font, playful but readable, can be slightly bouncy",
        layout_rules="Dynamic composition, can be asymmetrical, fun background elements",
        examples=["Duolingo achievements", "Kids app rewards", "Social media badges"],
    ),
    "technical-blueprint": StyleTemplate(
        id="technical-blueprint",
        name="Technical Blueprint",
        description="Engineering and technical achievement style",
        visual_style="Technical drawing aesthetic, blueprint style, precise lines, grid background",
        color_guidance="Monochromatic blue and white, or dark mode with neon accents",
        icon_style="Technical diagram style, wireframe, schematic representation",
        typography="Monospace or technical font, precise, includes version numbers or codes",
        layout_rules="Grid-based layout, technical annotations, measurement marks",
        examples=["GitHub badges", "Technical certifications", "Engineering awards"],
    ),
}


def get_template_prompt(template_id: str) -> str:
    template = STYLE_TEMPLATES.get(template_id or "")
    if not template:
        return ""
    return (
        f"Visual Style: {template.visual_style}\n"
        f"Color Guidance: {template.color_guidance}\n"
        f"Icon Style: {template.icon_style}\n"
        f"Typography: {template.typography}\n"
        f"Layout: {template.layout_rules}"
    )


def combine_template_with_brief(template_id: str | None, custom_description: str | None = None) -> str:
    """Plantilla + notas libres del admin. Sin plantilla válida queda solo el texto libre."""
    template = STYLE_TEMPLATES.get(template_id or "")
    if not template:
        return custom_description or ""

    combined = get_template_prompt(template.id)
    if custom_description:
        combined += f"\nAdditional style notes: {custom_description}"
    if template.examples:
        combined += f"\nReference examples: {', '.join(template.examples)}"
    return combined
