import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

BadgeStyle = Literal['round-medal-minimal', 'shield-crest-modern', 'ribbon-plaque']
Quality = Literal['standard', 'hd']

BADGE_STYLES: tuple[str, ...] = ('round-medal-minimal', 'shield-crest-modern', 'ribbon-plaque')
SHORT_TITLE_MAX = 15

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class BriefColors(BaseModel):
    primary: str
    accent: str
    bg: str

    @field_validator('primary', 'accent', 'bg')
    @classmethod
    def validate_hex(cls, v: str) -> str:
        v = (v or "").strip()
        if not _HEX_RE.match(v):
            raise ValueError("Color debe ser hex (#RGB o #RRGGBB)")
        return v.upper()


class BadgeBrief(BaseModel):
    short_title: str = Field(min_length=1, max_length=SHORT_TITLE_MAX)
    icon_concept: str = Field(min_length=1)
    colors: BriefColors
    image_prompt: str = Field(min_length=1)

    @field_validator('short_title', 'icon_concept', 'image_prompt', mode='before')
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class PreviewBriefIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    style: BadgeStyle
    styleTemplate: Optional[str] = None
    referenceStyle: Optional[str] = None
    quality: Optional[Quality] = None


class GenerateImageIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    style: BadgeStyle
    brief: BadgeBrief
    createdBy: str = Field(default='admin', min_length=1, max_length=100)
    styleTemplate: Optional[str] = None
    referenceStyle: Optional[str] = None
    quality: Optional[Quality] = None
