from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v.strip() if isinstance(v, str) else v


# los inputs llegan recortados: "   " cuenta como vacío para min_length
class PersonIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    handle: Optional[str] = Field(default=None, max_length=100)
    title: Optional[str] = Field(default=None, max_length=200)
    avatar_url: Optional[str] = None

    @field_validator('handle', 'title', 'avatar_url', mode='before')
    @classmethod
    def optional_text(cls, v):
        return _blank_to_none(v)

    @field_validator('handle')
    @classmethod
    def strip_at(cls, v: Optional[str]) -> Optional[str]:
        # "@ada" y "ada" son el mismo handle; la página pone la arroba
        if v is None:
            return None
        return v.lstrip('@') or None

    @field_validator('avatar_url')
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        if v and not (v.startswith("http://") or v.startswith("https://")):
            raise ValueError("avatar_url debe ser una URL http(s)")
        return v


class ProjectIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    short_desc: str = Field(min_length=1)


class PublishAwardIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    badge_id: UUID
    person: PersonIn
    project: ProjectIn
    citation: str = Field(min_length=1, max_length=500)


class PersonOut(BaseModel):
    id: str
    name: str
    handle: Optional[str] = None
    title: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class ProjectOut(BaseModel):
    id: str
    name: str
    short_desc: Optional[str] = None
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class AwardOut(BaseModel):
    id: str
    badge_id: str
    person_id: str
    project_id: str
    citation: str
    public_permalink: str
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class PublishAwardOut(BaseModel):
    success: bool = True
    award: AwardOut
    permalink: str
    shareUrl: str


class AwardDetailsOut(AwardOut):
    """Award + columnas de badge/person/project (JOIN)."""
    badge_name: str
    image_blob_url: Optional[str] = None
    thumb_blob_url: str
    style_key: str
    person_name: str
    person_handle: Optional[str] = None
    person_title: Optional[str] = None
    person_avatar: Optional[str] = None
    project_name: str
    project_desc: Optional[str] = None
