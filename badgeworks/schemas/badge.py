from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BadgeOut(BaseModel):
    id: str
    slug: str
    name: str
    style_key: str
    prompt: str
    actual_prompt: Optional[str] = None
    style_template: Optional[str] = None
    reference_style: Optional[str] = None
    quality_setting: Optional[str] = None
    model_used: str
    seed: Optional[int] = None
    image_blob_url: str
    thumb_blob_url: str
    created_by: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class GenerateImageOut(BaseModel):
    success: bool = True
    badge: BadgeOut
    actualPrompt: str
