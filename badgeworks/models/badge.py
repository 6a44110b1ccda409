import uuid
from sqlalchemy import Column, Integer, String, Text, DateTime, UniqueConstraint, func
from badgeworks.db import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class Badge(Base):
    __tablename__ = "badges"
    id = Column(String(36), primary_key=True, default=_uuid)
    slug = Column(String(100), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    style_key = Column(String(50), nullable=False)
    prompt = Column(Text, nullable=False)
    actual_prompt = Column(Text, nullable=True)          # prompt exacto enviado al modelo de imagen
    style_template = Column(String(100), nullable=True)
    reference_style = Column(Text, nullable=True)
    quality_setting = Column(String(20), nullable=True, default="standard")
    model_used = Column(String(50), nullable=False)
    seed = Column(Integer, nullable=True)
    image_blob_url = Column(Text, nullable=False)
    thumb_blob_url = Column(Text, nullable=False)
    created_by = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    __table_args__ = (UniqueConstraint('slug', name='uq_badges_slug'),)
