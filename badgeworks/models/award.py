from sqlalchemy import Column, String, Text, ForeignKey, DateTime, UniqueConstraint, func
from badgeworks.db import Base
from badgeworks.models.badge import _uuid


class Award(Base):
    __tablename__ = "awards"
    id = Column(String(36), primary_key=True, default=_uuid)
    badge_id = Column(String(36), ForeignKey("badges.id", ondelete="CASCADE"), index=True, nullable=False)
    person_id = Column(String(36), ForeignKey("people.id", ondelete="CASCADE"), index=True, nullable=False)
    project_id = Column(String(36), ForeignKey("projects.id", ondelete="CASCADE"), index=True, nullable=False)
    citation = Column(Text, nullable=False)
    public_permalink = Column(String(20), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    __table_args__ = (UniqueConstraint('public_permalink', name='uq_awards_public_permalink'),)
