from sqlalchemy import Column, String, Text, DateTime, func
from badgeworks.db import Base
from badgeworks.models.badge import _uuid


class Project(Base):
    __tablename__ = "projects"
    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(200), nullable=False)
    short_desc = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
