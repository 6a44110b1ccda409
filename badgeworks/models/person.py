from sqlalchemy import Column, String, Text, DateTime, func
from badgeworks.db import Base
from badgeworks.models.badge import _uuid


class Person(Base):
    __tablename__ = "people"
    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(200), nullable=False)
    handle = Column(String(100), nullable=True)
    title = Column(String(200), nullable=True)
    avatar_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
