# app/models/tour.py
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, Text
from sqlalchemy.orm import relationship

from app.database import Base


class Tour(Base):
    __tablename__ = "tours"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    destinations = Column(JSON, nullable=False, default=list)
    course = Column(Text, nullable=False)
    cost = Column(Text, nullable=False)

    num_likes = Column(Integer, nullable=False, default=0)
    num_comments = Column(Integer, nullable=False, default=0)
    num_reads = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)

    author = relationship("User")
