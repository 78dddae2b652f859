from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ..database import Base, generate_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    username = Column(Text, unique=True, nullable=False)
    email = Column(Text, unique=True, nullable=False)
    password = Column(Text, nullable=False)  # pbkdf2 hash, never the raw value
    created_at = Column(DateTime, default=datetime.utcnow)

    stats = relationship("UserStats", back_populates="user", uselist=False)


class UserStats(Base):
    __tablename__ = "user_stats"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"))
    weekly_goal = Column(Integer, default=15)  # hours
    hours_completed = Column(Integer, default=0)
    concepts_mastered = Column(Integer, default=0)
    streak = Column(Integer, default=0)
    last_active_date = Column(DateTime)

    user = relationship("User", back_populates="stats")
