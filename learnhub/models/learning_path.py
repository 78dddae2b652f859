from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from ..database import Base, generate_id


class LearningPath(Base):
    __tablename__ = "learning_paths"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(Text, nullable=False)
    description = Column(Text)
    language = Column(Text, nullable=False)
    difficulty = Column(Text, nullable=False)  # 'beginner', 'intermediate', 'advanced'
    total_modules = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)

    modules = relationship("Module", back_populates="learning_path", order_by="Module.order")


class Module(Base):
    __tablename__ = "modules"

    id = Column(String(36), primary_key=True, default=generate_id)
    learning_path_id = Column(String(36), ForeignKey("learning_paths.id"))
    title = Column(Text, nullable=False)
    description = Column(Text)
    order = Column(Integer, nullable=False)  # 1-based position in the path
    content = Column(JSON)  # topics, subtopics, examples, interviewQuestions
    is_locked = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    learning_path = relationship("LearningPath", back_populates="modules")
