import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from ..database import Base, generate_id


class ContentType(str, enum.Enum):
    YOUTUBE = "youtube"  # video reference
    PDF = "pdf"  # uploaded document
    WEBSITE = "website"


class ContentStatus(str, enum.Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class CustomContent(Base):
    __tablename__ = "custom_content"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"))
    type = Column(String(20), nullable=False)
    url = Column(Text)
    title = Column(Text)
    content = Column(Text)  # extracted/processed text
    status = Column(String(20), default=ContentStatus.PROCESSING.value)
    created_at = Column(DateTime, default=datetime.utcnow)
