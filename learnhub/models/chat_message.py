from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from ..database import Base, generate_id


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    # Insertion order; breaks ties between messages sharing a timestamp.
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"))
    role = Column(String(20), nullable=False)  # 'user' or 'assistant'
    content = Column(Text, nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow)
