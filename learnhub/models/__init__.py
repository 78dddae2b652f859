from .user import User, UserStats
from .learning_path import LearningPath, Module
from .progress import UserProgress
from .custom_content import ContentStatus, ContentType, CustomContent
from .chat_message import ChatMessage

__all__ = [
    "User",
    "UserStats",
    "LearningPath",
    "Module",
    "UserProgress",
    "ContentStatus",
    "ContentType",
    "CustomContent",
    "ChatMessage",
]
