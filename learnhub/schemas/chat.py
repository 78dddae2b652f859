from datetime import datetime
from typing import List, Literal, Optional

from .base import CamelModel


class ChatRequest(CamelModel):
    user_id: str
    message: str
    context: Optional[str] = None


class CodeExample(CamelModel):
    language: str
    code: str
    explanation: str


class ChatResponse(CamelModel):
    message: str
    code_examples: List[CodeExample] = []
    concepts: List[str] = []


class ChatMessage(CamelModel):
    id: str
    user_id: Optional[str] = None
    role: Literal["user", "assistant"]
    content: str
    timestamp: Optional[datetime] = None
