from datetime import datetime
from typing import Optional

from .base import CamelModel


class CustomContent(CamelModel):
    id: str
    user_id: Optional[str] = None
    type: str
    url: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
