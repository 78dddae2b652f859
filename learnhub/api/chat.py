from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .. import schemas
from ..config import settings
from ..database import get_db
from ..storage import Storage, chronological

router = APIRouter(tags=["chat"])


@router.get("/chat-messages/{user_id}", response_model=List[schemas.ChatMessage])
def get_chat_messages(
        user_id: str,
        limit: Optional[int] = Query(None, ge=1, le=500),
        db: Session = Depends(get_db)
):
    """Latest messages for a user, oldest first."""
    messages = Storage(db).get_user_chat_messages(user_id, limit or settings.CHAT_HISTORY_LIMIT)
    return chronological(messages)
