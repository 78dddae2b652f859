import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..services import curriculum, tutor
from ..storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ai-tutor"])


@router.post("/ai-tutor/generate-path", response_model=schemas.LearningPath)
def generate_path(request: schemas.GeneratePathRequest, db: Session = Depends(get_db)):
    """Build a curriculum from the templates and store it with its modules.

    Only the first module starts unlocked.
    """
    template = curriculum.generate_learning_path(
        request.language,
        request.goals,
        request.experience,
        request.time_commitment,
    )

    try:
        path = Storage(db).create_learning_path_with_modules(template)
    except Exception:
        logger.exception("Saving generated path for %s failed", request.language)
        raise HTTPException(status_code=500, detail="Failed to generate learning path")

    logger.info("Generated learning path %s with %d modules", path.id, path.total_modules)
    return path


@router.post("/ai-tutor/chat", response_model=schemas.ChatResponse)
def chat(request: schemas.ChatRequest, db: Session = Depends(get_db)):
    storage = Storage(db)
    try:
        storage.create_chat_message(request.user_id, "user", request.message)
        reply = tutor.respond(request.message, request.context)
        storage.create_chat_message(request.user_id, "assistant", reply.message)
    except Exception:
        db.rollback()
        logger.exception("Chat turn failed for user %s", request.user_id)
        raise HTTPException(status_code=500, detail="Failed to process chat message")

    return reply
