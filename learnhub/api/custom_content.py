import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from .. import schemas
from ..database import get_db
from ..models import ContentStatus, ContentType
from ..services import ingestion
from ..storage import Storage
from ..utils.errors import LearnHubError
from ..utils.uploads import stored_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["custom-content"])


async def _extract_content(content_type: ContentType, url: Optional[str],
                           file: Optional[UploadFile]) -> str:
    if content_type is ContentType.PDF:
        async with stored_upload(file) as path:
            with open(path, "r", encoding="utf-8", errors="replace") as fh:
                text = fh.read()
            return ingestion.ingest(content_type, text)
    return ingestion.ingest(content_type, url)


@router.post("/custom-content", response_model=schemas.CustomContent)
async def upload_custom_content(
        type: ContentType = Form(...),
        user_id: Optional[str] = Form(None, alias="userId"),
        url: Optional[str] = Form(None),
        title: Optional[str] = Form(None),
        file: Optional[UploadFile] = File(None),
        db: Session = Depends(get_db)
):
    """
    Store user-supplied material and its processed text.
    - pdf: multipart ``file``, decoded as text
    - youtube: ``url`` in watch, youtu.be or embed form
    - website: ``url``, never fetched
    The row starts as processing and is marked completed or error before
    the response is sent.
    """
    if type is ContentType.PDF and file is None:
        raise HTTPException(status_code=400, detail="A file is required for pdf content")
    if type is not ContentType.PDF and not url:
        raise HTTPException(status_code=400, detail=f"A url is required for {type.value} content")

    storage = Storage(db)
    record = storage.create_custom_content(
        user_id=user_id,
        type=type.value,
        url=url,
        title=title or (file.filename if file is not None else url),
        status=ContentStatus.PROCESSING.value,
    )

    try:
        content = await _extract_content(type, url, file)
    except LearnHubError as e:
        storage.update_custom_content_status(record.id, ContentStatus.ERROR)
        logger.warning("Rejected %s content %s: %s", type.value, record.id, e)
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except Exception:
        db.rollback()
        storage.update_custom_content_status(record.id, ContentStatus.ERROR)
        logger.exception("Processing %s content %s failed", type.value, record.id)
        raise HTTPException(status_code=500, detail="Failed to process custom content")

    record = storage.update_custom_content_status(record.id, ContentStatus.COMPLETED, content)
    logger.info("Stored %s content %s for user %s", type.value, record.id, user_id)
    return record


@router.get("/users/{user_id}/custom-content", response_model=List[schemas.CustomContent])
def list_custom_content(user_id: str, db: Session = Depends(get_db)):
    return Storage(db).get_user_custom_content(user_id)
