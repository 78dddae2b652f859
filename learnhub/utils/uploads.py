import logging
import os
import tempfile
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import UploadFile

from ..config import settings
from .errors import UploadTooLargeError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@asynccontextmanager
async def stored_upload(upload: UploadFile, max_bytes: Optional[int] = None):
    """Spool an upload to UPLOAD_DIR and yield its path.

    The temp file is removed on every exit path, including read and
    processing failures inside the ``async with`` block.
    """
    limit = max_bytes if max_bytes is not None else settings.MAX_UPLOAD_BYTES
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    suffix = os.path.splitext(upload.filename or "")[-1].lower()
    path = None

    try:
        with tempfile.NamedTemporaryFile(dir=settings.UPLOAD_DIR, suffix=suffix, delete=False) as tmp:
            path = tmp.name
            size = 0
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > limit:
                    raise UploadTooLargeError(limit)
                tmp.write(chunk)

        logger.debug("Upload %s saved to %s (%d bytes)", upload.filename, path, size)
        yield path
    finally:
        if path and os.path.exists(path):
            os.unlink(path)
