# inference_gateway/core/uploads.py
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import UploadFile

from inference_gateway import config

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


@asynccontextmanager
async def saved_upload(upload: UploadFile) -> AsyncIterator[str]:
    """
    Write an uploaded file into UPLOAD_DIR and yield its path.
    The file is removed when the block exits, whatever happened inside it.
    """
    os.makedirs(config.UPLOAD_DIR, exist_ok=True)
    fd, path = tempfile.mkstemp(dir=config.UPLOAD_DIR, prefix="upload-")
    try:
        with os.fdopen(fd, "wb") as fh:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                fh.write(chunk)
        logger.debug("Saved upload %s to %s", upload.filename, path)
        yield path
    finally:
        os.remove(path)
        logger.debug("Removed upload %s", path)
