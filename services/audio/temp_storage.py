"""
Request-scoped temporary storage for uploaded audio.

The handler owns the temp file for exactly one request: it is created when
the upload is accepted and removed before the handler returns, on success
and on every error path.
"""

import logging
import os
import tempfile
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import UploadFile

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024


def remove_file(path: Optional[str]) -> None:
    """
    Delete path if it still exists.

    A failed delete is logged, not raised, so it cannot replace the
    response of the request that owned the file.
    """
    if not path or not os.path.exists(path):
        return
    try:
        os.unlink(path)
    except OSError as e:
        logger.error(f"Failed to remove temp upload {path}: {e}", exc_info=True)
        return
    logger.debug(f"Removed temp upload {path}")


@asynccontextmanager
async def scoped_upload(
    upload: UploadFile,
    directory: Optional[str] = None,
) -> AsyncIterator[str]:
    """
    Persist an upload to a unique temp file and yield its path.

    The original extension is kept so the transcription API can sniff the
    container format.

    Args:
        upload: Multipart file from the request
        directory: Target directory (system temp dir when None)
    """
    _, ext = os.path.splitext(upload.filename or "")
    tmp = tempfile.NamedTemporaryFile(
        prefix="upload-", suffix=ext, dir=directory, delete=False
    )
    path = tmp.name
    try:
        with tmp:
            while True:
                chunk = await upload.read(_CHUNK_SIZE)
                if not chunk:
                    break
                tmp.write(chunk)
        logger.info(f"File received: {path}")
        yield path
    finally:
        remove_file(path)
