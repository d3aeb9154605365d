"""Stores an incoming multipart upload in a request-scoped temporary file."""

import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from fastapi import UploadFile
from speech_common import setup_logging

from domain import UploadedFile
from exceptions import NoFileProvided

logger = setup_logging()

AUDIO_FIELD = "audio"


@contextmanager
def receive_upload(
    upload: UploadFile | None, upload_dir: str | Path
) -> Iterator[UploadedFile]:
    """
    Persists the uploaded audio for the duration of the ``with`` block.

    The file is removed when the block exits, whether it succeeded or raised.

    Raises:
        NoFileProvided: If the request carried no ``audio`` file.
    """
    if upload is None:
        raise NoFileProvided(AUDIO_FIELD)

    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(
        dir=directory, suffix=Path(upload.filename or "").suffix
    )
    path = Path(tmp_path)
    try:
        with os.fdopen(fd, "wb") as out:
            shutil.copyfileobj(upload.file, out)
        stored = UploadedFile(
            path=path, original_name=upload.filename, size=path.stat().st_size
        )
        logger.info(
            "Upload stored",
            extra={
                "file_name": upload.filename,
                "path": str(path),
                "size": stored.size,
            },
        )
        yield stored
    finally:
        path.unlink(missing_ok=True)
