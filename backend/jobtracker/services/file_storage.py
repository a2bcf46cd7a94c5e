"""Storage for uploaded resumes and cover letters.

Files live under ``settings.upload_dir/<folder>/`` and only the public path
(``/uploads/<folder>/<timestamp>-<name>``) is stored on the application.
"""

import logging
import re
import time
from pathlib import Path

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

RESUME_FOLDER = "resumes"
COVER_LETTER_FOLDER = "cover-letters"

ALLOWED_EXTENSIONS = {
    RESUME_FOLDER: (".pdf", ".doc", ".docx"),
    COVER_LETTER_FOLDER: (".pdf", ".doc", ".docx", ".txt"),
}

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


class UploadRejected(ValueError):
    """Raised when an uploaded file fails validation."""


def sanitize_filename(name: str) -> str:
    return _UNSAFE_CHARS.sub("_", name)


def file_extension(name: str) -> str:
    return Path(name).suffix.lower()


def is_allowed(name: str, folder: str) -> bool:
    return file_extension(name) in ALLOWED_EXTENSIONS[folder]


def _write(target: Path, content: bytes) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content)


async def read_upload(upload: UploadFile, folder: str, max_bytes: int | None = None) -> bytes:
    """Read an upload after checking its extension and size."""
    name = upload.filename or ""
    if not is_allowed(name, folder):
        allowed = ", ".join(ALLOWED_EXTENSIONS[folder])
        raise UploadRejected(f"Invalid file type for {folder}: {name or '(no name)'} (allowed: {allowed})")

    content = await upload.read()
    if max_bytes is not None and len(content) > max_bytes:
        raise UploadRejected(f"File too large: {name}")
    return content


async def store_upload(name: str, content: bytes, folder: str, upload_dir: str) -> str:
    """Write validated content to disk, returning its public path."""
    filename = f"{int(time.time() * 1000)}-{sanitize_filename(name)}"
    await run_in_threadpool(_write, Path(upload_dir) / folder / filename, content)
    logger.info("Stored upload %s (%d bytes)", filename, len(content))
    return f"/uploads/{folder}/{filename}"


async def save_upload(
    upload: UploadFile,
    folder: str,
    upload_dir: str,
    max_bytes: int | None = None,
) -> str:
    """Validate and store an upload, returning its public path."""
    content = await read_upload(upload, folder, max_bytes)
    return await store_upload(upload.filename or "", content, folder, upload_dir)
