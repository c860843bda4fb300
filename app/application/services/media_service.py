"""Media service — avatar and thumbnail files on disk."""

import os
import uuid
from typing import Optional

import structlog
from fastapi import UploadFile

from app.core.exceptions import ValidationException

logger = structlog.get_logger(__name__)


def unique_filename(original_name: str, keep_basename: bool = False) -> str:
    """Generate a collision-free name that keeps the original extension.

    With keep_basename the unique id is appended to the original base name
    ("sunset.png" -> "sunset<hex>.png"), otherwise it replaces it.
    """
    parts = original_name.split(".")
    extension = f".{parts[-1]}" if len(parts) > 1 else ""
    prefix = parts[0] if keep_basename else ""
    return f"{prefix}{uuid.uuid4().hex}{extension}"


class MediaManager:
    """Stores uploaded files under a single directory, addressed by filename."""

    def __init__(self, upload_dir: str):
        self.upload_dir = upload_dir
        os.makedirs(self.upload_dir, exist_ok=True)

    def path_for(self, filename: str) -> str:
        return os.path.join(self.upload_dir, os.path.basename(filename))

    def exists(self, filename: str) -> bool:
        return os.path.isfile(self.path_for(filename))

    async def store(
        self,
        upload: UploadFile,
        max_bytes: int,
        too_big_message: str,
        keep_basename: bool = False,
    ) -> str:
        """Validate the upload size, write it to disk and return the new filename."""
        content = await upload.read()
        if len(content) > max_bytes:
            raise ValidationException(too_big_message, {"size": len(content), "max_bytes": max_bytes})

        filename = unique_filename(upload.filename or "", keep_basename=keep_basename)
        with open(self.path_for(filename), "wb") as f:
            f.write(content)

        logger.info("Media stored", filename=filename, size=len(content))
        return filename

    def discard(self, filename: Optional[str]) -> bool:
        """Best-effort removal; failures are logged and never raised."""
        if not filename:
            return False
        try:
            os.remove(self.path_for(filename))
        except FileNotFoundError:
            logger.warning("Media already missing", filename=filename)
            return False
        except OSError as e:
            logger.error("Media cleanup failed", filename=filename, error=str(e))
            return False
        return True
