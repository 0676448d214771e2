"""
Storage adapter - Local image storage for post uploads.

Provides:
- Validation of uploaded images (type and size)
- Writing images to UPLOAD_DIR under a unique name
- Best-effort deletion of stored images

Stored files are served by the API under UPLOAD_URL_PREFIX, so the value
kept on a post is the public path, e.g. "/uploads/1705314600000-48291.png".
"""

import secrets
import time
from pathlib import Path
from typing import Optional, Sequence

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from socialfeed.config.settings import settings
from socialfeed.shared.core.exceptions import InternalError, ValidationError
from socialfeed.shared.core.logging import get_logger

logger = get_logger("storage")


class StorageAdapter:
    """
    Adapter for post image files on local disk.

    Handles:
    - Type/size checks before anything is written
    - Unique file naming: <epoch-ms>-<random><ext>
    - Mapping between public paths and files on disk
    """

    def __init__(
        self,
        upload_dir: Optional[str] = None,
        url_prefix: Optional[str] = None,
        max_bytes: Optional[int] = None,
        allowed_extensions: Optional[Sequence[str]] = None,
    ):
        """
        Initialize storage adapter.

        Args:
            upload_dir: Directory images are written to
            url_prefix: Public path the directory is served under
            max_bytes: Maximum accepted file size
            allowed_extensions: Accepted extensions without the dot
        """
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.url_prefix = (url_prefix or settings.UPLOAD_URL_PREFIX).rstrip("/")
        self.max_bytes = max_bytes or settings.MAX_UPLOAD_BYTES
        self.allowed_extensions = {
            ext.lower().lstrip(".")
            for ext in (allowed_extensions or settings.ALLOWED_IMAGE_EXTENSIONS)
        }

    # ═══════════════════════════════════════════════════════════════════════════
    # VALIDATION
    # ═══════════════════════════════════════════════════════════════════════════

    def _extension(self, upload: UploadFile) -> str:
        """
        Return the validated, lower-cased extension (with dot).

        Both the file extension and the declared MIME subtype must be one
        of the allowed image formats.
        """
        extension = Path(upload.filename or "").suffix.lower()
        content_type = (upload.content_type or "").lower()
        subtype = content_type.split("/", 1)[1] if content_type.startswith("image/") else ""

        if extension.lstrip(".") not in self.allowed_extensions or subtype not in self.allowed_extensions:
            raise ValidationError(
                "Only image files are allowed",
                details={"allowed": sorted(self.allowed_extensions)},
            )
        return extension

    def _generate_name(self, extension: str) -> str:
        epoch_ms = int(time.time() * 1000)
        return f"{epoch_ms}-{secrets.randbelow(10**9)}{extension}"

    def _path_for(self, public_path: str) -> Optional[Path]:
        """Resolve a stored public path to its file, or None if foreign."""
        prefix = f"{self.url_prefix}/"
        if not public_path.startswith(prefix):
            return None
        name = Path(public_path[len(prefix):]).name
        return self.upload_dir / name if name else None

    # ═══════════════════════════════════════════════════════════════════════════
    # OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def save_image(self, upload: UploadFile) -> str:
        """
        Validate and store an uploaded image.

        Args:
            upload: Multipart file from the request

        Returns:
            Public path of the stored image

        Raises:
            ValidationError: Wrong type or too large
            InternalError: The file could not be written
        """
        extension = self._extension(upload)

        # Read one byte past the limit to detect oversize files
        content = await upload.read(self.max_bytes + 1)
        if len(content) > self.max_bytes:
            raise ValidationError(
                "Image is too large",
                details={"max_bytes": self.max_bytes},
            )

        name = self._generate_name(extension)
        target = self.upload_dir / name
        try:
            await run_in_threadpool(self.upload_dir.mkdir, parents=True, exist_ok=True)
            await run_in_threadpool(target.write_bytes, content)
        except OSError as e:
            logger.error("Image write failed", path=str(target), error=str(e))
            raise InternalError("Failed to store image") from e

        logger.info("Image stored", path=str(target), size=len(content))
        return f"{self.url_prefix}/{name}"

    async def delete_image(self, public_path: str) -> bool:
        """
        Delete a stored image.

        Missing files count as deleted.

        Args:
            public_path: Value stored on the post, e.g. "/uploads/x.png"

        Returns:
            True if the image is gone, False if deletion failed
        """
        path = self._path_for(public_path)
        if path is None:
            logger.warning("Image path outside upload directory", image=public_path)
            return False

        try:
            await run_in_threadpool(path.unlink, missing_ok=True)
            return True
        except OSError as e:
            logger.warning("Image delete failed", path=str(path), error=str(e))
            return False
