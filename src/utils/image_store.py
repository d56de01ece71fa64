"""Profile picture storage.

This module writes uploaded profile pictures to the local image directory and
returns the public path recorded on the user.
"""

import logging
import uuid
from pathlib import Path
from typing import Iterable, Optional

from fastapi import UploadFile

from config import (
    ALLOWED_IMAGE_EXTENSIONS,
    IMAGE_UPLOAD_DIR,
    IMAGE_URL_PREFIX,
    MAX_IMAGE_BYTES,
)
from core.exceptions import ImageUploadError

logger = logging.getLogger(__name__)


class ImageStore:
    """Stores uploaded images under a fixed directory."""

    def __init__(
        self,
        upload_dir: Path = IMAGE_UPLOAD_DIR,
        url_prefix: str = IMAGE_URL_PREFIX,
        allowed_extensions: Iterable[str] = ALLOWED_IMAGE_EXTENSIONS,
        max_bytes: int = MAX_IMAGE_BYTES,
    ):
        """Initialize ImageStore.

        Args:
            upload_dir: Directory the image files are written to.
            url_prefix: Prefix of the stored public path.
            allowed_extensions: Lower-case file extensions that are accepted.
            max_bytes: Largest accepted file size.
        """
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix
        self.allowed_extensions = {ext.lower() for ext in allowed_extensions}
        self.max_bytes = max_bytes

    def try_store(self, upload: Optional[UploadFile]) -> Optional[str]:
        """Store an uploaded image if one was submitted.

        The file is saved as ``<random hex>_<submitted filename>`` so uploads
        with the same name never replace each other.

        Args:
            upload: The submitted file part, or None.

        Returns:
            The public path (url_prefix + stored filename), or None when no
            file was submitted.

        Raises:
            ImageUploadError: If the file type is not allowed, the file is too
                large, or it cannot be written.
        """
        if upload is None or not upload.filename:
            return None

        # Browsers may send a full client path; keep only the base name
        filename = Path(upload.filename.replace("\\", "/")).name
        if not filename:
            return None

        extension = Path(filename).suffix.lower()
        if extension not in self.allowed_extensions:
            raise ImageUploadError(f"Unsupported image type: '{extension or filename}'")

        content = upload.file.read(self.max_bytes + 1)
        if len(content) > self.max_bytes:
            raise ImageUploadError(
                f"Image exceeds the maximum size of {self.max_bytes} bytes"
            )

        stored_name = f"{uuid.uuid4().hex}_{filename}"
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            (self.upload_dir / stored_name).write_bytes(content)
        except OSError as e:
            raise ImageUploadError(f"Could not save image '{filename}'") from e

        logger.info("Stored profile picture: %s (%d bytes)", stored_name, len(content))
        return f"{self.url_prefix}{stored_name}"

    def path_for(self, public_path: str) -> Path:
        """Map a public path returned by ``try_store`` to the file on disk."""
        return self.upload_dir / Path(public_path[len(self.url_prefix):]).name

    def discard(self, public_path: Optional[str]) -> None:
        """Delete a stored image, e.g. when the account was not created.

        Args:
            public_path: Path returned by ``try_store``; None is ignored.
        """
        if not public_path:
            return
        try:
            self.path_for(public_path).unlink(missing_ok=True)
        except OSError:
            logger.exception("Could not remove profile picture %s", public_path)
            return
        logger.info("Removed unused profile picture: %s", public_path)
