# 📄 File: agroscan/shared/infrastructure/storage/file_manager.py

# 🧭 Purpose (Layman Explanation):
# Keeps uploaded inspection photos on disk: it checks that a file really is a picture,
# gives it a unique name, saves it and hands back the link used to fetch it later.

# 🧪 Purpose (Technical Summary):
# Local filesystem storage for uploaded images. Validates extension, size and image
# integrity with Pillow, writes under UPLOAD_ROOT with a uuid4 file name and returns
# the public URL path; the database only ever stores that path.

# 🔗 Dependencies:
# - PIL: Image validation
# - pathlib / asyncio: File writes off the event loop
# - agroscan.shared.config.settings: Upload root, URL prefix, limits

# 🔄 Connected Modules / Calls From:
# Called by: inspection_image_service.py (upload and delete), agroscan.main (static mount)

import asyncio
import io
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional
from uuid import uuid4

from PIL import Image

from agroscan.shared.config.settings import get_settings
from agroscan.shared.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class LocalFileStorage:
    """
    Stores uploaded images below a content root.

    Stored files are grouped in a subfolder per category and exposed
    under a URL prefix that the application serves statically.
    """

    def __init__(
        self,
        root: str,
        url_prefix: str = "/uploads",
        max_size: int = 10 * 1024 * 1024,
        allowed_extensions: Optional[Iterable[str]] = None,
    ):
        self.root = Path(root)
        self.url_prefix = "/" + url_prefix.strip("/")
        self.max_size = max_size
        self.allowed_extensions = set(allowed_extensions or {'.jpg', '.jpeg', '.png', '.webp', '.gif'})

    async def save(self, data: bytes, filename: str, category: str = "inspections") -> str:
        """
        Validate and store an image.

        Args:
            data: Raw file bytes
            filename: Client supplied name; only its extension is kept
            category: Subfolder to store the file in

        Returns:
            str: Public relative URL of the stored file

        Raises:
            ValidationError: If the file is empty, too large, of an unsupported
                type or not a readable image
        """
        file_ext = self._validate_file(data, filename)
        self._validate_image(data)

        stored_name = f"{uuid4().hex}{file_ext}"
        target_dir = self.root / category
        target = target_dir / stored_name

        await asyncio.to_thread(self._write, target_dir, target, data)

        url = f"{self.url_prefix}/{category}/{stored_name}"
        logger.info(f"Stored upload {filename!r} as {url} ({len(data)} bytes)")
        return url

    async def delete(self, url: str) -> bool:
        """
        Remove a stored file given the URL returned by save().

        Paths that were not produced by this storage are left alone.

        Returns:
            True if a file was removed
        """
        path = self._resolve(url)
        if path is None or not path.is_file():
            return False

        await asyncio.to_thread(path.unlink)
        logger.info(f"Deleted stored file {url}")
        return True

    def _validate_file(self, data: bytes, filename: str) -> str:
        if len(data) == 0:
            raise ValidationError("File is empty", field="file")

        if len(data) > self.max_size:
            raise ValidationError(
                "File is too large",
                field="file",
                constraint=f"max {self.max_size} bytes",
            )

        file_ext = Path(filename or "").suffix.lower()
        if file_ext not in self.allowed_extensions:
            raise ValidationError(
                f"Unsupported file type: {file_ext or 'none'}",
                field="file",
                constraint=", ".join(sorted(self.allowed_extensions)),
            )
        return file_ext

    def _validate_image(self, data: bytes) -> None:
        """Validate image file integrity and properties."""
        try:
            with Image.open(io.BytesIO(data)) as img:
                img.verify()

            # verify() leaves the image unusable, reopen to read the size
            with Image.open(io.BytesIO(data)) as img:
                width, height = img.size
        except Exception as e:  # Pillow raises a variety of types for corrupt data
            raise ValidationError("Invalid image file", field="file") from e

        if width < 10 or height < 10:
            raise ValidationError("Image too small", field="file", constraint="min 10x10")
        if width > 10000 or height > 10000:
            raise ValidationError("Image too large", field="file", constraint="max 10000x10000")

    def _resolve(self, url: str) -> Optional[Path]:
        prefix = self.url_prefix + "/"
        if not url or not url.startswith(prefix):
            return None

        root = self.root.resolve()
        path = (root / url[len(prefix):]).resolve()
        if root not in path.parents:
            return None
        return path

    @staticmethod
    def _write(target_dir: Path, target: Path, data: bytes) -> None:
        target_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)


@lru_cache()
def get_file_storage() -> LocalFileStorage:
    """Get file storage configured from settings (dependency injection)."""
    settings = get_settings()
    return LocalFileStorage(
        root=settings.UPLOAD_ROOT,
        url_prefix=settings.UPLOAD_URL_PREFIX,
        max_size=settings.MAX_IMAGE_SIZE,
        allowed_extensions=settings.allowed_image_extensions,
    )
