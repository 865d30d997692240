import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from pathlib import PurePath
from typing import BinaryIO, List, Optional

from civicmap.core.errors import UploadRejected, UploadTooLarge
from civicmap.core.settings import Settings
from civicmap.services.image_service import ImageService

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif"}
ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif"}

INVALID_TYPE_MESSAGE = "Invalid file type. Only JPEG, JPG, PNG and GIF files are allowed."


@dataclass
class IncomingImage:
    filename: str
    content_type: str
    data: bytes

    @property
    def extension(self) -> str:
        return PurePath(self.filename).suffix.lower()


def check_file_count(count: int, settings: Settings) -> None:
    if count == 0:
        raise UploadRejected("No files were uploaded")
    if count > settings.MAX_UPLOAD_FILES:
        raise UploadRejected(f"Too many files. At most {settings.MAX_UPLOAD_FILES} photos per upload.")


def check_file_type(filename: str, content_type: Optional[str]) -> None:
    """Extension and declared MIME type must both be an allowed image type."""
    extension = PurePath(filename or "").suffix.lower()
    mime = (content_type or "").split(";")[0].strip().lower()
    if extension not in ALLOWED_EXTENSIONS or mime not in ALLOWED_MIME_TYPES:
        raise UploadRejected(INVALID_TYPE_MESSAGE)


def read_limited(filename: str, content_type: Optional[str], stream: BinaryIO, settings: Settings) -> IncomingImage:
    """Validate type, then read at most the size limit (plus one byte to detect overflow)."""
    check_file_type(filename, content_type)
    data = stream.read(settings.MAX_UPLOAD_SIZE_BYTES + 1)
    if len(data) > settings.MAX_UPLOAD_SIZE_BYTES:
        limit_mb = settings.MAX_UPLOAD_SIZE_BYTES // (1024 * 1024)
        raise UploadTooLarge(f"File {filename} is too large. Maximum size is {limit_mb}MB.")
    return IncomingImage(filename=filename, content_type=content_type or "", data=data)


def parse_capture_day(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise UploadRejected("Invalid date. Use YYYY-MM-DD")


def resolve_capture_time(image: IncomingImage, day: Optional[date]) -> datetime:
    """Form date > EXIF DateTimeOriginal > now; returned as naive UTC."""
    if day is not None:
        return datetime.combine(day, time())
    captured_at = ImageService.extract_captured_at(image.data)
    if captured_at is not None:
        logger.debug("Capture time from EXIF | file=%s at=%s", image.filename, captured_at)
        return captured_at.astimezone(timezone.utc).replace(tzinfo=None)
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_tags(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [t.strip() for t in raw.split(",") if t.strip()]
