import io
import logging
from pathlib import Path
from typing import Dict, Optional, Union
from datetime import datetime, timezone
from PIL import Image, UnidentifiedImageError
import piexif
import exifread

logger = logging.getLogger(__name__)

EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"
JPEG_QUALITY = 92

class ImageService:
    @staticmethod
    def read_metadata(source: Union[Path, bytes]) -> Dict:
        """
        Returns {width, height, size, format} for a file on disk or raw bytes.
        Width/height/format are None when Pillow cannot decode the data.
        """
        if isinstance(source, (bytes, bytearray)):
            size = len(source)
            opener = lambda: Image.open(io.BytesIO(source))  # noqa: E731
        else:
            size = source.stat().st_size
            opener = lambda: Image.open(source)  # noqa: E731

        meta = {"width": None, "height": None, "size": size, "format": None}
        try:
            with opener() as img:
                meta["width"], meta["height"] = img.size
                meta["format"] = ImageService._format_name(img.format)
        except (UnidentifiedImageError, OSError):
            logger.debug("read_metadata: Pillow could not decode image", exc_info=True)
        return meta

    @staticmethod
    def to_jpeg(source: Path) -> bytes:
        """
        Re-encodes an image file as JPEG, keeping its EXIF block when it has one.
        Raises OSError (UnidentifiedImageError included) when Pillow cannot read it.
        """
        with Image.open(source) as img:
            exif = img.info.get("exif")
            rgb = img.convert("RGB")
        out = io.BytesIO()
        if exif:
            rgb.save(out, format="JPEG", quality=JPEG_QUALITY, optimize=True, exif=exif)
        else:
            rgb.save(out, format="JPEG", quality=JPEG_QUALITY, optimize=True)
        return out.getvalue()

    @staticmethod
    def _format_name(pil_format: Optional[str]) -> Optional[str]:
        if not pil_format:
            return None
        name = pil_format.lower()
        return "jpg" if name == "jpeg" else name

    @staticmethod
    def _parse_exif_datetime(raw) -> Optional[datetime]:
        if isinstance(raw, bytes):
            raw = raw.decode(errors="ignore")
        try:
            dt = datetime.strptime(str(raw)[:19], EXIF_DATETIME_FORMAT)
        except ValueError:
            return None
        return dt.replace(tzinfo=timezone.utc)

    @staticmethod
    def extract_captured_at(data: bytes) -> Optional[datetime]:
        """
        DateTimeOriginal (UTC) from EXIF: piexif via Pillow first, exifread as fallback.
        """
        # 1) piexif over the EXIF block Pillow exposes
        try:
            with Image.open(io.BytesIO(data)) as img:
                exif_bytes = img.info.get("exif")
            if exif_bytes:
                exif_dict = piexif.load(exif_bytes)
                exif_ifd = exif_dict.get("Exif", {}) or {}
                raw = exif_ifd.get(piexif.ExifIFD.DateTimeOriginal) or exif_ifd.get(piexif.ExifIFD.DateTimeDigitized)
                if not raw:
                    raw = (exif_dict.get("0th", {}) or {}).get(piexif.ImageIFD.DateTime)
                if raw:
                    parsed = ImageService._parse_exif_datetime(raw)
                    if parsed:
                        return parsed
        except Exception:
            logger.debug("extract_captured_at: piexif failed", exc_info=True)

        # 2) exifread straight over the bytes
        try:
            tags = exifread.process_file(io.BytesIO(data), details=False)
            raw = tags.get("EXIF DateTimeOriginal") or tags.get("Image DateTime")
            if raw:
                return ImageService._parse_exif_datetime(str(raw))
        except Exception:
            logger.debug("extract_captured_at: exifread failed", exc_info=True)

        return None
