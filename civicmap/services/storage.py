import uuid
from datetime import date
from pathlib import Path

PHOTOS_SUBDIR = "locationPhotos"
PUBLIC_PREFIX = f"/uploads/{PHOTOS_SUBDIR}"


def seeded_filename(location_id: int, day: date, slot: int) -> str:
    return f"location_{location_id}_{day.isoformat()}_{slot}.jpg"


def upload_filename(location_id: int, day: date, extension: str) -> str:
    unique_id = uuid.uuid4().hex[:8]
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    return f"location_{location_id}_{day.isoformat()}_{unique_id}{extension.lower()}"


def public_path(location_id: int, filename: str) -> str:
    """Path stored on the Photo record and served under /uploads."""
    return f"{PUBLIC_PREFIX}/{location_id}/{filename}"


def photos_root(uploads_dir: Path) -> Path:
    """Root of the per-location photo folders inside the uploads directory."""
    return Path(uploads_dir) / PHOTOS_SUBDIR


def location_dir(root: Path, location_id: int) -> Path:
    target = root / str(location_id)
    target.mkdir(parents=True, exist_ok=True)
    return target


def write_bytes(root: Path, location_id: int, data: bytes, filename: str) -> Path:
    target = location_dir(root, location_id) / filename
    target.write_bytes(data)
    return target
