import logging
import random
from datetime import date, datetime, time, timezone
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from civicmap.core.errors import NotFoundError
from civicmap.core.settings import Settings, get_settings
from civicmap.db.models import Photo
from civicmap.db.session import get_db
from civicmap.routers.locations import get_location_or_404
from civicmap.schemas.photos import PhotoAnalysis, PhotoOut, PhotosByDate
from civicmap.services import storage, uploads
from civicmap.services.grouping import group_photos_by_day
from civicmap.services.image_service import ImageService
from civicmap.services.stats import get_rng, photo_analysis

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/photos", tags=["Photos"])


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_bound(value: Optional[str], name: str, end: bool = False) -> Optional[datetime]:
    """
    Parses a startDate/endDate query value.
    A bare YYYY-MM-DD end bound covers the whole day up to its last microsecond.
    """
    if not value:
        return None
    try:
        if len(value) == 10:
            day = date.fromisoformat(value)
            return datetime.combine(day, time.max if end else time.min)
        return _to_naive_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))
    except (ValueError, OverflowError):
        raise HTTPException(status_code=400, detail=f"Invalid {name}: {value}")


def _ordered(query):
    # Seeded photos of one day share a timestamp; path keeps slot order
    return query.order_by(Photo.date.asc(), Photo.path.asc())


def location_photos(db: Session, location_id: int, start: Optional[str] = None, end: Optional[str] = None) -> List[Photo]:
    query = db.query(Photo).filter(Photo.location_id == location_id)

    lower = parse_bound(start, "startDate")
    upper = parse_bound(end, "endDate", end=True)
    if lower is not None:
        query = query.filter(Photo.date >= lower)
    if upper is not None:
        query = query.filter(Photo.date <= upper)

    return _ordered(query).all()


@router.get("/location/{location_id}", response_model=List[PhotoOut])
def get_photos_by_location(
    location_id: int,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    photos = location_photos(db, location_id, start_date, end_date)
    logger.debug("Photos | location=%s start=%s end=%s count=%d", location_id, start_date, end_date, len(photos))
    return photos


@router.get("/location/{location_id}/by-date", response_model=PhotosByDate)
def get_photos_grouped_by_date(location_id: int, db: Session = Depends(get_db)):
    return group_photos_by_day(location_photos(db, location_id))


@router.get("/date/{year}/{month}/{day}", response_model=List[PhotoOut])
def get_photos_by_date(year: int, month: int, day: int, db: Session = Depends(get_db)):
    try:
        wanted = date(year, month, day)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date")
    query = db.query(Photo).filter(
        Photo.date >= datetime.combine(wanted, time.min),
        Photo.date <= datetime.combine(wanted, time.max),
    )
    return _ordered(query).all()


@router.post("/upload", response_model=List[PhotoOut], status_code=201)
def upload_photos(
    location_id: int = Form(..., alias="locationId"),
    capture_date: Optional[str] = Form(None, alias="date"),
    caption: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    photos: List[UploadFile] = File(...),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Stores up to MAX_UPLOAD_FILES images for a location:
    - every file is checked (count, extension + MIME, size) before anything is written
    - capture date: form `date` > EXIF DateTimeOriginal > upload time
    - files land in /uploads/locationPhotos/<id>/ with a uuid suffix
    """
    uploads.check_file_count(len(photos), settings)
    day = uploads.parse_capture_day(capture_date)
    location = get_location_or_404(db, location_id)

    incoming = [
        uploads.read_limited(f.filename or "", f.content_type, f.file, settings)
        for f in photos
    ]
    extra_tags = uploads.parse_tags(tags)
    root = storage.photos_root(settings.UPLOADS_DIR)

    written = []
    created: List[Photo] = []
    try:
        for image in incoming:
            captured = uploads.resolve_capture_time(image, day)
            filename = storage.upload_filename(location.id, captured.date(), image.extension)
            written.append(storage.write_bytes(root, location.id, image.data, filename))

            photo = Photo(
                location_id=location.id,
                date=captured,
                path=storage.public_path(location.id, filename),
                caption=caption or f"{location.name} - {image.filename}",
                meta=ImageService.read_metadata(image.data),
                tags=[location.category, *extra_tags],
            )
            db.add(photo)
            created.append(photo)
        db.commit()
    except (OSError, SQLAlchemyError):
        db.rollback()
        for path in written:
            path.unlink(missing_ok=True)
        raise

    for photo in created:
        db.refresh(photo)
    logger.info("Upload stored | location=%s files=%d", location.id, len(created))
    return created


@router.get("/{photo_id}", response_model=PhotoOut)
def get_photo(photo_id: str, db: Session = Depends(get_db)):
    photo = db.get(Photo, photo_id)
    if photo is None:
        raise NotFoundError("Photo not found")
    return photo


@router.get("/{photo_id}/analysis", response_model=PhotoAnalysis)
def get_photo_analysis(
    photo_id: str,
    db: Session = Depends(get_db),
    rng: random.Random = Depends(get_rng),
):
    """Placeholder garbage analysis; the numbers are random on every call."""
    photo = db.get(Photo, photo_id)
    if photo is None:
        raise NotFoundError("Photo not found")
    meta = photo.meta or {}
    return photo_analysis(rng, meta.get("width"), meta.get("height"))
