import logging
import random
from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session
from civicmap.core.settings import Settings, get_settings
from civicmap.db.models import Photo
from civicmap.db.session import get_db
from civicmap.routers.locations import get_location_or_404
from civicmap.routers.photos import location_photos
from civicmap.schemas.stats import GarbageTrend, LocationStats
from civicmap.services.grouping import group_photos_by_day
from civicmap.services.stats import garbage_trend, get_rng, location_stats, stats_window

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/stats", tags=["Stats"])


@router.get("/location/{location_id}", response_model=LocationStats)
def get_location_stats(
    location_id: int,
    db: Session = Depends(get_db),
    rng: random.Random = Depends(get_rng),
    settings: Settings = Depends(get_settings),
):
    """
    Visitor figures are mock data drawn per request; only the window is real
    (first to last photo of the location, else the seed month).
    """
    get_location_or_404(db, location_id)
    first, last = (
        db.query(func.min(Photo.date), func.max(Photo.date))
        .filter(Photo.location_id == location_id)
        .one()
    )
    start, end = stats_window(first, last, settings)
    logger.debug("Stats | location=%s window=%s..%s", location_id, start, end)
    return location_stats(rng, start, end)


@router.get("/location/{location_id}/garbage", response_model=GarbageTrend)
def get_garbage_trend(
    location_id: int,
    db: Session = Depends(get_db),
    rng: random.Random = Depends(get_rng),
    settings: Settings = Depends(get_settings),
):
    get_location_or_404(db, location_id)
    photos = location_photos(db, location_id)
    first, last = (photos[0].date, photos[-1].date) if photos else (None, None)
    start, end = stats_window(first, last, settings)
    return garbage_trend(rng, start, end, group_photos_by_day(photos))
