import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from civicmap.core.errors import NotFoundError
from civicmap.db.models import Location
from civicmap.db.session import get_db
from civicmap.schemas.locations import LocationOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/locations", tags=["Locations"])


def get_location_or_404(db: Session, location_id: int) -> Location:
    location = db.get(Location, location_id)
    if location is None:
        raise NotFoundError("Location not found")
    return location


@router.get("", response_model=List[LocationOut])
def list_locations(db: Session = Depends(get_db)):
    return db.query(Location).order_by(Location.id.asc()).all()


@router.get("/{location_id}", response_model=LocationOut)
def get_location(location_id: int, db: Session = Depends(get_db)):
    return get_location_or_404(db, location_id)
