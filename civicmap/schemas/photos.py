from datetime import datetime
from typing import Dict, List, Optional
from pydantic import AliasChoices, Field
from civicmap.schemas.common import CamelModel

class PhotoMetadata(CamelModel):
    width: Optional[int] = None
    height: Optional[int] = None
    size: Optional[int] = None
    format: Optional[str] = None

class PhotoOut(CamelModel):
    id: str
    location_id: int
    date: datetime
    path: str = Field(..., description="Relative to the API base URL, e.g. /uploads/locationPhotos/1/...")
    caption: Optional[str] = None
    # ORM attribute is "meta": declarative classes reserve "metadata"
    metadata: PhotoMetadata = Field(
        default_factory=PhotoMetadata,
        validation_alias=AliasChoices("meta", "metadata"),
        serialization_alias="metadata",
    )
    tags: List[str] = Field(default_factory=list)
    uploaded_at: Optional[datetime] = None

PhotosByDate = Dict[str, List[PhotoOut]]

class PhotoAnalysis(CamelModel):
    """Placeholder garbage analysis for a single photo; values are random."""
    waste_percentage: float
    scene_width_m: float
    scene_height_m: float
    scene_area_m2: float
    waste_area_m2: float
    capture_distance_m: float
    waste_pixels: int
    total_pixels: int
    detections: int
    recommended_action: str
    severity: str
