from typing import Optional
from pydantic import Field
from civicmap.schemas.common import CamelModel

class LocationOut(CamelModel):
    id: int
    name: str
    category: str
    description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    main_image: Optional[str] = Field(None, description="URL of the card image")
    color: str = Field(..., description="Map marker colour for the category")
