from datetime import datetime
from civicmap.core.catalog import Category, GarbageStatus
from civicmap.schemas.common import CamelModel

class CategoryOut(CamelModel):
    name: str
    color: str

class GarbagePoint(CamelModel):
    id: str
    name: str
    category: str = Category.GARBAGE.value
    status: GarbageStatus
    fill_level: int
    last_collected: datetime
    latitude: float
    longitude: float
    address: str
    color: str

class GarbagePointSummary(CamelModel):
    total: int
    normal: int
    attention: int
    critical: int
    average_fill_level: int
