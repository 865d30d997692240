from typing import List
from civicmap.schemas.common import CamelModel

class VisitorPoint(CamelModel):
    date: str
    visitors: int

class DistributionSlice(CamelModel):
    name: str
    value: int

class LocationStats(CamelModel):
    visitors: List[VisitorPoint]
    distribution: List[DistributionSlice]
    total_visitors: int
    average_rating: float
    return_rate: int

class GarbageDay(CamelModel):
    date: str
    garbage_percentage: float
    avg_coverage: float
    image_count: int

class GarbageWeek(CamelModel):
    week: str
    garbage_percentage: float
    avg_coverage: float
    image_count: int

class Hotspot(CamelModel):
    area: str
    percentage: float

class GarbageSummary(CamelModel):
    average_garbage_percentage: float
    highest_recorded: float
    total_images_analyzed: int
    waste_free_percentage: float
    most_affected_area: str

class GarbageTrend(CamelModel):
    daily: List[GarbageDay]
    weekly: List[GarbageWeek]
    distribution: List[DistributionSlice]
    hotspots: List[Hotspot]
    summary: GarbageSummary
