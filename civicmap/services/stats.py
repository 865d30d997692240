"""
Placeholder statistics for the stats and gallery pages.

None of these figures are measured: visitor counts, ratings and garbage
percentages are drawn from ``rng`` on every call. Only the shapes are
stable. Photo counts are the exception and come from the store.
"""
import random
from datetime import date, datetime, timedelta
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from civicmap.core.settings import Settings
from civicmap.schemas.photos import PhotoAnalysis
from civicmap.schemas.stats import (
    DistributionSlice,
    GarbageDay,
    GarbageSummary,
    GarbageTrend,
    GarbageWeek,
    Hotspot,
    LocationStats,
    VisitorPoint,
)

TIME_OF_DAY_DISTRIBUTION = [
    ("Morning", 35),
    ("Afternoon", 45),
    ("Evening", 15),
    ("Night", 5),
]

# (label, low, spread) -> value in [low, low + spread)
GARBAGE_BUCKETS = [
    ("0-5%", 10, 40),
    ("5-10%", 10, 30),
    ("10-15%", 10, 20),
    ("15-20%", 5, 15),
    ("20%+", 5, 10),
]

HOTSPOT_AREAS = ["North Zone", "South Zone", "East Zone", "West Zone", "Central"]

RECOMMENDED_ACTIONS = [
    "Immediate cleanup required",
    "Schedule regular pickup",
    "Monitor for changes",
    "No action needed",
]

SEVERITIES = ["Low", "Medium", "High"]

# Frame size the analysis assumes when the photo has no recorded dimensions
DEFAULT_FRAME = (800, 600)


def stats_window(first: Optional[datetime], last: Optional[datetime], settings: Settings) -> Tuple[date, date]:
    """
    Span of the location's photos, at most SEED_DAYS long and ending on the
    latest photo. A location without photos gets the configured seed month.
    """
    if first is None or last is None:
        start = date(settings.SEED_YEAR, settings.SEED_MONTH, 1)
        return start, start + timedelta(days=settings.SEED_DAYS - 1)
    start, end = first.date(), last.date()
    if (end - start).days >= settings.SEED_DAYS:
        start = end - timedelta(days=settings.SEED_DAYS - 1)
    return start, end


def _days(start: date, end: date) -> Iterator[date]:
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def visitor_sample_days(start: date, end: date) -> List[date]:
    """Both window ends, the first of each month and every fifth day."""
    return [d for d in _days(start, end) if d in (start, end) or d.day == 1 or d.day % 5 == 0]


def location_stats(rng: random.Random, start: date, end: date) -> LocationStats:
    visitors = [
        VisitorPoint(date=d.isoformat(), visitors=rng.randint(300, 799))
        for d in visitor_sample_days(start, end)
    ]
    return LocationStats(
        visitors=visitors,
        distribution=[DistributionSlice(name=n, value=v) for n, v in TIME_OF_DAY_DISTRIBUTION],
        total_visitors=rng.randint(7000, 11999),
        average_rating=round(rng.uniform(4.0, 5.0), 1),
        return_rate=rng.randint(80, 94),
    )


def _day_label(d: date) -> str:
    return f"{d.day} {d.strftime('%b')}"


def garbage_trend(
    rng: random.Random,
    start: date,
    end: date,
    photos_by_day: Dict[str, Sequence],
) -> GarbageTrend:
    """Per-day and per-week garbage figures; image counts come from ``photos_by_day``."""
    daily: List[GarbageDay] = []
    for d in _days(start, end):
        daily.append(
            GarbageDay(
                date=_day_label(d),
                garbage_percentage=round(rng.uniform(0, 25), 2),
                avg_coverage=round(rng.uniform(0, 30), 2),
                image_count=len(photos_by_day.get(d.isoformat(), ())),
            )
        )

    weekly = [
        GarbageWeek(
            week=f"Week {i // 7 + 1}",
            garbage_percentage=round(rng.uniform(0, 25), 2),
            avg_coverage=round(rng.uniform(0, 30), 2),
            image_count=sum(day.image_count for day in daily[i:i + 7]),
        )
        for i in range(0, len(daily), 7)
    ]

    distribution = [
        DistributionSlice(name=label, value=low + rng.randrange(spread))
        for label, low, spread in GARBAGE_BUCKETS
    ]
    hotspots = [Hotspot(area=area, percentage=round(rng.uniform(0, 35), 2)) for area in HOTSPOT_AREAS]

    summary = GarbageSummary(
        average_garbage_percentage=round(rng.uniform(0, 15), 2),
        highest_recorded=round(rng.uniform(10, 40), 2),
        total_images_analyzed=sum(len(v) for v in photos_by_day.values()),
        waste_free_percentage=round(rng.uniform(0, 100), 1),
        most_affected_area=max(hotspots, key=lambda h: h.percentage).area,
    )
    return GarbageTrend(
        daily=daily,
        weekly=weekly,
        distribution=distribution,
        hotspots=hotspots,
        summary=summary,
    )


def photo_analysis(rng: random.Random, width: Optional[int] = None, height: Optional[int] = None) -> PhotoAnalysis:
    if not width or not height:
        width, height = DEFAULT_FRAME
    return PhotoAnalysis(
        waste_percentage=round(rng.uniform(0, 25), 2),
        scene_width_m=round(rng.uniform(10, 15), 1),
        scene_height_m=round(rng.uniform(5, 8), 1),
        scene_area_m2=round(rng.uniform(50, 80), 1),
        waste_area_m2=round(rng.uniform(0, 15), 2),
        capture_distance_m=round(rng.uniform(5, 10), 1),
        waste_pixels=rng.randint(10000, 59999),
        total_pixels=width * height,
        detections=rng.randint(1, 8),
        recommended_action=rng.choice(RECOMMENDED_ACTIONS),
        severity=rng.choice(SEVERITIES),
    )


def get_rng() -> random.Random:
    """Per-request RNG, exposed as a dependency so it can be swapped for a seeded one."""
    return random.Random()
