from typing import List, Optional
from fastapi import APIRouter, HTTPException
from civicmap.core.catalog import (
    GARBAGE_COLLECTION_POINTS,
    GARBAGE_STATUS_COLORS,
    Category,
    GarbageStatus,
    category_color,
)
from civicmap.schemas.catalog import CategoryOut, GarbagePoint, GarbagePointSummary

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/catalog/categories", response_model=List[CategoryOut])
def list_categories():
    return [CategoryOut(name=c.value, color=category_color(c.value)) for c in Category]


@router.get("/garbage/points", response_model=List[GarbagePoint])
def list_garbage_points(status: Optional[str] = None):
    points = [GarbagePoint(**p, color=GARBAGE_STATUS_COLORS[p["status"]]) for p in GARBAGE_COLLECTION_POINTS]
    if status is None:
        return points
    try:
        wanted = GarbageStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in GarbageStatus)
        raise HTTPException(status_code=400, detail=f"Invalid status. Must be one of: {allowed}")
    return [p for p in points if p.status == wanted]


@router.get("/garbage/summary", response_model=GarbagePointSummary)
def garbage_summary():
    points = GARBAGE_COLLECTION_POINTS
    by_status = {s: sum(1 for p in points if p["status"] == s) for s in GarbageStatus}
    return GarbagePointSummary(
        total=len(points),
        normal=by_status[GarbageStatus.NORMAL],
        attention=by_status[GarbageStatus.ATTENTION],
        critical=by_status[GarbageStatus.CRITICAL],
        # half rounds up
        average_fill_level=int(sum(p["fill_level"] for p in points) / len(points) + 0.5),
    )
