from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, TypeVar

T = TypeVar("T")


def day_key(value: datetime) -> str:
    """ISO calendar date of a capture timestamp; aware values are taken in UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"expected date or datetime, got {type(value).__name__}")


def group_photos_by_day(photos: Iterable[T]) -> Dict[str, List[T]]:
    """
    Partition photos by the calendar day of their ``date`` attribute.

    Input order is kept inside each day, and a day with no photos gets no
    key. With date-sorted input the keys come out in chronological order;
    in any case ``sorted(result)`` is chronological because ISO dates sort
    lexically.
    """
    grouped: Dict[str, List[T]] = {}
    for photo in photos:
        grouped.setdefault(day_key(photo.date), []).append(photo)
    return grouped
