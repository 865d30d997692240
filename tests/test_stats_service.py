"""Tests for the placeholder statistics generators."""

import random
from datetime import date, datetime

from civicmap.core.settings import Settings
from civicmap.services.stats import (
    garbage_trend,
    location_stats,
    photo_analysis,
    stats_window,
    visitor_sample_days,
)

APRIL_START = date(2025, 4, 1)
APRIL_END = date(2025, 4, 30)


def test_window_defaults_to_seed_month():
    settings = Settings(DATABASE_URL="sqlite://")
    assert stats_window(None, None, settings) == (APRIL_START, APRIL_END)


def test_window_follows_photos():
    settings = Settings(DATABASE_URL="sqlite://")
    first, last = datetime(2025, 5, 3, 10), datetime(2025, 5, 9, 8)
    assert stats_window(first, last, settings) == (date(2025, 5, 3), date(2025, 5, 9))


def test_window_is_capped_to_seed_days_before_latest_photo():
    settings = Settings(DATABASE_URL="sqlite://")
    first, last = datetime(1990, 1, 1), datetime(2025, 4, 30, 12)
    assert stats_window(first, last, settings) == (date(2025, 4, 1), date(2025, 4, 30))


def test_window_at_the_end_of_the_calendar():
    settings = Settings(DATABASE_URL="sqlite://", SEED_DAYS=3)
    start, end = stats_window(datetime(9999, 12, 1), datetime(9999, 12, 31, 23), settings)
    assert (start, end) == (date(9999, 12, 29), date(9999, 12, 31))
    assert visitor_sample_days(start, end) == [start, date(9999, 12, 30), end]


def test_visitor_sample_days_for_april():
    days = visitor_sample_days(APRIL_START, APRIL_END)
    assert [d.day for d in days] == [1, 5, 10, 15, 20, 25, 30]


def test_location_stats_shape_and_ranges():
    stats = location_stats(random.Random(7), APRIL_START, APRIL_END)
    assert len(stats.visitors) == 7
    assert all(300 <= v.visitors <= 799 for v in stats.visitors)
    assert [(s.name, s.value) for s in stats.distribution] == [
        ("Morning", 35), ("Afternoon", 45), ("Evening", 15), ("Night", 5),
    ]
    assert 7000 <= stats.total_visitors <= 11999
    assert 4.0 <= stats.average_rating <= 5.0
    assert 80 <= stats.return_rate <= 94


def test_location_stats_serializes_camel_case():
    payload = location_stats(random.Random(7), APRIL_START, APRIL_END).model_dump(by_alias=True)
    assert set(payload) == {"visitors", "distribution", "totalVisitors", "averageRating", "returnRate"}
    assert set(payload["visitors"][0]) == {"date", "visitors"}


def test_same_seed_same_figures():
    a = location_stats(random.Random(3), APRIL_START, APRIL_END)
    b = location_stats(random.Random(3), APRIL_START, APRIL_END)
    assert a == b


def test_garbage_trend_counts_come_from_photos():
    by_day = {"2025-04-01": [object()] * 5, "2025-04-08": [object()] * 2}
    trend = garbage_trend(random.Random(1), APRIL_START, APRIL_END, by_day)

    assert len(trend.daily) == 30
    assert trend.daily[0].date == "1 Apr"
    assert trend.daily[0].image_count == 5
    assert trend.daily[1].image_count == 0
    assert [w.week for w in trend.weekly] == ["Week 1", "Week 2", "Week 3", "Week 4", "Week 5"]
    assert trend.weekly[0].image_count == 5
    assert trend.weekly[1].image_count == 2
    assert trend.summary.total_images_analyzed == 7
    assert [d.name for d in trend.distribution] == ["0-5%", "5-10%", "10-15%", "15-20%", "20%+"]


def test_most_affected_area_is_the_top_hotspot():
    trend = garbage_trend(random.Random(9), APRIL_START, APRIL_END, {})
    top = max(trend.hotspots, key=lambda h: h.percentage)
    assert trend.summary.most_affected_area == top.area


def test_photo_analysis_uses_photo_dimensions():
    analysis = photo_analysis(random.Random(2), 1024, 768)
    assert analysis.total_pixels == 1024 * 768
    assert 1 <= analysis.detections <= 8
    assert analysis.severity in {"Low", "Medium", "High"}


def test_photo_analysis_defaults_frame():
    assert photo_analysis(random.Random(2)).total_pixels == 800 * 600
