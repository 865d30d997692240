"""Populate the location and photo stores with demo data.

Destructive: both stores are cleared before anything is inserted. Never
point this at a shared database without meaning to.
"""

import argparse
import calendar
import logging
import random
from dataclasses import dataclass, field
from datetime import date, datetime, time
from pathlib import Path
from typing import Callable, Iterable

from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from sqlalchemy import delete
from sqlalchemy.orm import Session

from civicmap.core.catalog import LANDMARKS
from civicmap.db.models import Location, Photo
from civicmap.services import storage
from civicmap.services.image_service import ImageService

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png"}
GARBAGE_LEVELS = ["none", "low", "medium", "high"]


@dataclass
class SeedReport:
    """Outcome of one seeding run."""

    locations: int = 0
    photos_per_location: dict[int, int] = field(default_factory=dict)

    @property
    def total_photos(self) -> int:
        return sum(self.photos_per_location.values())


def list_source_images(source_dir: Path) -> list[Path]:
    """Image files in the sample pool, sorted so a seeded RNG is reproducible."""
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        logger.error("Source directory %s does not exist", source_dir)
        return []
    return sorted(
        p for p in source_dir.iterdir() if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
    )


def seed_days(year: int, month: int, count: int) -> list[date]:
    """Days 1..count of the month, clipped to the month's length."""
    last_day = calendar.monthrange(year, month)[1]
    if count > last_day:
        logger.warning(
            "Requested %d days but %d-%02d has %d; seeding %d days per location",
            count, year, month, last_day, last_day,
        )
    return [date(year, month, d) for d in range(1, min(count, last_day) + 1)]


def photo_caption(slot: int, location_name: str, day: date) -> str:
    return f"Photo {slot} at {location_name} on {day.month}/{day.day}/{day.year}"


def generate_photos_for_location(
    location: dict,
    source_images: list[Path],
    photos_root: Path,
    days: Iterable[date],
    per_day: int,
    rng: random.Random,
    city_slug: str = "vijayawada",
    advance: Callable[[], None] | None = None,
) -> list[Photo]:
    """Write pool images, re-encoded as JPEG, into the location's folder and build
    unsaved Photo rows.

    Images are drawn with replacement. A slot whose write fails is logged and
    skipped; an empty pool yields no photos.
    """
    location_id = location["id"]
    photos: list[Photo] = []

    if not source_images:
        logger.error("No source images found for location %s", location_id)
        return photos

    for day in days:
        for slot in range(1, per_day + 1):
            source = rng.choice(source_images)
            filename = storage.seeded_filename(location_id, day, slot)
            try:
                target = storage.write_bytes(photos_root, location_id, ImageService.to_jpeg(source), filename)
            except OSError:
                logger.exception("Error writing %s for location %s on %s", source, location_id, day)
                continue
            finally:
                if advance is not None:
                    advance()

            photos.append(
                Photo(
                    location_id=location_id,
                    date=datetime.combine(day, time()),
                    path=storage.public_path(location_id, filename),
                    caption=photo_caption(slot, location["name"], day),
                    meta=ImageService.read_metadata(target),
                    tags=[
                        location["category"],
                        city_slug,
                        f"day-{day.day}",
                        f"garbage-{rng.choice(GARBAGE_LEVELS)}",
                    ],
                )
            )
            logger.debug("Created photo %s", filename)

    return photos


def clear_stores(db: Session) -> None:
    db.execute(delete(Photo))
    db.execute(delete(Location))


def seed_database(
    db: Session,
    source_dir: Path,
    uploads_dir: Path,
    year: int = 2025,
    month: int = 4,
    days: int = 30,
    per_day: int = 5,
    rng: random.Random | None = None,
    city_slug: str = "vijayawada",
    locations: list[dict] | None = None,
    progress: Progress | None = None,
) -> SeedReport:
    """Clear both stores, insert the catalogue locations, then fabricate photos.

    Each location is committed on its own, so one location failing to get
    photos does not stop the others.
    """
    rng = rng or random.Random()
    locations = LANDMARKS if locations is None else locations
    root = storage.photos_root(uploads_dir)
    root.mkdir(parents=True, exist_ok=True)

    logger.info("Clearing existing data...")
    clear_stores(db)
    db.add_all(Location(**loc) for loc in locations)
    db.commit()
    logger.info("Inserted %d locations", len(locations))

    report = SeedReport(locations=len(locations))
    pool = list_source_images(source_dir)
    logger.info("Found %d images in %s", len(pool), source_dir)
    calendar_days = seed_days(year, month, days)

    for location in locations:
        advance = None
        if progress is not None and pool:
            task = progress.add_task(location["name"], total=len(calendar_days) * per_day)
            advance = lambda task=task: progress.advance(task)  # noqa: E731

        photos = generate_photos_for_location(
            location, pool, root, calendar_days, per_day, rng, city_slug, advance
        )
        if photos:
            db.add_all(photos)
            db.commit()
            logger.info("Added %d photos for %s", len(photos), location["name"])
        else:
            logger.warning("No photos were generated for %s", location["name"])
        report.photos_per_location[location["id"]] = len(photos)

    logger.info(
        "Seeding complete | locations=%d photos=%d", report.locations, report.total_photos
    )
    return report


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for the seed generator."""
    from civicmap.core.settings import get_settings

    settings = get_settings()
    parser = argparse.ArgumentParser(description="Seed the civic map stores with demo photos")
    parser.add_argument("--images", type=Path, default=settings.SEED_IMAGES_DIR, help="Sample image pool")
    parser.add_argument("--uploads", type=Path, default=settings.UPLOADS_DIR, help="Uploads directory")
    parser.add_argument("--year", type=int, default=settings.SEED_YEAR)
    parser.add_argument("--month", type=int, default=settings.SEED_MONTH)
    parser.add_argument("--days", type=int, default=settings.SEED_DAYS)
    parser.add_argument("--per-day", type=int, default=settings.SEED_PHOTOS_PER_DAY)
    parser.add_argument("--seed", type=int, help="RNG seed for a reproducible run")
    parser.add_argument(
        "--yes", action="store_true", help="Confirm that existing locations and photos will be deleted"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if not args.yes:
        print("Error: seeding deletes every location and photo. Re-run with --yes to proceed.")
        return 2

    from civicmap.db.init_db import init_db
    from civicmap.db.session import SessionLocal

    init_db()
    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
    ) as progress, SessionLocal() as db:
        report = seed_database(
            db,
            source_dir=args.images,
            uploads_dir=args.uploads,
            year=args.year,
            month=args.month,
            days=args.days,
            per_day=args.per_day,
            rng=random.Random(args.seed),
            city_slug=settings.CITY_SLUG,
            progress=progress,
        )

    print(f"Done! {report.locations} locations, {report.total_photos} photos.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
