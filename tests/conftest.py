"""Shared test fixtures."""

import io
import os
import random
import tempfile
from datetime import datetime
from pathlib import Path

# Must be set before civicmap.main is imported: the engine and the /uploads
# mount are built at import time.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOADS_DIR"] = tempfile.mkdtemp(prefix="civicmap-uploads-")
os.environ["ENABLE_OTEL"] = "false"

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from civicmap.core.catalog import LANDMARKS
from civicmap.core.settings import Settings, get_settings
from civicmap.db.models import Base, Location, Photo
from civicmap.db.session import get_db
from civicmap.main import app
from civicmap.services import storage
from civicmap.services.stats import get_rng


def jpeg_bytes(size: tuple[int, int] = (32, 24), color: str = "green", exif: bytes | None = None) -> bytes:
    """A small real JPEG, optionally carrying an EXIF block."""
    buf = io.BytesIO()
    img = Image.new("RGB", size, color)
    if exif:
        img.save(buf, format="JPEG", exif=exif)
    else:
        img.save(buf, format="JPEG")
    return buf.getvalue()


def make_photo(location_id: int, when: datetime, slot: int = 1, **kwargs) -> Photo:
    """Helper to create a Photo row with the seeded naming scheme."""
    filename = storage.seeded_filename(location_id, when.date(), slot)
    defaults = {
        "location_id": location_id,
        "date": when,
        "path": storage.public_path(location_id, filename),
        "caption": f"Photo {slot}",
        "meta": {"width": 800, "height": 600, "size": 1234, "format": "jpg"},
        "tags": ["test"],
    }
    defaults.update(kwargs)
    return Photo(**defaults)


@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of the test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    uploads = tmp_path / "uploads"
    uploads.mkdir()
    return Settings(
        DATABASE_URL="sqlite://",
        UPLOADS_DIR=uploads,
        SEED_IMAGES_DIR=tmp_path / "pool",
    )


@pytest.fixture
def client(session_factory, settings):
    def _get_db():
        with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_rng] = lambda: random.Random(1234)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_locations(db_session) -> list[Location]:
    """The six catalogue landmarks, without photos."""
    locations = [Location(**loc) for loc in LANDMARKS]
    db_session.add_all(locations)
    db_session.commit()
    return locations


@pytest.fixture
def image_pool(tmp_path: Path) -> Path:
    """Three sample images plus a file the seeder must ignore."""
    pool = tmp_path / "pool"
    pool.mkdir()
    for name, color in [("a.jpg", "red"), ("b.JPEG", "blue"), ("c.png", "white")]:
        fmt = "PNG" if name.endswith(".png") else "JPEG"
        Image.new("RGB", (40, 30), color).save(pool / name, format=fmt)
    (pool / "labels.txt").write_text("not an image")
    return pool
