import uuid
from typing import List, Optional
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, Integer, Float, Text, JSON, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from civicmap.core.catalog import category_color

class Base(DeclarativeBase):
    pass

class Location(Base):
    __tablename__ = "locations"

    # Assigned by the seed catalogue, not autoincremented
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    category: Mapped[str] = mapped_column(String, nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text)
    latitude: Mapped[Optional[float]] = mapped_column(Float)
    longitude: Mapped[Optional[float]] = mapped_column(Float)
    main_image: Mapped[Optional[str]] = mapped_column("main_image", String)

    created_at: Mapped[object] = mapped_column(DateTime(timezone=True), server_default=func.now())

    @property
    def color(self) -> str:
        return category_color(self.category)

class Photo(Base):
    __tablename__ = "photos"
    __table_args__ = (Index("ix_photos_location_date", "location_id", "date"),)

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    location_id: Mapped[int] = mapped_column(Integer, ForeignKey("locations.id"), nullable=False)

    # Capture timestamp, naive UTC
    date: Mapped[object] = mapped_column(DateTime, nullable=False)

    path: Mapped[str] = mapped_column(String, nullable=False)
    caption: Mapped[Optional[str]] = mapped_column(String)

    # "metadata" is reserved on declarative classes
    meta: Mapped[dict] = mapped_column("metadata", JSON, default=dict)
    tags: Mapped[List[str]] = mapped_column(JSON, default=list)

    uploaded_at: Mapped[object] = mapped_column(DateTime(timezone=True), server_default=func.now())
