"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from sqlalchemy import Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.adapters.persistence.database import Base


class GeoDataModel(Base):
    __tablename__ = "geo_data"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)
    city: Mapped[str | None] = mapped_column(String(200), nullable=True)
    county_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    state_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state_id: Mapped[str | None] = mapped_column(String(10), nullable=True)
    zip: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index("idx_geo_data_zip", "zip"),
        Index("idx_geo_data_state_id", "state_id"),
        Index("idx_geo_data_city", "city"),
    )
