from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from beerstock.domain.entities import BeerType

from .session import Base


class BeerModel(Base):
    """Persisted beer row."""

    __tablename__ = "beers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    brand: Mapped[str] = mapped_column(String(200), nullable=False)
    max: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    type: Mapped[BeerType] = mapped_column(
        Enum(BeerType, name="beer_type", native_enum=False), nullable=False
    )
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=func.now()
    )

    def __repr__(self):
        return f"<BeerModel(id={self.id}, name='{self.name}', quantity={self.quantity})>"
