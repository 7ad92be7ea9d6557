"""Bullet model."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class Bullet(Base):
    """Projectile. Matched to catalog bullet weights by numeric weight value."""

    __tablename__ = "bullets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    manufacturer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("manufacturers.id"), nullable=False
    )
    weight: Mapped[float] = mapped_column(Numeric(7, 2, asdecimal=False), nullable=False)

    manufacturer: Mapped["Manufacturer"] = relationship("Manufacturer", lazy="joined")
