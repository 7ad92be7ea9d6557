"""Primer model: concrete primer product (e.g. "CCI BR2")."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base

if TYPE_CHECKING:
    from app.models.manufacturer import Manufacturer


class Primer(Base):
    """Primer product used in a reloading session."""

    __tablename__ = "primers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    manufacturer_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("manufacturers.id"), nullable=True
    )

    manufacturer: Mapped[Manufacturer | None] = relationship("Manufacturer", lazy="joined")
