"""Powder model."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class Powder(Base):
    """Propellant powder, usable with one or more cartridge types."""

    __tablename__ = "powders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    manufacturer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("manufacturers.id"), nullable=False
    )

    manufacturer: Mapped["Manufacturer"] = relationship("Manufacturer", lazy="joined")
    cartridge_types: Mapped[list["CartridgeType"]] = relationship(
        "CartridgeType", secondary="cartridge_type_powders", lazy="selectin"
    )

    @property
    def display_name(self) -> str:
        """"<manufacturer> - <name>" as shown in selection lists."""
        return f"{self.manufacturer.name} - {self.name}"
