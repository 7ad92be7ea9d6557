"""CartridgeType model: root of the reloading taxonomy (Rifle, Pistol, Shotgun)."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class CartridgeType(Base):
    """Top-level category that constrains cartridges, primer types and powders."""

    __tablename__ = "cartridge_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)

    primer_types: Mapped[list["PrimerType"]] = relationship(
        "PrimerType", back_populates="cartridge_type", cascade="all, delete-orphan"
    )
