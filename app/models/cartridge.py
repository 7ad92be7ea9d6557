"""Cartridge model (e.g. "Lapua .308 Win")."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class Cartridge(Base):
    """Cartridge linked to one or more cartridge types."""

    __tablename__ = "cartridges"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    cartridge_types: Mapped[list["CartridgeType"]] = relationship(
        "CartridgeType", secondary="cartridge_type_cartridges", lazy="selectin"
    )
