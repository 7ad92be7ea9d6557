"""Join tables linking taxonomy entities to cartridge types (N:M)."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class CartridgeTypeCartridge(Base):
    """Association between a cartridge type and a cartridge."""

    __tablename__ = "cartridge_type_cartridges"

    cartridge_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cartridge_types.id", ondelete="CASCADE"),
        primary_key=True,
    )
    cartridge_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cartridges.id", ondelete="CASCADE"),
        primary_key=True,
    )


class CartridgeTypePowder(Base):
    """Association between a cartridge type and a powder."""

    __tablename__ = "cartridge_type_powders"

    cartridge_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cartridge_types.id", ondelete="CASCADE"),
        primary_key=True,
    )
    powder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("powders.id", ondelete="CASCADE"),
        primary_key=True,
    )


class CartridgeTypeBulletWeight(Base):
    """Association between a cartridge type and a catalog bullet weight."""

    __tablename__ = "cartridge_type_bullet_weights"

    cartridge_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cartridge_types.id", ondelete="CASCADE"),
        primary_key=True,
    )
    bullet_weight_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("bullet_weights.id", ondelete="CASCADE"),
        primary_key=True,
    )
