"""BulletWeight model: catalog of predefined bullet weights (grains)."""

from __future__ import annotations

from sqlalchemy import Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class BulletWeight(Base):
    """Catalog bullet weight. Linked to cartridge types, not to bullets."""

    __tablename__ = "bullet_weights"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    weight: Mapped[float] = mapped_column(
        Numeric(7, 2, asdecimal=False), unique=True, nullable=False
    )

    cartridge_types: Mapped[list["CartridgeType"]] = relationship(
        "CartridgeType", secondary="cartridge_type_bullet_weights", lazy="selectin"
    )
