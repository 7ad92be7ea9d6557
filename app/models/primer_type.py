"""PrimerType model: belongs to exactly one cartridge type."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class PrimerType(Base):
    """Primer size/class (e.g. "Large Rifle") scoped to a cartridge type."""

    __tablename__ = "primer_types"

    __table_args__ = (
        UniqueConstraint("cartridge_type_id", "name", name="uq_primer_types_cartridge_type_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    cartridge_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cartridge_types.id", ondelete="CASCADE"), nullable=False
    )

    cartridge_type: Mapped["CartridgeType"] = relationship(
        "CartridgeType", back_populates="primer_types"
    )

    @property
    def cartridge_type_name(self) -> str | None:
        """Name of the owning cartridge type, for admin-style listings."""
        return self.cartridge_type.name if self.cartridge_type else None
