"""ReloadingSession model: one batch of hand-loaded ammunition."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base

if TYPE_CHECKING:
    from app.models.bullet_weight import BulletWeight


class ReloadingSession(Base):
    """Recorded reloading session with its taxonomy references and measurements."""

    __tablename__ = "reloading_sessions"

    __table_args__ = (
        Index("ix_reloading_sessions_account_loaded_at", "account_id", "loaded_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    )
    loaded_at: Mapped[date] = mapped_column(Date, nullable=False)

    cartridge_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cartridge_types.id"), nullable=False
    )
    cartridge_id: Mapped[int] = mapped_column(Integer, ForeignKey("cartridges.id"), nullable=False)
    primer_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("primer_types.id"), nullable=False
    )
    primer_id: Mapped[int] = mapped_column(Integer, ForeignKey("primers.id"), nullable=False)
    powder_id: Mapped[int] = mapped_column(Integer, ForeignKey("powders.id"), nullable=False)
    bullet_weight_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("bullet_weights.id"), nullable=True
    )
    bullet_weight_other: Mapped[float | None] = mapped_column(
        Numeric(7, 2, asdecimal=False), nullable=True
    )
    bullet_id: Mapped[int] = mapped_column(Integer, ForeignKey("bullets.id"), nullable=False)
    reloading_data_source_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("reloading_data_sources.id"), nullable=False
    )
    custom_data_source_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bullet_type: Mapped[str | None] = mapped_column(String(255), nullable=True)

    quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    cartridge_overall_length: Mapped[float | None] = mapped_column(
        Numeric(6, 3, asdecimal=False), nullable=True
    )
    powder_weight: Mapped[float | None] = mapped_column(
        Numeric(6, 2, asdecimal=False), nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    account: Mapped["Account"] = relationship("Account", back_populates="reloading_sessions")
    cartridge_type: Mapped["CartridgeType"] = relationship("CartridgeType")
    cartridge: Mapped["Cartridge"] = relationship("Cartridge")
    primer_type: Mapped["PrimerType"] = relationship("PrimerType")
    primer: Mapped["Primer"] = relationship("Primer")
    powder: Mapped["Powder"] = relationship("Powder")
    bullet_weight: Mapped[BulletWeight | None] = relationship("BulletWeight")
    bullet: Mapped["Bullet"] = relationship("Bullet")
    reloading_data_source: Mapped["ReloadingDataSource"] = relationship("ReloadingDataSource")
