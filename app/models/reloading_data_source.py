"""ReloadingDataSource model: load manual or other source of load data."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base

# Data source name that enables the free-form custom_data_source_name field.
OTHER_DATA_SOURCE_NAME = "Other"


class ReloadingDataSource(Base):
    """Where the load recipe came from (e.g. "Hodgdon Reloading")."""

    __tablename__ = "reloading_data_sources"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
