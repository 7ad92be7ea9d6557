"""Reference taxonomy seed data (YAML) with loader and validator."""

from __future__ import annotations

from app.reference_data.loader import (
    get_reference_data_version,
    load_reference_data,
    parse_reference_data,
)
from app.reference_data.validator import ReferenceDataValidationError, validate_reference_data

__all__ = [
    "ReferenceDataValidationError",
    "get_reference_data_version",
    "load_reference_data",
    "parse_reference_data",
    "validate_reference_data",
]
