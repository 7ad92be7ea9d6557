"""Reference data loader.

Reads the reloading taxonomy seed (cartridge types, primer types, powders,
bullet weights, bullets, primers, data sources) from YAML.
"""

from __future__ import annotations

import hashlib
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from app.config import get_settings

_REFERENCE_DATA_PATH = Path(__file__).parent / "reference_data.yaml"


def get_reference_data_path() -> Path:
    """Return the configured reference data path (REFERENCE_DATA_PATH or the packaged file)."""
    override = get_settings().reference_data_path
    return Path(override) if override else _REFERENCE_DATA_PATH


def parse_reference_data(path: Path) -> dict[str, Any]:
    """Load and validate reference data from ``path`` (uncached).

    Raises:
        FileNotFoundError: If the file is missing.
        ReferenceDataValidationError: If the content is malformed or invalid.
    """
    from app.reference_data.validator import (
        ReferenceDataValidationError,
        validate_reference_data,
    )

    try:
        with path.open() as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ReferenceDataValidationError(f"Reference data YAML is malformed: {exc}") from exc
    validate_reference_data(data)
    return data


@lru_cache(maxsize=1)
def load_reference_data() -> dict[str, Any]:
    """Load the configured reference data (cached after first call)."""
    return parse_reference_data(get_reference_data_path())


@lru_cache(maxsize=1)
def get_reference_data_version() -> str:
    """Return the reference data version.

    Reads optional top-level 'version'; if present and non-empty, returns it.
    Otherwise returns a SHA-256 hex digest of the file content.
    """
    data = load_reference_data()
    version = data.get("version")
    if isinstance(version, str) and version.strip():
        return version.strip()
    return hashlib.sha256(get_reference_data_path().read_bytes()).hexdigest()
