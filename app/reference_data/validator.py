"""Reference data schema validation.

Validates that reference_data.yaml has the required structure:
- cartridge_types: non-empty list of unique names
- primer_types: mapping of known cartridge type -> list of primer type names
- manufacturers: list of unique names
- cartridges / powders / bullet_weights: entries linked to known cartridge types
- bullets / powders / primers: entries referencing known manufacturers
- reloading_data_sources, accounts (optional): lists of unique names
"""

from __future__ import annotations

from typing import Any


class ReferenceDataValidationError(ValueError):
    """Raised when reference data validation fails.

    Subclasses ValueError so callers can catch it via ``except ValueError``
    alongside ``FileNotFoundError`` without needing to import this class.
    """


def _require_names(data: dict[str, Any], key: str, *, required: bool = True) -> set[str]:
    """Validate a list of unique non-empty strings; return them as a set."""
    values = data.get(key)
    if values is None:
        if required:
            raise ReferenceDataValidationError(f"reference data must have '{key}'")
        return set()
    if not isinstance(values, list):
        raise ReferenceDataValidationError(f"reference data '{key}' must be a list")
    if required and not values:
        raise ReferenceDataValidationError(f"reference data '{key}' must not be empty")
    seen: set[str] = set()
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise ReferenceDataValidationError(
                f"reference data '{key}' entries must be non-empty strings, got {value!r}"
            )
        if value in seen:
            raise ReferenceDataValidationError(f"reference data '{key}' contains duplicate: '{value}'")
        seen.add(value)
    return seen


def _require_entries(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    entries = data.get(key) or []
    if not isinstance(entries, list):
        raise ReferenceDataValidationError(f"reference data '{key}' must be a list")
    for entry in entries:
        if not isinstance(entry, dict):
            raise ReferenceDataValidationError(
                f"reference data '{key}' entries must be mappings, got {entry!r}"
            )
    return entries


def _require_name(key: str, entry: dict[str, Any]) -> str:
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ReferenceDataValidationError(f"{key} entry needs a non-empty 'name': {entry!r}")
    return name


def _require_weight(key: str, entry: dict[str, Any]) -> float:
    weight = entry.get("weight")
    if isinstance(weight, bool) or not isinstance(weight, (int, float)) or weight <= 0:
        raise ReferenceDataValidationError(
            f"{key} entry needs a positive numeric 'weight': {entry!r}"
        )
    return float(weight)


def _check_cartridge_types(key: str, entry: dict[str, Any], known: set[str]) -> None:
    linked = entry.get("cartridge_types")
    if not isinstance(linked, list) or not linked:
        raise ReferenceDataValidationError(
            f"{key} entry needs a non-empty 'cartridge_types' list: {entry!r}"
        )
    for name in linked:
        if name not in known:
            raise ReferenceDataValidationError(
                f"{key} entry references unknown cartridge type '{name}'"
            )


def _check_manufacturer(
    key: str, entry: dict[str, Any], known: set[str], *, required: bool = True
) -> None:
    manufacturer = entry.get("manufacturer")
    if manufacturer is None and not required:
        return
    if manufacturer not in known:
        raise ReferenceDataValidationError(
            f"{key} entry references unknown manufacturer {manufacturer!r}"
        )


def validate_reference_data(data: dict[str, Any]) -> None:
    """Validate reference data structure and referential integrity.

    Args:
        data: Loaded reference_data.yaml content.

    Raises:
        ReferenceDataValidationError: When structure or references are invalid.
    """
    if not isinstance(data, dict):
        raise ReferenceDataValidationError("reference data must be a dict")

    cartridge_types = _require_names(data, "cartridge_types")
    manufacturers = _require_names(data, "manufacturers")
    _require_names(data, "reloading_data_sources", required=False)
    _require_names(data, "accounts", required=False)

    primer_types = data.get("primer_types") or {}
    if not isinstance(primer_types, dict):
        raise ReferenceDataValidationError("reference data 'primer_types' must be a mapping")
    for cartridge_type, names in primer_types.items():
        if cartridge_type not in cartridge_types:
            raise ReferenceDataValidationError(
                f"primer_types references unknown cartridge type '{cartridge_type}'"
            )
        _require_names({"names": names}, "names")

    for key in ("cartridges", "powders"):
        seen: set[str] = set()
        for entry in _require_entries(data, key):
            name = _require_name(key, entry)
            if name in seen:
                raise ReferenceDataValidationError(f"{key} contains duplicate: '{name}'")
            seen.add(name)
            _check_cartridge_types(key, entry, cartridge_types)
            if key == "powders":
                _check_manufacturer(key, entry, manufacturers)

    weights: set[float] = set()
    for entry in _require_entries(data, "bullet_weights"):
        weight = _require_weight("bullet_weights", entry)
        if weight in weights:
            raise ReferenceDataValidationError(f"bullet_weights contains duplicate: {weight}")
        weights.add(weight)
        _check_cartridge_types("bullet_weights", entry, cartridge_types)

    for entry in _require_entries(data, "bullets"):
        _require_name("bullets", entry)
        _require_weight("bullets", entry)
        _check_manufacturer("bullets", entry, manufacturers)

    for entry in _require_entries(data, "primers"):
        _require_name("primers", entry)
        _check_manufacturer("primers", entry, manufacturers, required=False)
