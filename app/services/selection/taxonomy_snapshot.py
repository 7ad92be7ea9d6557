"""Immutable in-memory taxonomy snapshot used by the filter engine.

Loaded once per interactive session (see ``snapshot_loader``) and shared
read-only by every filtering call. Each filterable entry carries the set of
cartridge type ids it is linked to, so membership tests are O(1) instead of
repeated joins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CartridgeTypeEntry:
    id: int
    name: str


@dataclass(frozen=True)
class CartridgeEntry:
    id: int
    name: str
    cartridge_type_ids: frozenset[int] = frozenset()


@dataclass(frozen=True)
class PrimerTypeEntry:
    id: int
    name: str
    cartridge_type_id: int


@dataclass(frozen=True)
class PowderEntry:
    id: int
    name: str
    manufacturer_name: str
    cartridge_type_ids: frozenset[int] = frozenset()


@dataclass(frozen=True)
class BulletWeightEntry:
    """Catalog bullet weight. ``weight`` is normalised to float on construction."""

    id: int
    weight: float
    cartridge_type_ids: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", float(self.weight))


@dataclass(frozen=True)
class BulletEntry:
    """Bullet. ``weight`` is a plain attribute matched by value, normalised to float."""

    id: int
    name: str
    manufacturer_name: str
    weight: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", float(self.weight))


@dataclass(frozen=True)
class TaxonomySnapshot:
    """Read-only view of every taxonomy record needed for dependent filtering.

    Tuples keep catalog order; candidate lists without an explicit sort
    preserve it.
    """

    cartridge_types: tuple[CartridgeTypeEntry, ...] = ()
    cartridges: tuple[CartridgeEntry, ...] = ()
    primer_types: tuple[PrimerTypeEntry, ...] = ()
    powders: tuple[PowderEntry, ...] = ()
    bullet_weights: tuple[BulletWeightEntry, ...] = ()
    bullets: tuple[BulletEntry, ...] = ()

    _bullet_weights_by_id: dict[int, BulletWeightEntry] = field(
        init=False, repr=False, compare=False
    )
    _cartridge_type_ids: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_bullet_weights_by_id", {bw.id: bw for bw in self.bullet_weights}
        )
        object.__setattr__(
            self, "_cartridge_type_ids", frozenset(ct.id for ct in self.cartridge_types)
        )

    def bullet_weight(self, bullet_weight_id: int | None) -> BulletWeightEntry | None:
        """Resolve a bullet weight id; None when absent or unknown."""
        if bullet_weight_id is None:
            return None
        return self._bullet_weights_by_id.get(bullet_weight_id)

    def has_cartridge_type(self, cartridge_type_id: int | None) -> bool:
        return cartridge_type_id is not None and cartridge_type_id in self._cartridge_type_ids

    def counts(self) -> dict[str, int]:
        """Entity counts, for logging."""
        return {
            "cartridge_types": len(self.cartridge_types),
            "cartridges": len(self.cartridges),
            "primer_types": len(self.primer_types),
            "powders": len(self.powders),
            "bullet_weights": len(self.bullet_weights),
            "bullets": len(self.bullets),
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> TaxonomySnapshot:
        """Build a snapshot from the serialized taxonomy shape.

        Expected keys (all optional, default empty): ``cartridge_types``,
        ``cartridges`` (with ``cartridge_type_ids``), ``primer_types`` (with
        ``cartridge_type_id``), ``powders`` (with ``manufacturer_name`` and
        ``cartridge_type_ids``), ``bullet_weights`` (with ``weight`` and
        ``cartridge_type_ids``), ``bullets`` (with ``manufacturer_name`` and
        ``weight``).
        """

        def _ids(row: dict[str, Any]) -> frozenset[int]:
            return frozenset(int(i) for i in row.get("cartridge_type_ids") or ())

        return cls(
            cartridge_types=tuple(
                CartridgeTypeEntry(id=int(r["id"]), name=r["name"])
                for r in payload.get("cartridge_types") or ()
            ),
            cartridges=tuple(
                CartridgeEntry(id=int(r["id"]), name=r["name"], cartridge_type_ids=_ids(r))
                for r in payload.get("cartridges") or ()
            ),
            primer_types=tuple(
                PrimerTypeEntry(
                    id=int(r["id"]),
                    name=r["name"],
                    cartridge_type_id=int(r["cartridge_type_id"]),
                )
                for r in payload.get("primer_types") or ()
            ),
            powders=tuple(
                PowderEntry(
                    id=int(r["id"]),
                    name=r["name"],
                    manufacturer_name=r.get("manufacturer_name") or "",
                    cartridge_type_ids=_ids(r),
                )
                for r in payload.get("powders") or ()
            ),
            bullet_weights=tuple(
                BulletWeightEntry(id=int(r["id"]), weight=r["weight"], cartridge_type_ids=_ids(r))
                for r in payload.get("bullet_weights") or ()
            ),
            bullets=tuple(
                BulletEntry(
                    id=int(r["id"]),
                    name=r["name"],
                    manufacturer_name=r.get("manufacturer_name") or "",
                    weight=r["weight"],
                )
                for r in payload.get("bullets") or ()
            ),
        )
