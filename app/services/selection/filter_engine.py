"""Dependent-selection filter engine.

Pure functions over (TaxonomySnapshot, upstream selection) → ordered candidate
tuple. An absent or unknown upstream id is the normal "nothing selected yet"
state and yields an empty tuple, never an error.
"""

from __future__ import annotations

from functools import lru_cache

from pyuca import Collator

from app.services.selection.taxonomy_snapshot import (
    BulletEntry,
    BulletWeightEntry,
    CartridgeEntry,
    PowderEntry,
    PrimerTypeEntry,
    TaxonomySnapshot,
)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def collation_key(value: str) -> tuple[tuple[int, ...], str]:
    """Unicode collation (DUCET) sort key, exact string as tiebreak.

    Accents and case only break ties between otherwise equal letters, so
    "Énergie" sorts between "Bravo" and "Zeta".
    """
    return (_collator().sort_key(value), value)


def candidate_cartridges(
    snapshot: TaxonomySnapshot, cartridge_type_id: int | None
) -> tuple[CartridgeEntry, ...]:
    """Cartridges linked to the cartridge type, in catalog order."""
    if cartridge_type_id is None:
        return ()
    return tuple(c for c in snapshot.cartridges if cartridge_type_id in c.cartridge_type_ids)


def candidate_primer_types(
    snapshot: TaxonomySnapshot, cartridge_type_id: int | None
) -> tuple[PrimerTypeEntry, ...]:
    """Primer types whose single cartridge type reference matches, in catalog order."""
    if cartridge_type_id is None:
        return ()
    return tuple(p for p in snapshot.primer_types if p.cartridge_type_id == cartridge_type_id)


def candidate_powders(
    snapshot: TaxonomySnapshot, cartridge_type_id: int | None
) -> tuple[PowderEntry, ...]:
    """Powders linked to the cartridge type, sorted by name."""
    if cartridge_type_id is None:
        return ()
    matching = [p for p in snapshot.powders if cartridge_type_id in p.cartridge_type_ids]
    return tuple(sorted(matching, key=lambda p: collation_key(p.name)))


def candidate_bullets(
    snapshot: TaxonomySnapshot, bullet_weight_id: int | None
) -> tuple[BulletEntry, ...]:
    """Bullets whose weight equals the selected catalog weight.

    Sorted by manufacturer name, then bullet name. Both weights are floats
    (normalised by the snapshot entries), compared exactly.
    """
    bullet_weight = snapshot.bullet_weight(bullet_weight_id)
    if bullet_weight is None:
        return ()
    target = bullet_weight.weight
    matching = [b for b in snapshot.bullets if b.weight == target]
    return tuple(
        sorted(
            matching,
            key=lambda b: (collation_key(b.manufacturer_name), collation_key(b.name)),
        )
    )


def candidate_bullet_weights(
    snapshot: TaxonomySnapshot, cartridge_type_id: int | None
) -> tuple[BulletWeightEntry, ...]:
    """Catalog bullet weights linked to the cartridge type, ascending by weight."""
    if cartridge_type_id is None:
        return ()
    matching = [bw for bw in snapshot.bullet_weights if cartridge_type_id in bw.cartridge_type_ids]
    return tuple(sorted(matching, key=lambda bw: bw.weight))


def all_bullet_weights(snapshot: TaxonomySnapshot) -> tuple[BulletWeightEntry, ...]:
    """Every catalog bullet weight, ascending by weight."""
    return tuple(sorted(snapshot.bullet_weights, key=lambda bw: bw.weight))
