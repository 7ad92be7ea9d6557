"""Build a TaxonomySnapshot from the database in one read."""

from __future__ import annotations

import logging
from collections import defaultdict

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models import (
    Bullet,
    BulletWeight,
    Cartridge,
    CartridgeType,
    CartridgeTypeBulletWeight,
    CartridgeTypeCartridge,
    CartridgeTypePowder,
    Powder,
    PrimerType,
)
from app.services.selection.taxonomy_snapshot import (
    BulletEntry,
    BulletWeightEntry,
    CartridgeEntry,
    CartridgeTypeEntry,
    PowderEntry,
    PrimerTypeEntry,
    TaxonomySnapshot,
)

logger = logging.getLogger(__name__)


def _link_map(db: Session, owner_column, cartridge_type_column) -> dict[int, frozenset[int]]:
    """Map each linked entity id to the frozenset of its cartridge type ids."""
    links: dict[int, set[int]] = defaultdict(set)
    for owner_id, cartridge_type_id in db.execute(select(owner_column, cartridge_type_column)):
        links[owner_id].add(cartridge_type_id)
    return {owner_id: frozenset(ids) for owner_id, ids in links.items()}


def load_taxonomy_snapshot(db: Session) -> TaxonomySnapshot:
    """Read every taxonomy table once and return an immutable snapshot.

    Catalog order is id order for every entity. Link tables are read
    directly (one query each) rather than through relationship loading.
    """
    cartridge_links = _link_map(
        db, CartridgeTypeCartridge.cartridge_id, CartridgeTypeCartridge.cartridge_type_id
    )
    powder_links = _link_map(
        db, CartridgeTypePowder.powder_id, CartridgeTypePowder.cartridge_type_id
    )
    bullet_weight_links = _link_map(
        db,
        CartridgeTypeBulletWeight.bullet_weight_id,
        CartridgeTypeBulletWeight.cartridge_type_id,
    )

    snapshot = TaxonomySnapshot(
        cartridge_types=tuple(
            CartridgeTypeEntry(id=ct.id, name=ct.name)
            for ct in db.scalars(select(CartridgeType).order_by(CartridgeType.id))
        ),
        cartridges=tuple(
            CartridgeEntry(
                id=c.id,
                name=c.name,
                cartridge_type_ids=cartridge_links.get(c.id, frozenset()),
            )
            for c in db.scalars(select(Cartridge).order_by(Cartridge.id))
        ),
        primer_types=tuple(
            PrimerTypeEntry(id=p.id, name=p.name, cartridge_type_id=p.cartridge_type_id)
            for p in db.scalars(select(PrimerType).order_by(PrimerType.id))
        ),
        powders=tuple(
            PowderEntry(
                id=p.id,
                name=p.name,
                manufacturer_name=p.manufacturer.name,
                cartridge_type_ids=powder_links.get(p.id, frozenset()),
            )
            for p in db.scalars(select(Powder).order_by(Powder.id))
        ),
        bullet_weights=tuple(
            BulletWeightEntry(
                id=bw.id,
                weight=bw.weight,
                cartridge_type_ids=bullet_weight_links.get(bw.id, frozenset()),
            )
            for bw in db.scalars(select(BulletWeight).order_by(BulletWeight.id))
        ),
        bullets=tuple(
            BulletEntry(
                id=b.id,
                name=b.name,
                manufacturer_name=b.manufacturer.name,
                weight=b.weight,
            )
            for b in db.scalars(select(Bullet).order_by(Bullet.id))
        ),
    )
    logger.info("Taxonomy snapshot loaded: %s", snapshot.counts())
    return snapshot
