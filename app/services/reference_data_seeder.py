"""Idempotent seeding of reference taxonomy rows from validated reference data."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from sqlalchemy.orm import Session

from app.models import (
    Account,
    Bullet,
    BulletWeight,
    Cartridge,
    CartridgeType,
    CartridgeTypeBulletWeight,
    CartridgeTypeCartridge,
    CartridgeTypePowder,
    Manufacturer,
    Powder,
    Primer,
    PrimerType,
    ReloadingDataSource,
)

logger = logging.getLogger(__name__)


def _get_or_create(db: Session, model, created: Counter, **lookup):
    """Return the row matching ``lookup``, creating it when missing."""
    row = db.query(model).filter_by(**lookup).first()
    if row is None:
        row = model(**lookup)
        db.add(row)
        db.flush()
        created[model.__tablename__] += 1
    return row


def seed_reference_data(db: Session, data: dict[str, Any]) -> dict[str, int]:
    """Ensure every reference row and link in ``data`` exists.

    ``data`` must already be validated (see app.reference_data.validator).
    Existing rows are matched by natural key and left unchanged; running the
    seed twice creates nothing the second time.

    Returns:
        Mapping of table name -> number of rows created by this call.
    """
    created: Counter = Counter()

    for name in data.get("reloading_data_sources") or []:
        _get_or_create(db, ReloadingDataSource, created, name=name)

    for name in data.get("accounts") or []:
        _get_or_create(db, Account, created, name=name)

    cartridge_types = {
        name: _get_or_create(db, CartridgeType, created, name=name)
        for name in data["cartridge_types"]
    }
    manufacturers = {
        name: _get_or_create(db, Manufacturer, created, name=name)
        for name in data["manufacturers"]
    }

    for cartridge_type_name, names in (data.get("primer_types") or {}).items():
        cartridge_type = cartridge_types[cartridge_type_name]
        for name in names:
            _get_or_create(
                db, PrimerType, created, name=name, cartridge_type_id=cartridge_type.id
            )

    for entry in data.get("cartridges") or []:
        cartridge = _get_or_create(db, Cartridge, created, name=entry["name"])
        for ct_name in entry["cartridge_types"]:
            _get_or_create(
                db,
                CartridgeTypeCartridge,
                created,
                cartridge_type_id=cartridge_types[ct_name].id,
                cartridge_id=cartridge.id,
            )

    for entry in data.get("powders") or []:
        powder = db.query(Powder).filter_by(name=entry["name"]).first()
        if powder is None:
            powder = Powder(
                name=entry["name"], manufacturer_id=manufacturers[entry["manufacturer"]].id
            )
            db.add(powder)
            db.flush()
            created[Powder.__tablename__] += 1
        for ct_name in entry["cartridge_types"]:
            _get_or_create(
                db,
                CartridgeTypePowder,
                created,
                cartridge_type_id=cartridge_types[ct_name].id,
                powder_id=powder.id,
            )

    for entry in data.get("bullet_weights") or []:
        bullet_weight = _get_or_create(db, BulletWeight, created, weight=float(entry["weight"]))
        for ct_name in entry["cartridge_types"]:
            _get_or_create(
                db,
                CartridgeTypeBulletWeight,
                created,
                cartridge_type_id=cartridge_types[ct_name].id,
                bullet_weight_id=bullet_weight.id,
            )

    for entry in data.get("bullets") or []:
        bullet = (
            db.query(Bullet)
            .filter_by(name=entry["name"], manufacturer_id=manufacturers[entry["manufacturer"]].id)
            .first()
        )
        if bullet is None:
            db.add(
                Bullet(
                    name=entry["name"],
                    manufacturer_id=manufacturers[entry["manufacturer"]].id,
                    weight=float(entry["weight"]),
                )
            )
            db.flush()
            created[Bullet.__tablename__] += 1

    for entry in data.get("primers") or []:
        if db.query(Primer).filter_by(name=entry["name"]).first() is None:
            manufacturer = manufacturers.get(entry.get("manufacturer"))
            db.add(
                Primer(
                    name=entry["name"],
                    manufacturer_id=manufacturer.id if manufacturer else None,
                )
            )
            db.flush()
            created[Primer.__tablename__] += 1

    db.commit()
    logger.info("Reference data seeded: %s", dict(created) or "nothing new")
    return dict(created)
