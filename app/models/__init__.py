"""SQLAlchemy models."""

from app.models.account import Account
from app.models.bullet import Bullet
from app.models.bullet_weight import BulletWeight
from app.models.cartridge import Cartridge
from app.models.cartridge_type import CartridgeType
from app.models.manufacturer import Manufacturer
from app.models.powder import Powder
from app.models.primer import Primer
from app.models.primer_type import PrimerType
from app.models.reloading_data_source import ReloadingDataSource
from app.models.reloading_session import ReloadingSession
from app.models.taxonomy_links import (
    CartridgeTypeBulletWeight,
    CartridgeTypeCartridge,
    CartridgeTypePowder,
)

__all__ = [
    "Account",
    "Bullet",
    "BulletWeight",
    "Cartridge",
    "CartridgeType",
    "CartridgeTypeBulletWeight",
    "CartridgeTypeCartridge",
    "CartridgeTypePowder",
    "Manufacturer",
    "Powder",
    "Primer",
    "PrimerType",
    "ReloadingDataSource",
    "ReloadingSession",
]
