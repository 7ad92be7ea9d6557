"""Pydantic schemas for request/response validation."""

from app.schemas.reloading_session import (
    ReloadingSessionCreate,
    ReloadingSessionList,
    ReloadingSessionRead,
    ReloadingSessionUpdate,
    ValidationResponse,
    ViolationRead,
)
from app.schemas.selection import (
    BulletWeightChangeRequest,
    BulletWeightListResponse,
    BulletWeightRead,
    CartridgeTypeChangeRequest,
    CascadeResponse,
    OptionListResponse,
    OptionRead,
    SelectionStatePayload,
)

__all__ = [
    # Reloading session
    "ReloadingSessionCreate",
    "ReloadingSessionUpdate",
    "ReloadingSessionRead",
    "ReloadingSessionList",
    "ViolationRead",
    "ValidationResponse",
    # Selection cascade
    "OptionRead",
    "OptionListResponse",
    "SelectionStatePayload",
    "CartridgeTypeChangeRequest",
    "BulletWeightChangeRequest",
    "CascadeResponse",
    "BulletWeightRead",
    "BulletWeightListResponse",
]
