"""Selection and option-list schemas for the cascade API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.services.selection.cascade_controller import SelectionField


class OptionRead(BaseModel):
    """One option of a selection list. ``id`` null is the empty choice."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None
    label: str


class OptionListResponse(BaseModel):
    """Ordered option list for a single field."""

    field: SelectionField
    options: list[OptionRead]


class SelectionStatePayload(BaseModel):
    """Current selections as held by the presentation layer."""

    model_config = ConfigDict(from_attributes=True)

    cartridge_type_id: int | None = None
    cartridge_id: int | None = None
    primer_type_id: int | None = None
    powder_id: int | None = None
    bullet_weight_id: int | None = None
    bullet_id: int | None = None
    bullet_weight_other: float | None = None


class CartridgeTypeChangeRequest(BaseModel):
    """Cartridge type change event, with the selections in place before it."""

    state: SelectionStatePayload = Field(default_factory=SelectionStatePayload)
    cartridge_type_id: int | None = None


class BulletWeightChangeRequest(BaseModel):
    """Bullet weight change event, with the selections in place before it."""

    state: SelectionStatePayload = Field(default_factory=SelectionStatePayload)
    bullet_weight_id: int | None = None


class CascadeResponse(BaseModel):
    """Selections and all six option lists after a cascade event."""

    state: SelectionStatePayload
    options: dict[SelectionField, list[OptionRead]]


class BulletWeightRead(BaseModel):
    """Catalog bullet weight."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    weight: float


class BulletWeightListResponse(BaseModel):
    items: list[BulletWeightRead]
