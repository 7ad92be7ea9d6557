"""Reloading session schemas for request/response validation.

Numeric and presence rules are not enforced here: payloads are turned into a
SessionDraft and checked by the cross-field validator so that every problem
is reported at once, with stable rule names.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.services.selection.validator import ViolationRule


class ReloadingSessionCreate(BaseModel):
    """Schema for creating a reloading session."""

    account_id: Optional[int] = None
    loaded_at: Optional[date] = None
    reloading_data_source_id: Optional[int] = None
    custom_data_source_name: Optional[str] = Field(None, max_length=255)
    cartridge_type_id: Optional[int] = None
    cartridge_id: Optional[int] = None
    primer_type_id: Optional[int] = None
    primer_id: Optional[int] = None
    powder_id: Optional[int] = None
    bullet_weight_id: Optional[int] = None
    bullet_weight_other: Optional[float] = None
    bullet_id: Optional[int] = None
    bullet_type: Optional[str] = Field(None, max_length=255)
    # int | float so a fractional quantity reaches the validator as NotAnInteger
    quantity: Optional[Union[int, float]] = None
    cartridge_overall_length: Optional[float] = None
    powder_weight: Optional[float] = None
    notes: Optional[str] = None


class ReloadingSessionUpdate(ReloadingSessionCreate):
    """Schema for updating a reloading session. Only set fields are applied."""


class ReloadingSessionRead(BaseModel):
    """Schema for reading a reloading session (response)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    account_id: int
    loaded_at: date
    reloading_data_source_id: int
    reloading_data_source_name: Optional[str] = None
    custom_data_source_name: Optional[str] = None
    cartridge_type_id: int
    cartridge_type_name: Optional[str] = None
    cartridge_id: int
    cartridge_name: Optional[str] = None
    primer_type_id: int
    primer_type_name: Optional[str] = None
    primer_id: int
    primer_name: Optional[str] = None
    powder_id: int
    powder_label: Optional[str] = None
    bullet_weight_id: Optional[int] = None
    bullet_weight_other: Optional[float] = None
    effective_bullet_weight: Optional[float] = None
    bullet_id: int
    bullet_label: Optional[str] = None
    bullet_type: Optional[str] = None
    quantity: Optional[int] = None
    cartridge_overall_length: Optional[float] = None
    powder_weight: Optional[float] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class ReloadingSessionList(BaseModel):
    """Paginated list of reloading sessions."""

    items: list[ReloadingSessionRead]
    total: int
    page: int = 1
    page_size: int = 20


class ViolationRead(BaseModel):
    """A single violated rule with its display message."""

    field: str
    rule: ViolationRule
    message: str


class ValidationResponse(BaseModel):
    """Result of validating a draft without saving it."""

    valid: bool
    violations: list[ViolationRead]
    summary: list[str] = Field(default_factory=list)
    inline: dict[str, list[str]] = Field(default_factory=dict)
