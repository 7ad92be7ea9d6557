"""Taxonomy option-list API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_taxonomy_snapshot
from app.schemas.selection import (
    BulletWeightListResponse,
    BulletWeightRead,
    OptionListResponse,
    OptionRead,
)
from app.services.selection.cascade_controller import (
    CascadeController,
    SelectionState,
    UnknownFieldError,
    parse_field,
)
from app.services.selection.filter_engine import candidate_bullet_weights
from app.services.selection.taxonomy_snapshot import TaxonomySnapshot

router = APIRouter()


@router.get("/options/{field}", response_model=OptionListResponse)
def api_get_option_list(
    field: str,
    cartridge_type_id: int | None = Query(None, description="Selected cartridge type, if any."),
    bullet_weight_id: int | None = Query(None, description="Selected bullet weight, if any."),
    snapshot: TaxonomySnapshot = Depends(get_taxonomy_snapshot),
) -> OptionListResponse:
    """Option list for one selectable field given the upstream selections.

    The first option is always the empty choice (``id: null``).
    """
    try:
        selection_field = parse_field(field)
    except UnknownFieldError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None
    controller = CascadeController(
        snapshot,
        SelectionState(cartridge_type_id=cartridge_type_id, bullet_weight_id=bullet_weight_id),
    )
    return OptionListResponse(
        field=selection_field,
        options=[
            OptionRead(id=o.id, label=o.label)
            for o in controller.get_option_list(selection_field)
        ],
    )


@router.get("/bullet-weights", response_model=BulletWeightListResponse)
def api_list_bullet_weights(
    cartridge_type_id: int | None = Query(None),
    snapshot: TaxonomySnapshot = Depends(get_taxonomy_snapshot),
) -> BulletWeightListResponse:
    """Catalog bullet weights linked to a cartridge type, ascending by weight."""
    return BulletWeightListResponse(
        items=[
            BulletWeightRead(id=bw.id, weight=bw.weight)
            for bw in candidate_bullet_weights(snapshot, cartridge_type_id)
        ]
    )
