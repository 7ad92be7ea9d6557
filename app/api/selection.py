"""Selection cascade API routes.

Stateless: the client posts its current selections with the upstream change,
a controller is rebuilt from them, the event is applied, and the resulting
selections and option lists are returned.
"""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from app.api.deps import get_taxonomy_snapshot
from app.schemas.selection import (
    BulletWeightChangeRequest,
    CartridgeTypeChangeRequest,
    CascadeResponse,
    OptionRead,
    SelectionStatePayload,
)
from app.services.selection.cascade_controller import CascadeController, SelectionState
from app.services.selection.taxonomy_snapshot import TaxonomySnapshot

router = APIRouter()


def _controller_for(
    snapshot: TaxonomySnapshot, state: SelectionStatePayload
) -> CascadeController:
    return CascadeController(snapshot, SelectionState(**state.model_dump()))


def _to_response(controller: CascadeController) -> CascadeResponse:
    return CascadeResponse(
        state=SelectionStatePayload(**asdict(controller.state)),
        options={
            field: [OptionRead(id=o.id, label=o.label) for o in options]
            for field, options in controller.option_lists().items()
        },
    )


@router.post("/cartridge-type", response_model=CascadeResponse)
def api_cartridge_type_changed(
    data: CartridgeTypeChangeRequest,
    snapshot: TaxonomySnapshot = Depends(get_taxonomy_snapshot),
) -> CascadeResponse:
    """Apply a cartridge type change: new cartridge/primer type/powder lists, those selections cleared."""
    controller = _controller_for(snapshot, data.state)
    controller.on_cartridge_type_changed(data.cartridge_type_id)
    return _to_response(controller)


@router.post("/bullet-weight", response_model=CascadeResponse)
def api_bullet_weight_changed(
    data: BulletWeightChangeRequest,
    snapshot: TaxonomySnapshot = Depends(get_taxonomy_snapshot),
) -> CascadeResponse:
    """Apply a bullet weight change: new bullet list, bullet selection cleared."""
    controller = _controller_for(snapshot, data.state)
    controller.on_bullet_weight_changed(data.bullet_weight_id)
    return _to_response(controller)
