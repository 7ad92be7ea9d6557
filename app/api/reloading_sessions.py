"""Reloading session CRUD API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import get_taxonomy_snapshot, violations_detail, violations_http_exception
from app.config import get_settings
from app.db.session import get_db
from app.schemas.reloading_session import (
    ReloadingSessionCreate,
    ReloadingSessionList,
    ReloadingSessionRead,
    ReloadingSessionUpdate,
    ValidationResponse,
)
from app.services.reloading_session_service import (
    ReloadingSessionValidationError,
    collect_violations,
    create_reloading_session,
    delete_reloading_session,
    draft_from_payload,
    get_reloading_session,
    list_reloading_sessions,
    update_reloading_session,
)
from app.services.selection.taxonomy_snapshot import TaxonomySnapshot

router = APIRouter()


@router.post("/validate", response_model=ValidationResponse)
def api_validate_reloading_session(
    data: ReloadingSessionCreate,
    db: Session = Depends(get_db),
    snapshot: TaxonomySnapshot = Depends(get_taxonomy_snapshot),
) -> ValidationResponse:
    """Validate a draft without saving it. Returns every violated rule at once."""
    violations = collect_violations(db, draft_from_payload(data), snapshot)
    return ValidationResponse(valid=not violations, **violations_detail(violations))


@router.get("", response_model=ReloadingSessionList)
def api_list_reloading_sessions(
    account_id: int | None = Query(None),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=100),
    db: Session = Depends(get_db),
) -> ReloadingSessionList:
    """List reloading sessions, newest load date first."""
    size = page_size or get_settings().default_page_size
    items, total = list_reloading_sessions(
        db, account_id=account_id, page=page, page_size=size
    )
    return ReloadingSessionList(items=items, total=total, page=page, page_size=size)


@router.get("/{session_id}", response_model=ReloadingSessionRead)
def api_get_reloading_session(
    session_id: int,
    db: Session = Depends(get_db),
) -> ReloadingSessionRead:
    """Get a single reloading session by ID."""
    result = get_reloading_session(db, session_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Reloading session not found")
    return result


@router.post("", response_model=ReloadingSessionRead, status_code=201)
def api_create_reloading_session(
    data: ReloadingSessionCreate,
    db: Session = Depends(get_db),
    snapshot: TaxonomySnapshot = Depends(get_taxonomy_snapshot),
) -> ReloadingSessionRead:
    """Create a reloading session. 422 lists every violated rule."""
    try:
        return create_reloading_session(db, data, snapshot=snapshot)
    except ReloadingSessionValidationError as e:
        raise violations_http_exception(e.violations) from None


@router.patch("/{session_id}", response_model=ReloadingSessionRead)
def api_update_reloading_session(
    session_id: int,
    data: ReloadingSessionUpdate,
    db: Session = Depends(get_db),
    snapshot: TaxonomySnapshot = Depends(get_taxonomy_snapshot),
) -> ReloadingSessionRead:
    """Update a reloading session; the merged record is revalidated."""
    try:
        result = update_reloading_session(db, session_id, data, snapshot=snapshot)
    except ReloadingSessionValidationError as e:
        raise violations_http_exception(e.violations) from None
    if result is None:
        raise HTTPException(status_code=404, detail="Reloading session not found")
    return result


@router.delete("/{session_id}", status_code=204)
def api_delete_reloading_session(
    session_id: int,
    db: Session = Depends(get_db),
) -> None:
    """Delete a reloading session."""
    if not delete_reloading_session(db, session_id):
        raise HTTPException(status_code=404, detail="Reloading session not found")
