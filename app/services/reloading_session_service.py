"""Reloading session CRUD service. Every write is validated first."""

from __future__ import annotations

import logging
from dataclasses import fields

from sqlalchemy.orm import Session

from app.models import Account, Primer, ReloadingDataSource, ReloadingSession
from app.schemas.reloading_session import (
    ReloadingSessionCreate,
    ReloadingSessionRead,
    ReloadingSessionUpdate,
)
from app.services.selection.snapshot_loader import load_taxonomy_snapshot
from app.services.selection.taxonomy_snapshot import TaxonomySnapshot
from app.services.selection.validator import (
    SessionDraft,
    Violation,
    ViolationRule,
    validate,
    validate_against_snapshot,
)

logger = logging.getLogger(__name__)

_DRAFT_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(SessionDraft))


class ReloadingSessionValidationError(ValueError):
    """Raised when a create/update payload violates one or more rules."""

    def __init__(self, violations: list[Violation]) -> None:
        super().__init__(
            "Reloading session is invalid: "
            + ", ".join(f"{v.field}:{v.rule.value}" for v in violations)
        )
        self.violations = violations


# ── Mapping helpers ──────────────────────────────────────────────────


def draft_from_payload(data: ReloadingSessionCreate) -> SessionDraft:
    """Build a SessionDraft from a create/update schema."""
    return SessionDraft(**data.model_dump(include=set(_DRAFT_FIELDS)))


def _draft_from_model(record: ReloadingSession) -> SessionDraft:
    return SessionDraft(**{name: getattr(record, name) for name in _DRAFT_FIELDS})


def _model_to_read(record: ReloadingSession) -> ReloadingSessionRead:
    """Map a ReloadingSession ORM instance to its read schema with display labels."""
    catalog_weight = record.bullet_weight.weight if record.bullet_weight else None
    effective_weight = (
        record.bullet_weight_other if record.bullet_weight_other is not None else catalog_weight
    )
    return ReloadingSessionRead(
        id=record.id,
        account_id=record.account_id,
        loaded_at=record.loaded_at,
        reloading_data_source_id=record.reloading_data_source_id,
        reloading_data_source_name=record.reloading_data_source.name,
        custom_data_source_name=record.custom_data_source_name,
        cartridge_type_id=record.cartridge_type_id,
        cartridge_type_name=record.cartridge_type.name,
        cartridge_id=record.cartridge_id,
        cartridge_name=record.cartridge.name,
        primer_type_id=record.primer_type_id,
        primer_type_name=record.primer_type.name,
        primer_id=record.primer_id,
        primer_name=record.primer.name,
        powder_id=record.powder_id,
        powder_label=record.powder.display_name,
        bullet_weight_id=record.bullet_weight_id,
        bullet_weight_other=record.bullet_weight_other,
        effective_bullet_weight=effective_weight,
        bullet_id=record.bullet_id,
        bullet_label=f"{record.bullet.manufacturer.name} - {record.bullet.name}",
        bullet_type=record.bullet_type,
        quantity=record.quantity,
        cartridge_overall_length=record.cartridge_overall_length,
        powder_weight=record.powder_weight,
        notes=record.notes,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


# ── Validation ───────────────────────────────────────────────────────


def _unknown_references(db: Session, draft: SessionDraft) -> list[Violation]:
    """References outside the taxonomy snapshot that point at missing rows."""
    checks = (
        ("account", Account, draft.account_id),
        ("reloading_data_source", ReloadingDataSource, draft.reloading_data_source_id),
        ("primer", Primer, draft.primer_id),
    )
    return [
        Violation(field, ViolationRule.not_in_candidates)
        for field, model, value in checks
        if value is not None and db.get(model, value) is None
    ]


def collect_violations(
    db: Session,
    draft: SessionDraft,
    snapshot: TaxonomySnapshot | None = None,
) -> list[Violation]:
    """Run every rule against ``draft``: presence/numeric, taxonomy consistency, row existence."""
    if snapshot is None:
        snapshot = load_taxonomy_snapshot(db)
    violations = validate(draft)
    violations.extend(validate_against_snapshot(draft, snapshot))
    violations.extend(_unknown_references(db, draft))
    return violations


def _ensure_valid(db: Session, draft: SessionDraft, snapshot: TaxonomySnapshot | None) -> None:
    violations = collect_violations(db, draft, snapshot)
    if violations:
        logger.warning(
            "Rejected reloading session write: %s",
            [(v.field, v.rule.value) for v in violations],
        )
        raise ReloadingSessionValidationError(violations)


# ── CRUD operations ─────────────────────────────────────────────────


def list_reloading_sessions(
    db: Session,
    *,
    account_id: int | None = None,
    page: int = 1,
    page_size: int = 20,
) -> tuple[list[ReloadingSessionRead], int]:
    """Return a page of sessions, newest load date first, and the total count."""
    query = db.query(ReloadingSession)
    if account_id is not None:
        query = query.filter(ReloadingSession.account_id == account_id)
    total = query.count()
    records = (
        query.order_by(ReloadingSession.loaded_at.desc(), ReloadingSession.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return [_model_to_read(r) for r in records], total


def get_reloading_session(db: Session, session_id: int) -> ReloadingSessionRead | None:
    """Return a single session by ID, or None if not found."""
    record = db.get(ReloadingSession, session_id)
    if record is None:
        return None
    return _model_to_read(record)


def create_reloading_session(
    db: Session,
    data: ReloadingSessionCreate,
    *,
    snapshot: TaxonomySnapshot | None = None,
) -> ReloadingSessionRead:
    """Validate and persist a new session.

    Raises ReloadingSessionValidationError listing every violated rule.
    """
    draft = draft_from_payload(data)
    _ensure_valid(db, draft, snapshot)
    record = ReloadingSession(**{name: getattr(draft, name) for name in _DRAFT_FIELDS})
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Created reloading session id=%s account_id=%s", record.id, record.account_id)
    return _model_to_read(record)


def update_reloading_session(
    db: Session,
    session_id: int,
    data: ReloadingSessionUpdate,
    *,
    snapshot: TaxonomySnapshot | None = None,
) -> ReloadingSessionRead | None:
    """Apply the set fields of ``data`` and revalidate the whole record.

    Returns None if the session does not exist.
    """
    record = db.get(ReloadingSession, session_id)
    if record is None:
        return None

    draft = _draft_from_model(record)
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(draft, key, value)
    _ensure_valid(db, draft, snapshot)

    for name in _DRAFT_FIELDS:
        setattr(record, name, getattr(draft, name))
    db.commit()
    db.refresh(record)
    logger.info("Updated reloading session id=%s", record.id)
    return _model_to_read(record)


def delete_reloading_session(db: Session, session_id: int) -> bool:
    """Delete a session by ID. Returns True if deleted, False if not found."""
    record = db.get(ReloadingSession, session_id)
    if record is None:
        return False
    db.delete(record)
    db.commit()
    logger.info("Deleted reloading session id=%s", session_id)
    return True
