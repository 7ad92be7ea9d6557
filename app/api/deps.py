"""Shared FastAPI dependencies for API routes."""

from __future__ import annotations

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db  # re-export
from app.services.selection.snapshot_loader import load_taxonomy_snapshot
from app.services.selection.taxonomy_snapshot import TaxonomySnapshot
from app.services.selection.validator import Violation
from app.services.violation_messages import inline_messages, message_for, messages_for

__all__ = [
    "get_db",
    "get_taxonomy_snapshot",
    "violations_detail",
    "violations_http_exception",
    "violations_payload",
]


def get_taxonomy_snapshot(db: Session = Depends(get_db)) -> TaxonomySnapshot:
    """Load the taxonomy snapshot once for the current request."""
    return load_taxonomy_snapshot(db)


def violations_payload(violations: list[Violation]) -> list[dict]:
    """Serialize violations with their display messages."""
    return [
        {"field": v.field, "rule": v.rule.value, "message": message_for(v)}
        for v in violations
    ]


def violations_detail(violations: list[Violation]) -> dict:
    """Violations plus the summary list and the per-field inline messages."""
    return {
        "violations": violations_payload(violations),
        "summary": messages_for(violations),
        "inline": inline_messages(violations),
    }


def violations_http_exception(violations: list[Violation]) -> HTTPException:
    """HTTPException 422 carrying every violation."""
    return HTTPException(status_code=422, detail=violations_detail(violations))
