"""Dependent-selection engine: taxonomy snapshot, filtering, cascade and validation."""

from app.services.selection.cascade_controller import (
    CascadeController,
    InvalidSelectionError,
    NONE_OPTION,
    Option,
    SelectionField,
    SelectionState,
    UnknownFieldError,
)
from app.services.selection.filter_engine import (
    candidate_bullet_weights,
    candidate_bullets,
    candidate_cartridges,
    candidate_powders,
    candidate_primer_types,
)
from app.services.selection.taxonomy_snapshot import TaxonomySnapshot
from app.services.selection.validator import (
    SessionDraft,
    Violation,
    ViolationRule,
    validate,
    validate_against_snapshot,
)

__all__ = [
    "CascadeController",
    "InvalidSelectionError",
    "NONE_OPTION",
    "Option",
    "SelectionField",
    "SelectionState",
    "SessionDraft",
    "TaxonomySnapshot",
    "UnknownFieldError",
    "Violation",
    "ViolationRule",
    "candidate_bullet_weights",
    "candidate_bullets",
    "candidate_cartridges",
    "candidate_powders",
    "candidate_primer_types",
    "validate",
    "validate_against_snapshot",
]
