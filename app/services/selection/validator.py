"""Cross-field validation for reloading session drafts.

Produces validity facts only: a list of ``Violation(field, rule)`` pairs
covering every broken rule in one pass. Turning them into sentences is the
job of ``app.services.violation_messages``.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from app.services.selection.filter_engine import (
    candidate_bullets,
    candidate_cartridges,
    candidate_powders,
    candidate_primer_types,
)
from app.services.selection.taxonomy_snapshot import TaxonomySnapshot


class ViolationRule(str, Enum):
    """Rule identifiers reported by the validator."""

    missing_required_reference = "MissingRequiredReference"
    missing_required_value = "MissingRequiredValue"
    missing_bullet_weight = "MissingBulletWeight"
    not_a_number = "NotANumber"
    not_an_integer = "NotAnInteger"
    not_positive = "NotPositive"
    not_in_candidates = "NotInCandidates"


@dataclass(frozen=True)
class Violation:
    field: str
    rule: ViolationRule


@dataclass
class SessionDraft:
    """In-progress reloading session. Every field is optional so that all
    missing pieces can be reported together."""

    account_id: int | None = None
    loaded_at: date | None = None
    cartridge_type_id: int | None = None
    cartridge_id: int | None = None
    primer_type_id: int | None = None
    primer_id: int | None = None
    powder_id: int | None = None
    bullet_weight_id: int | None = None
    bullet_weight_other: float | None = None
    bullet_id: int | None = None
    reloading_data_source_id: int | None = None
    custom_data_source_name: str | None = None
    bullet_type: str | None = None
    quantity: int | None = None
    cartridge_overall_length: float | None = None
    powder_weight: float | None = None
    notes: str | None = None


# (violation field, draft attribute) in reporting order.
REQUIRED_REFERENCES: tuple[tuple[str, str], ...] = (
    ("account", "account_id"),
    ("reloading_data_source", "reloading_data_source_id"),
    ("cartridge_type", "cartridge_type_id"),
    ("cartridge", "cartridge_id"),
    ("primer_type", "primer_type_id"),
    ("primer", "primer_id"),
    ("powder", "powder_id"),
    ("bullet", "bullet_id"),
)

POSITIVE_NUMBER_FIELDS: tuple[str, ...] = (
    "cartridge_overall_length",
    "powder_weight",
    "bullet_weight_other",
)


def _is_number(value: object) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def _is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check_positive_integer(name: str, value: object) -> list[Violation]:
    if value is None:
        return []
    if not _is_integer(value):
        return [Violation(name, ViolationRule.not_an_integer)]
    if value <= 0:
        return [Violation(name, ViolationRule.not_positive)]
    return []


def _check_positive_number(name: str, value: object) -> list[Violation]:
    if value is None:
        return []
    if not _is_number(value):
        return [Violation(name, ViolationRule.not_a_number)]
    if not value > 0:
        return [Violation(name, ViolationRule.not_positive)]
    return []


def validate(draft: SessionDraft) -> list[Violation]:
    """Return every violated rule for ``draft`` (empty list when valid).

    - each required reference must be present (MissingRequiredReference);
    - loaded_at must be present (MissingRequiredValue);
    - a catalog bullet weight or a free-form weight must be present, both
      is fine (MissingBulletWeight);
    - quantity, when present, must be a positive integer;
    - overall length, powder weight and free-form bullet weight, when
      present, must be positive numbers.
    """
    violations: list[Violation] = []

    for field, attr in REQUIRED_REFERENCES:
        if getattr(draft, attr) is None:
            violations.append(Violation(field, ViolationRule.missing_required_reference))

    if draft.loaded_at is None:
        violations.append(Violation("loaded_at", ViolationRule.missing_required_value))

    if draft.bullet_weight_id is None and draft.bullet_weight_other is None:
        violations.append(Violation("bullet_weight", ViolationRule.missing_bullet_weight))

    violations.extend(_check_positive_integer("quantity", draft.quantity))
    for name in POSITIVE_NUMBER_FIELDS:
        violations.extend(_check_positive_number(name, getattr(draft, name)))

    return violations


def validate_against_snapshot(
    draft: SessionDraft, snapshot: TaxonomySnapshot
) -> list[Violation]:
    """Check the draft's taxonomy selections against the dependent candidate lists.

    Only present values are checked; absence is reported by :func:`validate`.
    A bullet is checked only when a catalog bullet weight is selected.
    """
    violations: list[Violation] = []

    cartridge_type_id = draft.cartridge_type_id
    if cartridge_type_id is not None:
        if not snapshot.has_cartridge_type(cartridge_type_id):
            violations.append(Violation("cartridge_type", ViolationRule.not_in_candidates))
        dependents = (
            ("cartridge", draft.cartridge_id, candidate_cartridges),
            ("primer_type", draft.primer_type_id, candidate_primer_types),
            ("powder", draft.powder_id, candidate_powders),
        )
        for field, value, candidates in dependents:
            if value is None:
                continue
            if value not in {entry.id for entry in candidates(snapshot, cartridge_type_id)}:
                violations.append(Violation(field, ViolationRule.not_in_candidates))

    if draft.bullet_weight_id is not None:
        if snapshot.bullet_weight(draft.bullet_weight_id) is None:
            violations.append(Violation("bullet_weight", ViolationRule.not_in_candidates))
        elif draft.bullet_id is not None:
            offered = {b.id for b in candidate_bullets(snapshot, draft.bullet_weight_id)}
            if draft.bullet_id not in offered:
                violations.append(Violation("bullet", ViolationRule.not_in_candidates))

    return violations
