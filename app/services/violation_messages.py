"""Turn validator facts into the sentences shown next to the session form."""

from __future__ import annotations

from app.services.selection.validator import Violation, ViolationRule

FIELD_LABELS: dict[str, str] = {
    "account": "Account",
    "loaded_at": "Loaded at",
    "reloading_data_source": "Data source",
    "cartridge_type": "Cartridge type",
    "cartridge": "Cartridge",
    "primer_type": "Primer type",
    "primer": "Primer",
    "powder": "Powder",
    "bullet_weight": "Bullet weight",
    "bullet": "Bullet",
    "quantity": "Quantity",
    "cartridge_overall_length": "Cartridge overall length",
    "powder_weight": "Powder weight",
    "bullet_weight_other": "Custom bullet weight",
}

MISSING_BULLET_WEIGHT_MESSAGE = "Bullet weight must be selected or custom weight must be entered"

# Fields whose error appears only in the summary at the top of the form.
SUMMARY_ONLY_FIELDS: frozenset[str] = frozenset({"loaded_at"})

_UPSTREAM_LABELS: dict[str, str] = {
    "cartridge": "cartridge type",
    "primer_type": "cartridge type",
    "powder": "cartridge type",
    "bullet": "bullet weight",
}


def field_label(field: str) -> str:
    """Human label for a violation field; falls back to a humanized name."""
    return FIELD_LABELS.get(field) or field.replace("_", " ").capitalize()


def message_for(violation: Violation) -> str:
    """Return the user-facing sentence for a single violation."""
    label = field_label(violation.field)
    rule = violation.rule
    if rule is ViolationRule.missing_bullet_weight:
        return MISSING_BULLET_WEIGHT_MESSAGE
    if rule is ViolationRule.missing_required_reference:
        return f"{label} must be selected"
    if rule is ViolationRule.missing_required_value:
        return f"{label} can't be blank"
    if rule is ViolationRule.not_an_integer:
        return f"{label} must be an integer"
    if rule is ViolationRule.not_a_number:
        return f"{label} is not a number"
    if rule is ViolationRule.not_positive:
        return f"{label} must be greater than 0"
    if rule is ViolationRule.not_in_candidates:
        upstream = _UPSTREAM_LABELS.get(violation.field)
        if upstream:
            return f"{label} is not valid for the selected {upstream}"
        return f"{label} is not a known option"
    return f"{label} is invalid"


def messages_for(violations: list[Violation]) -> list[str]:
    """Sentences for every violation, in validator order."""
    return [message_for(v) for v in violations]


def inline_messages(violations: list[Violation]) -> dict[str, list[str]]:
    """Per-field messages for inline display, excluding summary-only fields.

    The bullet weight presence rule is reported against ``bullet_weight``.
    """
    by_field: dict[str, list[str]] = {}
    for violation in violations:
        if violation.field in SUMMARY_ONLY_FIELDS:
            continue
        by_field.setdefault(violation.field, []).append(message_for(violation))
    return by_field
