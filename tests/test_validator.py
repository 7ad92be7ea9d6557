"""Tests for the cross-field reloading session validator."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from app.services.selection.taxonomy_snapshot import TaxonomySnapshot
from app.services.selection.validator import (
    SessionDraft,
    Violation,
    ViolationRule,
    validate,
    validate_against_snapshot,
)


def _valid_draft(**overrides) -> SessionDraft:
    """A draft that satisfies every rule against the synthetic snapshot."""
    draft = SessionDraft(
        account_id=1,
        loaded_at=date(2025, 3, 1),
        reloading_data_source_id=1,
        cartridge_type_id=1,
        cartridge_id=1,
        primer_type_id=1,
        primer_id=1,
        powder_id=1,
        bullet_weight_id=1,
        bullet_id=1,
        quantity=50,
        cartridge_overall_length=2.8,
        powder_weight=44.5,
    )
    return replace(draft, **overrides)


def _rules(violations: list[Violation]) -> set[tuple[str, ViolationRule]]:
    return {(v.field, v.rule) for v in violations}


class TestValidate:
    """Tests for validate."""

    def test_valid_draft_has_no_violations(self) -> None:
        assert validate(_valid_draft()) == []

    def test_empty_draft_reports_everything_at_once(self) -> None:
        violations = validate(SessionDraft())
        assert [v.field for v in violations] == [
            "account",
            "reloading_data_source",
            "cartridge_type",
            "cartridge",
            "primer_type",
            "primer",
            "powder",
            "bullet",
            "loaded_at",
            "bullet_weight",
        ]
        assert violations[-2] == Violation("loaded_at", ViolationRule.missing_required_value)
        assert violations[-1] == Violation("bullet_weight", ViolationRule.missing_bullet_weight)

    @pytest.mark.parametrize(
        "field,attr",
        [
            ("cartridge_type", "cartridge_type_id"),
            ("cartridge", "cartridge_id"),
            ("primer_type", "primer_type_id"),
            ("primer", "primer_id"),
            ("powder", "powder_id"),
            ("bullet", "bullet_id"),
            ("reloading_data_source", "reloading_data_source_id"),
            ("account", "account_id"),
        ],
    )
    def test_missing_reference(self, field: str, attr: str) -> None:
        violations = validate(_valid_draft(**{attr: None}))
        assert violations == [Violation(field, ViolationRule.missing_required_reference)]


class TestBulletWeightPresence:
    """MissingBulletWeight is reported iff both the catalog weight and the override are absent."""

    @pytest.mark.parametrize(
        "bullet_weight_id,bullet_weight_other,expected",
        [
            (None, None, True),
            (1, None, False),
            (None, 168.25, False),
            (1, 168.25, False),
        ],
    )
    def test_presence(self, bullet_weight_id, bullet_weight_other, expected: bool) -> None:
        draft = _valid_draft(
            bullet_weight_id=bullet_weight_id, bullet_weight_other=bullet_weight_other
        )
        reported = ("bullet_weight", ViolationRule.missing_bullet_weight) in _rules(validate(draft))
        assert reported is expected

    def test_override_alone_is_enough(self) -> None:
        """A free-form 168.25 without a catalog weight is accepted."""
        assert validate(_valid_draft(bullet_weight_id=None, bullet_weight_other=168.25)) == []


class TestNumericFields:
    """Quantity and measurement checks."""

    def test_negative_values_are_not_positive(self) -> None:
        draft = _valid_draft(
            quantity=-5, cartridge_overall_length=-1.0, bullet_weight_other=-10.5
        )
        assert _rules(validate(draft)) == {
            ("quantity", ViolationRule.not_positive),
            ("cartridge_overall_length", ViolationRule.not_positive),
            ("bullet_weight_other", ViolationRule.not_positive),
        }

    def test_absent_numbers_are_valid(self) -> None:
        draft = _valid_draft(
            quantity=None, cartridge_overall_length=None, powder_weight=None
        )
        assert validate(draft) == []

    def test_zero_is_not_positive(self) -> None:
        assert _rules(validate(_valid_draft(quantity=0, powder_weight=0.0))) == {
            ("quantity", ViolationRule.not_positive),
            ("powder_weight", ViolationRule.not_positive),
        }

    def test_fractional_quantity_is_not_an_integer(self) -> None:
        """Only NotAnInteger is reported, even for a negative fraction."""
        assert validate(_valid_draft(quantity=-2.5)) == [
            Violation("quantity", ViolationRule.not_an_integer)
        ]

    def test_bool_is_not_a_number(self) -> None:
        assert _rules(validate(_valid_draft(quantity=True, powder_weight=True))) == {
            ("quantity", ViolationRule.not_an_integer),
            ("powder_weight", ViolationRule.not_a_number),
        }

    def test_text_is_not_a_number(self) -> None:
        assert validate(_valid_draft(cartridge_overall_length="2.8")) == [
            Violation("cartridge_overall_length", ViolationRule.not_a_number)
        ]

    def test_decimal_accepted(self) -> None:
        assert validate(_valid_draft(powder_weight=Decimal("44.5"))) == []


class TestValidateAgainstSnapshot:
    """Tests for validate_against_snapshot."""

    def test_consistent_draft(self, snapshot: TaxonomySnapshot) -> None:
        assert validate_against_snapshot(_valid_draft(), snapshot) == []

    def test_dependents_not_linked_to_type(self, snapshot: TaxonomySnapshot) -> None:
        draft = _valid_draft(cartridge_id=2, primer_type_id=2, powder_id=2)
        assert validate_against_snapshot(draft, snapshot) == [
            Violation("cartridge", ViolationRule.not_in_candidates),
            Violation("primer_type", ViolationRule.not_in_candidates),
            Violation("powder", ViolationRule.not_in_candidates),
        ]

    def test_unknown_cartridge_type(self, snapshot: TaxonomySnapshot) -> None:
        violations = validate_against_snapshot(_valid_draft(cartridge_type_id=99), snapshot)
        assert violations[0] == Violation("cartridge_type", ViolationRule.not_in_candidates)

    def test_bullet_weight_mismatch(self, snapshot: TaxonomySnapshot) -> None:
        """The 155gr A-MAX is not valid for the 168gr catalog weight."""
        assert validate_against_snapshot(_valid_draft(bullet_id=2), snapshot) == [
            Violation("bullet", ViolationRule.not_in_candidates)
        ]

    def test_unknown_bullet_weight(self, snapshot: TaxonomySnapshot) -> None:
        assert validate_against_snapshot(_valid_draft(bullet_weight_id=99), snapshot) == [
            Violation("bullet_weight", ViolationRule.not_in_candidates)
        ]

    def test_bullet_unchecked_with_override_only(self, snapshot: TaxonomySnapshot) -> None:
        draft = _valid_draft(bullet_weight_id=None, bullet_weight_other=168.25, bullet_id=2)
        assert validate_against_snapshot(draft, snapshot) == []

    def test_absent_values_not_reported_twice(self, snapshot: TaxonomySnapshot) -> None:
        """Absence is the job of validate; the snapshot check skips it."""
        assert validate_against_snapshot(SessionDraft(), snapshot) == []
