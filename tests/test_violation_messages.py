"""Tests for violation message rendering."""

from __future__ import annotations

from app.services.selection.validator import SessionDraft, Violation, ViolationRule, validate
from app.services.violation_messages import (
    MISSING_BULLET_WEIGHT_MESSAGE,
    inline_messages,
    message_for,
    messages_for,
)


class TestMessageFor:
    """Tests for message_for."""

    def test_missing_reference(self) -> None:
        violation = Violation("cartridge_type", ViolationRule.missing_required_reference)
        assert message_for(violation) == "Cartridge type must be selected"

    def test_missing_bullet_weight(self) -> None:
        violation = Violation("bullet_weight", ViolationRule.missing_bullet_weight)
        assert message_for(violation) == MISSING_BULLET_WEIGHT_MESSAGE
        assert MISSING_BULLET_WEIGHT_MESSAGE == (
            "Bullet weight must be selected or custom weight must be entered"
        )

    def test_missing_value(self) -> None:
        violation = Violation("loaded_at", ViolationRule.missing_required_value)
        assert message_for(violation) == "Loaded at can't be blank"

    def test_numeric_rules(self) -> None:
        assert message_for(Violation("quantity", ViolationRule.not_an_integer)) == (
            "Quantity must be an integer"
        )
        assert message_for(Violation("powder_weight", ViolationRule.not_positive)) == (
            "Powder weight must be greater than 0"
        )
        assert message_for(
            Violation("cartridge_overall_length", ViolationRule.not_a_number)
        ) == "Cartridge overall length is not a number"

    def test_not_in_candidates_names_upstream(self) -> None:
        assert message_for(Violation("powder", ViolationRule.not_in_candidates)) == (
            "Powder is not valid for the selected cartridge type"
        )
        assert message_for(Violation("bullet", ViolationRule.not_in_candidates)) == (
            "Bullet is not valid for the selected bullet weight"
        )
        assert message_for(Violation("primer", ViolationRule.not_in_candidates)) == (
            "Primer is not a known option"
        )

    def test_unlabelled_field_is_humanized(self) -> None:
        violation = Violation("some_field", ViolationRule.missing_required_reference)
        assert message_for(violation) == "Some field must be selected"


class TestGrouping:
    """Tests for messages_for and inline_messages."""

    def test_messages_keep_validator_order(self) -> None:
        violations = validate(SessionDraft())
        assert messages_for(violations)[0] == "Account must be selected"
        assert messages_for(violations)[-1] == MISSING_BULLET_WEIGHT_MESSAGE

    def test_loaded_at_is_summary_only(self) -> None:
        by_field = inline_messages(validate(SessionDraft()))
        assert "loaded_at" not in by_field
        assert by_field["bullet_weight"] == [MISSING_BULLET_WEIGHT_MESSAGE]
        assert by_field["cartridge"] == ["Cartridge must be selected"]
