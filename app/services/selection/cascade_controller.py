"""Cascade controller: keeps dependent option lists in step with upstream selections.

Two triggers drive the cascade:

- cartridge type change → rebuild cartridge, primer type and powder lists and
  clear those three selections;
- bullet weight change → rebuild the bullet list and clear the bullet selection.

Dependent selections are cleared unconditionally, even when the previous
choice would still be offered under the new upstream value. Option lists are
always replaced wholesale and always start with the "none selected" option.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from app.services.selection.filter_engine import (
    all_bullet_weights,
    candidate_bullets,
    candidate_cartridges,
    candidate_powders,
    candidate_primer_types,
)
from app.services.selection.taxonomy_snapshot import TaxonomySnapshot

logger = logging.getLogger(__name__)


class SelectionField(str, Enum):
    """The six selectable taxonomy fields."""

    cartridge_type = "cartridge_type"
    cartridge = "cartridge"
    primer_type = "primer_type"
    powder = "powder"
    bullet_weight = "bullet_weight"
    bullet = "bullet"


# Fields recomputed and cleared by each upstream trigger.
CARTRIDGE_TYPE_DEPENDENTS: tuple[SelectionField, ...] = (
    SelectionField.cartridge,
    SelectionField.primer_type,
    SelectionField.powder,
)
BULLET_WEIGHT_DEPENDENTS: tuple[SelectionField, ...] = (SelectionField.bullet,)


class UnknownFieldError(ValueError):
    """Raised when a field name does not name one of the selectable fields."""


class InvalidSelectionError(ValueError):
    """Raised when a value is not offered by the field's current option list."""

    def __init__(self, field: SelectionField, value: int) -> None:
        super().__init__(f"{field.value} id {value} is not a current option")
        self.field = field
        self.value = value


def parse_field(name: str | SelectionField) -> SelectionField:
    """Return the SelectionField for ``name``; raise UnknownFieldError if unknown."""
    if isinstance(name, SelectionField):
        return name
    try:
        return SelectionField(name)
    except ValueError:
        raise UnknownFieldError(f"Unknown selection field: {name!r}") from None


@dataclass(frozen=True)
class Option:
    """One entry of a rendered option list. ``id`` None is the empty choice."""

    id: int | None
    label: str


NONE_OPTION = Option(id=None, label="")


@dataclass
class SelectionState:
    """Current value of each selectable field plus the free-form weight override."""

    cartridge_type_id: int | None = None
    cartridge_id: int | None = None
    primer_type_id: int | None = None
    powder_id: int | None = None
    bullet_weight_id: int | None = None
    bullet_id: int | None = None
    bullet_weight_other: float | None = None

    def get(self, field: SelectionField) -> int | None:
        return getattr(self, f"{field.value}_id")

    def set(self, field: SelectionField, value: int | None) -> None:
        setattr(self, f"{field.value}_id", value)


def format_weight(weight: float) -> str:
    """Label for a catalog bullet weight (e.g. 168.0 → "168.0")."""
    return str(float(weight))


def _with_none(options: list[Option]) -> tuple[Option, ...]:
    return (NONE_OPTION, *options)


class CascadeController:
    """Owns the Selection State and the six rendered option lists.

    The taxonomy snapshot is never mutated. On construction the dependent
    lists are built from whatever upstream values ``initial_state`` carries
    (editing an existing record); pre-populated dependent selections survive
    only if their ids are offered by the rebuilt list.
    """

    def __init__(
        self,
        snapshot: TaxonomySnapshot,
        initial_state: SelectionState | None = None,
    ) -> None:
        self._snapshot = snapshot
        self._state = replace(initial_state) if initial_state is not None else SelectionState()
        self._options: dict[SelectionField, tuple[Option, ...]] = {
            SelectionField.cartridge_type: _with_none(
                [Option(ct.id, ct.name) for ct in snapshot.cartridge_types]
            ),
            SelectionField.bullet_weight: _with_none(
                [Option(bw.id, format_weight(bw.weight)) for bw in all_bullet_weights(snapshot)]
            ),
        }
        self._rebuild_cartridge_type_dependents()
        self._rebuild_bullet_weight_dependents()
        for field in (*CARTRIDGE_TYPE_DEPENDENTS, *BULLET_WEIGHT_DEPENDENTS):
            if not self._is_offered(field, self._state.get(field)):
                self._state.set(field, None)

    @property
    def snapshot(self) -> TaxonomySnapshot:
        return self._snapshot

    @property
    def state(self) -> SelectionState:
        """Copy of the current selection state."""
        return replace(self._state)

    def get_option_list(self, field: str | SelectionField) -> tuple[Option, ...]:
        """Ordered option list for ``field``; the none option is always first."""
        return self._options[parse_field(field)]

    def option_lists(self) -> dict[SelectionField, tuple[Option, ...]]:
        return {field: self._options[field] for field in SelectionField}

    def on_cartridge_type_changed(self, cartridge_type_id: int | None) -> None:
        """Rebuild cartridge, primer type and powder lists; clear those selections."""
        logger.debug("Cartridge type changed to %s", cartridge_type_id)
        self._state.cartridge_type_id = cartridge_type_id
        self._rebuild_cartridge_type_dependents()
        for field in CARTRIDGE_TYPE_DEPENDENTS:
            self._state.set(field, None)

    def on_bullet_weight_changed(self, bullet_weight_id: int | None) -> None:
        """Rebuild the bullet list; clear the bullet selection."""
        logger.debug("Bullet weight changed to %s", bullet_weight_id)
        self._state.bullet_weight_id = bullet_weight_id
        self._rebuild_bullet_weight_dependents()
        for field in BULLET_WEIGHT_DEPENDENTS:
            self._state.set(field, None)

    def select(self, field: str | SelectionField, value: int | None) -> None:
        """Set a selection. Upstream fields are routed through their cascade trigger.

        Raises InvalidSelectionError when ``value`` is not in the field's
        current option list.
        """
        field = parse_field(field)
        if field is SelectionField.cartridge_type:
            self._require_offered(field, value)
            self.on_cartridge_type_changed(value)
            return
        if field is SelectionField.bullet_weight:
            self._require_offered(field, value)
            self.on_bullet_weight_changed(value)
            return
        self._require_offered(field, value)
        self._state.set(field, value)

    def set_bullet_weight_other(self, value: float | None) -> None:
        """Set the free-form bullet weight. Does not touch the catalog choice."""
        self._state.bullet_weight_other = value

    def _rebuild_cartridge_type_dependents(self) -> None:
        cartridge_type_id = self._state.cartridge_type_id
        self._options[SelectionField.cartridge] = _with_none(
            [Option(c.id, c.name) for c in candidate_cartridges(self._snapshot, cartridge_type_id)]
        )
        self._options[SelectionField.primer_type] = _with_none(
            [
                Option(p.id, p.name)
                for p in candidate_primer_types(self._snapshot, cartridge_type_id)
            ]
        )
        self._options[SelectionField.powder] = _with_none(
            [
                Option(p.id, f"{p.manufacturer_name} - {p.name}")
                for p in candidate_powders(self._snapshot, cartridge_type_id)
            ]
        )

    def _rebuild_bullet_weight_dependents(self) -> None:
        self._options[SelectionField.bullet] = _with_none(
            [
                Option(b.id, f"{b.manufacturer_name} - {b.name}")
                for b in candidate_bullets(self._snapshot, self._state.bullet_weight_id)
            ]
        )

    def _is_offered(self, field: SelectionField, value: int | None) -> bool:
        return any(option.id == value for option in self._options[field])

    def _require_offered(self, field: SelectionField, value: int | None) -> None:
        if not self._is_offered(field, value):
            raise InvalidSelectionError(field, value)
