"""Tests for the dependent-selection filter engine."""

from __future__ import annotations

import pytest

from app.services.selection.filter_engine import (
    all_bullet_weights,
    candidate_bullet_weights,
    candidate_bullets,
    candidate_cartridges,
    candidate_powders,
    candidate_primer_types,
    collation_key,
)
from app.services.selection.taxonomy_snapshot import TaxonomySnapshot


class TestCandidateCartridges:
    """Tests for candidate_cartridges."""

    def test_exactly_the_linked_cartridges(self, snapshot: TaxonomySnapshot) -> None:
        """Every cartridge linked to the type is returned, and nothing else."""
        for cartridge_type in snapshot.cartridge_types:
            expected = {
                c.id for c in snapshot.cartridges if cartridge_type.id in c.cartridge_type_ids
            }
            actual = {c.id for c in candidate_cartridges(snapshot, cartridge_type.id)}
            assert actual == expected

    def test_rifle_offers_lapua_but_not_pistol_only(self, snapshot: TaxonomySnapshot) -> None:
        names = [c.name for c in candidate_cartridges(snapshot, 1)]
        assert "Lapua .308 Win" in names
        assert "9mm Luger" not in names

    def test_catalog_order_is_kept(self, snapshot: TaxonomySnapshot) -> None:
        """Cartridges are not re-sorted."""
        assert [c.id for c in candidate_cartridges(snapshot, 1)] == [1, 3, 4]

    def test_multi_type_cartridge_offered_for_each_type(self, snapshot: TaxonomySnapshot) -> None:
        assert 3 in {c.id for c in candidate_cartridges(snapshot, 1)}
        assert 3 in {c.id for c in candidate_cartridges(snapshot, 2)}

    def test_absent_upstream_yields_empty(self, snapshot: TaxonomySnapshot) -> None:
        assert candidate_cartridges(snapshot, None) == ()

    def test_unknown_upstream_yields_empty(self, snapshot: TaxonomySnapshot) -> None:
        """An id that matches nothing is not an error."""
        assert candidate_cartridges(snapshot, 999) == ()


class TestCandidatePrimerTypes:
    """Tests for candidate_primer_types."""

    def test_matches_single_cartridge_type_reference(self, snapshot: TaxonomySnapshot) -> None:
        assert [p.name for p in candidate_primer_types(snapshot, 1)] == [
            "Large Rifle",
            "Small Rifle",
        ]
        assert [p.name for p in candidate_primer_types(snapshot, 2)] == ["Small Pistol"]

    def test_absent_upstream_yields_empty(self, snapshot: TaxonomySnapshot) -> None:
        assert candidate_primer_types(snapshot, None) == ()


class TestCandidatePowders:
    """Tests for candidate_powders."""

    def test_exactly_the_linked_powders(self, snapshot: TaxonomySnapshot) -> None:
        assert {p.id for p in candidate_powders(snapshot, 1)} == {1, 3, 4, 5}
        assert {p.id for p in candidate_powders(snapshot, 2)} == {2, 4}

    def test_sorted_by_name_case_insensitively(self, snapshot: TaxonomySnapshot) -> None:
        """A lowercase name sorts among the others, not after every capitalized one."""
        names = [p.name for p in candidate_powders(snapshot, 1)]
        assert names == ["benchmark", "Blue Dot", "H4895", "Varget"]

    def test_absent_upstream_yields_empty(self, snapshot: TaxonomySnapshot) -> None:
        assert candidate_powders(snapshot, None) == ()


class TestCandidateBullets:
    """Tests for candidate_bullets."""

    def test_exactly_the_equal_weight_bullets(self, snapshot: TaxonomySnapshot) -> None:
        for bullet_weight in snapshot.bullet_weights:
            expected = {b.id for b in snapshot.bullets if b.weight == bullet_weight.weight}
            actual = {b.id for b in candidate_bullets(snapshot, bullet_weight.id)}
            assert actual == expected

    def test_168_offers_matchking_but_not_155(self, snapshot: TaxonomySnapshot) -> None:
        names = [b.name for b in candidate_bullets(snapshot, 1)]
        assert "Sierra MatchKing 168gr BTHP" in names
        assert "Hornady A-MAX 155gr" not in names

    def test_integer_and_float_weights_match(self, snapshot: TaxonomySnapshot) -> None:
        """A bullet stored as 168 matches the 168.0 catalog weight."""
        assert 3 in {b.id for b in candidate_bullets(snapshot, 1)}

    def test_sorted_by_manufacturer_then_name(self, snapshot: TaxonomySnapshot) -> None:
        bullets = candidate_bullets(snapshot, 1)
        assert [(b.manufacturer_name, b.name) for b in bullets] == [
            ("Hornady", "ELD Match 168gr"),
            ("Sierra", "Sierra MatchKing 168gr BTHP"),
        ]

    def test_absent_or_unknown_weight_yields_empty(self, snapshot: TaxonomySnapshot) -> None:
        assert candidate_bullets(snapshot, None) == ()
        assert candidate_bullets(snapshot, 42) == ()

    def test_weight_without_bullets_yields_empty(self) -> None:
        snapshot = TaxonomySnapshot.from_payload(
            {"bullet_weights": [{"id": 1, "weight": 300.0, "cartridge_type_ids": []}]}
        )
        assert candidate_bullets(snapshot, 1) == ()


class TestBulletWeights:
    """Tests for candidate_bullet_weights and all_bullet_weights."""

    def test_linked_weights_ascending(self, snapshot: TaxonomySnapshot) -> None:
        assert [bw.weight for bw in candidate_bullet_weights(snapshot, 1)] == [155.0, 168.0]
        assert [bw.weight for bw in candidate_bullet_weights(snapshot, 2)] == [115.0]

    def test_linked_weights_absent_upstream(self, snapshot: TaxonomySnapshot) -> None:
        assert candidate_bullet_weights(snapshot, None) == ()

    def test_all_weights_ascending(self, snapshot: TaxonomySnapshot) -> None:
        assert [bw.weight for bw in all_bullet_weights(snapshot)] == [115.0, 155.0, 168.0]


class TestSnapshot:
    """Tests for TaxonomySnapshot helpers."""

    def test_weights_normalised_to_float(self, snapshot: TaxonomySnapshot) -> None:
        assert all(isinstance(b.weight, float) for b in snapshot.bullets)
        assert all(isinstance(bw.weight, float) for bw in snapshot.bullet_weights)

    def test_bullet_weight_lookup(self, snapshot: TaxonomySnapshot) -> None:
        assert snapshot.bullet_weight(2).weight == 155.0
        assert snapshot.bullet_weight(None) is None
        assert snapshot.bullet_weight(99) is None

    def test_counts(self, snapshot: TaxonomySnapshot) -> None:
        assert snapshot.counts() == {
            "cartridge_types": 2,
            "cartridges": 4,
            "primer_types": 3,
            "powders": 5,
            "bullet_weights": 3,
            "bullets": 4,
        }

    def test_empty_payload(self) -> None:
        snapshot = TaxonomySnapshot.from_payload({})
        assert candidate_cartridges(snapshot, 1) == ()
        assert not snapshot.has_cartridge_type(1)


def test_collation_key_orders_case_insensitively() -> None:
    """Case only breaks ties; lowercase sorts first among equal letters."""
    assert sorted(["b", "A", "a", "B"], key=collation_key) == ["a", "A", "b", "B"]


def test_collation_key_places_accented_letters_with_their_base() -> None:
    assert sorted(["Zeta", "Énergie", "Bravo", "Eclat"], key=collation_key) == [
        "Bravo",
        "Eclat",
        "Énergie",
        "Zeta",
    ]


class TestAccentedNames:
    """Accented names sort with their unaccented letters, not after Z."""

    @pytest.fixture
    def accented(self) -> TaxonomySnapshot:
        return TaxonomySnapshot.from_payload(
            {
                "cartridge_types": [{"id": 1, "name": "Rifle"}],
                "powders": [
                    {"id": 1, "name": "Zeta", "manufacturer_name": "Vihtavuori", "cartridge_type_ids": [1]},
                    {"id": 2, "name": "Énergie", "manufacturer_name": "Vectan", "cartridge_type_ids": [1]},
                    {"id": 3, "name": "Bravo", "manufacturer_name": "Hodgdon", "cartridge_type_ids": [1]},
                ],
                "bullet_weights": [{"id": 1, "weight": 168.0, "cartridge_type_ids": [1]}],
                "bullets": [
                    {"id": 1, "name": "MatchKing 168gr", "manufacturer_name": "Sierra", "weight": 168.0},
                    {"id": 2, "name": "Match 168gr", "manufacturer_name": "Éclat", "weight": 168.0},
                ],
            }
        )

    def test_powders(self, accented: TaxonomySnapshot) -> None:
        names = [p.name for p in candidate_powders(accented, 1)]
        assert names == ["Bravo", "Énergie", "Zeta"]

    def test_bullet_manufacturers(self, accented: TaxonomySnapshot) -> None:
        manufacturers = [b.manufacturer_name for b in candidate_bullets(accented, 1)]
        assert manufacturers == ["Éclat", "Sierra"]
