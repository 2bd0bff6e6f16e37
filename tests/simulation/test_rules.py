"""Tests for grid_automata.simulation.rules module."""

from __future__ import annotations

import pytest

from grid_automata.simulation.rules import CONWAY_RULE, HEX_TILE_RULE, LifeRule


class TestConwayRule:
    @pytest.mark.parametrize("count", [2, 3])
    def test_active_survives(self, count: int) -> None:
        assert CONWAY_RULE(True, count)

    @pytest.mark.parametrize("count", [0, 1, 4, 8, 26])
    def test_active_dies(self, count: int) -> None:
        assert not CONWAY_RULE(True, count)

    def test_birth_on_exactly_three(self) -> None:
        assert CONWAY_RULE(False, 3)
        assert not CONWAY_RULE(False, 2)
        assert not CONWAY_RULE(False, 4)


class TestHexTileRule:
    @pytest.mark.parametrize("count", [0, 3, 4, 5, 6])
    def test_black_tile_flips_white(self, count: int) -> None:
        assert not HEX_TILE_RULE(True, count)

    @pytest.mark.parametrize("count", [1, 2])
    def test_black_tile_stays_black(self, count: int) -> None:
        assert HEX_TILE_RULE(True, count)

    def test_white_tile_flips_on_exactly_two(self) -> None:
        assert HEX_TILE_RULE(False, 2)
        for count in (1, 3, 6):
            assert not HEX_TILE_RULE(False, count)


class TestLifeRuleNotation:
    def test_parse_round_trip(self) -> None:
        assert LifeRule.parse("B3/S23") == CONWAY_RULE
        assert str(CONWAY_RULE) == "B3/S23"
        assert str(HEX_TILE_RULE) == "B2/S12"

    def test_parse_is_case_insensitive(self) -> None:
        assert LifeRule.parse("b2/s12") == HEX_TILE_RULE

    def test_parse_empty_survival(self) -> None:
        rule = LifeRule.parse("B36/S")
        assert rule.survive == frozenset()
        assert rule.birth == frozenset({3, 6})

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError, match="Expected B<digits>/S<digits>"):
            LifeRule.parse("23/3")


class TestLifeRuleValidation:
    def test_birth_on_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="birth on 0"):
            LifeRule.from_counts(birth={0, 3}, survive={2})

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError, match=">= 0"):
            LifeRule.from_counts(birth={3}, survive={-1})

    def test_rule_is_hashable(self) -> None:
        assert len({CONWAY_RULE, LifeRule.parse("B3/S23"), HEX_TILE_RULE}) == 2

    def test_positional_fields_are_birth_then_survive(self) -> None:
        rule = LifeRule(frozenset({3}), frozenset({2, 3}))
        assert rule == CONWAY_RULE
        assert str(rule) == "B3/S23"
