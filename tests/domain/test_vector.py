"""Tests for grid_automata.domain.vector module."""

from __future__ import annotations

import pytest

from grid_automata.domain.vector import Vector


class TestVectorArithmetic:
    def test_elementwise_add_sub_rem(self) -> None:
        v1 = Vector.of(10, 20)
        v2 = Vector.of(2, 3)
        assert v1 + v2 == Vector.of(12, 23)
        assert v1 - v2 == Vector.of(8, 17)
        assert v1 % v2 == Vector.of(0, 2)

    def test_scaling_both_sides(self) -> None:
        assert Vector.of(3, -4) * 5 == Vector.of(15, -20)
        assert 5 * Vector.of(3, -4) == Vector.of(15, -20)

    def test_negation(self) -> None:
        assert -Vector.of(1, -2, 3) == Vector.of(-1, 2, -3)

    def test_min_max_are_elementwise_and_symmetric(self) -> None:
        v1 = Vector.of(20, -10)
        v2 = Vector.of(-2, 5)
        assert v1.min(v2) == Vector.of(-2, -10)
        assert v1.max(v2) == Vector.of(20, 5)
        assert v1.min(v2) == v2.min(v1)
        assert v1.max(v2) == v2.max(v1)

    def test_checked_sub_signals_underflow_with_none(self) -> None:
        v1 = Vector.of(10, 5)
        v2 = Vector.of(22, 15)
        assert v1.checked_sub(v2) is None
        assert v2.checked_sub(v1) == Vector.of(12, 10)

    def test_checked_sub_allows_zero_result(self) -> None:
        assert Vector.of(3, 3).checked_sub(Vector.of(3, 0)) == Vector.of(0, 3)

    def test_manhattan_length(self) -> None:
        assert Vector.of(3, -4).manhattan_length() == 7
        assert Vector.of(-1, -1, -1, -1).manhattan_length() == 4
        assert Vector.zeros(3).manhattan_length() == 0

    def test_remainder_follows_floor_mod(self) -> None:
        assert Vector.of(-1, 7) % Vector.of(3, 3) == Vector.of(2, 1)
        assert Vector.of(-7, 7) % Vector.of(3, -3) == Vector.of(2, -2)

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (Vector.of(1, 2), Vector.of(3, 4)),
            (Vector.of(-5, 0, 7), Vector.of(2, -9, 1)),
            (Vector.of(0, 0, 0, 0), Vector.of(1, -1, 1, -1)),
        ],
    )
    def test_add_sub_identities(self, a: Vector, b: Vector) -> None:
        assert a + b - b == a
        assert a + b == b + a
        assert (a - b) + b == a

    def test_arity_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="arity mismatch"):
            Vector.of(1, 2) + Vector.of(1, 2, 3)
        with pytest.raises(ValueError, match="arity mismatch"):
            Vector.of(1, 2).min(Vector.of(1, 2, 3))


class TestVectorValue:
    def test_structural_equality_and_hash(self) -> None:
        assert Vector.of(1, 2) == Vector((1, 2))
        assert len({Vector.of(1, 2), Vector.of(1, 2), Vector.of(2, 1)}) == 2

    def test_immutable(self) -> None:
        v = Vector.of(1, 2)
        with pytest.raises(AttributeError):
            v.components = (3, 4)  # type: ignore[misc]

    def test_sequence_protocol(self) -> None:
        v = Vector.of(4, 5, 6)
        assert len(v) == 3
        assert v.arity == 3
        assert v[1] == 5
        assert list(v) == [4, 5, 6]

    def test_empty_vector_rejected(self) -> None:
        with pytest.raises(ValueError):
            Vector(())

    def test_zeros(self) -> None:
        assert Vector.zeros(4) == Vector.of(0, 0, 0, 0)
        with pytest.raises(ValueError):
            Vector.zeros(0)

    def test_extend_pads_with_zeros(self) -> None:
        assert Vector.of(1, 2).extend(4) == Vector.of(1, 2, 0, 0)
        assert Vector.of(1, 2).extend(2) == Vector.of(1, 2)

    def test_extend_cannot_shrink(self) -> None:
        with pytest.raises(ValueError, match="cannot shrink"):
            Vector.of(1, 2, 3).extend(2)
