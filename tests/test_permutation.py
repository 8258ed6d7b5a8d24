"""
Tests for the permutation engine.
Run with: python -m pytest tests/ -v
"""

import random

import pytest

from miracle_octad import (
    F4Point,
    HexacodePoint,
    MOGPoint,
    Permutation,
    NotABijectionError,
)


ZERO, ONE, ALPHA, BETA = F4Point.points()


def random_permutation(rng: random.Random, point_type) -> Permutation:
    images = list(point_type.points())
    rng.shuffle(images)
    return Permutation.from_fn(lambda p: images[p.index], point_type)


class TestConstruction:

    def test_identity(self):
        p = Permutation.identity(MOGPoint)
        assert p.is_identity()
        assert all(p.apply(x) == x for x in MOGPoint.points())
        assert p.moved_points() == []
        assert p.disjoint_cycles() == []

    def test_swap(self):
        p = Permutation.new_swap(ONE, BETA)
        assert p.apply(ONE) == BETA
        assert p.apply(BETA) == ONE
        assert p.apply(ALPHA) == ALPHA
        assert p == Permutation.new_swap(BETA, ONE)
        assert Permutation.new_swap(ALPHA, ALPHA).is_identity()

    def test_cycle(self):
        p = Permutation.new_cycle([ZERO, ONE, ALPHA])
        assert p.apply(ZERO) == ONE
        assert p.apply(ONE) == ALPHA
        assert p.apply(ALPHA) == ZERO
        assert p.apply(BETA) == BETA
        assert p.order() == 3

    def test_cycle_rejects_repeats(self):
        with pytest.raises(NotABijectionError):
            Permutation.new_cycle([ZERO, ONE, ZERO])

    def test_from_fn_rejects_non_injective(self):
        with pytest.raises(NotABijectionError):
            Permutation.from_fn(lambda a: a * ZERO, F4Point)

    def test_from_fn_field_maps(self):
        shift = Permutation.from_fn(lambda a: a + ONE, F4Point)
        assert shift.cycle_type() == (2, 2)
        frobenius = Permutation.from_fn(F4Point.conjugate, F4Point)
        assert frobenius == Permutation.new_swap(ALPHA, BETA)

    def test_mixed_types_rejected(self):
        with pytest.raises(NotABijectionError):
            Permutation.new_swap(ZERO, HexacodePoint.from_index(0))


class TestGroupLaws:

    def test_composition_order(self):
        p = Permutation.new_swap(ZERO, ONE)
        q = Permutation.new_swap(ONE, ALPHA)
        for x in F4Point.points():
            assert (p * q).apply(x) == q.apply(p.apply(x))
        assert p * q != q * p

    def test_inverse(self):
        rng = random.Random(7)
        for _ in range(20):
            p = random_permutation(rng, MOGPoint)
            assert p.inverse().inverse() == p
            assert (p * p.inverse()).is_identity()
            assert (p.inverse() * p).is_identity()
            for x in MOGPoint.points():
                assert p.apply_inverse(p.apply(x)) == x

    def test_power_and_order(self):
        rng = random.Random(11)
        for _ in range(10):
            p = random_permutation(rng, MOGPoint)
            assert (p ** p.order()).is_identity()
            assert p ** -1 == p.inverse()
            assert (p ** 0).is_identity()

    def test_cycles_reconstruct(self):
        rng = random.Random(3)
        for _ in range(20):
            p = random_permutation(rng, MOGPoint)
            rebuilt = Permutation.identity(MOGPoint)
            for cycle in p.disjoint_cycles():
                assert len(cycle) >= 2
                assert cycle[0].index == min(x.index for x in cycle)
                rebuilt = rebuilt * Permutation.new_cycle(cycle)
            assert rebuilt == p
            assert sum(len(c) for c in p.disjoint_cycles()) == len(p.moved_points())

    def test_hashable(self):
        a = Permutation.new_swap(ZERO, ONE)
        b = Permutation.new_swap(ONE, ZERO)
        assert len({a, b, Permutation.identity(F4Point)}) == 2


class TestMapInjective:

    def test_transport_along_row_embedding(self):
        col = HexacodePoint.from_index(2)
        p = Permutation.new_cycle([ONE, ALPHA, BETA])
        lifted = p.map_injective_unchecked(lambda r: MOGPoint(col, r), MOGPoint)
        assert lifted.point_type is MOGPoint
        assert lifted.apply(MOGPoint(col, ONE)) == MOGPoint(col, ALPHA)
        assert lifted.apply(MOGPoint(col, BETA)) == MOGPoint(col, ONE)
        assert lifted.apply(MOGPoint(col, ZERO)) == MOGPoint(col, ZERO)
        assert len(lifted.moved_points()) == 3
