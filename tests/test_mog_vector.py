"""
Tests for MOG points and vectors.
Run with: python -m pytest tests/ -v
"""

import numpy as np
import pytest

from miracle_octad import (
    F4Point,
    HexacodePoint,
    HexacodeVector,
    MOGPoint,
    MOGVector,
    Permutation,
)


ZERO, ONE, ALPHA, BETA = F4Point.points()


class TestMOGPoint:

    def test_numbering(self):
        assert MOGPoint.cardinality() == 24
        assert MOGPoint(HexacodePoint.from_index(0), ZERO).index == 0
        assert MOGPoint(HexacodePoint.from_index(5), ZERO).index == 5
        assert MOGPoint(HexacodePoint.from_index(0), ONE).index == 6
        assert MOGPoint(HexacodePoint.from_index(5), BETA).index == 23
        for i in range(24):
            p = MOGPoint.from_index(i)
            assert p.index == i
            assert p.col.index == i % 6
            assert p.row.index == i // 6

    def test_invalid_index(self):
        with pytest.raises(ValueError):
            MOGPoint.from_index(24)


class TestMOGVector:

    def test_construction(self):
        v = MOGVector.from_indices([0, 7, 23])
        assert v.weight() == 3
        assert [p.index for p in v.points()] == [0, 7, 23]
        assert MOGVector.from_fn(lambda p: p.index in (0, 7, 23)) == v
        assert MOGVector.zero().weight() == 0
        assert MOGVector.full().weight() == 24

    def test_column(self):
        col = MOGVector.column(HexacodePoint.from_index(3))
        assert [p.index for p in col.points()] == [3, 9, 15, 21]

    def test_components(self):
        v = MOGVector.from_indices([4])
        p = MOGPoint.from_index(4)
        assert v.component(p)
        assert p in v
        assert not v[MOGPoint.from_index(5)]
        assert v.with_component(p, False) == MOGVector.zero()
        assert MOGVector.zero().with_component(p, True) == v

    def test_set_operations(self):
        a = MOGVector.from_indices([0, 1, 2])
        b = MOGVector.from_indices([2, 3])
        assert a ^ b == MOGVector.from_indices([0, 1, 3])
        assert a + b == a ^ b
        assert a & b == MOGVector.from_indices([2])
        assert a | b == MOGVector.from_indices([0, 1, 2, 3])
        assert (~a).weight() == 21
        assert a.contains(MOGVector.from_indices([0, 2]))
        assert not a.contains(b)

    def test_mask_range(self):
        with pytest.raises(ValueError):
            MOGVector(1 << 24)

    def test_lexicographic_order(self):
        # Component 0 is most significant
        assert MOGVector.from_indices([1]) < MOGVector.from_indices([0])
        assert MOGVector.from_indices([23]) < MOGVector.from_indices([22])
        assert MOGVector.zero() < MOGVector.from_indices([23])
        assert MOGVector.from_indices([0]) < MOGVector.from_indices([0, 23])
        assert max(MOGVector.from_indices([i]) for i in range(24)) == MOGVector.from_indices([0])

    def test_array_bridge(self):
        v = MOGVector.from_indices([1, 6, 12, 23])
        arr = v.to_array()
        assert arr.shape == (24,)
        assert arr.sum() == 4
        assert arr[6] == 1
        assert MOGVector.from_array(arr) == v
        assert MOGVector.from_array(np.ones(24)) == MOGVector.full()
        with pytest.raises(ValueError):
            MOGVector.from_array(np.zeros(23))

    def test_permute(self):
        p = Permutation.new_swap(MOGPoint.from_index(0), MOGPoint.from_index(5))
        v = MOGVector.from_indices([0, 1])
        assert v.permute(p) == MOGVector.from_indices([1, 5])
        assert v.permute(Permutation.identity(MOGPoint)) == v

    def test_column_scores(self):
        v = MOGVector.from_fn(lambda p: p.row is not ZERO and p.col.index == 0)
        assert v.column_scores() == HexacodeVector.zero()
        w = MOGVector.from_points([MOGPoint(HexacodePoint.from_index(i), ALPHA) for i in range(6)])
        assert w.column_scores() == HexacodeVector.constant(ALPHA)

    def test_str_grid(self):
        lines = str(MOGVector.from_indices([0, 23])).split('\n')
        assert lines[0] == '#. .. ..'
        assert lines[3] == '.. .. .#'
