"""
Points and subsets of the Miracle Octad Generator grid.

The MOG is a 4×6 grid. Columns are hexacode coordinates, rows are labelled by
GF(4). Points are numbered row by row:

    0 |  0  1   2  3   4  5
    1 |  6  7   8  9  10 11
    ω | 12 13  14 15  16 17
    ω̄ | 18 19  20 21  22 23

A MOGVector is a subset of the 24 points, i.e. a vector of GF(2)^24. It is held
as a 24-bit integer mask (bit i is point i), which makes the codeword table a
plain set of ints and keeps XOR/AND/OR and weight cheap. numpy arrays are the
bridge to the array form used for the code's matrix computations.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Callable, Iterable, Iterator, Any

import numpy as np

from ..algebra.enumerated import Enumerated, check_index
from ..algebra.finite_field import F4Point
from ..algebra.hexacode import HexacodePoint, HexacodeVector
from ..algebra.permutation import Permutation


N_POINTS = 24
_FULL_MASK = (1 << N_POINTS) - 1


@dataclass(frozen=True)
class MOGPoint(Enumerated):
    """A cell of the MOG grid.

    Attributes:
        col: Column, as a hexacode coordinate
        row: Row label
    """
    col: HexacodePoint
    row: F4Point

    @classmethod
    def cardinality(cls) -> int:
        return N_POINTS

    @classmethod
    def from_index(cls, index: int) -> 'MOGPoint':
        return _MOG_POINTS[check_index(cls, index)]

    @property
    def index(self) -> int:
        return self.col.index + 6 * self.row.index

    def __repr__(self) -> str:
        return f"MOGPoint({self.index}: col={self.col.index}, row={self.row})"


_MOG_POINTS = tuple(
    MOGPoint(HexacodePoint.from_index(i % 6), F4Point.from_index(i // 6))
    for i in range(N_POINTS)
)


def _lex_key(mask: int) -> int:
    # Point 0 is the most significant position in the lexicographic order.
    return int(format(mask, '024b')[::-1], 2)


@total_ordering
class MOGVector:
    """A subset of the 24 MOG points.

    Vectors are immutable values. `^` (also `+`) is symmetric difference, `&` and
    `|` are intersection and union. Ordering is lexicographic over the component
    sequence 0..23 with False < True.
    """

    __slots__ = ('_mask',)

    def __init__(self, mask: int = 0):
        mask = int(mask)
        if not 0 <= mask <= _FULL_MASK:
            raise ValueError(f"MOG vector mask out of range: {mask:#x}")
        self._mask = mask

    @classmethod
    def zero(cls) -> 'MOGVector':
        return cls(0)

    @classmethod
    def full(cls) -> 'MOGVector':
        return cls(_FULL_MASK)

    @classmethod
    def from_fn(cls, fn: Callable[[MOGPoint], bool]) -> 'MOGVector':
        mask = 0
        for p in MOGPoint.points():
            if fn(p):
                mask |= 1 << p.index
        return cls(mask)

    @classmethod
    def from_points(cls, points: Iterable[MOGPoint]) -> 'MOGVector':
        mask = 0
        for p in points:
            mask |= 1 << p.index
        return cls(mask)

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> 'MOGVector':
        return cls.from_points(MOGPoint.from_index(i) for i in indices)

    @classmethod
    def column(cls, col: HexacodePoint) -> 'MOGVector':
        return cls.from_fn(lambda p: p.col == col)

    @classmethod
    def from_array(cls, array: Any) -> 'MOGVector':
        """Build from a length-24 array of 0/1 (numpy or jax)."""
        bits = np.asarray(array).astype(np.int64).reshape(-1)
        if bits.shape[0] != N_POINTS:
            raise ValueError(f"expected {N_POINTS} components, got {bits.shape[0]}")
        return cls(int(np.dot(bits != 0, 1 << np.arange(N_POINTS, dtype=np.int64))))

    def to_array(self) -> np.ndarray:
        """Components as a (24,) int32 array of 0/1."""
        return ((self._mask >> np.arange(N_POINTS)) & 1).astype(np.int32)

    @property
    def mask(self) -> int:
        return self._mask

    def component(self, point: MOGPoint) -> bool:
        return bool(self._mask >> point.index & 1)

    __getitem__ = component

    def __contains__(self, point: MOGPoint) -> bool:
        return self.component(point)

    def with_component(self, point: MOGPoint, value: bool) -> 'MOGVector':
        bit = 1 << point.index
        return MOGVector(self._mask | bit if value else self._mask & ~bit)

    def weight(self) -> int:
        return bin(self._mask).count('1')

    def points(self) -> Iterator[MOGPoint]:
        """Points in the subset, in index order."""
        mask = self._mask
        i = 0
        while mask:
            if mask & 1:
                yield MOGPoint.from_index(i)
            mask >>= 1
            i += 1

    def contains(self, other: 'MOGVector') -> bool:
        """True if other is a subset of self."""
        return other._mask & ~self._mask == 0

    def permute(self, permutation: Permutation[MOGPoint]) -> 'MOGVector':
        """Image of this subset under a permutation of the points."""
        return MOGVector.from_points(permutation.apply(p) for p in self.points())

    def column_scores(self) -> HexacodeVector:
        """Sum of the row labels of the chosen points in each column."""
        scores = [F4Point.ZERO] * 6
        for p in self.points():
            scores[p.col.index] = scores[p.col.index] + p.row
        return HexacodeVector(tuple(scores))

    def __xor__(self, other: 'MOGVector') -> 'MOGVector':
        if not isinstance(other, MOGVector):
            return NotImplemented
        return MOGVector(self._mask ^ other._mask)

    __add__ = __xor__

    def __and__(self, other: 'MOGVector') -> 'MOGVector':
        if not isinstance(other, MOGVector):
            return NotImplemented
        return MOGVector(self._mask & other._mask)

    def __or__(self, other: 'MOGVector') -> 'MOGVector':
        if not isinstance(other, MOGVector):
            return NotImplemented
        return MOGVector(self._mask | other._mask)

    def __invert__(self) -> 'MOGVector':
        return MOGVector(self._mask ^ _FULL_MASK)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MOGVector):
            return NotImplemented
        return self._mask == other._mask

    def __lt__(self, other: 'MOGVector') -> bool:
        if not isinstance(other, MOGVector):
            return NotImplemented
        return _lex_key(self._mask) < _lex_key(other._mask)

    def __hash__(self) -> int:
        return hash(self._mask)

    def __repr__(self) -> str:
        return f"MOGVector({[p.index for p in self.points()]})"

    def __str__(self) -> str:
        rows = []
        for r in range(4):
            cells = ['#' if self._mask >> (6 * r + c) & 1 else '.' for c in range(6)]
            rows.append(f"{cells[0]}{cells[1]} {cells[2]}{cells[3]} {cells[4]}{cells[5]}")
        return '\n'.join(rows)
