"""
Permutations of enumerable finite sets.

A Permutation[T] is stored as a pair of index tuples (forward and inverse) over the
canonical numbering of T, so every point type here (4, 6 or 24 points) gets an
array-backed bijection with identity as the default.

Composition reads left to right: (p * q).apply(x) == q.apply(p.apply(x)),
i.e. apply p first, then q.
"""

import math
from typing import TypeVar, Generic, Callable, Iterable, List, Optional, Sequence, Tuple, Type, Any

from .enumerated import Enumerated
from ..errors import NotABijectionError

T = TypeVar('T', bound=Enumerated)
U = TypeVar('U', bound=Enumerated)


class Permutation(Generic[T]):
    """Bijection of an enumerable point type onto itself.

    Attributes:
        point_type: The Enumerated class acted on
    """

    __slots__ = ('_point_type', '_forward', '_inverse')

    def __init__(self, point_type: Type[T], forward: Sequence[int],
                 inverse: Optional[Sequence[int]] = None):
        """Build from a forward index table.

        Args:
            point_type: Domain of the permutation
            forward: forward[i] is the index of the image of point i
            inverse: Precomputed inverse table; derived from forward if omitted

        Raises:
            NotABijectionError: If forward is not a permutation of range(N)
        """
        n = point_type.cardinality()
        forward = tuple(forward)
        if inverse is None:
            if len(forward) != n or sorted(forward) != list(range(n)):
                raise NotABijectionError(
                    f"mapping on {point_type.__name__} is not a bijection: {forward}"
                )
            table = [0] * n
            for i, j in enumerate(forward):
                table[j] = i
            inverse = table
        self._point_type = point_type
        self._forward = forward
        self._inverse = tuple(inverse)

    # Construction

    @classmethod
    def identity(cls, point_type: Type[T]) -> 'Permutation[T]':
        table = tuple(range(point_type.cardinality()))
        return cls(point_type, table, table)

    @classmethod
    def new_swap(cls, a: T, b: T) -> 'Permutation[T]':
        """Transposition of a and b (identity when a == b)."""
        point_type = _common_type([a, b])
        forward = list(range(point_type.cardinality()))
        forward[a.index], forward[b.index] = b.index, a.index
        return cls(point_type, forward, forward)

    @classmethod
    def new_cycle(cls, points: Sequence[T],
                  point_type: Optional[Type[T]] = None) -> 'Permutation[T]':
        """Cycle sending each point to the next one in the list, and the last to the first.

        Args:
            points: Distinct points
            point_type: Required only when points is empty

        Raises:
            NotABijectionError: If a point is repeated
        """
        points = list(points)
        if not points:
            if point_type is None:
                raise ValueError("an empty cycle needs an explicit point_type")
            return cls.identity(point_type)
        point_type = _common_type(points) if point_type is None else point_type
        indices = [p.index for p in points]
        if len(set(indices)) != len(indices):
            raise NotABijectionError(f"cycle repeats a point: {points}")
        forward = list(range(point_type.cardinality()))
        for k, i in enumerate(indices):
            forward[i] = indices[(k + 1) % len(indices)]
        return cls(point_type, forward)

    @classmethod
    def from_fn(cls, fn: Callable[[T], T], point_type: Type[T]) -> 'Permutation[T]':
        """Tabulate fn over every point.

        Raises:
            NotABijectionError: If fn is not injective on point_type
        """
        forward = []
        for p in point_type.points():
            image = fn(p)
            if not isinstance(image, point_type):
                raise NotABijectionError(f"{p!r} maps outside {point_type.__name__}: {image!r}")
            forward.append(image.index)
        return cls(point_type, forward)

    # Action

    @property
    def point_type(self) -> Type[T]:
        return self._point_type

    def apply(self, point: T) -> T:
        return self._point_type.from_index(self._forward[point.index])

    __call__ = apply

    def apply_inverse(self, point: T) -> T:
        return self._point_type.from_index(self._inverse[point.index])

    def inverse(self) -> 'Permutation[T]':
        return Permutation(self._point_type, self._inverse, self._forward)

    def __mul__(self, other: 'Permutation[T]') -> 'Permutation[T]':
        """Composition: self first, then other."""
        if not isinstance(other, Permutation):
            return NotImplemented
        if other._point_type is not self._point_type:
            raise TypeError(
                f"cannot compose permutations of {self._point_type.__name__} "
                f"and {other._point_type.__name__}"
            )
        forward = tuple(other._forward[j] for j in self._forward)
        inverse = tuple(self._inverse[j] for j in other._inverse)
        return Permutation(self._point_type, forward, inverse)

    def __pow__(self, exponent: int) -> 'Permutation[T]':
        base = self if exponent >= 0 else self.inverse()
        result = Permutation.identity(self._point_type)
        for _ in range(abs(exponent)):
            result = result * base
        return result

    # Structure

    def moved_points(self) -> List[T]:
        return [self._point_type.from_index(i) for i, j in enumerate(self._forward) if i != j]

    def is_identity(self) -> bool:
        return all(i == j for i, j in enumerate(self._forward))

    def disjoint_cycles(self) -> List[List[T]]:
        """Nontrivial cycles, each starting at its smallest-index point.

        Cycles are listed in order of their starting point; fixed points are omitted.
        """
        seen = [False] * len(self._forward)
        cycles = []
        for start in range(len(self._forward)):
            if seen[start] or self._forward[start] == start:
                continue
            cycle = []
            i = start
            while not seen[i]:
                seen[i] = True
                cycle.append(self._point_type.from_index(i))
                i = self._forward[i]
            cycles.append(cycle)
        return cycles

    def cycle_type(self) -> Tuple[int, ...]:
        """Lengths of the nontrivial cycles, longest first."""
        return tuple(sorted((len(c) for c in self.disjoint_cycles()), reverse=True))

    def order(self) -> int:
        result = 1
        for length in self.cycle_type():
            result = result * length // math.gcd(result, length)
        return result

    def map_injective_unchecked(self, fn: Callable[[T], U],
                                point_type: Type[U]) -> 'Permutation[U]':
        """Transport this permutation along an injection fn: T -> U.

        The result sends fn(x) to fn(self(x)) and fixes every point outside the
        image of fn. fn must be injective on the moved points; this is not checked
        and a non-injective fn gives a meaningless result.
        """
        forward = list(range(point_type.cardinality()))
        inverse = list(range(point_type.cardinality()))
        for p in self.moved_points():
            source = fn(p).index
            target = fn(self.apply(p)).index
            forward[source] = target
            inverse[target] = source
        return Permutation(point_type, forward, inverse)

    # Value semantics

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._point_type is other._point_type and self._forward == other._forward

    def __hash__(self) -> int:
        return hash((self._point_type, self._forward))

    def __repr__(self) -> str:
        cycles = self.disjoint_cycles()
        if not cycles:
            return f"Permutation[{self._point_type.__name__}](identity)"
        body = ''.join('(' + ' '.join(str(p.index) for p in c) + ')' for c in cycles)
        return f"Permutation[{self._point_type.__name__}]{body}"


def _common_type(points: Iterable[Any]) -> type:
    types = {type(p) for p in points}
    if len(types) != 1:
        raise NotABijectionError(f"points must share one type, got {sorted(t.__name__ for t in types)}")
    point_type = types.pop()
    if not issubclass(point_type, Enumerated):
        raise TypeError(f"{point_type.__name__} is not an enumerable point type")
    return point_type

