"""
Enumerable finite sets and array-backed total maps over them.

Every point type in the engine (field elements, hexacode coordinates and their
sides/pairs, MOG points) has a small fixed cardinality and a hand-fixed dense
numbering 0..N-1. The numbering is part of the external contract: codeword bits
and grid cell identity both depend on it.

Generic containers (Labelled, Permutation) are indexed by this numbering rather
than hashed, so a map over N points is simply a tuple of N entries.
"""

from typing import TypeVar, Generic, Callable, Iterator, Tuple, Sequence, Type, Any


T = TypeVar('T', bound='Enumerated')
V = TypeVar('V')
W = TypeVar('W')


class Enumerated:
    """Mixin for point types in bijection with range(cardinality()).

    Subclasses provide cardinality(), from_index() and the index property;
    points() is derived.
    """

    @classmethod
    def cardinality(cls) -> int:
        raise NotImplementedError

    @classmethod
    def from_index(cls, index: int):
        raise NotImplementedError

    @property
    def index(self) -> int:
        raise NotImplementedError

    @classmethod
    def points(cls) -> Iterator:
        """Iterate over every point in canonical index order."""
        for i in range(cls.cardinality()):
            yield cls.from_index(i)


def check_index(point_type: Type[Enumerated], index: int) -> int:
    """Validate an index against a point type's cardinality.

    Raises:
        ValueError: If index is outside 0..cardinality-1
    """
    n = point_type.cardinality()
    if not isinstance(index, int) or not 0 <= index < n:
        raise ValueError(f"{point_type.__name__} index must be in 0..{n - 1}, got {index!r}")
    return index


class Labelled(Generic[T, V]):
    """Immutable total map from an enumerable point type to values.

    Backed by a tuple indexed by the canonical numbering of the point type.

    Attributes:
        point_type: The Enumerated class forming the domain
    """

    __slots__ = ('_point_type', '_values')

    def __init__(self, point_type: Type[T], values: Sequence[V]):
        values = tuple(values)
        if len(values) != point_type.cardinality():
            raise ValueError(
                f"{point_type.__name__} map needs {point_type.cardinality()} values, got {len(values)}"
            )
        self._point_type = point_type
        self._values = values

    @classmethod
    def from_fn(cls, point_type: Type[T], fn: Callable[[T], V]) -> 'Labelled[T, V]':
        return cls(point_type, [fn(p) for p in point_type.points()])

    @classmethod
    def constant(cls, point_type: Type[T], value: V) -> 'Labelled[T, V]':
        return cls(point_type, [value] * point_type.cardinality())

    @property
    def point_type(self) -> Type[T]:
        return self._point_type

    def get(self, point: T) -> V:
        if not isinstance(point, self._point_type):
            raise TypeError(f"expected a {self._point_type.__name__}, got {point!r}")
        return self._values[point.index]

    __getitem__ = get

    def replace(self, point: T, value: V) -> 'Labelled[T, V]':
        """Return a copy with the entry at point set to value."""
        if not isinstance(point, self._point_type):
            raise TypeError(f"expected a {self._point_type.__name__}, got {point!r}")
        values = list(self._values)
        values[point.index] = value
        return Labelled(self._point_type, values)

    def map(self, fn: Callable[[V], W]) -> 'Labelled[T, W]':
        return Labelled(self._point_type, [fn(v) for v in self._values])

    def items(self) -> Iterator[Tuple[T, V]]:
        for i, value in enumerate(self._values):
            yield self._point_type.from_index(i), value

    def values(self) -> Tuple[V, ...]:
        return self._values

    def __iter__(self) -> Iterator[T]:
        return self._point_type.points()

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Labelled):
            return NotImplemented
        return self._point_type is other._point_type and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._point_type, self._values))

    def __repr__(self) -> str:
        entries = ', '.join(f"{p!r}: {v!r}" for p, v in self.items())
        return f"Labelled({self._point_type.__name__}, {{{entries}}})"
