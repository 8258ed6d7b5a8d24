"""
Ordered sextets, their labellings and the sextet stabilizer.

A sextet is a partition of the 24 points into six foursomes such that the union of
any two is an octad. Ordering it means assigning the foursomes to the six hexacode
coordinates. Labelling it means additionally giving the four points of each
foursome distinct GF(4) labels.

A labelling is valid when point -> MOGPoint(col=foursome(point), row=label(point))
is an automorphism of the Golay code. For the standard sextet (the six columns in
their natural order) the standard labelling is the row of each point, and the
induced permutation is the identity.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, Sequence, Tuple, Any

from ..algebra.enumerated import Labelled
from ..algebra.finite_field import F4Point
from ..algebra.hexacode import HexacodePoint, HexacodeVector
from ..algebra.permutation import Permutation
from ..errors import NonInvertibleError, InvariantViolation
from .mog_vector import MOGPoint, MOGVector


class OrderedSextet:
    """Six disjoint foursomes indexed by hexacode coordinates."""

    __slots__ = ('_foursomes',)

    def __init__(self, foursomes: Sequence[MOGVector]):
        """
        Args:
            foursomes: Six weight-4 vectors covering the 24 points, in hexacode
                coordinate order

        Raises:
            InvariantViolation: If the foursomes do not partition the grid
        """
        foursomes = tuple(foursomes)
        if len(foursomes) != 6:
            raise InvariantViolation(f"an ordered sextet has 6 foursomes, got {len(foursomes)}")
        union = MOGVector.zero()
        for f in foursomes:
            if f.weight() != 4 or (union & f).weight() != 0:
                raise InvariantViolation(f"foursomes do not partition the grid: {foursomes}")
            union = union | f
        self._foursomes = foursomes

    @classmethod
    def from_foursomes(cls, foursomes: Labelled[HexacodePoint, MOGVector]) -> 'OrderedSextet':
        return cls(foursomes.values())

    @classmethod
    def standard(cls) -> 'OrderedSextet':
        """The six columns of the MOG in their natural order."""
        return cls([MOGVector.column(h) for h in HexacodePoint.points()])

    def foursome(self, h: HexacodePoint) -> MOGVector:
        return self._foursomes[h.index]

    def foursomes(self) -> Labelled[HexacodePoint, MOGVector]:
        return Labelled(HexacodePoint, self._foursomes)

    def foursome_of(self, point: MOGPoint) -> HexacodePoint:
        """The coordinate of the foursome containing point."""
        for i, f in enumerate(self._foursomes):
            if f.component(point):
                return HexacodePoint.from_index(i)
        raise InvariantViolation(f"{point!r} is in no foursome")

    def point_foursomes(self) -> Labelled[MOGPoint, HexacodePoint]:
        return Labelled.from_fn(MOGPoint, self.foursome_of)

    def permute(self, permutation: Permutation[HexacodePoint]) -> 'OrderedSextet':
        """Move the foursome at h to permutation(h).

        The result satisfies result.foursome(permutation(h)) == self.foursome(h).
        """
        return OrderedSextet([
            self._foursomes[permutation.apply_inverse(h).index] for h in HexacodePoint.points()
        ])

    def as_set(self) -> FrozenSet[MOGVector]:
        """The underlying unordered sextet."""
        return frozenset(self._foursomes)

    def __iter__(self) -> Iterator[MOGVector]:
        return iter(self._foursomes)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OrderedSextet):
            return NotImplemented
        return self._foursomes == other._foursomes

    def __hash__(self) -> int:
        return hash(self._foursomes)

    def __repr__(self) -> str:
        return f"OrderedSextet({list(self._foursomes)})"


class OrderedSextetLabelling:
    """An ordered sextet together with a GF(4) label on every point.

    Labels within each foursome are pairwise distinct.
    """

    __slots__ = ('_sextet', '_labels')

    def __init__(self, sextet: OrderedSextet, labels: Labelled[MOGPoint, F4Point]):
        for h in HexacodePoint.points():
            seen = {labels[p] for p in sextet.foursome(h).points()}
            if len(seen) != 4:
                raise InvariantViolation(f"labels in foursome {h!r} are not a bijection onto GF(4)")
        self._sextet = sextet
        self._labels = labels

    @classmethod
    def standard(cls) -> 'OrderedSextetLabelling':
        """Columns as foursomes, rows as labels."""
        return cls(OrderedSextet.standard(), Labelled.from_fn(MOGPoint, lambda p: p.row))

    @property
    def sextet(self) -> OrderedSextet:
        return self._sextet

    @property
    def labels(self) -> Labelled[MOGPoint, F4Point]:
        return self._labels

    def label(self, point: MOGPoint) -> F4Point:
        return self._labels[point]

    def foursomes(self) -> Labelled[MOGPoint, HexacodePoint]:
        return self._sextet.point_foursomes()

    def point_with_label(self, h: HexacodePoint, label: F4Point) -> MOGPoint:
        for p in self._sextet.foursome(h).points():
            if self._labels[p] is label:
                return p
        raise InvariantViolation(f"no point labelled {label} in foursome {h!r}")

    # Transformations

    def permute_foursomes(self, permutation: Permutation[HexacodePoint]) -> 'OrderedSextetLabelling':
        """Reorder the foursomes, keeping every point's label."""
        return OrderedSextetLabelling(self._sextet.permute(permutation), self._labels)

    def add_vector(self, vector: HexacodeVector) -> 'OrderedSextetLabelling':
        """Add vector[h] to every label in foursome h."""
        foursomes = self.foursomes()
        return OrderedSextetLabelling(
            self._sextet,
            Labelled.from_fn(MOGPoint, lambda p: self._labels[p] + vector[foursomes[p]])
        )

    def scalar_mul(self, scalar: F4Point) -> 'OrderedSextetLabelling':
        """Divide every label by scalar.

        Raises:
            NonInvertibleError: If scalar is Zero
        """
        inverse = scalar.inverse()
        if inverse is None:
            raise NonInvertibleError("cannot scale a labelling by Zero")
        return OrderedSextetLabelling(self._sextet, self._labels.map(lambda label: label * inverse))

    def conjugate(self) -> 'OrderedSextetLabelling':
        return OrderedSextetLabelling(self._sextet, self._labels.map(F4Point.conjugate))

    # Permutations

    def to_standard_permutation(self) -> Permutation[MOGPoint]:
        """point -> MOGPoint(col=foursome(point), row=label(point))."""
        foursomes = self.foursomes()
        return Permutation.from_fn(lambda p: MOGPoint(foursomes[p], self._labels[p]), MOGPoint)

    def from_standard_permutation(self) -> Permutation[MOGPoint]:
        return self.to_standard_permutation().inverse()

    def stabilizer_permutation(self, stabilizer: 'SextetStabilizer') -> Permutation[MOGPoint]:
        """Transport a stabilizer element from standard coordinates to this labelling."""
        to_standard = self.to_standard_permutation()
        return to_standard * stabilizer.standard_permutation() * to_standard.inverse()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OrderedSextetLabelling):
            return NotImplemented
        return self._sextet == other._sextet and self._labels == other._labels

    def __hash__(self) -> int:
        return hash((self._sextet, self._labels))

    def __repr__(self) -> str:
        return f"OrderedSextetLabelling({self._sextet!r}, {self._labels!r})"


def _translation(value: F4Point) -> Permutation[F4Point]:
    return Permutation.from_fn(lambda r: r + value, F4Point)


def _scaling(value: F4Point) -> Permutation[F4Point]:
    if value.inverse() is None:
        raise NonInvertibleError("cannot scale rows by Zero")
    return Permutation.from_fn(lambda r: value * r, F4Point)


_CONJUGATION = Permutation.from_fn(F4Point.conjugate, F4Point)


@dataclass(frozen=True)
class SextetStabilizer:
    """A permutation of the grid that maps the standard sextet to itself.

    Column h is sent to foursome_permutation(h), and within it row r becomes
    row_permutations[h](r). Updates compose the new step before the existing one.

    Attributes:
        foursome_permutation: Action on the six columns
        row_permutations: Action on the rows, one per column in index order
    """
    foursome_permutation: Permutation[HexacodePoint]
    row_permutations: Tuple[Permutation[F4Point], ...]

    def __post_init__(self):
        if len(self.row_permutations) != 6:
            raise ValueError(f"expected 6 row permutations, got {len(self.row_permutations)}")

    @classmethod
    def identity(cls) -> 'SextetStabilizer':
        return cls(Permutation.identity(HexacodePoint), (Permutation.identity(F4Point),) * 6)

    def permute_foursomes(self, permutation: Permutation[HexacodePoint]) -> 'SextetStabilizer':
        return SextetStabilizer(permutation * self.foursome_permutation, self.row_permutations)

    def _with_row_step(self, columns, step: Permutation[F4Point]) -> 'SextetStabilizer':
        rows = list(self.row_permutations)
        for h in columns:
            rows[h.index] = step * rows[h.index]
        return SextetStabilizer(self.foursome_permutation, tuple(rows))

    def add(self, h: HexacodePoint, value: F4Point) -> 'SextetStabilizer':
        """Translate the rows of column h by value."""
        return self._with_row_step([h], _translation(value))

    def multiply(self, value: F4Point) -> 'SextetStabilizer':
        """Scale the rows of every column by a nonzero value."""
        return self._with_row_step(HexacodePoint.points(), _scaling(value))

    def conjugate(self) -> 'SextetStabilizer':
        """Apply the Frobenius automorphism to the rows of every column."""
        return self._with_row_step(HexacodePoint.points(), _CONJUGATION)

    def standard_permutation(self) -> Permutation[MOGPoint]:
        """(col, row) -> (foursome_permutation(col), row_permutations[col](row))."""
        return Permutation.from_fn(
            lambda p: MOGPoint(self.foursome_permutation.apply(p.col),
                               self.row_permutations[p.col.index].apply(p.row)),
            MOGPoint,
        )
