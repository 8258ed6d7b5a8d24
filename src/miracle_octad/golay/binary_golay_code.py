"""
The extended binary Golay code in its Miracle Octad Generator form.

The code is the span of 12 fixed basis vectors read off the MOG grid. A subset of
the grid is a codeword exactly when
- the parity of every column equals the parity of the top row, and
- the column scores (sum of the row labels of the chosen points) form a hexacode word.

The 4096 codewords are materialized once, as a (4096, 24) jax array for vectorized
distance computations and as a set of 24-bit masks for O(1) membership.

Key facts:
- Weight distribution 0:1, 8:759, 12:2576, 16:759, 24:1
- Minimum distance 8, so radius-3 balls around codewords are disjoint
- Covering radius 4; a vector at distance 4 has exactly 6 nearest codewords
- Every 5 points lie in a unique octad (Steiner system S(5, 8, 24))
- Automorphism group M24, order 244823040
"""

import logging
import threading
from typing import NamedTuple, Dict, FrozenSet, List, Optional, Tuple, Union

import jax
import jax.numpy as jnp
import numpy as np

from ..algebra.enumerated import Labelled
from ..algebra.finite_field import F4Point
from ..algebra.hexacode import Side, Pair, HexacodePoint, hexacode_words
from ..algebra.permutation import Permutation
from ..errors import InvalidWeightError, InvalidSeedError, NotADeepHoleError, InvariantViolation
from .mog_vector import N_POINTS, MOGPoint, MOGVector
from .sextet import OrderedSextet, OrderedSextetLabelling


logger = logging.getLogger(__name__)

DIMENSION = 12
N_CODEWORDS = 1 << DIMENSION
MINIMUM_DISTANCE = 8
WEIGHT_DISTRIBUTION = {0: 1, 8: 759, 12: 2576, 16: 759, 24: 1}
M24_ORDER = 244823040

_POWERS = 1 << np.arange(N_POINTS, dtype=np.int64)

# Canonical foursome slots used by the labelling seed.
_LEFT_LEFT = HexacodePoint(Side.LEFT, Pair.LEFT)
_RIGHT_LEFT = HexacodePoint(Side.RIGHT, Pair.LEFT)
_LEFT_MIDDLE = HexacodePoint(Side.LEFT, Pair.MIDDLE)


class UniqueCodeword(NamedTuple):
    """The single codeword within distance 3.

    Attributes:
        codeword: The nearest codeword
        distance: Hamming distance 0..3 (0 means the input is a codeword)
    """
    codeword: MOGVector
    distance: int


class SixCodewords(NamedTuple):
    """The six codewords at distance exactly 4.

    Attributes:
        codewords: The six nearest codewords, sorted
    """
    codewords: Tuple[MOGVector, ...]


NearestCodewordResult = Union[UniqueCodeword, SixCodewords]


def _odd_vector(rows: Tuple[Optional[F4Point], ...]) -> MOGVector:
    """Vector with one point per column, or the three nonzero rows where rows[c] is None."""
    def chosen(p: MOGPoint) -> bool:
        row = rows[p.col.index]
        if row is None:
            return p.row is not F4Point.ZERO
        return p.row is row
    return MOGVector.from_fn(chosen)


def golay_basis() -> List[MOGVector]:
    """The fixed basis of the code on the MOG grid.

    Returns:
        12 vectors: 5 unions of the first column with another column, then 7 odd
        vectors whose column scores are hexacode words
    """
    zero, one, alpha, beta = F4Point.points()
    first_column = MOGVector.column(_LEFT_LEFT)

    basis = [
        first_column | MOGVector.column(col)
        for col in HexacodePoint.points() if col != _LEFT_LEFT
    ]

    for val in F4Point.nonzero():
        basis.append(_odd_vector((None, zero, val, val, val, val)))

    for rows in [
        (None, one, zero, one, alpha, beta),
        (None, alpha, zero, alpha, beta, one),
        (one, None, zero, one, beta, alpha),
        (alpha, None, zero, alpha, one, beta),
    ]:
        basis.append(_odd_vector(rows))

    return basis


@jax.jit
def span_of_basis(basis: jnp.ndarray) -> jnp.ndarray:
    """Every GF(2) combination of the rows of a 0/1 basis matrix.

    Args:
        basis: (k, n) array of 0/1

    Returns:
        (2^k, n) array; row i is the sum of the basis rows selected by the bits of i
    """
    k = basis.shape[0]
    coefficients = (jnp.arange(2 ** k)[:, None] >> jnp.arange(k)[None, :]) & 1
    return jnp.dot(coefficients, basis) % 2


@jax.jit
def hamming_distances(codewords: jnp.ndarray, vector: jnp.ndarray) -> jnp.ndarray:
    """Hamming distance from vector to every row of codewords.

    Args:
        codewords: (N, 24) array of 0/1
        vector: (24,) array of 0/1

    Returns:
        (N,) array of distances
    """
    return jnp.sum(codewords != vector[None, :], axis=1)


def _check_partition(vectors: FrozenSet[MOGVector], what: str) -> None:
    union = MOGVector.zero()
    for v in vectors:
        if v.weight() != 4 or (union & v).weight() != 0:
            raise InvariantViolation(f"{what} is not a partition into foursomes: {sorted(vectors)}")
        union = union | v
    if len(vectors) != 6 or union != MOGVector.full():
        raise InvariantViolation(f"{what} does not cover the 24 points: {sorted(vectors)}")


class BinaryGolayCode:
    """The [24, 12, 8] binary Golay code on the MOG grid.

    Immutable once constructed. Use binary_golay_code() for the shared instance.
    """

    def __init__(self):
        self._basis = tuple(golay_basis())
        if len(self._basis) != DIMENSION:
            raise InvariantViolation(f"expected {DIMENSION} basis vectors, got {len(self._basis)}")

        basis_array = jnp.asarray(np.stack([b.to_array() for b in self._basis]))
        self._matrix = span_of_basis(basis_array)

        matrix = np.asarray(self._matrix).astype(np.int64)
        self._masks = tuple(int(m) for m in matrix @ _POWERS)
        self._codewords = frozenset(self._masks)
        if len(self._codewords) != N_CODEWORDS:
            raise InvariantViolation(
                f"basis spans {len(self._codewords)} distinct codewords, expected {N_CODEWORDS}"
            )

        weights, counts = np.unique(matrix.sum(axis=1), return_counts=True)
        self._weight_distribution = {int(w): int(c) for w, c in zip(weights, counts)}
        if self._weight_distribution != WEIGHT_DISTRIBUTION:
            raise InvariantViolation(f"unexpected weight distribution {self._weight_distribution}")

        self._octads = tuple(m for m in self._masks if bin(m).count('1') == 8)
        logger.debug("built binary Golay code: %d codewords, %d octads",
                     len(self._codewords), len(self._octads))

    # Structure

    @property
    def basis(self) -> Tuple[MOGVector, ...]:
        return tuple(self._basis)

    def codewords(self) -> Tuple[MOGVector, ...]:
        return tuple(MOGVector(m) for m in self._masks)

    def octads(self) -> Tuple[MOGVector, ...]:
        return tuple(MOGVector(m) for m in self._octads)

    def weight_distribution(self) -> Dict[int, int]:
        return dict(self._weight_distribution)

    # Membership

    def is_codeword(self, vector: MOGVector) -> bool:
        return vector.mask in self._codewords

    def is_octad(self, vector: MOGVector) -> bool:
        return vector.weight() == 8 and vector.mask in self._codewords

    # Completion

    def complete_octad(self, vector: MOGVector) -> MOGVector:
        """The unique octad containing a 5-point set.

        Raises:
            InvalidWeightError: If vector does not have weight 5
        """
        if vector.weight() != 5:
            raise InvalidWeightError(5, vector.weight())
        mask = vector.mask
        for octad in self._octads:
            if octad & mask == mask:
                return MOGVector(octad)
        raise InvariantViolation(f"no octad contains {vector!r}")

    def complete_sextet(self, vector: MOGVector) -> FrozenSet[MOGVector]:
        """The sextet (6 disjoint foursomes) determined by a 4-point set.

        The foursomes are vector itself and its differences with the 5 octads
        containing it.

        Raises:
            InvalidWeightError: If vector does not have weight 4
        """
        if vector.weight() != 4:
            raise InvalidWeightError(4, vector.weight())
        mask = vector.mask
        sextet = {vector}
        for octad in self._octads:
            if octad & mask == mask:
                sextet.add(MOGVector(octad ^ mask))
        sextet = frozenset(sextet)
        _check_partition(sextet, "completed sextet")
        return sextet

    def ordered_sextet(self, vector: MOGVector) -> OrderedSextet:
        """Complete a foursome to a sextet and order it by descending vector order."""
        return OrderedSextet(sorted(self.complete_sextet(vector), reverse=True))

    # Decoding

    def nearest_codeword(self, vector: MOGVector) -> NearestCodewordResult:
        """Bounded-distance decoding of an arbitrary 24-bit vector.

        Returns:
            UniqueCodeword if some codeword lies within distance 3, otherwise
            SixCodewords with the six codewords at distance 4
        """
        distances = np.asarray(hamming_distances(self._matrix, jnp.asarray(vector.to_array())))
        closest = int(distances.min())
        if closest <= 3:
            index = int(np.argmin(distances))
            return UniqueCodeword(codeword=MOGVector(self._masks[index]), distance=closest)

        nearest = tuple(sorted(MOGVector(self._masks[i]) for i in np.flatnonzero(distances == 4)))
        if closest != 4 or len(nearest) != 6:
            raise InvariantViolation(
                f"{vector!r} has {len(nearest)} codewords at distance {closest}, expected 6 at 4"
            )
        return SixCodewords(codewords=nearest)

    def deep_hole_sextet(self, vector: MOGVector) -> FrozenSet[MOGVector]:
        """The sextet formed by the differences between vector and its 6 nearest codewords.

        For a weight-4 vector this is complete_sextet(vector).

        Raises:
            NotADeepHoleError: If vector is within distance 3 of the code
        """
        result = self.nearest_codeword(vector)
        if not isinstance(result, SixCodewords):
            raise NotADeepHoleError(f"{vector!r} is at distance {result.distance} from the code, not 4")
        sextet = frozenset(vector ^ c for c in result.codewords)
        _check_partition(sextet, "deep hole sextet")
        return sextet

    # Automorphisms

    def is_automorphism(self, permutation: Permutation[MOGPoint]) -> bool:
        """True if the permutation maps every codeword to a codeword.

        By linearity it suffices to check the basis.
        """
        if permutation.point_type is not MOGPoint:
            raise TypeError(f"expected a permutation of MOGPoint, got {permutation!r}")
        return all(b.permute(permutation).mask in self._codewords for b in self._basis)

    # Labelling

    def complete_labelling(self, ordered_sextet: OrderedSextet,
                           point1: MOGPoint, point2: MOGPoint, point3: MOGPoint,
                           point4: MOGPoint, label4: F4Point) -> OrderedSextetLabelling:
        """The unique labelling with point1, point2 -> 0, point3 -> 1, point4 -> label4.

        A labelling is valid when point -> (foursome, label) is an automorphism.
        Transported to standard coordinates, every hexacode word s and foursome c
        give an odd octad: foursome c without the point labelled s_c, plus the
        point labelled s_h in every other foursome h. Whenever three coordinates
        of a word are already pinned, five points of such an octad are known,
        complete_octad recovers it, and its meeting point with each remaining
        foursome h is labelled s_h. Starting from the anchors this pins all 24
        labels.

        Args:
            ordered_sextet: Sextet with point1 in foursome (Left, Left), point2 and
                point3 in foursome (Right, Left), point4 in foursome (Left, Middle)
            point1, point2, point3, point4: Anchor points
            label4: Label of point4

        Raises:
            InvalidSeedError: If the anchors are not in their canonical foursomes
        """
        if ordered_sextet.foursome_of(point1) != _LEFT_LEFT:
            raise InvalidSeedError(f"{point1!r} is not in foursome {_LEFT_LEFT!r}")
        for p in (point2, point3):
            if ordered_sextet.foursome_of(p) != _RIGHT_LEFT:
                raise InvalidSeedError(f"{p!r} is not in foursome {_RIGHT_LEFT!r}")
        if point2 == point3:
            raise InvalidSeedError("point2 and point3 must be distinct")
        if ordered_sextet.foursome_of(point4) != _LEFT_MIDDLE:
            raise InvalidSeedError(f"{point4!r} is not in foursome {_LEFT_MIDDLE!r}")

        pinned: Dict[HexacodePoint, Dict[F4Point, MOGPoint]] = {
            h: {} for h in HexacodePoint.points()
        }
        labels: Dict[MOGPoint, F4Point] = {}

        def pin(foursome: HexacodePoint, label: F4Point, point: MOGPoint) -> bool:
            existing = labels.get(point)
            if existing is not None:
                if existing is not label:
                    raise InvariantViolation(f"{point!r} pinned to both {existing} and {label}")
                return False
            if label in pinned[foursome]:
                raise InvariantViolation(f"label {label} pinned twice in foursome {foursome!r}")
            pinned[foursome][label] = point
            labels[point] = label
            return True

        pin(_LEFT_LEFT, F4Point.ZERO, point1)
        pin(_RIGHT_LEFT, F4Point.ZERO, point2)
        pin(_RIGHT_LEFT, F4Point.ONE, point3)
        pin(_LEFT_MIDDLE, label4, point4)

        pending = list(hexacode_words())
        lookups = 0
        progress = True
        while progress and len(labels) < N_POINTS:
            progress = False
            for word in list(pending):
                known = [h for h in HexacodePoint.points() if word[h] in pinned[h]]
                if len(known) < 3:
                    continue
                pending.remove(word)
                if len(known) == 6:
                    continue

                c, h1, h2 = known[:3]
                support = (ordered_sextet.foursome(c) ^ MOGVector.from_points([pinned[c][word[c]]])) \
                    | MOGVector.from_points([pinned[h1][word[h1]], pinned[h2][word[h2]]])
                octad = self.complete_octad(support)
                lookups += 1

                for h in HexacodePoint.points():
                    if h == c:
                        continue
                    meet = octad & ordered_sextet.foursome(h)
                    if meet.weight() != 1:
                        raise InvariantViolation(
                            f"octad {octad!r} meets foursome {h!r} in {meet.weight()} points"
                        )
                    if pin(h, word[h], next(meet.points())):
                        progress = True

        if len(labels) != N_POINTS:
            raise InvariantViolation(f"labelling seed pinned only {len(labels)} of {N_POINTS} points")
        logger.debug("labelling seed completed with %d octad lookups", lookups)

        return OrderedSextetLabelling(ordered_sextet, Labelled.from_fn(MOGPoint, labels.__getitem__))


_CODE: Optional[BinaryGolayCode] = None
_CODE_LOCK = threading.Lock()


def binary_golay_code() -> BinaryGolayCode:
    """The process-wide code instance, built on first use and never mutated."""
    global _CODE
    if _CODE is None:
        with _CODE_LOCK:
            if _CODE is None:
                logger.info("constructing binary Golay code")
                _CODE = BinaryGolayCode()
    return _CODE
