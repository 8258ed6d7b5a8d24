"""
Hexacode coordinates and vectors.

The six hexacode coordinates are grouped into three pairs (Left, Middle, Right),
each with a Left and a Right side. They index the six columns of the MOG and the
six foursomes of an ordered sextet:

    0 1  2 3  4 5
    ---  ---  ---
    L    M    R      (pair)
    LR   LR   LR     (side)

The hexacode is the [6, 3, 4] code over GF(4) spanned by

    1 0  0 1  ω̄ ω
    0 1  0 1  ω ω̄
    0 0  1 1  1 1

Equivalently a word is (a, b, c, φ(1), φ(ω), φ(ω̄)) with φ(x) = ax² + bx + c.
Any three coordinates form an information set, and the code is self-dual under
the Hermitian inner product. These are exactly the column scores of the odd
basis vectors of the binary Golay code in its MOG form.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Callable, Tuple

from .enumerated import Enumerated, Labelled, check_index
from .finite_field import F4Point


class Side(Enumerated, Enum):
    """Which member of a pair a coordinate is."""

    LEFT = 0
    RIGHT = 1

    @classmethod
    def cardinality(cls) -> int:
        return 2

    @classmethod
    def from_index(cls, index: int) -> 'Side':
        return (Side.LEFT, Side.RIGHT)[check_index(cls, index)]

    @property
    def index(self) -> int:
        return self.value

    def flip(self) -> 'Side':
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class Pair(Enumerated, Enum):
    """Which of the three column pairs a coordinate belongs to."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2

    @classmethod
    def cardinality(cls) -> int:
        return 3

    @classmethod
    def from_index(cls, index: int) -> 'Pair':
        return (Pair.LEFT, Pair.MIDDLE, Pair.RIGHT)[check_index(cls, index)]

    @property
    def index(self) -> int:
        return self.value


@dataclass(frozen=True)
class HexacodePoint(Enumerated):
    """One of the six hexacode coordinates.

    Numbering is side + 2 * pair, so 0..5 read left to right across the MOG.

    Attributes:
        side: Side within the pair
        pair: Which pair of columns
    """
    side: Side
    pair: Pair

    @classmethod
    def cardinality(cls) -> int:
        return 6

    @classmethod
    def from_index(cls, index: int) -> 'HexacodePoint':
        return _HEXACODE_POINTS[check_index(cls, index)]

    @property
    def index(self) -> int:
        return self.side.index + 2 * self.pair.index

    def partner(self) -> 'HexacodePoint':
        """The other coordinate of the same pair."""
        return HexacodePoint(self.side.flip(), self.pair)

    def is_adjacent(self, other: 'HexacodePoint') -> bool:
        """True if the two coordinates are distinct members of one pair."""
        return self != other and self.pair == other.pair

    def __repr__(self) -> str:
        return f"HexacodePoint({self.side.name}, {self.pair.name})"


_HEXACODE_POINTS = tuple(
    HexacodePoint(Side.from_index(i % 2), Pair.from_index(i // 2)) for i in range(6)
)


@dataclass(frozen=True)
class HexacodeVector:
    """A vector in GF(4)^6 indexed by hexacode coordinates.

    Attributes:
        components: The six entries in coordinate index order
    """
    components: Tuple[F4Point, ...]

    def __post_init__(self):
        if len(self.components) != 6:
            raise ValueError(f"hexacode vectors have 6 components, got {len(self.components)}")

    @classmethod
    def from_fn(cls, fn: Callable[[HexacodePoint], F4Point]) -> 'HexacodeVector':
        return cls(tuple(fn(h) for h in HexacodePoint.points()))

    @classmethod
    def constant(cls, value: F4Point) -> 'HexacodeVector':
        return cls((value,) * 6)

    @classmethod
    def zero(cls) -> 'HexacodeVector':
        return cls.constant(F4Point.ZERO)

    @classmethod
    def from_information(cls, a: F4Point, b: F4Point, c: F4Point) -> 'HexacodeVector':
        """The unique hexacode word starting a b | c ...

        Args:
            a, b: Coordinates of the left pair
            c: Coordinate of (Left, Middle)

        Returns:
            (a, b, c, φ(1), φ(ω), φ(ω̄)) with φ(x) = ax² + bx + c
        """
        alpha, beta = F4Point.ALPHA, F4Point.BETA
        return cls((
            a,
            b,
            c,
            a + b + c,
            beta * a + alpha * b + c,
            alpha * a + beta * b + c,
        ))

    def component(self, point: HexacodePoint) -> F4Point:
        return self.components[point.index]

    def __getitem__(self, point: HexacodePoint) -> F4Point:
        return self.components[point.index]

    def as_labelled(self) -> Labelled[HexacodePoint, F4Point]:
        return Labelled(HexacodePoint, self.components)

    def __add__(self, other: 'HexacodeVector') -> 'HexacodeVector':
        return HexacodeVector(tuple(a + b for a, b in zip(self.components, other.components)))

    def scale(self, scalar: F4Point) -> 'HexacodeVector':
        return HexacodeVector(tuple(scalar * a for a in self.components))

    def __rmul__(self, scalar: F4Point) -> 'HexacodeVector':
        return self.scale(scalar)

    def conjugate(self) -> 'HexacodeVector':
        return HexacodeVector(tuple(a.conjugate() for a in self.components))

    def weight(self) -> int:
        return sum(1 for a in self.components if a is not F4Point.ZERO)

    def is_hexacodeword(self) -> bool:
        a, b, c = self.components[:3]
        return self == HexacodeVector.from_information(a, b, c)

    def __str__(self) -> str:
        s = [str(a) for a in self.components]
        return f"{s[0]}{s[1]} {s[2]}{s[3]} {s[4]}{s[5]}"


@lru_cache(maxsize=1)
def hexacode_words() -> Tuple[HexacodeVector, ...]:
    """All 64 hexacode words, ordered by their information coordinates."""
    return tuple(
        HexacodeVector.from_information(a, b, c)
        for a in F4Point.points()
        for b in F4Point.points()
        for c in F4Point.points()
    )

