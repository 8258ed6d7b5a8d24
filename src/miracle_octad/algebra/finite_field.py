"""
The four element field GF(4) = {0, 1, ω, ω̄}.

Elements are numbered Zero=0, One=1, Alpha=2 (ω), Beta=3 (ω̄). This numbering is
also the row numbering of the MOG grid.

Field facts used throughout:
- Characteristic 2, so x + x = 0 and -x = x
- The nonzero elements form a cyclic group of order 3 generated by ω:
  1 -> ω -> ω̄ -> 1 under multiplication by ω
- Conjugation x -> x² swaps ω and ω̄ and is the only nontrivial field automorphism
"""

from enum import Enum
from typing import Optional, Tuple

from .enumerated import Enumerated, check_index
from ..errors import NonInvertibleError


# Addition and multiplication tables indexed by element number.
_ADD_TABLE = (
    (0, 1, 2, 3),
    (1, 0, 3, 2),
    (2, 3, 0, 1),
    (3, 2, 1, 0),
)

_MUL_TABLE = (
    (0, 0, 0, 0),
    (0, 1, 2, 3),
    (0, 2, 3, 1),
    (0, 3, 1, 2),
)

_INVERSE = (None, 1, 3, 2)
_CONJUGATE = (0, 1, 3, 2)
_SYMBOLS = ('0', '1', 'ω', 'ω̄')


class F4Point(Enumerated, Enum):
    """An element of GF(4)."""

    ZERO = 0
    ONE = 1
    ALPHA = 2
    BETA = 3

    @classmethod
    def cardinality(cls) -> int:
        return 4

    @classmethod
    def from_index(cls, index: int) -> 'F4Point':
        return _ELEMENTS[check_index(cls, index)]

    @classmethod
    def nonzero(cls) -> Tuple['F4Point', ...]:
        """The multiplicative group, in the order 1, ω, ω̄."""
        return _ELEMENTS[1:]

    @property
    def index(self) -> int:
        return self.value

    def __add__(self, other: 'F4Point') -> 'F4Point':
        if not isinstance(other, F4Point):
            return NotImplemented
        return _ELEMENTS[_ADD_TABLE[self.value][other.value]]

    # Characteristic 2
    __sub__ = __add__

    def __neg__(self) -> 'F4Point':
        return self

    def __mul__(self, other: 'F4Point') -> 'F4Point':
        if not isinstance(other, F4Point):
            return NotImplemented
        return _ELEMENTS[_MUL_TABLE[self.value][other.value]]

    def __truediv__(self, other: 'F4Point') -> 'F4Point':
        if not isinstance(other, F4Point):
            return NotImplemented
        inverse = other.inverse()
        if inverse is None:
            raise NonInvertibleError("division by Zero in GF(4)")
        return self * inverse

    def inverse(self) -> Optional['F4Point']:
        """Multiplicative inverse, or None for Zero."""
        i = _INVERSE[self.value]
        return None if i is None else _ELEMENTS[i]

    def conjugate(self) -> 'F4Point':
        """Frobenius automorphism x -> x², swapping Alpha and Beta."""
        return _ELEMENTS[_CONJUGATE[self.value]]

    def __str__(self) -> str:
        return _SYMBOLS[self.value]


_ELEMENTS = (F4Point.ZERO, F4Point.ONE, F4Point.ALPHA, F4Point.BETA)
