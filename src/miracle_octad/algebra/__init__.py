"""Finite algebra: GF(4), enumerable point sets, the hexacode and permutations."""

from .enumerated import (
    Enumerated,
    Labelled,
    check_index
)

from .finite_field import F4Point

from .hexacode import (
    Side,
    Pair,
    HexacodePoint,
    HexacodeVector,
    hexacode_words
)

from .permutation import Permutation

__all__ = [
    'Enumerated',
    'Labelled',
    'check_index',
    'F4Point',
    'Side',
    'Pair',
    'HexacodePoint',
    'HexacodeVector',
    'hexacode_words',
    'Permutation'
]
