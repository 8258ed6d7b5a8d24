"""Miracle Octad Generator engine for the extended binary Golay code."""

from .errors import (
    MOGError,
    InvalidWeightError,
    NotABijectionError,
    NonInvertibleError,
    InvalidSeedError,
    NotADeepHoleError,
    LabellingStateError,
    InvariantViolation
)

from .algebra import (
    Enumerated,
    Labelled,
    F4Point,
    Side,
    Pair,
    HexacodePoint,
    HexacodeVector,
    hexacode_words,
    Permutation
)

from .golay import (
    MOGPoint,
    MOGVector,
    OrderedSextet,
    OrderedSextetLabelling,
    SextetStabilizer,
    UniqueCodeword,
    SixCodewords,
    BinaryGolayCode,
    binary_golay_code,
    Underset,
    Overset,
    Perfect,
    PartialLabelling
)

__version__ = "0.1.0"

__all__ = [
    'MOGError',
    'InvalidWeightError',
    'NotABijectionError',
    'NonInvertibleError',
    'InvalidSeedError',
    'NotADeepHoleError',
    'LabellingStateError',
    'InvariantViolation',
    'Enumerated',
    'Labelled',
    'F4Point',
    'Side',
    'Pair',
    'HexacodePoint',
    'HexacodeVector',
    'hexacode_words',
    'Permutation',
    'MOGPoint',
    'MOGVector',
    'OrderedSextet',
    'OrderedSextetLabelling',
    'SextetStabilizer',
    'UniqueCodeword',
    'SixCodewords',
    'BinaryGolayCode',
    'binary_golay_code',
    'Underset',
    'Overset',
    'Perfect',
    'PartialLabelling'
]
