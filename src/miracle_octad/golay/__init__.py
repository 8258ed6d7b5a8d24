"""The binary Golay code on the MOG grid, sextets and their labellings."""

from .mog_vector import (
    N_POINTS,
    MOGPoint,
    MOGVector
)

from .sextet import (
    OrderedSextet,
    OrderedSextetLabelling,
    SextetStabilizer
)

from .binary_golay_code import (
    DIMENSION,
    MINIMUM_DISTANCE,
    WEIGHT_DISTRIBUTION,
    M24_ORDER,
    UniqueCodeword,
    SixCodewords,
    NearestCodewordResult,
    BinaryGolayCode,
    binary_golay_code,
    golay_basis,
    span_of_basis,
    hamming_distances
)

from .partial_labelling import (
    Underset,
    Overset,
    Perfect,
    PartialLabellingState,
    PartialLabelling
)

__all__ = [
    'N_POINTS',
    'MOGPoint',
    'MOGVector',
    'OrderedSextet',
    'OrderedSextetLabelling',
    'SextetStabilizer',
    'DIMENSION',
    'MINIMUM_DISTANCE',
    'WEIGHT_DISTRIBUTION',
    'M24_ORDER',
    'UniqueCodeword',
    'SixCodewords',
    'NearestCodewordResult',
    'BinaryGolayCode',
    'binary_golay_code',
    'golay_basis',
    'span_of_basis',
    'hamming_distances',
    'Underset',
    'Overset',
    'Perfect',
    'PartialLabellingState',
    'PartialLabelling'
]
