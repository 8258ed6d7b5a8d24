"""
Exceptions raised by the MOG engine.

Two families:
- Input validation errors (subclasses of ValueError) are recoverable and are
  raised when a caller hands in data of the wrong shape.
- InvariantViolation signals a defect in the fixed mathematical data or in an
  algorithm. It never depends on user input.
"""


class MOGError(Exception):
    """Base class for all errors raised by miracle_octad."""
    pass


class InvalidWeightError(MOGError, ValueError):
    """Raised when a vector of the wrong weight is passed to a completion."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected a vector of weight {expected}, got weight {actual}")


class NotABijectionError(MOGError, ValueError):
    """Raised when a mapping used to build a permutation is not a bijection."""
    pass


class NonInvertibleError(MOGError, ValueError):
    """Raised when Zero is used where an invertible field element is required."""
    pass


class InvalidSeedError(MOGError, ValueError):
    """Raised when anchor points for the labelling seed are misplaced."""
    pass


class NotADeepHoleError(MOGError, ValueError):
    """Raised when a vector within distance 3 of the code is treated as a deep hole."""
    pass


class LabellingStateError(MOGError, ValueError):
    """Raised when a partial labelling does not determine a unique completion."""
    pass


class InvariantViolation(MOGError, AssertionError):
    """Raised when a structural invariant of the code or an algorithm fails."""
    pass
