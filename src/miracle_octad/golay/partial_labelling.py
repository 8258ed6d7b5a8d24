"""
Partial labellings of an ordered sextet and their completion.

A valid labelling of an ordered sextet is determined by four labels:
- two points x, y in one foursome,
- one point labelled x in the adjacent foursome of the same pair,
- one point z in a foursome of a different pair.

Fewer labels leave the completion ambiguous (Underset); labels that cannot be part
of any valid labelling, or more than this, are Overset. Exactly this configuration
is Perfect and completes uniquely.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Set, Union, Any

from ..algebra.enumerated import Labelled
from ..algebra.finite_field import F4Point
from ..algebra.hexacode import Side, Pair, HexacodePoint, HexacodeVector
from ..algebra.permutation import Permutation
from ..errors import LabellingStateError, InvariantViolation
from .binary_golay_code import BinaryGolayCode, binary_golay_code
from .mog_vector import MOGPoint
from .sextet import OrderedSextet, OrderedSextetLabelling


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Underset:
    """Not enough labels to determine a completion."""
    pass


@dataclass(frozen=True)
class Overset:
    """Labels inconsistent with any valid labelling, or more than needed."""
    pass


@dataclass(frozen=True)
class Perfect:
    """Exactly the labels needed for a unique completion.

    Attributes:
        x, y: Labels in the foursome with two labels, x also being the label in
            the adjacent foursome
        z: Label in the third foursome
        pair: Pair holding the two-label foursome and its neighbour
        side: Side of the neighbour with the single label x
        third: Foursome carrying z
    """
    x: F4Point
    y: F4Point
    z: F4Point
    pair: Pair
    side: Side
    third: HexacodePoint


PartialLabellingState = Union[Underset, Perfect, Overset]


def _swap_sides(pair: Pair) -> Permutation[HexacodePoint]:
    return Permutation.new_swap(HexacodePoint(Side.LEFT, pair), HexacodePoint(Side.RIGHT, pair))


class PartialLabelling:
    """An ordered sextet with an optional label on every point."""

    __slots__ = ('_sextet', '_labels')

    def __init__(self, sextet: OrderedSextet,
                 labels: Optional[Labelled[MOGPoint, Optional[F4Point]]] = None):
        self._sextet = sextet
        self._labels = Labelled.constant(MOGPoint, None) if labels is None else labels

    @classmethod
    def empty(cls, sextet: OrderedSextet) -> 'PartialLabelling':
        return cls(sextet)

    @property
    def sextet(self) -> OrderedSextet:
        return self._sextet

    @property
    def labels(self) -> Labelled[MOGPoint, Optional[F4Point]]:
        return self._labels

    def label(self, point: MOGPoint) -> Optional[F4Point]:
        return self._labels[point]

    def with_label(self, point: MOGPoint, label: Optional[F4Point]) -> 'PartialLabelling':
        """Copy with point relabelled; None clears the label."""
        return PartialLabelling(self._sextet, self._labels.replace(point, label))

    def labelled_points(self) -> List[MOGPoint]:
        return [p for p, label in self._labels.items() if label is not None]

    def _point_with_label(self, h: HexacodePoint, label: F4Point) -> MOGPoint:
        for p in self._sextet.foursome(h).points():
            if self._labels[p] is label:
                return p
        raise InvariantViolation(f"no point labelled {label} in foursome {h!r}")

    # Classification

    def state(self) -> PartialLabellingState:
        used: List[Set[F4Point]] = []
        for h in HexacodePoint.points():
            labels = set()
            for p in self._sextet.foursome(h).points():
                label = self._labels[p]
                if label is None:
                    continue
                if label in labels:
                    return Overset()
                labels.add(label)
            used.append(labels)

        if any(len(labels) >= 3 for labels in used):
            return Overset()

        def count(h: HexacodePoint) -> int:
            return len(used[h.index])

        with_labels = [h for h in HexacodePoint.points() if count(h) > 0]
        two = next((h for h in HexacodePoint.points() if count(h) == 2), None)

        if two is None:
            if len(with_labels) >= 4:
                return Overset()
            if len(with_labels) == 3 and not any(
                    a.is_adjacent(b) for a in with_labels for b in with_labels):
                return Overset()
            return Underset()

        if any(h != two and count(h) >= 2 for h in HexacodePoint.points()):
            return Overset()

        if len(with_labels) == 2:
            one = next(h for h in with_labels if h != two)
            if one.pair == two.pair and not used[one.index] <= used[two.index]:
                return Overset()
            return Underset()

        if len(with_labels) == 3:
            adjacent = next((h for h in with_labels if h != two and h.pair == two.pair), None)
            if adjacent is None:
                return Overset()
            third = next(h for h in with_labels if h != two and h != adjacent)
            (x,) = used[adjacent.index]
            if x not in used[two.index]:
                return Overset()
            (y,) = used[two.index] - {x}
            (z,) = used[third.index]
            return Perfect(x=x, y=y, z=z, pair=two.pair, side=adjacent.side, third=third)

        if len(with_labels) >= 4:
            return Overset()
        return Underset()

    def allowed_labels(self) -> Labelled[MOGPoint, FrozenSet[F4Point]]:
        """For every point, the labels it could take without making the state Overset."""
        return Labelled.from_fn(MOGPoint, lambda p: frozenset(
            label for label in F4Point.points()
            if not isinstance(self.with_label(p, label).state(), Overset)
        ))

    # Completion

    def complete_labelling(self, code: Optional[BinaryGolayCode] = None) -> OrderedSextetLabelling:
        """The unique valid labelling extending a Perfect partial labelling.

        The sextet is first reordered so the single-label neighbour sits at
        (Left, Left), the two-label foursome at (Right, Left) and the third
        foursome at (Left, Middle). The seed labelling is computed there with anchors 0, 0, 1
        and z/(x+y), then rescaled by x+y and shifted by x on the Left and Right
        pairs, and finally moved back to the original order.

        Raises:
            LabellingStateError: If the state is not Perfect
        """
        state = self.state()
        if not isinstance(state, Perfect):
            raise LabellingStateError(f"cannot complete a partial labelling in state {state}")
        if code is None:
            code = binary_golay_code()

        x, y, z = state.x, state.y, state.z
        pair, side, third = state.pair, state.side, state.third
        empty_pair = next(p for p in Pair.points() if p != pair and p != third.pair)

        two = HexacodePoint(side.flip(), pair)
        adjacent = HexacodePoint(side, pair)
        point1 = self._point_with_label(adjacent, x)
        point2 = self._point_with_label(two, x)
        point3 = self._point_with_label(two, y)
        point4 = self._point_with_label(third, z)

        permutations = []
        if side is Side.RIGHT:
            permutations += [_swap_sides(pair), _swap_sides(empty_pair)]
        if third.side is Side.RIGHT:
            permutations += [_swap_sides(third.pair), _swap_sides(empty_pair)]
        pair_order = {Pair.LEFT: pair, Pair.MIDDLE: third.pair, Pair.RIGHT: empty_pair}
        permutations.append(Permutation.from_fn(
            lambda h: HexacodePoint(h.side, pair_order[h.pair]), HexacodePoint
        ).inverse())

        sextet = self._sextet
        for permutation in permutations:
            sextet = sextet.permute(permutation)

        scale = (x + y).inverse()
        labelling = code.complete_labelling(sextet, point1, point2, point3, point4, z * scale)
        labelling = labelling.scalar_mul(scale)
        labelling = labelling.add_vector(
            HexacodeVector.from_fn(lambda h: F4Point.ZERO if h.pair is Pair.MIDDLE else x)
        )

        for permutation in reversed(permutations):
            labelling = labelling.permute_foursomes(permutation.inverse())

        if labelling.sextet != self._sextet:
            raise InvariantViolation("completed labelling is on a different sextet")
        for p in self.labelled_points():
            if labelling.label(p) is not self._labels[p]:
                raise InvariantViolation(
                    f"completion relabelled {p!r}: {self._labels[p]} -> {labelling.label(p)}"
                )
        logger.debug("completed partial labelling %s", state)
        return labelling

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PartialLabelling):
            return NotImplemented
        return self._sextet == other._sextet and self._labels == other._labels

    def __hash__(self) -> int:
        return hash((self._sextet, self._labels))

    def __repr__(self) -> str:
        entries = ', '.join(f"{p.index}: {label}" for p, label in self._labels.items() if label is not None)
        return f"PartialLabelling({self._sextet!r}, {{{entries}}})"
