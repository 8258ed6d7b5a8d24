"""
Tests for the binary Golay code.
Run with: python -m pytest tests/ -v
"""

import itertools
import random

import jax.numpy as jnp
import numpy as np
import pytest

from miracle_octad import (
    F4Point,
    HexacodePoint,
    MOGPoint,
    MOGVector,
    Permutation,
    UniqueCodeword,
    SixCodewords,
    BinaryGolayCode,
    binary_golay_code,
    InvalidWeightError,
    NotADeepHoleError,
    MOGError,
)
from miracle_octad.golay import (
    DIMENSION,
    WEIGHT_DISTRIBUTION,
    golay_basis,
    hamming_distances,
    span_of_basis,
)


@pytest.fixture(scope="module")
def code() -> BinaryGolayCode:
    return binary_golay_code()


def random_subset(rng: random.Random, k: int) -> MOGVector:
    return MOGVector.from_indices(rng.sample(range(24), k))


class TestConstruction:

    def test_singleton(self, code):
        assert binary_golay_code() is code

    def test_basis(self, code):
        assert len(code.basis) == DIMENSION
        assert list(code.basis) == golay_basis()
        assert all(code.is_codeword(b) for b in code.basis)

    def test_codeword_count_and_spectrum(self, code):
        words = code.codewords()
        assert len(words) == 4096
        assert len(set(words)) == 4096
        assert code.weight_distribution() == WEIGHT_DISTRIBUTION
        assert len(code.octads()) == 759

    def test_closed_under_xor(self, code):
        rng = random.Random(1)
        words = code.codewords()
        for _ in range(200):
            a, b = rng.choice(words), rng.choice(words)
            assert code.is_codeword(a ^ b)

    def test_mog_characterization(self, code):
        # Column parities equal top-row parity and scores form a hexacode word
        top_row = MOGVector.from_fn(lambda p: p.row is F4Point.ZERO)
        for word in code.codewords()[::37]:
            parity = (word & top_row).weight() % 2
            for h in HexacodePoint.points():
                assert (word & MOGVector.column(h)).weight() % 2 == parity
            assert word.column_scores().is_hexacodeword()

    def test_span_of_basis(self):
        basis = jnp.asarray(np.eye(3, 5, dtype=np.int32))
        span = np.asarray(span_of_basis(basis))
        assert span.shape == (8, 5)
        assert len({tuple(row) for row in span}) == 8

    def test_hamming_distances(self):
        words = jnp.asarray([[0, 0, 0], [1, 1, 0], [1, 1, 1]])
        distances = np.asarray(hamming_distances(words, jnp.asarray([1, 0, 0])))
        assert list(distances) == [1, 1, 2]


class TestMembership:

    def test_is_codeword(self, code):
        assert code.is_codeword(MOGVector.zero())
        assert code.is_codeword(MOGVector.full())
        assert not code.is_codeword(MOGVector.from_indices([0]))

    def test_is_octad(self, code):
        two_columns = MOGVector.column(HexacodePoint.from_index(0)) | MOGVector.column(HexacodePoint.from_index(1))
        assert code.is_octad(two_columns)
        assert not code.is_octad(MOGVector.full())
        assert not code.is_octad(MOGVector.from_indices(range(8)))

    def test_minimum_distance(self, code):
        nonzero = [w for w in code.codewords() if w.weight() > 0]
        assert min(w.weight() for w in nonzero) == 8


class TestCompletion:

    def test_complete_octad_sampled(self, code):
        rng = random.Random(5)
        octads = code.octads()
        for _ in range(300):
            v = random_subset(rng, 5)
            octad = code.complete_octad(v)
            assert octad.weight() == 8
            assert code.is_codeword(octad)
            assert octad.contains(v)
            assert sum(1 for o in octads if o.contains(v)) == 1

    def test_complete_octad_every_five_subset_of_an_octad(self, code):
        octad = code.octads()[0]
        points = list(octad.points())
        for five in itertools.combinations(points, 5):
            assert code.complete_octad(MOGVector.from_points(five)) == octad

    def test_complete_octad_rejects_wrong_weight(self, code):
        with pytest.raises(InvalidWeightError) as info:
            code.complete_octad(MOGVector.from_indices(range(4)))
        assert info.value.expected == 5
        assert info.value.actual == 4

    def test_complete_sextet_sampled(self, code):
        rng = random.Random(9)
        for _ in range(100):
            v = random_subset(rng, 4)
            sextet = code.complete_sextet(v)
            assert len(sextet) == 6
            assert v in sextet
            union = MOGVector.zero()
            for f in sextet:
                assert f.weight() == 4
                assert (union & f).weight() == 0
                union = union | f
            assert union == MOGVector.full()
            for a, b in itertools.combinations(sextet, 2):
                assert code.is_octad(a | b)

    def test_complete_sextet_of_column(self, code):
        col = MOGVector.column(HexacodePoint.from_index(2))
        columns = {MOGVector.column(h) for h in HexacodePoint.points()}
        assert code.complete_sextet(col) == frozenset(columns)

    def test_complete_sextet_rejects_wrong_weight(self, code):
        with pytest.raises(InvalidWeightError):
            code.complete_sextet(MOGVector.from_indices(range(5)))

    def test_ordered_sextet(self, code):
        v = MOGVector.from_indices([0, 1, 2, 3])
        ordered = code.ordered_sextet(v)
        foursomes = list(ordered)
        assert foursomes == sorted(foursomes, reverse=True)
        assert ordered.as_set() == code.complete_sextet(v)


class TestNearestCodeword:

    def test_zero(self, code):
        assert code.nearest_codeword(MOGVector.zero()) == UniqueCodeword(MOGVector.zero(), 0)

    def test_within_radius_three(self, code):
        rng = random.Random(13)
        words = code.codewords()
        for d in range(4):
            for _ in range(10):
                word = rng.choice(words)
                noisy = word ^ random_subset(rng, d)
                result = code.nearest_codeword(noisy)
                assert isinstance(result, UniqueCodeword)
                assert result.codeword == word
                assert result.distance == d

    def test_six_codewords_at_distance_four(self, code):
        v = MOGVector.from_indices([0, 1, 2, 3])
        result = code.nearest_codeword(v)
        assert isinstance(result, SixCodewords)
        assert len(result.codewords) == 6
        for word in result.codewords:
            assert code.is_codeword(word)
            assert (word ^ v).weight() == 4
        assert list(result.codewords) == sorted(result.codewords)

    def test_deep_hole_sextet(self, code):
        rng = random.Random(17)
        for _ in range(10):
            v = random_subset(rng, 4)
            assert code.deep_hole_sextet(v) == code.complete_sextet(v)

    def test_deep_hole_sextet_of_heavier_vector(self, code):
        rng = random.Random(19)
        words = code.codewords()
        v = rng.choice(words) ^ random_subset(rng, 4)
        sextet = code.deep_hole_sextet(v)
        assert len(sextet) == 6
        assert all(f.weight() == 4 for f in sextet)

    def test_deep_hole_sextet_rejects_close_vector(self, code):
        with pytest.raises(NotADeepHoleError):
            code.deep_hole_sextet(MOGVector.from_indices([0, 1]))
        with pytest.raises(MOGError):
            code.deep_hole_sextet(MOGVector.zero())


class TestAutomorphisms:

    def test_identity(self, code):
        assert code.is_automorphism(Permutation.identity(MOGPoint))

    def test_random_permutations_are_not_automorphisms(self, code):
        rng = random.Random(23)
        for _ in range(50):
            images = list(MOGPoint.points())
            rng.shuffle(images)
            p = Permutation.from_fn(lambda x: images[x.index], MOGPoint)
            assert not code.is_automorphism(p)

    def test_transposition_is_not_an_automorphism(self, code):
        p = Permutation.new_swap(MOGPoint.from_index(0), MOGPoint.from_index(1))
        assert not code.is_automorphism(p)

    def test_row_translation_is_automorphism(self, code):
        # Adding a hexacode word to the rows, column by column
        shift = (F4Point.ONE, F4Point.ONE, F4Point.ZERO, F4Point.ZERO, F4Point.ONE, F4Point.ONE)
        p = Permutation.from_fn(lambda x: MOGPoint(x.col, x.row + shift[x.col.index]), MOGPoint)
        assert code.is_automorphism(p)

    def test_pair_swap_is_automorphism(self, code):
        swap = {0: 2, 1: 3, 2: 0, 3: 1, 4: 4, 5: 5}
        p = Permutation.from_fn(lambda x: MOGPoint(HexacodePoint.from_index(swap[x.col.index]), x.row), MOGPoint)
        assert code.is_automorphism(p)

    def test_wrong_point_type(self, code):
        with pytest.raises(TypeError):
            code.is_automorphism(Permutation.identity(F4Point))
