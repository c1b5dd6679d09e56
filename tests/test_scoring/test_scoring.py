"""Tests for the collapse primitive, efficiency blend, and operation vectors."""

import math

import pytest

from stylefold.config import StylefoldConfig
from stylefold.scoring import (
    AngularCollapser,
    CompressionOperation,
    OperationType,
    compression_efficiency,
    compression_ratio,
    operation_to_vectors,
)


# ---------------------------------------------------------------------------
# Collapse
# ---------------------------------------------------------------------------


class TestAngularCollapser:
    def test_identical_sets(self):
        vectors = [[1.0, 0.0], [0.0, 1.0], [-1.0, -1.0]]
        assert AngularCollapser().collapse(vectors, vectors) == 1.0

    def test_orthogonal(self):
        assert AngularCollapser().collapse([[1.0, 0.0]], [[0.0, 1.0]]) == 0.0

    def test_partial(self):
        query = [[1.0, 0.0], [0.0, 1.0]]
        reference = [[2.0, 0.1]]
        assert AngularCollapser().collapse(query, reference) == 0.5

    def test_angle_wraps_around(self):
        query = [[-1.0, 0.01]]
        reference = [[-1.0, -0.01]]
        assert AngularCollapser().collapse(query, reference) == 1.0

    @pytest.mark.parametrize("query, reference", [([], [[1.0, 0.0]]), ([[1.0, 0.0]], []), ([], [])])
    def test_empty_sides(self, query, reference):
        assert AngularCollapser().collapse(query, reference) == 0.0

    def test_bounded(self):
        query = [[math.cos(a / 10), math.sin(a / 10)] for a in range(60)]
        reference = [[1.0, 0.0], [0.0, -1.0]]
        score = AngularCollapser(epsilon=0.3).collapse(query, reference)
        assert 0.0 <= score <= 1.0

    def test_epsilon_controls_tolerance(self):
        query = [[math.cos(0.2), math.sin(0.2)]]
        reference = [[1.0, 0.0]]
        assert AngularCollapser(epsilon=0.1).collapse(query, reference) == 0.0
        assert AngularCollapser(epsilon=0.3).collapse(query, reference) == 1.0


# ---------------------------------------------------------------------------
# Efficiency
# ---------------------------------------------------------------------------


class TestEfficiency:
    def test_formula(self):
        assert compression_efficiency("aaaa", "aa", 0.5) == pytest.approx(140.0)

    def test_empty_compressed_uses_one(self):
        assert compression_ratio("abc", "") == 3.0

    def test_ratio_counts_utf16_code_units(self):
        # one astral character is two code units
        assert compression_ratio("\U0001F600", "ab") == 1.0
        assert compression_ratio("ab", "\U0001F600") == 1.0

    def test_efficiency_uses_code_unit_ratio(self):
        cfg = StylefoldConfig(ratio_weight=1.0, similarity_weight=0.0)
        assert compression_efficiency("\U0001F600" * 2, "ab", 0.0, config=cfg) == pytest.approx(200.0)

    def test_not_clamped(self):
        assert compression_efficiency("a" * 1000, "a", 1.0) > 100

    def test_smaller_output_scores_higher(self):
        original = "x" * 100
        scores = [compression_efficiency(original, "x" * n, 0.7) for n in (80, 50, 20, 5)]
        assert scores == sorted(scores)
        assert len(set(scores)) == len(scores)

    def test_higher_similarity_scores_higher(self):
        scores = [compression_efficiency("x" * 50, "x" * 25, s) for s in (0.0, 0.3, 0.6, 1.0)]
        assert scores == sorted(scores)
        assert len(set(scores)) == len(scores)

    def test_weights_from_config(self):
        cfg = StylefoldConfig(ratio_weight=1.0, similarity_weight=0.0)
        assert compression_efficiency("aaaa", "aa", 0.9, config=cfg) == pytest.approx(200.0)


# ---------------------------------------------------------------------------
# Operation vectors
# ---------------------------------------------------------------------------


class TestOperationVectors:
    def test_compress_concatenates_parameters(self):
        op = CompressionOperation(
            type=OperationType.COMPRESS,
            input=[{"x": 1, "y": 2}],
            parameters={"level": 3, "mode": "fast"},
        )
        assert operation_to_vectors(op) == [(1.0, 2.0), (3.0, 0.0), (0.0, 0.0)]

    def test_decompress_negates(self):
        op = CompressionOperation(type="decompress", input=[(1, -2), (0.5, 0)])
        assert operation_to_vectors(op) == [(-1.0, 2.0), (-0.5, -0.0)]

    def test_optimize_scales_by_first_parameter(self):
        op = CompressionOperation(type="optimize", input=[(1, 2)], parameters={"w": 2})
        assert operation_to_vectors(op) == [(2.0, 4.0)]

    def test_optimize_without_parameters_is_identity(self):
        op = CompressionOperation(type="optimize", input=[(1, 2)])
        assert operation_to_vectors(op) == [(1.0, 2.0)]

    def test_string_input_uses_text_vectors(self):
        op = CompressionOperation(type="transform", input="abc")
        assert len(operation_to_vectors(op)) == 3

    def test_mapping_input(self):
        op = CompressionOperation(type="transform", input={"a": 4, "b": "x"})
        assert operation_to_vectors(op) == [(4.0, 0.0), (0.0, 0.0)]

    def test_unknown_input_is_origin(self):
        op = CompressionOperation(type="compress", input=None)
        assert operation_to_vectors(op) == [(0.0, 0.0)]

    def test_unknown_type_returns_inputs(self):
        op = CompressionOperation(type="entangle", input=[(1, 1)], parameters={"k": 9})
        assert operation_to_vectors(op) == [(1.0, 1.0)]
