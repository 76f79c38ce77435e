"""Tests for the pairwise discriminativeness ranker."""

from __future__ import annotations

import pytest

from discriminative_features.errors import UnknownTermError
from discriminative_features.language_model import smooth
from discriminative_features.models import FeatureRanking, LanguageModel
from discriminative_features.ranker import EPSILON, feature_ratio, rank_features

LABELS = {1: "term1", 2: "term2", 3: "term3"}


@pytest.fixture
def model_a():
    return smooth(LanguageModel("A", {1: 3, 2: 1}))


@pytest.fixture
def model_b():
    return smooth(LanguageModel("B", {1: 1, 3: 2}))


class TestFeatureRatio:
    def test_epsilon_value(self) -> None:
        assert EPSILON == 0.0001

    def test_shared_term(self, model_a, model_b) -> None:
        assert model_b.probability(1) == pytest.approx(1 / 3)
        assert feature_ratio(1, model_a, model_b) == pytest.approx(2.25, rel=1e-3)

    def test_numerator_only_term(self, model_a, model_b) -> None:
        assert feature_ratio(2, model_a, model_b) == pytest.approx(2501)

    def test_denominator_only_term(self, model_a, model_b) -> None:
        assert feature_ratio(3, model_a, model_b) == pytest.approx(0.00015, rel=1e-3)

    def test_reciprocity(self, model_a, model_b) -> None:
        for term in (1, 2, 3):
            forward = feature_ratio(term, model_a, model_b)
            backward = feature_ratio(term, model_b, model_a)
            assert forward == pytest.approx(1 / backward)

    def test_epsilon_not_stored_in_models(self, model_a) -> None:
        assert sum(model_a.probabilities.values()) == pytest.approx(1.0)

    def test_custom_epsilon(self, model_a, model_b) -> None:
        ratio = feature_ratio(2, model_a, model_b, epsilon=0.25)
        assert ratio == pytest.approx(2.0)


class TestRankFeatures:
    def test_scenario(self, model_a, model_b) -> None:
        ranking = rank_features(model_a, model_b, LABELS.__getitem__)

        assert isinstance(ranking, FeatureRanking)
        assert ranking.header == "#### p(f|A)/p(f|B)"
        assert [f.label for f in ranking] == ["term2", "term1", "term3"]
        ratios = [f.ratio for f in ranking]
        assert ratios[0] == pytest.approx(2501)
        assert ratios[1] == pytest.approx(2.25, rel=1e-3)
        assert ratios[2] == pytest.approx(0.00015, rel=1e-3)

    def test_term_universe_is_union(self, model_a, model_b) -> None:
        ranking = rank_features(model_a, model_b, LABELS.__getitem__)
        assert {f.term_id for f in ranking} == {1, 2, 3}
        assert len(ranking) == 3

    def test_descending_ratio(self) -> None:
        num = smooth(LanguageModel("N", {10: 5, 11: 1, 12: 3, 13: 2}))
        den = smooth(LanguageModel("D", {10: 1, 11: 4, 14: 6}))
        ranking = rank_features(num, den, str)
        ratios = [f.ratio for f in ranking]
        assert ratios == sorted(ratios, reverse=True)

    def test_ties_broken_by_term_id(self) -> None:
        num = smooth(LanguageModel("N", {9: 1, 4: 1, 7: 1}))
        den = smooth(LanguageModel("D", {9: 1, 4: 1, 7: 1}))
        ranking = rank_features(num, den, str)
        assert [f.term_id for f in ranking] == [4, 7, 9]
        assert all(f.ratio == pytest.approx(1.0) for f in ranking)

    def test_swapped_pair_reverses_order(self, model_a, model_b) -> None:
        forward = rank_features(model_a, model_b, LABELS.__getitem__)
        backward = rank_features(model_b, model_a, LABELS.__getitem__)
        assert [f.label for f in backward] == [f.label for f in reversed(forward.features)]
        assert backward.header == "#### p(f|B)/p(f|A)"

    def test_top_limit(self, model_a, model_b) -> None:
        ranking = rank_features(model_a, model_b, LABELS.__getitem__, top=2)
        assert [f.label for f in ranking] == ["term2", "term1"]

    def test_output_lines(self, model_a, model_b) -> None:
        lines = rank_features(model_a, model_b, LABELS.__getitem__).to_lines()
        assert lines[0] == "#### p(f|A)/p(f|B)"
        assert lines[1] == "2501 term2"
        assert lines[2].startswith("2.24") and lines[2].endswith(" term1")
        assert lines[3].endswith(" term3")
        assert len(lines) == 4

    def test_to_dict(self, model_a, model_b) -> None:
        data = rank_features(model_a, model_b, LABELS.__getitem__).to_dict()
        assert data["numerator"] == "A"
        assert data["denominator"] == "B"
        assert data["features"][0]["label"] == "term2"
        assert data["features"][0]["term_id"] == 2

    def test_favors_numerator(self, model_a, model_b) -> None:
        ranking = rank_features(model_a, model_b, LABELS.__getitem__)
        assert [f.favors_numerator for f in ranking] == [True, True, False]

    def test_unknown_term_label_is_fatal(self, model_a, model_b) -> None:
        def label_of(term_id: int) -> str:
            if term_id == 3:
                raise UnknownTermError(term_id)
            return LABELS[term_id]

        with pytest.raises(UnknownTermError):
            rank_features(model_a, model_b, label_of)

    def test_deterministic(self, model_a, model_b) -> None:
        first = rank_features(model_a, model_b, LABELS.__getitem__)
        second = rank_features(model_a, model_b, LABELS.__getitem__)
        assert first.to_lines() == second.to_lines()
