"""
Unit tests for the extraction confidence heuristic.
"""

import pytest
from article_extractor.extractor.confidence_scorer import ConfidenceScorer
from article_extractor.extractor.scorer import NodeScore


def node_score(content_score, link_density=0.0):
    return NodeScore(node=None, content_score=content_score, link_density=link_density)


@pytest.fixture
def scorer():
    return ConfidenceScorer()


@pytest.mark.unit
class TestComponents:
    @pytest.mark.parametrize(
        "score, expected",
        [(150, 0.4), (100.5, 0.4), (100, 0.3), (51, 0.3), (50, 0.2), (20.5, 0.2), (20, 0.1), (-5, 0.1)],
    )
    def test_score_buckets(self, scorer, score, expected):
        assert scorer.score_component(score) == expected

    @pytest.mark.parametrize(
        "words, expected",
        [(900, 0.3), (501, 0.3), (500, 0.2), (201, 0.2), (200, 0.1), (101, 0.1), (100, 0.0), (0, 0.0)],
    )
    def test_word_count_buckets(self, scorer, words, expected):
        assert scorer.word_count_component(words) == expected

    @pytest.mark.parametrize(
        "density, expected",
        [(0.0, 0.2), (0.09, 0.2), (0.1, 0.1), (0.19, 0.1), (0.2, 0.0), (0.8, 0.0)],
    )
    def test_link_density_buckets(self, scorer, density, expected):
        assert scorer.link_density_component(density) == expected

    def test_dominance_requires_more_than_double(self, scorer):
        assert scorer.dominance_component(30, node_score(15)) == 0.0
        assert scorer.dominance_component(30, node_score(14)) == 0.1
        assert scorer.dominance_component(30, None) == 0.0


@pytest.mark.unit
class TestCalculateConfidence:
    def test_strong_extraction(self, scorer):
        confidence = scorer.calculate_confidence(node_score(150, 0.05), node_score(10), 600)
        assert confidence == pytest.approx(1.0)

    def test_weak_extraction_gets_floor(self, scorer):
        confidence = scorer.calculate_confidence(node_score(5, 0.5), None, 50)
        assert confidence == pytest.approx(0.1)

    def test_typical_extraction(self, scorer):
        confidence = scorer.calculate_confidence(node_score(12, 0.0), node_score(6), 80)
        assert confidence == pytest.approx(0.3)

    def test_always_in_unit_interval(self, scorer):
        for content_score in (-100, 0, 10, 60, 1000):
            for density in (0.0, 0.15, 1.0):
                value = scorer.calculate_confidence(node_score(content_score, density), node_score(0), 10_000)
                assert 0.0 <= value <= 1.0
