"""Pytest fixtures for knowledge engine tests."""

import pytest

from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.grading import get_grade
from creative_science.knowledge.schemas import (
    ALL_KNOWLEDGE_DOMAINS,
    AnalysisInput,
    Citation,
    DomainRecommendation,
    DomainScore,
    ScoringFactor,
)


class StubAnalyzer:
    """Analyzer double returning a fixed score for its domain."""

    def __init__(
        self,
        domain: str,
        score: int,
        recommendations: tuple[DomainRecommendation, ...] = (),
    ) -> None:
        self.domain = domain
        self.score = score
        self.recommendations = recommendations
        self.calls = 0

    def analyze(self, input: AnalysisInput) -> DomainScore:
        self.calls += 1
        citation = Citation(
            id=f"{self.domain}-cite",
            domain=self.domain,
            source=f"{self.domain} source",
            finding=f"{self.domain} finding",
            applicability="test",
        )
        return DomainScore(
            domain=self.domain,
            score=self.score,
            grade=get_grade(self.score),
            factors=(
                ScoringFactor(
                    name="only_factor",
                    score=self.score,
                    weight=1.0,
                    explanation=f"{self.domain} explanation",
                    citation=citation,
                ),
            ),
            citations=(citation,),
            recommendations=self.recommendations,
        )


class FailingAnalyzer:
    """Analyzer double that always raises."""

    def __init__(self, domain: str, exc: Exception | None = None) -> None:
        self.domain = domain
        self.exc = exc or RuntimeError(f"{domain} exploded")

    def analyze(self, input: AnalysisInput) -> DomainScore:
        raise self.exc


def _make_recommendation(domain: str, priority: str, text: str = "") -> DomainRecommendation:
    return DomainRecommendation(
        domain=domain,
        priority=priority,
        recommendation=text or f"{priority} fix for {domain}",
        scientific_basis="basis",
        expected_impact="impact",
    )


# Scores per domain used by the stub fleet: 16 + 12 + 10.5 + 18 + 5 + 7.5 = 69
STUB_SCORES = {
    "neuromarketing": 80,
    "marketing_psychology": 60,
    "crowd_psychology": 70,
    "platform_best_practices": 90,
    "color_psychology": 50,
    "copywriting_psychology": 50,
}


@pytest.fixture
def knowledge_config() -> KnowledgeConfig:
    """Engine config with metrics disabled."""
    return KnowledgeConfig(metrics_enabled=False)


@pytest.fixture
def make_stub():
    """Factory for StubAnalyzer(domain, score, recommendations=())."""
    return StubAnalyzer


@pytest.fixture
def make_failing():
    """Factory for FailingAnalyzer(domain, exc=None)."""
    return FailingAnalyzer


@pytest.fixture
def make_rec():
    """Factory for DomainRecommendation(domain, priority, text="")."""
    return _make_recommendation


@pytest.fixture
def make_fleet():
    """
    Factory for a full stub fleet in registration order.

    Usage:
        analyzers = make_fleet("color_psychology")  # color raises
    """

    def _fleet(*failing: str, scores: dict[str, int] | None = None) -> list:
        table = scores or STUB_SCORES
        return [
            FailingAnalyzer(d) if d in failing else StubAnalyzer(d, table[d])
            for d in ALL_KNOWLEDGE_DOMAINS
        ]

    return _fleet
