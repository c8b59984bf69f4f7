"""
Base class for domain analyzers.

Every domain follows the same shape: extract the relevant part of the
input, score a fixed ordered list of weighted factors, combine them into a
domain score and grade, and turn the weakest factors into recommendations.
Subclasses only supply the domain-specific pieces.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any

from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.data.knowledge import DomainKnowledge, FactorAdvice
from creative_science.knowledge.grading import get_grade, priority_for_score
from creative_science.knowledge.schemas import (
    AnalysisInput,
    DomainRecommendation,
    DomainScore,
    ScoringFactor,
)

logger = logging.getLogger(__name__)

MISSING_INPUT_FACTOR = "input_availability"

_GENERIC_MISSING_INPUT = FactorAdvice(
    recommendation="Provide the creative fields this domain analyzes.",
    scientific_basis="No input was available, so no evidence could be applied.",
    expected_impact="Enables a full evaluation instead of a neutral placeholder score.",
)


def validate_factor_weights(domain: str, weights: dict[str, float]) -> None:
    """
    Check that a domain's factor weights are in range and sum to 1.0.

    Raises:
        ValueError: On an empty table, an out-of-range weight, or a sum other than 1.0.
    """
    if not weights:
        raise ValueError(f"Domain {domain!r} defines no factors")
    for name, weight in weights.items():
        if not (0.0 <= weight <= 1.0):
            raise ValueError(f"Factor {name!r} of {domain!r} has weight {weight} outside 0-1")
    total = sum(weights.values())
    if not math.isclose(total, 1.0, abs_tol=1e-6):
        raise ValueError(f"Factor weights of {domain!r} must sum to 1.0, got {total:.6f}")


class DomainAnalyzer(ABC):
    """
    Abstract base class for domain analyzers.

    Subclasses must implement:
        - domain: Domain identifier
        - FACTOR_WEIGHTS: Ordered factor name -> weight table
        - default_knowledge(): Knowledge tables used when none are injected
        - _extract(): Pull the domain-relevant input, or None when it is absent
        - _score_factors(): Score every factor of FACTOR_WEIGHTS, in order

    The base class handles:
        - Factor weight validation
        - Domain score, grade and recommendation assembly
        - The placeholder result for missing input

    ``analyze`` is pure: the same input always yields the same DomainScore.
    """

    FACTOR_WEIGHTS: dict[str, float] = {}

    def __init__(
        self,
        knowledge: DomainKnowledge | None = None,
        config: KnowledgeConfig | None = None,
    ) -> None:
        """
        Initialize the analyzer.

        Args:
            knowledge: Knowledge tables (default tables of the domain if None)
            config: Engine configuration (default from environment if None)
        """
        validate_factor_weights(self.domain, self.FACTOR_WEIGHTS)
        self._knowledge = knowledge or self.default_knowledge()
        if self._knowledge.domain != self.domain:
            raise ValueError(
                f"{type(self).__name__} got knowledge for {self._knowledge.domain!r}, "
                f"expected {self.domain!r}"
            )
        self._config = config or KnowledgeConfig()

    @property
    @abstractmethod
    def domain(self) -> str:
        """Return the domain identifier this analyzer scores."""
        ...

    @classmethod
    @abstractmethod
    def default_knowledge(cls) -> DomainKnowledge:
        """Return the built-in knowledge tables of the domain."""
        ...

    @abstractmethod
    def _extract(self, input: AnalysisInput) -> Any | None:
        """
        Extract the part of the input this domain analyzes.

        Returns:
            Domain-specific extracted input, or None when it is entirely absent.
        """
        ...

    @abstractmethod
    def _score_factors(self, extracted: Any) -> list[ScoringFactor]:
        """
        Score every factor of FACTOR_WEIGHTS.

        Args:
            extracted: Value returned by _extract (never None).

        Returns:
            One ScoringFactor per entry of FACTOR_WEIGHTS, in the same order.
        """
        ...

    @property
    def knowledge(self) -> DomainKnowledge:
        return self._knowledge

    def analyze(self, input: AnalysisInput) -> DomainScore:
        """
        Score one creative in this domain.

        Missing input never raises: it produces a placeholder score and a
        single recommendation asking for the missing fields.

        Args:
            input: Analysis input.

        Returns:
            DomainScore of this domain.
        """
        extracted = self._extract(input)
        if extracted is None:
            logger.debug("No %s input, returning placeholder score", self.domain)
            return self._placeholder_score()

        factors = self._score_factors(extracted)
        self._check_factors(factors)

        score = max(0, min(100, round(sum(f.weighted_score for f in factors))))
        return DomainScore(
            domain=self.domain,
            score=score,
            grade=get_grade(score),
            factors=tuple(factors),
            citations=self._knowledge.citations,
            recommendations=tuple(self._build_recommendations(factors)),
        )

    # ── Helpers for subclasses ───────────────────────────

    def _factor(
        self,
        name: str,
        score: float,
        explanation: str,
        ndigits: int | None = None,
    ) -> ScoringFactor:
        """
        Build a factor with its configured weight and citation.

        The score is clamped to [0, 100] then rounded (to an int by default).
        """
        clamped = max(0.0, min(100.0, float(score)))
        rounded = round(clamped, ndigits) if ndigits is not None else round(clamped)
        return ScoringFactor(
            name=name,
            score=rounded,
            weight=self.FACTOR_WEIGHTS[name],
            explanation=explanation,
            citation=self._knowledge.citation_for(name),
        )

    def _check_factors(self, factors: list[ScoringFactor]) -> None:
        names = [f.name for f in factors]
        if names != list(self.FACTOR_WEIGHTS):
            raise ValueError(
                f"{self.domain} produced factors {names}, "
                f"expected {list(self.FACTOR_WEIGHTS)}"
            )

    def _build_recommendations(
        self, factors: list[ScoringFactor]
    ) -> list[DomainRecommendation]:
        """Turn the weakest factors into recommendations, worst first."""
        ceiling = self._config.recommendation_ceiling
        recommendations: list[DomainRecommendation] = []
        for factor in sorted(factors, key=lambda f: f.score):
            if factor.score >= ceiling:
                break
            advice = self._knowledge.advice_for(factor.name)
            if advice is None:
                continue
            recommendations.append(
                DomainRecommendation(
                    domain=self.domain,
                    priority=priority_for_score(factor.score),
                    recommendation=advice.recommendation,
                    scientific_basis=advice.scientific_basis,
                    expected_impact=advice.expected_impact,
                    citations=(factor.citation,) if factor.citation else (),
                )
            )
            if len(recommendations) >= self._config.max_recommendations_per_domain:
                break
        return recommendations

    def _placeholder_score(self) -> DomainScore:
        score = self._config.placeholder_score
        advice = self._knowledge.missing_input or _GENERIC_MISSING_INPUT
        factor = ScoringFactor(
            name=MISSING_INPUT_FACTOR,
            score=score,
            weight=1.0,
            explanation=f"No {self.domain.replace('_', ' ')} input supplied; neutral score applied.",
        )
        recommendation = DomainRecommendation(
            domain=self.domain,
            priority="high",
            recommendation=advice.recommendation,
            scientific_basis=advice.scientific_basis,
            expected_impact=advice.expected_impact,
        )
        return DomainScore(
            domain=self.domain,
            score=score,
            grade=get_grade(score),
            factors=(factor,),
            recommendations=(recommendation,),
        )
