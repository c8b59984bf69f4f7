"""Multi-domain creative scoring engine.

Runs independent domain analyzers (neuromarketing, marketing psychology,
crowd psychology, platform best practices, color psychology, copywriting
psychology) over one ad creative and combines them into a weighted
composite score, letter grade and ranked, citation-backed recommendations.

Usage:
    from creative_science.knowledge import AnalysisInput, KnowledgeBaseService

    service = KnowledgeBaseService()
    composite = service.analyze_all(AnalysisInput.from_dict(payload))
    print(composite.overall, composite.grade)
"""

from creative_science.knowledge.analyzers import (
    DomainAnalyzer,
    get_all_analyzers,
    get_analyzer_by_domain,
)
from creative_science.knowledge.composite import build_composite_score, calculate_weighted_average
from creative_science.knowledge.config import KnowledgeConfig
from creative_science.knowledge.errors import InsufficientAnalysisError
from creative_science.knowledge.formatter import ContextFormatter
from creative_science.knowledge.grading import get_grade, rank_recommendations
from creative_science.knowledge.schemas import (
    ALL_KNOWLEDGE_DOMAINS,
    AnalysisInput,
    Citation,
    CompositeScore,
    ContentInput,
    ContextInput,
    CreativeInput,
    DomainRecommendation,
    DomainScore,
    MetricsInput,
    ScoringFactor,
)
from creative_science.knowledge.service import KnowledgeBaseService
from creative_science.knowledge.weights import (
    DEFAULT_WEIGHTS,
    OBJECTIVE_WEIGHTS,
    renormalize_weights,
    select_weights,
)

__all__ = [
    "ALL_KNOWLEDGE_DOMAINS",
    "AnalysisInput",
    "Citation",
    "CompositeScore",
    "ContentInput",
    "ContextFormatter",
    "ContextInput",
    "CreativeInput",
    "DEFAULT_WEIGHTS",
    "DomainAnalyzer",
    "DomainRecommendation",
    "DomainScore",
    "InsufficientAnalysisError",
    "KnowledgeBaseService",
    "KnowledgeConfig",
    "MetricsInput",
    "OBJECTIVE_WEIGHTS",
    "ScoringFactor",
    "build_composite_score",
    "calculate_weighted_average",
    "get_all_analyzers",
    "get_analyzer_by_domain",
    "get_grade",
    "rank_recommendations",
    "renormalize_weights",
    "select_weights",
]
