"""Static knowledge tables consulted by the domain analyzers."""

from creative_science.knowledge.data.benchmarks import (
    INDUSTRY_BENCHMARKS,
    IndustryBenchmark,
    get_benchmark,
)
from creative_science.knowledge.data.display import DOMAIN_DISPLAY_NAMES, display_name
from creative_science.knowledge.data.knowledge import DomainKnowledge, FactorAdvice

__all__ = [
    "DOMAIN_DISPLAY_NAMES",
    "DomainKnowledge",
    "FactorAdvice",
    "INDUSTRY_BENCHMARKS",
    "IndustryBenchmark",
    "display_name",
    "get_benchmark",
]
