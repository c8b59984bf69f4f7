"""Domain analyzers and their registry.

The registry order is the registration order used everywhere results are
assembled: failed-domain reporting, domain score ordering and the
recommendation tie-break.
"""

from creative_science.knowledge.analyzers.base import DomainAnalyzer
from creative_science.knowledge.analyzers.color import ColorPsychologyAnalyzer
from creative_science.knowledge.analyzers.copywriting import CopywritingPsychologyAnalyzer
from creative_science.knowledge.analyzers.crowd_psychology import CrowdPsychologyAnalyzer
from creative_science.knowledge.analyzers.marketing_psychology import MarketingPsychologyAnalyzer
from creative_science.knowledge.analyzers.neuromarketing import NeuromarketingAnalyzer
from creative_science.knowledge.analyzers.platform import PlatformBestPracticesAnalyzer
from creative_science.knowledge.config import KnowledgeConfig

ANALYZER_CLASSES: tuple[type[DomainAnalyzer], ...] = (
    NeuromarketingAnalyzer,
    MarketingPsychologyAnalyzer,
    CrowdPsychologyAnalyzer,
    PlatformBestPracticesAnalyzer,
    ColorPsychologyAnalyzer,
    CopywritingPsychologyAnalyzer,
)


def get_all_analyzers(config: KnowledgeConfig | None = None) -> list[DomainAnalyzer]:
    """Fresh instances of every built-in analyzer, in registration order."""
    config = config or KnowledgeConfig()
    return [cls(config=config) for cls in ANALYZER_CLASSES]


def get_analyzer_by_domain(
    domain: str, config: KnowledgeConfig | None = None
) -> DomainAnalyzer | None:
    """Built-in analyzer of a domain, or None for an unknown domain."""
    for analyzer in get_all_analyzers(config):
        if analyzer.domain == domain:
            return analyzer
    return None


__all__ = [
    "ANALYZER_CLASSES",
    "ColorPsychologyAnalyzer",
    "CopywritingPsychologyAnalyzer",
    "CrowdPsychologyAnalyzer",
    "DomainAnalyzer",
    "MarketingPsychologyAnalyzer",
    "NeuromarketingAnalyzer",
    "PlatformBestPracticesAnalyzer",
    "get_all_analyzers",
    "get_analyzer_by_domain",
]
