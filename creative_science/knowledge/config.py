"""Configuration for the knowledge-base scoring engine.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other service configs in the project.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KnowledgeConfig(BaseSettings):
    """
    Configuration for the multi-domain scoring engine.

    All settings can be overridden via environment variables with KNOWLEDGE_ prefix.
    Example: KNOWLEDGE_MIN_REQUIRED_DOMAINS=3

    Attributes:
        min_required_domains: Fewest analyzers that must succeed for a run to
            produce a composite score.
        top_recommendations: Cross-domain recommendations kept on the composite.
        max_recommendations_per_domain: Recommendations one analyzer may emit.
        recommendation_ceiling: Factors scoring below this trigger a recommendation.
        placeholder_score: Score returned by an analyzer whose input is absent.
        context_token_budget: Token budget for the formatted knowledge context.
        chars_per_token: Characters counted as one token when estimating size.
        metrics_enabled: Record Prometheus metrics for each run.
    """

    model_config = SettingsConfigDict(
        env_prefix="KNOWLEDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Orchestration
    min_required_domains: int = Field(
        default=4,
        ge=1,
        le=6,
        description="Minimum number of successful domain analyses per run.",
    )

    # Recommendation fan-out
    top_recommendations: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Number of ranked recommendations kept on the composite score.",
    )
    max_recommendations_per_domain: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Maximum recommendations a single analyzer returns.",
    )
    recommendation_ceiling: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Factors scoring below this value produce a recommendation.",
    )
    placeholder_score: int = Field(
        default=50,
        ge=0,
        le=100,
        description="Neutral score used when an analyzer's input is entirely absent.",
    )

    # Context formatting
    context_token_budget: int = Field(
        default=2000,
        ge=50,
        le=32000,
        description="Approximate token budget for the formatted knowledge context.",
    )
    chars_per_token: float = Field(
        default=4.0,
        gt=0.0,
        le=16.0,
        description="Characters per token used to estimate context size.",
    )

    # Observability
    metrics_enabled: bool = Field(
        default=True,
        description="Record Prometheus metrics for analyzer runs.",
    )

    @property
    def context_char_budget(self) -> int:
        """Get the context budget expressed in characters."""
        return int(self.context_token_budget * self.chars_per_token)
