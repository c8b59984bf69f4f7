"""Industry performance benchmarks for feed ads.

Averages of click-through rate (percent), conversion rate (percent) and
return on ad spend (ratio) per industry. Unknown industries fall back to
the ecommerce row.
"""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class IndustryBenchmark:
    """Average feed ad performance of one industry."""

    industry: str
    avg_ctr: float
    avg_cvr: float
    avg_roas: float

    def to_dict(self) -> dict[str, float | str]:
        return {
            "industry": self.industry,
            "avg_ctr": self.avg_ctr,
            "avg_cvr": self.avg_cvr,
            "avg_roas": self.avg_roas,
        }


DEFAULT_INDUSTRY = "ecommerce"

INDUSTRY_BENCHMARKS: dict[str, IndustryBenchmark] = {
    b.industry: b
    for b in (
        IndustryBenchmark("ecommerce", avg_ctr=1.5, avg_cvr=3.0, avg_roas=4.0),
        IndustryBenchmark("food_beverage", avg_ctr=1.8, avg_cvr=2.5, avg_roas=3.5),
        IndustryBenchmark("beauty", avg_ctr=1.6, avg_cvr=3.2, avg_roas=4.2),
        IndustryBenchmark("fashion", avg_ctr=1.4, avg_cvr=2.8, avg_roas=3.8),
        IndustryBenchmark("education", avg_ctr=1.2, avg_cvr=2.0, avg_roas=3.0),
        IndustryBenchmark("service", avg_ctr=1.0, avg_cvr=2.2, avg_roas=3.2),
        IndustryBenchmark("saas", avg_ctr=0.9, avg_cvr=1.8, avg_roas=2.8),
        IndustryBenchmark("health", avg_ctr=1.1, avg_cvr=2.4, avg_roas=3.5),
    )
}


def get_benchmark(
    industry: str | None,
    table: Mapping[str, IndustryBenchmark] = INDUSTRY_BENCHMARKS,
) -> IndustryBenchmark:
    """Benchmark of an industry, falling back to ecommerce."""
    key = (industry or DEFAULT_INDUSTRY).strip().lower()
    return table.get(key) or table[DEFAULT_INDUSTRY]
