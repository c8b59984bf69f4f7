"""Knowledge tables for the neuromarketing domain."""

from creative_science.knowledge.data.knowledge import DomainKnowledge, FactorAdvice
from creative_science.knowledge.schemas import Citation

DOMAIN = "neuromarketing"

# Word budget of a static ad (headline + primary text)
OPTIMAL_WORDS = 12
MAX_WORDS = 20

CITATIONS: tuple[Citation, ...] = (
    Citation(
        id="neuro-001",
        domain=DOMAIN,
        source="Miller (1956), Sweller (1988)",
        finding="Working memory holds roughly 7 +/- 2 items; extra load degrades processing.",
        applicability="Short ad copy is read to the end far more often than long copy.",
        confidence_level="high",
        category="cognitive_load",
        year=1988,
    ),
    Citation(
        id="neuro-002",
        domain=DOMAIN,
        source="Damasio (1994), LeDoux (1996)",
        finding="Emotion acts as a somatic marker that steers fast decisions.",
        applicability="Emotionally charged words lift recall and click intent.",
        confidence_level="high",
        category="emotional_processing",
        year=1996,
    ),
    Citation(
        id="neuro-003",
        domain=DOMAIN,
        source="Davenport & Beck (2001), Meta Internal Data (2024)",
        finding="Users judge a feed ad's value within about 1.7 seconds.",
        applicability="The first words of the headline decide whether the ad is read.",
        confidence_level="high",
        category="attention",
        year=2024,
    ),
    Citation(
        id="neuro-004",
        domain=DOMAIN,
        source="Schultz (1997), Berridge & Robinson (1998)",
        finding="Anticipated rewards release more dopamine than received rewards.",
        applicability="Anticipation and novelty cues increase engagement.",
        confidence_level="high",
        category="reward",
        year=1998,
    ),
    Citation(
        id="neuro-005",
        domain=DOMAIN,
        source="Kahneman (2011)",
        finding="System 1 is fast and emotional, System 2 slow and deliberate.",
        applicability="Awareness copy should favour System 1; conversion copy needs System 2 evidence.",
        confidence_level="high",
        category="dual_process",
        year=2011,
    ),
)

FACTOR_CITATIONS = {
    "cognitive_load": "neuro-001",
    "emotional_processing": "neuro-002",
    "attention_hook": "neuro-003",
    "dopamine_response": "neuro-004",
    "dual_process_alignment": "neuro-005",
}

ADVICE = {
    "cognitive_load": FactorAdvice(
        recommendation="Trim the headline and primary text to 12-20 words around one core message.",
        scientific_basis="Working memory handles 5-9 chunks at once; overload causes readers to skip.",
        expected_impact="Around 30% more read-through and 40% better message recall.",
    ),
    "emotional_processing": FactorAdvice(
        recommendation='Add two or three emotional power words such as "amazing", "love" or "best".',
        scientific_basis="Somatic marker hypothesis: emotion is a primary driver of decisions.",
        expected_impact="15-25% higher click-through and stronger brand recall.",
    ),
    "attention_hook": FactorAdvice(
        recommendation='Open the headline with an attention word ("Now", "Free", "New") or use a number or question.',
        scientific_basis="Attention economy research: value is judged within 1.7 seconds of exposure.",
        expected_impact="Up to 50% longer view time and 40% lower early drop-off.",
    ),
    "dopamine_response": FactorAdvice(
        recommendation='Add anticipation ("coming soon", "finally") or novelty ("new", "first") language.',
        scientific_basis="Anticipation releases about 1.5x the dopamine of the reward itself.",
        expected_impact="Around 20% more engagement and 25% more return visits.",
    ),
    "dual_process_alignment": FactorAdvice(
        recommendation="Match the copy to the objective: emotion for awareness, proof points for conversion.",
        scientific_basis="Dual-process theory: objectives map to fast intuitive or slow deliberate thinking.",
        expected_impact="Better objective fit and more efficient delivery.",
    ),
}

KEYWORDS = {
    "strong_openers": (
        "now", "today", "today only", "last chance", "urgent", "free", "first",
        "exclusive", "special", "new", "introducing",
    ),
    "anticipation": ("coming soon", "finally", "launch", "launching", "unveil", "reveal", "new arrival", "first look"),
    "novelty": ("new", "innovative", "first", "unique", "breakthrough", "never before", "reinvented"),
    "reward": ("bonus", "gift", "reward", "points", "discount", "free", "perk"),
    "logical": ("proven", "study", "research", "tested", "data", "statistics", "results"),
}

MISSING_INPUT = FactorAdvice(
    recommendation="Add a headline and primary text so the copy can be evaluated.",
    scientific_basis="Cognitive and emotional processing can only be assessed on actual copy.",
    expected_impact="Enables a full neuromarketing evaluation.",
)

KNOWLEDGE = DomainKnowledge(
    domain=DOMAIN,
    citations=CITATIONS,
    factor_citations=FACTOR_CITATIONS,
    advice=ADVICE,
    keywords=KEYWORDS,
    missing_input=MISSING_INPUT,
)
