"""Knowledge tables for the marketing psychology domain."""

import re

from creative_science.knowledge.data.knowledge import DomainKnowledge, FactorAdvice
from creative_science.knowledge.schemas import Citation

DOMAIN = "marketing_psychology"

# Score by number of distinct persuasion principles used. Six or more
# starts to read as manipulative, hence the drop.
DIVERSITY_SCORES: dict[int, int] = {0: 0, 1: 40, 2: 70, 3: 90, 4: 100, 5: 100}
DIVERSITY_OVERLOAD_SCORE = 85

CITATIONS: tuple[Citation, ...] = (
    Citation(
        id="psych-001",
        domain=DOMAIN,
        source="Cialdini (2021)",
        finding="Seven principles of influence: reciprocity, commitment, social proof, "
        "authority, liking, scarcity and unity.",
        applicability="Combining three to five principles is most persuasive.",
        confidence_level="high",
        category="persuasion",
        year=2021,
    ),
    Citation(
        id="psych-002",
        domain=DOMAIN,
        source="Kahneman & Tversky (1979)",
        finding="Losses loom roughly twice as large as equivalent gains.",
        applicability="Framing the offer as something to lose increases response.",
        confidence_level="high",
        category="loss_aversion",
        year=1979,
    ),
    Citation(
        id="psych-003",
        domain=DOMAIN,
        source="Tversky & Kahneman (1974)",
        finding="Initial reference numbers anchor subsequent value judgements.",
        applicability="Showing the original price next to the offer price raises perceived value.",
        confidence_level="high",
        category="anchoring",
        year=1974,
    ),
    Citation(
        id="psych-004",
        domain=DOMAIN,
        source="Tversky & Kahneman (1981)",
        finding="Equivalent options are judged differently depending on their framing.",
        applicability="Gain framing works best for promotional products.",
        confidence_level="high",
        category="framing",
        year=1981,
    ),
    Citation(
        id="psych-005",
        domain=DOMAIN,
        source="Thaler (1980)",
        finding="People value things more once they feel they own them.",
        applicability="Possessive language and trials create a sense of ownership.",
        confidence_level="high",
        category="endowment",
        year=1980,
    ),
)

FACTOR_CITATIONS = {
    "persuasion_diversity": "psych-001",
    "loss_aversion": "psych-002",
    "anchoring": "psych-003",
    "framing": "psych-004",
    "endowment": "psych-005",
}

ADVICE = {
    "persuasion_diversity": FactorAdvice(
        recommendation="Combine three to five persuasion principles, e.g. social proof, scarcity and authority.",
        scientific_basis="Cialdini: several complementary principles reinforce each other.",
        expected_impact="15-30% higher conversion intent.",
    ),
    "loss_aversion": FactorAdvice(
        recommendation='Frame what the reader stands to lose ("Don\'t miss out", "Offer ends Sunday").',
        scientific_basis="Prospect theory: losses weigh about twice as much as gains.",
        expected_impact="Up to 20% higher click-through on offers.",
    ),
    "anchoring": FactorAdvice(
        recommendation='Show a reference price or figure before the offer ("Was $99, now $49").',
        scientific_basis="Anchoring: the first number seen sets the value reference.",
        expected_impact="Higher perceived value and 10-15% better conversion.",
    ),
    "framing": FactorAdvice(
        recommendation="Lead with gains the customer gets rather than problems they face.",
        scientific_basis="Framing effect: gain frames increase adoption of promotional offers.",
        expected_impact="More positive brand sentiment and higher click-through.",
    ),
    "endowment": FactorAdvice(
        recommendation='Use possessive language and trials ("Your free trial", "Keep it for 30 days").',
        scientific_basis="Endowment effect: perceived ownership raises valuation.",
        expected_impact="Higher trial sign-up and lower abandonment.",
    ),
}

KEYWORDS = {
    # Cialdini's seven principles
    "reciprocity": ("free", "gift", "bonus", "complimentary", "on us", "sample", "free shipping"),
    "commitment": ("start", "try", "sign up", "first step", "trial", "commit", "get started"),
    "social_proof": ("customers", "reviews", "rated", "bestseller", "popular", "trusted by", "thousands", "millions"),
    "authority": ("expert", "experts", "doctor", "certified", "award", "award-winning", "clinically", "recommended by", "official"),
    "liking": ("you'll love", "friendly", "people like you", "personal", "personalized", "made for you"),
    "scarcity": ("limited", "only", "last chance", "while supplies last", "few left", "exclusive", "sold out"),
    "unity": ("together", "family", "our community", "members", "one of us", "join us"),
    "loss": ("miss", "miss out", "lose", "losing", "before it's gone", "don't miss", "waste", "risk"),
    "deadline": ("ends", "deadline", "expires", "last chance", "today only", "until", "tonight", "hours left"),
    "positive_frame": ("gain", "save", "get", "win", "enjoy", "improve", "boost", "more", "better"),
    "negative_frame": ("lose", "miss", "avoid", "stop", "never", "without", "worry", "problem"),
    "possessive": ("your", "yours", "my", "mine"),
    "ownership": ("try", "trial", "keep", "own", "yours to keep", "risk-free", "money-back", "test drive"),
}

PRICE_COMPARISON_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\bwas\s+[$€£]?\d", re.IGNORECASE),
    re.compile(r"\b(?:regularly|originally|compare at|retail price)\b", re.IGNORECASE),
    re.compile(r"\bsave\s+(?:up to\s+)?[$€£]?\d", re.IGNORECASE),
    re.compile(r"\d+\s?%\s?off\b", re.IGNORECASE),
)

NUMBER_ANCHOR_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[$€£]\s?\d"),
    re.compile(r"\d+(?:\.\d+)?\s?%"),
    re.compile(r"\b\d+x\b", re.IGNORECASE),
)

PRINCIPLES: tuple[str, ...] = (
    "reciprocity",
    "commitment",
    "social_proof",
    "authority",
    "liking",
    "scarcity",
    "unity",
)

MISSING_INPUT = FactorAdvice(
    recommendation="Add ad copy so persuasion techniques can be evaluated.",
    scientific_basis="Persuasion principles are detected in the wording of the ad.",
    expected_impact="Enables a full marketing psychology evaluation.",
)

KNOWLEDGE = DomainKnowledge(
    domain=DOMAIN,
    citations=CITATIONS,
    factor_citations=FACTOR_CITATIONS,
    advice=ADVICE,
    keywords=KEYWORDS,
    patterns={
        "price_comparison": PRICE_COMPARISON_PATTERNS,
        "number_anchor": NUMBER_ANCHOR_PATTERNS,
    },
    missing_input=MISSING_INPUT,
)
