"""Knowledge tables for the crowd psychology domain."""

import re

from creative_science.knowledge.data.knowledge import DomainKnowledge, FactorAdvice
from creative_science.knowledge.schemas import Citation

DOMAIN = "crowd_psychology"

# "10,000 customers", "2M users", "500+ reviews"
CROWD_COUNT_PATTERN = re.compile(
    r"\d{1,3}(?:,\d{3})*(?:\.\d+)?\s?[kKmM]?\+?\s+(?:happy\s+)?"
    r"(?:customers|users|people|buyers|members|reviews|orders|sold|downloads)\b",
    re.IGNORECASE,
)

# "24 hours", "ends tonight", "today only"
TIME_LIMIT_PATTERN = re.compile(
    r"\b\d+\s?(?:hours?|hrs?|days?|minutes?)\b|\btoday only\b|\bends tonight\b|\buntil tomorrow\b",
    re.IGNORECASE,
)

BANDWAGON_PATTERNS: tuple[re.Pattern[str], ...] = (
    CROWD_COUNT_PATTERN,
    re.compile(r"\b\d+(?:\.\d+)?\s?(?:million|thousand|[kKmM])\s+\w+", re.IGNORECASE),
    re.compile(r"#1\b|\bnumber one\b|\bbest[- ]?sell(?:er|ing)\b|\bmost popular\b", re.IGNORECASE),
    re.compile(r"\b\d+%\s+(?:of\s+)?(?:customers|users|people|buyers)\b", re.IGNORECASE),
)

CASCADE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:experts?|doctors?|celebrities|pros|professionals)\s+(?:also\s+)?(?:choose|chose|use|trust|recommend)", re.IGNORECASE),
    re.compile(r"\b(?:trusted|chosen|used|loved)\s+by\b", re.IGNORECASE),
    re.compile(r"\bjoin\s+(?:the\s+)?(?:\d[\d,]*|thousands|millions|others)\b", re.IGNORECASE),
    re.compile(r"\b(?:everyone|everybody)\s+(?:is|'s)\s+\w+ing\b", re.IGNORECASE),
)

CITATIONS: tuple[Citation, ...] = (
    Citation(
        id="cialdini-2009",
        domain=DOMAIN,
        source="Cialdini, R. B. (2009). Influence: Science and Practice (5th ed.)",
        finding="Social proof strongly shapes decisions under uncertainty.",
        applicability="Reviews, ratings and customer counts are highly trusted signals.",
        confidence_level="high",
        category="social_proof",
        year=2009,
    ),
    Citation(
        id="przybylski-2013",
        domain=DOMAIN,
        source="Przybylski, A. K., et al. (2013). Motivational, emotional, and behavioral correlates of FOMO",
        finding="A majority of consumers report purchase decisions driven by fear of missing out.",
        applicability="Time-limited offers get markedly higher response on mobile.",
        confidence_level="high",
        category="fomo",
        year=2013,
    ),
    Citation(
        id="leibenstein-1950",
        domain=DOMAIN,
        source="Leibenstein, H. (1950). Bandwagon, Snob, and Veblen Effects in the Theory of Consumers' Demand",
        finding="Consumers value products more when many others have chosen them.",
        applicability='Showing "N people bought this" raises conversion.',
        confidence_level="high",
        category="bandwagon",
        year=1950,
    ),
    Citation(
        id="banerjee-1992",
        domain=DOMAIN,
        source="Banerjee, A. V. (1992). A Simple Model of Herd Behavior",
        finding="Individuals follow the group over their own information, especially under asymmetry.",
        applicability="Herd signals matter most for new products and unfamiliar brands.",
        confidence_level="high",
        category="herd_behavior",
        year=1992,
    ),
    Citation(
        id="bikhchandani-1992",
        domain=DOMAIN,
        source="Bikhchandani, S., Hirshleifer, D., & Welch, I. (1992). "
        "A Theory of Fads, Fashion, Custom, and Cultural Change",
        finding="Earlier adopters' choices cascade into later decisions.",
        applicability="Evidence ordered expert, then celebrity, then peers is most effective.",
        confidence_level="medium",
        category="information_cascade",
        year=1992,
    ),
)

FACTOR_CITATIONS = {
    "social_proof": "cialdini-2009",
    "fomo": "przybylski-2013",
    "bandwagon": "leibenstein-1950",
    "herd_behavior": "banerjee-1992",
    "information_cascade": "bikhchandani-1992",
}

ADVICE = {
    "social_proof": FactorAdvice(
        recommendation='Add concrete social proof: "Chosen by 10,000 customers", "4.8/5 from 2,300 reviews".',
        scientific_basis="Cialdini (2009): people rely on others' choices when uncertain.",
        expected_impact="25-30% higher conversion and 40% more trust.",
    ),
    "fomo": FactorAdvice(
        recommendation='State a time or quantity limit: "24 hours only", "First 100 orders".',
        scientific_basis="Przybylski et al. (2013): fear of missing out drives immediate action.",
        expected_impact="Around 35% higher click-through on time-limited offers.",
    ),
    "bandwagon": FactorAdvice(
        recommendation='Highlight popularity with numbers: "#1 in its category", "100k people switched".',
        scientific_basis="Leibenstein (1950): demand rises with perceived adoption by others.",
        expected_impact="Around 28% higher conversion.",
    ),
    "herd_behavior": FactorAdvice(
        recommendation='Use trend language: "trending", "everyone\'s talking about", "viral".',
        scientific_basis="Banerjee (1992): people follow the crowd under uncertainty.",
        expected_impact="Better performance for new or unfamiliar products.",
    ),
    "information_cascade": FactorAdvice(
        recommendation='Chain endorsements: "Recommended by experts, loved by customers".',
        scientific_basis="Bikhchandani et al. (1992): sequential adoption signals cascade.",
        expected_impact="Stronger credibility for first-time buyers.",
    ),
}

KEYWORDS = {
    "social_proof": (
        "popular", "best", "bestseller", "recommended", "reviews", "review",
        "testimonials", "satisfied", "rated", "top rated", "favorite", "trending",
    ),
    "fomo": ("deadline", "limited", "today only", "first come", "almost gone", "last", "don't miss", "selling fast"),
    "herd": ("trending", "viral", "hot deal", "everyone", "craze", "must-have", "real-time", "selling fast"),
}

MISSING_INPUT = FactorAdvice(
    recommendation="Add ad copy so social proof and urgency signals can be evaluated.",
    scientific_basis="Crowd signals are conveyed through the wording of the ad.",
    expected_impact="Enables a full crowd psychology evaluation.",
)

KNOWLEDGE = DomainKnowledge(
    domain=DOMAIN,
    citations=CITATIONS,
    factor_citations=FACTOR_CITATIONS,
    advice=ADVICE,
    keywords=KEYWORDS,
    patterns={
        "crowd_count": (CROWD_COUNT_PATTERN,),
        "time_limit": (TIME_LIMIT_PATTERN,),
        "bandwagon": BANDWAGON_PATTERNS,
        "cascade": CASCADE_PATTERNS,
    },
    missing_input=MISSING_INPUT,
)
