"""Knowledge tables for the copywriting psychology domain."""

import re

from creative_science.knowledge.data.knowledge import DomainKnowledge, FactorAdvice
from creative_science.knowledge.schemas import Citation

DOMAIN = "copywriting_psychology"

# Headline length bands in characters
HEADLINE_OPTIMAL = (15, 40)
HEADLINE_ACCEPTABLE = (41, 60)

# Body length bands in characters
BODY_OPTIMAL = (50, 300)
BODY_ACCEPTABLE = (301, 500)

# Average words per sentence that reads comfortably
SENTENCE_WORDS = (8, 20)

# SUCCESs "Simple": headline and body budgets
SIMPLE_HEADLINE_CHARS = 40
SIMPLE_BODY_WORDS = 80

SPECIFICS_PATTERN = re.compile(
    r"\d+(?:\.\d+)?\s?%|[$€£]\s?\d|\b\d+\s?(?:customers|people|users|days|hours|minutes|steps|ways|tips)\b",
    re.IGNORECASE,
)
UNEXPECTED_PATTERN = re.compile(
    r"\d+(?:\.\d+)?\s?%|\b\d+x\b|[$€£]\s?\d|\b\d[\d,]*\s?(?:people|customers|users)\b",
    re.IGNORECASE,
)

CITATIONS: tuple[Citation, ...] = (
    Citation(
        id="bly2020",
        domain=DOMAIN,
        source="Bly, R. W. (2020)",
        finding="Power words and specific headlines lift response.",
        applicability="Headline and power word optimization.",
        confidence_level="high",
        category="Copywriting Fundamentals",
        year=2020,
    ),
    Citation(
        id="heath2007",
        domain=DOMAIN,
        source="Heath, C., & Heath, D. (2007)",
        finding="Sticky messages are Simple, Unexpected, Concrete, Credible, Emotional Stories.",
        applicability="Message structure evaluation.",
        confidence_level="high",
        category="Message Stickiness",
        year=2007,
    ),
    Citation(
        id="nielsen2006",
        domain=DOMAIN,
        source="Nielsen, J. (2006)",
        finding="Users scan rather than read; short sentences improve comprehension.",
        applicability="Readability of ad copy.",
        confidence_level="high",
        category="Readability",
        year=2006,
    ),
    Citation(
        id="cialdini2021",
        domain=DOMAIN,
        source="Cialdini, R. B. (2021)",
        finding="First-person CTA increases perceived value by 30%.",
        applicability="CTA optimization.",
        confidence_level="high",
        category="CTA Psychology",
        year=2021,
    ),
)

FACTOR_CITATIONS = {
    "power_word_density": "bly2020",
    "headline_quality": "bly2020",
    "success_framework": "heath2007",
    "cta_strength": "cialdini2021",
    "readability": "nielsen2006",
}

ADVICE = {
    "power_word_density": FactorAdvice(
        recommendation="Aim for 15-25% power words: add urgency, value or emotion words, or trim excess ones.",
        scientific_basis="Bly (2020): power words raise response until they start to read as spam.",
        expected_impact="10-20% higher click-through.",
    ),
    "headline_quality": FactorAdvice(
        recommendation="Write a 15-40 character headline with one power word and a concrete number.",
        scientific_basis="Bly (2020): specific, benefit-led headlines get read.",
        expected_impact="Up to 30% more headline engagement.",
    ),
    "success_framework": FactorAdvice(
        recommendation="Add missing SUCCESs elements: a surprising figure, a concrete detail or a short customer story.",
        scientific_basis="Heath & Heath (2007): sticky messages share six traits.",
        expected_impact="Better message recall and sharing.",
    ),
    "cta_strength": FactorAdvice(
        recommendation='Use a first-person, benefit-led CTA such as "Get my free trial now".',
        scientific_basis="Cialdini (2021): first-person CTAs raise perceived value.",
        expected_impact="Around 30% higher CTA click-through.",
    ),
    "readability": FactorAdvice(
        recommendation="Keep body copy to 50-300 characters in sentences of 8-20 words.",
        scientific_basis="Nielsen (2006): readers scan; short copy is understood faster.",
        expected_impact="Higher read-through on mobile.",
    ),
}

KEYWORDS = {
    "cta_first_person": ("my", "me", "i'm", "i want", "mine"),
    "cta_strong": ("get", "start", "claim", "unlock", "grab", "shop now", "join", "discover", "try", "save"),
    "cta_weak": ("click here", "submit", "learn more", "more info", "enter", "continue"),
    "cta_urgency": ("now", "today", "instantly", "immediately", "right away"),
    "cta_benefit": ("free", "discount", "save", "bonus", "gift", "off"),
    "concrete": ("for example", "in fact", "specifically", "exactly", "step-by-step", "actually", "directly"),
    "story": ("story", "experience", "journey", "before", "after", "customer", "transformed", "changed", "case"),
}

MISSING_INPUT = FactorAdvice(
    recommendation="Add a headline or primary text so the copy can be evaluated.",
    scientific_basis="Copywriting quality can only be assessed on actual copy.",
    expected_impact="Enables a full copywriting psychology evaluation.",
)

KNOWLEDGE = DomainKnowledge(
    domain=DOMAIN,
    citations=CITATIONS,
    factor_citations=FACTOR_CITATIONS,
    advice=ADVICE,
    keywords=KEYWORDS,
    patterns={
        "specifics": (SPECIFICS_PATTERN,),
        "unexpected": (UNEXPECTED_PATTERN,),
    },
    missing_input=MISSING_INPUT,
)
