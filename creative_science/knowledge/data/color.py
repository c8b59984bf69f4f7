"""Knowledge tables for the color psychology domain."""

from dataclasses import dataclass, field

from creative_science.knowledge.data.knowledge import DomainKnowledge, FactorAdvice
from creative_science.knowledge.schemas import Citation

DOMAIN = "color_psychology"


@dataclass(frozen=True)
class IndustryColors:
    """Colors that work (primary, accent) or backfire (avoid) in an industry."""

    primary: tuple[str, ...]
    accent: tuple[str, ...] = ()
    avoid: tuple[str, ...] = ()


@dataclass(frozen=True)
class ColorAssociation:
    """Emotion a color evokes and the industries where that helps or hurts."""

    emotion: str
    positive_industries: tuple[str, ...] = ()
    negative_industries: tuple[str, ...] = ()


@dataclass(frozen=True)
class Season:
    name: str
    months: tuple[int, ...]
    colors: tuple[str, ...]


@dataclass(frozen=True)
class ColorPalette:
    """
    Color tables consulted by the color analyzer.

    Attributes:
        industry_colors: Industry -> recommended / avoided colors.
        associations: Color -> emotional and cultural association.
        objective_colors: Campaign objective -> colors that match its emotion.
        default_objective_colors: Used when the objective is absent or unknown.
        seasons: Seasonal palettes; months not covered fall back to the last one.
        light_colors / dark_colors: Used to detect light/dark contrast pairs.
    """

    industry_colors: dict[str, IndustryColors] = field(default_factory=dict)
    associations: dict[str, ColorAssociation] = field(default_factory=dict)
    objective_colors: dict[str, tuple[str, ...]] = field(default_factory=dict)
    default_objective_colors: tuple[str, ...] = ("red", "blue")
    seasons: tuple[Season, ...] = ()
    light_colors: tuple[str, ...] = ("white", "yellow")
    dark_colors: tuple[str, ...] = ("black", "blue", "red")

    def season_for(self, month: int) -> Season:
        for season in self.seasons:
            if month in season.months:
                return season
        return self.seasons[-1]


INDUSTRY_COLORS: dict[str, IndustryColors] = {
    "ecommerce": IndustryColors(("red", "orange", "blue"), ("yellow", "green"), ("gray", "brown")),
    "food_beverage": IndustryColors(("red", "orange", "yellow"), ("green", "brown"), ("blue", "purple")),
    "beauty": IndustryColors(("pink", "purple", "gold"), ("white", "rose"), ("gray", "brown")),
    "fashion": IndustryColors(("black", "white", "gold"), ("red", "navy")),
    "education": IndustryColors(("blue", "green", "white"), ("orange", "yellow"), ("red", "black")),
    "service": IndustryColors(("blue", "green", "white"), ("orange",), ("red",)),
    "saas": IndustryColors(("blue", "purple", "green"), ("white", "orange"), ("red", "pink")),
    "health": IndustryColors(("green", "blue", "white"), ("orange", "yellow"), ("red", "black")),
}

ASSOCIATIONS: dict[str, ColorAssociation] = {
    "red": ColorAssociation("passion, urgency", ("ecommerce", "food_beverage", "fashion"), ("health", "service")),
    "blue": ColorAssociation("trust, stability", ("saas", "service", "education", "health"), ("food_beverage",)),
    "green": ColorAssociation("nature, health, growth", ("health", "food_beverage", "education")),
    "yellow": ColorAssociation("energy, optimism", ("food_beverage", "education"), ("fashion",)),
    "orange": ColorAssociation("warmth, enthusiasm", ("ecommerce", "food_beverage")),
    "purple": ColorAssociation("luxury, creativity", ("beauty", "saas"), ("food_beverage",)),
    "pink": ColorAssociation("care, romance", ("beauty", "fashion"), ("saas",)),
    "black": ColorAssociation("sophistication, power", ("fashion",), ("health", "education")),
    "white": ColorAssociation("clarity, cleanliness", ("health", "beauty", "saas")),
    "gold": ColorAssociation("premium, prosperity", ("beauty", "fashion")),
    "brown": ColorAssociation("warmth, reliability", ("food_beverage",), ("beauty",)),
    "gray": ColorAssociation("neutrality, restraint", ("saas",), ("ecommerce",)),
}

OBJECTIVE_COLORS: dict[str, tuple[str, ...]] = {
    "awareness": ("blue", "green", "purple"),
    "consideration": ("orange", "yellow", "blue"),
    "conversion": ("red", "orange", "gold"),
}

SEASONS: tuple[Season, ...] = (
    Season("spring", (3, 4, 5), ("pink", "green", "yellow")),
    Season("summer", (6, 7, 8), ("blue", "green", "white")),
    Season("autumn", (9, 10, 11), ("orange", "brown", "gold")),
    Season("winter holidays", (12, 1, 2), ("red", "white", "gold")),
)

DEFAULT_PALETTE = ColorPalette(
    industry_colors=INDUSTRY_COLORS,
    associations=ASSOCIATIONS,
    objective_colors=OBJECTIVE_COLORS,
    seasons=SEASONS,
)

CITATIONS: tuple[Citation, ...] = (
    Citation(
        id="labrecque2012",
        domain=DOMAIN,
        source="Labrecque, L. I., & Milne, G. R. (2012)",
        finding="Color drives brand personality and purchase intent.",
        applicability="Industry-specific color mapping.",
        confidence_level="high",
        category="Brand Personality",
        year=2012,
    ),
    Citation(
        id="shaouf2016",
        domain=DOMAIN,
        source="Shaouf, A., Lu, K., & Li, X. (2016)",
        finding="High contrast CTAs improve CTR by 21%.",
        applicability="Direct CTA design.",
        confidence_level="high",
        category="CTA Contrast",
        year=2016,
    ),
    Citation(
        id="elliot2014",
        domain=DOMAIN,
        source="Elliot, A. J., & Maier, M. A. (2014)",
        finding="Colors elicit specific emotions that drive action.",
        applicability="Emotion-objective alignment.",
        confidence_level="high",
        category="Emotional Response",
        year=2014,
    ),
)

FACTOR_CITATIONS = {
    "industry_alignment": "labrecque2012",
    "emotional_match": "elliot2014",
    "contrast_quality": "shaouf2016",
}

ADVICE = {
    "industry_alignment": FactorAdvice(
        recommendation="Build the palette around the industry's primary colors and drop colors it avoids.",
        scientific_basis="Labrecque & Milne (2012): color shapes perceived brand personality.",
        expected_impact="Stronger brand fit and up to 80% better brand recognition.",
    ),
    "cultural_fit": FactorAdvice(
        recommendation="Replace colors with negative associations in this industry.",
        scientific_basis="Color meaning is cultural; mismatched associations erode trust.",
        expected_impact="Fewer negative first impressions.",
    ),
    "emotional_match": FactorAdvice(
        recommendation="Use colors whose emotion matches the objective: blue/green for awareness, red/orange for conversion.",
        scientific_basis="Elliot & Maier (2014): colors trigger specific emotional responses.",
        expected_impact="Better alignment between the creative's mood and the desired action.",
    ),
    "contrast_quality": FactorAdvice(
        recommendation="Pair a light and a dark color so the call-to-action stands out.",
        scientific_basis="Shaouf, Lu & Li (2016): high-contrast CTAs lift click-through.",
        expected_impact="Around 21% higher CTA click-through.",
    ),
    "seasonal_relevance": FactorAdvice(
        recommendation="Work one of the current season's colors into the creative.",
        scientific_basis="Seasonal palettes feel timely and relevant.",
        expected_impact="Higher relevance during seasonal peaks.",
    ),
}

MISSING_INPUT = FactorAdvice(
    recommendation="Provide the creative's dominant colors.",
    scientific_basis="Color psychology can only be assessed on the colors actually used.",
    expected_impact="Enables a full color psychology evaluation.",
)

KNOWLEDGE = DomainKnowledge(
    domain=DOMAIN,
    citations=CITATIONS,
    factor_citations=FACTOR_CITATIONS,
    advice=ADVICE,
    missing_input=MISSING_INPUT,
)
