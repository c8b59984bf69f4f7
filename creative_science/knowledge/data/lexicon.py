"""Shared vocabulary for text-based heuristics.

Power words are grouped by the persuasive lever they pull. Tone words feed
the emotional tone profile. Phrases are matched case-insensitively on word
boundaries, so multi-word entries are allowed.

Vocabulary is tuned for English-language direct-response ad copy.
"""

# ── Power words ──────────────────────────────────────────

POWER_WORDS: dict[str, tuple[str, ...]] = {
    "urgency": (
        "now", "today", "hurry", "limited", "last chance", "ends", "deadline",
        "instant", "instantly", "immediately", "fast", "quick", "before it's gone",
        "don't miss", "only", "final",
    ),
    "trust": (
        "guaranteed", "guarantee", "proven", "certified", "official", "trusted",
        "verified", "secure", "safe", "authentic", "expert", "research",
        "clinically", "risk-free", "warranty",
    ),
    "emotion": (
        "amazing", "love", "incredible", "stunning", "delight", "happy",
        "beautiful", "joy", "wow", "breathtaking", "remarkable", "heartwarming",
        "thrilling", "inspiring", "best",
    ),
    "social": (
        "popular", "bestseller", "best-selling", "trending", "reviews", "rated",
        "favorite", "recommended", "customers", "everyone", "join", "loved by",
        "community", "viral",
    ),
    "exclusivity": (
        "exclusive", "members only", "vip", "invitation", "private", "secret",
        "insider", "limited edition", "special", "premium", "rare",
    ),
    "value": (
        "free", "save", "discount", "sale", "bonus", "deal", "off", "bargain",
        "gift", "reward", "cashback", "value", "affordable", "coupon",
    ),
    "curiosity": (
        "discover", "secret", "revealed", "unlock", "new", "introducing",
        "surprising", "hidden", "little-known", "why", "how", "finally",
    ),
}

POWER_WORD_CATEGORIES: tuple[str, ...] = tuple(POWER_WORDS)

# ── Emotional tone ───────────────────────────────────────

TONE_WORDS: dict[str, tuple[str, ...]] = {
    "urgency": ("now", "today", "hurry", "limited", "last chance", "ends", "deadline", "only"),
    "trust": ("guaranteed", "proven", "certified", "trusted", "verified", "secure", "safe", "expert"),
    "excitement": ("amazing", "incredible", "wow", "thrilling", "new", "exciting", "love", "best"),
    "fear": ("miss", "lose", "risk", "worry", "mistake", "danger", "regret", "fail"),
    "curiosity": ("discover", "secret", "revealed", "unlock", "hidden", "why", "how", "surprising"),
}

# Matches per tone that saturate the tone score at 1.0
TONE_SATURATION = 3
