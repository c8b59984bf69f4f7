"""Text statistics shared by the copy-based analyzers.

All helpers are pure functions over plain strings. Phrase matching is
case-insensitive and anchored on word boundaries, so "free" does not match
"freedom" and multi-word phrases like "last chance" work as expected.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache

from creative_science.knowledge.data.lexicon import (
    POWER_WORDS,
    TONE_SATURATION,
    TONE_WORDS,
)

WORD_PATTERN = re.compile(r"[A-Za-z0-9]+(?:['’\-][A-Za-z0-9]+)*")
SENTENCE_SPLIT = re.compile(r"[.!?]+")
NUMBER_PATTERN = re.compile(r"\d")

# Average adult silent reading speed, words per minute
READING_SPEED_WPM = 238


@dataclass(frozen=True)
class PowerWordMatch:
    """One power word occurrence group found in a text."""

    word: str
    category: str
    count: int


@lru_cache(maxsize=2048)
def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    escaped = re.escape(phrase.lower())
    return re.compile(rf"(?<![\w]){escaped}(?![\w])", re.IGNORECASE)


def tokenize(text: str | None) -> list[str]:
    """Lowercased word tokens of a text."""
    if not text:
        return []
    return [w.lower() for w in WORD_PATTERN.findall(text)]


def count_words(text: str | None) -> int:
    return len(tokenize(text))


def count_phrase(text: str | None, phrase: str) -> int:
    """Number of non-overlapping occurrences of a phrase in text."""
    if not text or not phrase:
        return 0
    return len(_phrase_pattern(phrase).findall(text))


def contains_phrase(text: str | None, phrase: str) -> bool:
    return count_phrase(text, phrase) > 0


def find_phrases(text: str | None, phrases: Iterable[str]) -> list[str]:
    """Phrases present in text, in table order, without duplicates."""
    found: list[str] = []
    for phrase in phrases:
        if phrase not in found and contains_phrase(text, phrase):
            found.append(phrase)
    return found


def contains_any(text: str | None, phrases: Iterable[str]) -> bool:
    return any(contains_phrase(text, p) for p in phrases)


def count_matching_patterns(text: str | None, patterns: Iterable[re.Pattern[str]]) -> int:
    """Number of patterns that match somewhere in text."""
    if not text:
        return 0
    return sum(1 for p in patterns if p.search(text))


def has_number(text: str | None) -> bool:
    return bool(text) and NUMBER_PATTERN.search(text) is not None


def split_sentences(text: str | None) -> list[str]:
    """Non-empty sentences, split on terminal punctuation."""
    if not text:
        return []
    return [s.strip() for s in SENTENCE_SPLIT.split(text) if s.strip()]


def find_power_words(
    text: str | None,
    power_words: Mapping[str, Iterable[str]] = POWER_WORDS,
) -> list[PowerWordMatch]:
    """
    Find power words in text.

    A word listed under several categories is reported once per category.

    Args:
        text: Text to scan.
        power_words: Category -> words table.

    Returns:
        Matches in category order, then table order.
    """
    matches: list[PowerWordMatch] = []
    for category, words in power_words.items():
        for word in words:
            n = count_phrase(text, word)
            if n:
                matches.append(PowerWordMatch(word=word, category=category, count=n))
    return matches


def power_words_in(
    text: str | None,
    category: str,
    power_words: Mapping[str, Iterable[str]] = POWER_WORDS,
) -> list[PowerWordMatch]:
    return [m for m in find_power_words(text, power_words) if m.category == category]


def power_word_density(
    text: str | None,
    power_words: Mapping[str, Iterable[str]] = POWER_WORDS,
) -> float:
    """
    Share of words in text that are power words.

    Each distinct word occurrence is counted once even when the word is
    listed in several categories.

    Returns:
        Density in [0, 1]; 0.0 for empty text.
    """
    word_count = count_words(text)
    if word_count == 0:
        return 0.0
    occurrences: dict[str, int] = {}
    for match in find_power_words(text, power_words):
        occurrences[match.word] = max(occurrences.get(match.word, 0), match.count)
    return min(1.0, sum(occurrences.values()) / word_count)


def emotional_tone(
    text: str | None,
    tone_words: Mapping[str, Iterable[str]] = TONE_WORDS,
    saturation: int = TONE_SATURATION,
) -> dict[str, float]:
    """
    Tone profile of a text.

    Each tone scores matches / saturation, capped at 1.0.

    Returns:
        Tone name -> intensity in [0, 1].
    """
    profile: dict[str, float] = {}
    for tone, words in tone_words.items():
        hits = sum(count_phrase(text, w) for w in words)
        profile[tone] = round(min(1.0, hits / saturation), 2)
    return profile


def reading_time_seconds(text: str | None, wpm: int = READING_SPEED_WPM) -> float:
    """Estimated silent reading time in seconds."""
    return round(count_words(text) / wpm * 60, 1)
