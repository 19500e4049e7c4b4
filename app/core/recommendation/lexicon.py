"""
Static lexicon tables used to read a free-text description.

All tables are module-level immutable values, built once at import and
shared by every request.
"""

import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

BOLLYWOOD = "bollywood"

# Order matters only for alternation at the same position; detection takes
# the leftmost region mentioned in the text.
REGIONS: Tuple[str, ...] = (
    BOLLYWOOD,
    "korean",
    "french",
    "japanese",
    "chinese",
    "spanish",
    "italian",
    "german",
    "british",
)

BOLLYWOOD_PERSONALITIES: Tuple[str, ...] = (
    "shah rukh khan",
    "amitabh bachchan",
    "aamir khan",
    "salman khan",
    "priyanka chopra",
    "deepika padukone",
    "karan johar",
    "yash raj",
    "raj kapoor",
)

GENRE_VOCABULARY: frozenset = frozenset({
    "comedy",
    "drama",
    "action",
    "romance",
    "thriller",
    "horror",
    "sci-fi",
    "documentary",
    "animation",
    "family",
    "musical",
    "western",
    "war",
    "crime",
    "mystery",
    "fantasy",
    "adventure",
})

# Mood phrase -> content-style search tokens.
MOOD_SEARCH_TOKENS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "feel-good": ("heartwarming", "comedy"),
    "feel good": ("heartwarming", "comedy"),
    "uplifting": ("inspirational", "heartwarming"),
    "happy": ("comedy", "heartwarming"),
    "funny": ("comedy",),
    "hilarious": ("comedy", "parody"),
    "sad": ("tearjerker", "drama"),
    "emotional": ("drama", "tearjerker"),
    "romantic": ("romance", "love"),
    "scary": ("horror", "haunted"),
    "creepy": ("horror", "supernatural"),
    "dark": ("noir", "thriller"),
    "gritty": ("crime", "noir"),
    "tense": ("suspense", "thriller"),
    "thrilling": ("thriller", "suspense"),
    "exciting": ("action", "adventure"),
    "epic": ("epic", "adventure"),
    "relaxing": ("family", "slice of life"),
    "cozy": ("family", "slice of life"),
    "nostalgic": ("classic", "coming of age"),
    "inspiring": ("inspirational", "biography"),
    "mind-bending": ("psychological", "twist"),
    "thought-provoking": ("philosophical", "drama"),
    "whimsical": ("fantasy", "fairy tale"),
})

_REGION_PATTERN = re.compile("(" + "|".join(REGIONS) + ")")
_MOOD_PATTERNS = tuple(
    (mood, re.compile(r"(?<![\w-])" + re.escape(mood) + r"(?![\w-])"))
    for mood in MOOD_SEARCH_TOKENS
)


def detect_region(text: str) -> Optional[str]:
    """Leftmost recognized region in lower-cased text, or None."""
    match = _REGION_PATTERN.search(text)
    return match.group(1) if match else None


def detect_moods(text: str) -> Tuple[str, ...]:
    """Mood phrases present in lower-cased text, in lexicon order."""
    return tuple(mood for mood, pattern in _MOOD_PATTERNS if pattern.search(text))


def mood_search_tokens(moods: Tuple[str, ...]) -> List[str]:
    """Search tokens for the given moods, de-duplicated, order kept."""
    tokens: List[str] = []
    for mood in moods:
        for token in MOOD_SEARCH_TOKENS.get(mood, ()):
            if token not in tokens:
                tokens.append(token)
    return tokens
