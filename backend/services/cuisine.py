"""
Cuisine classification for provider place records.

A place is labelled by trying strategies in order and taking the first label
one of them produces:

1. Category tags (e.g. "italian_restaurant" -> "Italian")
2. Keywords in the place name, longest keyword first
3. "Restaurant"
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from domain.models import FALLBACK_CUISINE
from services.places_types import RawPlace

logger = logging.getLogger(__name__)

CuisineStrategy = Callable[[RawPlace], Optional[str]]

CUISINE_TAG_SUFFIX = "_restaurant"
GENERIC_RESTAURANT_TAG = "restaurant"

# Tags that say nothing about cuisine.
GENERIC_TAGS = frozenset({
    "restaurant",
    "food",
    "point_of_interest",
    "establishment",
    "bar",
    "cafe",
    "meal_takeaway",
    "meal_delivery",
    "store",
    "liquor_store",
    "convenience_store",
    "grocery_or_supermarket",
})

# Labels a tag can turn into that are not cuisines.
NON_CUISINE_LABELS = frozenset({
    "Meal Takeaway",
    "Meal Delivery",
    "Night Club",
    "Lodging",
})

# Declaration order breaks ties between keywords of equal length.
CUISINE_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("fried chicken", "American"),
    ("soul food", "Soul Food"),
    ("latin american", "Mexican"),
    ("middle eastern", "Mediterranean"),
    ("dim sum", "Chinese"),
    ("banh mi", "Vietnamese"),
    ("tex-mex", "Tex-Mex"),
    ("fast food", "American"),
    ("pizzeria", "Pizza"),
    ("taqueria", "Mexican"),
    ("steakhouse", "Steakhouse"),
    ("barbecue", "BBQ"),
    ("szechuan", "Chinese"),
    ("cantonese", "Chinese"),
    ("teriyaki", "Japanese"),
    ("hibachi", "Japanese"),
    ("shawarma", "Mediterranean"),
    ("gastropub", "Gastropub"),
    ("mediterranean", "Mediterranean"),
    ("vietnamese", "Vietnamese"),
    ("argentinian", "Argentinian"),
    ("singaporean", "Singaporean"),
    ("indonesian", "Indonesian"),
    ("vegetarian", "Vegetarian"),
    ("ethiopian", "Ethiopian"),
    ("caribbean", "Caribbean"),
    ("brazilian", "Brazilian"),
    ("malaysian", "Malaysian"),
    ("peruvian", "Peruvian"),
    ("lebanese", "Lebanese"),
    ("moroccan", "Moroccan"),
    ("jamaican", "Caribbean"),
    ("hawaiian", "Hawaiian"),
    ("japanese", "Japanese"),
    ("filipino", "Filipino"),
    ("southern", "Southern"),
    ("mexican", "Mexican"),
    ("italian", "Italian"),
    ("chinese", "Chinese"),
    ("turkish", "Turkish"),
    ("spanish", "Spanish"),
    ("african", "African"),
    ("indian", "Indian"),
    ("korean", "Korean"),
    ("french", "French"),
    ("creole", "Cajun"),
    ("greek", "Greek"),
    ("cuban", "Cuban"),
    ("cajun", "Cajun"),
    ("vegan", "Vegan"),
    ("hunan", "Chinese"),
    ("pizza", "Pizza"),
    ("sushi", "Sushi"),
    ("thai", "Thai"),
    ("taco", "Mexican"),
    ("burrito", "Mexican"),
    ("curry", "Indian"),
    ("pho", "Vietnamese"),
    ("bbq", "BBQ"),
    ("burger", "American"),
    ("steak", "Steakhouse"),
    ("seafood", "Seafood"),
    ("pasta", "Italian"),
    ("ramen", "Japanese"),
    ("gyro", "Greek"),
    ("falafel", "Mediterranean"),
    ("kebab", "Mediterranean"),
    ("bistro", "French"),
    ("wok", "Chinese"),
    ("noodle", "Asian"),
    ("dumpling", "Asian"),
    ("poke", "Hawaiian"),
    ("wings", "American"),
    ("deli", "Deli"),
    ("sandwich", "Sandwiches"),
    ("bakery", "Bakery"),
    ("cafe", "Cafe"),
    ("coffee", "Cafe"),
    ("breakfast", "Breakfast"),
    ("brunch", "Brunch"),
    ("diner", "American"),
    ("pub", "Pub"),
    ("tapas", "Spanish"),
    ("grill", "American"),
)


class CuisineLexicon:
    """Immutable keyword table, sorted longest keyword first once at construction."""

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        declared = tuple((keyword.lower(), label) for keyword, label in pairs)
        # sorted() is stable, so equal lengths keep declaration order
        self._entries: Tuple[Tuple[str, str], ...] = tuple(
            sorted(declared, key=lambda pair: len(pair[0]), reverse=True)
        )

    @property
    def entries(self) -> Tuple[Tuple[str, str], ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def match(self, text: str) -> Optional[str]:
        """Label of the longest keyword found as a substring of `text`."""
        lowered = (text or "").lower()
        if not lowered:
            return None
        for keyword, label in self._entries:
            if keyword in lowered:
                return label
        return None


DEFAULT_LEXICON = CuisineLexicon(CUISINE_KEYWORDS)


def tag_to_label(tag: str) -> str:
    """
    Turn a provider category tag into a display label.

    "italian_restaurant" -> "Italian", "middle_eastern_restaurant" -> "Middle Eastern",
    "night_club" -> "Night Club".
    """
    text = tag or ""
    if text.endswith(CUISINE_TAG_SUFFIX):
        text = text[: -len(CUISINE_TAG_SUFFIX)]
    words = text.replace("_", " ").split()
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def _usable_label(tag: str) -> Optional[str]:
    label = tag_to_label(tag)
    if not label or label in NON_CUISINE_LABELS:
        return None
    return label


def _tags_of(place: Optional[RawPlace]) -> tuple:
    if not isinstance(place, RawPlace):
        return ()
    return tuple(t for t in place.tags_in_order() if isinstance(t, str))


def _name_of(place: Optional[RawPlace]) -> str:
    name = getattr(place, "name", None)
    return name if isinstance(name, str) else ""


def tag_suffix_strategy(place: RawPlace) -> Optional[str]:
    """First tag shaped like "<cuisine>_restaurant"."""
    for tag in _tags_of(place):
        if tag != GENERIC_RESTAURANT_TAG and tag.endswith(CUISINE_TAG_SUFFIX):
            return _usable_label(tag)
    return None


def generic_filter_strategy(place: RawPlace) -> Optional[str]:
    """First tag not in the generic denylist."""
    for tag in _tags_of(place):
        if tag not in GENERIC_TAGS:
            return _usable_label(tag)
    return None


def name_keyword_strategy(lexicon: CuisineLexicon = DEFAULT_LEXICON) -> CuisineStrategy:
    def _match_name(place: RawPlace) -> Optional[str]:
        return lexicon.match(_name_of(place))

    _match_name.__name__ = "name_keyword_strategy"
    return _match_name


class CuisineClassifier:
    """Tries each strategy in order; the first label wins, else the fallback."""

    def __init__(self, strategies: Sequence[CuisineStrategy], fallback: str = FALLBACK_CUISINE):
        self.strategies: Tuple[CuisineStrategy, ...] = tuple(strategies)
        self.fallback = fallback

    def classify(self, place: Optional[RawPlace]) -> str:
        for strategy in self.strategies:
            try:
                label = strategy(place)
            except Exception:
                logger.exception(
                    "Cuisine strategy %s failed for place %r",
                    getattr(strategy, "__name__", strategy),
                    getattr(place, "place_id", None),
                )
                continue
            if label:
                return label
        return self.fallback

    __call__ = classify


STRATEGY_NAMES: List[str] = ["tag_suffix", "generic_filter", "name_only"]


def build_classifier(name: str = "tag_suffix", lexicon: CuisineLexicon = DEFAULT_LEXICON) -> CuisineClassifier:
    """
    Build a classifier for a named strategy.

    - tag_suffix: "<cuisine>_restaurant" tags, then name keywords
    - generic_filter: first non-generic tag, then name keywords
    - name_only: name keywords only

    Raises:
        ValueError: If the strategy name is unknown
    """
    by_name = name_keyword_strategy(lexicon)
    if name == "tag_suffix":
        return CuisineClassifier([tag_suffix_strategy, by_name])
    if name == "generic_filter":
        return CuisineClassifier([generic_filter_strategy, by_name])
    if name == "name_only":
        return CuisineClassifier([by_name])
    raise ValueError(f"Unknown cuisine strategy '{name}'. Expected one of: {', '.join(STRATEGY_NAMES)}")


DEFAULT_CLASSIFIER = build_classifier()
