from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Optional

STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"


def _as_optional_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass
class RawPlace:
    name: str
    category_tags: FrozenSet[str] = frozenset()
    # Provider order of `types`; category_tags is the set view used for membership.
    tag_order: tuple = ()
    vicinity: Optional[str] = None
    formatted_address: Optional[str] = None
    rating: Optional[float] = None
    price_level: Optional[int] = None
    place_id: Optional[str] = None
    raw: Optional[dict] = None

    @classmethod
    def from_provider(cls, item: Any) -> "RawPlace":
        """Build a RawPlace from a Places API result, tolerating missing or odd fields."""
        if not isinstance(item, dict):
            item = {}
        types = item.get("types")
        if not isinstance(types, (list, tuple)):
            types = []
        tags = tuple(t for t in types if isinstance(t, str) and t)
        name = item.get("name")
        return cls(
            name=name if isinstance(name, str) else "",
            category_tags=frozenset(tags),
            tag_order=tags,
            vicinity=_as_optional_str(item.get("vicinity")),
            formatted_address=_as_optional_str(item.get("formatted_address")),
            rating=_as_optional_float(item.get("rating")),
            price_level=_as_optional_int(item.get("price_level")),
            place_id=_as_optional_str(item.get("place_id")),
            raw=item,
        )

    def tags_in_order(self) -> tuple:
        """Provider order when known, otherwise alphabetical so "first tag" stays deterministic."""
        if self.tag_order:
            return self.tag_order
        return tuple(sorted(self.category_tags))


@dataclass
class PlacesPage:
    status: str
    results: List[RawPlace] = field(default_factory=list)
    next_page_token: Optional[str] = None
    error_message: Optional[str] = None  # provider's human-readable reason, when given

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def is_zero_results(self) -> bool:
        return self.status == STATUS_ZERO_RESULTS
