"""Normalizers for loosely typed schema.org Recipe fields.

Every function accepts whatever a page happened to put in the field
(string, number, list, object or nothing) and returns either a clean
value or None. None means "not available" and the field is left out of
the canonical recipe.
"""

import math
import re
from typing import Any, List, Optional

from ..constants import NUTRITION_FIELDS
from ..models import NutritionFacts

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?", re.IGNORECASE)
_DIGITS_RE = re.compile(r"(\d+)")
_NON_NUMERIC_RE = re.compile(r"[^\d.]")
_LEADING_FLOAT_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")

# Longer digit runs are not real times or yields
_MAX_DIGITS = 9


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _digits_to_int(digits: Optional[str]) -> Optional[int]:
    if not digits:
        return 0
    if len(digits) > _MAX_DIGITS:
        return None
    return int(digits)


def parse_duration(value: Any) -> Optional[int]:
    """
    Convert an ISO 8601 duration (PT30M, PT1H30M, PT2H) into minutes.

    Seconds are rounded up to the next minute. Zero durations count as
    missing data.
    """
    if not value or not isinstance(value, str):
        return None
    match = _DURATION_RE.fullmatch(value.strip())
    if not match:
        return None
    parts = [_digits_to_int(g) for g in match.groups()]
    if None in parts:
        return None
    hours, minutes, seconds = parts
    total = hours * 60 + minutes + math.ceil(seconds / 60)
    return total if total > 0 else None


def parse_servings(value: Any) -> Optional[int]:
    """recipeYield can be a number, a string ("4 servings") or a list of either."""
    if value is None:
        return None
    if _is_number(value):
        # JSON allows NaN and Infinity
        if not math.isfinite(value):
            return None
        servings = int(value)
        return servings if servings > 0 else None
    if isinstance(value, list):
        return parse_servings(value[0]) if value else None
    if isinstance(value, str):
        match = _DIGITS_RE.search(value)
        if match:
            servings = _digits_to_int(match.group(1))
            return servings if servings else None
    return None


def parse_nutrition_value(value: Any) -> Optional[float]:
    """'12g', '250 kcal' or 12 -> float. Anything without digits, or too large for a float, -> None."""
    if value is None:
        return None
    cleaned = _NON_NUMERIC_RE.sub("", str(value))
    match = _LEADING_FLOAT_RE.match(cleaned)
    if not match:
        return None
    parsed = float(match.group(0))
    return parsed if math.isfinite(parsed) else None


def parse_nutrition(nutrition: Any) -> Optional[NutritionFacts]:
    """Map a schema.org NutritionInformation object onto NutritionFacts."""
    if not nutrition or not isinstance(nutrition, dict):
        return None

    values = {}
    for schema_key, field in NUTRITION_FIELDS:
        parsed = parse_nutrition_value(nutrition.get(schema_key))
        if parsed is not None:
            values[field] = parsed

    return NutritionFacts(**values) if values else None


def extract_image_url(image: Any) -> Optional[str]:
    """image may be a URL, a list of URLs or an ImageObject (or a list of those)."""
    if not image:
        return None
    if isinstance(image, str):
        return image
    if isinstance(image, list):
        return extract_image_url(image[0])
    if isinstance(image, dict):
        for key in ("url", "contentUrl"):
            url = image.get(key)
            if isinstance(url, str) and url:
                return url
    return None


def to_string_list(value: Any) -> Optional[List[str]]:
    if not value:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value]
    return None


def join_cuisine(value: Any) -> Optional[str]:
    """recipeCuisine as a single string, several cuisines joined with ', '."""
    if not value:
        return None
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)


def parse_keywords(value: Any) -> Optional[List[str]]:
    """
    Split schema.org keywords into tag names.

    Accepts "vegan, quick, Dinner" or ["vegan", "quick"]. Duplicates are
    dropped case-insensitively, keeping the first spelling.
    """
    if not value:
        return None
    if isinstance(value, str):
        chunks = [value]
    elif isinstance(value, list):
        chunks = [item for item in value if isinstance(item, str)]
    else:
        return None

    tags: List[str] = []
    seen = set()
    for chunk in chunks:
        for keyword in chunk.split(","):
            keyword = keyword.strip()
            if keyword and keyword.lower() not in seen:
                seen.add(keyword.lower())
                tags.append(keyword)
    return tags or None
