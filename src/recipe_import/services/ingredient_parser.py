"""
Ingredient Parser Service.

Splits free-text ingredient lines ("1½ cups flour (sifted)") into
quantity / unit / name / notes with plain regular expressions:
  - a trailing parenthetical group becomes the notes
  - the leading amount is read by parse_quantity (unicode fractions,
    mixed numbers, slash fractions, decimals)
  - the next token is the unit when it belongs to KNOWN_UNITS

Only blank lines are dropped: a line that cannot be split keeps its
full text as the ingredient name.
"""

import logging
import math
import re
from typing import Optional, Tuple

from ..constants import KNOWN_UNITS, UNICODE_FRACTIONS
from ..models import Ingredient

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════
# QUANTITY
# ═══════════════════════════════════════════════════════════════════

_UNICODE_MIXED_RE = re.compile(r"^(\d+)\s*([^\d\s/.])")
_MIXED_FRACTION_RE = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)")
_FRACTION_RE = re.compile(r"^(\d+)\s*/\s*(\d+)")
_NUMBER_RE = re.compile(r"^(\d+(?:\.\d+)?)")


def _read_amount(s: str) -> Tuple[Optional[float], str]:
    # Whole number + unicode fraction, e.g. "1½"
    match = _UNICODE_MIXED_RE.match(s)
    if match and match.group(2) in UNICODE_FRACTIONS:
        value = float(match.group(1)) + UNICODE_FRACTIONS[match.group(2)]
        return value, s[match.end():].strip()

    # Standalone unicode fraction, e.g. "½"
    if s and s[0] in UNICODE_FRACTIONS:
        return UNICODE_FRACTIONS[s[0]], s[1:].strip()

    # Mixed number, e.g. "1 1/2"
    match = _MIXED_FRACTION_RE.match(s)
    if match:
        whole, num, den = (float(g) for g in match.groups())
        if den != 0:
            return whole + num / den, s[match.end():].strip()

    # Simple fraction, e.g. "1/2"
    match = _FRACTION_RE.match(s)
    if match:
        num, den = float(match.group(1)), float(match.group(2))
        if den != 0:
            return num / den, s[match.end():].strip()

    match = _NUMBER_RE.match(s)
    if match:
        return float(match.group(1)), s[match.end():].strip()

    return None, s


def parse_quantity(raw: str) -> Tuple[Optional[float], str]:
    """
    Read a numeric amount from the start of a text fragment.

    Handles "2", "2.5", "1/2", "1 1/2", "½" and "1½".

    Returns:
        (value, rest) where rest is the trimmed text after the amount.
        When no amount is found value is None and rest is the whole input.
        Digit runs too long to give a finite float count as no amount.
    """
    s = raw.strip()
    value, rest = _read_amount(s)
    if value is None or not math.isfinite(value):
        return None, s
    return value, rest


# ═══════════════════════════════════════════════════════════════════
# INGREDIENT LINE
# ═══════════════════════════════════════════════════════════════════

_TRAILING_NOTES_RE = re.compile(r"\(([^)]+)\)\s*$")
_TRAILING_PUNCTUATION_RE = re.compile(r"[.,]$")


def _strip_unit_punctuation(token: str) -> str:
    return _TRAILING_PUNCTUATION_RE.sub("", token)


def parse_ingredient_line(raw: str) -> Optional[Ingredient]:
    """
    Parse one ingredient line into an Ingredient.

    "2 cups all-purpose flour (sifted)" gives
    quantity=2, unit="cups", name="all-purpose flour", notes="sifted".

    Returns None only for blank lines.
    """
    trimmed = raw.strip()
    if not trimmed:
        return None

    notes = None
    working = trimmed
    notes_match = _TRAILING_NOTES_RE.search(working)
    if notes_match:
        notes = notes_match.group(1).strip() or None
        working = working[:notes_match.start()].strip()

    quantity, after_quantity = parse_quantity(working)
    if quantity is not None and quantity <= 0:
        quantity = None

    if not after_quantity:
        return Ingredient(quantity=quantity, name=trimmed, notes=notes)

    words = after_quantity.split()
    unit = None
    if _strip_unit_punctuation(words[0].lower()) in KNOWN_UNITS:
        unit = _strip_unit_punctuation(words[0])
        name = " ".join(words[1:])
    else:
        name = after_quantity

    # "1 pinch" leaves no name: keep the line as written
    if not name.strip():
        return Ingredient(name=trimmed, notes=notes)

    logger.debug(f"Parsed ingredient '{trimmed}' -> qty={quantity} unit={unit} name='{name.strip()}'")

    return Ingredient(quantity=quantity, unit=unit, name=name.strip(), notes=notes)
