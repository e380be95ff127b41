"""Strategies that locate raw schema.org Recipe data in a page."""

from .json_ld import extract_from_json_ld
from .microdata import extract_from_microdata
from .heuristics import extract_from_heuristics

# Tried in this order, the first strategy returning a result wins
EXTRACTORS = (
    extract_from_json_ld,
    extract_from_microdata,
    extract_from_heuristics,
)

__all__ = ["EXTRACTORS", "extract_from_json_ld", "extract_from_microdata", "extract_from_heuristics"]
