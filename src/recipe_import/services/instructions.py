"""
Instruction Normalizer.

schema.org recipeInstructions mixes several shapes:
  - plain strings
  - HowToStep objects ({"text": ...}, sometimes only {"name": ...})
  - HowToSection objects grouping more entries under itemListElement

normalize_instructions flattens all of them into one ordered list of
steps. Sections are expanded in place, at any depth.
"""

import logging
from typing import Any, List, Optional

from ..constants import SECTION_TYPE
from ..models import Instruction

logger = logging.getLogger(__name__)

TEXT = "text"
SECTION = "section"
STEP = "step"
NAMED_STEP = "named_step"


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_section(entry: dict) -> bool:
    entry_type = entry.get("@type")
    if isinstance(entry_type, list):
        is_section = SECTION_TYPE in entry_type
    else:
        is_section = entry_type == SECTION_TYPE
    return is_section and isinstance(entry.get("itemListElement"), list)


def classify_entry(entry: Any) -> Optional[str]:
    """Return the kind of an instruction entry, or None when it is unusable."""
    if isinstance(entry, str):
        return TEXT
    if not isinstance(entry, dict):
        return None
    if _is_section(entry):
        return SECTION
    if not _is_blank(entry.get("text")):
        return STEP
    if not _is_blank(entry.get("name")):
        return NAMED_STEP
    return None


def normalize_instructions(instructions: Any) -> List[Instruction]:
    """Flatten recipeInstructions into Instruction objects, in source order."""
    if not instructions:
        return []
    if isinstance(instructions, str):
        instructions = instructions.splitlines()
    elif isinstance(instructions, dict):
        instructions = [instructions]
    elif not isinstance(instructions, list):
        return []

    result: List[Instruction] = []
    for entry in instructions:
        kind = classify_entry(entry)
        if kind == TEXT:
            text = entry.strip()
            if text:
                result.append(Instruction(text=text))
        elif kind == SECTION:
            result.extend(normalize_instructions(entry["itemListElement"]))
        elif kind == STEP:
            result.append(Instruction(text=entry["text"].strip()))
        elif kind == NAMED_STEP:
            result.append(Instruction(text=entry["name"].strip()))
        else:
            logger.debug(f"Skipping unrecognized instruction entry: {str(entry)[:80]}")

    return result
