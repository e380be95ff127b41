"""Constants for recipe import package."""

from typing import Dict, Tuple

# Approximate decimal values, thirds and sixths are rounded to three places.
UNICODE_FRACTIONS: Dict[str, float] = {
    "\u00bd": 0.5,    # ½
    "\u2153": 0.333,  # ⅓
    "\u2154": 0.667,  # ⅔
    "\u00bc": 0.25,   # ¼
    "\u00be": 0.75,   # ¾
    "\u2155": 0.2,    # ⅕
    "\u2156": 0.4,    # ⅖
    "\u2157": 0.6,    # ⅗
    "\u2158": 0.8,    # ⅘
    "\u2159": 0.167,  # ⅙
    "\u215a": 0.833,  # ⅚
    "\u215b": 0.125,  # ⅛
    "\u215c": 0.375,  # ⅜
    "\u215d": 0.625,  # ⅝
    "\u215e": 0.875,  # ⅞
}

# Lowercase tokens accepted as the unit of an ingredient line
KNOWN_UNITS = frozenset({
    # Volumes
    "cup", "cups", "c",
    "tbsp", "tablespoon", "tablespoons", "tbs",
    "tsp", "teaspoon", "teaspoons",
    "ml", "milliliter", "milliliters",
    "l", "liter", "liters",
    "quart", "quarts", "qt",
    "pint", "pints", "pt",
    "gallon", "gallons", "gal",
    # Weights
    "oz", "ounce", "ounces",
    "lb", "lbs", "pound", "pounds",
    "g", "gram", "grams",
    "kg", "kilogram", "kilograms",
    # Countable
    "pinch", "dash",
    "clove", "cloves",
    "can", "cans",
    "bunch", "bunches",
    "slice", "slices",
    "piece", "pieces",
    "package", "pkg",
    "stick", "sticks",
    "head", "heads",
    "sprig", "sprigs",
    "handful",
    # Sizes
    "small", "medium", "large", "whole",
})

# schema.org NutritionInformation property -> NutritionFacts field
NUTRITION_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("calories", "calories"),
    ("proteinContent", "protein"),
    ("carbohydrateContent", "carbs"),
    ("fatContent", "fat"),
    ("fiberContent", "fiber"),
    ("sugarContent", "sugar"),
    ("sodiumContent", "sodium"),
)

JSON_LD_CONTENT_TYPE = "application/ld+json"
RECIPE_TYPE = "Recipe"
SECTION_TYPE = "HowToSection"
MICRODATA_RECIPE_TYPE = "schema.org/Recipe"

MAX_TITLE_LENGTH = 200
