import json

import pytest

JSON_LD_RECIPE = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "  Classic Pancakes ",
    "description": "Fluffy weekend pancakes.",
    "image": [{"@type": "ImageObject", "url": "https://example.com/pancakes.jpg"}],
    "prepTime": "PT10M",
    "cookTime": "PT15M",
    "totalTime": "PT25M",
    "recipeYield": ["4 servings", "12 pancakes"],
    "recipeCategory": ["Breakfast", "Brunch"],
    "recipeCuisine": ["American", "Canadian"],
    "keywords": "pancakes, breakfast, easy",
    "recipeIngredient": [
        "1½ cups all-purpose flour (sifted)",
        "2 tbsp sugar",
        "1 1/4 cups milk",
        "a pinch of salt",
        "",
    ],
    "recipeInstructions": [
        {
            "@type": "HowToSection",
            "name": "Batter",
            "itemListElement": [
                {"@type": "HowToStep", "text": "Whisk the dry ingredients."},
                {"@type": "HowToStep", "text": "Add the milk."},
            ],
        },
        {"@type": "HowToStep", "text": "Cook on a hot griddle."},
    ],
    "nutrition": {
        "@type": "NutritionInformation",
        "calories": "230 calories",
        "proteinContent": "6g",
        "sodiumContent": "300 mg",
    },
}

MICRODATA_BODY = """
<div itemscope itemtype="http://schema.org/Recipe">
  <h2 itemprop="name">Grandma's Banana Bread</h2>
  <img itemprop="image" src="https://example.com/banana.jpg" alt="">
  <meta itemprop="description" content="Moist and simple.">
  <time itemprop="prepTime" datetime="PT15M">15 minutes</time>
  <meta itemprop="cookTime" content="PT1H">
  <span itemprop="recipeYield">1 loaf (10 slices)</span>
  <span itemprop="recipeCategory">Bread</span>
  <span itemprop="recipeCuisine">American</span>
  <ul>
    <li itemprop="recipeIngredient">3 ripe bananas</li>
    <li itemprop="recipeIngredient">
      2 cups
      flour
    </li>
  </ul>
  <ol>
    <li itemprop="recipeInstructions">Mash the bananas.</li>
    <li itemprop="recipeInstructions">Bake for one hour.</li>
  </ol>
  <div itemprop="nutrition" itemscope itemtype="http://schema.org/NutritionInformation">
    <span itemprop="calories">196 calories</span>
    <meta itemprop="fatContent" content="7 g">
  </div>
</div>
"""


def page(head: str = "", body: str = "") -> str:
    return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"


def json_ld_script(data) -> str:
    payload = data if isinstance(data, str) else json.dumps(data)
    return f'<script type="application/ld+json">{payload}</script>'


@pytest.fixture
def json_ld_page():
    """A page whose recipe is only described by JSON-LD"""
    return page(
        head="<title>Pancakes | Example Kitchen</title>" + json_ld_script(JSON_LD_RECIPE),
        body="<h1>Classic Pancakes</h1>",
    )


@pytest.fixture
def microdata_page():
    """A page whose recipe is only described by microdata"""
    return page(head="<title>Banana Bread</title>", body=MICRODATA_BODY)


@pytest.fixture
def plain_page():
    """A page with no recipe markup at all"""
    return page(
        head=(
            '<title>Tomato Soup - Blog</title>'
            '<meta name="description" content="A cozy soup.">'
            '<meta property="og:image" content="https://example.com/soup.jpg">'
        ),
        body="<h1>  Tomato Soup  </h1><p>Some story.</p>",
    )
