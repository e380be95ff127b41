"""Tests for the schema mapper and the full parsing pipeline"""
import pytest

from conftest import MICRODATA_BODY, json_ld_script, page
from recipe_import import RecipeExtractionError, parse_recipe_from_html
from recipe_import.mapper import map_schema_to_recipe
from recipe_import.models import Ingredient, NutritionFacts

SOURCE_URL = "https://example.com/recipes/classic-pancakes"


# ──────────────────────────────────────────────
# map_schema_to_recipe
# ──────────────────────────────────────────────


class TestMapper:
    def test_requires_title(self):
        with pytest.raises(RecipeExtractionError, match="Recipe has no title"):
            map_schema_to_recipe({"recipeIngredient": ["1 egg"]})
        with pytest.raises(RecipeExtractionError):
            map_schema_to_recipe({"name": "   "})
        with pytest.raises(RecipeExtractionError):
            map_schema_to_recipe({"name": ["Pancakes"]})

    def test_minimal_schema(self):
        recipe = map_schema_to_recipe({"name": "Toast"})
        assert recipe.to_dict() == {"title": "Toast", "ingredients": [], "instructions": []}

    def test_omits_unparseable_fields(self):
        recipe = map_schema_to_recipe({
            "name": "Toast",
            "description": "  ",
            "prepTime": "PT0M",
            "cookTime": "5 minutes",
            "recipeYield": 0,
            "image": {"caption": "no url"},
            "recipeCategory": [],
            "nutrition": {"calories": "?"},
        })
        assert recipe.to_dict() == {"title": "Toast", "ingredients": [], "instructions": []}
        assert "nutrition" not in recipe.to_dict()

    def test_source_url(self):
        assert map_schema_to_recipe({"name": "Toast"}, SOURCE_URL).sourceUrl == SOURCE_URL
        assert map_schema_to_recipe({"name": "Toast"}, "").sourceUrl is None

    def test_long_title_is_truncated(self):
        recipe = map_schema_to_recipe({"name": "x" * 250})
        assert len(recipe.title) == 200

    def test_ingredient_shapes(self):
        assert map_schema_to_recipe({"name": "T", "recipeIngredient": "2 eggs"}).ingredients == [
            Ingredient(quantity=2, name="eggs")
        ]
        recipe = map_schema_to_recipe({"name": "T", "recipeIngredient": [None, 3, "  ", "salt"]})
        assert [i.name for i in recipe.ingredients] == ["3", "salt"]
        assert recipe.ingredients[0].quantity == 3

    def test_legacy_ingredients_key(self):
        recipe = map_schema_to_recipe({"name": "T", "ingredients": ["1 cup rice"]})
        assert recipe.ingredients == [Ingredient(quantity=1, unit="cup", name="rice")]

    def test_cuisine_and_categories(self):
        recipe = map_schema_to_recipe({
            "name": "T",
            "recipeCuisine": "Thai",
            "recipeCategory": "Main course",
            "keywords": ["spicy", "Spicy", "noodles"],
        })
        assert recipe.cuisine == "Thai"
        assert recipe.categoryNames == ["Main course"]
        assert recipe.tagNames == ["spicy", "noodles"]


# ──────────────────────────────────────────────
# parse_recipe_from_html
# ──────────────────────────────────────────────


def test_json_ld_page(json_ld_page):
    recipe = parse_recipe_from_html(json_ld_page, SOURCE_URL)

    assert recipe.title == "Classic Pancakes"
    assert recipe.description == "Fluffy weekend pancakes."
    assert recipe.sourceUrl == SOURCE_URL
    assert recipe.imageUrl == "https://example.com/pancakes.jpg"
    assert (recipe.prepTime, recipe.cookTime, recipe.totalTime) == (10, 15, 25)
    assert recipe.servings == 4
    assert recipe.cuisine == "American, Canadian"
    assert recipe.categoryNames == ["Breakfast", "Brunch"]
    assert recipe.tagNames == ["pancakes", "breakfast", "easy"]
    assert [i.model_dump(exclude_none=True) for i in recipe.ingredients] == [
        {"quantity": 1.5, "unit": "cups", "name": "all-purpose flour", "notes": "sifted"},
        {"quantity": 2, "unit": "tbsp", "name": "sugar"},
        {"quantity": 1.25, "unit": "cups", "name": "milk"},
        {"name": "a pinch of salt"},
    ]
    assert list(recipe.numbered_instructions()) == [
        (1, "Whisk the dry ingredients."),
        (2, "Add the milk."),
        (3, "Cook on a hot griddle."),
    ]
    assert recipe.nutrition == NutritionFacts(calories=230, protein=6, sodium=300)


def test_microdata_page(microdata_page):
    recipe = parse_recipe_from_html(microdata_page)

    assert recipe.title == "Grandma's Banana Bread"
    assert recipe.sourceUrl is None
    assert recipe.imageUrl == "https://example.com/banana.jpg"
    assert recipe.prepTime == 15
    assert recipe.cookTime == 60
    assert recipe.totalTime is None
    assert recipe.servings == 1
    assert recipe.categoryNames == ["Bread"]
    assert recipe.ingredients == [
        Ingredient(quantity=3, name="ripe bananas"),
        Ingredient(quantity=2, unit="cups", name="flour"),
    ]
    assert [i.text for i in recipe.instructions] == ["Mash the bananas.", "Bake for one hour."]
    assert recipe.nutrition == NutritionFacts(calories=196, fat=7)


def test_heuristic_page(plain_page):
    recipe = parse_recipe_from_html(plain_page, SOURCE_URL)
    assert recipe.to_dict() == {
        "title": "Tomato Soup",
        "description": "A cozy soup.",
        "sourceUrl": SOURCE_URL,
        "imageUrl": "https://example.com/soup.jpg",
        "ingredients": [],
        "instructions": [],
    }


def test_json_ld_wins_over_microdata():
    html = page(
        head=json_ld_script({"@type": "Recipe", "name": "From JSON-LD", "recipeIngredient": ["1 egg"]}),
        body="<h1>From heading</h1>" + MICRODATA_BODY,
    )
    recipe = parse_recipe_from_html(html)
    assert recipe.title == "From JSON-LD"
    assert [i.name for i in recipe.ingredients] == ["egg"]


def test_microdata_wins_over_heuristics(microdata_page):
    html = microdata_page.replace("<body>", "<body><h1>Site heading</h1>")
    assert parse_recipe_from_html(html).title == "Grandma's Banana Bread"


def test_nameless_microdata_falls_through_to_heuristics():
    html = page(
        head="<title>Banana Bread</title>",
        body='<div itemscope itemtype="https://schema.org/Recipe"><span itemprop="recipeIngredient">1 banana</span></div>',
    )
    recipe = parse_recipe_from_html(html)
    assert recipe.title == "Banana Bread"
    assert recipe.ingredients == []


def test_nameless_json_ld_recipe_is_fatal():
    html = page(head=json_ld_script({"@type": "Recipe", "recipeIngredient": ["1 egg"]}), body="<h1>Heading</h1>")
    with pytest.raises(RecipeExtractionError, match="Recipe has no title"):
        parse_recipe_from_html(html)


HUGE = "9" * 5000


@pytest.mark.parametrize("fields, omitted", [
    ('"recipeYield": NaN', "servings"),
    ('"recipeYield": Infinity', "servings"),
    ('"recipeYield": -Infinity', "servings"),
    (f'"recipeYield": "{HUGE} servings"', "servings"),
    (f'"prepTime": "PT{HUGE}M"', "prepTime"),
    (f'"nutrition": {{"calories": "{"1" * 400} kcal"}}', "nutrition"),
    ('"nutrition": {"calories": NaN}', "nutrition"),
])
def test_malformed_numbers_are_omitted(fields, omitted):
    payload = '{"@type": "Recipe", "name": "Toast", ' + fields + "}"
    recipe = parse_recipe_from_html(page(head=json_ld_script(payload)))

    assert recipe.title == "Toast"
    assert omitted not in recipe.to_dict()


def test_huge_ingredient_amount_keeps_the_line():
    line = HUGE + "½ cups flour"
    payload = '{"@type": "Recipe", "name": "Toast", "recipeIngredient": ["' + line + '", "1 egg"]}'
    recipe = parse_recipe_from_html(page(head=json_ld_script(payload)))

    assert recipe.ingredients == [Ingredient(name=line), Ingredient(quantity=1, name="egg")]


def test_total_failure():
    with pytest.raises(RecipeExtractionError, match="Could not extract recipe data"):
        parse_recipe_from_html(page(body="<p>Nothing to see here.</p>"))
    with pytest.raises(RecipeExtractionError):
        parse_recipe_from_html("")


def test_calls_are_independent(json_ld_page, plain_page):
    first = parse_recipe_from_html(json_ld_page)
    parse_recipe_from_html(plain_page)
    again = parse_recipe_from_html(json_ld_page)
    assert first == again
