from typing import Any, Dict, Iterator, List, Optional, Tuple
from pydantic import BaseModel, Field, HttpUrl

# Loosely typed schema.org Recipe fields as produced by one of the extractors
RawRecipe = Dict[str, Any]


class Ingredient(BaseModel):
    """A single ingredient line split into its parts"""
    quantity: Optional[float] = Field(default=None, gt=0, description="Amount, e.g. 1.5")
    unit: Optional[str] = Field(default=None, description="Unit token as written, e.g. 'cups'")
    name: str = Field(min_length=1, description="Ingredient name, or the whole line when it could not be split")
    notes: Optional[str] = Field(default=None, description="Trailing parenthetical note")


class Instruction(BaseModel):
    """One preparation step"""
    text: str = Field(min_length=1)


class NutritionFacts(BaseModel):
    """Per-serving nutrition values, units stripped"""
    calories: Optional[float] = Field(default=None, ge=0)
    protein: Optional[float] = Field(default=None, ge=0)
    carbs: Optional[float] = Field(default=None, ge=0)
    fat: Optional[float] = Field(default=None, ge=0)
    fiber: Optional[float] = Field(default=None, ge=0)
    sugar: Optional[float] = Field(default=None, ge=0)
    sodium: Optional[float] = Field(default=None, ge=0)


class Recipe(BaseModel):
    """Canonical recipe record, ready to pre-fill the recipe form"""
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    sourceUrl: Optional[str] = None
    imageUrl: Optional[str] = None
    prepTime: Optional[int] = Field(default=None, gt=0, description="Minutes")
    cookTime: Optional[int] = Field(default=None, gt=0, description="Minutes")
    totalTime: Optional[int] = Field(default=None, gt=0, description="Minutes")
    servings: Optional[int] = Field(default=None, gt=0)
    cuisine: Optional[str] = None
    categoryNames: Optional[List[str]] = None
    tagNames: Optional[List[str]] = None
    ingredients: List[Ingredient] = Field(default_factory=list)
    instructions: List[Instruction] = Field(default_factory=list)
    nutrition: Optional[NutritionFacts] = None

    def numbered_instructions(self) -> Iterator[Tuple[int, str]]:
        """Yield (step, text) pairs, steps starting at 1."""
        for step, instruction in enumerate(self.instructions, start=1):
            yield step, instruction.text

    def to_dict(self) -> Dict[str, Any]:
        """Serialize without the optional fields that were not extracted."""
        return self.model_dump(exclude_none=True)


class ImportRequest(BaseModel):
    """URL submitted for import"""
    url: HttpUrl


class ImportResult(BaseModel):
    """Outcome of an import, either a recipe or a readable error"""
    success: bool
    data: Optional[Recipe] = None
    error: Optional[str] = None
