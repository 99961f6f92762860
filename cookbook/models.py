"""
Recipe catalog models.

This module defines the canonical recipe schemas decoded from the bundled
recipes document. The JSON keys are singular (`recipe`, `tag`, `ingredient`,
`step`); the Python attributes are plural and mapped through aliases.

# NOTE: Every model is frozen and sequences are tuples, so decoded records can
    be shared between screens without copying. Optional fields decode to None
    when the key is absent or null, never to an empty string.

Document shape:
- Top level: {"recipe": [...]}
- Recipe: id, name (optional), description, tag, ingredient, step, image
- Ingredient: amount, unit, name, preparation (all optional)
- Step: description
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    """
    A single ingredient line of a recipe.

    Every field is optional in the source document. Equality is structural.
    """
    amount: Optional[str] = Field(None, description="Quantity as written, e.g. '2' or '1/2'")
    unit: Optional[str] = Field(None, description="Unit as written, e.g. 'tbsp'")
    name: Optional[str] = Field(None, description="Ingredient name")
    preparation: Optional[str] = Field(None, description="Preparation note, e.g. 'finely chopped'")

    model_config = ConfigDict(frozen=True, extra="ignore")

    def display_text(self) -> str:
        """
        Build the one-line label shown on the detail screen.

        Only present parts are joined, so an ingredient with no amount renders
        as "g flour" rather than " g flour".

        Returns:
            Space-joined amount, unit and name (empty string if all are absent)
        """
        parts = [self.amount, self.unit, self.name]
        return " ".join(p for p in parts if p)


class RecipeStep(BaseModel):
    """One instruction of a recipe. Order within the recipe is meaningful."""
    description: str = Field(..., description="Instruction text")

    model_config = ConfigDict(frozen=True, extra="ignore")


class Recipe(BaseModel):
    """
    Recipe record as decoded from the bundled document.

    Attributes:
        id: Identifier (assumed unique, not enforced)
        name: Display name; recipes without one are dropped from the catalog
        description: Short description
        tags: Ordered tags (JSON key `tag`)
        ingredients: Ordered ingredients (JSON key `ingredient`)
        steps: Ordered steps (JSON key `step`)
        image: Name of a local image asset, not a URL
    """
    id: str = Field(..., description="Recipe identifier")
    name: Optional[str] = Field(None, description="Recipe name, absent for drafts")
    description: str = Field(..., description="Short description of the recipe")
    tags: Tuple[str, ...] = Field(..., alias="tag", description="Tags in document order")
    ingredients: Tuple[Ingredient, ...] = Field(..., alias="ingredient", description="Ingredients in document order")
    steps: Tuple[RecipeStep, ...] = Field(..., alias="step", description="Steps in document order")
    image: str = Field(..., description="Local image asset name")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def display_name(self) -> str:
        """Name for titles and list rows ("" when the recipe has no name)."""
        return self.name or ""

    @property
    def step_descriptions(self) -> Tuple[str, ...]:
        return tuple(step.description for step in self.steps)


class RecipeCollection(BaseModel):
    """Decode envelope: the recipes exactly as found in the document."""
    recipes: Tuple[Recipe, ...] = Field(..., alias="recipe", description="Recipes in document order")

    model_config = ConfigDict(frozen=True, extra="ignore")
