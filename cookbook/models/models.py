"""Domain models for the cookbook.

Defines the immutable value types that make up a recipe. All models use
Pydantic v2 with frozen configuration, so attributes cannot be reassigned
once an instance exists.
"""

from enum import Enum
from functools import total_ordering
from typing import Annotated, TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from cookbook.models.builder import RecipeBuilder


@total_ordering
class Difficulty(Enum):
    """Difficulty of a recipe, from EASY (easiest to make) to EXPERT (hardest).

    Members compare and sort in declaration order, not by their string values.
    """

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Difficulty):
            return NotImplemented
        members = list(Difficulty)
        return members.index(self) < members.index(other)


class Ingredient(BaseModel):
    """An ingredient for a recipe.

    Two ingredients are the same set member when their ids match, even if
    name, unit or measurement differ.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    unit: str
    measurement: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class RecipeTag(BaseModel):
    """Wrapper around a tag string describing a recipe."""

    model_config = ConfigDict(frozen=True)

    tag: str

    def __str__(self) -> str:
        return self.tag


class Recipe(BaseModel):
    """A single recipe one would find in a cookbook.

    Instances are meant to be assembled through ``Recipe.builder()``, which
    checks that every required field is present before construction.
    """

    model_config = ConfigDict(frozen=True)

    id: Annotated[UUID, Field(description="Caller-supplied recipe id")]
    name: Annotated[str, Field(description="Name of the recipe")]
    difficulty: Annotated[Difficulty, Field(description="Difficulty rating")]
    duration: Annotated[int, Field(ge=0, le=65535, description="Estimated duration in minutes (0-65535)")]
    description: Annotated[str, Field(description="Description of the recipe")]
    ingredients: Annotated[
        frozenset[Ingredient], Field(default_factory=frozenset, description="Ingredients needed, unique by id")
    ]
    directions: Annotated[str, Field(description="Directions to prepare the recipe")]
    tags: Annotated[frozenset[RecipeTag], Field(default_factory=frozenset, description="Optional descriptive tags")]
    img: Annotated[bytes, Field(default=b"", description="Raw picture bytes, empty when no picture")]

    @classmethod
    def builder(cls) -> "RecipeBuilder":
        """Return a fresh builder for assembling a recipe."""
        from cookbook.models.builder import RecipeBuilder

        return RecipeBuilder()
