"""Staged construction of Recipe values.

RecipeBuilder collects field values one call at a time and only produces a
Recipe once every required field is present. Required fields are checked in a
fixed order so the reported missing field is deterministic.
"""

from typing import Any, Optional
from uuid import UUID

from cookbook.models.models import Difficulty, Ingredient, Recipe, RecipeTag
from cookbook.utils.logger import logger


# Order in which build() checks for missing fields
REQUIRED_FIELDS: tuple[str, ...] = ("id", "name", "difficulty", "duration", "description", "directions")


class MissingFieldError(ValueError):
    """Raised by build() when a required field was never set."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"cannot build Recipe without {field} set")


class BuilderConsumedError(RuntimeError):
    """Raised when a builder is used again after a successful build()."""


class RecipeBuilder:
    """Accumulates recipe fields and validates completeness on build().

    Every setter returns the builder so calls can be chained:

        recipe = (
            Recipe.builder()
            .with_id(recipe_id)
            .with_name("Pancakes")
            ...
            .build()
        )

    A builder is single-use. A failed build() leaves it open so the missing
    field can be supplied; a successful one closes it for good.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}
        self._ingredients: dict[UUID, Ingredient] = {}
        self._tags: set[RecipeTag] = set()
        self._img: Optional[bytes] = None
        self._consumed = False

    def _set(self, field: str, value: Any) -> "RecipeBuilder":
        self._ensure_open()
        self._fields[field] = value
        return self

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError("RecipeBuilder was already used to build a Recipe")

    def with_id(self, recipe_id: UUID) -> "RecipeBuilder":
        return self._set("id", recipe_id)

    def with_name(self, name: str) -> "RecipeBuilder":
        return self._set("name", name)

    def with_difficulty(self, difficulty: Difficulty) -> "RecipeBuilder":
        return self._set("difficulty", difficulty)

    def with_duration(self, minutes: int) -> "RecipeBuilder":
        return self._set("duration", minutes)

    def with_description(self, description: str) -> "RecipeBuilder":
        return self._set("description", description)

    def with_directions(self, directions: str) -> "RecipeBuilder":
        return self._set("directions", directions)

    def with_image(self, img: bytes) -> "RecipeBuilder":
        self._ensure_open()
        self._img = img
        return self

    def add_ingredient(self, ingredient: Ingredient) -> "RecipeBuilder":
        """Add an ingredient, replacing any earlier one with the same id."""
        self._ensure_open()
        # pop first so the replacement also takes the latest insertion position
        self._ingredients.pop(ingredient.id, None)
        self._ingredients[ingredient.id] = ingredient
        return self

    def add_tag(self, tag: RecipeTag) -> "RecipeBuilder":
        self._ensure_open()
        self._tags.add(tag)
        return self

    def missing_fields(self) -> tuple[str, ...]:
        """Return the required fields not set yet, in check order."""
        return tuple(field for field in REQUIRED_FIELDS if field not in self._fields)

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def build(self) -> Recipe:
        """Validate completeness and produce the Recipe.

        Returns:
            The finished, immutable Recipe.

        Raises:
            MissingFieldError: If a required field is unset. The first unset
                field in REQUIRED_FIELDS order is reported.
            BuilderConsumedError: If this builder already built a Recipe.
            pydantic.ValidationError: If a set value has the wrong type or is
                out of range (e.g. duration above 65535).
        """
        self._ensure_open()

        for field in REQUIRED_FIELDS:
            if field not in self._fields:
                logger.debug(
                    f"Cannot build recipe: missing required field '{field}'",
                    extra={"field": field, "recipe_id": str(self._fields.get("id", ""))},
                )
                raise MissingFieldError(field)

        recipe = Recipe(
            **self._fields,
            ingredients=frozenset(self._ingredients.values()),
            tags=frozenset(self._tags),
            img=self._img if self._img is not None else b"",
        )
        self._consumed = True

        logger.debug(
            f"Built recipe {recipe.id} ({recipe.name!r}): "
            f"{len(recipe.ingredients)} ingredients, {len(recipe.tags)} tags, {len(recipe.img)} image bytes",
            extra={"recipe_id": str(recipe.id)},
        )
        return recipe
