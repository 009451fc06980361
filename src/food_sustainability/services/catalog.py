"""Read-only recipe catalog keyed by primary ingredient."""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from food_sustainability.domain.errors import InvalidInputError
from food_sustainability.domain.recipes import Recipe


@dataclass(frozen=True)
class RecipeCatalog:
    """Immutable mapping of lower-cased primary ingredient to recipes."""

    _recipes: Mapping[str, tuple[Recipe, ...]] = field(repr=False)

    @classmethod
    def from_mapping(cls, recipes: Mapping[str, Sequence[Recipe]]) -> "RecipeCatalog":
        """Build a catalog, normalising keys to lower case."""
        entries: dict[str, tuple[Recipe, ...]] = {}
        for key, values in recipes.items():
            if not isinstance(key, str) or not key.strip():
                raise InvalidInputError("catalog", "ingredient keys must be non-empty")
            recipes_for_key = tuple(values)
            for recipe in recipes_for_key:
                if not isinstance(recipe, Recipe):
                    raise InvalidInputError(
                        "catalog", f"expected Recipe under {key!r}, got {recipe!r}"
                    )
            normalized = key.strip().lower()
            entries[normalized] = entries.get(normalized, ()) + recipes_for_key
        return cls(MappingProxyType(entries))

    def recipes_for(self, ingredient: str) -> tuple[Recipe, ...]:
        """Return recipes keyed by an ingredient name, empty when none."""
        return self._recipes.get(ingredient.strip().lower(), ())

    def find(self, name: str) -> Recipe | None:
        """Return the recipe with the given name, ignoring case."""
        wanted = name.strip().lower()
        for recipe in self:
            if recipe.name.lower() == wanted:
                return recipe
        return None

    def search(self, ingredient: str) -> list[Recipe]:
        """Return recipes with an ingredient containing the given text."""
        wanted = ingredient.strip().lower()
        return [
            recipe
            for recipe in self
            if any(wanted in item.lower() for item in recipe.ingredients)
        ]

    def keys(self) -> list[str]:
        return list(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        for recipes in self._recipes.values():
            yield from recipes

    def __len__(self) -> int:
        return sum(len(recipes) for recipes in self._recipes.values())


def _recipe(
    name: str, ingredients: list[str], time: str, difficulty: str, instructions: str
) -> Recipe:
    return Recipe(
        name=name,
        ingredients=tuple(ingredients),
        time=time,
        difficulty=difficulty,
        instructions=instructions,
    )


DEFAULT_CATALOG = RecipeCatalog.from_mapping(
    {
        "yogurt": [
            _recipe(
                "Yogurt Parfait",
                ["yogurt", "granola", "berries"],
                "5 min",
                "Easy",
                "Layer yogurt, granola, and berries in a bowl",
            ),
            _recipe(
                "Yogurt Smoothie",
                ["yogurt", "banana", "berries", "milk"],
                "10 min",
                "Easy",
                "Blend all ingredients until smooth",
            ),
            _recipe(
                "Tzatziki Sauce",
                ["yogurt", "cucumber", "garlic", "dill"],
                "15 min",
                "Easy",
                "Mix yogurt with grated cucumber, garlic, and dill",
            ),
        ],
        "carrots": [
            _recipe(
                "Carrot Stir Fry",
                ["carrots", "oil", "garlic", "soy sauce"],
                "15 min",
                "Easy",
                "Stir fry sliced carrots with garlic and soy sauce",
            ),
            _recipe(
                "Carrot Soup",
                ["carrots", "onion", "vegetable broth", "cream"],
                "30 min",
                "Medium",
                "Boil carrots and onion, blend with broth and cream",
            ),
            _recipe(
                "Raw Carrot Salad",
                ["carrots", "apple", "lemon juice", "oil"],
                "10 min",
                "Easy",
                "Shred carrots and apples, dress with lemon and oil",
            ),
        ],
        "rice": [
            _recipe(
                "Vegetable Fried Rice",
                ["rice", "carrots", "peas", "eggs", "soy sauce"],
                "20 min",
                "Easy",
                "Stir fry cooked rice with vegetables and soy sauce",
            ),
            _recipe(
                "Rice Bowl",
                ["rice", "vegetables", "protein", "sauce"],
                "25 min",
                "Easy",
                "Serve rice topped with vegetables and protein",
            ),
        ],
        "apples": [
            _recipe(
                "Apple Crisp",
                ["apples", "oats", "butter", "cinnamon"],
                "30 min",
                "Medium",
                "Bake sliced apples with oat topping",
            ),
            _recipe(
                "Apple Smoothie",
                ["apples", "yogurt", "honey"],
                "10 min",
                "Easy",
                "Blend apple with yogurt and honey",
            ),
        ],
    }
)
