"""Recipes, their ingredient costs, and whether they can currently be made."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional

from .communication import FulfillmentTransport
from .state import (
    BUILDING_PRICE_RATIOS,
    BUILDING_UNLOCK_RATIOS,
    RECIPE_CRAFTED_RESOURCES,
    RECIPE_INGREDIENTS,
    BuildingKind,
    FulfillmentState,
    RecipeKind,
    ResourceAmount,
    ResourceKind,
    recipe_kinds,
)

if TYPE_CHECKING:
    from .buildings import Buildings
    from .resources import Resources


@dataclass
class Ingredient:
    """One resource a recipe consumes, with its base and current cost."""

    resource: ResourceKind
    base_amount: float
    required_amount: float
    required_changed: bool = field(default=True, repr=False)


@dataclass
class Recipe:
    """A recipe: what it costs, what it yields and whether it can be made."""

    kind: RecipeKind
    ingredients: tuple[Ingredient, ...] = ()
    crafted: Optional[ResourceAmount] = None
    price_ratio: Optional[float] = None
    unlock_ratio: Optional[float] = None
    unlocked: Optional[bool] = None
    fulfillment: FulfillmentState = FulfillmentState.UNFULFILLED
    fulfillment_changed: bool = field(default=True, repr=False)
    unlocked_changed: bool = field(default=True, repr=False)


def _spawn(kind: RecipeKind) -> Recipe:
    ingredients = tuple(
        Ingredient(item.resource, item.amount, item.amount)
        for item in RECIPE_INGREDIENTS[kind]
    )
    if isinstance(kind, BuildingKind):
        unlock_ratio = BUILDING_UNLOCK_RATIOS.get(kind)
        return Recipe(
            kind=kind,
            ingredients=ingredients,
            price_ratio=BUILDING_PRICE_RATIOS[kind],
            unlock_ratio=unlock_ratio,
            unlocked=None if unlock_ratio is None else False,
        )
    return Recipe(
        kind=kind,
        ingredients=ingredients,
        crafted=RECIPE_CRAFTED_RESOURCES[kind],
    )


class Recipes:
    """Every recipe in the game, keyed by recipe kind."""

    def __init__(self) -> None:
        self._recipes: dict[RecipeKind, Recipe] = {
            kind: _spawn(kind) for kind in recipe_kinds()
        }

    def __getitem__(self, kind: RecipeKind) -> Recipe:
        return self._recipes[kind]

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes.values())

    def __len__(self) -> int:
        return len(self._recipes)

    def recalculate_costs(self, buildings: Buildings) -> None:
        """Scale building costs by their price ratio for buildings whose level changed."""
        for building in buildings:
            if not building.level_changed:
                continue
            recipe = self._recipes[building.kind]
            if recipe.price_ratio is None:
                raise ValueError(f"building recipe has no price ratio: {building.kind!r}")
            for ingredient in recipe.ingredients:
                ingredient.required_amount = (
                    ingredient.base_amount * recipe.price_ratio ** building.level
                )
                ingredient.required_changed = True

    def _evaluate(self, recipe: Recipe, resources: Resources) -> FulfillmentState:
        for ingredient in recipe.ingredients:
            state = resources[ingredient.resource]
            if state.crafted is not None:
                return self._evaluate(self._recipes[state.crafted], resources)
            if state.capacity is not None and ingredient.required_amount > state.capacity:
                return FulfillmentState.CAPPED
            if state.amount < ingredient.required_amount:
                return FulfillmentState.UNFULFILLED
        return FulfillmentState.FULFILLED

    def recalculate_fulfillments(self, resources: Resources) -> None:
        """Work out whether each recipe can be made with the resources at hand."""
        calculated = {
            kind: self._evaluate(recipe, resources) for kind, recipe in self._recipes.items()
        }
        for kind, new_state in calculated.items():
            recipe = self._recipes[kind]
            if recipe.fulfillment is not new_state:
                recipe.fulfillment = new_state
                recipe.fulfillment_changed = True

    def recalculate_unlocks(self, resources: Resources) -> None:
        """Unlock recipes once any ingredient stock reaches its unlock share of the cost."""
        for recipe in self:
            if recipe.unlock_ratio is None or recipe.unlocked:
                continue
            for ingredient in recipe.ingredients:
                amount = resources[ingredient.resource].amount
                if amount >= ingredient.required_amount * recipe.unlock_ratio:
                    recipe.unlocked = True
                    recipe.unlocked_changed = True
                    break

    def collect_changes(self) -> Optional[FulfillmentTransport]:
        """A transport of fulfillments and costs changed since the last clear, or None."""
        transport = FulfillmentTransport()
        has_changes = False
        for recipe in self:
            if recipe.fulfillment_changed:
                transport.fulfillments[recipe.kind] = recipe.fulfillment
                has_changes = True
            for ingredient in recipe.ingredients:
                if ingredient.required_changed:
                    transport.required_amounts[(recipe.kind, ingredient.resource)] = (
                        ingredient.required_amount
                    )
                    has_changes = True
        return transport if has_changes else None

    def clear_changes(self) -> None:
        for recipe in self:
            recipe.fulfillment_changed = False
            recipe.unlocked_changed = False
            for ingredient in recipe.ingredients:
                ingredient.required_changed = False