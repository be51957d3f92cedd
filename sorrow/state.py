"""Keys that identify game state, and the static data tied to them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Union


class _OrderedKey(Enum):
    """An enum whose members order by declaration within their own type."""

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value >= other.value


class BuildingKind(_OrderedKey):
    CATNIP_FIELD = 0


class SeasonKind(_OrderedKey):
    SPRING = 0
    SUMMER = 1
    AUTUMN = 2
    WINTER = 3


class Precision(IntEnum):
    """Number of decimals shown for a number; its value is the digit count."""

    TWO_DECIMALS = 2
    THREE_DECIMALS = 3


DEFAULT_PRECISION = Precision.THREE_DECIMALS


class CraftingRecipeKind(_OrderedKey):
    GATHER_CATNIP = 0
    REFINE_CATNIP = 1


class ResourceKind(_OrderedKey):
    CATNIP = 0
    WOOD = 1


class FulfillmentState(Enum):
    UNFULFILLED = "unfulfilled"
    FULFILLED = "fulfilled"
    CAPPED = "capped"


class RunningState(Enum):
    RUNNING = "running"
    PAUSED = "paused"


class NavigationNodeId(_OrderedKey):
    BONFIRE = 0


class ResourceNodeId(_OrderedKey):
    CATNIP = 0
    WOOD = 1


class BonfireNodeId(_OrderedKey):
    GATHER_CATNIP = 0
    REFINE_CATNIP = 1
    CATNIP_FIELD = 2


RecipeKind = Union[CraftingRecipeKind, BuildingKind]
NodeId = Union[NavigationNodeId, ResourceNodeId, BonfireNodeId]


@dataclass(frozen=True)
class ResourceAmount:
    """An amount of one resource."""

    resource: ResourceKind
    amount: float


def recipe_kinds() -> list[RecipeKind]:
    """All recipes: building recipes first, then crafting recipes."""
    return [*BuildingKind, *CraftingRecipeKind]


def node_ids() -> list[NodeId]:
    """All UI nodes: navigation, then resources, then bonfire controls."""
    return [*NavigationNodeId, *ResourceNodeId, *BonfireNodeId]


BUILDING_PRICE_RATIOS: Mapping[BuildingKind, float] = MappingProxyType(
    {BuildingKind.CATNIP_FIELD: 1.12}
)

BUILDING_UNLOCK_RATIOS: Mapping[BuildingKind, float] = MappingProxyType(
    {BuildingKind.CATNIP_FIELD: 0.3}
)

RECIPE_INGREDIENTS: Mapping[RecipeKind, tuple[ResourceAmount, ...]] = MappingProxyType(
    {
        CraftingRecipeKind.GATHER_CATNIP: (),
        CraftingRecipeKind.REFINE_CATNIP: (ResourceAmount(ResourceKind.CATNIP, 100.0),),
        BuildingKind.CATNIP_FIELD: (ResourceAmount(ResourceKind.CATNIP, 10.0),),
    }
)

RECIPE_CRAFTED_RESOURCES: Mapping[CraftingRecipeKind, ResourceAmount] = MappingProxyType(
    {
        CraftingRecipeKind.GATHER_CATNIP: ResourceAmount(ResourceKind.CATNIP, 1.0),
        CraftingRecipeKind.REFINE_CATNIP: ResourceAmount(ResourceKind.WOOD, 1.0),
    }
)

CRAFTED_RESOURCES: Mapping[ResourceKind, CraftingRecipeKind] = MappingProxyType(
    {ResourceKind.WOOD: CraftingRecipeKind.REFINE_CATNIP}
)

RESOURCE_BASE_CAPACITY: Mapping[ResourceKind, float] = MappingProxyType(
    {ResourceKind.CATNIP: 5000.0, ResourceKind.WOOD: 200.0}
)


def ingredient_keys() -> list[tuple[RecipeKind, ResourceKind]]:
    """Every (recipe, ingredient resource) pair that has a required amount."""
    return [
        (recipe, ingredient.resource)
        for recipe, ingredients in RECIPE_INGREDIENTS.items()
        for ingredient in ingredients
    ]


_RECIPE_NODES: Mapping[RecipeKind, BonfireNodeId] = MappingProxyType(
    {
        CraftingRecipeKind.GATHER_CATNIP: BonfireNodeId.GATHER_CATNIP,
        CraftingRecipeKind.REFINE_CATNIP: BonfireNodeId.REFINE_CATNIP,
        BuildingKind.CATNIP_FIELD: BonfireNodeId.CATNIP_FIELD,
    }
)

_RESOURCE_NODES: Mapping[ResourceKind, ResourceNodeId] = MappingProxyType(
    {
        ResourceKind.CATNIP: ResourceNodeId.CATNIP,
        ResourceKind.WOOD: ResourceNodeId.WOOD,
    }
)

_NODE_RESOURCES: Mapping[ResourceNodeId, ResourceKind] = MappingProxyType(
    {node: resource for resource, node in _RESOURCE_NODES.items()}
)


def node_for_recipe(recipe: RecipeKind) -> BonfireNodeId:
    """The UI node that controls a recipe."""
    try:
        return _RECIPE_NODES[recipe]
    except KeyError:
        raise ValueError(f"not a recipe: {recipe!r}") from None


def node_for_resource(resource: ResourceKind) -> ResourceNodeId:
    """The UI node that shows a resource."""
    try:
        return _RESOURCE_NODES[resource]
    except KeyError:
        raise ValueError(f"not a resource: {resource!r}") from None


def resource_for_node(node: ResourceNodeId) -> ResourceKind:
    """The resource shown by a resource node."""
    try:
        return _NODE_RESOURCES[node]
    except KeyError:
        raise ValueError(f"not a resource node: {node!r}") from None


_INITIALLY_VISIBLE = frozenset(
    {
        NavigationNodeId.BONFIRE,
        BonfireNodeId.GATHER_CATNIP,
        BonfireNodeId.REFINE_CATNIP,
    }
)

NODE_VISIBILITY: Mapping[NodeId, bool] = MappingProxyType(
    {node: node in _INITIALLY_VISIBLE for node in node_ids()}
)