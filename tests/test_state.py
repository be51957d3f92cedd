from dataclasses import FrozenInstanceError

import pytest

from sorrow.state import (
    BUILDING_PRICE_RATIOS,
    BUILDING_UNLOCK_RATIOS,
    CRAFTED_RESOURCES,
    NODE_VISIBILITY,
    RECIPE_CRAFTED_RESOURCES,
    RECIPE_INGREDIENTS,
    RESOURCE_BASE_CAPACITY,
    BonfireNodeId,
    BuildingKind,
    CraftingRecipeKind,
    NavigationNodeId,
    ResourceAmount,
    ResourceKind,
    ResourceNodeId,
    SeasonKind,
    ingredient_keys,
    node_for_recipe,
    node_for_resource,
    node_ids,
    recipe_kinds,
    resource_for_node,
)


def test_keys_sort_by_declaration():
    nodes = [node_for_resource(resource) for resource in reversed(list(ResourceKind))]
    assert sorted(nodes) == list(ResourceNodeId)

    resources = [resource_for_node(node) for node in reversed(list(ResourceNodeId))]
    assert sorted(resources) == list(ResourceKind)
    assert resources[0] >= resources[-1]

    assert sorted(reversed(list(SeasonKind))) == [
        SeasonKind.SPRING,
        SeasonKind.SUMMER,
        SeasonKind.AUTUMN,
        SeasonKind.WINTER,
    ]


def test_keys_of_different_types_do_not_compare():
    resource_node = node_for_resource(ResourceKind.CATNIP)
    bonfire_node = node_for_recipe(CraftingRecipeKind.GATHER_CATNIP)
    assert resource_node is ResourceNodeId.CATNIP
    assert bonfire_node is BonfireNodeId.GATHER_CATNIP
    with pytest.raises(TypeError):
        resource_node < bonfire_node  # noqa: B015


def test_recipe_kinds_lists_buildings_then_crafting():
    assert recipe_kinds() == [
        BuildingKind.CATNIP_FIELD,
        CraftingRecipeKind.GATHER_CATNIP,
        CraftingRecipeKind.REFINE_CATNIP,
    ]


def test_node_ids_order_and_completeness():
    nodes = node_ids()
    assert nodes[0] is NavigationNodeId.BONFIRE
    assert nodes[1:3] == list(ResourceNodeId)
    assert nodes[3:] == list(BonfireNodeId)
    assert len(set(nodes)) == len(nodes)


def test_ingredient_keys():
    assert ingredient_keys() == [
        (CraftingRecipeKind.REFINE_CATNIP, ResourceKind.CATNIP),
        (BuildingKind.CATNIP_FIELD, ResourceKind.CATNIP),
    ]


def test_every_recipe_has_ingredients_entry():
    assert set(RECIPE_INGREDIENTS) == set(recipe_kinds())
    assert set(RECIPE_CRAFTED_RESOURCES) == set(CraftingRecipeKind)


def test_crafted_resources_agree_with_recipe_results():
    for resource, recipe in CRAFTED_RESOURCES.items():
        assert RECIPE_CRAFTED_RESOURCES[recipe].resource is resource


def test_static_numbers():
    assert BUILDING_PRICE_RATIOS[BuildingKind.CATNIP_FIELD] == 1.12
    assert BUILDING_UNLOCK_RATIOS[BuildingKind.CATNIP_FIELD] == 0.3
    assert RESOURCE_BASE_CAPACITY[ResourceKind.CATNIP] == 5000.0
    assert RESOURCE_BASE_CAPACITY[ResourceKind.WOOD] == 200.0
    assert RECIPE_INGREDIENTS[CraftingRecipeKind.REFINE_CATNIP] == (
        ResourceAmount(ResourceKind.CATNIP, 100.0),
    )
    assert RECIPE_INGREDIENTS[CraftingRecipeKind.GATHER_CATNIP] == ()


def test_node_for_recipe_maps_to_distinct_bonfire_nodes():
    nodes = [node_for_recipe(recipe) for recipe in recipe_kinds()]
    assert set(nodes) == set(BonfireNodeId)
    assert node_for_recipe(BuildingKind.CATNIP_FIELD) is BonfireNodeId.CATNIP_FIELD


@pytest.mark.parametrize("resource", list(ResourceKind))
def test_resource_node_round_trip(resource):
    assert resource_for_node(node_for_resource(resource)) is resource


def test_invalid_node_lookups_raise():
    with pytest.raises(ValueError):
        node_for_recipe(ResourceKind.CATNIP)
    with pytest.raises(ValueError):
        node_for_resource(BuildingKind.CATNIP_FIELD)
    with pytest.raises(ValueError):
        resource_for_node(BonfireNodeId.GATHER_CATNIP)


def test_initial_node_visibility():
    visible = {node for node, shown in NODE_VISIBILITY.items() if shown}
    assert visible == {
        NavigationNodeId.BONFIRE,
        BonfireNodeId.GATHER_CATNIP,
        BonfireNodeId.REFINE_CATNIP,
    }
    assert list(NODE_VISIBILITY) == node_ids()


def test_resource_amount_is_frozen():
    (ingredient,) = RECIPE_INGREDIENTS[BuildingKind.CATNIP_FIELD]
    with pytest.raises(FrozenInstanceError):
        ingredient.amount = 2.0  # type: ignore[misc]
    assert ingredient.amount == 10.0
    assert ingredient.resource is ResourceKind.CATNIP
    assert RECIPE_INGREDIENTS[BuildingKind.CATNIP_FIELD] == (
        ResourceAmount(ResourceKind.CATNIP, 10.0),
    )