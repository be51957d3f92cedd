import pytest

from sorrow.communication import (
    BuildingTransport,
    CalendarTransport,
    FulfillmentTransport,
    Loaded,
    LoadIntent,
    ResourceTransport,
    TimeTransport,
    Updated,
    VisibilityTransport,
)
from sorrow.engine import Engine
from sorrow.state import (
    NODE_VISIBILITY,
    RECIPE_INGREDIENTS,
    BonfireNodeId,
    BuildingKind,
    CraftingRecipeKind,
    FulfillmentState,
    ResourceKind,
    ResourceNodeId,
    RunningState,
    SeasonKind,
    node_ids,
    recipe_kinds,
)
from sorrow.store import GlobalStore


def test_default_store_covers_every_key():
    store = GlobalStore()
    assert store.is_loaded is False
    assert list(store.buildings) == list(BuildingKind)
    assert all(entry.level == 0 for entry in store.buildings.values())
    assert set(store.fulfillments) == set(recipe_kinds())
    assert list(store.resources) == list(ResourceKind)
    assert list(store.ui) == node_ids()
    assert not any(entry.visible for entry in store.ui.values())
    assert store.running_state is RunningState.RUNNING
    assert store.calendar.season is SeasonKind.SPRING


def test_default_ingredients_follow_recipe_data():
    store = GlobalStore()
    for recipe, items in RECIPE_INGREDIENTS.items():
        ingredients = store.fulfillments[recipe].ingredients
        assert {k: v.required_amount for k, v in ingredients.items()} == {
            item.resource: item.amount for item in items
        }


def test_loaded_does_not_mark_store_loaded():
    store = GlobalStore()
    store.apply(Loaded())
    assert store.is_loaded is False


def test_updated_marks_store_loaded():
    store = GlobalStore()
    store.apply(Updated([]))
    assert store.is_loaded is True


def test_unknown_message_raises():
    with pytest.raises(TypeError):
        GlobalStore().apply("nope")


def test_unknown_update_raises():
    with pytest.raises(TypeError):
        GlobalStore().apply_update(42)


def test_calendar_update_sets_only_given_parts():
    store = GlobalStore()
    store.apply_update(CalendarTransport(season=SeasonKind.AUTUMN))
    assert store.calendar.season is SeasonKind.AUTUMN
    assert store.calendar.day == 0
    store.apply_update(CalendarTransport(day=7, year=3))
    assert (store.calendar.day, store.calendar.year) == (7, 3)
    assert store.calendar.season is SeasonKind.AUTUMN


def test_building_update():
    store = GlobalStore()
    transport = BuildingTransport()
    transport.levels[BuildingKind.CATNIP_FIELD] = 4
    store.apply_update(transport)
    assert store.buildings[BuildingKind.CATNIP_FIELD].level == 4


def test_fulfillment_update():
    store = GlobalStore()
    transport = FulfillmentTransport()
    transport.fulfillments[CraftingRecipeKind.REFINE_CATNIP] = FulfillmentState.CAPPED
    transport.required_amounts[(BuildingKind.CATNIP_FIELD, ResourceKind.CATNIP)] = 11.2
    store.apply_update(transport)
    assert (
        store.fulfillments[CraftingRecipeKind.REFINE_CATNIP].fulfillment
        is FulfillmentState.CAPPED
    )
    ingredient = store.fulfillments[BuildingKind.CATNIP_FIELD].ingredients[ResourceKind.CATNIP]
    assert ingredient.required_amount == 11.2
    assert (
        store.fulfillments[CraftingRecipeKind.GATHER_CATNIP].fulfillment
        is FulfillmentState.UNFULFILLED
    )


def test_resource_update():
    store = GlobalStore()
    transport = ResourceTransport()
    transport.amounts[ResourceKind.WOOD] = 12.5
    transport.deltas[ResourceKind.CATNIP] = 0.25
    transport.capacities[ResourceKind.CATNIP] = 5000.0
    store.apply_update(transport)
    assert store.resources[ResourceKind.WOOD].amount == 12.5
    assert store.resources[ResourceKind.CATNIP].delta == 0.25
    assert store.resources[ResourceKind.CATNIP].capacity == 5000.0
    assert store.resources[ResourceKind.WOOD].capacity is None


def test_time_update():
    store = GlobalStore()
    store.apply_update(TimeTransport(RunningState.PAUSED))
    assert store.running_state is RunningState.PAUSED
    store.apply_update(TimeTransport())
    assert store.running_state is RunningState.PAUSED


def test_visible_resources_follow_ui():
    store = GlobalStore()
    assert store.visible_resources() == []
    transport = VisibilityTransport()
    transport.nodes[ResourceNodeId.WOOD] = True
    transport.nodes[ResourceNodeId.CATNIP] = True
    store.apply_update(transport)
    kinds = [entry.resource for entry in store.visible_resources()]
    assert kinds == [ResourceKind.CATNIP, ResourceKind.WOOD]


def test_store_mirrors_engine_after_first_frame():
    engine = Engine()
    engine.send(LoadIntent())
    store = GlobalStore()
    for message in engine.update(0.0):
        store.apply(message)
    assert store.is_loaded is True
    assert {node: entry.visible for node, entry in store.ui.items()} == dict(NODE_VISIBILITY)
    assert store.ui[BonfireNodeId.GATHER_CATNIP].visible is True
    for kind in ResourceKind:
        assert store.resources[kind].capacity == engine.resources[kind].capacity