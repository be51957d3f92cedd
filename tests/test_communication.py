import pytest

from sorrow.communication import (
    BuildingTransport,
    CalendarTransport,
    FulfillmentTransport,
    QueueWorkOrderIntent,
    ResourceTransport,
    StateTable,
    TimeControl,
    TimeControlIntent,
    TimeTransport,
    Updated,
    VisibilityTransport,
    WorkOrderKind,
)
from sorrow.state import (
    BuildingKind,
    CraftingRecipeKind,
    FulfillmentState,
    ResourceKind,
    ingredient_keys,
    node_ids,
    recipe_kinds,
)


def test_state_table_starts_unset():
    table = StateTable(ResourceKind)
    assert list(table) == [(ResourceKind.CATNIP, None), (ResourceKind.WOOD, None)]
    assert list(table.present()) == []
    assert len(table) == len(ResourceKind)


def test_state_table_set_and_get():
    table = StateTable(ResourceKind)
    table[ResourceKind.WOOD] = 200.0
    assert table[ResourceKind.WOOD] == 200.0
    assert table[ResourceKind.CATNIP] is None
    assert list(table.present()) == [(ResourceKind.WOOD, 200.0)]


def test_state_table_rejects_unknown_keys():
    table = StateTable(ResourceKind)
    with pytest.raises(KeyError):
        table[BuildingKind.CATNIP_FIELD] = 1
    with pytest.raises(KeyError):
        table[BuildingKind.CATNIP_FIELD]
    assert BuildingKind.CATNIP_FIELD not in table


def test_state_table_equality():
    first = StateTable(ResourceKind)
    second = StateTable(ResourceKind)
    assert first == second
    first[ResourceKind.CATNIP] = 1.0
    assert first != second


def test_transports_cover_every_key():
    assert [key for key, _ in BuildingTransport().levels] == list(BuildingKind)
    fulfillment = FulfillmentTransport()
    assert [key for key, _ in fulfillment.fulfillments] == recipe_kinds()
    assert [key for key, _ in fulfillment.required_amounts] == ingredient_keys()
    assert [key for key, _ in VisibilityTransport().nodes] == node_ids()
    resources = ResourceTransport()
    assert len(resources.capacities) == len(ResourceKind)


def test_transports_do_not_share_tables():
    first = FulfillmentTransport()
    second = FulfillmentTransport()
    first.fulfillments[BuildingKind.CATNIP_FIELD] = FulfillmentState.CAPPED
    assert second.fulfillments[BuildingKind.CATNIP_FIELD] is None


def test_optional_transports_default_to_unset():
    calendar = CalendarTransport()
    assert (calendar.day, calendar.season, calendar.year) == (None, None, None)
    assert TimeTransport().running_state is None


def test_work_order_kinds():
    craft = WorkOrderKind.craft(CraftingRecipeKind.REFINE_CATNIP)
    build = WorkOrderKind.construct(BuildingKind.CATNIP_FIELD)
    assert craft.recipe is CraftingRecipeKind.REFINE_CATNIP
    assert not craft.is_construction
    assert build.is_construction
    assert build == WorkOrderKind(BuildingKind.CATNIP_FIELD)


def test_work_order_rejects_wrong_targets():
    with pytest.raises(TypeError):
        WorkOrderKind(ResourceKind.CATNIP)
    with pytest.raises(TypeError):
        WorkOrderKind.craft(BuildingKind.CATNIP_FIELD)
    with pytest.raises(TypeError):
        WorkOrderKind.construct(CraftingRecipeKind.GATHER_CATNIP)


def test_intents_are_hashable_values():
    kind = WorkOrderKind.craft(CraftingRecipeKind.GATHER_CATNIP)
    intents = {QueueWorkOrderIntent(kind), QueueWorkOrderIntent(kind)}
    assert len(intents) == 1
    assert TimeControlIntent(TimeControl.PAUSE).control is TimeControl.PAUSE


def test_updated_defaults_to_empty_batch():
    assert Updated().updates == []