"""Interface-side mirror of the engine state, kept current from engine messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .communication import (
    BuildingTransport,
    CalendarTransport,
    EngineMessage,
    EngineUpdate,
    FulfillmentTransport,
    Loaded,
    ResourceTransport,
    TimeTransport,
    Updated,
    VisibilityTransport,
)
from .state import (
    DEFAULT_PRECISION,
    RECIPE_INGREDIENTS,
    BuildingKind,
    FulfillmentState,
    NodeId,
    Precision,
    RecipeKind,
    ResourceKind,
    ResourceNodeId,
    RunningState,
    SeasonKind,
    node_ids,
    recipe_kinds,
    resource_for_node,
)

_log = logging.getLogger(__name__)


@dataclass
class BuildingEntry:
    building: BuildingKind
    level: int = 0


@dataclass
class CalendarEntry:
    day: int = 0
    season: SeasonKind = SeasonKind.SPRING
    year: int = 0


@dataclass
class IngredientEntry:
    resource: ResourceKind
    required_amount: float


@dataclass
class FulfillmentEntry:
    recipe: RecipeKind
    fulfillment: FulfillmentState = FulfillmentState.UNFULFILLED
    ingredients: dict[ResourceKind, IngredientEntry] = field(default_factory=dict)


@dataclass
class Preferences:
    precision: Precision = DEFAULT_PRECISION


@dataclass
class ResourceEntry:
    resource: ResourceKind
    amount: float = 0.0
    delta: float = 0.0
    capacity: Optional[float] = None


@dataclass
class UiEntry:
    node: NodeId
    visible: bool = False


def _initial_fulfillment(recipe: RecipeKind) -> FulfillmentEntry:
    items = sorted(RECIPE_INGREDIENTS[recipe], key=lambda item: item.resource)
    return FulfillmentEntry(
        recipe=recipe,
        ingredients={
            item.resource: IngredientEntry(item.resource, item.amount) for item in items
        },
    )


@dataclass
class GlobalStore:
    """Everything the interface knows about the game."""

    is_loaded: bool = False
    buildings: dict[BuildingKind, BuildingEntry] = field(
        default_factory=lambda: {kind: BuildingEntry(kind) for kind in BuildingKind}
    )
    calendar: CalendarEntry = field(default_factory=CalendarEntry)
    fulfillments: dict[RecipeKind, FulfillmentEntry] = field(
        default_factory=lambda: {
            recipe: _initial_fulfillment(recipe) for recipe in recipe_kinds()
        }
    )
    preferences: Preferences = field(default_factory=Preferences)
    resources: dict[ResourceKind, ResourceEntry] = field(
        default_factory=lambda: {kind: ResourceEntry(kind) for kind in ResourceKind}
    )
    running_state: RunningState = RunningState.RUNNING
    ui: dict[NodeId, UiEntry] = field(
        default_factory=lambda: {node: UiEntry(node) for node in node_ids()}
    )

    def apply(self, message: EngineMessage) -> None:
        """Take in one engine message; an update batch marks the store loaded."""
        if isinstance(message, Loaded):
            _log.info("Loaded.")
        elif isinstance(message, Updated):
            for update in message.updates:
                self.apply_update(update)
            self.is_loaded = True
        else:
            raise TypeError(f"not an engine message: {message!r}")

    def apply_update(self, update: EngineUpdate) -> None:
        """Copy every value set in one update into the store."""
        if isinstance(update, CalendarTransport):
            if update.day is not None:
                self.calendar.day = update.day
            if update.season is not None:
                self.calendar.season = update.season
            if update.year is not None:
                self.calendar.year = update.year
        elif isinstance(update, BuildingTransport):
            for building, level in update.levels.present():
                if building in self.buildings:
                    self.buildings[building].level = level
        elif isinstance(update, FulfillmentTransport):
            for recipe, fulfillment in update.fulfillments.present():
                if recipe in self.fulfillments:
                    self.fulfillments[recipe].fulfillment = fulfillment
            for (recipe, resource), required in update.required_amounts.present():
                entry = self.fulfillments.get(recipe)
                if entry is not None and resource in entry.ingredients:
                    entry.ingredients[resource].required_amount = required
        elif isinstance(update, ResourceTransport):
            for resource, amount in update.amounts.present():
                if resource in self.resources:
                    self.resources[resource].amount = amount
            for resource, delta in update.deltas.present():
                if resource in self.resources:
                    self.resources[resource].delta = delta
            for resource, capacity in update.capacities.present():
                if resource in self.resources:
                    self.resources[resource].capacity = capacity
        elif isinstance(update, TimeTransport):
            if update.running_state is not None:
                self.running_state = update.running_state
        elif isinstance(update, VisibilityTransport):
            for node, visible in update.nodes.present():
                if node in self.ui:
                    self.ui[node].visible = visible
        else:
            raise TypeError(f"not an engine update: {update!r}")

    def visible_resources(self) -> list[ResourceEntry]:
        """The resources whose interface node is visible, in node order."""
        return [
            self.resources[resource_for_node(node)]
            for node in ResourceNodeId
            if self.ui[node].visible
        ]