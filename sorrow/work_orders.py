"""Processing of queued work orders against resource ledgers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from .communication import WorkOrderKind
from .resources import total
from .state import BuildingKind, ResourceKind

if TYPE_CHECKING:
    from .buildings import Buildings
    from .fulfillment import Recipes
    from .resources import Resources


@dataclass
class ResourceDelta:
    """Gains (debit) and losses (credit) booked for one resource."""

    debit: float = 0.0
    credit: float = 0.0


class DeltaSetStack:
    """Layered ledger changes; the top layer can be discarded as a whole."""

    def __init__(self) -> None:
        self._stack: list[dict[ResourceKind, ResourceDelta]] = [{}]

    def push_new(self) -> None:
        self._stack.append({})

    def _check_layered(self) -> None:
        if len(self._stack) <= 1:
            raise RuntimeError("delta set stack has only its base layer")

    def roll_back(self) -> None:
        """Discard the top layer."""
        self._check_layered()
        self._stack.pop()

    def commit(self) -> None:
        """Keep the top layer."""
        self._check_layered()

    def debit(self, kind: ResourceKind) -> float:
        return sum(layer[kind].debit for layer in self._stack if kind in layer)

    def credit(self, kind: ResourceKind) -> float:
        return sum(layer[kind].credit for layer in self._stack if kind in layer)

    def collect(self) -> list[tuple[ResourceKind, ResourceDelta]]:
        """The per-resource totals over all layers."""
        merged: dict[ResourceKind, ResourceDelta] = {}
        for layer in self._stack:
            for kind, delta in layer.items():
                entry = merged.setdefault(kind, ResourceDelta())
                entry.debit += delta.debit
                entry.credit += delta.credit
        return list(merged.items())

    def _top(self, kind: ResourceKind) -> ResourceDelta:
        return self._stack[-1].setdefault(kind, ResourceDelta())

    def add_debit(self, kind: ResourceKind, amount: float) -> None:
        self._top(kind).debit += amount

    def add_credit(self, kind: ResourceKind, amount: float) -> None:
        self._top(kind).credit += amount


def process_work_orders(
    orders: Iterable[WorkOrderKind],
    resources: Resources,
    buildings: Buildings,
    recipes: Recipes,
) -> None:
    """Book the costs and yields of every affordable order into the resource ledgers.

    Orders that cannot be paid for are dropped without effect.
    """
    deltas = DeltaSetStack()
    for state in resources:
        deltas.add_debit(state.kind, state.debit)
        deltas.add_credit(state.kind, state.credit)

    for order in orders:
        deltas.push_new()
        recipe = recipes[order.recipe]

        fulfilled = True
        for ingredient in recipe.ingredients:
            deltas.add_credit(ingredient.resource, ingredient.required_amount)
            state = resources[ingredient.resource]
            available = total(state.amount, state.debit, state.credit, state.capacity)
            if available - deltas.credit(ingredient.resource) < 0.0:
                fulfilled = False
                break

        if fulfilled:
            if isinstance(order.target, BuildingKind):
                buildings.construct(order.target)
            elif recipe.crafted is not None:
                deltas.add_debit(recipe.crafted.resource, recipe.crafted.amount)
            deltas.commit()
        else:
            deltas.roll_back()

    # The stack started from the original ledgers, so overwriting is correct.
    for kind, delta in deltas.collect():
        state = resources[kind]
        state.debit = delta.debit
        state.credit = delta.credit