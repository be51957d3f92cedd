"""Resource amounts, their per-tick ledger and capacity handling."""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional

from .communication import ResourceTransport
from .state import (
    CRAFTED_RESOURCES,
    RESOURCE_BASE_CAPACITY,
    BuildingKind,
    CraftingRecipeKind,
    ResourceKind,
)

if TYPE_CHECKING:
    from .buildings import Buildings

_log = logging.getLogger(__name__)

_EPSILON = sys.float_info.epsilon

CATNIP_PER_FIELD = 0.125
"""Catnip gained per tick for each level of catnip field."""


def total(
    current: float, debit: float, credit: float, capacity: Optional[float]
) -> float:
    """The amount after applying losses, then gains up to capacity; never negative."""
    limit = sys.float_info.max if capacity is None else capacity

    new_amount = current - credit
    if new_amount < limit:
        # Gains apply only while under capacity, and never go past it.
        new_amount = min(new_amount + debit, limit)

    return max(new_amount, 0.0)


@dataclass
class ResourceState:
    """One resource: its stock, its rate of change and this tick's ledger."""

    kind: ResourceKind
    amount: float = 0.0
    delta: float = 0.0
    debit: float = 0.0
    credit: float = 0.0
    capacity: Optional[float] = None
    crafted: Optional[CraftingRecipeKind] = None
    unlocked: bool = False
    amount_changed: bool = field(default=True, repr=False)
    delta_changed: bool = field(default=True, repr=False)
    capacity_changed: bool = field(default=True, repr=False)
    unlocked_changed: bool = field(default=True, repr=False)

    def total(self) -> float:
        """The amount this resource would hold after committing its ledger."""
        return total(self.amount, self.debit, self.credit, self.capacity)


class Resources:
    """Every resource in the game, keyed by kind."""

    def __init__(self) -> None:
        self._states: dict[ResourceKind, ResourceState] = {
            kind: ResourceState(
                kind=kind,
                capacity=RESOURCE_BASE_CAPACITY.get(kind),
                crafted=CRAFTED_RESOURCES.get(kind),
            )
            for kind in ResourceKind
        }

    def __getitem__(self, kind: ResourceKind) -> ResourceState:
        return self._states[kind]

    def __iter__(self) -> Iterator[ResourceState]:
        return iter(self._states.values())

    def __len__(self) -> int:
        return len(self._states)

    def add_deltas_to_ledger(self) -> None:
        """Book each resource's delta as a debit or, when negative, a credit."""
        for state in self:
            delta = state.delta
            if math.isnan(delta):
                raise ValueError(f"encountered NaN delta for {state.kind!r}")
            if math.isinf(delta):
                _log.warning("Encountered infinite delta value")
                continue
            if math.copysign(1.0, delta) < 0:
                state.credit += delta
            else:
                state.debit += delta

    def commit_ledger(self) -> None:
        """Apply each ledger to its amount."""
        for state in self:
            new_amount = state.total()
            if abs(state.amount - new_amount) > _EPSILON:
                state.amount = new_amount
                state.amount_changed = True

    def clear_ledger(self) -> None:
        for state in self:
            state.debit = 0.0
            state.credit = 0.0

    def recalculate_unlocks(self) -> None:
        """Unlock every resource whose amount changed to something positive."""
        for state in self:
            if state.amount_changed and state.amount > 0.0:
                state.unlocked = True
                state.unlocked_changed = True

    def recalculate_deltas(self, buildings: Buildings) -> None:
        """Derive production rates from building levels that changed."""
        for state in self:
            if state.kind is ResourceKind.CATNIP:
                field_ = buildings[BuildingKind.CATNIP_FIELD]
                if field_.level_changed:
                    new_delta = CATNIP_PER_FIELD * field_.level
                    if abs(state.delta - new_delta) > _EPSILON:
                        state.delta = new_delta
                        state.delta_changed = True
            # Wood has no passive gain yet.

    def collect_changes(self) -> Optional[ResourceTransport]:
        """A transport of everything changed since the last clear, or None."""
        transport = ResourceTransport()
        has_changes = False
        for state in self:
            if state.amount_changed:
                transport.amounts[state.kind] = state.amount
                has_changes = True
            if state.delta_changed:
                transport.deltas[state.kind] = state.delta
                has_changes = True
            if state.capacity is not None and state.capacity_changed:
                transport.capacities[state.kind] = state.capacity
                has_changes = True
        return transport if has_changes else None

    def clear_changes(self) -> None:
        for state in self:
            state.amount_changed = False
            state.delta_changed = False
            state.capacity_changed = False
            state.unlocked_changed = False