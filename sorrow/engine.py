"""The game engine: one frame of input, simulation and change reporting at a time."""

from __future__ import annotations

import math
import time
from typing import Callable, Optional

from .buildings import Buildings
from .calendar import Calendar
from .communication import (
    EngineMessage,
    EngineUpdate,
    Intent,
    Loaded,
    LoadIntent,
    QueueWorkOrderIntent,
    TimeControl,
    TimeControlIntent,
    TimeTransport,
    Updated,
    WorkOrderKind,
)
from .fulfillment import Recipes
from .resources import Resources
from .state import RunningState
from .ticker import FIXED_HZ, Ticker, TickRate
from .visibility import Visibility
from .work_orders import process_work_orders

_NANOS_PER_SECOND = 1_000_000_000
FIXED_TIMESTEP_NS = round(_NANOS_PER_SECOND / FIXED_HZ)
"""Length of one fixed simulation step, in nanoseconds."""

MAX_DELTA_NS = 250_000_000
"""Longest stretch of real time a single frame may account for."""

DEFAULT_FRAME_INTERVAL = 0.02
"""Target seconds between frames when running continuously."""

_ASAP = 0.001

_INTENT_TYPES = (LoadIntent, TimeControlIntent, QueueWorkOrderIntent)

_RUNNING_STATES = {
    TimeControl.PAUSE: RunningState.PAUSED,
    TimeControl.START: RunningState.RUNNING,
}


def _to_nanos(seconds: float) -> int:
    if math.isnan(seconds) or seconds < 0:
        raise ValueError(f"elapsed time must be a non-negative number, got {seconds!r}")
    if math.isinf(seconds):
        return MAX_DELTA_NS
    return round(seconds * _NANOS_PER_SECOND)


class Engine:
    """Holds the whole simulation and advances it frame by frame.

    Each frame resolves queued intents, runs as many fixed simulation steps
    as the elapsed time allows, recalculates visibility and reports every
    change since the previous frame.
    """

    def __init__(self) -> None:
        self.tick_rate = TickRate()
        self.ticker = Ticker(1)
        self.calendar = Calendar()
        self.resources = Resources()
        self.buildings = Buildings()
        self.recipes = Recipes()
        self.visibility = Visibility()
        self._inputs: list[Intent] = []
        self._work_orders: list[WorkOrderKind] = []
        self._overstep_ns = 0

    def send(self, intent: Intent) -> None:
        """Queue an intent to be resolved at the start of the next frame."""
        if not isinstance(intent, _INTENT_TYPES):
            raise TypeError(f"not an intent: {intent!r}")
        self._inputs.append(intent)

    def update(self, elapsed: float) -> list[EngineMessage]:
        """Run one frame covering ``elapsed`` seconds and return its messages."""
        delta_ns = min(_to_nanos(elapsed), MAX_DELTA_NS)

        outputs: list[EngineMessage] = []
        updates: list[EngineUpdate] = []
        self._resolve_intents(outputs, updates)

        self._overstep_ns += delta_ns
        while self._overstep_ns >= FIXED_TIMESTEP_NS:
            self._overstep_ns -= FIXED_TIMESTEP_NS
            self._fixed_step()

        self.visibility.recalculate(self.recipes, self.resources)
        updates.extend(self._buffer_changes())

        outputs.append(Updated(updates))
        return outputs

    def _resolve_intents(
        self, outputs: list[EngineMessage], updates: list[EngineUpdate]
    ) -> None:
        inputs, self._inputs = self._inputs, []
        for intent in inputs:
            if isinstance(intent, LoadIntent):
                outputs.append(Loaded())
            elif isinstance(intent, QueueWorkOrderIntent):
                self._work_orders.append(intent.kind)
            elif isinstance(intent, TimeControlIntent):
                updates.append(TimeTransport(running_state=_RUNNING_STATES[intent.control]))

    def _fixed_step(self) -> None:
        ticks = self.tick_rate.ticks(FIXED_TIMESTEP_NS / _NANOS_PER_SECOND)
        self.ticker.advance(ticks)
        self.calendar.ticker.advance(ticks)

        self.calendar.advance()

        self.resources.add_deltas_to_ledger()

        orders, self._work_orders = self._work_orders, []
        process_work_orders(orders, self.resources, self.buildings, self.recipes)

        self.resources.commit_ledger()
        self.resources.clear_ledger()

        self.resources.recalculate_unlocks()
        self.resources.recalculate_deltas(self.buildings)

        self.recipes.recalculate_costs(self.buildings)
        self.recipes.recalculate_fulfillments(self.resources)
        self.recipes.recalculate_unlocks(self.resources)

    def _buffer_changes(self) -> list[EngineUpdate]:
        sources = (
            self.calendar,
            self.resources,
            self.buildings,
            self.recipes,
            self.visibility,
        )
        changes = [source.collect_changes() for source in sources]
        for source in sources:
            source.clear_changes()
        return [change for change in changes if change is not None]


class Endpoint:
    """A connection to an engine that hands every engine message to a callback."""

    def __init__(
        self,
        callback: Callable[[EngineMessage], None],
        engine: Optional[Engine] = None,
    ) -> None:
        self.callback = callback
        self.engine = engine if engine is not None else Engine()

    def send(self, intent: Intent) -> None:
        self.engine.send(intent)

    def tick(self, elapsed: float) -> list[EngineMessage]:
        """Run one engine frame and deliver its messages to the callback."""
        messages = self.engine.update(elapsed)
        for message in messages:
            self.callback(message)
        return messages

    def run(
        self, interval: float = DEFAULT_FRAME_INTERVAL, frames: Optional[int] = None
    ) -> int:
        """Run frames about ``interval`` seconds apart; forever when ``frames`` is None.

        Returns the number of frames run.
        """
        if interval < 0:
            raise ValueError("interval must not be negative")
        if frames is not None and frames < 0:
            raise ValueError("frames must not be negative")

        count = 0
        previous: Optional[float] = None
        while frames is None or count < frames:
            start = time.monotonic()
            elapsed = 0.0 if previous is None else start - previous
            previous = start

            self.tick(elapsed)
            count += 1

            if frames is not None and count >= frames:
                break
            spent = time.monotonic() - start
            time.sleep(interval - spent if spent < interval else _ASAP)
        return count