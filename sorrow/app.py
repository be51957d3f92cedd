"""Text rendering of the game state and the command that plays it."""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Optional, Sequence

from .communication import LoadIntent, QueueWorkOrderIntent, WorkOrderKind
from .engine import DEFAULT_FRAME_INTERVAL, Endpoint
from .formatter import ShowSign, format_number
from .state import CraftingRecipeKind
from .store import GlobalStore, ResourceEntry

LOADING = "Loading..."


def _label(kind: Enum) -> str:
    return kind.name.replace("_", " ").capitalize()


def _render_resource(entry: ResourceEntry, store: GlobalStore) -> str:
    precision = store.preferences.precision
    amount = format_number(entry.amount, ShowSign.NEGATIVE_ONLY, precision)
    if entry.capacity is not None:
        amount += " / " + format_number(entry.capacity, ShowSign.NEGATIVE_ONLY, precision)
    delta = format_number(entry.delta, ShowSign.ALWAYS, precision)
    return f"{_label(entry.resource)} {amount} {delta}"


def render_resources(store: GlobalStore) -> str:
    """One line per visible resource; empty when none are visible."""
    return "\n".join(_render_resource(entry, store) for entry in store.visible_resources())


def render_calendar(store: GlobalStore) -> str:
    """The current date."""
    calendar = store.calendar
    return f"Year {calendar.year}, {_label(calendar.season)}, day {calendar.day}"


def _render(store: GlobalStore) -> str:
    if not store.is_loaded:
        return LOADING
    parts = [render_calendar(store), render_resources(store)]
    return "\n".join(part for part in parts if part)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game for a number of frames and print where it ended up."""
    parser = argparse.ArgumentParser(prog="sorrow", description="Run the game engine.")
    parser.add_argument("--frames", type=int, default=50, help="frames to run")
    parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_FRAME_INTERVAL,
        help="seconds between frames",
    )
    parser.add_argument(
        "--gather", type=int, default=0, help="catnip gathering orders to queue"
    )
    parser.add_argument(
        "--instant",
        action="store_true",
        help="advance by the interval each frame without waiting",
    )
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")
    if args.interval < 0:
        parser.error("--interval must not be negative")
    if args.gather < 0:
        parser.error("--gather must not be negative")

    store = GlobalStore()
    endpoint = Endpoint(store.apply)
    endpoint.send(LoadIntent())
    order = WorkOrderKind.craft(CraftingRecipeKind.GATHER_CATNIP)
    for _ in range(args.gather):
        endpoint.send(QueueWorkOrderIntent(order))

    if args.instant:
        for _ in range(args.frames):
            endpoint.tick(args.interval)
    else:
        endpoint.run(args.interval, args.frames)

    print(_render(store))
    return 0