# sorrow

A small incremental game simulation. You gather catnip, refine it into wood and build
catnip fields, while a calendar moves through days, seasons and years. The engine runs
fixed simulation steps and reports what changed since the previous frame; a store on the
interface side keeps a copy of the game state from those reports, and a text renderer
shows it.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running from the terminal

```
sorrow
```

The command starts an engine, sends it a load intent, runs a number of frames and then
prints the current date and every resource that has been unlocked, with its amount,
capacity and rate of change. If no frame has run, it prints `Loading...`.

Options:

- `--frames N` – frames to run (default 50).
- `--interval SECONDS` – seconds between frames (default 0.02).
- `--gather N` – catnip gathering orders to queue before the first frame (default 0).
- `--instant` – advance the simulation by the interval each frame without waiting in
  real time.

For example, `sorrow --gather 5 --frames 20 --interval 0.2 --instant` gathers five
catnip and runs four seconds of game time at once.

## Using the library

An `Engine` takes intents through `send` and returns engine messages from
`update(elapsed)`. An `Endpoint` hands those messages to a callback, either one frame at a
time with `tick(elapsed)` or in a real-time loop with `run(interval, frames)`:

```python
from sorrow.app import render_calendar, render_resources
from sorrow.communication import LoadIntent, QueueWorkOrderIntent, WorkOrderKind
from sorrow.engine import Endpoint, Engine
from sorrow.state import CraftingRecipeKind
from sorrow.store import GlobalStore

store = GlobalStore()
endpoint = Endpoint(store.apply, Engine())

endpoint.send(LoadIntent())
endpoint.send(QueueWorkOrderIntent(WorkOrderKind.craft(CraftingRecipeKind.GATHER_CATNIP)))
for _ in range(10):
    endpoint.tick(0.2)

print(render_calendar(store))
print(render_resources(store))
```

The intents are `LoadIntent`, `TimeControlIntent` (with `TimeControl.START` or
`TimeControl.PAUSE`) and `QueueWorkOrderIntent` (with `WorkOrderKind.craft(...)` or
`WorkOrderKind.construct(...)`). The engine answers with `Loaded` and, every frame, an
`Updated` message holding the transports that changed. `GlobalStore.apply` takes these
messages in.

Numbers are shown with magnitude suffixes (K, M, G, ...) by
`sorrow.formatter.format_number`, with a precision from `sorrow.state.Precision` and a
sign mode from `sorrow.formatter.ShowSign`.

## Game rules in brief

- Gathering catnip costs nothing and gives one catnip.
- Refining catnip costs 100 catnip and gives one wood.
- A catnip field costs 10 catnip, and each one built makes the next 1.12 times dearer.
  Every field adds 0.125 catnip per tick.
- Catnip is capped at 5000 and wood at 200.
- A tick takes 0.2 seconds, a day passes every 10 ticks, a season lasts 100 days, and a
  new year begins after winter.
- A resource becomes visible once you hold some of it; the catnip field becomes visible
  once your catnip reaches 30% of its cost.

## What it does not do

There is no interactive screen: the command queues its orders up front and prints the
state once at the end, and the time control intents are reported back but do not stop
the simulation. Game state is not saved between runs, and labels are plain English only.