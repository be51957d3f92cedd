"""Messages exchanged between the interface and the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Hashable, Iterable, Iterator, Optional, TypeVar, Union

from .state import (
    BuildingKind,
    CraftingRecipeKind,
    RecipeKind,
    ResourceKind,
    RunningState,
    SeasonKind,
    ingredient_keys,
    node_ids,
    recipe_kinds,
)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class StateTable(Generic[K, V]):
    """A fixed set of keys, each holding an optional value.

    Reading or writing a key outside the set raises KeyError.
    """

    __slots__ = ("_entries",)

    def __init__(self, keys: Iterable[K]) -> None:
        self._entries: dict[K, Optional[V]] = dict.fromkeys(keys)

    def __getitem__(self, key: K) -> Optional[V]:
        return self._entries[key]

    def __setitem__(self, key: K, value: Optional[V]) -> None:
        if key not in self._entries:
            raise KeyError(key)
        self._entries[key] = value

    def __iter__(self) -> Iterator[tuple[K, Optional[V]]]:
        """Yield every (key, value) pair, including unset ones."""
        return iter(list(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateTable):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"StateTable({self._entries!r})"

    def present(self) -> Iterator[tuple[K, V]]:
        """Yield the (key, value) pairs whose value is set."""
        for key, value in self._entries.items():
            if value is not None:
                yield key, value


class TimeControl(Enum):
    START = "start"
    PAUSE = "pause"


@dataclass(frozen=True)
class WorkOrderKind:
    """A request to craft a recipe or construct a building."""

    target: RecipeKind

    def __post_init__(self) -> None:
        if not isinstance(self.target, (CraftingRecipeKind, BuildingKind)):
            raise TypeError(f"work order target must be a recipe, got {self.target!r}")

    @classmethod
    def craft(cls, recipe: CraftingRecipeKind) -> WorkOrderKind:
        if not isinstance(recipe, CraftingRecipeKind):
            raise TypeError(f"not a crafting recipe: {recipe!r}")
        return cls(recipe)

    @classmethod
    def construct(cls, building: BuildingKind) -> WorkOrderKind:
        if not isinstance(building, BuildingKind):
            raise TypeError(f"not a building: {building!r}")
        return cls(building)

    @property
    def is_construction(self) -> bool:
        return isinstance(self.target, BuildingKind)

    @property
    def recipe(self) -> RecipeKind:
        """The recipe this work order uses."""
        return self.target


@dataclass(frozen=True)
class LoadIntent:
    """Starts the game session."""


@dataclass(frozen=True)
class TimeControlIntent:
    control: TimeControl


@dataclass(frozen=True)
class QueueWorkOrderIntent:
    kind: WorkOrderKind


Intent = Union[LoadIntent, TimeControlIntent, QueueWorkOrderIntent]


@dataclass
class BuildingTransport:
    levels: StateTable[BuildingKind, int] = field(
        default_factory=lambda: StateTable(BuildingKind)
    )


@dataclass
class FulfillmentTransport:
    fulfillments: StateTable = field(default_factory=lambda: StateTable(recipe_kinds()))
    required_amounts: StateTable = field(
        default_factory=lambda: StateTable(ingredient_keys())
    )


@dataclass
class CalendarTransport:
    day: Optional[int] = None
    season: Optional[SeasonKind] = None
    year: Optional[int] = None


@dataclass
class ResourceTransport:
    amounts: StateTable[ResourceKind, float] = field(
        default_factory=lambda: StateTable(ResourceKind)
    )
    deltas: StateTable[ResourceKind, float] = field(
        default_factory=lambda: StateTable(ResourceKind)
    )
    capacities: StateTable[ResourceKind, float] = field(
        default_factory=lambda: StateTable(ResourceKind)
    )


@dataclass
class TimeTransport:
    running_state: Optional[RunningState] = None


@dataclass
class VisibilityTransport:
    nodes: StateTable = field(default_factory=lambda: StateTable(node_ids()))


EngineUpdate = Union[
    CalendarTransport,
    BuildingTransport,
    FulfillmentTransport,
    ResourceTransport,
    TimeTransport,
    VisibilityTransport,
]


@dataclass(frozen=True)
class Loaded:
    """The engine has finished loading."""


@dataclass
class Updated:
    """A batch of state changes from one engine frame."""

    updates: list = field(default_factory=list)


EngineMessage = Union[Loaded, Updated]