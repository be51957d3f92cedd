"""Buildings and their construction levels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .communication import BuildingTransport
from .state import BuildingKind


@dataclass
class Building:
    """One kind of building and how many have been built."""

    kind: BuildingKind
    level: int = 0
    level_changed: bool = field(default=True, repr=False)


class Buildings:
    """Every building in the game, keyed by kind."""

    def __init__(self) -> None:
        self._buildings: dict[BuildingKind, Building] = {
            kind: Building(kind) for kind in BuildingKind
        }

    def __getitem__(self, kind: BuildingKind) -> Building:
        return self._buildings[kind]

    def __iter__(self) -> Iterator[Building]:
        return iter(self._buildings.values())

    def __len__(self) -> int:
        return len(self._buildings)

    def construct(self, kind: BuildingKind) -> None:
        """Raise a building's level by one."""
        building = self._buildings[kind]
        building.level += 1
        building.level_changed = True

    def collect_changes(self) -> Optional[BuildingTransport]:
        """A transport of levels changed since the last clear, or None."""
        transport = BuildingTransport()
        has_changes = False
        for building in self:
            if building.level_changed:
                transport.levels[building.kind] = building.level
                has_changes = True
        return transport if has_changes else None

    def clear_changes(self) -> None:
        for building in self:
            building.level_changed = False