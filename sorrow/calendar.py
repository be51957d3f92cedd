"""The in-game calendar of days, seasons and years."""

from __future__ import annotations

from typing import Optional

from .communication import CalendarTransport
from .state import SeasonKind
from .ticker import Ticker

DAYS_PER_SEASON = 100
TICKS_PER_DAY = 10

_NEXT_SEASON = {
    SeasonKind.SPRING: SeasonKind.SUMMER,
    SeasonKind.SUMMER: SeasonKind.AUTUMN,
    SeasonKind.AUTUMN: SeasonKind.WINTER,
    SeasonKind.WINTER: SeasonKind.SPRING,
}


class Calendar:
    """Current date, advanced one day each time its day ticker ticks."""

    def __init__(self) -> None:
        self.day = 0
        self.season = SeasonKind.SPRING
        self.year = 0
        self.ticker = Ticker(TICKS_PER_DAY)
        self.day_changed = True
        self.season_changed = True
        self.year_changed = True

    def advance(self) -> None:
        """Move to the next day if the day ticker has just ticked."""
        if not self.ticker.just_ticked:
            return

        self.day_changed = True
        if self.day == DAYS_PER_SEASON - 1:
            self.day = 0
        else:
            self.day += 1
            return

        new_year = self.season is SeasonKind.WINTER
        self.season = _NEXT_SEASON[self.season]
        self.season_changed = True

        if new_year:
            self.year += 1
            self.year_changed = True

    def collect_changes(self) -> Optional[CalendarTransport]:
        """A transport of the parts of the date changed since the last clear, or None."""
        transport = CalendarTransport()
        if self.day_changed:
            transport.day = self.day
        if self.season_changed:
            transport.season = self.season
        if self.year_changed:
            transport.year = self.year
        if transport == CalendarTransport():
            return None
        return transport

    def clear_changes(self) -> None:
        self.day_changed = False
        self.season_changed = False
        self.year_changed = False

    def __repr__(self) -> str:
        return f"Calendar(day={self.day}, season={self.season}, year={self.year})"