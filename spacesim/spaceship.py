"""Spaceships travelling between planets."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from spacesim.dates import Date
from spacesim.planets import Planet

if TYPE_CHECKING:
    from spacesim.person import Person

NO_DATE = "--"


class ShipStatus(enum.Enum):
    """Stages of a ship's journey."""

    ON_DEPARTURE = "Bekliyor"
    IN_TRANSIT = "Yolda"
    ON_ARRIVAL = "Vardi"
    DESTROYED = "IMHA"


def _find_planet(planets: Iterable[Planet], name: str) -> Planet | None:
    return next((planet for planet in planets if planet.name == name), None)


@dataclass
class Spaceship:
    """A ship that leaves one planet on a local date and lands on another."""

    name: str
    departure_planet: str
    arrival_planet: str
    departure_date: Date
    travel_time: int
    status: ShipStatus = ShipStatus.ON_DEPARTURE
    departure_time: int = -1
    arrival_time: int = -1
    arrival_date_str: str = NO_DATE

    def _hours_until_departure(self, planet: Planet, universal_time: int) -> int:
        current_date, current_hour = planet.local_time(universal_time)
        order = current_date.compare_to(self.departure_date)
        if order < 0 or (order == 0 and current_hour > 0):
            return planet.hours_per_day - current_hour
        if order == 0:
            return 0
        # Departure date already passed: no whole days remain to wait.
        return -current_hour

    def _arrival_date_text(self, planets: Sequence[Planet], arrival_time: int) -> str | None:
        destination = _find_planet(planets, self.arrival_planet)
        if destination is None:
            return None
        arrival_date, _ = destination.local_time(arrival_time)
        return str(arrival_date)

    def calculate_arrival_date(self, planets: Sequence[Planet], universal_time: int) -> None:
        """Estimate the local arrival date on the destination planet."""
        self.arrival_date_str = NO_DATE
        origin = _find_planet(planets, self.departure_planet)
        if origin is None:
            return
        departure_time = universal_time + self._hours_until_departure(origin, universal_time)
        text = self._arrival_date_text(planets, departure_time + self.travel_time)
        if text is not None:
            self.arrival_date_str = text

    def update(
        self,
        universal_time: int,
        planets: Sequence[Planet],
        persons: Iterable[Person],
    ) -> None:
        """Advance the ship's status to ``universal_time``."""
        if self.status is ShipStatus.DESTROYED:
            self.arrival_date_str = NO_DATE
            return

        if not any(p.is_alive and p.spaceship == self.name for p in persons):
            self.status = ShipStatus.DESTROYED
            self.arrival_date_str = NO_DATE
            return

        if self.status is ShipStatus.ON_DEPARTURE:
            origin = _find_planet(planets, self.departure_planet)
            if origin is not None:
                local_date, local_hour = origin.local_time(universal_time)
                if local_date.compare_to(self.departure_date) >= 0 and local_hour == 0:
                    self.status = ShipStatus.IN_TRANSIT
                    self.departure_time = universal_time
                    self.arrival_time = universal_time + self.travel_time
                    text = self._arrival_date_text(planets, self.arrival_time)
                    if text is not None:
                        self.arrival_date_str = text

        if self.status is ShipStatus.IN_TRANSIT and universal_time >= self.arrival_time:
            self.status = ShipStatus.ON_ARRIVAL

    def remaining_hours(self, current_time: int, planets: Sequence[Planet]) -> int | None:
        """Return hours left until arrival, or None for a destroyed ship.

        Raises LookupError if the ship is still waiting and its departure
        planet is not among ``planets``.
        """
        if self.status is ShipStatus.DESTROYED:
            return None
        if self.status is ShipStatus.ON_DEPARTURE:
            origin = _find_planet(planets, self.departure_planet)
            if origin is None:
                raise LookupError(f"unknown departure planet: {self.departure_planet}")
            return self._hours_until_departure(origin, current_time) + self.travel_time
        if self.status is ShipStatus.ON_ARRIVAL:
            return 0
        return self.arrival_time - current_time

    def status_text(self) -> str:
        """Return the display label for the ship's status."""
        return self.status.value