"""People travelling aboard spaceships."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from spacesim.planets import Planet
from spacesim.spaceship import ShipStatus, Spaceship

_SPACE_AGING_FACTOR = 1.0


@dataclass
class Person:
    """A passenger with a remaining life span in hours."""

    name: str
    age: int
    remaining_life: float
    spaceship: str
    is_alive: bool = True

    def update(self, aging_factor: float) -> None:
        """Age a living person by ``aging_factor``; they die when life runs out."""
        if not self.is_alive:
            return
        self.remaining_life -= aging_factor
        if self.remaining_life <= 0:
            self.is_alive = False

    def aging_factor(self, ships: Iterable[Spaceship], planets: Iterable[Planet]) -> float:
        """Return the aging factor where the person currently is."""
        ship = next((s for s in ships if s.name == self.spaceship), None)
        if ship is None or ship.status is ShipStatus.IN_TRANSIT:
            return _SPACE_AGING_FACTOR
        if ship.status is ShipStatus.ON_DEPARTURE:
            location = ship.departure_planet
        else:
            location = ship.arrival_planet
        planet = next((p for p in planets if p.name == location), None)
        if planet is None:
            return _SPACE_AGING_FACTOR
        return planet.aging_factor()