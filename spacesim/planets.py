"""Planets and their local calendars."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from spacesim.dates import Date


class PlanetType(enum.IntEnum):
    """Kinds of planet, numbered as in the data files."""

    ROCKY = 0
    GAS_GIANT = 1
    ICE_GIANT = 2
    DWARF = 3


_AGING_FACTORS = {
    PlanetType.ROCKY: 1.0,
    PlanetType.GAS_GIANT: 0.1,
    PlanetType.ICE_GIANT: 0.5,
    PlanetType.DWARF: 0.01,
}


@dataclass
class Planet:
    """A planet with its own day length and calendar start date."""

    name: str
    planet_type: PlanetType | int
    hours_per_day: int
    date: Date

    def __post_init__(self) -> None:
        if self.hours_per_day <= 0:
            raise ValueError(f"hours per day must be positive: {self.hours_per_day}")

    def aging_factor(self) -> float:
        """Return how fast people age on this planet; unknown types age normally."""
        return _AGING_FACTORS.get(self.planet_type, 1.0)

    def local_time(self, universal_time: int) -> tuple[Date, int]:
        """Return the local date and hour after ``universal_time`` hours."""
        days, hour = divmod(universal_time, self.hours_per_day)
        local_date = self.date.copy()
        local_date.add_days(days)
        return local_date, hour


class RockPlanet(Planet):
    """A rocky planet."""

    def __init__(self, name: str, hours_per_day: int, date: Date) -> None:
        super().__init__(name, PlanetType.ROCKY, hours_per_day, date)

    def aging_factor(self) -> float:
        return 1.0


class GasGiantPlanet(Planet):
    """A gas giant."""

    def __init__(self, name: str, hours_per_day: int, date: Date) -> None:
        super().__init__(name, PlanetType.GAS_GIANT, hours_per_day, date)

    def aging_factor(self) -> float:
        return 0.1


class IceGiantPlanet(Planet):
    """An ice giant."""

    def __init__(self, name: str, hours_per_day: int, date: Date) -> None:
        super().__init__(name, PlanetType.ICE_GIANT, hours_per_day, date)

    def aging_factor(self) -> float:
        return 0.5


class DwarfPlanet(Planet):
    """A dwarf planet."""

    def __init__(self, name: str, hours_per_day: int, date: Date) -> None:
        super().__init__(name, PlanetType.DWARF, hours_per_day, date)

    def aging_factor(self) -> float:
        return 0.01


_PLANET_CLASSES: dict[PlanetType, type[Planet]] = {
    PlanetType.ROCKY: RockPlanet,
    PlanetType.GAS_GIANT: GasGiantPlanet,
    PlanetType.ICE_GIANT: IceGiantPlanet,
    PlanetType.DWARF: DwarfPlanet,
}


def make_planet(name: str, planet_type: int, hours_per_day: int, date: Date) -> Planet:
    """Build the planet subclass for ``planet_type``; unknown types give a plain Planet."""
    try:
        kind = PlanetType(planet_type)
    except ValueError:
        return Planet(name, planet_type, hours_per_day, date)
    return _PLANET_CLASSES[kind](name, hours_per_day, date)