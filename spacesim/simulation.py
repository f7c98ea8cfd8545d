"""The simulation that drives ships, passengers and planet calendars."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path

from spacesim.person import Person
from spacesim.planets import Planet
from spacesim.reading import DataFileError, read_persons, read_planets, read_spaceships
from spacesim.spaceship import ShipStatus, Spaceship

PERSONS_FILE = "Kisiler.txt"
SHIPS_FILE = "Araclar.txt"
PLANETS_FILE = "Gezegenler.txt"

_SHIP_ROW = "{:<10} {:<10} {:<7} {:<7} {:<20} {:<20}"
_SHIP_RULE = "-" * 81


def _clear_screen() -> None:
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


@dataclass
class Simulation:
    """The whole system, advanced one universal hour at a time."""

    persons: list[Person] = field(default_factory=list)
    ships: list[Spaceship] = field(default_factory=list)
    planets: list[Planet] = field(default_factory=list)
    universal_time: int = 0

    def __post_init__(self) -> None:
        for ship in self.ships:
            ship.calculate_arrival_date(self.planets, self.universal_time)

    @classmethod
    def from_files(cls, directory: str | os.PathLike[str] = ".") -> Simulation:
        """Load the persons, ships and planets files found in ``directory``."""
        base = Path(directory)
        return cls(
            persons=read_persons(base / PERSONS_FILE),
            ships=read_spaceships(base / SHIPS_FILE),
            planets=read_planets(base / PLANETS_FILE),
        )

    def _ship_of(self, person: Person) -> Spaceship | None:
        return next((ship for ship in self.ships if ship.name == person.spaceship), None)

    def planet_population(self, planet: Planet) -> int:
        """Count living people whose ship waits on or has landed on ``planet``."""
        population = 0
        for person in self.persons:
            if not person.is_alive:
                continue
            ship = self._ship_of(person)
            if ship is None:
                continue
            if (ship.status is ShipStatus.ON_DEPARTURE and ship.departure_planet == planet.name) or (
                ship.status is ShipStatus.ON_ARRIVAL and ship.arrival_planet == planet.name
            ):
                population += 1
        return population

    def update(self) -> None:
        """Advance the simulation by one hour."""
        self.universal_time += 1
        for ship in self.ships:
            ship.update(self.universal_time, self.planets, self.persons)
        for person in self.persons:
            person.update(person.aging_factor(self.ships, self.planets))

    def _remaining_text(self, ship: Spaceship) -> str:
        try:
            remaining = ship.remaining_hours(self.universal_time, self.planets)
        except LookupError:
            return "Bekliyor"
        return "--" if remaining is None else str(remaining)

    def render(self) -> str:
        """Return the current state as the text shown on screen."""
        time = self.universal_time
        lines = [
            "GEZEGENLER:",
            f"{'':<10} " + "".join(f"--- {planet.name:<7} " for planet in self.planets),
            f"{'Tarih':<10} "
            + "".join(f"{planet.local_time(time)[0]}  " for planet in self.planets),
            f"{'Nufus':<10} "
            + "".join(f"{self.planet_population(planet):<12d}" for planet in self.planets),
            "",
            "UZAY ARACLARI:",
            _SHIP_ROW.format(
                "Arac Adi", "Durum", "Cikis", "Varis", "Hedefe Kalan Saat", "Hedefe Varacagi Tarih"
            ),
            _SHIP_RULE,
        ]
        lines.extend(
            _SHIP_ROW.format(
                ship.name,
                ship.status_text(),
                ship.departure_planet,
                ship.arrival_planet,
                self._remaining_text(ship),
                ship.arrival_date_str,
            )
            for ship in self.ships
        )
        lines.append("")
        return "\n".join(lines) + "\n"

    def display(self) -> None:
        """Clear the terminal and print the current state."""
        _clear_screen()
        print(self.render(), end="")

    def should_continue(self) -> bool:
        """Return True while some ship has neither arrived nor been destroyed."""
        return any(
            ship.status not in (ShipStatus.ON_ARRIVAL, ShipStatus.DESTROYED) for ship in self.ships
        )

    def run(self) -> None:
        """Step and display until every ship has arrived or been destroyed."""
        while self.should_continue():
            self.update()
            self.display()
        self.display()
        print("\nSimulasyon tamamlandi.")


def main(argv: list[str] | None = None) -> int:
    """Run the simulation from the data files in a directory."""
    parser = argparse.ArgumentParser(
        prog="spacesim", description="Simulate spaceships travelling between planets."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help=f"directory holding {PERSONS_FILE}, {SHIPS_FILE} and {PLANETS_FILE}",
    )
    args = parser.parse_args(argv)
    try:
        simulation = Simulation.from_files(args.directory)
    except DataFileError as exc:
        print(exc, file=sys.stderr)
        return 1
    simulation.run()
    return 0