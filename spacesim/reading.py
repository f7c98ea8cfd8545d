"""Loading persons, spaceships and planets from ``#``-separated data files."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import TypeVar

from spacesim.dates import Date
from spacesim.person import Person
from spacesim.planets import Planet, make_planet
from spacesim.spaceship import Spaceship

T = TypeVar("T")

_SEPARATOR = "#"


class DataFileError(Exception):
    """Raised when a data file cannot be read or holds a malformed line."""


def _records(path: str | os.PathLike[str], field_count: int) -> Iterator[tuple[int, list[str]]]:
    """Yield the line number and the first ``field_count`` fields of each non-blank line."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise DataFileError(f"Dosya acilamadi: {os.fspath(path)}") from exc

    for line_number, line in enumerate(lines, start=1):
        # Empty fields are skipped, so repeated separators count as one.
        fields = [field for field in line.rstrip("\r\n").split(_SEPARATOR) if field]
        if not fields:
            continue
        if len(fields) < field_count:
            raise DataFileError(
                f"{os.fspath(path)}:{line_number}: expected {field_count} fields, "
                f"found {len(fields)}"
            )
        yield line_number, fields[:field_count]


def _load(
    path: str | os.PathLike[str],
    field_count: int,
    build: Callable[..., T],
) -> list[T]:
    items = []
    for line_number, fields in _records(path, field_count):
        try:
            items.append(build(*fields))
        except ValueError as exc:
            raise DataFileError(f"{os.fspath(path)}:{line_number}: {exc}") from exc
    return items


def _person(name: str, age: str, remaining_life: str, spaceship: str) -> Person:
    return Person(name, int(age), float(remaining_life), spaceship)


def _spaceship(
    name: str, departure: str, arrival: str, date: str, travel_time: str
) -> Spaceship:
    return Spaceship(name, departure, arrival, Date.parse(date), int(travel_time))


def _planet(name: str, planet_type: str, hours_per_day: str, date: str) -> Planet:
    return make_planet(name, int(planet_type), int(hours_per_day), Date.parse(date))


def read_persons(path: str | os.PathLike[str]) -> list[Person]:
    """Read ``name#age#remaining_life#spaceship`` lines."""
    return _load(path, 4, _person)


def read_spaceships(path: str | os.PathLike[str]) -> list[Spaceship]:
    """Read ``name#departure#arrival#DD.MM.YYYY#travel_hours`` lines."""
    return _load(path, 5, _spaceship)


def read_planets(path: str | os.PathLike[str]) -> list[Planet]:
    """Read ``name#type#hours_per_day#DD.MM.YYYY`` lines."""
    return _load(path, 4, _planet)