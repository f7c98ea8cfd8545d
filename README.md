# spacesim

A console simulation of spaceships carrying passengers between planets.
Each planet keeps its own calendar, with its own number of hours per day,
and ages its inhabitants at its own rate. The simulation advances one
universal hour at a time until every ship has either arrived or been
destroyed because nobody on board is still alive.

## Installation

```
pip install .
```

## Input files

The simulation reads three `#`-separated UTF-8 text files from one directory:

- `Kisiler.txt`: people, `name#age#remaining_life#ship_name`
- `Araclar.txt`: ships, `name#departure_planet#arrival_planet#DD.MM.YYYY#travel_hours`
- `Gezegenler.txt`: planets, `name#type#hours_per_day#DD.MM.YYYY`

Blank lines are skipped, and empty fields are ignored, so repeated
separators count as one. A file that cannot be opened, or a line with
too few fields or an unreadable number or date, raises
`spacesim.reading.DataFileError`.

Planet types are `0` rocky, `1` gas giant, `2` ice giant and `3` dwarf.
Aging per hour is 1.0 on rocky planets and in transit, 0.1 on gas giants,
0.5 on ice giants and 0.01 on dwarf planets. A planet with any other type
number ages its inhabitants at 1.0, as does a ship whose planet is not in
the planets file.

## Running

```
spacesim [directory]
```

`directory` defaults to the current directory. If a data file cannot be
read, the error is printed to standard error and the command exits with
status 1.

The screen is cleared and redrawn after every simulated hour. It shows
each planet's local date and population (living people whose ship is
waiting on it or has landed on it), and for each ship its status
(`Bekliyor` waiting, `Yolda` in transit, `Vardi` arrived, `IMHA`
destroyed), its route, the hours remaining to its destination and the
local arrival date there. When every ship has arrived or been destroyed,
the final state is shown followed by `Simulasyon tamamlandi.`

## Library use

```python
from spacesim.simulation import Simulation

sim = Simulation.from_files(".")
while sim.should_continue():
    sim.update()
print(sim.render())
```

`Simulation` can also be built directly from lists of people, ships and
planets; it works out each ship's expected arrival date when created.
`planet_population(planet)` counts a planet's inhabitants, `display()`
clears the terminal and prints `render()`, and `run()` steps until the
simulation is finished.

The building blocks:

- `spacesim.dates`: `Date`, a mutable day/month/year date with
  `parse("DD.MM.YYYY")`, `add_days`, `compare_to`, `copy` and ordering.
- `spacesim.planets`: `PlanetType`, `Planet` with `aging_factor()` and
  `local_time(universal_time)` returning the local date and hour, the
  subclasses `RockPlanet`, `GasGiantPlanet`, `IceGiantPlanet` and
  `DwarfPlanet`, and `make_planet` to pick the subclass by type number.
- `spacesim.spaceship`: `ShipStatus` and `Spaceship` with
  `calculate_arrival_date`, `update`, `remaining_hours` and `status_text`.
- `spacesim.person`: `Person` with `update(aging_factor)` and
  `aging_factor(ships, planets)`.
- `spacesim.reading`: `read_persons`, `read_spaceships`, `read_planets`
  and `DataFileError`.
- `spacesim.clock`: `current_time()`, the local wall-clock time as
  `YYYY-MM-DD HH:MM`.