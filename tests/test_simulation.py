from unittest import mock

import pytest

from spacesim.dates import Date
from spacesim.person import Person
from spacesim.planets import GasGiantPlanet, RockPlanet
from spacesim.simulation import Simulation, main
from spacesim.spaceship import ShipStatus, Spaceship


def _world(life=1000.0):
    planets = [
        RockPlanet("Dunya", 24, Date(1, 1, 2024)),
        GasGiantPlanet("Jupiter", 10, Date(1, 1, 2024)),
    ]
    ships = [Spaceship("A1", "Dunya", "Jupiter", Date(1, 1, 2024), 5)]
    persons = [Person("Ali", 30, life, "A1")]
    return Simulation(persons=persons, ships=ships, planets=planets)


def _write_files(directory):
    (directory / "Kisiler.txt").write_text("Ali#30#1000#A1\nAyse#25#1000#A1\n", encoding="utf-8")
    (directory / "Araclar.txt").write_text("A1#Dunya#Jupiter#01.01.2024#5\n", encoding="utf-8")
    (directory / "Gezegenler.txt").write_text(
        "Dunya#0#24#01.01.2024\nJupiter#1#10#01.01.2024\n", encoding="utf-8"
    )


def test_construction_computes_arrival_dates():
    sim = _world()
    assert sim.universal_time == 0
    assert sim.ships[0].arrival_date_str == "01.01.2024"


def test_initial_population():
    sim = _world()
    dunya, jupiter = sim.planets
    assert sim.planet_population(dunya) == 1
    assert sim.planet_population(jupiter) == 0


def test_update_advances_time_and_ages_people():
    sim = _world()
    before = sim.persons[0].remaining_life
    sim.update()
    assert sim.universal_time == 1
    assert sim.persons[0].remaining_life == pytest.approx(before - sim.planets[0].aging_factor())


def test_ship_destroyed_when_crew_dies():
    sim = _world(life=0.5)
    sim.update()
    assert not sim.persons[0].is_alive
    assert sim.ships[0].status is ShipStatus.ON_DEPARTURE
    sim.update()
    assert sim.ships[0].status is ShipStatus.DESTROYED
    assert not sim.should_continue()
    assert sim.planet_population(sim.planets[0]) == 0


def test_dead_people_not_counted():
    sim = _world()
    sim.persons[0].is_alive = False
    assert sim.planet_population(sim.planets[0]) == 0


def test_render_layout():
    sim = _world()
    text = sim.render()
    lines = text.split("\n")
    assert lines[0] == "GEZEGENLER:"
    assert "--- Dunya   " in lines[1]
    assert "--- Jupiter " in lines[1]
    assert lines[2].startswith("Tarih")
    assert "01.01.2024" in lines[2]
    assert lines[3].startswith("Nufus")
    assert lines[4] == ""
    assert lines[5] == "UZAY ARACLARI:"
    assert lines[6].startswith("Arac Adi")
    ship = sim.ships[0]
    expected_remaining = str(ship.remaining_hours(sim.universal_time, sim.planets))
    assert lines[8].split() == [
        "A1",
        "Bekliyor",
        "Dunya",
        "Jupiter",
        expected_remaining,
        "01.01.2024",
    ]
    assert text.endswith("\n\n")


def test_render_destroyed_ship_shows_dashes():
    sim = _world()
    sim.ships[0].status = ShipStatus.DESTROYED
    sim.ships[0].arrival_date_str = "--"
    row = sim.render().split("\n")[8]
    assert row.split() == ["A1", "IMHA", "Dunya", "Jupiter", "--", "--"]


def test_render_unknown_departure_planet_shows_waiting():
    sim = _world()
    sim.ships.append(Spaceship("B2", "Yok", "Jupiter", Date(1, 1, 2024), 3))
    row = sim.render().split("\n")[9]
    assert row.split() == ["B2", "Bekliyor", "Yok", "Jupiter", "Bekliyor", "--"]


@mock.patch("spacesim.simulation.subprocess.run")
def test_run_until_arrival(run_mock, capsys):
    sim = _world()
    sim.run()
    ship = sim.ships[0]
    assert ship.status is ShipStatus.ON_ARRIVAL
    assert not sim.should_continue()
    assert sim.universal_time == ship.arrival_time
    assert ship.arrival_time - ship.departure_time == ship.travel_time
    assert sim.planet_population(sim.planets[1]) == 1
    assert sim.planet_population(sim.planets[0]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("Simulasyon tamamlandi.")
    assert run_mock.called


def test_from_files(tmp_path):
    _write_files(tmp_path)
    sim = Simulation.from_files(tmp_path)
    assert [p.name for p in sim.persons] == ["Ali", "Ayse"]
    assert [s.name for s in sim.ships] == ["A1"]
    assert [p.name for p in sim.planets] == ["Dunya", "Jupiter"]
    assert sim.ships[0].arrival_date_str == "01.01.2024"
    assert sim.planet_population(sim.planets[0]) == 2


@mock.patch("spacesim.simulation.subprocess.run")
def test_main_runs_simulation(run_mock, tmp_path, capsys):
    _write_files(tmp_path)
    assert main([str(tmp_path)]) == 0
    assert "Simulasyon tamamlandi." in capsys.readouterr().out


def test_main_reports_missing_files(tmp_path, capsys):
    assert main([str(tmp_path)]) == 1
    assert "Dosya acilamadi" in capsys.readouterr().err