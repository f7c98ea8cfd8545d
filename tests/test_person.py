import pytest

from spacesim.dates import Date
from spacesim.person import Person
from spacesim.planets import make_planet
from spacesim.spaceship import ShipStatus, Spaceship


@pytest.fixture
def planets():
    return [
        make_planet("Gas", 1, 10, Date(1, 1, 2000)),
        make_planet("Ice", 2, 20, Date(1, 1, 2000)),
    ]


@pytest.fixture
def ship():
    return Spaceship("S1", "Gas", "Ice", Date(2, 1, 2000), 10)


def test_new_person_is_alive():
    person = Person("Ada", 30, 50.0, "S1")
    assert person.is_alive is True
    assert person.remaining_life == 50.0


def test_update_reduces_remaining_life():
    person = Person("Ada", 30, 10.0, "S1")
    person.update(2.5)
    assert person.remaining_life == pytest.approx(7.5)
    assert person.is_alive is True


def test_update_kills_when_life_runs_out():
    person = Person("Ada", 30, 1.0, "S1")
    person.update(1.0)
    assert person.is_alive is False


def test_dead_person_does_not_age():
    person = Person("Ada", 30, 1.0, "S1", is_alive=False)
    person.update(0.5)
    assert person.remaining_life == 1.0
    assert person.is_alive is False


def test_aging_in_transit_is_normal(ship, planets):
    ship.status = ShipStatus.IN_TRANSIT
    person = Person("Ada", 30, 10.0, "S1")
    assert person.aging_factor([ship], planets) == 1.0


def test_aging_on_departure_uses_departure_planet(ship, planets):
    person = Person("Ada", 30, 10.0, "S1")
    assert person.aging_factor([ship], planets) == planets[0].aging_factor()


def test_aging_after_arrival_uses_arrival_planet(ship, planets):
    ship.status = ShipStatus.ON_ARRIVAL
    person = Person("Ada", 30, 10.0, "S1")
    assert person.aging_factor([ship], planets) == planets[1].aging_factor()


def test_aging_on_destroyed_ship_uses_arrival_planet(ship, planets):
    ship.status = ShipStatus.DESTROYED
    person = Person("Ada", 30, 10.0, "S1")
    assert person.aging_factor([ship], planets) == planets[1].aging_factor()


def test_aging_with_unknown_ship_is_normal(ship, planets):
    person = Person("Ada", 30, 10.0, "Other")
    assert person.aging_factor([ship], planets) == 1.0


def test_aging_with_unknown_planet_is_normal(planets):
    ship = Spaceship("S1", "Nowhere", "Ice", Date(2, 1, 2000), 10)
    person = Person("Ada", 30, 10.0, "S1")
    assert person.aging_factor([ship], planets) == 1.0


def test_aging_uses_first_matching_ship(planets):
    first = Spaceship("S1", "Ice", "Gas", Date(2, 1, 2000), 10)
    second = Spaceship("S1", "Gas", "Ice", Date(2, 1, 2000), 10)
    person = Person("Ada", 30, 10.0, "S1")
    assert person.aging_factor([first, second], planets) == planets[1].aging_factor()