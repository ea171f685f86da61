import pytest

from controller import ReservationController
from database import Database
from models import Reservation


@pytest.fixture
def db(tmp_path):
    return Database(str(tmp_path / "reservations.db"))


@pytest.fixture
def controller(db):
    return ReservationController(db)


@pytest.fixture
def make_reservation():
    def _make(**overrides):
        fields = dict(
            bus_no="12",
            route="Downtown Express",
            passenger_name="Ana Lim",
            date="2026-10-19",
            time="08:30:00",
            start_location="Central Station",
            end_location="Airport",
            purpose="Field trip",
            passenger_count=2,
            vehicle_type="Coach",
        )
        fields.update(overrides)
        return Reservation(**fields)
    return _make
