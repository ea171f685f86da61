import logging
import re
import sqlite3

import pytest

from config import Config
from controller import ReservationController


class BrokenDatabase:
    """Raises on every call, like a database that cannot be opened."""
    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise sqlite3.OperationalError("unable to open database file")
        return fail


class RefusingDatabase:
    def create_reservation(self, reservation):
        return False


@pytest.mark.parametrize("bus_no", ["12A", "A12", "1 2", "-5", "", "12.0", "١٢x", "١٢", "１２"])
def test_bus_no_with_non_digits_is_rejected(controller, db, make_reservation, bus_no):
    reservation = make_reservation(bus_no=bus_no)

    assert controller.create_reservation(reservation) == "Bus No must contain only numbers."
    assert controller.update_reservation(reservation) is False
    assert reservation.id is None
    assert db.get_all_reservations() == []


@pytest.mark.parametrize("count", [0, -1, -40])
def test_non_positive_passenger_count_is_rejected(controller, db, make_reservation, count):
    reservation = make_reservation(passenger_count=count)

    message = controller.create_reservation(reservation)

    assert message == "Number of passengers must be greater than 0."
    assert controller.update_reservation(reservation) is False
    assert db.get_all_reservations() == []


def test_create_success_message_contains_assigned_id(controller, make_reservation):
    reservation = make_reservation(bus_no="12", passenger_count=2)

    message = controller.create_reservation(reservation)

    assert message == f"Reservation #{reservation.id} successful! Bus No: 12, Route: Downtown Express"
    assert reservation.id > 0
    assert controller.get_all_reservations() == [reservation]


def test_create_reports_refused_insert(make_reservation):
    controller = ReservationController(RefusingDatabase())
    assert controller.create_reservation(make_reservation()) == "Reservation failed!"


def test_database_errors_become_generic_failures(make_reservation, caplog):
    controller = ReservationController(BrokenDatabase())
    reservation = make_reservation(id=3)

    with caplog.at_level(logging.ERROR, logger="controller"):
        assert controller.create_reservation(reservation) == "Reservation failed due to database error."
        assert controller.get_all_reservations() == []
        assert controller.update_reservation(reservation) is False
        assert controller.cancel_reservation(3) is False

    assert len(caplog.records) == 4
    assert all(record.exc_info for record in caplog.records)


def test_update_and_cancel(controller, make_reservation):
    reservation = make_reservation()
    controller.create_reservation(reservation)

    reservation.passenger_name = "Ben Cruz"
    assert controller.update_reservation(reservation) is True
    assert controller.get_all_reservations()[0].passenger_name == "Ben Cruz"

    assert controller.cancel_reservation(reservation.id) is True
    assert controller.get_all_reservations() == []


def test_update_and_cancel_unknown_id_fail(controller, make_reservation):
    assert controller.update_reservation(make_reservation(id=404)) is False
    assert controller.cancel_reservation(404) is False


def test_is_valid_passenger_count(controller):
    assert controller.is_valid_passenger_count("3")
    assert not controller.is_valid_passenger_count("three")
    assert not controller.is_valid_passenger_count("")


def test_current_date_and_time_formats(controller):
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", controller.get_current_date())
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", controller.get_current_time())


def test_check_credentials(controller):
    assert controller.check_credentials(Config.LOGIN_USERNAME, Config.LOGIN_PASSWORD)
    assert not controller.check_credentials(Config.LOGIN_USERNAME, "wrong")
    assert not controller.check_credentials("", "")


def test_check_credentials_uses_given_config(db):
    class OtherConfig(Config):
        LOGIN_USERNAME = "clerk"
        LOGIN_PASSWORD = "s3cret"

    controller = ReservationController(db, config=OtherConfig)
    assert controller.check_credentials("clerk", "s3cret")
    assert not controller.check_credentials("admin", "password")
