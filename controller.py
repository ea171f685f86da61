import logging
import re
import sqlite3
from datetime import datetime

from config import Config

_log = logging.getLogger(__name__)

DIGITS_ONLY = re.compile(r"[0-9]+")


class ReservationController:
    """Validates reservation input and forwards it to the database layer."""
    def __init__(self, db, config=Config):
        self.db = db
        self.config = config

    def is_valid_bus_no(self, bus_no):
        return bool(DIGITS_ONLY.fullmatch(bus_no or ""))

    def is_valid_passenger_count(self, count):
        return bool(DIGITS_ONLY.fullmatch(count or ""))

    def check_credentials(self, username, password):
        return username == self.config.LOGIN_USERNAME and password == self.config.LOGIN_PASSWORD

    def create_reservation(self, reservation):
        """Validates and stores a new reservation. Returns a message for the user."""
        if not self.is_valid_bus_no(reservation.bus_no):
            return "Bus No must contain only numbers."
        if reservation.passenger_count <= 0:
            return "Number of passengers must be greater than 0."

        try:
            success = self.db.create_reservation(reservation)
        except sqlite3.Error:
            _log.exception("Could not create reservation for bus %s", reservation.bus_no)
            return "Reservation failed due to database error."

        if not success:
            return "Reservation failed!"
        _log.info("Created reservation #%s", reservation.id)
        return (
            f"Reservation #{reservation.id} successful! "
            f"Bus No: {reservation.bus_no}, Route: {reservation.route}"
        )

    def get_all_reservations(self):
        try:
            return self.db.get_all_reservations()
        except sqlite3.Error:
            _log.exception("Could not load reservations")
            return []

    def update_reservation(self, reservation):
        if not self.is_valid_bus_no(reservation.bus_no):
            return False
        if reservation.passenger_count <= 0:
            return False

        try:
            return self.db.update_reservation(reservation)
        except sqlite3.Error:
            _log.exception("Could not update reservation #%s", reservation.id)
            return False

    def cancel_reservation(self, reservation_id):
        try:
            return self.db.delete_reservation(reservation_id)
        except sqlite3.Error:
            _log.exception("Could not cancel reservation #%s", reservation_id)
            return False

    def get_current_date(self):
        """Today's date as YYYY-MM-DD."""
        return datetime.now().date().isoformat()

    def get_current_time(self):
        """Current time as HH:MM:SS."""
        return datetime.now().time().replace(microsecond=0).isoformat()
