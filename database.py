import sqlite3
from contextlib import closing

from models import Reservation

RESERVATION_COLUMNS = (
    "bus_no", "route", "passenger_name", "date", "time",
    "start_location", "end_location", "purpose", "passenger_count", "vehicle_type",
)


class Database:
    """Handles all database operations for the reservation system.

    Every operation opens its own connection and closes it before returning,
    so sqlite3.Error propagates to the caller with nothing left open.
    """
    def __init__(self, db_name="bus_reservations.db"):
        self.db_name = db_name
        self.create_tables()

    def _connect(self):
        return closing(sqlite3.connect(self.db_name))

    def create_tables(self):
        """Creates the reservations table if it doesn't already exist."""
        with self._connect() as conn, conn:
            conn.execute('''
                CREATE TABLE IF NOT EXISTS reservations (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    bus_no TEXT NOT NULL,
                    route TEXT,
                    passenger_name TEXT,
                    date TEXT,
                    time TEXT,
                    start_location TEXT,
                    end_location TEXT,
                    purpose TEXT,
                    passenger_count INTEGER NOT NULL,
                    vehicle_type TEXT
                )
            ''')

    @staticmethod
    def _field_values(reservation):
        return tuple(getattr(reservation, column) for column in RESERVATION_COLUMNS)

    def create_reservation(self, reservation):
        """Inserts a reservation and writes the generated id back onto it."""
        sql = "INSERT INTO reservations ({}) VALUES ({})".format(
            ", ".join(RESERVATION_COLUMNS), ", ".join("?" * len(RESERVATION_COLUMNS))
        )
        with self._connect() as conn, conn:
            cursor = conn.execute(sql, self._field_values(reservation))
            if cursor.rowcount == 0:
                return False
            reservation.id = cursor.lastrowid
        return True

    def get_all_reservations(self):
        """Retrieves every reservation, oldest first."""
        with self._connect() as conn:
            conn.row_factory = sqlite3.Row
            rows = conn.execute("SELECT * FROM reservations ORDER BY id").fetchall()

        reservations = []
        for row in rows:
            reservation = Reservation(**{column: row[column] for column in RESERVATION_COLUMNS})
            reservation.id = row["id"]
            reservations.append(reservation)
        return reservations

    def update_reservation(self, reservation):
        """Overwrites every field of the reservation with the matching id."""
        assignments = ", ".join(f"{column} = ?" for column in RESERVATION_COLUMNS)
        sql = f"UPDATE reservations SET {assignments} WHERE id = ?"
        params = self._field_values(reservation) + (reservation.id,)

        with self._connect() as conn, conn:
            cursor = conn.execute(sql, params)
            return cursor.rowcount > 0

    def delete_reservation(self, reservation_id):
        """Deletes a reservation by id. Returns False if no row matched."""
        with self._connect() as conn, conn:
            cursor = conn.execute("DELETE FROM reservations WHERE id = ?", (reservation_id,))
            return cursor.rowcount > 0
