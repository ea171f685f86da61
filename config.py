import os


class Config:
    DB_NAME = os.environ.get("BUS_RESERVATION_DB", "bus_reservations.db")
    THEME = os.environ.get("BUS_RESERVATION_THEME", "yeti")

    # Single hardcoded login pair, override per machine
    LOGIN_USERNAME = os.environ.get("BUS_RESERVATION_USER", "admin")
    LOGIN_PASSWORD = os.environ.get("BUS_RESERVATION_PASSWORD", "password")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
