"""Text rendering of reservations for the list area, and parsing it back."""
from models import Reservation

PASSENGER_COUNT_ERROR = "Number of passengers must be a valid number."

FORM_FIELDS = (
    ("bus_no", "Bus No"),
    ("route", "Route"),
    ("passenger_name", "Passenger Name"),
    ("date", "Date"),
    ("time", "Time"),
    ("start_location", "Start Location"),
    ("end_location", "End Location"),
    ("purpose", "Purpose"),
    ("passenger_count", "No. of Passengers"),
    ("vehicle_type", "Vehicle Type"),
)


def format_reservation(reservation):
    """Renders a reservation as a single pipe-delimited line, id first."""
    return (
        f"{reservation.id}: Bus {reservation.bus_no}"
        f" | Route: {reservation.route}"
        f" | Name: {reservation.passenger_name}"
        f" | Date: {reservation.date}"
        f" | Time: {reservation.time}"
        f" | From: {reservation.start_location}"
        f" | To: {reservation.end_location}"
        f" | Purpose: {reservation.purpose}"
        f" | Passengers: {reservation.passenger_count}"
        f" | Vehicle: {reservation.vehicle_type}"
    )


def format_reservations(reservations):
    return "\n".join(format_reservation(r) for r in reservations)


def find_line_containing(text, selection):
    """Returns the first line of `text` that contains `selection`, or None.

    The first match wins, so a selection that also appears in an earlier
    line resolves to that earlier line.
    """
    if not selection:
        return None
    for line in text.splitlines():
        if selection in line:
            return line
    return None


def parse_reservation_id(line):
    """Reads the id back out of a line produced by format_reservation."""
    head = line.split(":", 1)[0]
    return int(head.strip())


def parse_passenger_count(text, controller):
    """Converts the passenger field to an int. Signed counts parse so the controller can reject them."""
    text = (text or "").strip()
    digits = text[1:] if text.startswith("-") else text
    if not controller.is_valid_passenger_count(digits):
        raise ValueError(PASSENGER_COUNT_ERROR)
    return int(text)


def reservation_from_form(values, controller, reservation_id=None):
    """Builds a Reservation from raw form strings. Raises ValueError on a bad passenger count."""
    fields = {name: (values.get(name) or "").strip() for name, _ in FORM_FIELDS}
    fields["passenger_count"] = parse_passenger_count(fields["passenger_count"], controller)
    return Reservation(id=reservation_id, **fields)


def reservation_to_form(reservation):
    return {name: str(getattr(reservation, name)) for name, _ in FORM_FIELDS}
