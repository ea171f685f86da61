from dataclasses import dataclass
from typing import Optional


@dataclass
class Reservation:
    """A single bus booking. `id` stays None until the database assigns one."""
    bus_no: str = ""
    route: str = ""
    passenger_name: str = ""
    date: str = ""
    time: str = ""
    start_location: str = ""
    end_location: str = ""
    purpose: str = ""
    passenger_count: int = 0
    vehicle_type: str = ""
    id: Optional[int] = None
