"""Pure domain helpers."""

from .units import METERS_PER_STUD, STUDS_PER_METER, meters_to_studs, studs_to_meters

__all__ = [
    "METERS_PER_STUD",
    "STUDS_PER_METER",
    "meters_to_studs",
    "studs_to_meters",
]
