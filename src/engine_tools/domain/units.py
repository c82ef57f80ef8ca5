"""Stud <-> metre conversion (1 metre = 3.571428571 studs)."""

STUDS_PER_METER = 3.571428571
METERS_PER_STUD = 1 / STUDS_PER_METER


def studs_to_meters(studs: float) -> float:
    return studs * METERS_PER_STUD


def meters_to_studs(meters: float) -> float:
    return meters * STUDS_PER_METER
