"""Planar geometry helpers."""

import math

from .models import Location


def distance(a: Location, b: Location) -> float:
    """Straight-line distance between two points"""
    return math.hypot(b.x - a.x, b.y - a.y)


def bearing(a: Location, b: Location) -> float:
    """Compass bearing from a to b in degrees (0-360, 0=+y, 90=+x).

    Undefined for coincident points; callers check arrival first.
    """
    angle = math.degrees(math.atan2(b.x - a.x, b.y - a.y))
    return (angle + 360) % 360


def bearing_to_compass(bearing: float) -> str:
    """Convert bearing to compass direction"""
    directions = ["north", "northeast", "east", "southeast",
                  "south", "southwest", "west", "northwest"]
    index = round(bearing / 45) % 8
    return directions[index]
