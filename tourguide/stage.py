"""Stages: the waypoint/leg slots a tour is built from."""

from enum import Enum
from typing import Iterable, Optional

from .models import Leg, Waypoint


class StageKind(Enum):
    FIRST = "first"
    INTERMEDIATE = "intermediate"
    FINAL = "final"


class Stage:
    """One slot in a tour.

    A stage holds at most one waypoint and at most one leg, each set once.
    The leg is the departure from the stage's waypoint (or from the tour's
    start point for the FIRST stage). Kind transitions are one-way: only an
    INTERMEDIATE stage with a waypoint and no leg can be promoted to FINAL.
    """

    def __init__(self, kind: StageKind = StageKind.INTERMEDIATE):
        self._kind = kind
        self.waypoint: Optional[Waypoint] = None
        self.leg: Optional[Leg] = None

    @property
    def kind(self) -> StageKind:
        return self._kind

    @property
    def is_final(self) -> bool:
        return self._kind is StageKind.FINAL

    def can_accept_waypoint(self) -> bool:
        return self.waypoint is None and self._kind is not StageKind.FIRST

    def can_accept_leg(self) -> bool:
        if self.leg is not None:
            return False
        if self._kind is StageKind.FINAL:
            return False
        # Leg departs from the waypoint, so it must be there first
        if self._kind is StageKind.INTERMEDIATE and self.waypoint is None:
            return False
        return True

    def can_promote(self) -> bool:
        return (self._kind is StageKind.INTERMEDIATE
                and self.waypoint is not None
                and self.leg is None)

    def assign_waypoint(self, waypoint: Waypoint) -> bool:
        if not self.can_accept_waypoint():
            return False
        self.waypoint = waypoint
        return True

    def assign_leg(self, leg: Leg) -> bool:
        if not self.can_accept_leg():
            return False
        self.leg = leg
        return True

    def promote_to_final(self) -> bool:
        if not self.can_promote():
            return False
        self._kind = StageKind.FINAL
        return True

    def to_dict(self) -> dict:
        return {
            "kind": self._kind.value,
            "waypoint": self.waypoint.to_dict() if self.waypoint else None,
            "leg": self.leg.to_dict() if self.leg else None,
        }

    def __repr__(self) -> str:
        return f"Stage(kind={self._kind.name}, waypoint={self.waypoint!r}, leg={self.leg!r})"


def count_waypoints(stages: Iterable[Stage]) -> int:
    """Number of stages holding a waypoint"""
    return sum(1 for s in stages if s.waypoint is not None)


def count_legs(stages: Iterable[Stage]) -> int:
    """Number of stages holding a leg"""
    return sum(1 for s in stages if s.leg is not None)
