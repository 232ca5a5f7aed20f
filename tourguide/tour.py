"""Tours: ordered stages plus identity and overview text."""

from dataclasses import dataclass, field
from typing import Optional

from .geo import distance
from .models import Annotation, Leg, Location, Waypoint
from .stage import Stage, StageKind, count_legs, count_waypoints


@dataclass(frozen=True)
class TourStep:
    """A waypoint paired with the leg leading to it"""
    leg: Leg
    waypoint: Waypoint


@dataclass
class Tour:
    id: str
    title: str
    annotation: Annotation = Annotation.DEFAULT
    stages: list[Stage] = field(default_factory=lambda: [Stage(StageKind.FIRST)])

    @property
    def last_stage(self) -> Stage:
        return self.stages[-1]

    @property
    def is_committed(self) -> bool:
        return self.last_stage.is_final

    @property
    def waypoint_count(self) -> int:
        return count_waypoints(self.stages)

    @property
    def leg_count(self) -> int:
        return count_legs(self.stages)

    def waypoints(self) -> list[Waypoint]:
        return [s.waypoint for s in self.stages if s.waypoint is not None]

    def closest_waypoint_distance(self, location: Location) -> Optional[float]:
        """Distance from location to the nearest waypoint already on the tour"""
        distances = [distance(w.location, location) for w in self.waypoints()]
        return min(distances) if distances else None

    def append_stage(self) -> Stage:
        """Open a new intermediate stage after the current last one.

        If the stage being left has no leg yet it gets a default one, since
        every waypoint after the first is reached by a leg.
        """
        leaving = self.last_stage
        if leaving.leg is None and not leaving.assign_leg(Leg()):
            raise ValueError(f"Cannot leave {leaving!r} without a leg")
        stage = Stage(StageKind.INTERMEDIATE)
        self.stages.append(stage)
        return stage

    def steps(self) -> list[TourStep]:
        """Waypoints in visiting order, each with its inbound leg.

        The leg into the waypoint held by stage i is the leg of stage i-1.
        """
        steps = []
        for previous, stage in zip(self.stages, self.stages[1:]):
            if stage.waypoint is None or previous.leg is None:
                continue
            steps.append(TourStep(leg=previous.leg, waypoint=stage.waypoint))
        return steps

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "annotation": self.annotation.text,
            "stages": [s.to_dict() for s in self.stages],
        }
