"""Tour authoring, browsing and following controller."""

from enum import Enum
from typing import Optional, Union

from .chunks import (
    Chunk,
    BrowseOverview,
    BrowseDetails,
    CreateHeader,
    FollowHeader,
    FollowLeg,
    FollowWaypoint,
    FollowBearing,
)
from .config import CONFIG
from .geo import bearing, distance
from .logger import Logger
from .models import Annotation, Leg, Location, Waypoint
from .tour import Tour, TourStep


class Status(Enum):
    OK = "ok"
    ERROR = "error"

    def __bool__(self) -> bool:
        return self is Status.OK


class Mode(Enum):
    BROWSE_OVERVIEW = "browse_overview"
    BROWSE_DETAILS = "browse_details"
    CREATING = "creating"
    FOLLOWING = "following"


BROWSING = (Mode.BROWSE_OVERVIEW, Mode.BROWSE_DETAILS)


def as_annotation(value: Union[Annotation, str, None]) -> Annotation:
    """Accept plain text from the shell as well as Annotation values"""
    if value is None:
        return Annotation.DEFAULT
    if isinstance(value, Annotation):
        return value
    return Annotation(value)


class Controller:
    """State machine behind the tour guide.

    Every operation either succeeds, mutating state and replacing the output
    chunks, or returns Status.ERROR leaving everything as it was. The
    rejection reason only goes to the logger.

    Args:
        waypoint_radius: Arrival threshold while following (inclusive).
        waypoint_separation: Minimum spacing between any two waypoints of a
            tour when authoring.
        logger: Optional Logger receiving one entry per operation.
    """

    def __init__(self, waypoint_radius: Optional[float] = None,
                 waypoint_separation: Optional[float] = None,
                 logger: Optional[Logger] = None):
        if waypoint_radius is None:
            waypoint_radius = CONFIG["waypoint_radius"]
        if waypoint_separation is None:
            waypoint_separation = CONFIG["waypoint_separation"]
        if waypoint_radius < 0:
            raise ValueError(f"waypoint_radius must be non-negative, got {waypoint_radius}")
        if waypoint_separation < 0:
            raise ValueError(f"waypoint_separation must be non-negative, got {waypoint_separation}")

        self.waypoint_radius = float(waypoint_radius)
        self.waypoint_separation = float(waypoint_separation)
        self.logger = logger

        self.mode = Mode.BROWSE_OVERVIEW
        self.tours: dict[str, Tour] = {}  # committed, keyed by id
        self.current_tour: Optional[Tour] = None  # being authored
        self.selected_tour: Optional[Tour] = None  # shown in details or being followed
        self.location: Optional[Location] = None

        # Follow cursor, only meaningful while FOLLOWING
        self.visited: int = 0
        self.total: int = 0
        self._steps: list[TourStep] = []

        self._output: list[Chunk] = [self._overview()]

    # Logging helpers

    def _log(self, message: str, data: Optional[dict] = None):
        if self.logger:
            self.logger.log(message, data)

    def _reject(self, operation: str, reason: str, **details) -> Status:
        data = {"operation": operation, "reason": reason, "mode": self.mode.value}
        data.update(details)
        self._log("Rejected", data)
        return Status.ERROR

    # Output builders

    def _overview(self) -> BrowseOverview:
        return BrowseOverview(tuple((tour_id, self.tours[tour_id].title)
                                    for tour_id in self.tour_ids()))

    def _create_header(self) -> CreateHeader:
        tour = self.current_tour
        return CreateHeader(tour.title, tour.leg_count, tour.waypoint_count)

    def _directions(self, step: TourStep) -> list[Chunk]:
        target = step.waypoint.location
        return [
            FollowLeg(step.leg.annotation),
            FollowBearing(bearing(self.location, target), distance(self.location, target)),
        ]

    def _follow(self) -> list[Chunk]:
        """Advance the cursor if the next waypoint is reached, then describe progress"""
        title = self.selected_tour.title
        if self.visited >= self.total:
            return [FollowHeader(title, self.visited, self.total)]

        target = self._steps[self.visited]
        dist = distance(self.location, target.waypoint.location)
        if dist > self.waypoint_radius:
            return [FollowHeader(title, self.visited, self.total)] + self._directions(target)

        self.visited += 1
        self._log("Waypoint reached", {
            "tour": self.selected_tour.id,
            "visited": self.visited,
            "total": self.total,
            "distance": dist,
        })
        output: list[Chunk] = [
            FollowHeader(title, self.visited, self.total),
            FollowWaypoint(target.waypoint.annotation),
        ]
        if self.visited < self.total:
            output += self._directions(self._steps[self.visited])
        return output

    # Queries

    def get_output(self) -> list[Chunk]:
        """Chunks produced by the last operation that changed the display"""
        return list(self._output)

    def tour_ids(self) -> list[str]:
        return sorted(self.tours)

    def get_tour(self, tour_id: str) -> Optional[Tour]:
        return self.tours.get(tour_id)

    def get_state(self) -> dict:
        """Get current state as dict for logging"""
        state = {
            "mode": self.mode.value,
            "tours": self.tour_ids(),
            "current_tour": self.current_tour.id if self.current_tour else None,
            "selected_tour": self.selected_tour.id if self.selected_tour else None,
        }
        if self.location:
            state["location"] = self.location.to_dict()
        if self.mode is Mode.FOLLOWING:
            state["visited"] = self.visited
            state["total"] = self.total
        return state

    # Location

    def set_location(self, x: float, y: float) -> Status:
        self.location = Location(float(x), float(y))
        if self.mode is Mode.FOLLOWING:
            self._output = self._follow()
        return Status.OK

    # Authoring

    def start_new_tour(self, tour_id: str, title: str,
                       annotation: Union[Annotation, str, None] = None) -> Status:
        if self.mode not in BROWSING:
            return self._reject("start_new_tour", "sequencing")
        if tour_id in self.tours:
            return self._reject("start_new_tour", "identity", tour=tour_id)

        self.current_tour = Tour(tour_id, title, as_annotation(annotation))
        self.selected_tour = None
        self.mode = Mode.CREATING
        self._output = [self._create_header()]
        self._log("Tour started", {"tour": tour_id, "title": title})
        return Status.OK

    def add_leg(self, annotation: Union[Annotation, str, None] = None) -> Status:
        if self.mode is not Mode.CREATING:
            return self._reject("add_leg", "sequencing")
        stage = self.current_tour.last_stage
        if not stage.assign_leg(Leg(as_annotation(annotation))):
            return self._reject("add_leg", "structural", stage=stage.to_dict())

        self._output = [self._create_header()]
        self._log("Leg added", {"tour": self.current_tour.id, "legs": self.current_tour.leg_count})
        return Status.OK

    def add_waypoint(self, annotation: Union[Annotation, str, None] = None) -> Status:
        if self.mode is not Mode.CREATING:
            return self._reject("add_waypoint", "sequencing")
        if self.location is None:
            return self._reject("add_waypoint", "no_location")

        tour = self.current_tour
        # Any two waypoints of a tour stay at least the separation apart
        gap = tour.closest_waypoint_distance(self.location)
        if gap is not None and gap < self.waypoint_separation:
            return self._reject("add_waypoint", "separation",
                                distance=gap, minimum=self.waypoint_separation)

        stage = tour.last_stage
        if not stage.can_accept_waypoint():
            stage = tour.append_stage()
        stage.assign_waypoint(Waypoint(self.location, as_annotation(annotation)))

        self._output = [self._create_header()]
        self._log("Waypoint added", {
            "tour": tour.id,
            "location": self.location.to_dict(),
            "legs": tour.leg_count,
            "waypoints": tour.waypoint_count,
        })
        return Status.OK

    def end_new_tour(self) -> Status:
        if self.mode is not Mode.CREATING:
            return self._reject("end_new_tour", "sequencing")
        tour = self.current_tour
        if not tour.last_stage.promote_to_final():
            return self._reject("end_new_tour", "completion", stage=tour.last_stage.to_dict())

        self.tours[tour.id] = tour
        self.current_tour = None
        self.mode = Mode.BROWSE_OVERVIEW
        self._output = [self._overview()]
        self._log("Tour committed", {
            "tour": tour.id,
            "legs": tour.leg_count,
            "waypoints": tour.waypoint_count,
        })
        return Status.OK

    # Browsing

    def show_tour_details(self, tour_id: str) -> Status:
        if self.mode not in BROWSING:
            return self._reject("show_tour_details", "sequencing")
        tour = self.tours.get(tour_id)
        if tour is None:
            return self._reject("show_tour_details", "identity", tour=tour_id)

        self.selected_tour = tour
        self.mode = Mode.BROWSE_DETAILS
        self._output = [BrowseDetails(tour.id, tour.title, tour.annotation)]
        self._log("Showing details", {"tour": tour_id})
        return Status.OK

    # Following

    def follow_tour(self, tour_id: str) -> Status:
        if self.mode not in BROWSING:
            return self._reject("follow_tour", "sequencing")
        tour = self.tours.get(tour_id)
        if tour is None:
            return self._reject("follow_tour", "identity", tour=tour_id)

        self.selected_tour = tour
        self.mode = Mode.FOLLOWING
        self._steps = tour.steps()
        self.visited = 0
        self.total = tour.waypoint_count
        # Directions start with the next location fix
        self._output = []
        self._log("Following tour", {"tour": tour_id, "waypoints": self.total})
        return Status.OK

    def end_selected_tour(self) -> Status:
        if self.mode is not Mode.FOLLOWING:
            return self._reject("end_selected_tour", "sequencing")

        summary = {"tour": self.selected_tour.id, "visited": self.visited, "total": self.total}
        self.selected_tour = None
        self._steps = []
        self.visited = 0
        self.total = 0
        self.mode = Mode.BROWSE_OVERVIEW
        self._output = [self._overview()]
        self._log("Tour ended", summary)
        return Status.OK
