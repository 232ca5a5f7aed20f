"""Output chunks produced by the controller for the display layer."""

from dataclasses import dataclass, asdict, field

from .models import Annotation


@dataclass(frozen=True)
class Chunk:
    """Base for all output chunks"""

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        d = {"kind": self.kind}
        for key, value in asdict(self).items():
            d[key] = value["text"] if isinstance(getattr(self, key), Annotation) else value
        return d


@dataclass(frozen=True)
class BrowseOverview(Chunk):
    """Committed tours as (id, title) pairs, sorted by id"""
    tours: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {"kind": self.kind,
                "tours": [{"id": tour_id, "title": title} for tour_id, title in self.tours]}


@dataclass(frozen=True)
class BrowseDetails(Chunk):
    tour_id: str
    title: str
    annotation: Annotation


@dataclass(frozen=True)
class CreateHeader(Chunk):
    title: str
    leg_count: int
    waypoint_count: int


@dataclass(frozen=True)
class FollowHeader(Chunk):
    title: str
    visited: int
    total: int


@dataclass(frozen=True)
class FollowLeg(Chunk):
    annotation: Annotation


@dataclass(frozen=True)
class FollowWaypoint(Chunk):
    annotation: Annotation


@dataclass(frozen=True)
class FollowBearing(Chunk):
    bearing: float  # degrees clockwise from north
    distance: float
