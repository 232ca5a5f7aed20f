"""Data classes for Tour Guide."""

from dataclasses import dataclass, asdict
from typing import ClassVar


@dataclass(frozen=True)
class Location:
    x: float
    y: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Annotation:
    """Descriptive text attached to a tour, leg or waypoint"""
    text: str = ""

    DEFAULT: ClassVar["Annotation"]

    @property
    def is_default(self) -> bool:
        return self.text == ""

    def __str__(self) -> str:
        return self.text


Annotation.DEFAULT = Annotation()


@dataclass(frozen=True)
class Waypoint:
    """A point of interest on a tour"""
    location: Location
    annotation: Annotation = Annotation.DEFAULT

    def to_dict(self) -> dict:
        return {"location": self.location.to_dict(), "annotation": self.annotation.text}


@dataclass(frozen=True)
class Leg:
    """The path leading on to the next waypoint"""
    annotation: Annotation = Annotation.DEFAULT

    def to_dict(self) -> dict:
        return {"annotation": self.annotation.text}
