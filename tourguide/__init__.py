"""Tour Guide - author, browse and follow waypoint tours."""

from .config import CONFIG
from .models import Location, Annotation, Waypoint, Leg
from .geo import distance, bearing, bearing_to_compass
from .stage import Stage, StageKind, count_waypoints, count_legs
from .tour import Tour, TourStep
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
from .logger import Logger
from .controller import Controller, Mode, Status
from .render import render_chunk, render_output, announcement
from .audio import Audio
from .session import parse_command, apply_command, SessionRecorder, SessionPlayback
from .app import TourGuide
from .__main__ import main

__all__ = [
    "CONFIG",
    "Location",
    "Annotation",
    "Waypoint",
    "Leg",
    "distance",
    "bearing",
    "bearing_to_compass",
    "Stage",
    "StageKind",
    "count_waypoints",
    "count_legs",
    "Tour",
    "TourStep",
    "Chunk",
    "BrowseOverview",
    "BrowseDetails",
    "CreateHeader",
    "FollowHeader",
    "FollowLeg",
    "FollowWaypoint",
    "FollowBearing",
    "Logger",
    "Controller",
    "Mode",
    "Status",
    "render_chunk",
    "render_output",
    "announcement",
    "Audio",
    "parse_command",
    "apply_command",
    "SessionRecorder",
    "SessionPlayback",
    "TourGuide",
    "main",
]
