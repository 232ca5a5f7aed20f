"""Text rendering of controller output."""

from typing import Iterable, Optional

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
from .geo import bearing_to_compass


def _text(annotation) -> str:
    return annotation.text.strip() or "(no description)"


def render_chunk(chunk: Chunk) -> list[str]:
    """Display lines for a single chunk"""
    if isinstance(chunk, BrowseOverview):
        if not chunk.tours:
            return ["No tours yet"]
        lines = [f"{len(chunk.tours)} tour(s):"]
        lines.extend(f"  {tour_id}: {title}" for tour_id, title in chunk.tours)
        return lines
    if isinstance(chunk, BrowseDetails):
        return [f"Tour {chunk.tour_id}: {chunk.title}", f"  {_text(chunk.annotation)}"]
    if isinstance(chunk, CreateHeader):
        return [f"Creating '{chunk.title}' - {chunk.leg_count} leg(s), "
                f"{chunk.waypoint_count} waypoint(s)"]
    if isinstance(chunk, FollowHeader):
        return [f"Following '{chunk.title}' - {chunk.visited}/{chunk.total} waypoints visited"]
    if isinstance(chunk, FollowWaypoint):
        return [f"Arrived: {_text(chunk.annotation)}"]
    if isinstance(chunk, FollowLeg):
        return [f"Next leg: {_text(chunk.annotation)}"]
    if isinstance(chunk, FollowBearing):
        compass = bearing_to_compass(chunk.bearing)
        return [f"Head {compass} ({chunk.bearing:.0f}°), {chunk.distance:.0f} to go"]
    raise TypeError(f"Unknown chunk type: {type(chunk).__name__}")


def render_output(chunks: Iterable[Chunk]) -> str:
    """Display text for a whole output sequence"""
    lines = []
    for chunk in chunks:
        lines.extend(render_chunk(chunk))
    return "\n".join(lines)


def announcement(chunks: Iterable[Chunk]) -> Optional[str]:
    """Spoken text for follow output: arrival, then '{compass}, {distance}'.

    Returns None when there is nothing worth saying (non-follow output).
    """
    parts = []
    header = None
    for chunk in chunks:
        if isinstance(chunk, FollowHeader):
            header = chunk
        elif isinstance(chunk, FollowWaypoint):
            parts.append(f"Arrived at {_text(chunk.annotation)}")
            if header and header.visited == header.total:
                parts.append("Tour complete")
        elif isinstance(chunk, FollowBearing):
            parts.append(f"{bearing_to_compass(chunk.bearing)}, {int(chunk.distance)}")
    if not parts:
        return None
    return ". ".join(parts)
