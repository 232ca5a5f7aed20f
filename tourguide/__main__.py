#!/usr/bin/env python3
"""
Tour Guide - author, browse and follow waypoint tours

Usage:
    python -m tourguide [options]

Options:
    --radius R        Arrival radius around waypoints (default: 10)
    --separation S    Minimum spacing between consecutive waypoints (default: 25)
    --script FILE     Play back a session file instead of reading commands
    --speed FACTOR    Playback speed multiplier (default: 1.0)
    --record FILE     Record the session (commands and output) to a JSON file
    --log FILE        Log file path (default: tourguide_TIMESTAMP.log)
    --speak           Speak follow directions and arrivals
    --verbose         Echo log lines to the terminal
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

from .app import TourGuide
from .config import CONFIG
from .session import SessionPlayback


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Tour Guide - author, browse and follow waypoint tours"
    )
    parser.add_argument("--radius", type=float, default=CONFIG["waypoint_radius"],
                        help=f"Arrival radius around waypoints (default: {CONFIG['waypoint_radius']})")
    parser.add_argument("--separation", type=float, default=CONFIG["waypoint_separation"],
                        help=f"Minimum spacing between waypoints (default: {CONFIG['waypoint_separation']})")
    parser.add_argument("--script", metavar="FILE",
                        help="Play back a session file")
    parser.add_argument("--speed", type=float, default=1.0,
                        help="Playback speed multiplier (default: 1.0)")
    parser.add_argument("--record", metavar="FILE",
                        help="Record session to JSON file")
    parser.add_argument("--log", metavar="FILE",
                        help="Log file path (default: tourguide_TIMESTAMP.log)")
    parser.add_argument("--speak", action="store_true",
                        help="Speak follow directions and arrivals")
    parser.add_argument("--verbose", action="store_true",
                        help="Echo log lines to the terminal")

    args = parser.parse_args(argv)

    if args.radius < 0:
        parser.error("--radius must not be negative")
    if args.separation < 0:
        parser.error("--separation must not be negative")
    if args.speed <= 0:
        parser.error("--speed must be positive")

    playback = None
    if args.script:
        if not Path(args.script).exists():
            print(f"Session file not found: {args.script}")
            sys.exit(1)
        playback = SessionPlayback(args.script, args.speed)

    log_path = args.log
    if not log_path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = f"tourguide_{timestamp}.log"

    guide = TourGuide(
        log_path=log_path,
        waypoint_radius=args.radius,
        waypoint_separation=args.separation,
        speak=args.speak,
        verbose=args.verbose,
        record_path=args.record,
    )
    guide.run(playback)


if __name__ == "__main__":
    main()
