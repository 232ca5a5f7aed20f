"""Command parsing, session recording and playback."""

import json
import shlex
import time
from datetime import datetime
from typing import Optional

from .config import CONFIG
from .controller import Controller, Status

# verb -> (controller operation, required args, optional args)
VERBS = {
    "start": ("start_new_tour", ["tour_id", "title"], ["annotation"]),
    "leg": ("add_leg", [], ["annotation"]),
    "waypoint": ("add_waypoint", [], ["annotation"]),
    "end": ("end_new_tour", [], []),
    "show": ("show_tour_details", ["tour_id"], []),
    "follow": ("follow_tour", ["tour_id"], []),
    "stop": ("end_selected_tour", [], []),
    "loc": ("set_location", ["x", "y"], []),
}

OPERATIONS = {op for op, _, _ in VERBS.values()}


def parse_command(line: str) -> Optional[dict]:
    """Parse one shell line into a command dict.

    Lines look like `start T1 "Old Town" "From the castle"` or `loc -500 0`.
    Blank lines and `#` comments give None.

    Raises:
        ValueError: Unknown verb, wrong number of arguments, bad quoting or
            non-numeric coordinates.
    """
    tokens = shlex.split(line, comments=True)
    if not tokens:
        return None

    verb, values = tokens[0].lower(), tokens[1:]
    if verb not in VERBS:
        raise ValueError(f"Unknown command: {verb}")
    op, required, optional = VERBS[verb]
    if not len(required) <= len(values) <= len(required) + len(optional):
        usage = " ".join([verb] + required + [f"[{name}]" for name in optional])
        raise ValueError(f"Usage: {usage}")

    args = dict(zip(required + optional, values))
    if op == "set_location":
        try:
            args = {"x": float(args["x"]), "y": float(args["y"])}
        except ValueError:
            raise ValueError(f"Coordinates must be numbers: {args['x']} {args['y']}") from None
    return {"op": op, "args": args}


def apply_command(controller: Controller, command: dict) -> Status:
    """Run a parsed or recorded command against the controller"""
    op = command["op"]
    if op not in OPERATIONS:
        raise ValueError(f"Unknown operation: {op}")
    return getattr(controller, op)(**command.get("args", {}))


class SessionRecorder:
    """Applies commands and records them, with their results, to a file"""

    def __init__(self, controller: Controller, record_path: str):
        self.controller = controller
        self.record_path = record_path
        self.commands: list[dict] = []
        self.start_time = time.time()

    def apply(self, command: dict) -> Status:
        """Apply a command and record it"""
        status = apply_command(self.controller, command)
        self.commands.append({
            "elapsed": time.time() - self.start_time,
            "op": command["op"],
            "args": command.get("args", {}),
            "status": status.value,
            "output": [chunk.to_dict() for chunk in self.controller.get_output()],
        })
        return status

    def save(self):
        """Save session to file"""
        with open(self.record_path, "w") as f:
            json.dump({
                "recorded_at": datetime.now().isoformat(),
                "commands": self.commands
            }, f, indent=2)
        print(f"Session saved to {self.record_path} ({len(self.commands)} commands)")


class SessionPlayback:
    """Plays back commands from a recorded or hand-written session file"""

    def __init__(self, playback_path: str, speed: float = 1.0):
        self.playback_path = playback_path
        self.speed = speed
        self.commands: list[dict] = []
        self.index = 0
        self.failures = 0

        with open(playback_path) as f:
            data = json.load(f)
            self.commands = data["commands"]
        print(f"Loaded session from {playback_path} ({len(self.commands)} commands)")

    def next_command(self) -> Optional[dict]:
        """Get next command sequentially"""
        if self.index >= len(self.commands):
            return None
        entry = self.commands[self.index]
        self.index += 1
        return {"op": entry["op"], "args": entry.get("args", {})}

    def record_result(self, status: Status):
        if not status:
            self.failures += 1

    def get_interval(self) -> float:
        """Seconds to wait before the next command, from recorded timing and speed"""
        if self.index <= 0 or self.index >= len(self.commands):
            return CONFIG["playback_interval"] / self.speed

        prev_elapsed = self.commands[self.index - 1].get("elapsed")
        curr_elapsed = self.commands[self.index].get("elapsed")
        if prev_elapsed is None or curr_elapsed is None:
            return CONFIG["playback_interval"] / self.speed

        interval = (curr_elapsed - prev_elapsed) / self.speed
        return max(0.0, min(interval, 5.0))

    def is_finished(self) -> bool:
        return self.index >= len(self.commands)

    def get_status(self) -> str:
        progress = f"{self.index}/{len(self.commands)}"
        if self.failures == 0:
            return f"Playback OK ({progress})"
        return f"Playback: {self.failures} rejected ({progress})"
