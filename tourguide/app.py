"""Interactive and scripted shell around the controller."""

import sys
import time
from typing import Optional, TextIO

from .audio import Audio
from .controller import Controller, Mode, Status
from .logger import Logger
from .render import announcement, render_output
from .session import VERBS, SessionPlayback, SessionRecorder, apply_command, parse_command

HELP = """Commands:
  start ID TITLE [DESCRIPTION]   begin authoring a tour
  loc X Y                        set the current location
  leg [DESCRIPTION]              describe the way on from here
  waypoint [DESCRIPTION]         mark a waypoint at the current location
  end                            finish the tour being authored
  show ID                        show a tour's details
  follow ID                      start following a tour
  stop                           stop following
  help                           this text
  quit                           leave"""


class TourGuide:
    """Main application"""

    def __init__(self, log_path: Optional[str] = None,
                 waypoint_radius: Optional[float] = None,
                 waypoint_separation: Optional[float] = None,
                 speak: bool = False, verbose: bool = False,
                 record_path: Optional[str] = None,
                 out: Optional[TextIO] = None):
        self.logger = Logger(log_path, echo=verbose)
        self.controller = Controller(waypoint_radius, waypoint_separation, logger=self.logger)
        self.speak = speak
        self.out = out
        self.recorder = SessionRecorder(self.controller, record_path) if record_path else None
        self.commands_run = 0
        self.commands_rejected = 0

    def _print(self, text: str):
        print(text, file=self.out or sys.stdout)

    def handle(self, command: dict) -> Status:
        """Apply one command and show the resulting output"""
        if self.recorder:
            status = self.recorder.apply(command)
        else:
            status = apply_command(self.controller, command)

        self.commands_run += 1
        if not status:
            self.commands_rejected += 1
            self._print(f"Not possible right now: {command['op']}")
            return status

        self._print(render_output(self.controller.get_output()))
        if (self.speak and command["op"] == "set_location"
                and self.controller.mode is Mode.FOLLOWING):
            message = announcement(self.controller.get_output())
            if message:
                Audio.speak(message)
                self.logger.log(f"AUDIO: {message}")
        return status

    def handle_line(self, line: str) -> Optional[Status]:
        """Parse and apply a typed line; bad input is reported, not raised"""
        try:
            command = parse_command(line)
        except ValueError as e:
            self._print(str(e))
            return None
        if command is None:
            return None
        return self.handle(command)

    def play(self, playback: SessionPlayback):
        """Run every command of a session file"""
        self.logger.section(f"PLAYBACK: {playback.playback_path}")
        while not playback.is_finished():
            command = playback.next_command()
            self._print(f"> {command['op']} {command['args']}")
            playback.record_result(self.handle(command))
            interval = playback.get_interval()
            if interval > 0:
                time.sleep(interval)
        self.logger.log("Playback finished", {"status": playback.get_status()})

    def interact(self, source: Optional[TextIO] = None):
        """Read commands from a terminal (or any line source) until quit/EOF"""
        self._print(render_output(self.controller.get_output()))
        self._print("Type 'help' for commands.")
        for line in source or sys.stdin:
            word = line.strip().lower()
            if word in ("quit", "exit"):
                break
            if word == "help":
                self._print(HELP)
                continue
            self.handle_line(line)

    def run(self, playback: Optional[SessionPlayback] = None):
        """Run the guide"""
        self.logger.log("Session started", {
            "waypoint_radius": self.controller.waypoint_radius,
            "waypoint_separation": self.controller.waypoint_separation,
            "verbs": sorted(VERBS),
        })
        try:
            if playback:
                self.play(playback)
            else:
                self.interact()
        except KeyboardInterrupt:
            self._print("\nInterrupted")
            self.logger.log("Session interrupted by user")
        finally:
            if self.recorder:
                self.recorder.save()
            summary = {
                "commands": self.commands_run,
                "rejected": self.commands_rejected,
                "state": self.controller.get_state(),
            }
            self.logger.log("Session summary", summary)
            self.logger.close()
