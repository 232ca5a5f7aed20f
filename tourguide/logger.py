"""Logging module for Tour Guide."""

import json
from datetime import datetime
from typing import Optional, Callable


class Logger:
    """Logs controller activity to stdout, a file, and/or a callback"""

    def __init__(self, log_path: Optional[str] = None, callback: Optional[Callable] = None,
                 echo: bool = True):
        self.log_path = log_path
        self.callback = callback
        self.echo = echo
        self.file = None
        if log_path:
            self.file = open(log_path, "a")
            self._write_header()

    def _write_header(self):
        if self.file:
            self.file.write(f"\n{'='*60}\n")
            self.file.write(f"Tour Guide Log - {datetime.now().isoformat()}\n")
            self.file.write(f"{'='*60}\n\n")
            self.file.flush()

    def log(self, message: str, data: Optional[dict] = None):
        """Log a message with optional structured data"""
        timestamp = datetime.now().isoformat()
        line = f"[{timestamp}] {message}"
        if data:
            line += f" | {json.dumps(data)}"
        if self.echo:
            print(line)
        if self.file:
            self.file.write(line + "\n")
            self.file.flush()
        if self.callback:
            self.callback(message, data)

    def section(self, title: str):
        """Log a banner separating phases of a session (e.g. a script run)"""
        rule = "#" * 60
        if self.echo:
            print(f"{rule}\n{title}\n{rule}")
        if self.file:
            self.file.write(f"{rule}\n{title}\n{rule}\n")
            self.file.flush()

    def close(self):
        if self.file:
            self.file.close()
            self.file = None
