"""Text-to-speech for tour announcements."""

import subprocess
from typing import Optional, Callable

from .config import CONFIG


class Audio:
    """Speaks directions and arrivals"""

    callback: Optional[Callable[[str], None]] = None  # Class-level hook, e.g. for recording

    @classmethod
    def set_callback(cls, callback: Optional[Callable[[str], None]]):
        """Set callback function for audio events"""
        cls.callback = callback

    @staticmethod
    def speak(text: str):
        """Speak text using espeak, printing it when espeak is unavailable"""
        if Audio.callback:
            Audio.callback(text)

        try:
            subprocess.run(
                ["espeak", "-s", str(CONFIG["speech_rate"]), text],
                capture_output=True,
                timeout=CONFIG["speech_timeout"]
            )
        except FileNotFoundError:
            print(f"[AUDIO] {text}")
        except (subprocess.SubprocessError, OSError) as e:
            print(f"Audio error: {e}")
            print(f"[AUDIO] {text}")
