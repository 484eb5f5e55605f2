"""Output filename derivation."""

import re

from ytclip.models import is_unity_speed
from ytclip.resolver import DEFAULT_TITLE
from ytclip.timeparse import format_number

_UNSAFE_CHARS = re.compile(r'[/\\:*?"<>|]')


def sanitize_title(title: str) -> str:
    """Make a video title safe to use as a file name stem."""
    cleaned = " ".join(_UNSAFE_CHARS.sub("_", title).split())
    return cleaned or DEFAULT_TITLE


def default_output_name(title: str, start_time: str, end_time: str, speed: float = 1.0) -> str:
    start = start_time.replace(":", "-")
    end = end_time.replace(":", "-")
    if is_unity_speed(speed):
        return f"{title}_clip_{start}_{end}.mp4"
    return f"{title}_clip_{start}-{end}_{format_number(speed)}x.mp4"
