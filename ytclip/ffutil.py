"""FFmpeg argument construction and subprocess helpers."""

import logging
import shutil
import subprocess

from ytclip.errors import ToolNotFoundError, TranscodeError
from ytclip.models import is_unity_speed
from ytclip.timeparse import format_number

logger = logging.getLogger(__name__)

# Per-stage ceiling of ffmpeg's atempo filter.
MAX_ATEMPO = 2.0

SOURCE_SLOT = "{source}"
OUTPUT_SLOT = "{output}"

# QuickTime-compatible H.264/AAC output. Same for every clip.
ENCODING_DIRECTIVES: tuple[str, ...] = (
    "-c:v", "libx264",
    "-c:a", "aac",
    "-pix_fmt", "yuv420p",
    "-movflags", "faststart",
    "-preset", "fast",
    "-crf", "23",
    "-y",
)


def check_ffmpeg(ffmpeg_path: str = "ffmpeg") -> None:
    """Raise ToolNotFoundError if ffmpeg is not on PATH."""
    if shutil.which(ffmpeg_path) is None:
        raise ToolNotFoundError(f"{ffmpeg_path} not found on PATH. Is it installed?")


def atempo_chain(speed: float) -> list[str]:
    """Split ``speed`` into atempo stages that each stay within MAX_ATEMPO.

    >>> atempo_chain(3.0)
    ['atempo=2.0', 'atempo=1.50']
    """
    if speed <= MAX_ATEMPO:
        return [f"atempo={min(speed, MAX_ATEMPO):.2f}"]

    stages: list[str] = []
    tempo = speed
    while tempo > MAX_ATEMPO:
        stages.append(f"atempo={MAX_ATEMPO:.1f}")
        tempo /= MAX_ATEMPO
    if tempo > 1.0:
        stages.append(f"atempo={tempo:.2f}")
    return stages


def speed_filters(speed: float) -> list[str]:
    """Video and audio filter directives for ``speed``, or none near 1.0."""
    if is_unity_speed(speed):
        return []
    return [
        "-filter:v", f"setpts={1.0 / speed:.2f}*PTS",
        "-filter:a", ",".join(atempo_chain(speed)),
    ]


def build_directives(
    start: float,
    duration: float,
    speed: float,
    source: str = SOURCE_SLOT,
    output: str = OUTPUT_SLOT,
) -> list[str]:
    """Build the ffmpeg argument list (without the program name) for one clip.

    ``duration`` must already be positive and ``speed`` within the validated
    range; neither is re-checked here.
    """
    args = [
        "-ss", format_number(start),
        "-i", source,
        "-t", format_number(duration),
    ]
    args.extend(speed_filters(speed))
    args.extend(ENCODING_DIRECTIVES)
    args.append(str(output))
    return args


def transcode(directives: list[str], ffmpeg_path: str = "ffmpeg") -> None:
    """Run ffmpeg with ``directives`` and wait for it to finish."""
    cmd = [ffmpeg_path, *directives]
    logger.debug("ffmpeg command: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise ToolNotFoundError(
            f"Failed to execute {ffmpeg_path}. Is it installed?"
        ) from e

    if result.returncode != 0:
        raise TranscodeError(result.returncode, result.stderr)
