"""Orchestrator — turns a ClipRequest into a clip on disk."""

import logging
from functools import partial
from pathlib import Path
from typing import Callable

from ytclip import ffutil, resolver
from ytclip.manifest import ClipRequest
from ytclip.models import ClipRange, ClipResult, is_unity_speed, validate_speed
from ytclip.naming import default_output_name, sanitize_title

logger = logging.getLogger(__name__)


def output_path_for(request: ClipRequest, title: str) -> Path:
    if request.output is not None:
        path = Path(request.output)
    else:
        path = Path(
            default_output_name(
                sanitize_title(title),
                request.start_time,
                request.end_time,
                request.speed,
            )
        )
    if request.tools.output_dir is not None and not path.is_absolute():
        path = Path(request.tools.output_dir) / path
    return path


def clip(
    request: ClipRequest,
    resolve: Callable[[str], str] | None = None,
    transcode: Callable[[list[str]], None] | None = None,
    fetch_title: Callable[[str], str] | None = None,
    on_status: Callable[[str, str], None] | None = None,
) -> ClipResult:
    """Cut one clip.

    Args:
        request: What to cut.
        resolve: url -> direct media locator. Defaults to yt-dlp.
        transcode: Runs the transcoder on a directive list. Defaults to ffmpeg.
        fetch_title: url -> video title. Defaults to yt-dlp, falling back to
            ``"video"``.
        on_status: Optional callback(tag, message) for user-facing status lines.

    The locator is fully resolved before the transcoder starts. Errors from
    either step propagate unchanged; nothing is retried.
    """

    def _status(tag: str, message: str) -> None:
        logger.info("[%s] %s", tag, message)
        if on_status:
            on_status(tag, message)

    tools = request.tools
    if resolve is None:
        resolve = partial(resolver.resolve_stream_url, stream_format=tools.stream_format)
    if transcode is None:
        transcode = partial(ffutil.transcode, ffmpeg_path=tools.ffmpeg_path)
    if fetch_title is None:
        fetch_title = resolver.fetch_title

    speed = validate_speed(request.speed)
    clip_range = ClipRange.from_strings(request.start_time, request.end_time)
    video_id = resolver.require_video_id(request.url)

    _status("INFO", f"Video ID: {video_id}")
    _status(
        "TIME",
        f"Clipping from {request.start_time} to {request.end_time} "
        f"(duration: {clip_range.duration:.1f}s)",
    )
    if not is_unity_speed(speed):
        _status("SPEED", f"Speed: {speed:.1f}x")

    _status("INFO", "Fetching video title...")
    title = fetch_title(request.url)
    output_path = output_path_for(request, title)

    _status("INFO", "Streaming clip...")
    source = resolve(request.url)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    directives = ffutil.build_directives(
        clip_range.start,
        clip_range.duration,
        speed,
        source=source,
        output=str(output_path),
    )
    transcode(directives)

    return ClipResult(
        output_path=output_path,
        video_id=video_id,
        title=title,
        start=clip_range.start,
        end=clip_range.end,
        speed=speed,
        directives=directives,
    )
