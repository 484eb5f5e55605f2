"""YouTube URL matching and stream resolution via yt-dlp."""

import logging
import re

from yt_dlp import YoutubeDL
from yt_dlp.utils import DownloadError

from ytclip.errors import ResolveError, UnsupportedURLError

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "video"
DEFAULT_STREAM_FORMAT = "best[ext=mp4]/best"

_VIDEO_ID_RE = re.compile(
    r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/)"
    r"([a-zA-Z0-9_-]{11})"
)


def extract_video_id(url: str) -> str | None:
    """Return the 11-character video ID in ``url``, or None."""
    m = _VIDEO_ID_RE.search(url)
    return m.group(1) if m else None


def require_video_id(url: str) -> str:
    video_id = extract_video_id(url)
    if video_id is None:
        raise UnsupportedURLError(f"Could not extract video ID from URL: {url}")
    return video_id


def _extract_info(url: str, **opts) -> dict:
    ydl_opts = {
        "quiet": True,
        "no_warnings": True,
        "noplaylist": True,
        "skip_download": True,
        **opts,
    }
    with YoutubeDL(ydl_opts) as ydl:
        return ydl.extract_info(url, download=False)


def fetch_title(url: str) -> str:
    """Look up the video title; falls back to ``"video"`` on any failure.

    The raw title is returned; callers sanitize it before using it in a path.
    """
    try:
        info = _extract_info(url)
    except Exception as e:
        logger.warning("Could not fetch title for %s: %s", url, e)
        return DEFAULT_TITLE
    title = (info or {}).get("title")
    if not title:
        logger.warning("No title in metadata for %s", url)
        return DEFAULT_TITLE
    return title


def resolve_stream_url(url: str, stream_format: str = DEFAULT_STREAM_FORMAT) -> str:
    """Resolve the direct media URL ffmpeg should read from.

    Raises:
        ResolveError: yt-dlp failed or returned no usable URL.
    """
    try:
        info = _extract_info(url, format=stream_format)
    except DownloadError as e:
        raise ResolveError(f"Failed to extract video URL: {e}") from e

    stream_url = (info or {}).get("url")
    if not stream_url:
        # Merged formats carry one URL per requested stream.
        formats = (info or {}).get("requested_formats") or []
        stream_url = next((f.get("url") for f in formats if f.get("url")), None)
    if not stream_url:
        raise ResolveError(f"Failed to extract video URL for {url}")
    return stream_url
