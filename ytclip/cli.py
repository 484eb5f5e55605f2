"""Thin CLI entry point — builds a ClipRequest and calls the engine."""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from ytclip import __version__, ffutil
from ytclip.engine import clip
from ytclip.errors import ClipError
from ytclip.manifest import ClipRequest, ToolConfig, load_manifest
from ytclip.models import validate_speed

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# ANSI styles per status tag.
_TAG_STYLES = {
    "INFO": "\033[34m",
    "TIME": "\033[33m",
    "SPEED": "\033[35m",
    "SUCCESS": "\033[1;32m",
    "ERROR": "\033[31m",
}
_PATH_STYLE = "\033[36m"
_RESET = "\033[0m"


def _style(text: str, style: str, stream=None) -> str:
    if not (stream or sys.stdout).isatty():
        return text
    return f"{style}{text}{_RESET}"


def _tag(name: str, stream=None) -> str:
    return _style(f"[{name}]", _TAG_STYLES.get(name, ""), stream)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ytclip",
        description="Download specific clips from YouTube videos.",
    )
    parser.add_argument("url", nargs="?", help="YouTube URL to download from")
    parser.add_argument("start_time", nargs="?", help="Start time (e.g., 1:30, 90, 1:30:45)")
    parser.add_argument("end_time", nargs="?", help="End time (e.g., 2:45, 165, 2:45:30)")
    parser.add_argument("--output", "-o", type=Path, help="Custom output filename")
    parser.add_argument("--speed", "-s", type=float, default=1.0, help="Playback speed (0.5 to 4.0)")
    parser.add_argument("--manifest", "-m", type=Path, help="Path to a JSON manifest file")
    parser.add_argument("--ffmpeg", type=str, default="ffmpeg", help="ffmpeg executable")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _fail(message: str) -> NoReturn:
    print(f"{_tag('ERROR', sys.stderr)} Error: {message}", file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        if args.manifest:
            request = load_manifest(args.manifest)
        elif args.url and args.start_time and args.end_time:
            request = ClipRequest(
                url=args.url,
                start_time=args.start_time,
                end_time=args.end_time,
                output=args.output,
                speed=args.speed,
                tools=ToolConfig(ffmpeg_path=args.ffmpeg),
            )
        else:
            _fail("provide URL START_TIME END_TIME or --manifest.")
        # Speed is checked before any parsing or tool lookup.
        validate_speed(request.speed)
        ffutil.check_ffmpeg(request.tools.ffmpeg_path)
    except (ClipError, ValueError, TypeError, OSError) as e:
        _fail(str(e))

    def on_status(tag: str, message: str) -> None:
        print(f"{_tag(tag)} {message}")

    try:
        result = clip(request, on_status=on_status)
    except ClipError as e:
        _fail(str(e))

    print(f"{_tag('SUCCESS')} Clip saved as: {_style(str(result.output_path), _PATH_STYLE)}")


def serve(argv: list[str] | None = None) -> None:
    """Launch the HTTP job API."""
    parser = argparse.ArgumentParser(prog="ytclip-serve", description="ytclip HTTP API.")
    parser.add_argument("--port", type=int, default=8321, help="Port to listen on")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--work-dir", type=Path, help="Directory for finished clips")
    parser.add_argument("--ffmpeg", type=str, default="ffmpeg", help="ffmpeg executable")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    from ytclip.web import create_app
    app = create_app(work_dir=args.work_dir, ffmpeg_path=args.ffmpeg)
    print(f"ytclip API: http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
