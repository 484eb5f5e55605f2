"""Error types raised by ytclip."""


class ClipError(Exception):
    """Base class for every error ytclip reports to the user."""


class ParseError(ClipError, ValueError):
    """A time string could not be parsed."""


class InvalidFormatError(ParseError):
    """The time string does not have 1, 2 or 3 colon-separated fields."""


class InvalidComponentError(ParseError):
    """One field of a time string is not a number."""

    def __init__(self, component: str, value: str):
        super().__init__(f"Invalid {component} format: {value!r}")
        self.component = component
        self.value = value


class ValidationError(ClipError, ValueError):
    pass


class NonPositiveDurationError(ValidationError):
    pass


class SpeedOutOfRangeError(ValidationError):
    pass


class UnsupportedURLError(ClipError, ValueError):
    """No video ID could be extracted from the URL."""


class ToolNotFoundError(ClipError, RuntimeError):
    pass


class ResolveError(ClipError, RuntimeError):
    """yt-dlp could not resolve a media locator for the URL."""


class TranscodeError(ClipError, RuntimeError):
    """ffmpeg exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str = ""):
        tail = stderr.strip()[-500:] if stderr else ""
        message = f"FFmpeg failed to process the video (rc={returncode})"
        if tail:
            message += f": {tail}"
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
