"""JSON manifest schema — the contract between CLI/API and engine."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from ytclip.resolver import DEFAULT_STREAM_FORMAT


@dataclass
class ToolConfig:
    """Where the external tools live and how they are driven."""

    ffmpeg_path: str = "ffmpeg"
    stream_format: str = DEFAULT_STREAM_FORMAT
    output_dir: Path | None = None


@dataclass
class ClipRequest:
    """One clip to cut: source URL, time range and speed."""

    url: str
    start_time: str
    end_time: str
    output: Path | None = None
    speed: float = 1.0
    tools: ToolConfig = field(default_factory=ToolConfig)


def load_manifest(path: str | Path) -> ClipRequest:
    """Load a clip request from a JSON file."""
    path = Path(path)
    data = json.loads(path.read_text())

    missing = [k for k in ("url", "start_time", "end_time") if k not in data]
    if missing:
        raise ValueError(
            f"Manifest must contain 'url', 'start_time' and 'end_time' fields "
            f"(missing: {', '.join(missing)})"
        )

    tools_data = dict(data.get("tools", {}))
    if tools_data.get("output_dir") is not None:
        tools_data["output_dir"] = Path(tools_data["output_dir"])
    tools = ToolConfig(**tools_data)

    output = data.get("output")
    return ClipRequest(
        url=data["url"],
        start_time=str(data["start_time"]),
        end_time=str(data["end_time"]),
        output=Path(output) if output else None,
        speed=float(data.get("speed", 1.0)),
        tools=tools,
    )
