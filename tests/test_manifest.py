"""Tests for manifest loading and validation."""

import json
from pathlib import Path

import pytest

from ytclip.manifest import ClipRequest, ToolConfig, load_manifest
from ytclip.resolver import DEFAULT_STREAM_FORMAT


class TestToolConfig:
    def test_defaults(self):
        cfg = ToolConfig()
        assert cfg.ffmpeg_path == "ffmpeg"
        assert cfg.stream_format == DEFAULT_STREAM_FORMAT
        assert cfg.output_dir is None


class TestClipRequest:
    def test_minimal(self):
        r = ClipRequest(url="https://youtu.be/dQw4w9WgXcQ", start_time="0:10", end_time="0:20")
        assert r.output is None
        assert r.speed == 1.0
        assert r.tools == ToolConfig()


class TestLoadManifest:
    def test_load_sample(self, sample_manifest_path: Path):
        r = load_manifest(sample_manifest_path)
        assert r.url == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
        assert r.start_time == "0:43"
        assert r.end_time == "1:05"
        assert r.speed == 1.5
        assert r.output is None
        assert r.tools.output_dir == Path("clips")

    def test_numeric_times_become_strings(self, tmp_path: Path):
        path = tmp_path / "m.json"
        path.write_text(json.dumps({
            "url": "https://youtu.be/dQw4w9WgXcQ",
            "start_time": 30,
            "end_time": 45,
            "output": "out.mp4",
        }))
        r = load_manifest(path)
        assert r.start_time == "30"
        assert r.end_time == "45"
        assert r.output == Path("out.mp4")
        assert r.tools == ToolConfig()

    def test_load_invalid_json(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("not json")
        with pytest.raises(json.JSONDecodeError):
            load_manifest(bad)

    def test_load_missing_fields(self, tmp_path: Path):
        incomplete = tmp_path / "incomplete.json"
        incomplete.write_text('{"url": "https://youtu.be/dQw4w9WgXcQ"}')
        with pytest.raises(ValueError, match="must contain"):
            load_manifest(incomplete)
