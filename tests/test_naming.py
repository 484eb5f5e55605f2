"""Tests for output filename derivation."""

import pytest

from ytclip.naming import default_output_name, sanitize_title


class TestSanitizeTitle:
    def test_plain_title_unchanged(self):
        title = "Rick Astley - Never Gonna Give You Up (Official Video)"
        assert sanitize_title(title) == title

    @pytest.mark.parametrize("char", list('/\\:*?"<>|'))
    def test_unsafe_chars_replaced(self, char):
        assert sanitize_title(f"a{char}b") == "a_b"

    def test_whitespace_collapsed(self):
        assert sanitize_title("  lots \t of\n  space  ") == "lots of space"

    def test_mixed(self):
        assert sanitize_title("What? A/B test") == "What_ A_B test"

    def test_empty_falls_back(self):
        assert sanitize_title("   ") == "video"


class TestDefaultOutputName:
    def test_unity_speed(self):
        assert default_output_name("Title", "1:30", "2:45") == "Title_clip_1-30_2-45.mp4"

    def test_near_unity_speed_uses_plain_pattern(self):
        assert default_output_name("Title", "30", "60", 1.005) == "Title_clip_30_60.mp4"

    def test_integral_speed(self):
        assert default_output_name("Title", "1:30", "2:45", 2.0) == "Title_clip_1-30-2-45_2x.mp4"

    def test_fractional_speed(self):
        assert (
            default_output_name("Title", "0:01:00", "0:02:00", 1.5)
            == "Title_clip_0-01-00-0-02-00_1.5x.mp4"
        )
