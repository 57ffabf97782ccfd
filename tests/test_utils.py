"""Tests for size formatting, size parsing and path truncation."""

from __future__ import annotations

import pytest

from sizr.utils import bytes_to_human, format_elapsed_ms, parse_size, truncate_path


class TestBytesToHuman:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (512, "512 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (1024 * 1024, "1.0 MB"),
            (5 * 1024**3, "5.0 GB"),
            (2 * 1024**4, "2.0 TB"),
            (4096 * 1024**4, "4096.0 TB"),
        ],
    )
    def test_units(self, size, expected):
        assert bytes_to_human(size) == expected

    def test_rounds_half_up(self):
        # 1.25 KB and 1.35 KB sit exactly on the rounding boundary.
        assert bytes_to_human(1280) == "1.3 KB"
        assert bytes_to_human(1382) == "1.3 KB"
        assert bytes_to_human(1383) == "1.4 KB"

    def test_promotes_to_next_unit_when_rounding_reaches_1024(self):
        # 1023.95 KB would print as "1024.0 KB" without promotion.
        assert bytes_to_human(1048525) == "1.0 MB"
        assert bytes_to_human(1048524) == "1023.9 KB"


class TestParseSize:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("500", 500),
            ("500B", 500),
            ("1KB", 1024),
            ("1kb", 1024),
            ("1.5KB", 1536),
            (".5MB", 512 * 1024),
            ("2GB", 2 * 1024**3),
            ("1 TB", 1024**4),
            ("  3mb ", 3 * 1024**2),
            ("1.0001KB", 1024),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_size(text) == expected

    @pytest.mark.parametrize("text", ["", "KB", "abc", "1PB", "-5", "1.2.3", "1 K", "10 bytes"])
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="invalid size"):
            parse_size(text)


class TestTruncatePath:
    def test_short_path_unchanged(self):
        assert truncate_path("a/b.txt", 47) == "a/b.txt"

    def test_path_at_width_unchanged(self):
        path = "x" * 47
        assert truncate_path(path, 47) == path

    def test_long_path_keeps_tail(self):
        path = "very/long/leading/directory/prefix/" + "file_name_that_matters.txt"
        result = truncate_path(path, 30)
        assert len(result) == 30
        assert result.startswith("...")
        assert result.endswith("file_name_that_matters.txt")
        assert result[3:] == path[-27:]


def test_format_elapsed_ms():
    assert format_elapsed_ms(3.14159) == "3.14 ms"
    assert format_elapsed_ms(0) == "0.00 ms"
