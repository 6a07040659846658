"""Tests for domain models to verify they work correctly."""

import base64
import dataclasses
from pathlib import Path

import pytest

from facesmith.domain import FontFace, FontFormat, FontRecord, LookupKey, make_column_key


class TestFontFormat:
    """Tests for FontFormat enum."""

    @pytest.mark.parametrize("value", ["woff", "WOFF", "Woff"])
    def test_from_string_ignores_case(self, value: str) -> None:
        assert FontFormat.from_string(value) is FontFormat.WOFF

    @pytest.mark.parametrize("value", ["ttf", "otf", "woff2", "svg", ""])
    def test_from_string_unsupported(self, value: str) -> None:
        """Test that unsupported formats are not parsed."""
        assert FontFormat.from_string(value) is None

    def test_mime_types(self) -> None:
        assert FontFormat.EOT.mime_type == "application/vnd.ms-fontobject"
        assert FontFormat.WOFF.mime_type == "application/x-font-woff"

    def test_str(self) -> None:
        assert str(FontFormat.EOT) == "eot"


class TestColumnKey:
    """Tests for column key construction."""

    def test_concatenation(self) -> None:
        assert make_column_key(FontFormat.WOFF, 700, "italic") == "woff700italic"
        assert make_column_key(FontFormat.EOT, "400", "normal") == "eot400normal"


class TestFontRecord:
    """Tests for FontRecord class."""

    def test_column_key(self) -> None:
        record = FontRecord("Amaranth", FontFormat.EOT, "italic", 400, Path("a.eot"))
        assert record.column_key == "eot400italic"
        assert record.mime_type == "application/vnd.ms-fontobject"

    def test_immutable(self) -> None:
        record = FontRecord("Amaranth", FontFormat.EOT, "normal", 400, Path("a.eot"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.weight = 700  # type: ignore[misc]

    def test_mod_time(self, tmp_path: Path) -> None:
        """Test modification time is reported in nanoseconds."""
        path = tmp_path / "a.woff"
        path.write_bytes(b"data")
        record = FontRecord("Amaranth", FontFormat.WOFF, "normal", 400, path)
        assert record.mod_time() == path.stat().st_mtime_ns

    def test_missing_file(self, tmp_path: Path) -> None:
        record = FontRecord("Amaranth", FontFormat.WOFF, "normal", 400, tmp_path / "gone.woff")
        with pytest.raises(OSError):
            record.mod_time()
        with pytest.raises(OSError):
            record.contents()


class TestFontFace:
    """Tests for FontFace class."""

    def test_from_record(self, tmp_path: Path) -> None:
        """Test that face data embeds the encoded file contents."""
        path = tmp_path / "a.woff"
        path.write_bytes(b"\x00\x01\x02")
        record = FontRecord("Amaranth", FontFormat.WOFF, "italic", 700, path)

        face = FontFace.from_record(record)
        assert face.base64_data == base64.b64encode(b"\x00\x01\x02").decode("ascii")
        assert face.family == "Amaranth"
        assert face.format == "woff"
        assert face.mime_type == "application/x-font-woff"
        assert face.style == "italic"
        assert face.weight == 700

    def test_to_dict(self) -> None:
        face = FontFace("AAEC", "Amaranth", "eot", "application/vnd.ms-fontobject", "normal", 400)
        assert face.to_dict() == {
            "base64_data": "AAEC",
            "family": "Amaranth",
            "format": "eot",
            "mime_type": "application/vnd.ms-fontobject",
            "style": "normal",
            "weight": 400,
        }


class TestLookupKey:
    """Tests for LookupKey class."""

    def test_str(self) -> None:
        assert str(LookupKey("Open Sans", "woff300normal")) == "Open Sans:woff300normal"

    def test_hashable(self) -> None:
        keys = {LookupKey("Amaranth", "woff400normal"), LookupKey("Amaranth", "woff400normal")}
        assert len(keys) == 1
