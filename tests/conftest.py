"""Shared fixtures: an on-disk font library, whitelist and handler context."""

import itertools
import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from starlette.testclient import TestClient

from facesmith.config import ServerConfig
from facesmith.core import FontIndex, HandlerContext, StylesheetRenderer
from facesmith.http import create_app
from facesmith.io import FontLibrary, Whitelist

REFERER = "http://example.com/page.html"
WHITELISTED_PREFIX = "http://example.com/"

AMARANTH_SUBFAMILIES = [
    ("amaranth-regular", "Regular", "normal", 400),
    ("amaranth-italic", "Italic", "italic", 400),
    ("amaranth-bold", "Bold", "normal", 700),
    ("amaranth-bolditalic", "Bold Italic", "italic", 700),
]

OPEN_SANS_SUBFAMILIES = [
    ("opensans-light", "Light", "normal", 300),
    ("opensans-regular", "Regular", "normal", 400),
    ("opensans-semibolditalic", "Semibold Italic", "italic", 600),
    ("opensans-bold", "Bold", "normal", 700),
    ("opensans-extrabold", "Extrabold", "normal", 800),
]

# Distinct modification times keep entity tags order sensitive in tests
_MTIMES = itertools.count(1_500_000_000_000_000_000, 1_000_000_000)


def build_woff(path: Path, family: str, style_name: str) -> None:
    """Write a minimal WOFF font with a single empty glyph."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef"])
    fb.setupCharacterMap({})
    fb.setupGlyf({".notdef": TTGlyphPen(None).glyph()})
    fb.setupHorizontalMetrics({".notdef": (500, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": style_name})
    fb.setupOS2()
    fb.setupPost()
    fb.font.flavor = "woff"
    fb.save(str(path))


def eot_bytes(basename: str) -> bytes:
    return f"EOT:{basename}".encode("ascii")


def write_family(
    library: Path,
    directory: str,
    family: str,
    subfamilies: list[tuple[str, str, str, int]],
) -> Path:
    """Write a family directory with metadata.json and eot/woff files."""
    family_dir = library / directory
    family_dir.mkdir(parents=True)
    metadata: dict[str, Any] = {"family": family, "subfamilies": []}
    for basename, style_name, style, weight in subfamilies:
        build_woff(family_dir / f"{basename}.woff", family, style_name)
        (family_dir / f"{basename}.eot").write_bytes(eot_bytes(basename))
        for suffix in ("woff", "eot"):
            mtime = next(_MTIMES)
            os.utime(family_dir / f"{basename}.{suffix}", ns=(mtime, mtime))
        metadata["subfamilies"].append(
            {
                "basename": basename,
                "formats": ["eot", "woff"],
                "style": style,
                "weight": weight,
            }
        )
    (family_dir / "metadata.json").write_text(json.dumps(metadata), encoding="utf-8")
    return family_dir


@pytest.fixture
def library_dir(tmp_path: Path) -> Path:
    """Font library with Amaranth and Open Sans families."""
    library = tmp_path / "fonts"
    library.mkdir()
    write_family(library, "Amaranth", "Amaranth", AMARANTH_SUBFAMILIES)
    write_family(library, "Open Sans", "Open Sans", OPEN_SANS_SUBFAMILIES)
    return library


@pytest.fixture
def whitelist_file(tmp_path: Path) -> Path:
    path = tmp_path / "whitelist.json"
    path.write_text(json.dumps({"domains": [WHITELISTED_PREFIX]}), encoding="utf-8")
    return path


@pytest.fixture
def font_library(library_dir: Path) -> FontLibrary:
    return FontLibrary.load(library_dir)


@pytest.fixture
def font_index(font_library: FontLibrary) -> FontIndex:
    return FontIndex.build(font_library)


@pytest.fixture
def make_context(font_index: FontIndex) -> Callable[..., HandlerContext]:
    """Factory for handler contexts; keyword arguments override ServerConfig."""

    def _make(**server: Any) -> HandlerContext:
        server.setdefault("server_name", "test/0.1")
        return HandlerContext(
            server=ServerConfig(**server),
            index=font_index,
            renderer=StylesheetRenderer(),
            whitelist=Whitelist([WHITELISTED_PREFIX]),
        )

    return _make


@pytest.fixture
def make_client(make_context: Callable[..., HandlerContext]) -> Callable[..., TestClient]:
    """Factory for test clients; keyword arguments override ServerConfig."""

    def _make(**server: Any) -> TestClient:
        return TestClient(create_app(make_context(**server)))

    return _make
