"""Shared fixtures: an in-memory font source and a small generated TrueType font."""

from pathlib import Path

import pytest

from font_fixtures import FakeFont, build_test_font


@pytest.fixture
def fake_font() -> FakeFont:
    """In-memory FontSource with rectangle glyphs."""
    return FakeFont()


@pytest.fixture(scope="session")
def font_bytes() -> bytes:
    """Raw bytes of the generated test font."""
    return build_test_font()


@pytest.fixture(scope="session")
def kerned_font_bytes() -> bytes:
    """Generated test font with a GPOS kern feature."""
    return build_test_font("feature kern { pos A B -100; pos [A O] O -40; } kern;")


@pytest.fixture
def font_path(tmp_path: Path, font_bytes: bytes) -> Path:
    """The generated test font saved to disk."""
    path = tmp_path / "EngraveTest-Regular.ttf"
    path.write_bytes(font_bytes)
    return path
