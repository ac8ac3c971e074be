"""Test setup for tagmark."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_document() -> str:
    """A valid document touching every known tag kind."""
    return (
        "@main{\n"
        '    @heading(level: "2", alignment: "center"){ Welcome }\n'
        "    @paragraph{ Plain text with @bold{bold}, @italic{italic} and @underlined{underlined}. }\n"
        '    @list(style: "ordered"){ @block{first} @block{second} }\n'
        '    @columns{ @block{left} @font(size: "14", color: "red"){right} }\n'
        '    @link(uri: "https://example.com"){ a link }\n'
        '    @image(uri: "logo.png"){}\n'
        "}\n"
    )
