"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from huekit import Color


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file that does not exist yet."""
    return temp_dir / "config.json"


@pytest.fixture
def red():
    """Opaque red parsed from its name."""
    return Color.parse("red")


@pytest.fixture
def translucent_red():
    """Red at half opacity."""
    return Color.parse({"r": 255, "g": 0, "b": 0, "a": 0.5})


# Equivalent notations of the same colors
CONVERSIONS = [
    {
        "hex": "#ffffff",
        "hex8": "#ffffffff",
        "rgb": {"r": 255, "g": 255, "b": 255},
        "hsl": {"h": 0, "s": 0, "l": 1},
        "hsv": {"h": 0, "s": 0, "v": 1},
    },
    {
        "hex": "#000000",
        "hex8": "#000000ff",
        "rgb": {"r": 0, "g": 0, "b": 0},
        "hsl": {"h": 0, "s": 0, "l": 0},
        "hsv": {"h": 0, "s": 0, "v": 0},
    },
    {
        "hex": "#ff0000",
        "hex8": "#ff0000ff",
        "rgb": {"r": 255, "g": 0, "b": 0},
        "hsl": {"h": 0, "s": 1, "l": 0.5},
        "hsv": {"h": 0, "s": 1, "v": 1},
    },
    {
        "hex": "#00ff00",
        "hex8": "#00ff00ff",
        "rgb": {"r": 0, "g": 255, "b": 0},
        "hsl": {"h": 120, "s": 1, "l": 0.5},
        "hsv": {"h": 120, "s": 1, "v": 1},
    },
    {
        "hex": "#0000ff",
        "hex8": "#0000ffff",
        "rgb": {"r": 0, "g": 0, "b": 255},
        "hsl": {"h": 240, "s": 1, "l": 0.5},
        "hsv": {"h": 240, "s": 1, "v": 1},
    },
    {
        "hex": "#ffff00",
        "hex8": "#ffff00ff",
        "rgb": {"r": 255, "g": 255, "b": 0},
        "hsl": {"h": 60, "s": 1, "l": 0.5},
        "hsv": {"h": 60, "s": 1, "v": 1},
    },
]


@pytest.fixture(params=CONVERSIONS, ids=lambda c: c["hex"])
def conversion(request):
    """One color written in several notations."""
    return request.param
