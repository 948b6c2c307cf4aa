"""Hue buckets used by the random color generator.

Each bucket pairs a hue range with a piecewise-linear lower bound on
brightness as a function of saturation. Red wraps past 0 and is stored with
a negative lower hue.
"""

from dataclasses import dataclass
from typing import Optional

from huekit.models.enums import HueName


@dataclass(frozen=True)
class ColorBound:
    """One hue bucket: its hue range and (saturation, min brightness) points."""

    name: HueName
    hue_range: Optional[tuple[int, int]]
    lower_bounds: tuple[tuple[int, int], ...]

    @property
    def saturation_range(self) -> tuple[int, int]:
        return self.lower_bounds[0][0], self.lower_bounds[-1][0]

    @property
    def brightness_range(self) -> tuple[int, int]:
        return self.lower_bounds[-1][1], self.lower_bounds[0][1]


BOUNDS: tuple[ColorBound, ...] = (
    ColorBound(
        name=HueName.MONOCHROME,
        hue_range=None,
        lower_bounds=((0, 0), (100, 0)),
    ),
    ColorBound(
        name=HueName.RED,
        hue_range=(-26, 18),
        lower_bounds=(
            (20, 100), (30, 92), (40, 89), (50, 85), (60, 78),
            (70, 70), (80, 60), (90, 55), (100, 50),
        ),
    ),
    ColorBound(
        name=HueName.ORANGE,
        hue_range=(19, 46),
        lower_bounds=((20, 100), (30, 93), (40, 88), (50, 86), (60, 85), (70, 70), (100, 70)),
    ),
    ColorBound(
        name=HueName.YELLOW,
        hue_range=(47, 62),
        lower_bounds=(
            (25, 100), (40, 94), (50, 89), (60, 86), (70, 84), (80, 82), (90, 80), (100, 75),
        ),
    ),
    ColorBound(
        name=HueName.GREEN,
        hue_range=(63, 178),
        lower_bounds=(
            (30, 100), (40, 90), (50, 85), (60, 81), (70, 74), (80, 64), (90, 50), (100, 40),
        ),
    ),
    ColorBound(
        name=HueName.BLUE,
        hue_range=(179, 257),
        lower_bounds=(
            (20, 100), (30, 86), (40, 80), (50, 74), (60, 60),
            (70, 52), (80, 44), (90, 39), (100, 35),
        ),
    ),
    ColorBound(
        name=HueName.PURPLE,
        hue_range=(258, 282),
        lower_bounds=(
            (20, 100), (30, 87), (40, 79), (50, 70), (60, 65),
            (70, 59), (80, 52), (90, 45), (100, 42),
        ),
    ),
    ColorBound(
        name=HueName.PINK,
        hue_range=(283, 334),
        lower_bounds=((20, 100), (30, 90), (40, 86), (60, 84), (80, 80), (90, 75), (100, 73)),
    ),
)


def find_bound(name: str) -> Optional[ColorBound]:
    """Look up a bucket by name."""
    for bound in BOUNDS:
        if bound.name.value == name:
            return bound
    return None
