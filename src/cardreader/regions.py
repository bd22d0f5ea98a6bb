import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from .errors import RegionOutOfBounds


@dataclass(frozen=True)
class RegionRect:
    """Axis-aligned box in pixel coordinates of the grid it was computed on."""
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"region must have a positive size, got {self.width}x{self.height}")
        if self.x < 0 or self.y < 0:
            raise ValueError(f"region origin must be non-negative, got ({self.x}, {self.y})")

    @property
    def x1(self):
        return self.x + self.width

    @property
    def y1(self):
        return self.y + self.height

    def as_xywh(self):
        return (self.x, self.y, self.width, self.height)

    def fits_in(self, shape):
        h, w = shape[:2]
        return self.x1 <= w and self.y1 <= h

    def check_inside(self, shape):
        """Raise RegionOutOfBounds unless the region lies fully inside a grid of `shape`."""
        if not self.fits_in(shape):
            h, w = shape[:2]
            raise RegionOutOfBounds(f"{self} exceeds parent grid {w}x{h}")
        return self

    @classmethod
    def from_points(cls, points, bounds=None):
        """
        Smallest box covering every (x, y) point, extreme pixels included.
        `bounds` is a grid shape (height, width) to clip to. None if nothing is left.
        """
        pts = [(float(p[0]), float(p[1])) for p in points]
        if not pts:
            return None
        x0 = math.floor(min(p[0] for p in pts))
        y0 = math.floor(min(p[1] for p in pts))
        x1 = math.ceil(max(p[0] for p in pts)) + 1
        y1 = math.ceil(max(p[1] for p in pts)) + 1
        x0, y0 = max(0, x0), max(0, y0)
        if bounds is not None:
            h, w = bounds[:2]
            x1, y1 = min(w, x1), min(h, y1)
        if x1 <= x0 or y1 <= y0:
            return None
        return cls(x0, y0, x1 - x0, y1 - y0)


@dataclass(frozen=True)
class TextChunks:
    """Name and description regions, relative to the card sub-image."""
    name: RegionRect
    description: RegionRect


class TextRole(str, Enum):
    NAME = "name"
    DESCRIPTION = "description"


@dataclass(frozen=True)
class CardRecord:
    """Text read from one card. `error` is set when that card could not be read."""
    name: str
    description: str
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None

    def to_dict(self):
        data = asdict(self)
        if self.error is None:
            data.pop("error")
        return data
