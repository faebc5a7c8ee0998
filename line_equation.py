import logging
import struct
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

# Lines whose points are closer than this along x are treated as vertical
VERTICAL_EPSILON = 1e-6

# Packed little-endian single precision layouts, no padding
POINT_FORMAT = "<ff"
LINE_FORMAT = "<ffff?"
POINT_SIZE = struct.calcsize(POINT_FORMAT)
LINE_SIZE = struct.calcsize(LINE_FORMAT)


@dataclass(frozen=True)
class Point:
    """A point in 2D space."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def pack(self):
        return struct.pack(POINT_FORMAT, self.x, self.y)

    @classmethod
    def unpack(cls, buf):
        if len(buf) != POINT_SIZE:
            raise ValueError(f"Point needs {POINT_SIZE} bytes, got {len(buf)}")
        x, y = struct.unpack(POINT_FORMAT, buf)
        return cls(x, y)


def _as_point(p):
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(x, y)


class LineModel:
    """
    Line through two points with the result limited to [min_output, max_output].

    A fresh model behaves as the horizontal line y = 0 with both bounds at 0,
    so evaluate() returns 0.0 until configure() is called.
    """

    def __init__(self):
        self.slope = 0.0
        self.intercept = 0.0
        self.min_output = 0.0
        self.max_output = 0.0
        self.is_vertical = False

    @classmethod
    def from_points(cls, p1, p2, min_output, max_output):
        line = cls()
        line.configure(p1, p2, min_output, max_output)
        return line

    def configure(self, p1, p2, min_output, max_output):
        """
        Derive slope and intercept from two points and store the output limits.

        Args:
            p1 (Point or tuple): first point on the line
            p2 (Point or tuple): second point on the line
            min_output (float): lower output limit
            max_output (float): upper output limit

        For a vertical line the slope is 0 and the intercept holds the
        x-coordinate of p1. Every call replaces the whole state.
        """
        p1 = _as_point(p1)
        p2 = _as_point(p2)

        min_output = float(min_output)
        max_output = float(max_output)
        self.min_output = min_output
        self.max_output = max_output

        dx = p2.x - p1.x
        dy = p2.y - p1.y

        if abs(dx) < VERTICAL_EPSILON:
            self.is_vertical = True
            self.slope = 0.0
            self.intercept = p1.x
            logger.debug("Vertical line at x=%s (dx=%s)", p1.x, dx)
        else:
            self.is_vertical = False
            self.slope = dy / dx
            self.intercept = p1.y - self.slope * p1.x

        logger.debug("Configured %r", self)

    def evaluate(self, x):
        """
        Evaluate the line at x.

        Args:
            x (float): abscissa

        Returns:
            float: y at x limited to the output range. A vertical line returns
            its stored x-coordinate whatever x is. The lower limit is checked
            first, so with min_output > max_output the result is always one of
            the two limits. NaN is returned unchanged.
        """
        x = float(x)

        if not self.is_vertical:
            y = self.slope * x + self.intercept
        else:
            y = self.intercept

        if y < self.min_output:
            y = self.min_output
        elif y > self.max_output:
            y = self.max_output

        return y

    __call__ = evaluate

    def evaluate_many(self, xs):
        """Vectorised evaluate(); same clamp order, returns a float64 array."""
        xs = np.asarray(xs, dtype=np.float64)

        if not self.is_vertical:
            y = self.slope * xs + self.intercept
        else:
            y = np.full(xs.shape, self.intercept, dtype=np.float64)

        return np.where(y < self.min_output, self.min_output,
                        np.where(y > self.max_output, self.max_output, y))

    def pack(self):
        return struct.pack(LINE_FORMAT, self.slope, self.intercept,
                           self.min_output, self.max_output, self.is_vertical)

    @classmethod
    def unpack(cls, buf):
        """Restore a model from pack() output without re-deriving anything."""
        if len(buf) != LINE_SIZE:
            raise ValueError(f"LineModel needs {LINE_SIZE} bytes, got {len(buf)}")
        line = cls()
        (line.slope, line.intercept, line.min_output,
         line.max_output, line.is_vertical) = struct.unpack(LINE_FORMAT, buf)
        return line

    def __repr__(self):
        return (f"LineModel(slope={self.slope}, intercept={self.intercept}, "
                f"min_output={self.min_output}, max_output={self.max_output}, "
                f"is_vertical={self.is_vertical})")
