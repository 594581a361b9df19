"""Circle Hough detector for a circle of known radius in a 2D profile."""

import logging
from typing import Optional

import numpy as np

from profile_hough.errors import ConstructionRejected
from profile_hough.hough.accumulator import Accumulator
from profile_hough.hough.grid_axis import GridAxis
from profile_hough.hough.kernel import SymmetricTriangleKernel
from profile_hough.types import Constraints, HoughResult, as_points

logger = logging.getLogger(__name__)


def _integral(name: str, value) -> int:
    if isinstance(value, (bool, str)) or not isinstance(value, (int, float, np.number)):
        raise ConstructionRejected(f"{name} must be an integer, got {value!r}")
    if not float(value).is_integer():
        raise ConstructionRejected(f"{name} must be an integer, got {value!r}")
    return int(value)


class CircleHough:
    """
    Finds the most likely center of a circle of fixed radius.

    Each call to ``detect`` scores one profile independently against a grid
    of candidate centers covering the constraint region. The bin buffer is
    allocated here and reused, so an instance must not be shared between
    threads; build one detector per worker instead.
    """

    def __init__(self, radius: int, constraints: Constraints):
        radius = _integral('radius', radius)
        step = _integral('step', constraints.step)
        x_lower = _integral('x_lower', constraints.x_lower)
        x_upper = _integral('x_upper', constraints.x_upper)
        y_lower = _integral('y_lower', constraints.y_lower)
        y_upper = _integral('y_upper', constraints.y_upper)

        if radius <= 0:
            raise ConstructionRejected(f"radius must be positive, got {radius}")
        try:
            self.x_axis = GridAxis(x_lower, x_upper, step)
            self.y_axis = GridAxis(y_lower, y_upper, step)
        except ValueError as e:
            raise ConstructionRejected(str(e)) from e

        self.radius = radius
        self.constraints = Constraints(step, x_lower, x_upper, y_lower, y_upper)
        self.kernel = SymmetricTriangleKernel(radius, step)
        self._accumulator = Accumulator(radius, self.x_axis, self.y_axis, self.kernel)

        logger.debug("Created circle hough: radius=%d, grid=%dx%d, step=%d",
                     radius, self.x_axis.count, self.y_axis.count, step)

    @property
    def closed(self) -> bool:
        return self._accumulator is None

    @property
    def bins(self) -> np.ndarray:
        """Read-only view of the bins left by the last ``detect`` call."""
        self._check_open()
        view = self._accumulator.bins.view()
        view.flags.writeable = False
        return view

    def detect(self, profile) -> HoughResult:
        """
        Run the transform on one profile.

        Args:
            profile: Profile, (N, 2) integer array-like, or sequence of points
                with x and y attributes

        Returns:
            HoughResult with the peak weight and bin center; the zero result
            when no bin received a vote
        """
        self._check_open()
        return self._accumulator.accumulate(as_points(profile))

    def close(self):
        """Release the bin buffer. The detector cannot be used afterwards."""
        self._accumulator = None

    def _check_open(self):
        if self._accumulator is None:
            raise RuntimeError("CircleHough has been closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"CircleHough(radius={self.radius}, constraints={self.constraints})"


def create_detector(radius: int, constraints: Constraints,
                    strict: bool = True) -> Optional[CircleHough]:
    """
    Build a detector.

    Raises ConstructionRejected on invalid parameters, or returns None
    instead when ``strict`` is False.
    """
    try:
        return CircleHough(radius, constraints)
    except ConstructionRejected as e:
        if strict:
            raise
        logger.warning("Circle hough construction rejected: %s", e)
        return None


def detect(detector: CircleHough, profile) -> HoughResult:
    return detector.detect(profile)


def destroy(detector: CircleHough):
    detector.close()
