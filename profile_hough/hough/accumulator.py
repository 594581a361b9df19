"""Hough accumulator: kernel-weighted votes over the candidate-center grid."""

import numpy as np

from profile_hough.hough.grid_axis import GridAxis
from profile_hough.hough.kernel import SymmetricTriangleKernel
from profile_hough.types import HoughResult


class Accumulator:
    """
    Dense grid of vote bins indexed ``[y_index, x_index]`` with a running peak.

    Both axes must share one step; the vote window and the kernel support are
    derived from it.
    """

    def __init__(self, radius: int, x_axis: GridAxis, y_axis: GridAxis,
                 kernel: SymmetricTriangleKernel):
        if x_axis.step != y_axis.step:
            raise ValueError(
                f"axes must share a step, got {x_axis.step} and {y_axis.step}")

        self.radius = radius
        self.step = x_axis.step
        self.x_axis = x_axis
        self.y_axis = y_axis
        self.kernel = kernel

        self.bins = np.zeros((y_axis.count, x_axis.count), dtype=np.float64)
        self.peak = HoughResult()

        # squared radial band outside which the kernel is zero
        self.upper_lim = float((radius + self.step) ** 2)
        self.lower_lim = float((radius - self.step) ** 2)

    @property
    def shape(self):
        return self.bins.shape

    def reset(self):
        self.bins.fill(0.0)
        self.peak = HoughResult()

    def window(self, px: int, py: int):
        """
        Clamped index ranges ``(x_start, x_end, y_start, y_end)`` of the
        centers a point at (px, py) may vote for. End indices are exclusive.

        The upper y bound only reaches ``py + step``: centers are searched
        below the sampled arc, not above it.
        """
        reach = self.radius + self.step
        return (self.x_axis.index_of(px - reach),
                self.x_axis.index_of(px + reach),
                self.y_axis.index_of(py - reach),
                self.y_axis.index_of(py + self.step))

    def vote(self, px: int, py: int):
        """Add the votes of one sample point and update the peak."""
        x_start, x_end, y_start, y_end = self.window(px, py)
        if x_start >= x_end or y_start >= y_end:
            return

        cx = self.x_axis.centers[x_start:x_end]
        cy = self.y_axis.centers[y_start:y_end]
        dx = (px - cx).astype(np.float64)
        dy = (py - cy).astype(np.float64)
        r_sqr = (dx * dx)[np.newaxis, :] + (dy * dy)[:, np.newaxis]

        in_band = (r_sqr >= self.lower_lim) & (r_sqr <= self.upper_lim)
        if not in_band.any():
            return

        votes = np.where(in_band, self.kernel.evaluate(np.sqrt(r_sqr)), 0.0)
        region = self.bins[y_start:y_end, x_start:x_end]
        region += votes

        # First row-major maximum among the bins just voted on; identical to
        # checking each bin after its increment with a strict comparison.
        candidates = np.where(in_band, region, -np.inf)
        k = int(np.argmax(candidates))
        j, i = divmod(k, region.shape[1])
        best = candidates[j, i]
        if best > self.peak.weight:
            self.peak = HoughResult(weight=float(best), x=int(cx[i]), y=int(cy[j]))

    def accumulate(self, points: np.ndarray) -> HoughResult:
        """Zero the bins, vote every point in order, and return the peak."""
        self.reset()
        for px, py in points.tolist():
            self.vote(px, py)
        return self.peak
