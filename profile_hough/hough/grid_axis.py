"""One axis of the candidate-center search grid."""

import numpy as np


class GridAxis:
    """Maps coordinates on one axis to bin indices and back."""

    def __init__(self, lower: int, upper: int, step: int):
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        if lower >= upper:
            raise ValueError(f"lower ({lower}) must be less than upper ({upper})")

        self.lower = lower
        self.upper = upper
        self.step = step
        self.count = (upper - lower) // step
        if self.count < 1:
            raise ValueError(
                f"range [{lower}, {upper}) is narrower than one step of {step}")

        self.centers = lower + step * np.arange(self.count, dtype=np.int64)
        self.centers.flags.writeable = False

    def index_of(self, coord: int) -> int:
        """Bin index of coord, truncated toward zero and clamped to the axis."""
        offset = coord - self.lower
        if offset >= 0:
            i = offset // self.step
        else:
            i = -(-offset // self.step)
        return min(max(i, 0), self.count - 1)

    def center(self, i: int) -> int:
        return int(self.centers[i])

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return (f"GridAxis(lower={self.lower}, upper={self.upper}, "
                f"step={self.step}, count={self.count})")
