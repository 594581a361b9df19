"""Records exchanged with the detector."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable

import numpy as np

from profile_hough.errors import ProfileFormatError


@dataclass(frozen=True)
class Constraints:
    """Search region and grid step, in milli-inches."""
    step: int
    x_lower: int
    x_upper: int
    y_lower: int
    y_upper: int

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "Constraints":
        return cls(step=values['step'],
                   x_lower=values['x_lower'], x_upper=values['x_upper'],
                   y_lower=values['y_lower'], y_upper=values['y_upper'])

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class ProfilePoint:
    x: int
    y: int
    brightness: int = 0


@dataclass
class HoughResult:
    """Best candidate center and its accumulated weight."""
    weight: float = 0.0
    x: int = 0
    y: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {'weight': float(self.weight), 'x': int(self.x), 'y': int(self.y)}


@dataclass(eq=False)
class Profile:
    """One frame of sample points from a scan head camera.

    ``points`` is an ``(N, 2)`` integer array of x, y coordinates.
    """
    points: np.ndarray = field(default_factory=lambda: np.empty((0, 2), dtype=np.int64))
    camera: int = 0
    timestamp_ns: int = 0

    def __post_init__(self):
        self.points = as_points(self.points)

    def __len__(self) -> int:
        return len(self.points)

    @classmethod
    def from_points(cls, points: Iterable, camera: int = 0,
                    timestamp_ns: int = 0) -> "Profile":
        return cls(points=as_points(points), camera=camera,
                   timestamp_ns=timestamp_ns)


def as_points(profile) -> np.ndarray:
    """
    Normalize profile input to an ``(N, 2)`` int64 array.

    Accepts a Profile, an array-like of shape ``(N, >=2)`` (columns past the
    second, e.g. brightness, are dropped) or a sequence of objects with
    ``x`` and ``y`` attributes such as ProfilePoint.
    """
    if isinstance(profile, Profile):
        return profile.points

    if not isinstance(profile, np.ndarray):
        profile = list(profile)
        if len(profile) == 0:
            return np.empty((0, 2), dtype=np.int64)
        if hasattr(profile[0], 'x') and hasattr(profile[0], 'y'):
            profile = [(p.x, p.y) for p in profile]

    try:
        arr = np.asarray(profile)
    except ValueError as e:
        raise ProfileFormatError(f"Profile points are not uniform 2D points: {e}") from e
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] < 2:
        raise ProfileFormatError(f"Expected (N, 2) points, got shape {arr.shape}")

    arr = arr[:, :2]
    if arr.dtype.kind == 'f':
        if not np.all(np.isfinite(arr)) or not np.all(arr == np.trunc(arr)):
            raise ProfileFormatError("Profile coordinates must be integers")
    elif arr.dtype.kind not in 'iu':
        raise ProfileFormatError(f"Unsupported coordinate type {arr.dtype}")

    return np.ascontiguousarray(arr, dtype=np.int64)
