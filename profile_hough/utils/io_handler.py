"""I/O handling for recorded profiles and JSON output."""

import json
from pathlib import Path
from typing import Dict, Iterator, List

from profile_hough.errors import ProfileFormatError
from profile_hough.types import Profile


class ProfileReader:
    """
    Read profiles recorded to a JSON file.

    Expected layout::

        {"profiles": [{"camera": 0, "timestamp_ns": 0,
                       "points": [[x, y], [x, y, brightness], ...]}, ...]}
    """

    def __init__(self, profile_path: str):
        self.profile_path = profile_path
        with open(profile_path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ProfileFormatError(f"{profile_path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get('profiles'), list):
            raise ProfileFormatError(f"{profile_path}: missing 'profiles' list")
        self._records = data['profiles']
        self.profile_count = len(self._records)

    def read_profile(self, index: int) -> Profile:
        """Read one profile by position in the file."""
        record = self._records[index]
        if not isinstance(record, dict) or 'points' not in record:
            raise ProfileFormatError(f"{self.profile_path}: profile {index} has no points")
        return Profile.from_points(record['points'],
                                   camera=int(record.get('camera', 0)),
                                   timestamp_ns=int(record.get('timestamp_ns', 0)))

    def __len__(self) -> int:
        return self.profile_count

    def __iter__(self) -> Iterator[Profile]:
        for index in range(self.profile_count):
            yield self.read_profile(index)

    def release(self):
        """Drop the loaded records."""
        self._records = []
        self.profile_count = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()


def save_profiles(profiles: List[Profile], output_path: str, indent: int = None):
    """Write profiles in the layout ProfileReader reads."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    records = [{'camera': p.camera,
                'timestamp_ns': p.timestamp_ns,
                'points': p.points.tolist()} for p in profiles]
    with open(output_path, 'w') as f:
        json.dump({'profiles': records}, f, indent=indent)


class JSONWriter:
    """Write detection results to JSON."""

    @staticmethod
    def save_results(output: List[Dict], output_path: str, indent: int = 2):
        """Save results to JSON file."""
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(output, f, indent=indent)

    @staticmethod
    def load_results(input_path: str) -> List[Dict]:
        """Load results from JSON file."""
        with open(input_path, 'r') as f:
            return json.load(f)
