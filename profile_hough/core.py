"""
Profile Hough Processor
Main entry point for circle center detection on scan profiles
"""

import logging
import time
from typing import Any, Dict, Iterable, List, Optional

from profile_hough.config import constraints_from_config, merge_config, radius_from_config
from profile_hough.hough.circle_hough import CircleHough
from profile_hough.types import Profile

logger = logging.getLogger(__name__)


class ProfileProcessor:
    """Runs one circle detector over a stream of profiles"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize processor

        Args:
            config: Configuration overrides merged over DEFAULT_CONFIG (optional)
        """
        self.config = merge_config(config)
        self.min_weight = self.config["processing"]["min_weight"]
        self.detector = CircleHough(radius_from_config(self.config),
                                    constraints_from_config(self.config))
        self._latest: Dict[int, Dict[str, Any]] = {}

        self.stats = {
            'total_profiles': 0,
            'detections': 0,
            'total_processing_time': 0.0
        }

    def process_profile(self, profile: Profile) -> Dict[str, Any]:
        """
        Detect the circle center in a single profile

        Args:
            profile: Profile to score

        Returns:
            Dictionary with the peak in milli-inches and inches
        """
        start_time = time.perf_counter()
        result = self.detector.detect(profile)
        processing_time = (time.perf_counter() - start_time) * 1000

        detected = result.weight > self.min_weight
        self.stats['total_profiles'] += 1
        self.stats['total_processing_time'] += processing_time
        if detected:
            self.stats['detections'] += 1

        output = {
            'camera': profile.camera,
            'timestamp_ns': profile.timestamp_ns,
            'detected': detected,
            **result.to_dict(),
            'x_inches': result.x / 1000.0,
            'y_inches': result.y / 1000.0,
            'point_count': len(profile),
            'processing_time_ms': processing_time
        }
        self._latest[profile.camera] = output

        logger.debug("camera %d: %d points -> (%d, %d) weight %.6f",
                     profile.camera, len(profile), result.x, result.y, result.weight)
        return output

    def process_profiles(self, profiles: Iterable[Profile]) -> List[Dict[str, Any]]:
        """Process every profile in order."""
        results = [self.process_profile(profile) for profile in profiles]
        logger.info("Processed %d profiles, %d detections",
                    len(results), sum(r['detected'] for r in results))
        return results

    def latest_result(self, camera: int = 0) -> Optional[Dict[str, Any]]:
        """Most recent result for a camera, or None if it has not reported."""
        return self._latest.get(camera)

    def get_statistics(self) -> Dict[str, float]:
        stats = dict(self.stats)
        total = stats['total_profiles']
        stats['detection_rate'] = stats['detections'] / total if total else 0.0
        stats['avg_processing_time_ms'] = (
            stats['total_processing_time'] / total if total else 0.0)
        return stats

    def close(self):
        self.detector.close()
