"""Batch processing example for recorded profiles."""

import sys

from profile_hough.config import load_config
from profile_hough.core import ProfileProcessor
from profile_hough.utils.io_handler import JSONWriter, ProfileReader
from profile_hough.utils.logger import setup_logger_from_config


def main(profile_path: str, config_path: str = None):
    """Process every profile in a recording."""
    config = load_config(config_path) if config_path else None
    processor = ProfileProcessor(config)

    logger = setup_logger_from_config(processor.config, session_log_dir='logs')

    with ProfileReader(profile_path) as reader:
        logger.info(f"Processing {len(reader)} profiles from {profile_path}...")
        results = processor.process_profiles(reader)

    stats = processor.get_statistics()
    logger.info(f"Detection rate {stats['detection_rate']:.1%}, "
                f"{stats['avg_processing_time_ms']:.2f} ms per profile")

    JSONWriter.save_results(results, "output/batch_results.json")
    logger.info("Batch processing complete!")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python batch_processing.py profiles.json [config.yaml]")
        sys.exit(1)
    main(*sys.argv[1:3])
