"""Basic usage example for profile_hough."""

import numpy as np
from profile_hough import CircleHough, Constraints, Profile


def main():
    """Find the center of a 0.81 inch circle from one synthetic profile."""
    constraints = Constraints(step=50, x_lower=-15000, x_upper=15000,
                              y_lower=-30000, y_upper=30000)

    # Upper arc of a circle centered at (2.0", -4.0"), as a top-down sensor sees it
    theta = np.linspace(np.pi / 6, 5 * np.pi / 6, 150)
    x = np.round(2000 + 810 * np.cos(theta)).astype(int)
    y = np.round(-4000 + 810 * np.sin(theta)).astype(int)
    profile = Profile.from_points(np.column_stack([x, y]))

    print("Detecting circle...")
    with CircleHough(810, constraints) as detector:
        result = detector.detect(profile)

    print(f"Center: ({result.x / 1000.0:.3f}, {result.y / 1000.0:.3f}) in, "
          f"weight {result.weight:.4f}")


if __name__ == "__main__":
    main()
