"""Exceptions raised by profile_hough."""


class ConstructionRejected(ValueError):
    """Detector parameters are invalid; no detector was built."""


class ProfileFormatError(ValueError):
    """Profile input is not a sequence of 2D integer points."""
