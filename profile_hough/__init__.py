"""
profile_hough - circle center detection for laser profile scans
"""

from .errors import ConstructionRejected, ProfileFormatError
from .hough import CircleHough, create_detector, destroy, detect
from .types import Constraints, HoughResult, Profile, ProfilePoint

__all__ = ['CircleHough', 'ConstructionRejected', 'Constraints', 'HoughResult',
           'Profile', 'ProfileFormatError', 'ProfilePoint', 'create_detector',
           'destroy', 'detect']
__version__ = '1.0.0'
