"""Circle Hough transform over laser profiles."""

from .accumulator import Accumulator
from .circle_hough import CircleHough, create_detector, destroy, detect
from .grid_axis import GridAxis
from .kernel import SymmetricTriangleKernel

__all__ = ['Accumulator', 'CircleHough', 'GridAxis', 'SymmetricTriangleKernel',
           'create_detector', 'destroy', 'detect']
