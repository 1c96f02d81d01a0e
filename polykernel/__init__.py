"""
polykernel: a 2D computational geometry kernel.

Orientation predicates, point location in simple and convex polygons,
convex hulls (gift wrapping, Graham scan, monotone chain) and ear-clipping
triangulation over exact-comparison scalar coordinates.
"""

__version__ = "0.1.0"

from .errors import (
    DegenerateInputError,
    GeometryError,
    HullError,
    InvalidInputError,
    TriangulationError,
)
from .hull import HullMethod, convex_hull, gift_wrapping, graham_scan, monotone_chain
from .location import (
    LocationMethod,
    PointLocation,
    locate,
    triangle_location,
    wedge_location,
)
from .orientation import (
    Orientation,
    on_segment,
    orientation,
    polygon_orientation,
    polygon_signed_area,
    signed_area,
)
from .polygon import as_polygon, is_convex, is_simple, polygon_area
from .triangulation import Triangle, ear_clip, triangulate
from .vector import Point, as_point, cross, dot, rotate

__all__ = [
    'Point', 'as_point', 'cross', 'dot', 'rotate',
    'Orientation', 'orientation', 'signed_area', 'on_segment',
    'polygon_signed_area', 'polygon_orientation',
    'as_polygon', 'polygon_area', 'is_convex', 'is_simple',
    'PointLocation', 'LocationMethod', 'locate', 'wedge_location', 'triangle_location',
    'HullMethod', 'convex_hull', 'gift_wrapping', 'graham_scan', 'monotone_chain',
    'Triangle', 'triangulate', 'ear_clip',
    'GeometryError', 'InvalidInputError', 'DegenerateInputError', 'HullError', 'TriangulationError',
]
