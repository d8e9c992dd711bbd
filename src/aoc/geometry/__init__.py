"""Integer geometry for lattice puzzles.

Every coordinate is a Python int tagged with a fixed-width CoordinateType.
Operations that could overflow that type return None instead of wrapping.

Key Components:
    - Coordinates: CoordinateType and the default coordinate types
    - Primitives: N-D Point and Vector with checked arithmetic
    - Directions: axis, cardinal and king-move direction enums
    - Lines: Line, axis-aligned OrthogonalLine (N-D) and OrthogonalLine2D
      (axis-aligned or 45 degree diagonal)
    - Shapes: BoundingBox, HyperCube, SquareDiamond2D, OrthogonalPolygon2D
    - Grid: numpy-backed Grid2D with rotations, flips and bounded moves

Example:
    from aoc.geometry import OrthogonalLine2D, Point

    first = OrthogonalLine2D.from_points(Point.new(0, 0), Point.new(0, 4))
    second = OrthogonalLine2D.from_points(Point.new(-2, 2), Point.new(3, 2))
    first.intersect(second)  # [Point((0, 2))]
"""

from aoc.geometry.bounding_box import BoundingBox
from aoc.geometry.coordinates import (
    DEFAULT_COORDINATE_TYPE,
    GRID_COORDINATE_TYPE,
    SCALAR_TYPE,
    CoordinateType,
)
from aoc.geometry.diamond import SquareDiamond2D
from aoc.geometry.directions import (
    AxisDirection,
    CardinalDirection2D,
    Direction2D,
    PositionStatus,
)
from aoc.geometry.grid import Grid2D, grid_coordinate
from aoc.geometry.hypercube import HyperCube
from aoc.geometry.lines import (
    AxisAligned,
    Diagonal,
    Line,
    OrthogonalLine,
    OrthogonalLine2D,
    OrthogonalLine2DType,
)
from aoc.geometry.polygon import OrthogonalPolygon2D, angle_between_vectors
from aoc.geometry.primitives import Point, Vector, VectorType

__all__ = [
    "DEFAULT_COORDINATE_TYPE",
    "GRID_COORDINATE_TYPE",
    "SCALAR_TYPE",
    "AxisAligned",
    "AxisDirection",
    "BoundingBox",
    "CardinalDirection2D",
    "CoordinateType",
    "Diagonal",
    "Direction2D",
    "Grid2D",
    "HyperCube",
    "Line",
    "OrthogonalLine",
    "OrthogonalLine2D",
    "OrthogonalLine2DType",
    "OrthogonalPolygon2D",
    "Point",
    "PositionStatus",
    "SquareDiamond2D",
    "Vector",
    "VectorType",
    "angle_between_vectors",
    "grid_coordinate",
]
