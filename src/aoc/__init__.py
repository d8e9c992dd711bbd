"""Foundation libraries for puzzle solutions.

Subpackages:
    - geometry: N-D points and vectors, orthogonal lines, boxes, diamonds,
      orthogonal polygons and 2D grids over checked integer coordinates
    - intervals: closed integer intervals and canonical interval sets
    - utils: logging setup and the bounded loop cache
"""
