"""Integer coordinate types with checked arithmetic.

Points, vectors and intervals carry a `CoordinateType` tag instead of a
compile-time numeric type. Arithmetic is done with Python integers and every
stored result is checked against the tag's range, so overflow surfaces as
`None` instead of wrapping.
"""

from __future__ import annotations

from enum import Enum

import numpy as np


class CoordinateType(Enum):
    """Fixed-width integer type a coordinate must fit in.

    Attributes:
        label: Short type name (e.g., "i64").
        bits: Width in bits.
        signed: Whether negative values are representable.
        min_value: Smallest representable value.
        max_value: Largest representable value.
    """

    I8 = ("i8", 8, True)
    I16 = ("i16", 16, True)
    I32 = ("i32", 32, True)
    I64 = ("i64", 64, True)
    I128 = ("i128", 128, True)
    U8 = ("u8", 8, False)
    U16 = ("u16", 16, False)
    U32 = ("u32", 32, False)
    U64 = ("u64", 64, False)
    USIZE = ("usize", 64, False)

    def __init__(self, label: str, bits: int, signed: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed
        dtype = self.dtype
        if dtype is not None:
            info = np.iinfo(dtype)
            self.min_value = int(info.min)
            self.max_value = int(info.max)
        elif signed:
            self.min_value = -(1 << (bits - 1))
            self.max_value = (1 << (bits - 1)) - 1
        else:
            self.min_value = 0
            self.max_value = (1 << bits) - 1

    @property
    def dtype(self) -> np.dtype | None:
        """Matching numpy dtype, or None when numpy has no such width."""
        if self.bits > 64:
            return None
        prefix = "int" if self.signed else "uint"
        return np.dtype(f"{prefix}{self.bits}")

    def contains(self, value: int) -> bool:
        """Check whether value is representable in this type."""
        return self.min_value <= value <= self.max_value

    def checked(self, value: int) -> int | None:
        """Return value if representable, otherwise None."""
        return value if self.contains(value) else None

    def __str__(self) -> str:
        return self.label


DEFAULT_COORDINATE_TYPE = CoordinateType.I64

# Grid coordinates are unsigned, like array indices
GRID_COORDINATE_TYPE = CoordinateType.USIZE

# Range of the scalar accepted by vector multiplication
SCALAR_TYPE = CoordinateType.I32
