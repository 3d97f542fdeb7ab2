"""Saturating conversion of numeric values to float32 samples."""

import math
import numbers
from dataclasses import dataclass
from typing import Union

import numpy as np

from sample_gain.config import (
    FLOAT32_MAX,
    FLOAT32_MIN,
    I64_MAX,
    I64_MIN,
    U32_MAX,
    U64_MAX,
    U128_MAX,
    USIZE_MAX,
)

Number = Union[int, float, np.integer, np.floating]


def _truncate_bound(bound: np.float32, lo: int, hi: int) -> int:
    """Truncate a float32 bound toward zero into an integer range, saturating."""
    return max(lo, min(hi, int(bound)))


def _int_to_float32(value: int) -> np.float32:
    """Round an integer to the nearest float32, ties to even.

    Rounds once on the integer itself; going through a double first would
    round twice for values above 2**53.
    """
    magnitude = abs(value)
    excess = magnitude.bit_length() - 24
    if excess > 0:
        mantissa, remainder = divmod(magnitude, 1 << excess)
        half = 1 << (excess - 1)
        if remainder > half or (remainder == half and mantissa & 1):
            mantissa += 1
        magnitude = mantissa << excess
    return np.float32(float(-magnitude if value < 0 else magnitude))


@dataclass(frozen=True)
class SourceType:
    """A numeric source representation that can be narrowed to float32."""

    name: str
    """Short type name (e.g. 'u32', 'f64')."""

    min_value: Union[int, float]
    """Smallest value representable in the source type."""

    max_value: Union[int, float]
    """Largest value representable in the source type."""

    signed: bool = False
    """Whether the type can hold negative values."""

    is_float: bool = False
    """Whether the type is a floating-point type."""

    @property
    def upper_threshold(self) -> Union[int, float]:
        """float32 maximum expressed in the source type."""
        if self.is_float:
            return float(FLOAT32_MAX)
        return _truncate_bound(FLOAT32_MAX, self.min_value, self.max_value)

    @property
    def lower_threshold(self) -> Union[int, float]:
        """float32 minimum expressed in the source type."""
        if self.is_float:
            return float(FLOAT32_MIN)
        return _truncate_bound(FLOAT32_MIN, self.min_value, self.max_value)

    def to_f32_lossy(self, value: Number) -> np.float32:
        """Convert a value of this type to float32, clamping to the float32 range.

        Values above the float32 maximum become FLOAT32_MAX and values below
        the float32 minimum become FLOAT32_MIN. The result is never infinite
        and never NaN.

        Args:
            value: Value representable in this source type

        Returns:
            The value as a finite float32

        Raises:
            TypeError: If value is not a real number, or is not integral
                for an integer source type
            OverflowError: If value is outside the range of this source type
        """
        if self.is_float:
            return self._from_float(value)
        return self._from_int(value)

    def _from_float(self, value: Number) -> np.float32:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"{self.name} source expects a real number, got {type(value).__name__}")

        value = float(value)
        if math.isnan(value):
            return np.float32(0.0)

        # Clamp in double precision first; narrowing out-of-range doubles overflows
        clamped = max(self.lower_threshold, min(self.upper_threshold, value))
        return np.float32(clamped)

    def _from_int(self, value: Number) -> np.float32:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"{self.name} source expects an integer, got {type(value).__name__}")

        value = int(value)
        if value < self.min_value or value > self.max_value:
            raise OverflowError(
                f"{value} is out of range for {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )

        if value > self.upper_threshold:
            return FLOAT32_MAX
        if self.signed and value < self.lower_threshold:
            return FLOAT32_MIN
        return _int_to_float32(value)


F64 = SourceType("f64", float("-inf"), float("inf"), signed=True, is_float=True)
U32 = SourceType("u32", 0, U32_MAX)
U64 = SourceType("u64", 0, U64_MAX)
I64 = SourceType("i64", I64_MIN, I64_MAX, signed=True)
U128 = SourceType("u128", 0, U128_MAX)
USIZE = SourceType("usize", 0, USIZE_MAX)

SOURCE_TYPES = {source.name: source for source in (F64, U32, U64, I64, U128, USIZE)}


def get_source_type(name: str) -> SourceType:
    """Look up a source type by name.

    Args:
        name: Type name ('f64', 'u32', 'u64', 'i64', 'u128', 'usize')

    Returns:
        The matching SourceType

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return SOURCE_TYPES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown source type: {name}. "
            f"Expected one of: {', '.join(SOURCE_TYPES)}"
        )


def infer_source_type(value: Number) -> SourceType:
    """Pick the source type a value naturally belongs to.

    Numpy scalars map by dtype, widening to the nearest supported type.
    Python floats are f64; Python ints are i64 when negative and u128
    otherwise.

    Args:
        value: Numeric value

    Returns:
        The inferred SourceType

    Raises:
        TypeError: If value is not a real number
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric source type")

    if isinstance(value, np.floating):
        return F64
    if isinstance(value, np.unsignedinteger):
        return U32 if value.dtype.itemsize <= 4 else U64
    if isinstance(value, np.signedinteger):
        return I64

    if isinstance(value, numbers.Integral):
        return I64 if value < 0 else U128
    if isinstance(value, numbers.Real):
        return F64

    raise TypeError(f"Cannot convert {type(value).__name__} to float32")


def to_f32_lossy(
    value: Number,
    source: Union[SourceType, str, None] = None,
) -> np.float32:
    """Convert a numeric value to float32 without overflowing.

    Args:
        value: Value to convert
        source: Source type (instance or name); inferred from value if omitted

    Returns:
        Finite float32 value, clamped to the float32 range
    """
    if source is None:
        source = infer_source_type(value)
    elif isinstance(source, str):
        source = get_source_type(source)
    return source.to_f32_lossy(value)


def to_f32_lossy_array(values) -> np.ndarray:
    """Convert an array of numbers to float32, clamping to the float32 range.

    Infinities saturate to the nearest bound and NaN becomes 0.0, matching
    the scalar conversion.

    Args:
        values: Array-like of numbers

    Returns:
        float32 array with the same shape

    Raises:
        TypeError: If values are not numeric
    """
    arr = np.asarray(values)

    # Python ints wider than 64 bits land in object arrays
    if arr.dtype == object:
        flat = [to_f32_lossy(v) for v in arr.ravel()]
        return np.array(flat, dtype=np.float32).reshape(arr.shape)

    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
        raise TypeError(f"Cannot convert array of {arr.dtype} to float32")
    if np.issubdtype(arr.dtype, np.complexfloating):
        raise TypeError("Cannot convert complex values to float32")

    # 64-bit integers always fit; cast directly to round once
    if np.issubdtype(arr.dtype, np.integer):
        return arr.astype(np.float32)

    wide = np.nan_to_num(
        arr.astype(np.float64),
        nan=0.0,
        posinf=float(FLOAT32_MAX),
        neginf=float(FLOAT32_MIN),
    )
    return np.clip(wide, float(FLOAT32_MIN), float(FLOAT32_MAX)).astype(np.float32)
