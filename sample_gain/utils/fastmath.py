"""Fast approximate base-2 exponential and logarithm.

Single-precision approximations that build the result directly from the
IEEE 754 exponent and mantissa bits, with a small rational correction term.
Relative error stays well below 0.01% over the range used for gain math,
at a fraction of the cost of exact transcendental functions.

Both functions accept scalars or array-likes. Scalars return numpy.float32,
arrays return float32 arrays of the same shape.
"""

import numpy as np

# Bit pattern of +inf; pow2 saturates here instead of wrapping
_FLOAT32_INF_BITS = np.float32(0x7F800000)

_MANTISSA_MASK = np.uint32(0x007FFFFF)
_HALF_EXPONENT = np.uint32(0x3F000000)


def _as_float32(x) -> tuple[np.ndarray, bool]:
    scalar = np.ndim(x) == 0
    return np.array(x, dtype=np.float32, ndmin=1), scalar


def pow2(p):
    """Approximate 2 ** p.

    Args:
        p: Exponent (scalar or array-like)

    Returns:
        Approximation of 2 ** p as float32
    """
    p, scalar = _as_float32(p)

    with np.errstate(invalid="ignore", over="ignore"):
        offset = np.where(p < 0, np.float32(1.0), np.float32(0.0))
        clipp = np.maximum(p, np.float32(-126.0))
        w = clipp.astype(np.int32)  # truncates toward zero
        z = clipp - w.astype(np.float32) + offset

        bits = np.float32(1 << 23) * (
            clipp
            + np.float32(121.2740575)
            + np.float32(27.7280233) / (np.float32(4.84252568) - z)
            - np.float32(1.49012907) * z
        )
        bits = np.clip(bits, np.float32(0.0), _FLOAT32_INF_BITS)
        result = bits.astype(np.uint32).view(np.float32)

    return result[0] if scalar else result


def log2(x):
    """Approximate log2(x).

    Only defined for x > 0. Zero yields a large negative value (about -127)
    and negative input yields an unspecified value; neither raises.

    Args:
        x: Positive value (scalar or array-like)

    Returns:
        Approximation of log2(x) as float32
    """
    x, scalar = _as_float32(x)

    with np.errstate(invalid="ignore", over="ignore"):
        vx = x.view(np.uint32)
        mx = ((vx & _MANTISSA_MASK) | _HALF_EXPONENT).view(np.float32)

        y = vx.astype(np.float32) * np.float32(1.1920928955078125e-7)
        result = (
            y
            - np.float32(124.22551499)
            - np.float32(1.498030302) * mx
            - np.float32(1.72587999) / (np.float32(0.3520887068) + mx)
        )

    return result[0] if scalar else result
