"""dB and linear ratio conversion utilities."""

import math

import numpy as np

from sample_gain.config import DB_TO_VOLTAGE, LOG2_10, LOG10_2, VOLTAGE_TO_DB
from sample_gain.utils.fastmath import log2, pow2


def db_to_ratio(db):
    """Convert decibels to a linear amplitude ratio.

    Uses the fast pow2 approximation, so the result carries a small
    relative error (well under 0.01%).

    Args:
        db: Value in decibels (scalar or array-like)

    Returns:
        Linear amplitude ratio as float32 (0 dB = 1.0, -6 dB ≈ 0.5, +6 dB ≈ 2.0)
    """
    db = np.asarray(db, dtype=np.float32)
    return pow2(db * DB_TO_VOLTAGE * LOG2_10)


def ratio_to_db(ratio):
    """Convert a linear amplitude ratio to decibels.

    Inverse of db_to_ratio. The ratio must be greater than 0; this is not
    checked, and non-positive input returns whatever the log2 approximation
    yields.

    Args:
        ratio: Linear amplitude ratio (scalar or array-like)

    Returns:
        Value in decibels as float32 (1.0 = 0 dB)
    """
    return log2(ratio) * LOG10_2 * VOLTAGE_TO_DB


def db_to_ratio_exact(db: float) -> float:
    """Convert decibels to a linear amplitude ratio in double precision.

    Reference for db_to_ratio, used where accuracy matters more than speed.

    Args:
        db: Value in decibels

    Returns:
        Linear amplitude ratio (inf once the result exceeds double range)
    """
    try:
        return 10 ** (db / 20)
    except OverflowError:
        return math.inf


def ratio_to_db_exact(ratio: float) -> float:
    """Convert a linear amplitude ratio to decibels in double precision.

    Args:
        ratio: Linear amplitude ratio (must be > 0)

    Returns:
        Value in decibels

    Raises:
        ValueError: If ratio is <= 0
    """
    if ratio <= 0:
        raise ValueError("Ratio must be greater than 0")
    return 20 * math.log10(ratio)
