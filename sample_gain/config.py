"""Configuration constants for sample-gain."""

import numpy as np

# Multiplier for converting decibels to a voltage (amplitude) exponent
DB_TO_VOLTAGE = np.float32(0.05)

# Multiplier for converting a voltage (amplitude) ratio to decibels
VOLTAGE_TO_DB = np.float32(20.0)

# Unity gain (no amplification or attenuation)
UNITY_GAIN = np.float32(1.0)

# Zero decibels reference level
ZERO_DB = np.float32(0.0)

# log2(10) and log10(2) at single precision
LOG2_10 = np.float32(3.321928094887362)
LOG10_2 = np.float32(0.3010299956639812)

# Largest and most negative finite float32 values
FLOAT32_MAX = np.finfo(np.float32).max
FLOAT32_MIN = np.finfo(np.float32).min

# Integer bounds of the supported source types
U32_MAX = int(np.iinfo(np.uint32).max)
U64_MAX = int(np.iinfo(np.uint64).max)
I64_MIN = int(np.iinfo(np.int64).min)
I64_MAX = int(np.iinfo(np.int64).max)
U128_MAX = 2**128 - 1
USIZE_MAX = int(np.iinfo(np.uintp).max)

# CLI defaults
DEFAULT_SOURCE_TYPE = "f64"
DISPLAY_PRECISION = 6
