"""Core conversion modules."""

from sample_gain.core.lossy import (
    F64,
    I64,
    SOURCE_TYPES,
    U32,
    U64,
    U128,
    USIZE,
    SourceType,
    get_source_type,
    infer_source_type,
    to_f32_lossy,
    to_f32_lossy_array,
)

__all__ = [
    "SourceType",
    "F64",
    "U32",
    "U64",
    "I64",
    "U128",
    "USIZE",
    "SOURCE_TYPES",
    "get_source_type",
    "infer_source_type",
    "to_f32_lossy",
    "to_f32_lossy_array",
]
