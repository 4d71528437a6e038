"""
Precision Format Definitions - Single Source of Truth

This module defines the floating-point formats a ``Real`` can be stored in,
with their machine epsilon and the default tolerance used for zero tests.

References:
    - IEEE 754-2019 Standard for Floating-Point Arithmetic
    - Higham: "Accuracy and Stability of Numerical Algorithms" (2nd ed.)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

import numpy as np
from numpy.typing import DTypeLike


class PrecisionFormat(Enum):
    """Supported floating-point precision formats."""

    FP64 = "fp64"
    FP32 = "fp32"
    FP16 = "fp16"


@dataclass(frozen=True, slots=True)
class PrecisionSpec:
    """Specification for a floating-point precision format."""

    format: PrecisionFormat
    bits: int
    mantissa_bits: int
    exponent_bits: int
    machine_epsilon: float

    @property
    def bytes(self) -> int:
        """Number of bytes for this format."""
        return self.bits // 8


# =============================================================================
# PRECISION SPECIFICATIONS
# =============================================================================
# Machine epsilon: 2^(-mantissa_bits)

_PRECISION_SPECS: dict[PrecisionFormat, PrecisionSpec] = {
    PrecisionFormat.FP64: PrecisionSpec(
        format=PrecisionFormat.FP64,
        bits=64,
        mantissa_bits=52,
        exponent_bits=11,
        machine_epsilon=2.22e-16,  # 2^(-52)
    ),
    PrecisionFormat.FP32: PrecisionSpec(
        format=PrecisionFormat.FP32,
        bits=32,
        mantissa_bits=23,
        exponent_bits=8,
        machine_epsilon=1.19e-7,  # 2^(-23)
    ),
    PrecisionFormat.FP16: PrecisionSpec(
        format=PrecisionFormat.FP16,
        bits=16,
        mantissa_bits=10,
        exponent_bits=5,
        machine_epsilon=9.77e-4,  # 2^(-10)
    ),
}


_DTYPES: dict[PrecisionFormat, Any] = {
    PrecisionFormat.FP64: np.float64,
    PrecisionFormat.FP32: np.float32,
    PrecisionFormat.FP16: np.float16,
}


# =============================================================================
# ZERO-TEST TOLERANCES
# =============================================================================
# Roughly 1e4 * eps, so that a handful of rounded eliminations on
# well-scaled integer-valued data still compare equal.

_ZERO_TOLERANCES: dict[PrecisionFormat, float] = {
    PrecisionFormat.FP64: 1e-12,
    PrecisionFormat.FP32: 1e-5,
    PrecisionFormat.FP16: 1e-2,
}


DEFAULT_TOLERANCE: float = _ZERO_TOLERANCES[PrecisionFormat.FP64]
"""Default tolerance for the matrix algorithms (the fp64 zero-test tolerance)."""


# =============================================================================
# PUBLIC API
# =============================================================================


def get_spec(fmt: PrecisionFormat | str) -> PrecisionSpec:
    """
    Get the full specification for a precision format.

    Args:
        fmt: Precision format (enum or string like 'fp32', 'FP16')

    Returns:
        PrecisionSpec with all format properties

    Raises:
        ValueError: If format is unknown

    Example:
        >>> spec = get_spec("fp32")
        >>> spec.machine_epsilon
        1.19e-07
    """
    if isinstance(fmt, str):
        fmt = parse_format(fmt)
    return _PRECISION_SPECS[fmt]


def get_dtype(fmt: PrecisionFormat | str) -> DTypeLike:
    """
    Get the numpy dtype for a precision format.

    Args:
        fmt: Precision format

    Returns:
        Numpy scalar type

    Example:
        >>> get_dtype("fp32")
        <class 'numpy.float32'>
    """
    if isinstance(fmt, str):
        fmt = parse_format(fmt)

    return cast("DTypeLike", _DTYPES[fmt])


def get_eps(fmt: PrecisionFormat | str) -> float:
    """
    Get machine epsilon for a precision format.

    Machine epsilon is the smallest positive number ε such that 1.0 + ε ≠ 1.0
    in the given floating-point representation.

    Example:
        >>> get_eps("fp64")
        2.22e-16
    """
    return get_spec(fmt).machine_epsilon


def get_tolerance(fmt: PrecisionFormat | str) -> float:
    """
    Get the default zero-test tolerance for a precision format.

    This is the tolerance a ``Real`` carries when none is given explicitly.

    Example:
        >>> get_tolerance("fp32")
        1e-05
    """
    if isinstance(fmt, str):
        fmt = parse_format(fmt)
    return _ZERO_TOLERANCES[fmt]


def list_available_formats() -> list[PrecisionFormat]:
    """List precision formats ordered from highest to lowest precision."""
    return [PrecisionFormat.FP64, PrecisionFormat.FP32, PrecisionFormat.FP16]


def parse_format(name: str) -> PrecisionFormat:
    """Parse a string into a PrecisionFormat enum."""
    normalized = name.lower().replace("-", "_").replace(" ", "_")

    for fmt in PrecisionFormat:
        if fmt.value == normalized:
            return fmt

    valid = [f.value for f in PrecisionFormat]
    raise ValueError(f"Unknown precision format: '{name}'. Valid: {valid}")


__all__ = [
    "DEFAULT_TOLERANCE",
    "PrecisionFormat",
    "PrecisionSpec",
    "get_dtype",
    "get_eps",
    "get_spec",
    "get_tolerance",
    "list_available_formats",
    "parse_format",
]
