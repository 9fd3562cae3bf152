"""
Core infrastructure for pydense.

This module provides shared abstractions, utilities, and scalar types used by
the dense containers (linalg) and the elimination engine.

Key components:
    protocols: Scalar, Backend protocols
    scalars: Built-in scalar types (INT, FLOAT, FRACTION, DECIMAL, numpy)
    formats: Number formats (decimal/group separators) for text input
    rounding: Rounding policies and round_convert
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pydense.core.protocols import Scalar, Backend
from pydense.core.result import Result
from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    ParseError,
    DimensionError,
    TypeMismatchError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
)
from pydense.core.scalars import (
    INT,
    FLOAT,
    FRACTION,
    DECIMAL,
    FLOAT32,
    NumpyScalar,
    resolve_scalar,
    infer_scalar,
)
from pydense.core.formats import NumberFormat, INVARIANT, get_format
from pydense.core.rounding import RoundingMode, round_convert

__all__ = [
    # Protocols
    "Scalar",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "ParseError",
    "DimensionError",
    "TypeMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    # Scalars
    "INT",
    "FLOAT",
    "FRACTION",
    "DECIMAL",
    "FLOAT32",
    "NumpyScalar",
    "resolve_scalar",
    "infer_scalar",
    # Formats and rounding
    "NumberFormat",
    "INVARIANT",
    "get_format",
    "RoundingMode",
    "round_convert",
]
