"""
Exception hierarchy for pydense.

All exceptions inherit from PyDenseError to allow catching any
library-specific error. Validation errors also inherit from the matching
builtin (ValueError, TypeError, IndexError) so callers that only know the
standard hierarchy still catch them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDenseError(Exception):
    """Base exception for all pydense errors."""
    pass


class ValidationError(PyDenseError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs are malformed or empty, e.g. a None
    or blank line array handed to Matrix.parse().
    """
    pass


class ParseError(ValidationError):
    """
    A text token could not be converted to the scalar type.

    Attributes:
        token: The offending text token
        position: Zero-based position of the token within its line
        dtype_name: Name of the scalar type the token was parsed as
    """

    def __init__(
        self,
        message: str,
        token: str | None = None,
        position: int | None = None,
        dtype_name: str | None = None,
    ):
        super().__init__(message)
        self.token = token
        self.position = position
        self.dtype_name = dtype_name


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised on shape mismatches between operands of add/sub/multiply,
    between a vector and the matrix row/column it replaces, between the
    rows of a grid during construction, or between A and B in elimination.

    Attributes:
        expected: Expected dimension (length or (rows, cols)), if known
        actual: Actual dimension, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class TypeMismatchError(ValidationError, TypeError):
    """
    A value's runtime type does not match the container's scalar type.

    Attributes:
        expected: Name of the expected scalar type
        actual: Name of the type actually supplied
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(PyDenseError, IndexError):
    """
    Row, column or element index outside bounds.

    Attributes:
        index: The offending index
        size: Size of the indexed axis
        axis: 'row', 'column' or 'element'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.size = size
        self.axis = axis


class NumericalError(PyDenseError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when elimination meets an exactly zero pivot: the coefficient
    matrix has no inverse and the system has no unique solution.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        step: Elimination step at which the zero pivot was found
        pivot_row: Row of the chosen pivot before the row swap
        pivot_col: Column of the chosen pivot
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        step: int | None = None,
        pivot_row: int | None = None,
        pivot_col: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.step = step
        self.pivot_row = pivot_row
        self.pivot_col = pivot_col
