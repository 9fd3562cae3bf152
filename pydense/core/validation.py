"""
Input validation utilities for pydense.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No wrapping of negative indexes
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydense.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    TypeMismatchError,
    ValidationError,
)


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    The dtype is kept as given (no float promotion); the scalar type
    decides how cells are stored.

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_index(index: Any, size: int, axis: str) -> int:
    """
    Verify index lies in [0, size).

    Args:
        index: Index to check
        size: Length of the indexed axis
        axis: 'row', 'column' or 'element' (used in the message)

    Returns:
        The index as int

    Raises:
        IndexOutOfRangeError: If index is outside [0, size)
        TypeError: If index is not an integer
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(
            f"{axis} index must be an int, got {type(index).__name__}"
        )
    index = int(index)
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(
            f"{axis.capitalize()} index {index} out of range [0, {size})",
            index=index,
            size=size,
            axis=axis,
        )
    return index


def check_same_length(left: int, right: int, what: str) -> None:
    """
    Verify two vector lengths agree.

    Raises:
        DimensionError: If the lengths differ
    """
    if left != right:
        raise DimensionError(
            f"{what}: vectors must have the same length, got {left} and {right}",
            expected=left,
            actual=right,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    what: str,
) -> None:
    """
    Verify two matrix shapes agree.

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{what}: matrix dimensions must be the same, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            expected=left,
            actual=right,
        )


def check_same_dtype(left: Any, right: Any, what: str) -> None:
    """
    Verify two containers share a scalar type.

    Raises:
        TypeMismatchError: If the scalar types differ
    """
    if left != right:
        raise TypeMismatchError(
            f"{what}: operands must share a scalar type, got {left.name} and {right.name}",
            expected=left.name,
            actual=right.name,
        )


def check_consistent_lengths(lengths: Sequence[int], name: str) -> int:
    """
    Verify all rows of a grid have the same length.

    Returns:
        The common length (0 for an empty grid)

    Raises:
        DimensionError: If the rows have inconsistent lengths
    """
    if not lengths:
        return 0
    first = lengths[0]
    for i, length in enumerate(lengths):
        if length != first:
            raise DimensionError(
                f"{name}: all rows must have the same length; "
                f"row 0 has {first}, row {i} has {length}",
                expected=first,
                actual=length,
            )
    return first


def check_lines(lines: Any, name: str) -> list[str]:
    """
    Verify a text-line array is present and non-empty.

    Raises:
        ValidationError: If lines is None, a bare string, empty, or holds
            something other than str or None
    """
    if lines is None:
        raise ValidationError(f"{name}: cannot build from None")
    if isinstance(lines, (str, bytes)):
        raise ValidationError(
            f"{name}: expected a sequence of lines, got a single {type(lines).__name__}"
        )
    result = list(lines)
    if not result:
        raise ValidationError(f"{name}: line array is empty")
    for i, line in enumerate(result):
        if line is not None and not isinstance(line, str):
            raise ValidationError(
                f"{name}: line {i} must be str or None, got {type(line).__name__}"
            )
    return result


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise DimensionError(
            f"{name}: expected a square matrix, got {shape[0]}x{shape[1]}",
            expected=(shape[0], shape[0]),
            actual=shape,
        )
