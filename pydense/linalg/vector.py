"""
Dense vector container.

A Vector owns a fixed-length list of scalars of one scalar type (``dtype``).
Its length never changes after construction; single elements may be
overwritten in place with ``v[i] = x``.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from pydense.core.exceptions import ParseError, ValidationError
from pydense.core.formats import NumberFormat, format_scalar, get_format
from pydense.core.scalars import FLOAT, infer_scalar, resolve_scalar
from pydense.core.validation import (
    check_array,
    check_index,
    check_ndim,
    check_same_dtype,
    check_same_length,
)

if TYPE_CHECKING:
    from pydense.linalg.matrix import Matrix


class Vector:
    """
    Fixed-length ordered sequence of scalars.

    Construction:
        Vector([1.0, 2.0, 3.0])                  # dtype inferred (float)
        Vector([1, 2, 3], dtype='fraction')      # values coerced
        Vector.parse("1,5 2,25", fmt='de-DE')    # from a text line
        Vector.full(3, 0.0)                      # fixed length + fill value
        Vector.from_numpy(np.arange(3.0))

    Operators:
        v + w, v - w      elementwise, lengths must match
        v * s, s * v      scalar multiply
        v * w             dot product (returns a scalar)
    """

    __slots__ = ('_values', '_dtype')
    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, values: Iterable[Any] = (), dtype: Any = None):
        items = list(values)
        if dtype is None:
            dtype = values.dtype if isinstance(values, Vector) else (
                infer_scalar(items[0]) if items else FLOAT
            )
        self._dtype = resolve_scalar(dtype)
        self._values = [self._dtype.coerce(v) for v in items]

    @classmethod
    def _wrap(cls, values: list[Any], dtype: Any) -> Vector:
        """Adopt an already-converted list without copying."""
        vector = cls.__new__(cls)
        vector._values = values
        vector._dtype = dtype
        return vector

    @classmethod
    def parse(
        cls,
        line: str,
        dtype: Any = FLOAT,
        fmt: NumberFormat | str | None = None,
        delimiter: str | None = None,
    ) -> Vector:
        """
        Build a vector from one delimited text line.

        Args:
            line: Text such as "1 2 3"
            dtype: Scalar type of the cells
            fmt: Number format (decimal/group separators); invariant if None
            delimiter: Token separator; None splits on runs of whitespace

        Raises:
            ValidationError: If line is None, empty or blank
            ParseError: If a token is not a valid literal for dtype
        """
        if line is None or not isinstance(line, str) or not line.strip():
            raise ValidationError("line: can't create vector, string is empty")

        scalar = resolve_scalar(dtype)
        number_format = get_format(fmt)
        tokens = line.split() if delimiter is None else line.strip().split(delimiter)

        values = []
        for position, token in enumerate(tokens):
            try:
                values.append(scalar.parse(token, number_format))
            except ParseError as e:
                raise ParseError(
                    f"line {line!r}, token {position}: {e}",
                    token=token,
                    position=position,
                    dtype_name=scalar.name,
                ) from e
        return cls._wrap(values, scalar)

    @classmethod
    def full(cls, length: int, value: Any, dtype: Any = None) -> Vector:
        """Vector of ``length`` copies of ``value``."""
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise ValidationError(f"length: expected int >= 0, got {length!r}")
        scalar = resolve_scalar(dtype) if dtype is not None else infer_scalar(value)
        fill = scalar.coerce(value)
        return cls._wrap([fill] * length, scalar)

    @classmethod
    def from_numpy(cls, array: ArrayLike, dtype: Any = None) -> Vector:
        """Build a vector from a 1D numeric array."""
        arr = check_array(array, 'array')
        check_ndim(arr, 1, 'array')
        return cls(arr, dtype=dtype if dtype is not None else resolve_scalar(arr.dtype))

    @staticmethod
    def rows_of(matrix: Matrix) -> tuple[Vector, ...]:
        """One vector per matrix row, in row order."""
        return tuple(matrix.row(i) for i in range(matrix.rows))

    @staticmethod
    def columns_of(matrix: Matrix) -> tuple[Vector, ...]:
        """One vector per matrix column, in column order."""
        return tuple(matrix.column(j) for j in range(matrix.cols))

    # ─── Properties ─────────────────────────────────────────────────────

    @property
    def dtype(self):
        return self._dtype

    @property
    def length(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[check_index(index, len(self._values), 'element')]

    def __setitem__(self, index: int, value: Any) -> None:
        i = check_index(index, len(self._values), 'element')
        self._values[i] = self._dtype.check(value)

    # ─── Arithmetic ─────────────────────────────────────────────────────

    def _check_operand(self, other: Vector, what: str) -> None:
        check_same_length(len(self), len(other), what)
        check_same_dtype(self._dtype, other._dtype, what)

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_operand(other, 'add')
        add = self._dtype.add
        return Vector._wrap(
            [add(a, b) for a, b in zip(self._values, other._values)], self._dtype
        )

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_operand(other, 'sub')
        sub = self._dtype.sub
        return Vector._wrap(
            [sub(a, b) for a, b in zip(self._values, other._values)], self._dtype
        )

    def dot(self, other: Vector) -> Any:
        """
        Dot product, accumulated left to right starting from zero.

        Raises:
            DimensionError: If the lengths differ
        """
        self._check_operand(other, 'dot')
        add, mul = self._dtype.add, self._dtype.mul
        total = self._dtype.from_int(0)
        for a, b in zip(self._values, other._values):
            total = add(total, mul(a, b))
        return total

    def scale(self, scalar: Any) -> Vector:
        """Multiply every element by a scalar."""
        factor = self._dtype.coerce(scalar)
        mul = self._dtype.mul
        return Vector._wrap([mul(a, factor) for a in self._values], self._dtype)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if hasattr(other, 'shape') and not np.isscalar(other):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other: Any) -> Vector:
        if hasattr(other, 'shape') and not np.isscalar(other):
            return NotImplemented
        return self.scale(other)

    # ─── Comparison ─────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(other) != len(self):
            return False
        equal = self._dtype.equal
        return all(equal(a, b) for a, b in zip(self._values, other._values))

    def __hash__(self) -> int:
        return hash(tuple(self._values))

    # ─── Conversion ─────────────────────────────────────────────────────

    def copy(self) -> Vector:
        return Vector._wrap(list(self._values), self._dtype)

    def to_list(self) -> list[Any]:
        return list(self._values)

    def to_numpy(self) -> np.ndarray:
        return np.array(self._values, dtype=self._dtype.numpy_dtype)

    def format(self, fmt: NumberFormat | str | None = None, sep: str = ' ') -> str:
        number_format = get_format(fmt)
        return sep.join(format_scalar(v, number_format) for v in self._values)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Vector({self._values!r}, dtype={self._dtype.name!r})"


def stack_lengths(vectors: Sequence[Vector]) -> list[int]:
    """Lengths of a sequence of vectors, validating their type."""
    lengths = []
    for i, v in enumerate(vectors):
        if not isinstance(v, Vector):
            raise ValidationError(
                f"vectors[{i}]: expected Vector, got {type(v).__name__}"
            )
        lengths.append(len(v))
    return lengths
