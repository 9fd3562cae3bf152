"""
Dense matrix container.

A Matrix owns a rows x cols grid of scalars of one scalar type (``dtype``).
Its shape never changes after construction. The mutation surface is
deliberately narrow: single-cell assignment, replace_row() and
replace_column(). Every other operation returns a new Matrix.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike

from pydense.core.compute.tolerances import ToleranceTier, select_tolerance
from pydense.core.exceptions import DimensionError, ValidationError
from pydense.core.formats import NumberFormat, format_scalar, get_format
from pydense.core.scalars import FLOAT, infer_scalar, resolve_scalar
from pydense.core.validation import (
    check_array,
    check_consistent_lengths,
    check_index,
    check_lines,
    check_ndim,
)
from pydense.linalg.vector import Vector, stack_lengths


class Matrix:
    """
    Dense rows x cols matrix.

    Construction:
        Matrix([[1, 2], [3, 4]])                   # raw grid, deep-copied
        Matrix(np.eye(3))                          # 2D numpy array
        Matrix.from_vectors([v1, v2, v3])          # one vector per row
        Matrix.parse(["1 2", "3 4"], dtype=int)    # text lines
        Matrix.identity(3)

    Operators:
        A + B, A - B      elementwise, shapes must match
        A * B, A @ B      matrix product
        A * s, s * A      scalar multiply
        A == B            shape and elementwise equality
    """

    __slots__ = ('_grid', '_rows', '_cols', '_dtype')
    __array_ufunc__ = None

    def __init__(self, grid: Iterable[Iterable[Any]] | ArrayLike = (), dtype: Any = None):
        cols = None
        if isinstance(grid, Matrix):
            rows = grid._grid
            cols = grid._cols
            if dtype is None:
                dtype = grid._dtype
        elif isinstance(grid, np.ndarray):
            arr = check_array(grid, 'grid')
            check_ndim(arr, 2, 'grid')
            rows = list(arr)
            cols = arr.shape[1]
            if dtype is None:
                dtype = resolve_scalar(arr.dtype)
        else:
            rows = []
            for i, row in enumerate(grid):
                if isinstance(row, (str, bytes)):
                    raise ValidationError(
                        f"grid: row {i} is a string; use Matrix.parse() for text input"
                    )
                try:
                    rows.append(list(row))
                except TypeError as e:
                    raise ValidationError(
                        f"grid: expected a 2D grid, row {i} is {type(row).__name__}"
                    ) from e

        if cols is None:
            cols = check_consistent_lengths([len(r) for r in rows], 'grid')
        if dtype is None:
            first = next((r[0] for r in rows if len(r)), None)
            dtype = FLOAT if first is None else infer_scalar(first)

        scalar = resolve_scalar(dtype)
        self._grid = [[scalar.coerce(v) for v in row] for row in rows]
        self._rows = len(rows)
        self._cols = cols
        self._dtype = scalar

    @classmethod
    def _wrap(cls, grid: list[list[Any]], dtype: Any, cols: int | None = None) -> Matrix:
        """Adopt an already-converted grid without copying."""
        matrix = cls.__new__(cls)
        matrix._grid = grid
        matrix._rows = len(grid)
        matrix._cols = len(grid[0]) if grid else (cols or 0)
        matrix._dtype = dtype
        return matrix

    # ─── Alternative constructors ───────────────────────────────────────

    @classmethod
    def from_vectors(cls, vectors: Sequence[Vector], dtype: Any = None) -> Matrix:
        """
        Stack vectors as rows.

        Raises:
            DimensionError: If the vectors have different lengths
            ValidationError: If an element is not a Vector
        """
        vectors = list(vectors)
        lengths = stack_lengths(vectors)
        try:
            check_consistent_lengths(lengths, 'vectors')
        except DimensionError as e:
            raise DimensionError(
                "vectors: must be of the same length, got lengths "
                f"{lengths}",
                expected=e.expected,
                actual=e.actual,
            ) from e
        if dtype is None:
            dtype = vectors[0].dtype if vectors else FLOAT
        return cls([v.to_list() for v in vectors], dtype=dtype)

    @classmethod
    def parse(
        cls,
        lines: Sequence[str],
        dtype: Any = FLOAT,
        fmt: NumberFormat | str | None = None,
        delimiter: str | None = None,
    ) -> Matrix:
        """
        Build a matrix from text lines, one row per line.

        Blank lines are skipped.

        Args:
            lines: Lines such as ["1 2", "3 4"]
            dtype: Scalar type of the cells
            fmt: Number format (decimal/group separators); invariant if None
            delimiter: Token separator; None splits on runs of whitespace

        Raises:
            ValidationError: If lines is None, empty or only blank lines
            ParseError: If a token is not a valid literal for dtype
            DimensionError: If lines have different token counts
        """
        lines = check_lines(lines, 'lines')
        vectors = [
            Vector.parse(line, dtype=dtype, fmt=fmt, delimiter=delimiter)
            for line in lines
            if line is not None and line.strip()
        ]
        if not vectors:
            raise ValidationError("lines: can't create matrix, all lines are blank")

        lengths = [len(v) for v in vectors]
        if len(set(lengths)) > 1:
            raise DimensionError(
                f"lines: every line must have the same number of values, got {lengths}",
                expected=lengths[0],
                actual=next(n for n in lengths if n != lengths[0]),
            )
        scalar = vectors[0].dtype
        return cls._wrap([v.to_list() for v in vectors], scalar)

    @classmethod
    def from_numpy(cls, array: ArrayLike, dtype: Any = None) -> Matrix:
        """Build a matrix from a 2D numeric array."""
        arr = check_array(array, 'array')
        check_ndim(arr, 2, 'array')
        return cls(arr, dtype=dtype)

    @classmethod
    def identity(cls, n: int, dtype: Any = FLOAT) -> Matrix:
        """n x n matrix with one on the diagonal and zero elsewhere."""
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValidationError(f"n: expected int >= 0, got {n!r}")
        scalar = resolve_scalar(dtype)
        zero, one = scalar.from_int(0), scalar.from_int(1)
        grid = [[one if i == j else zero for j in range(n)] for i in range(n)]
        return cls._wrap(grid, scalar)

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: Any = FLOAT) -> Matrix:
        """rows x cols matrix of zeros."""
        for name, value in (('rows', rows), ('cols', cols)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValidationError(f"{name}: expected int >= 0, got {value!r}")
        scalar = resolve_scalar(dtype)
        zero = scalar.from_int(0)
        return cls._wrap([[zero] * cols for _ in range(rows)], scalar, cols=cols)

    # ─── Shape and element access ───────────────────────────────────────

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self):
        return self._dtype

    def _check_key(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be (row, column) pairs")
        row, column = key
        return (
            check_index(row, self._rows, 'row'),
            check_index(column, self._cols, 'column'),
        )

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = self._check_key(key)
        return self._grid[i][j]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = self._check_key(key)
        self._grid[i][j] = self._dtype.check(value)

    def row(self, i: int) -> Vector:
        """Copy of row i as a Vector."""
        i = check_index(i, self._rows, 'row')
        return Vector._wrap(list(self._grid[i]), self._dtype)

    def column(self, j: int) -> Vector:
        """Copy of column j as a Vector."""
        j = check_index(j, self._cols, 'column')
        return Vector._wrap([row[j] for row in self._grid], self._dtype)

    def __iter__(self) -> Iterator[Vector]:
        return iter(Vector.rows_of(self))

    def dimension_equal(self, other: Matrix) -> bool:
        """True iff rows and cols both match."""
        return self._rows == other.rows and self._cols == other.cols

    # ─── In-place mutators ──────────────────────────────────────────────

    def replace_row(self, i: int, vector: Vector) -> None:
        """
        Overwrite row i with the values of vector.

        Raises:
            DimensionError: If len(vector) != cols
            IndexOutOfRangeError: If i is outside [0, rows)
        """
        if len(vector) != self._cols:
            raise DimensionError(
                f"replace_row: vector length must be same as matrix columns count "
                f"({self._cols}), got {len(vector)}",
                expected=self._cols,
                actual=len(vector),
            )
        i = check_index(i, self._rows, 'row')
        self._grid[i] = [self._dtype.coerce(v) for v in vector]

    def replace_column(self, j: int, vector: Vector) -> None:
        """
        Overwrite column j with the values of vector.

        Raises:
            DimensionError: If len(vector) != rows
            IndexOutOfRangeError: If j is outside [0, cols)
        """
        if len(vector) != self._rows:
            raise DimensionError(
                f"replace_column: vector length must be same as matrix rows count "
                f"({self._rows}), got {len(vector)}",
                expected=self._rows,
                actual=len(vector),
            )
        j = check_index(j, self._cols, 'column')
        values = [self._dtype.coerce(v) for v in vector]
        for row, value in zip(self._grid, values):
            row[j] = value

    # ─── Derived matrices ───────────────────────────────────────────────

    def transpose(self) -> Matrix:
        from pydense.linalg.operations import transpose
        return transpose(self)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    @property
    def is_symmetric(self) -> bool:
        """A matrix is symmetric iff it equals its own transpose."""
        return self == self.transpose()

    def copy(self) -> Matrix:
        return Matrix._wrap([list(r) for r in self._grid], self._dtype, cols=self._cols)

    def astype(self, dtype: Any) -> Matrix:
        """
        Convert every cell to another scalar type.

        Narrowing conversions (float -> int) are rejected by the target
        type; use round_matrix() for those.
        """
        return Matrix(self, dtype=dtype)

    # ─── Operators ──────────────────────────────────────────────────────

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pydense.linalg.operations import add
        return add(self, other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pydense.linalg.operations import sub
        return sub(self, other)

    def __mul__(self, other: Any) -> Matrix:
        from pydense.linalg.operations import multiply, scale
        if isinstance(other, Matrix):
            return multiply(self, other)
        if isinstance(other, Vector) or (hasattr(other, 'shape') and not np.isscalar(other)):
            return NotImplemented
        return scale(self, other)

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, Vector) or (hasattr(other, 'shape') and not np.isscalar(other)):
            return NotImplemented
        from pydense.linalg.operations import scale
        return scale(self, other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pydense.linalg.operations import multiply
        return multiply(self, other)

    # ─── Comparison ─────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self.dimension_equal(other):
            return False
        equal = self._dtype.equal
        return all(
            equal(a, b)
            for row_a, row_b in zip(self._grid, other._grid)
            for a, b in zip(row_a, row_b)
        )

    def __hash__(self) -> int:
        return hash((self.shape, tuple(tuple(r) for r in self._grid)))

    def isclose(self, other: Matrix, tier: ToleranceTier | None = None) -> bool:
        """
        Approximate equality for floating matrices.

        Cells are compared as float64 with numpy.allclose using the
        tolerance tier of this matrix's scalar type unless one is given.
        """
        if not self.dimension_equal(other):
            return False
        tier = tier if tier is not None else select_tolerance(self._dtype)
        left = np.array([[float(v) for v in r] for r in self._grid], dtype=np.float64)
        right = np.array([[float(v) for v in r] for r in other._grid], dtype=np.float64)
        return bool(np.allclose(left, right, rtol=tier.rtol, atol=tier.atol))

    # ─── Conversion ─────────────────────────────────────────────────────

    def to_list(self) -> list[list[Any]]:
        """Deep copy of the grid as nested lists."""
        return [list(r) for r in self._grid]

    def to_numpy(self) -> np.ndarray:
        arr = np.array(self._grid, dtype=self._dtype.numpy_dtype)
        return arr.reshape(self.shape)

    def format(self, fmt: NumberFormat | str | None = None, sep: str = ' ') -> str:
        """Rows joined by newlines, cells joined by sep, row-major."""
        number_format = get_format(fmt)
        return '\n'.join(
            sep.join(format_scalar(v, number_format) for v in row)
            for row in self._grid
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix({self._grid!r}, dtype={self._dtype.name!r})"
