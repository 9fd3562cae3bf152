"""
Built-in scalar types.

Each scalar type object implements the Scalar protocol for one numeric type.
Vector and Matrix carry one of these as ``dtype`` and never dispatch
arithmetic on the runtime type of their cells.

Available types:
    INT: Python int (not a field, promoted to FLOAT for elimination)
    FLOAT: Python float (IEEE double)
    FRACTION: fractions.Fraction (exact rational arithmetic)
    DECIMAL: decimal.Decimal (current decimal context precision)
    NumpyScalar(dtype): numpy scalar of a fixed dtype, e.g. FLOAT32
"""

from __future__ import annotations

import numbers
from decimal import Decimal, InvalidOperation, localcontext
from fractions import Fraction
from typing import Any

import numpy as np

from pydense.core.exceptions import ParseError, TypeMismatchError, ValidationError
from pydense.core.formats import NumberFormat, INVARIANT


class _ScalarBase:
    """Shared plumbing for the built-in scalar types."""

    name: str = ''
    is_field: bool = True
    is_floating: bool = False
    storage_type: type = object
    numpy_dtype: Any = object

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        return a / b

    def equal(self, a, b) -> bool:
        return bool(a == b)

    def magnitude(self, a) -> float:
        return float(abs(a))

    def from_int(self, n: int):
        return self.storage_type(n)

    @property
    def zero(self):
        return self.from_int(0)

    @property
    def one(self):
        return self.from_int(1)

    def parse(self, text: str, fmt: NumberFormat = INVARIANT):
        literal = fmt.normalize(text)
        if not literal:
            raise ParseError(
                f"cannot parse empty token as {self.name}",
                token=text,
                dtype_name=self.name,
            )
        try:
            return self._parse_literal(literal)
        except (ValueError, ArithmeticError, TypeError) as e:
            raise ParseError(
                f"cannot parse {text!r} as {self.name}: {e}",
                token=text,
                dtype_name=self.name,
            ) from e

    def _parse_literal(self, literal: str):
        return self.storage_type(literal)

    def coerce(self, value: Any):
        if isinstance(value, (bool, np.bool_)) or not self._accepts(value):
            raise TypeMismatchError(
                f"cannot store {type(value).__name__} value {value!r} "
                f"in a {self.name} container",
                expected=self.name,
                actual=type(value).__name__,
            )
        return self._convert(value)

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, self.storage_type)

    def _convert(self, value: Any):
        return self.storage_type(value)

    def check(self, value: Any):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, self.storage_type):
            raise TypeMismatchError(
                f"value {value!r} is {type(value).__name__}, expected {self.name}",
                expected=self.name,
                actual=type(value).__name__,
            )
        return value

    def to_decimal(self, value) -> Decimal:
        return Decimal(value)

    def from_decimal(self, value: Decimal):
        return self.storage_type(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ScalarBase):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __repr__(self) -> str:
        return f"<scalar {self.name}>"


class IntScalar(_ScalarBase):
    """Python int. Integer division is not exact, so this is not a field."""

    name = 'int'
    is_field = False
    storage_type = int
    numpy_dtype = np.int64

    def div(self, a, b):
        raise TypeError(
            "int scalars do not support exact division; convert to float or fraction"
        )

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, (int, np.integer))

    def _convert(self, value: Any) -> int:
        return int(value)


class FloatScalar(_ScalarBase):
    """Python float (IEEE 754 double)."""

    name = 'float'
    is_floating = True
    storage_type = float
    numpy_dtype = np.float64

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, numbers.Real)

    def _convert(self, value: Any) -> float:
        return float(value)


class FractionScalar(_ScalarBase):
    """fractions.Fraction; elimination over this type is exact."""

    name = 'fraction'
    storage_type = Fraction

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, (numbers.Real, Decimal))

    def _convert(self, value: Any) -> Fraction:
        if isinstance(value, np.generic):
            value = value.item()
        return Fraction(value)

    def to_decimal(self, value: Fraction) -> Decimal:
        # keeps every integer digit of the quotient
        with localcontext() as ctx:
            ctx.prec += len(str(abs(value.numerator)))
            return Decimal(value.numerator) / Decimal(value.denominator)


class DecimalScalar(_ScalarBase):
    """decimal.Decimal under the active decimal context."""

    name = 'decimal'
    storage_type = Decimal

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, (int, float, Decimal, np.integer, np.floating))

    def _convert(self, value: Any) -> Decimal:
        if isinstance(value, (float, np.floating)):
            return Decimal(repr(float(value)))
        if isinstance(value, np.integer):
            return Decimal(int(value))
        return Decimal(value)

    def _parse_literal(self, literal: str) -> Decimal:
        try:
            return Decimal(literal)
        except InvalidOperation as e:
            raise ValueError(f"invalid decimal literal {literal!r}") from e


class NumpyScalar(_ScalarBase):
    """
    Numpy scalar of a fixed dtype.

    Arithmetic stays in the dtype (float32 + float32 -> float32). Only
    floating dtypes form a field.
    """

    def __init__(self, dtype: Any):
        dt = np.dtype(dtype)
        if not (np.issubdtype(dt, np.floating) or np.issubdtype(dt, np.integer)):
            raise ValidationError(
                f"dtype: expected a numpy integer or floating dtype, got {dt}"
            )
        self.numpy_dtype = dt
        self.storage_type = dt.type
        self.name = dt.name
        self.is_floating = bool(np.issubdtype(dt, np.floating))
        self.is_field = self.is_floating

    def _wrap(self, value):
        return self.storage_type(value)

    def add(self, a, b):
        return self._wrap(a + b)

    def sub(self, a, b):
        return self._wrap(a - b)

    def mul(self, a, b):
        return self._wrap(a * b)

    def div(self, a, b):
        if not self.is_field:
            raise TypeError(
                f"{self.name} scalars do not support exact division"
            )
        return self._wrap(a / b)

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, (numbers.Real, np.number))

    def to_decimal(self, value) -> Decimal:
        if self.is_floating:
            return Decimal(float(value))
        return Decimal(int(value))

    def from_decimal(self, value: Decimal):
        if self.is_floating:
            return self.storage_type(float(value))
        return self.storage_type(int(value))


INT = IntScalar()
FLOAT = FloatScalar()
FRACTION = FractionScalar()
DECIMAL = DecimalScalar()
FLOAT32 = NumpyScalar(np.float32)

_BY_NAME = {
    'int': INT,
    'float': FLOAT,
    'double': FLOAT,
    'fraction': FRACTION,
    'decimal': DECIMAL,
}

_BY_TYPE = {
    int: INT,
    float: FLOAT,
    Fraction: FRACTION,
    Decimal: DECIMAL,
}


def resolve_scalar(dtype_like: Any) -> _ScalarBase:
    """
    Map a dtype-like argument to a scalar type object.

    Accepts a scalar type object, a Python numeric type, a name
    ('int', 'float', 'fraction', 'decimal', or any numpy dtype name) or a
    numpy dtype. numpy float64 maps to FLOAT and numpy integer dtypes map
    to INT, since their values round-trip losslessly into Python numbers.

    Raises:
        ValidationError: If dtype_like does not name a supported scalar type
    """
    if isinstance(dtype_like, _ScalarBase):
        return dtype_like
    if dtype_like is None:
        return FLOAT
    if isinstance(dtype_like, str) and dtype_like.lower() in _BY_NAME:
        return _BY_NAME[dtype_like.lower()]
    if isinstance(dtype_like, type) and dtype_like in _BY_TYPE:
        return _BY_TYPE[dtype_like]
    try:
        dt = np.dtype(dtype_like)
    except TypeError as e:
        raise ValidationError(f"dtype: unsupported scalar type {dtype_like!r}") from e
    if dt == np.float64:
        return FLOAT
    if np.issubdtype(dt, np.integer):
        return INT
    if np.issubdtype(dt, np.floating):
        return NumpyScalar(dt)
    raise ValidationError(f"dtype: unsupported scalar type {dtype_like!r} ({dt})")


def infer_scalar(value: Any) -> _ScalarBase:
    """
    Pick the scalar type of a single value.

    Raises:
        TypeMismatchError: If value is not a supported number (bool included)
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeMismatchError(
            "bool is not a supported scalar type", actual='bool'
        )
    if isinstance(value, np.generic) and isinstance(value, np.number):
        return resolve_scalar(value.dtype)
    for py_type, scalar in _BY_TYPE.items():
        if isinstance(value, py_type):
            return scalar
    raise TypeMismatchError(
        f"cannot infer a scalar type for {type(value).__name__} value {value!r}",
        actual=type(value).__name__,
    )


__all__ = [
    'IntScalar',
    'FloatScalar',
    'FractionScalar',
    'DecimalScalar',
    'NumpyScalar',
    'INT',
    'FLOAT',
    'FRACTION',
    'DECIMAL',
    'FLOAT32',
    'resolve_scalar',
    'infer_scalar',
]
