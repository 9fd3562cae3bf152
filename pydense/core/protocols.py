"""
Core protocols for pydense.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
caller can plug in their own scalar type without inheriting from anything.

Design Principles:
    - Minimal contracts: prescribe only what the containers and the
      elimination engine actually call
    - Explicit dispatch: arithmetic goes through the scalar type object,
      never through the runtime type of the values
    - Type-safe: use generics to preserve type information through pipelines
"""

from decimal import Decimal
from typing import Protocol, TypeVar, Any, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pydense.core.formats import NumberFormat
    from pydense.core.result import Result

# Type variables for generic payloads
T = TypeVar('T')  # Scalar value type
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Scalar(Protocol[T]):
    """
    Capability set every element type of Vector/Matrix must provide.

    A scalar type object describes one numeric type (int, float, Fraction,
    a numpy dtype, ...). Vector and Matrix carry one as their ``dtype`` and
    route every arithmetic operation through it.
    """

    @property
    def name(self) -> str:
        """Short identifier, e.g. 'float', 'fraction', 'float32'."""
        ...

    @property
    def is_field(self) -> bool:
        """True if div() is exact inside the type (needed for elimination)."""
        ...

    @property
    def is_floating(self) -> bool:
        """True for binary floating point types (rounding error expected)."""
        ...

    def add(self, a: T, b: T) -> T: ...

    def sub(self, a: T, b: T) -> T: ...

    def mul(self, a: T, b: T) -> T: ...

    def div(self, a: T, b: T) -> T: ...

    def equal(self, a: T, b: T) -> bool: ...

    def magnitude(self, a: T) -> float:
        """
        Totally ordered comparison key used for pivot selection.

        Never used for exact equality.
        """
        ...

    def from_int(self, n: int) -> T:
        """Materialize a small integer (zero and one) in this type."""
        ...

    def parse(self, text: str, fmt: 'NumberFormat') -> T:
        """
        Parse one text token.

        Raises:
            ParseError: If the token is not a valid literal for this type
        """
        ...

    def coerce(self, value: Any) -> T:
        """
        Convert an accepted input value on construction.

        Raises:
            TypeMismatchError: If the value is of a foreign kind
        """
        ...

    def check(self, value: Any) -> T:
        """
        Strict runtime representation check used by element writes.

        Raises:
            TypeMismatchError: If the value's type is not this type's storage type
        """
        ...

    def to_decimal(self, value: T) -> Decimal:
        """Conversion into the common rounding domain (exact except for fractions)."""
        ...

    def from_decimal(self, value: Decimal) -> T:
        """Conversion out of the common rounding domain."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends are stateless; all configuration is
    passed via the design or at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'generic_gauss_jordan', 'cpu_gauss_jordan'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If the design is invalid for this backend
        """
        ...
