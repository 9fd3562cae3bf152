"""
Elimination solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

from pydense.core.result import Result
from pydense.linalg.matrix import Matrix

if TYPE_CHECKING:
    from pydense.elimination.design import EliminationDesign


@dataclass(frozen=True)
class EliminationParams:
    """
    Parameter payload for Gauss-Jordan elimination.

    This is the immutable data computed by backends.
    """
    inverse: Matrix
    solved: Matrix
    pivots: tuple[tuple[int, int], ...]


@dataclass
class EliminationSolution:
    """
    User-facing Gauss-Jordan results.

    Unpacks as the pair (inverse, solved):

        >>> inv, x = gauss_jordan(A, B)
    """
    _result: Result[EliminationParams]
    _design: 'EliminationDesign'

    @property
    def inverse(self) -> Matrix:
        """Inverse of A."""
        return self._result.params.inverse

    @property
    def solved(self) -> Matrix:
        """Solution of A X = B, i.e. inverse(A) B."""
        return self._result.params.solved

    @property
    def pivots(self) -> tuple[tuple[int, int], ...]:
        """(row, column) of the pivot chosen at each step, before row swaps."""
        return self._result.params.pivots

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def n(self) -> int:
        return self._design.n

    def __iter__(self) -> Iterator[Matrix]:
        return iter((self.inverse, self.solved))

    def summary(self) -> str:
        lines = [
            "Gauss-Jordan elimination",
            f"  n = {self._design.n}, right-hand sides = {self._design.n_rhs}, "
            f"dtype = {self._design.dtype.name}",
            f"  backend: {self.backend_name}",
            f"  row swaps: {self.info.get('swaps', 0)}",
            f"  smallest pivot magnitude: {self.info.get('min_pivot_magnitude')}",
        ]
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (
            f"EliminationSolution(n={self._design.n}, "
            f"n_rhs={self._design.n_rhs}, backend={self.backend_name!r})"
        )
