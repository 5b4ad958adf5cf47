"""
Core protocols for PyLinalg.

These define structural interfaces that scalar types must satisfy to be
stored in a Vector or Matrix. We use Protocol (structural typing) rather
than ABC (nominal typing) so that builtin numbers, NumPy scalars,
fractions.Fraction and decimal.Decimal all qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only what elimination and norms need
    - Structural: isinstance() checks method presence, not ancestry
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Field(Protocol):
    """
    Numeric operations a scalar type must support.

    The identities (zero, one) are not methods of the scalar itself; they
    are derived from the storage type by pylinalg.core.field.

    Requirements:
        +, -, *, /          closed arithmetic (division by a nonzero value)
        unary -             additive inverse
        abs()               magnitude, totally ordered for pivot selection
        float()             widening to double precision, used only by
                            norms where exactness is not required
    """

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __truediv__(self, other): ...

    def __neg__(self): ...

    def __abs__(self): ...

    def __float__(self) -> float: ...
