"""
numeric.py
~~~~~~~~~~

Scalar types the network engine can be instantiated over.

The engine never touches a concrete number type directly. Values are
combined with ``+ - * /`` (``+=`` and friends fall back to these) and
every value the engine needs to create comes from a *numeric capability*
object:

- ``zero()``
- ``from_float(value)``
- ``from_integer(count)``
- ``random(rng)``: uniform in [0, 1) from a ``numpy.random.Generator``
- ``coerce(value)``: an independent copy of ``value`` as this scalar type

Three capabilities ship with the package: ``FLOAT64`` and ``FLOAT32``
(numpy scalars) and ``DECIMAL`` (``decimal.Decimal``). Anything that
implements :class:`Numeric` can be passed wherever a ``numeric=`` argument
is accepted.
"""

import logging
import numbers
from decimal import Decimal
from typing import Dict, List, Optional, Protocol, TypeVar, runtime_checkable

import numpy as np

from nodenet.errors import NumericError

# Configure module logger
logger = logging.getLogger(__name__)


class Scalar(Protocol):
    """
    Arithmetic a value must support to flow through the engine.

    Compound assignments such as ``+=`` need no methods of their own; Python
    falls back to the binary operators below.
    """

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __truediv__(self, other): ...

    def __str__(self) -> str: ...


T = TypeVar('T', bound=Scalar)


@runtime_checkable
class Numeric(Protocol[T]):
    """Factory side of a scalar type."""

    name: str

    def zero(self) -> T:
        """Return the additive identity."""
        ...

    def from_float(self, value: float) -> T:
        """Convert a float to this scalar type."""
        ...

    def from_integer(self, value: int) -> T:
        """Convert a non-negative integer (a count) to this scalar type."""
        ...

    def random(self, rng: Optional[np.random.Generator] = None) -> T:
        """Draw a value uniformly distributed in [0, 1)."""
        ...

    def coerce(self, value) -> T:
        """Return an independent copy of ``value`` as this scalar type."""
        ...


def default_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the randomness source used by the random constructors.

    Args:
        seed: Optional seed for reproducible construction

    Returns:
        numpy.random.Generator: A fresh PCG64-backed generator
    """
    return np.random.default_rng(seed)


def _check_count(value) -> int:
    """Validate an integer conversion argument (mirrors an unsigned size)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise NumericError(
            f"from_integer expects a non-negative integer, got {value!r}"
        )
    if value < 0:
        raise NumericError(
            f"from_integer expects a non-negative integer, got {value}"
        )
    return int(value)


def _check_real(value, name: str):
    if isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool):
        return value
    raise NumericError(
        f"Cannot convert {type(value).__name__} value {value!r} to {name}"
    )


# Generator.random only draws natively in these; casting a float64 draw down
# to a narrower type can round it up to 1.0
_RANDOM_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


class NumpyNumeric:
    """
    Numeric capability backed by numpy float32 or float64 scalars.

    Arithmetic between two scalars of the same numpy type stays in that type,
    so a network built over ``FLOAT32`` computes and returns ``np.float32``
    values end to end.
    """

    def __init__(self, dtype):
        self.dtype = np.dtype(dtype)
        if self.dtype not in _RANDOM_DTYPES:
            raise NumericError(
                f"NumpyNumeric supports float32 and float64, got {self.dtype}"
            )
        self.name = self.dtype.name
        self._type = self.dtype.type

    def zero(self):
        return self._type(0)

    def from_float(self, value: float):
        return self._type(_check_real(value, self.name))

    def from_integer(self, value: int):
        return self._type(_check_count(value))

    def random(self, rng: Optional[np.random.Generator] = None):
        if rng is None:
            rng = default_rng()
        return self._type(rng.random(dtype=self.dtype))

    def coerce(self, value):
        return self._type(_check_real(value, self.name))

    def __repr__(self) -> str:
        return f"NumpyNumeric({self.name!r})"


class DecimalNumeric:
    """
    Numeric capability backed by ``decimal.Decimal``.

    Floats are converted exactly (no rounding to a shorter representation);
    arithmetic then follows the active decimal context.
    """

    name = 'decimal'

    def zero(self) -> Decimal:
        return Decimal(0)

    def from_float(self, value: float) -> Decimal:
        return self.coerce(value)

    def from_integer(self, value: int) -> Decimal:
        return Decimal(_check_count(value))

    def random(self, rng: Optional[np.random.Generator] = None) -> Decimal:
        if rng is None:
            rng = default_rng()
        return Decimal(float(rng.random()))

    def coerce(self, value) -> Decimal:
        value = _check_real(value, self.name)
        if isinstance(value, Decimal):
            return Decimal(value)
        if isinstance(value, numbers.Integral):
            return Decimal(int(value))
        return Decimal(float(value))

    def __repr__(self) -> str:
        return "DecimalNumeric()"


FLOAT64 = NumpyNumeric(np.float64)
FLOAT32 = NumpyNumeric(np.float32)
DECIMAL = DecimalNumeric()

_REGISTRY: Dict[str, Numeric] = {
    numeric.name: numeric for numeric in (FLOAT64, FLOAT32, DECIMAL)
}


def available_numerics() -> List[str]:
    """Return the names accepted by :func:`get_numeric`."""
    return sorted(_REGISTRY)


def get_numeric(name: str) -> Numeric:
    """
    Look up a built-in numeric capability by name.

    Args:
        name: One of ``float64``, ``float32`` or ``decimal`` (case-insensitive)

    Returns:
        The matching numeric capability

    Raises:
        NumericError: If no capability has that name
    """
    key = str(name).strip().lower()
    if key not in _REGISTRY:
        raise NumericError(
            f"Unknown numeric type '{name}'. "
            f"Expected one of: {', '.join(available_numerics())}"
        )
    return _REGISTRY[key]


def require_numeric(numeric) -> Numeric:
    """Raise NumericError unless ``numeric`` implements the capability."""
    if not isinstance(numeric, Numeric):
        logger.debug(f"Rejected numeric capability {numeric!r}")
        raise NumericError(
            f"{numeric!r} does not implement the numeric capability "
            f"(name, zero, from_float, from_integer, random, coerce)"
        )
    return numeric
