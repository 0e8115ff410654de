"""
errors.py
~~~~~~~~~

Exceptions raised while building or evaluating a network.

Every failure here is a programmer error (a malformed topology or an
unsupported scalar type), so nothing is retried or coerced: the offending
call raises and the caller fixes the topology.
"""


class NetworkError(Exception):
    """Base class for all errors raised by nodenet."""
    pass


class ShapeError(NetworkError, ValueError):
    """
    A vector length does not match the topology.

    Raised for weight/bias vectors whose length differs from the node's
    fan-in, input vectors of the wrong length, layers without nodes or with
    mixed fan-in, broken fan-in chains between layers and networks with no
    layers at all.
    """
    pass


class DegenerateParameterError(NetworkError, ValueError):
    """A size parameter would make evaluation undefined (e.g. zero fan-in)."""
    pass


class NumericError(NetworkError, TypeError):
    """An object or value does not satisfy the numeric capability contract."""
    pass
