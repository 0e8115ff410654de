"""
node.py
~~~~~~~

A single unit of a feed-forward layer.

A node holds one weight *and one bias per incoming connection*. Biases are
not collapsed into a single scalar per node; the evaluation formula is

    output = sum(weights[i] * input[i] + biases[i]) / fan_in

which averages the biased contributions of every connection.
"""

import logging
from typing import Generic, Optional, Sequence, Tuple

import numpy as np

from nodenet.errors import DegenerateParameterError, ShapeError
from nodenet.numeric import FLOAT64, Numeric, T, default_rng, require_numeric

# Configure module logger
logger = logging.getLogger(__name__)


def _check_fan_in(fan_in: int) -> int:
    if isinstance(fan_in, bool) or not isinstance(fan_in, (int, np.integer)):
        raise DegenerateParameterError(
            f"fan_in must be a positive integer, got {fan_in!r}"
        )
    if fan_in < 1:
        raise DegenerateParameterError(
            f"fan_in must be at least 1, got {fan_in}"
        )
    return int(fan_in)


class Node(Generic[T]):
    """
    A node with per-connection weights and biases.

    Nodes are immutable once built: ``weights`` and ``biases`` are tuples
    and there is no API to change them.
    """

    def __init__(
        self,
        fan_in: int,
        weights: Optional[Sequence[T]] = None,
        biases: Optional[Sequence[T]] = None,
        numeric: Numeric[T] = FLOAT64
    ):
        """
        Build a node from explicit parameters.

        Args:
            fan_in: Number of inputs the node accepts
            weights: One weight per input; zero-filled when omitted
            biases: One bias per input; zero-filled when omitted
            numeric: Scalar type of the node's parameters

        Raises:
            DegenerateParameterError: If fan_in is less than 1
            ShapeError: If a supplied vector's length differs from fan_in
        """
        self.numeric = require_numeric(numeric)
        self._fan_in = _check_fan_in(fan_in)
        self._weights = self._build_vector('weights', weights)
        self._biases = self._build_vector('biases', biases)

    def _build_vector(
        self,
        label: str,
        values: Optional[Sequence[T]]
    ) -> Tuple[T, ...]:
        if values is None:
            return tuple(self.numeric.zero() for _ in range(self._fan_in))

        values = tuple(self.numeric.coerce(value) for value in values)
        if len(values) != self._fan_in:
            raise ShapeError(
                f"Node expects {self._fan_in} {label}, got {len(values)}"
            )
        return values

    @classmethod
    def random(
        cls,
        fan_in: int,
        rng: Optional[np.random.Generator] = None,
        numeric: Numeric[T] = FLOAT64
    ) -> 'Node[T]':
        """
        Build a node whose weights and biases are drawn uniformly from [0, 1).

        All weights are drawn first, then all biases, so a seeded generator
        always yields the same node.

        Args:
            fan_in: Number of inputs the node accepts
            rng: Randomness source; a fresh unseeded generator when omitted
            numeric: Scalar type of the node's parameters

        Returns:
            Node: The randomized node
        """
        numeric = require_numeric(numeric)
        fan_in = _check_fan_in(fan_in)
        if rng is None:
            rng = default_rng()

        weights = [numeric.random(rng) for _ in range(fan_in)]
        biases = [numeric.random(rng) for _ in range(fan_in)]
        logger.debug(f"Drew random {numeric.name} node with fan_in={fan_in}")
        return cls(fan_in, weights, biases, numeric=numeric)

    @property
    def fan_in(self) -> int:
        return self._fan_in

    @property
    def weights(self) -> Tuple[T, ...]:
        return self._weights

    @property
    def biases(self) -> Tuple[T, ...]:
        return self._biases

    def evaluate(self, inputs: Sequence[T]) -> T:
        """
        Compute the node's output for one input vector.

        Args:
            inputs: Exactly ``fan_in`` values

        Returns:
            The averaged sum of ``weight * input + bias`` over all connections

        Raises:
            ShapeError: If the input length differs from fan_in
        """
        if len(inputs) != self._fan_in:
            raise ShapeError(
                f"Node expects an input of length {self._fan_in}, "
                f"got {len(inputs)}"
            )

        numeric = self.numeric
        output = numeric.zero()
        for weight, value, bias in zip(self._weights, inputs, self._biases):
            output += weight * numeric.coerce(value) + bias

        return output / numeric.from_integer(self._fan_in)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.numeric is other.numeric
            and self._weights == other._weights
            and self._biases == other._biases
        )

    def __repr__(self) -> str:
        weights = ', '.join(str(w) for w in self._weights)
        biases = ', '.join(str(b) for b in self._biases)
        return (
            f"Node(fan_in={self._fan_in}, weights=[{weights}], "
            f"biases=[{biases}], numeric={self.numeric.name})"
        )
