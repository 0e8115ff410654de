"""
network.py
~~~~~~~~~~

A feed-forward network: an input vector plus an ordered list of layers.

Layers know nothing about each other. The network walks its layer list by
index, feeding each layer the previous layer's output, so a forward pass is

    current = input
    for layer in layers:
        current = layer.evaluate(current)
"""

import logging
from typing import Generic, List, Optional, Sequence, Tuple

import numpy as np

from nodenet.errors import DegenerateParameterError, NumericError, ShapeError
from nodenet.layer import Layer
from nodenet.numeric import FLOAT64, Numeric, T, default_rng, require_numeric

# Configure module logger
logger = logging.getLogger(__name__)


class Network(Generic[T]):
    """
    The full stack of layers plus the network's entry vector.

    The constructor checks that the fan-in chain is consistent: the first
    layer accepts ``len(input)`` values and every later layer accepts as many
    values as its predecessor has nodes.

    Example:
        >>> net = Network.random([1.0, 2.0, 3.0], layer_count=2, node_count=4,
        ...                      rng=default_rng(42))
        >>> len(net.evaluate())
        4
    """

    def __init__(
        self,
        inputs: Sequence[T],
        layers: Sequence[Layer[T]],
        numeric: Numeric[T] = FLOAT64
    ):
        """
        Build a network from an input vector and explicit layers.

        Args:
            inputs: The network's entry vector
            layers: Layers in evaluation order, index 0 nearest the input
            numeric: Scalar type of the input vector

        Raises:
            ShapeError: If there are no layers or the fan-in chain is broken
            NumericError: If a layer uses a different scalar type
        """
        self.numeric = require_numeric(numeric)
        self._input = tuple(self.numeric.coerce(value) for value in inputs)
        self._layers: List[Layer[T]] = []

        layers = list(layers)
        if not layers:
            raise ShapeError("A network needs at least one layer")

        for layer in layers:
            self.append(layer)

        logger.debug(f"Built network with topology {self.topology}")

    @classmethod
    def random(
        cls,
        inputs: Sequence[T],
        layer_count: int,
        node_count: int,
        rng: Optional[np.random.Generator] = None,
        numeric: Numeric[T] = FLOAT64
    ) -> 'Network[T]':
        """
        Build a network of randomized layers with a uniform node count.

        The first layer takes ``len(inputs)`` values; each of the remaining
        ``layer_count - 1`` layers takes ``node_count`` values. Every layer
        has ``node_count`` nodes.

        Args:
            inputs: The network's entry vector
            layer_count: Number of layers, at least 1
            node_count: Nodes per layer, at least 1
            rng: Randomness source; a fresh unseeded generator when omitted
            numeric: Scalar type of the inputs and all parameters

        Returns:
            Network: The randomized network

        Raises:
            ShapeError: If layer_count is less than 1
            DegenerateParameterError: If node_count is less than 1 or the
                input vector is empty
        """
        numeric = require_numeric(numeric)
        inputs = list(inputs)

        if layer_count < 1:
            raise ShapeError(
                f"A network needs at least one layer, got layer_count={layer_count}"
            )
        if node_count < 1:
            raise DegenerateParameterError(
                f"Layers need at least one node, got node_count={node_count}"
            )
        if not inputs:
            raise DegenerateParameterError(
                "The input vector is empty; the first layer would have no inputs"
            )
        if rng is None:
            rng = default_rng()

        layers = [Layer.random(len(inputs), node_count, rng=rng, numeric=numeric)]
        for _ in range(layer_count - 1):
            layers.append(
                Layer.random(node_count, node_count, rng=rng, numeric=numeric)
            )

        logger.debug(
            f"Generated {layer_count} random {numeric.name} layer(s) of "
            f"{node_count} node(s) for {len(inputs)} input(s)"
        )
        return cls(inputs, layers, numeric=numeric)

    def append(self, layer: Layer[T]) -> None:
        """
        Add a layer to the end of the network.

        Only meant for building a network; the constructor uses it for every
        layer it is given.

        Args:
            layer: Layer whose fan-in equals the current output size

        Raises:
            ShapeError: If the layer's fan-in does not match
            NumericError: If the layer's scalar type is not the network's
        """
        if layer.numeric is not self.numeric:
            raise NumericError(
                f"Layer {len(self._layers)} uses {layer.numeric.name} but the "
                f"network uses {self.numeric.name}"
            )
        expected = self.output_size
        if layer.fan_in != expected:
            position = len(self._layers)
            raise ShapeError(
                f"Layer {position} expects {layer.fan_in} input(s) but the "
                f"{'previous layer' if position else 'input vector'} "
                f"provides {expected}"
            )
        self._layers.append(layer)

    @property
    def input(self) -> Tuple[T, ...]:
        return self._input

    @property
    def layers(self) -> Tuple[Layer[T], ...]:
        return tuple(self._layers)

    @property
    def layer_count(self) -> int:
        return len(self._layers)

    @property
    def output_size(self) -> int:
        """Length of the vector :meth:`evaluate` returns."""
        if not self._layers:
            return len(self._input)
        return self._layers[-1].node_count

    @property
    def topology(self) -> List[int]:
        """Input length followed by every layer's node count."""
        return [len(self._input)] + [layer.node_count for layer in self._layers]

    def evaluate(self) -> List[T]:
        """
        Run one forward pass from the input vector to the last layer.

        Returns:
            list: The last layer's output, one value per node
        """
        current = [self.numeric.coerce(value) for value in self._input]
        for layer in self._layers:
            current = layer.evaluate(current)
        return current

    def __repr__(self) -> str:
        return (
            f"Network(topology={self.topology}, numeric={self.numeric.name})"
        )


# A network is a list of layers fed by an input vector.
LayerList = Network
