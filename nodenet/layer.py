"""
layer.py
~~~~~~~~

An ordered group of nodes that all consume the same input vector.
"""

import logging
from typing import Generic, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from nodenet.errors import DegenerateParameterError, NumericError, ShapeError
from nodenet.node import Node
from nodenet.numeric import FLOAT64, Numeric, T, default_rng, require_numeric

# Configure module logger
logger = logging.getLogger(__name__)


class Layer(Generic[T]):
    """
    A layer of nodes evaluated against one shared input vector.

    The layer produces one output value per node, in node order. Every node
    must have the same fan-in, which is the input length the layer accepts.
    """

    def __init__(self, nodes: Sequence[Node[T]]):
        """
        Build a layer from explicit nodes.

        Args:
            nodes: The layer's nodes, in output order

        Raises:
            ShapeError: If there are no nodes or their fan-in differs
            NumericError: If the nodes do not share one scalar type
        """
        nodes = tuple(nodes)
        if not nodes:
            raise ShapeError("A layer needs at least one node")

        fan_in = nodes[0].fan_in
        mismatched = [
            index for index, node in enumerate(nodes)
            if node.fan_in != fan_in
        ]
        if mismatched:
            raise ShapeError(
                f"All nodes in a layer must share one fan-in; node 0 has "
                f"{fan_in} but node(s) {mismatched} differ"
            )

        numeric = nodes[0].numeric
        foreign = [
            index for index, node in enumerate(nodes)
            if node.numeric is not numeric
        ]
        if foreign:
            raise NumericError(
                f"All nodes in a layer must share one scalar type; node 0 is "
                f"{numeric.name} but node(s) {foreign} differ"
            )

        self._nodes = nodes
        self._fan_in = fan_in
        self.numeric = numeric

    @classmethod
    def random(
        cls,
        previous_count: int,
        capacity: int,
        rng: Optional[np.random.Generator] = None,
        numeric: Numeric[T] = FLOAT64
    ) -> 'Layer[T]':
        """
        Build a layer of randomized nodes.

        Args:
            previous_count: Fan-in of every node (size of the previous layer)
            capacity: Number of nodes in this layer
            rng: Randomness source; a fresh unseeded generator when omitted
            numeric: Scalar type of the node parameters

        Returns:
            Layer: The randomized layer

        Raises:
            DegenerateParameterError: If either count is less than 1
        """
        numeric = require_numeric(numeric)
        if capacity < 1:
            raise DegenerateParameterError(
                f"A layer needs a capacity of at least 1, got {capacity}"
            )
        if rng is None:
            rng = default_rng()

        nodes = [
            Node.random(previous_count, rng=rng, numeric=numeric)
            for _ in range(capacity)
        ]
        logger.debug(
            f"Built random layer: {capacity} node(s), fan_in={previous_count}"
        )
        return cls(nodes)

    @property
    def nodes(self) -> Tuple[Node[T], ...]:
        return self._nodes

    @property
    def fan_in(self) -> int:
        """Input length every node in this layer expects."""
        return self._fan_in

    @property
    def node_count(self) -> int:
        """Output length of this layer."""
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node[T]]:
        return iter(self._nodes)

    def evaluate(self, inputs: Sequence[T]) -> List[T]:
        """
        Evaluate every node against the same input vector.

        Args:
            inputs: Exactly ``fan_in`` values

        Returns:
            list: One output per node, in node order

        Raises:
            ShapeError: If the input length differs from the layer's fan-in
        """
        if len(inputs) != self._fan_in:
            raise ShapeError(
                f"Layer expects an input of length {self._fan_in}, "
                f"got {len(inputs)}"
            )
        return [node.evaluate(inputs) for node in self._nodes]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Layer):
            return NotImplemented
        return self._nodes == other._nodes

    def __repr__(self) -> str:
        return f"Layer(node_count={len(self._nodes)}, fan_in={self._fan_in})"
