"""
test_network.py
~~~~~~~~~~~~~~~

Unit and integration tests for whole-network construction and the
forward pass.
"""

import pytest
import os
import sys
from decimal import Decimal

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from nodenet.errors import DegenerateParameterError, NetworkError, NumericError, ShapeError
from nodenet.layer import Layer
from nodenet.network import LayerList, Network
from nodenet.node import Node
from nodenet.numeric import DECIMAL, FLOAT32, default_rng


@pytest.fixture
def zero_network():
    """Create a 5-input network with one layer of 6 all-zero nodes."""
    layer = Layer([Node(5, [0.0] * 5, [0.0] * 5) for _ in range(6)])
    return Network([1.0, 2.0, 3.0, 4.0, 5.0], [layer])


@pytest.fixture
def two_layer_network():
    """Create a hand-computable 2 -> 2 -> 1 network."""
    hidden = Layer([
        Node(2, weights=[1.0, 1.0], biases=[0.0, 0.0]),
        Node(2, weights=[2.0, 0.0], biases=[1.0, 1.0]),
    ])
    output = Layer([Node(2, weights=[2.0, 2.0], biases=[0.0, 0.0])])
    return Network([1.0, 2.0], [hidden, output])


@pytest.mark.unit
class TestNetworkConstruction:
    """Test explicit network construction and the fan-in chain."""

    def test_explicit_network_properties(self, two_layer_network):
        """Test layer count, topology and output size."""
        assert two_layer_network.layer_count == 2
        assert two_layer_network.topology == [2, 2, 1]
        assert two_layer_network.output_size == 1
        assert two_layer_network.input == (1.0, 2.0)

    def test_no_layers_rejected(self):
        """Test that an explicit network needs at least one layer."""
        with pytest.raises(ShapeError) as exc_info:
            Network([1.0, 2.0], [])
        assert "at least one layer" in str(exc_info.value)

    def test_first_layer_must_match_input(self):
        """Test that the first layer's fan-in must equal the input length."""
        layer = Layer([Node(3)])
        with pytest.raises(ShapeError) as exc_info:
            Network([1.0, 2.0], [layer])
        assert "input vector provides 2" in str(exc_info.value)

    def test_chain_mismatch_rejected(self):
        """Test that a layer must accept its predecessor's node count."""
        first = Layer([Node(2), Node(2)])
        second = Layer([Node(3)])
        with pytest.raises(ShapeError) as exc_info:
            Network([1.0, 1.0], [first, second])
        assert "previous layer provides 2" in str(exc_info.value)

    def test_append_extends_network(self, two_layer_network):
        """Test that append adds a compatible layer to the end."""
        two_layer_network.append(Layer([Node(1, [1.0], [0.0]) for _ in range(3)]))

        assert two_layer_network.layer_count == 3
        assert two_layer_network.topology == [2, 2, 1, 3]
        assert len(two_layer_network.evaluate()) == 3

    def test_append_rejects_mismatched_layer(self, two_layer_network):
        """Test that append keeps the fan-in chain intact."""
        with pytest.raises(ShapeError):
            two_layer_network.append(Layer([Node(2)]))
        assert two_layer_network.layer_count == 2

    def test_layer_numeric_must_match_network(self):
        """Test that a Decimal layer cannot sit in a float64 network."""
        decimal_layer = Layer([Node(2, [1, 1], [0, 0], numeric=DECIMAL)])
        with pytest.raises(NumericError) as exc_info:
            Network([1.0, 2.0], [decimal_layer])
        assert "uses decimal but the network uses float64" in str(exc_info.value)

    def test_append_rejects_other_numeric(self, two_layer_network):
        """Test that append keeps every layer in the network's scalar type."""
        with pytest.raises(NumericError):
            two_layer_network.append(Layer([Node(1, numeric=FLOAT32)]))
        assert two_layer_network.layer_count == 2

    def test_layers_view_is_read_only(self, two_layer_network):
        """Test that the layers property cannot be used to mutate the network."""
        layers = two_layer_network.layers
        assert isinstance(layers, tuple)
        assert len(layers) == 2

    def test_layer_list_alias(self):
        """Test that LayerList names the same type."""
        assert LayerList is Network


@pytest.mark.unit
class TestRandomNetwork:
    """Test randomized network construction."""

    def test_random_topology(self):
        """Test first layer sized from input, later layers from node_count."""
        net = Network.random([1.0, 2.0, 3.0, 4.0, 5.0], layer_count=3, node_count=4,
                             rng=default_rng(0))

        assert net.topology == [5, 4, 4, 4]
        assert net.layers[0].fan_in == 5
        assert net.layers[1].fan_in == 4
        assert net.layers[2].fan_in == 4

    def test_single_layer(self):
        """Test that layer_count=1 builds only the first layer."""
        net = Network.random([0.5, 0.5], layer_count=1, node_count=3, rng=default_rng(0))
        assert net.topology == [2, 3]

    def test_zero_layers_rejected(self):
        """Test that layer_count=0 fails instead of returning an empty network."""
        with pytest.raises(ShapeError) as exc_info:
            Network.random([1.0, 2.0], layer_count=0, node_count=3, rng=default_rng(0))
        assert "layer_count=0" in str(exc_info.value)

    def test_zero_nodes_rejected(self):
        """Test that node_count=0 is rejected."""
        with pytest.raises(DegenerateParameterError):
            Network.random([1.0, 2.0], layer_count=2, node_count=0, rng=default_rng(0))

    def test_empty_input_rejected(self):
        """Test that an empty input vector is rejected."""
        with pytest.raises(DegenerateParameterError):
            Network.random([], layer_count=1, node_count=2, rng=default_rng(0))

    def test_errors_share_base_class(self):
        """Test that construction errors can be caught as NetworkError."""
        with pytest.raises(NetworkError):
            Network.random([1.0], layer_count=0, node_count=1)

    def test_same_seed_same_network(self):
        """Test that injecting a seeded generator makes construction reproducible."""
        inputs = [0.1, 0.2, 0.3]
        first = Network.random(inputs, 2, 3, rng=default_rng(99))
        second = Network.random(inputs, 2, 3, rng=default_rng(99))

        assert first.layers == second.layers
        assert first.evaluate() == second.evaluate()

    def test_different_seed_different_network(self):
        """Test that different seeds give different parameters."""
        inputs = [0.1, 0.2, 0.3]
        first = Network.random(inputs, 2, 3, rng=default_rng(1))
        second = Network.random(inputs, 2, 3, rng=default_rng(2))
        assert first.layers != second.layers

    def test_random_outputs_in_expected_range(self):
        """Test that non-negative inputs and [0, 1) parameters keep outputs bounded."""
        net = Network.random([0.0, 0.5, 1.0], 4, 5, rng=default_rng(5))
        output = net.evaluate()

        # inputs at most M give outputs below M + 1; four layers from M = 1
        assert all(0.0 <= value < 5.0 for value in output)


@pytest.mark.unit
class TestNetworkEvaluate:
    """Test the end-to-end forward pass."""

    def test_zero_network_outputs_zeros(self, zero_network):
        """Test that 6 zero nodes over [1..5] produce six zeros."""
        assert zero_network.evaluate() == [0.0] * 6

    def test_hand_computed_two_layers(self, two_layer_network):
        """Test that each layer's output feeds the next verbatim."""
        # hidden: [(1+2)/2, (2*1+1 + 0*2+1)/2] = [1.5, 2.0]
        # output: (2*1.5 + 2*2.0) / 2 = 3.5
        assert two_layer_network.evaluate() == [3.5]

    def test_evaluate_is_deterministic(self):
        """Test that evaluate() is bit-identical across calls."""
        net = Network.random([0.3, 0.6, 0.9], 3, 4, rng=default_rng(17))
        assert net.evaluate() == net.evaluate()

    def test_evaluate_matches_manual_fold(self):
        """Test evaluate() against folding layer.evaluate by hand."""
        net = Network.random([1.0, 2.0, 3.0], 3, 2, rng=default_rng(6))

        current = list(net.input)
        for layer in net.layers:
            current = layer.evaluate(current)

        assert net.evaluate() == current

    def test_evaluate_returns_fresh_list(self, two_layer_network):
        """Test that mutating the output does not affect the next pass."""
        output = two_layer_network.evaluate()
        output[0] = -1.0
        assert two_layer_network.evaluate() == [3.5]


@pytest.mark.integration
class TestNumericTypes:
    """Test whole networks over each built-in scalar type."""

    def test_float32_network(self):
        """Test that a float32 network returns float32 values end to end."""
        net = Network.random([1.0, 2.0], 2, 3, rng=default_rng(3), numeric=FLOAT32)
        output = net.evaluate()

        assert all(type(value) is np.float32 for value in output)
        assert all(type(value) is np.float32 for value in net.input)

    def test_float32_matches_float64_closely(self):
        """Test that both float widths compute the same function."""
        inputs = [0.2, 0.4, 0.6]
        wide = Network.random(inputs, 2, 3, rng=default_rng(10))
        narrow = Network([np.float32(v) for v in inputs], [
            Layer([
                Node(node.fan_in, node.weights, node.biases, numeric=FLOAT32)
                for node in layer
            ])
            for layer in wide.layers
        ], numeric=FLOAT32)

        np.testing.assert_allclose(
            np.array(narrow.evaluate(), dtype=np.float64),
            np.array(wide.evaluate()),
            rtol=1e-5
        )

    def test_decimal_network(self):
        """Test a hand-computable network over decimal.Decimal."""
        hidden = Layer([
            Node(2, [1, 1], [0, 0], numeric=DECIMAL),
            Node(2, [2, 0], [1, 1], numeric=DECIMAL),
        ])
        output = Layer([Node(2, [2, 2], [0, 0], numeric=DECIMAL)])
        net = Network([1, 2], [hidden, output], numeric=DECIMAL)

        assert net.evaluate() == [Decimal('3.5')]
        assert isinstance(net.evaluate()[0], Decimal)

    def test_random_decimal_network(self):
        """Test that random construction works for Decimal too."""
        net = Network.random([1, 2, 3], 2, 2, rng=default_rng(0), numeric=DECIMAL)
        assert all(isinstance(value, Decimal) for value in net.evaluate())
