#!/usr/bin/env python3
"""
Build a randomized feed-forward network and run one forward pass.

Usage:
    python scripts/run_network.py --inputs 1 2 3 4 5 --layers 3 --nodes 5

The script will:
1. Read defaults (scalar type, seed) from the environment
2. Build a randomized network over the given input vector
3. Print every layer's nodes
4. Print the forward-pass output
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

import numpy as np

from nodenet.config import configure_logging, load_settings
from nodenet.errors import NetworkError
from nodenet.network import Network
from nodenet.numeric import available_numerics, default_rng, get_numeric

logger = logging.getLogger('nodenet.scripts.run_network')


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    settings = load_settings()
    parser = argparse.ArgumentParser(
        description="Run a forward pass through a randomized network"
    )
    parser.add_argument("--inputs", type=float, nargs="+", default=[1.0, 2.0, 3.0, 4.0, 5.0],
                        help="Input vector values")
    parser.add_argument("--layers", type=int, default=1, help="Number of layers")
    parser.add_argument("--nodes", type=int, default=5, help="Nodes per layer")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for reproducible weights (env: NODENET_SEED)")
    parser.add_argument("--numeric", choices=available_numerics(), default=settings.numeric_name,
                        help="Scalar type (env: NODENET_NUMERIC)")
    return parser.parse_args(argv)


def print_layers(net: Network) -> None:
    """Print the parameters of every node, layer by layer."""
    for index, layer in enumerate(net.layers):
        print(f"\tLayer {index} ({layer.node_count} nodes, fan_in={layer.fan_in}):")
        for node in layer:
            print(f"\t  {node!r}")


def format_output(values: List) -> str:
    """Render an output vector; numpy scalars go through an array for compact printing."""
    if values and isinstance(values[0], np.generic):
        return np.array2string(np.array(values), precision=6)
    return "[" + ", ".join(str(value) for value in values) + "]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build the network, evaluate it and return a process exit code."""
    configure_logging()
    try:
        args = parse_args(argv)
    except (NetworkError, ValueError) as e:
        logger.error(f"Invalid settings: {e}")
        return 1

    print("=" * 60)
    print("Feed-forward network")
    print("=" * 60)

    try:
        numeric = get_numeric(args.numeric)
        net = Network.random(
            args.inputs,
            layer_count=args.layers,
            node_count=args.nodes,
            rng=default_rng(args.seed),
            numeric=numeric
        )
    except NetworkError as e:
        logger.error(f"Could not build network: {e}")
        return 1

    logger.info(f"Built {net!r} (seed={args.seed})")
    print_layers(net)

    output = net.evaluate()
    print(f"\nInput:  {format_output(list(net.input))}")
    print(f"Output: {format_output(output)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
