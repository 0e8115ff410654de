"""
nodenet package
~~~~~~~~~~~~~~~

Generic feed-forward network evaluator.

Propagates an input vector through an ordered list of weighted layers.
Networks can be built from explicit weights and biases or randomized from
a topology, over any scalar type that implements the numeric capability
(numpy float64/float32 and decimal.Decimal ship with the package).
"""

from nodenet.dataset import DataSet
from nodenet.errors import (
    DegenerateParameterError,
    NetworkError,
    NumericError,
    ShapeError
)
from nodenet.layer import Layer
from nodenet.network import LayerList, Network
from nodenet.node import Node
from nodenet.numeric import (
    DECIMAL,
    FLOAT32,
    FLOAT64,
    DecimalNumeric,
    Numeric,
    NumpyNumeric,
    available_numerics,
    default_rng,
    get_numeric
)

__version__ = "1.0.0"

__all__ = [
    "DataSet",
    "DegenerateParameterError",
    "NetworkError",
    "NumericError",
    "ShapeError",
    "Layer",
    "LayerList",
    "Network",
    "Node",
    "DECIMAL",
    "FLOAT32",
    "FLOAT64",
    "DecimalNumeric",
    "Numeric",
    "NumpyNumeric",
    "available_numerics",
    "default_rng",
    "get_numeric",
]
