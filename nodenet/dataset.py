"""
dataset.py
~~~~~~~~~~

Pairs of input vectors and the outputs expected for them.

A ``DataSet`` only holds data. Nothing in nodenet trains on it; it is a
convenient container for driver code that wants to compare a network's
output against known values.
"""

import logging
from typing import Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from nodenet.errors import ShapeError
from nodenet.numeric import FLOAT64, Numeric, Scalar, T, require_numeric

# Configure module logger
logger = logging.getLogger(__name__)

O = TypeVar('O', bound=Scalar)

DataPoint = Tuple[Tuple[T, ...], Tuple[O, ...]]


class DataSet(Generic[T, O]):
    """
    An ordered collection of ``(input, expected)`` vector pairs.

    All inputs share one length and all expected outputs share one length;
    the first pair added fixes both. Inputs and expected outputs may use
    different scalar types; ``expected_numeric`` defaults to ``numeric``.
    """

    def __init__(
        self,
        datapoints: Optional[Iterable[Tuple[Sequence[T], Sequence[O]]]] = None,
        numeric: Numeric[T] = FLOAT64,
        expected_numeric: Optional[Numeric[O]] = None
    ):
        self.numeric = require_numeric(numeric)
        if expected_numeric is None:
            expected_numeric = self.numeric
        self.expected_numeric = require_numeric(expected_numeric)
        self._datapoints: List[DataPoint] = []
        for inputs, expected in datapoints or ():
            self.add(inputs, expected)
        if self._datapoints:
            logger.debug(f"Loaded data set with {len(self._datapoints)} point(s)")

    def add(self, inputs: Sequence[T], expected: Sequence[O]) -> None:
        """
        Append one data point.

        Args:
            inputs: Input vector
            expected: Output vector expected for ``inputs``

        Raises:
            ShapeError: If either vector is empty or its length differs from
                the data points already held
        """
        inputs = tuple(self.numeric.coerce(value) for value in inputs)
        expected = tuple(
            self.expected_numeric.coerce(value) for value in expected
        )

        if not inputs or not expected:
            raise ShapeError("Data points need non-empty input and expected vectors")

        if self._datapoints:
            if len(inputs) != self.input_size:
                raise ShapeError(
                    f"Data set inputs have length {self.input_size}, "
                    f"got {len(inputs)}"
                )
            if len(expected) != self.output_size:
                raise ShapeError(
                    f"Data set outputs have length {self.output_size}, "
                    f"got {len(expected)}"
                )

        self._datapoints.append((inputs, expected))

    @property
    def input_size(self) -> Optional[int]:
        """Input vector length, or None while the data set is empty."""
        if not self._datapoints:
            return None
        return len(self._datapoints[0][0])

    @property
    def output_size(self) -> Optional[int]:
        """Expected vector length, or None while the data set is empty."""
        if not self._datapoints:
            return None
        return len(self._datapoints[0][1])

    def __len__(self) -> int:
        return len(self._datapoints)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self._datapoints)

    def __getitem__(self, index: int) -> DataPoint:
        return self._datapoints[index]

    def __repr__(self) -> str:
        return (
            f"DataSet(size={len(self._datapoints)}, input_size={self.input_size}, "
            f"output_size={self.output_size})"
        )
