"""
config.py
~~~~~~~~~

Environment-driven settings and logging setup for nodenet driver code.

The library modules never read the environment themselves. Scripts call
:func:`configure_logging` once at startup and :func:`load_settings` to pick
up defaults such as the scalar type and the construction seed.

Environment variables:
    LOG_LEVEL        Logging level name (default: INFO)
    NODENET_ENV      'production' caps nodenet logging at WARNING
    NODENET_NUMERIC  Scalar type for randomized networks (default: float64)
    NODENET_SEED     Integer seed for reproducible construction (default: unset)
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from nodenet.numeric import Numeric, get_numeric

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULT_NUMERIC = 'float64'


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Set up logging based on environment.

    - In production: keep nodenet quiet unless something goes wrong
    - In development: honour LOG_LEVEL for everything, including DEBUG
      traces of network construction

    Args:
        environ: Mapping to read variables from (default: os.environ)
    """
    if environ is None:
        environ = os.environ

    log_level_str = environ.get('LOG_LEVEL', 'INFO').upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    is_production = environ.get('NODENET_ENV') == 'production'

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    if is_production:
        logging.getLogger('nodenet').setLevel(
            max(log_level, logging.WARNING)
        )
    else:
        logging.getLogger('nodenet').setLevel(log_level)


@dataclass(frozen=True)
class Settings:
    """Defaults for building networks from driver code."""

    log_level: str = 'INFO'
    environment: str = 'development'
    numeric_name: str = DEFAULT_NUMERIC
    seed: Optional[int] = None

    @property
    def numeric(self) -> Numeric:
        return get_numeric(self.numeric_name)

    @property
    def is_production(self) -> bool:
        return self.environment == 'production'


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read settings from the environment.

    Args:
        environ: Mapping to read variables from (default: os.environ)

    Returns:
        Settings: The parsed settings

    Raises:
        ValueError: If NODENET_SEED is not an integer
        NumericError: If NODENET_NUMERIC names an unknown scalar type
    """
    if environ is None:
        environ = os.environ

    seed_str = environ.get('NODENET_SEED', '').strip()
    seed = None
    if seed_str:
        try:
            seed = int(seed_str)
        except ValueError:
            raise ValueError(
                f"NODENET_SEED must be an integer, got '{seed_str}'"
            ) from None

    numeric_name = environ.get('NODENET_NUMERIC', DEFAULT_NUMERIC).strip().lower()
    # Fail at load time rather than when the first network is built
    get_numeric(numeric_name)

    return Settings(
        log_level=environ.get('LOG_LEVEL', 'INFO').upper(),
        environment=environ.get('NODENET_ENV', 'development'),
        numeric_name=numeric_name,
        seed=seed
    )
