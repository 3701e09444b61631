"""map2d: a two-key map with row and column views.

The map2d package provides a container keyed by ``(row, col)`` pairs:
- Mutation, lookup and O(1) size tracking
- Read-only row, column and whole-map views (row-major and transposed)
- Element-wise conversion into new, independent maps
- pandas interchange in wide and long layouts
- Random sparse maps for testing and benchmarking
"""

import logging
from importlib import metadata

# Core container
from .core import Map2D, create_instance

# pandas interchange
from .frames import from_frame, from_long_frame, to_frame, to_long_frame

# Simulation
from .simulate import random_map2d, sample_pairs
from .types import ColKey, Entry, RowKey

try:
    __version__ = metadata.version("map2d")
except metadata.PackageNotFoundError:
    # Fallback for development installs
    __version__ = "0.1.0"

__all__ = [
    # Core
    "Map2D",
    "create_instance",
    "Entry",
    "RowKey",
    "ColKey",
    # pandas interchange
    "to_frame",
    "from_frame",
    "to_long_frame",
    "from_long_frame",
    # Simulation
    "random_map2d",
    "sample_pairs",
    # Logging
    "get_logger",
]


# Configure package-wide logging
def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for the map2d package.

    Parameters
    ----------
    name : str | None, optional
        Logger name. If None, uses the package name.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    if name is None:
        name = __name__.split(".")[0]
    return logging.getLogger(name)


# Set up default logging configuration
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
