"""
# streamfilters

Streaming filters for smoothing scalar and vector-valued sensor data that
arrives one sample at a time.

"""

from .classes import (
    RealtimeFilter,
    ExponentialFilter,
    MovingAverageFilter,
    LowPassFilter,
    HighPassFilter,
    MultiStreamFilter,
)
from .errors import InvalidParameter, ConfigurationMismatch
from . import generators
from . import plots

__all__ = [
    # Filters
    "RealtimeFilter",
    "ExponentialFilter",
    "MovingAverageFilter",
    "LowPassFilter",
    "HighPassFilter",
    "MultiStreamFilter",
    # Errors
    "InvalidParameter",
    "ConfigurationMismatch",
    # Modules
    "generators",
    "plots",
]

__version__ = "0.1.0"
