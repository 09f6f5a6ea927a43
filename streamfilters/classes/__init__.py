"""
Classes
-------
Here are the classes of streamfilters:

- `RealtimeFilter` (base class defining the per-sample filter interface)
- `ExponentialFilter` (one-pole smoother)
- `MovingAverageFilter` (average over a fixed window of past samples)
- `LowPassFilter` (RC lowpass, exponential filter with an RC constructor)
- `HighPassFilter` (RC highpass)
- `MultiStreamFilter` (one independent filter per channel of a vector
  stream)

"""

from .realtime_filter import RealtimeFilter
from .exponential_filter import ExponentialFilter
from .moving_average_filter import MovingAverageFilter
from .rc_filters import LowPassFilter, HighPassFilter
from .multistream_filter import MultiStreamFilter

__all__ = [
    "RealtimeFilter",
    "ExponentialFilter",
    "MovingAverageFilter",
    "LowPassFilter",
    "HighPassFilter",
    "MultiStreamFilter",
]
