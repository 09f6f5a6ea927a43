import numpy as np

from ..helpers.frequency_conversion import _window_length_from_period
from ..helpers.validation import _check_window_size
from .realtime_filter import RealtimeFilter


class MovingAverageFilter(RealtimeFilter):
    """Moving average over the last `filter_size` samples. The samples are
    stored in a circular buffer and the sum is updated incrementally, so that
    each new sample costs O(1).

    Before the buffer is filled for the first time, the missing samples are
    regarded as zeros. The first output after construction or reset is
    therefore `x / filter_size`.

    """

    def __init__(self, filter_size: int):
        """Instantiate a moving average filter.

        Parameters
        ----------
        filter_size : int
            Number of samples that are averaged. It must be at least 1.

        Raises
        ------
        InvalidParameter
            If the filter size is not a positive integer.

        """
        self.filter_size = _check_window_size(filter_size)
        self.window = np.zeros(self.filter_size)
        self.reset()

    @staticmethod
    def from_sampling_period(sampling_rate_hz: float, period_s: float):
        """Instantiate a moving average filter that averages over a time
        period. The window length is `round(sampling_rate_hz * period_s)`.

        Parameters
        ----------
        sampling_rate_hz : float
            Rate at which new samples arrive.
        period_s : float
            Averaging period in seconds.

        Returns
        -------
        MovingAverageFilter

        """
        return MovingAverageFilter(
            _window_length_from_period(sampling_rate_hz, period_s)
        )

    @property
    def is_filled(self) -> bool:
        """`True` when no zero-padded slots remain in the window."""
        return self.write_index >= self.filter_size

    def apply(self, x: float) -> float:
        ind = self.write_index % self.filter_size
        self.running_sum += x - self.window[ind]
        self.window[ind] = x
        self.write_index += 1
        return self.running_sum / self.filter_size

    def reset(self):
        self.window.fill(0.0)
        self.running_sum = 0.0
        self.write_index = 0

    def resize(self, size: int):
        self.filter_size = _check_window_size(size)
        self.window = np.zeros(self.filter_size)
        self.reset()

    def __repr__(self):
        return f"{type(self).__name__}(filter_size={self.filter_size})"
