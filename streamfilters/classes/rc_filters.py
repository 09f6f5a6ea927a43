"""
Discretized first-order RC circuits. Both filters derive their constant from
the time constant `RC` and the sampling interval `dt`.
"""

from ..helpers.frequency_conversion import (
    _highpass_constant,
    _lowpass_constant,
    _rc_from_cutoff_frequency,
)
from ..helpers.validation import _check_filter_constant, _check_positive
from .exponential_filter import ExponentialFilter
from .realtime_filter import RealtimeFilter


class LowPassFilter(ExponentialFilter):
    """A discrete implementation of an RC lowpass filter. This is exactly
    the exponential filter with the constant `dt / (RC + dt)`."""

    def __init__(self, rc: float, dt: float):
        """Create a lowpass filter visualized as an RC circuit.

        Parameters
        ----------
        rc : float
            Product of resistance and capacitance (time constant) in seconds.
        dt : float
            Sampling interval in seconds.

        Raises
        ------
        InvalidParameter
            If `rc` or `dt` are not positive.

        """
        super().__init__(_lowpass_constant(rc, dt))
        self.__rc = float(rc)
        self.__dt = float(dt)

    @staticmethod
    def from_resistance_capacitance(
        resistance: float, capacitance: float, dt: float
    ):
        """Create a lowpass filter from separate resistance (Ohm) and
        capacitance (F) values.

        Returns
        -------
        LowPassFilter

        """
        return LowPassFilter(
            _check_positive(resistance, "Resistance")
            * _check_positive(capacitance, "Capacitance"),
            dt,
        )

    @staticmethod
    def from_cutoff_frequency(
        cutoff_frequency_hz: float, sampling_rate_hz: float
    ):
        """Create a lowpass filter whose analog prototype has its -3 dB point
        at the cutoff frequency.

        Parameters
        ----------
        cutoff_frequency_hz : float
            Cutoff frequency in Hz.
        sampling_rate_hz : float
            Rate at which new samples arrive.

        Returns
        -------
        LowPassFilter

        """
        return LowPassFilter(
            _rc_from_cutoff_frequency(cutoff_frequency_hz),
            1 / _check_positive(sampling_rate_hz, "Sampling rate"),
        )

    @property
    def rc(self) -> float:
        return self.__rc

    @property
    def dt(self) -> float:
        return self.__dt

    def __repr__(self):
        return f"{type(self).__name__}(rc={self.rc}, dt={self.dt})"


class HighPassFilter(RealtimeFilter):
    """A discrete implementation of an RC highpass filter. With the constant
    `a = RC / (RC + dt)`, it is computed as::

        y[n] = a*y[n-1] + a*(x[n] - x[n-1])

    The first sample after construction or reset is taken as its own
    previous input, so that a constant stream produces only zeros.

    """

    def __init__(self, rc: float, dt: float):
        """Create a highpass filter visualized as an RC circuit.

        Parameters
        ----------
        rc : float
            Product of resistance and capacitance (time constant) in seconds.
        dt : float
            Sampling interval in seconds.

        Raises
        ------
        InvalidParameter
            If `rc` or `dt` are not positive.

        """
        self.filter_constant = _check_filter_constant(
            _highpass_constant(rc, dt)
        )
        self.__rc = float(rc)
        self.__dt = float(dt)
        self.reset()

    @staticmethod
    def from_resistance_capacitance(
        resistance: float, capacitance: float, dt: float
    ):
        """Create a highpass filter from separate resistance (Ohm) and
        capacitance (F) values.

        Returns
        -------
        HighPassFilter

        """
        return HighPassFilter(
            _check_positive(resistance, "Resistance")
            * _check_positive(capacitance, "Capacitance"),
            dt,
        )

    @staticmethod
    def from_cutoff_frequency(
        cutoff_frequency_hz: float, sampling_rate_hz: float
    ):
        """Create a highpass filter whose analog prototype has its -3 dB
        point at the cutoff frequency.

        Returns
        -------
        HighPassFilter

        """
        return HighPassFilter(
            _rc_from_cutoff_frequency(cutoff_frequency_hz),
            1 / _check_positive(sampling_rate_hz, "Sampling rate"),
        )

    @property
    def rc(self) -> float:
        return self.__rc

    @property
    def dt(self) -> float:
        return self.__dt

    def apply(self, x: float) -> float:
        if self.last_input is None:
            self.last_input = x
        self.filtered_data = self.filter_constant * self.filtered_data + (
            self.filter_constant * (x - self.last_input)
        )
        self.last_input = x
        return self.filtered_data

    def reset(self):
        self.filtered_data = 0.0
        self.last_input = None

    def resize(self, size: int):
        pass

    def __repr__(self):
        return f"{type(self).__name__}(rc={self.rc}, dt={self.dt})"
