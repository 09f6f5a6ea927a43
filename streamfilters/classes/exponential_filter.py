from ..helpers.smoothing import _get_smoothing_factor_ema
from ..helpers.validation import _check_filter_constant
from .realtime_filter import RealtimeFilter


class ExponentialFilter(RealtimeFilter):
    def __init__(self, filter_constant: float):
        """The exponential filter is a one-pole IIR filter which smoothes the
        input (lowpass filter). For input `x` and output `y`::

            y[n] = a*x[n] + (1-a)*y[n-1]

        Parameters
        ----------
        filter_constant : float
            Weight `a` of the newest sample. It must be in ]0; 1], where 1
            leaves the input unaltered.

        Raises
        ------
        InvalidParameter
            If the filter constant is outside ]0; 1].

        """
        self.filter_constant = _check_filter_constant(filter_constant)
        self.filtered_data = 0.0

    @staticmethod
    def from_relaxation_time(
        relaxation_time_s: float,
        sampling_rate_hz: float,
        accuracy: float = 0.95,
    ):
        """Instantiate an exponential filter whose step response reaches the
        given accuracy after the relaxation time.

        Parameters
        ----------
        relaxation_time_s : float
            Time it would take the filter to obtain the given `accuracy` in
            the step response.
        sampling_rate_hz : float
            Rate at which samples arrive.
        accuracy : float, optional
            Value of the step response after the relaxation time. It has to
            be in ]0; 1[. Default: 0.95.

        Returns
        -------
        ExponentialFilter

        """
        return ExponentialFilter(
            _get_smoothing_factor_ema(
                relaxation_time_s, sampling_rate_hz, accuracy
            )
        )

    def apply(self, x: float) -> float:
        self.filtered_data = (
            self.filter_constant * x
            + (1 - self.filter_constant) * self.filtered_data
        )
        return self.filtered_data

    def reset(self):
        self.filtered_data = 0.0

    def resize(self, size: int):
        # Only one past output is stored
        pass

    def __repr__(self):
        return f"{type(self).__name__}(filter_constant={self.filter_constant})"
