import numpy as np

from ..errors import InvalidParameter
from .validation import _check_positive


def _get_smoothing_factor_ema(
    relaxation_time_s: float, sampling_rate_hz: float, accuracy: float = 0.95
) -> float:
    """This computes the smoothing factor needed for a single-pole IIR,
    or exponential moving averager. The returned value (alpha) should be used
    as follows::

        y[n] = alpha * x[n] + (1-alpha)*y[n-1]

    Parameters
    ----------
    relaxation_time_s : float
        Time for the step response to stabilize around the given value
        (with the given accuracy).
    sampling_rate_hz : float
        Sampling rate to be used.
    accuracy : float, optional
        Accuracy with which the value of the step response can differ from
        1 after the relaxation time. This must be between ]0, 1[.
        Default: 0.95.

    Returns
    -------
    alpha : float
        Smoothing value for the exponential smoothing.

    Notes
    -----
    - The formula coincides with the one presented in
      https://en.wikipedia.org/wiki/Exponential_smoothing, but it uses an
      extra factor for accuracy.

    """
    relaxation_time_s = _check_positive(relaxation_time_s, "Relaxation time")
    sampling_rate_hz = _check_positive(sampling_rate_hz, "Sampling rate")
    if not (0.0 < accuracy < 1.0):
        raise InvalidParameter(
            f"Accuracy must be in the range ]0, 1[, got {accuracy}"
        )
    factor = np.log(1 - accuracy)
    return float(1 - np.exp(factor / relaxation_time_s / sampling_rate_hz))
