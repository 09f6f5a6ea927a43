from warnings import warn

import numpy as np

from ..errors import InvalidParameter
from .validation import _check_positive


def _window_length_from_period(
    sampling_rate_hz: float, period_s: float
) -> int:
    """Number of samples that cover `period_s` at the given sampling rate.
    The product is rounded to the closest integer.

    Parameters
    ----------
    sampling_rate_hz : float
        Rate at which new samples arrive.
    period_s : float
        Averaging period in seconds.

    Returns
    -------
    int
        Window length in samples.

    """
    sampling_rate_hz = _check_positive(sampling_rate_hz, "Sampling rate")
    period_s = _check_positive(period_s, "Averaging period")

    exact_length = sampling_rate_hz * period_s
    length = int(np.round(exact_length))
    if length < 1:
        raise InvalidParameter(
            f"An averaging period of {period_s} s at {sampling_rate_hz} Hz "
            + "does not contain a single sample"
        )
    if not np.isclose(length, exact_length):
        warn(
            f"Window length was rounded from {exact_length:.3f} to "
            + f"{length} samples. The effective averaging period is "
            + f"{length / sampling_rate_hz} s"
        )
    return length


def _rc_from_cutoff_frequency(cutoff_frequency_hz: float) -> float:
    """Time constant of a first-order RC circuit with the given -3 dB
    frequency: `RC = 1 / (2*pi*fc)`."""
    cutoff_frequency_hz = _check_positive(
        cutoff_frequency_hz, "Cutoff frequency"
    )
    return 1 / (2 * np.pi * cutoff_frequency_hz)


def _lowpass_constant(rc: float, dt: float) -> float:
    """Smoothing constant of the discretized RC lowpass: `dt / (RC + dt)`."""
    rc = _check_positive(rc, "RC")
    dt = _check_positive(dt, "Sampling interval")
    return dt / (rc + dt)


def _highpass_constant(rc: float, dt: float) -> float:
    """Constant of the discretized RC highpass: `RC / (RC + dt)`."""
    rc = _check_positive(rc, "RC")
    dt = _check_positive(dt, "Sampling interval")
    return rc / (rc + dt)
