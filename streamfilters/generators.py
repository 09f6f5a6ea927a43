"""
Generators
----------
Test signals for trying out the filters.

- `noisy_sinusoid()`

"""

from warnings import warn

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidParameter
from .helpers.validation import _check_positive, _check_window_size


def noisy_sinusoid(
    length_samples: int,
    period_samples: float = 360.0,
    noise_std: float = 0.1,
    phase_rad: float = 0.0,
    number_of_channels: int = 1,
    seed: int | None = None,
) -> NDArray[np.float64]:
    """Creates a sinusoid with additive gaussian white noise. Each further
    channel is shifted by a quarter of a period, i.e., the second channel is
    a cosine.

    Parameters
    ----------
    length_samples : int
        Length of the generated stream in samples.
    period_samples : float, optional
        Period of the sinusoid in samples. Default: 360.
    noise_std : float, optional
        Standard deviation of the noise. Pass 0 for a clean sinusoid.
        Default: 0.1.
    phase_rad : float, optional
        Initial phase of the first channel in radians. Default: 0.
    number_of_channels : int, optional
        Number of channels to be created. Default: 1.
    seed : int, optional
        Seed for the random generator. Default: `None`.

    Returns
    -------
    NDArray[np.float64]
        Stream with shape (time samples,) for a single channel or
        (time samples, channels) otherwise.

    """
    length_samples = _check_window_size(length_samples)
    number_of_channels = _check_window_size(number_of_channels)
    period_samples = _check_positive(period_samples, "Period")
    if noise_std < 0:
        raise InvalidParameter("Noise standard deviation cannot be negative")
    if period_samples < 2:
        warn(
            "A period shorter than two samples is above the Nyquist "
            + "frequency and will alias"
        )

    n = np.arange(length_samples)[..., None]
    phases = phase_rad + np.arange(number_of_channels)[None, ...] * np.pi / 2
    time_data = np.sin(2 * np.pi * n / period_samples + phases)

    rng = np.random.default_rng(seed)
    time_data += rng.normal(0, noise_std, time_data.shape)

    if number_of_channels == 1:
        return time_data[:, 0]
    return time_data
