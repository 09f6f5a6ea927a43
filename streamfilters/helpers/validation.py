import numpy as np

from ..errors import InvalidParameter


def _check_filter_constant(filter_constant: float) -> float:
    """Validate the weighting constant of an exponential filter. It must lie
    in ]0; 1].

    Parameters
    ----------
    filter_constant : float
        Weight of the newest sample.

    Returns
    -------
    float
        Validated constant.

    """
    filter_constant = _check_real(filter_constant, "Filter constant")
    if not (0.0 < filter_constant <= 1.0):
        raise InvalidParameter(
            "Filter constant must be in the range ]0, 1], "
            + f"got {filter_constant}"
        )
    return filter_constant


def _check_positive(value: float, name: str) -> float:
    """Ensure that `value` is a finite, strictly positive real number."""
    value = _check_real(value, name)
    if value <= 0.0:
        raise InvalidParameter(f"{name} must be positive, got {value}")
    return value


def _check_window_size(size) -> int:
    """Validate a window (history) length. Integral floats are accepted.

    Parameters
    ----------
    size : int
        Number of samples.

    Returns
    -------
    int
        Window length as python integer.

    """
    if isinstance(size, (bool, np.bool_)):
        raise InvalidParameter("Window size must be an integer")
    try:
        int_size = int(size)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidParameter(
            f"Window size must be an integer, got {size!r}"
        ) from e
    if int_size != size:
        raise InvalidParameter(f"Window size must be an integer, got {size}")
    if int_size < 1:
        raise InvalidParameter(
            f"Window size must be at least 1 sample, got {int_size}"
        )
    return int_size


def _check_real(value, name: str) -> float:
    if isinstance(value, (bool, np.bool_)):
        raise InvalidParameter(f"{name} must be a real number")
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(
            f"{name} must be a real number, got {value!r}"
        ) from e
    if not np.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value}")
    return value
