from copy import deepcopy

import numpy as np
from numpy.typing import NDArray, ArrayLike

from ..errors import ConfigurationMismatch, InvalidParameter
from ..helpers.validation import _check_window_size
from .realtime_filter import RealtimeFilter


class MultiStreamFilter:
    """This is a utility class for filtering vector-valued streams. E.g., an
    incoming stream of `[x, y, z]` samples where all `x`, all `y` and all `z`
    should be filtered separately.

    Each channel holds its own copy of a prototype filter, so that all
    channels share the configuration but their states evolve independently.

    """

    def __init__(self, prototype: RealtimeFilter, n_channels: int):
        """Instantiate a multi-stream filter from any real-time filter.

        Parameters
        ----------
        prototype : RealtimeFilter
            Filter that is duplicated for each channel. It is not modified and
            its current state is carried over into every channel.
        n_channels : int
            Number of independent data streams.

        Raises
        ------
        InvalidParameter
            If the prototype is not a `RealtimeFilter` or the number of
            channels is not a positive integer.

        """
        if not isinstance(prototype, RealtimeFilter):
            raise InvalidParameter(
                "Prototype must be a RealtimeFilter, got "
                + f"{type(prototype).__name__}"
            )
        try:
            n_channels = _check_window_size(n_channels)
        except InvalidParameter as e:
            raise InvalidParameter(
                "Number of channels must be a positive integer, got "
                + f"{n_channels!r}"
            ) from e
        self.filters = [prototype.duplicate() for _ in range(n_channels)]

    @property
    def n_channels(self) -> int:
        return len(self.filters)

    def __len__(self):
        return self.n_channels

    def __getitem__(self, channel: int) -> RealtimeFilter:
        return self.filters[channel]

    def apply(self, x: ArrayLike) -> NDArray[np.float64]:
        """Filter one vector sample. Each entry is passed to the filter of its
        channel.

        Parameters
        ----------
        x : ArrayLike
            Vector with one sample per channel.

        Returns
        -------
        NDArray[np.float64]
            Filtered vector with one sample per channel.

        Raises
        ------
        ConfigurationMismatch
            If the length of `x` differs from the number of channels.

        """
        x = np.asarray(x, dtype=np.float64)
        if x.ndim != 1 or len(x) != self.n_channels:
            raise ConfigurationMismatch(
                f"Expected a vector with {self.n_channels} samples, got "
                + f"shape {x.shape}"
            )
        return np.array(
            [f.apply(sample) for f, sample in zip(self.filters, x)]
        )

    def process_sample(self, x: float, channel: int) -> float:
        """Filter a single sample of one channel. The other channels are not
        affected.

        Parameters
        ----------
        x : float
            New sample.
        channel : int
            Channel to which the sample belongs.

        Returns
        -------
        float

        """
        if not (0 <= channel < self.n_channels):
            raise ConfigurationMismatch(
                f"Channel {channel} does not exist. Only "
                + f"{self.n_channels} channels are available"
            )
        return self.filters[channel].apply(x)

    def process_block(self, x: ArrayLike) -> NDArray[np.float64]:
        """Filter a block of vector samples.

        Parameters
        ----------
        x : ArrayLike
            Block with shape (time samples, channels).

        Returns
        -------
        NDArray[np.float64]
            Filtered block with the same shape as the input.

        """
        x = np.asarray(x, dtype=np.float64)
        if x.ndim != 2 or x.shape[1] != self.n_channels:
            raise ConfigurationMismatch(
                "Expected a block with shape (time samples, "
                + f"{self.n_channels}), got {x.shape}"
            )
        y = np.empty_like(x)
        for ch, f in enumerate(self.filters):
            y[:, ch] = f.process_block(x[:, ch])
        return y

    def reset(self):
        for f in self.filters:
            f.reset()

    def resize(self, size: int):
        for f in self.filters:
            f.resize(size)

    def duplicate(self):
        return deepcopy(self)

    def __repr__(self):
        return (
            f"{type(self).__name__}({self.filters[0]!r}, "
            + f"n_channels={self.n_channels})"
        )
