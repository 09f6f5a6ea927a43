import abc
from copy import deepcopy

import numpy as np
from numpy.typing import NDArray, ArrayLike


class RealtimeFilter(abc.ABC):
    """Base class for all filters that process a stream of scalar samples
    one at a time. Each instance owns its state, so that it must not be used
    from different threads without external synchronization."""

    @abc.abstractmethod
    def apply(self, x: float) -> float:
        """Filter a new sample and advance the internal state.

        Parameters
        ----------
        x : float
            Newest input sample.

        Returns
        -------
        float
            Filtered output.

        """
        pass

    @abc.abstractmethod
    def reset(self):
        """Reset the filter state to 0. The configuration is kept."""
        pass

    @abc.abstractmethod
    def resize(self, size: int):
        """Set the number of past samples that the filter considers. This
        always resets the filter."""
        pass

    def duplicate(self):
        """Return an independent copy of the filter with the same
        configuration and current state."""
        return deepcopy(self)

    def process_block(self, x: ArrayLike) -> NDArray[np.float64]:
        """Filter a block of samples in order. This is equivalent to calling
        `apply` on each sample.

        Parameters
        ----------
        x : ArrayLike
            Input samples with a single dimension.

        Returns
        -------
        NDArray[np.float64]
            Filtered samples.

        """
        x = np.atleast_1d(np.asarray(x, dtype=np.float64))
        assert x.ndim == 1, "Only a single dimension is supported"
        y = np.empty_like(x)
        for ind in range(len(x)):
            y[ind] = self.apply(x[ind])
        return y
