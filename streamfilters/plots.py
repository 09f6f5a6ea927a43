"""
Plots
-----
Plotting templates that use matplotlib and seaborn for styling.

- `plot_filtered()`
- `show()`

"""

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
import numpy as np
from numpy.typing import ArrayLike
from seaborn import set_style

set_style("whitegrid")


def show():
    """Show created plots by using this wrapper around matplotlib's show."""
    plt.show()


def plot_filtered(
    raw: ArrayLike,
    filtered: ArrayLike,
    labels_raw=None,
    labels_filtered=None,
    title: str | None = None,
    xlabel: str = "Sample",
    ylabel: str | None = None,
    tight_layout: bool = True,
) -> tuple[Figure, Axes]:
    """Plot raw and filtered streams over the sample index. Filtered streams
    are drawn dashed on top of the raw data.

    Parameters
    ----------
    raw : ArrayLike
        Raw stream with shape (time samples,) or (time samples, channels).
    filtered : ArrayLike
        Filtered stream with the same length as `raw`.
    labels_raw : list or str, optional
        Labels for the raw channels. Default: `None`.
    labels_filtered : list or str, optional
        Labels for the filtered channels. Default: `None`.
    title : str, optional
        Title of the plot. Default: `None`.
    xlabel : str, optional
        Label for x axis. Default: "Sample".
    ylabel : str, optional
        Label for y axis. Default: `None`.
    tight_layout: bool, optional
        When `True`, tight layout is activated. Default: `True`.

    Returns
    -------
    fig, ax

    """
    raw = np.asarray(raw)
    filtered = np.asarray(filtered)
    if raw.ndim == 1:
        raw = raw[..., None]
    if filtered.ndim == 1:
        filtered = filtered[..., None]
    if raw.ndim > 2 or filtered.ndim > 2:
        raise ValueError("Only 1D and 2D-arrays are supported")
    assert len(raw) == len(
        filtered
    ), "Raw and filtered streams must have the same length"

    labels_raw = _as_label_list(labels_raw)
    labels_filtered = _as_label_list(labels_filtered)

    fig, ax = plt.subplots(1, 1, figsize=(8, 5))
    x = np.arange(raw.shape[0])
    ax.plot(x, raw, alpha=0.6, label=labels_raw)
    ax.plot(x, filtered, "--", label=labels_filtered)
    ax.set_xlim([0, raw.shape[0]])
    if labels_raw is not None or labels_filtered is not None:
        ax.legend()
    if title is not None:
        ax.set_title(title)
    if xlabel is not None:
        ax.set_xlabel(xlabel)
    if ylabel is not None:
        ax.set_ylabel(ylabel)
    if tight_layout:
        fig.tight_layout()
    return fig, ax


def _as_label_list(labels):
    if labels is None:
        return None
    if type(labels) not in (list, tuple):
        assert type(labels) is str, "labels should be a list or a string"
        labels = [labels]
    return list(labels)
