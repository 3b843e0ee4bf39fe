import matplotlib.pyplot as plt
import numpy as np


def plot_error_history(error_history, ax=None, log_scale=True,
                       line_kwargs=dict(c='b', ls='-', lw=2)):
    """ Plot the error of each training pass

    Parameters
    ----------
    error_history: ndarray, shape=(niters,)
        For example, `Network.error_history`.

    ax: matplotlib axis, default=None
        The axis to plot on. A new figure is created if not given.

    log_scale: bool, default=True
        If True, the error axis is log scaled.

    line_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib axis
    """
    error_history = np.asarray(error_history, dtype=float)

    if error_history.ndim != 1:
        raise TypeError("`error_history` must be 1d.")

    if ax is None:
        fig = plt.figure(figsize=(6, 4))
        ax = fig.add_subplot(111)

    iterations = np.arange(1, error_history.shape[0] + 1)
    ax.plot(iterations, error_history, **line_kwargs)

    if log_scale and error_history.size and (error_history > 0).all():
        ax.set_yscale('log')

    ax.set_xlabel('Iteration')
    ax.set_ylabel('Error')
    ax.grid(True)

    return ax
