""" This module provides a few simple `on_iterate` functions that can be
used in the `Network.learn` member function
"""


def collect_errors(error_list):
    """ Collects the epoch errors from the iterations. Errors are appended
    to :code:`error_list` and so an empty list should be provided. Usage::

        errors = []
        network.learn(examples, on_iterate=[collect_errors(errors), ...])
    """

    def on_iterate(i, error):
        error_list.append(error)

    return on_iterate


def stop_below(threshold):
    """ Stops training once the epoch error drops below :code:`threshold`
    """
    if threshold <= 0:
        msg = "`threshold` ({}) must be positive"
        raise ValueError(msg.format(threshold))

    def on_iterate(i, error):
        return error < threshold

    return on_iterate
