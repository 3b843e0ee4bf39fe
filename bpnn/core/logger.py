import logging
import os
import sys


DEFAULT_LOG_FILENAME = 'train-log.txt'


def setup_logging(filename=None, stdout=True, level=logging.DEBUG):
    """ Sets up logging formatting, etc, for scripts that train networks.
    The package itself never configures logging.

    Parameters
    ----------
    filename : str, default=None
        The log file, which is overwritten. Defaults to
        `train-log.txt` in the current directory.

    stdout : bool, default=True
        If True, log records are also written to standard out.

    level : int, default=logging.DEBUG
        The level of the root logger.

    Returns
    -------
    handlers : list
        The handlers added to the root logger.
    """
    # Handles when filename is None
    filename = filename or os.path.join(os.path.curdir,
                                        DEFAULT_LOG_FILENAME)

    line_fmt = ("[%(asctime)s] [%(name)s:%(lineno)d] "
                "%(levelname)-8s %(message)s")

    date_fmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=line_fmt, datefmt=date_fmt)

    handlers = [logging.FileHandler(filename, mode='w')]

    if stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    root = logging.getLogger()
    root.setLevel(level)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return handlers
