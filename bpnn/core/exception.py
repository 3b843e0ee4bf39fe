class NetworkError(Exception):
    """ Base class for errors raised by the network
    """


class ConfigurationError(NetworkError, ValueError):
    """ Raised when the options given to construct a network are invalid or
    contradictory (e.g., a hidden layer size list of the wrong length)
    """


class DimensionError(NetworkError, ValueError):
    """ Raised when an input, target, or parameter array does not match the
    size of the layer it is meant for
    """
