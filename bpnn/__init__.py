# flake8: noqa

from .core.config import NetworkConfig
from .core.exception import ConfigurationError, DimensionError, NetworkError
from .core.network import Network
