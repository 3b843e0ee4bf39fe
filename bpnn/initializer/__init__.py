# flake8: noqa

from .initializer_base import InitializerBase

from .provided.normal import NormalInitializer
from .provided.uniform import UniformInitializer
