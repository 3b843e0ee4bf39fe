""" The configuration of a network's topology and training options.

Every option is validated when the configuration is built, so an invalid
option fails before any layer is allocated. Defaults are resolved in one
place:

* `hidden_layer_sizes` wins when given; otherwise every hidden layer has
  `input_size` neurons.
* `bias` holds one entry per non-output layer (input layer first); a
  scalar applies to every layer and missing trailing entries are zero.
* `initializer` names a provided initializer (`"uniform"` or `"normal"`)
  built for each network on a state drawn from `random_state` (an integer
  seed is re-seeded per network), or is an initializer instance that
  brings its own random state.
"""
import math
import numbers

import numpy

from .exception import ConfigurationError
from bpnn.initializer import (
    InitializerBase, NormalInitializer, UniformInitializer)


DEFAULT_HIDDEN_LAYER_COUNT = 2
DEFAULT_LEARNING_RATE = 0.5
DEFAULT_ITERATIONS = 2000
DEFAULT_LOG_INTERVAL = 100

PROVIDED_INITIALIZERS = {
    'normal': NormalInitializer,
    'uniform': UniformInitializer,
}


def is_positive_int(value):
    return (isinstance(value, numbers.Integral) and
            not isinstance(value, bool) and value > 0)


def is_real(value):
    return (isinstance(value, numbers.Real) and
            not isinstance(value, bool) and math.isfinite(value))


class NetworkConfig(object):
    """ Stores the options used to build and train a network
    """

    OPTION_NAMES = (
        'hidden_layer_count',
        'hidden_layer_sizes',
        'learning_rate',
        'bias',
        'iterations',
        'learn_bias',
        'initializer',
        'random_state',
        'stop_history_len',
        'stop_history_tol',
        'log_interval',
    )

    def __init__(self,
                 hidden_layer_count=DEFAULT_HIDDEN_LAYER_COUNT,
                 hidden_layer_sizes=None,
                 learning_rate=DEFAULT_LEARNING_RATE,
                 bias=None,
                 iterations=DEFAULT_ITERATIONS,
                 learn_bias=False,
                 initializer='uniform',
                 random_state=None,
                 stop_history_len=None,
                 stop_history_tol=0.0,
                 log_interval=DEFAULT_LOG_INTERVAL,
                 ):
        """
        Parameters
        ----------
        hidden_layer_count: int, default=2
            Number of hidden layers. At least one is required.

        hidden_layer_sizes: int or sequence of int, default=None
            Either a single size used for every hidden layer or one size
            per hidden layer. None means every hidden layer has as many
            neurons as the input layer.

        learning_rate: float, default=0.5
            The gradient descent step size.

        bias: float or sequence of float, default=None
            The offset added by each non-output layer to the net input of
            the next layer (input layer first). None means zero everywhere.

        iterations: int, default=2000
            Number of passes over the dataset made by `Network.learn`.

        learn_bias: bool, default=False
            If True, the biases are updated by gradient descent along with
            the weights. Otherwise they stay constant offsets.

        initializer: str or InitializerBase, default='uniform'
            Either 'uniform' (uniform on [-1, 1)), 'normal' (standard
            normal) or an initializer instance.

        random_state: int or numpy.random.RandomState, default=None
            Seed or RandomState used by the named initializers. An integer
            seed is kept and re-seeded for every network built from this
            config; a RandomState is shared between them.

        stop_history_len: int, default=None
            If given, training stops early when the linear trend of the
            most recent `stop_history_len` epoch errors is not decreasing
            faster than `stop_history_tol`.

        stop_history_tol: float, default=0.0
            See `stop_history_len`.

        log_interval: int, default=100
            Training progress is logged every `log_interval` passes.
        """
        if not is_positive_int(hidden_layer_count):
            msg = "`hidden_layer_count` ({!r}) must be a positive integer"
            raise ConfigurationError(msg.format(hidden_layer_count))

        self.hidden_layer_count = int(hidden_layer_count)
        self.hidden_layer_sizes = self._validate_hidden_layer_sizes(
            hidden_layer_sizes)

        if not is_real(learning_rate) or learning_rate <= 0:
            msg = "`learning_rate` ({!r}) must be a positive finite number"
            raise ConfigurationError(msg.format(learning_rate))
        self.learning_rate = float(learning_rate)

        self.bias = self._validate_bias(bias)

        if not is_positive_int(iterations):
            msg = "`iterations` ({!r}) must be a positive integer"
            raise ConfigurationError(msg.format(iterations))
        self.iterations = int(iterations)

        if not isinstance(learn_bias, (bool, numpy.bool_)):
            msg = "`learn_bias` ({!r}) must be True or False"
            raise ConfigurationError(msg.format(learn_bias))
        self.learn_bias = bool(learn_bias)

        self.random_state = self._validate_random_state(random_state)
        self.initializer = self._validate_initializer(initializer)

        if stop_history_len is not None:
            if not is_positive_int(stop_history_len) or stop_history_len < 2:
                msg = "`stop_history_len` ({!r}) must be an integer >= 2"
                raise ConfigurationError(msg.format(stop_history_len))
            stop_history_len = int(stop_history_len)
        self.stop_history_len = stop_history_len

        if not is_real(stop_history_tol):
            msg = "`stop_history_tol` ({!r}) must be a finite number"
            raise ConfigurationError(msg.format(stop_history_tol))
        self.stop_history_tol = float(stop_history_tol)

        if not is_positive_int(log_interval):
            msg = "`log_interval` ({!r}) must be a positive integer"
            raise ConfigurationError(msg.format(log_interval))
        self.log_interval = int(log_interval)

    def __repr__(self):
        return "<NetworkConfig hidden_layer_count=%d, learning_rate=%g>" % (
            self.hidden_layer_count, self.learning_rate)

    @classmethod
    def from_options(cls, config=None, **options):
        """ Build a configuration from a NetworkConfig, a mapping of
        options, or keyword options
        """
        if isinstance(config, cls):
            if options:
                msg = "Keyword options ({}) can't be mixed with a config"
                raise ConfigurationError(msg.format(sorted(options)))
            return config

        if config is None:
            config = {}

        if not hasattr(config, 'keys'):
            msg = "`config` was type {} but should be NetworkConfig or dict"
            raise ConfigurationError(msg.format(type(config)))

        merged = dict(config)
        merged.update(options)

        unknown = sorted(set(merged) - set(cls.OPTION_NAMES))
        if unknown:
            msg = "Unknown network option(s): {}"
            raise ConfigurationError(msg.format(", ".join(unknown)))

        return cls(**merged)

    def _validate_hidden_layer_sizes(self, hidden_layer_sizes):
        if hidden_layer_sizes is None:
            return None

        if isinstance(hidden_layer_sizes, numbers.Number):
            if not is_positive_int(hidden_layer_sizes):
                msg = "Hidden layer size ({!r}) must be a positive integer"
                raise ConfigurationError(msg.format(hidden_layer_sizes))
            return [int(hidden_layer_sizes)] * self.hidden_layer_count

        if (isinstance(hidden_layer_sizes, (str, bytes)) or
                not numpy.iterable(hidden_layer_sizes)):
            msg = ("`hidden_layer_sizes` was type {} but should be an "
                   "integer or a sequence of integers")
            raise ConfigurationError(msg.format(type(hidden_layer_sizes)))

        sizes = list(hidden_layer_sizes)

        if len(sizes) != self.hidden_layer_count:
            msg = ("`hidden_layer_sizes` has {} entries but "
                   "`hidden_layer_count` is {}")
            raise ConfigurationError(
                msg.format(len(sizes), self.hidden_layer_count))

        for size in sizes:
            if not is_positive_int(size):
                msg = "Hidden layer size ({!r}) must be a positive integer"
                raise ConfigurationError(msg.format(size))

        return [int(size) for size in sizes]

    def _validate_bias(self, bias):
        n_layers = self.hidden_layer_count + 1

        if bias is None:
            return [0.0] * n_layers

        if isinstance(bias, numbers.Number):
            if not is_real(bias):
                msg = "`bias` ({!r}) must be a finite number"
                raise ConfigurationError(msg.format(bias))
            return [float(bias)] * n_layers

        if isinstance(bias, (str, bytes)) or not numpy.iterable(bias):
            msg = "`bias` was type {} but should be a number or a sequence"
            raise ConfigurationError(msg.format(type(bias)))

        bias = list(bias)

        if len(bias) > n_layers:
            msg = ("`bias` has {} entries but the network has only {} "
                   "layers with outgoing weights")
            raise ConfigurationError(msg.format(len(bias), n_layers))

        for value in bias:
            if not is_real(value):
                msg = "Bias entry ({!r}) must be a finite number"
                raise ConfigurationError(msg.format(value))

        return [float(value) for value in bias] + [0.0] * (n_layers-len(bias))

    def _validate_random_state(self, random_state):
        if random_state is None:
            return None

        if isinstance(random_state, numpy.random.RandomState):
            return random_state

        if (isinstance(random_state, numbers.Integral) and
                not isinstance(random_state, bool) and random_state >= 0):
            return int(random_state)

        msg = ("`random_state` ({!r}) should be None, a non-negative "
               "integer seed or a numpy.random.RandomState")
        raise ConfigurationError(msg.format(random_state))

    def _validate_initializer(self, initializer):
        if isinstance(initializer, InitializerBase):
            return initializer

        if isinstance(initializer, str):
            if initializer not in PROVIDED_INITIALIZERS:
                msg = "Unknown initializer {!r} (choose from {})"
                raise ConfigurationError(msg.format(
                    initializer, ", ".join(sorted(PROVIDED_INITIALIZERS))))
            return initializer

        msg = "`initializer` was type {} but should be str or {}"
        raise ConfigurationError(
            msg.format(type(initializer), InitializerBase.__name__))

    def make_random_state(self):
        """ Returns the RandomState a new network draws its weights from.
        An integer seed gives a freshly seeded state on every call, so each
        network built from this config starts from the same draws. A given
        RandomState instance is shared.
        """
        if self.random_state is None:
            return numpy.random.RandomState()

        if isinstance(self.random_state, numpy.random.RandomState):
            return self.random_state

        return numpy.random.RandomState(self.random_state)

    def make_initializer(self):
        """ Returns the weight initializer for a new network. A named
        initializer is built on a state from `make_random_state`; an
        initializer instance is returned as is.
        """
        if isinstance(self.initializer, InitializerBase):
            return self.initializer

        initializer_class = PROVIDED_INITIALIZERS[self.initializer]
        return initializer_class(random_state=self.make_random_state())

    def resolve_hidden_layer_sizes(self, input_size):
        """ Returns the list of hidden layer sizes, using `input_size` for
        every hidden layer when no sizes were given
        """
        if self.hidden_layer_sizes is None:
            return [input_size] * self.hidden_layer_count
        return list(self.hidden_layer_sizes)

    def to_dict(self):
        """ The options as plain Python types (an initializer instance is
        summarized by its class name and the random state is left out)
        """
        if isinstance(self.initializer, InitializerBase):
            initializer = self.initializer.__class__.__name__
        else:
            initializer = self.initializer

        return {
            'hidden_layer_count': self.hidden_layer_count,
            'hidden_layer_sizes': self.hidden_layer_sizes,
            'learning_rate': self.learning_rate,
            'bias': list(self.bias),
            'iterations': self.iterations,
            'learn_bias': self.learn_bias,
            'initializer': initializer,
            'stop_history_len': self.stop_history_len,
            'stop_history_tol': self.stop_history_tol,
            'log_interval': self.log_interval,
        }
