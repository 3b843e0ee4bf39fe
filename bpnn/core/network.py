""" A feedforward multilayer perceptron with sigmoid activations trained by
online backpropagation.

Layers are connected in order::

    input => hidden_1 => ... => hidden_k => output

and the net input to neuron j of a layer is
`sum_i prev.activation[i] * prev.weights[i, j] + prev.bias[j]`.
Training minimizes the halved sum of squared errors one example at a time.
"""
import json
import logging
import threading

import numpy

from .config import NetworkConfig, is_positive_int
from .exception import ConfigurationError, DimensionError
from .layer import build_layers
from .propagation import (
    apply_gradient_step, as_vector, backward, forward)
from .training import prepare_examples, stop_early


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


class Network(object):
    """ Multilayer perceptron with at least one hidden layer

    Attributes
    ----------
    layers: list
        `[input, hidden_1, ..., hidden_k]` FullyConnectedLayer instances
        followed by the OutputLayer.

    total_error: float or None
        The error observed by the most recent training step, before its
        weight update. None until the network has been trained.

    error_history: ndarray
        The summed error of every completed pass made by `learn`.

    A network is meant to be used by one thread at a time; concurrent
    calls are serialized by an internal lock.
    """
    def __init__(self, input_size, output_size, config=None, **options):
        """
        Parameters
        ----------
        input_size: int
            Number of inputs to the network.

        output_size: int
            Number of outputs of the network.

        config: NetworkConfig or dict, default=None
            The options of the network. Alternatively, give the options
            as keyword arguments. See :class:`bpnn.core.config.NetworkConfig`
            for their descriptions and defaults.
        """
        if not is_positive_int(input_size):
            msg = "`input_size` ({!r}) must be a positive integer"
            raise ConfigurationError(msg.format(input_size))

        if not is_positive_int(output_size):
            msg = "`output_size` ({!r}) must be a positive integer"
            raise ConfigurationError(msg.format(output_size))

        self.config = NetworkConfig.from_options(config, **options)

        self.input_size = int(input_size)
        self.output_size = int(output_size)
        self.hidden_layer_sizes = self.config.resolve_hidden_layer_sizes(
            self.input_size)
        self.learning_rate = self.config.learning_rate

        self.layers = build_layers(
            input_size=self.input_size,
            hidden_layer_sizes=self.hidden_layer_sizes,
            output_size=self.output_size,
            initializer=self.config.make_initializer(),
            bias=self.config.bias)

        self.total_error = None
        self.last_forward = None
        self.last_backward = None
        self._error_history = []
        self._lock = threading.RLock()

        logger.debug("Created {!r}".format(self))

    def __repr__(self):
        sizes = [layer.size for layer in self.layers]
        return "<Network layers=%s, learning_rate=%g>" % (
            "-".join(str(size) for size in sizes), self.learning_rate)

    @property
    def input_layer(self):
        return self.layers[0]

    @property
    def hidden_layers(self):
        return self.layers[1:-1]

    @property
    def output_layer(self):
        return self.layers[-1]

    @property
    def error_history(self):
        return numpy.array(self._error_history, dtype=float)

    def predict(self, inputs):
        """
        Parameters
        ----------
        inputs: sequence of float, length=input_size
            Input values to the network.

        Returns
        -------
        output: ndarray, shape=(output_size,)
            Output values of the network. This is a new array on every
            call.
        """
        vector = as_vector(inputs, self.input_size, 'input')

        with self._lock:
            self.last_forward = forward(self.layers, vector)
            return self.last_forward.output.copy()

    def learn_single(self, inputs, target):
        """ Take one gradient descent step on a single example. The
        `total_error` attribute is updated with the error of the network
        on this example before the step is taken.

        Parameters
        ----------
        inputs: sequence of float, length=input_size
            Input to the network.

        target: sequence of float, length=output_size
            The desired output.
        """
        vector = as_vector(inputs, self.input_size, 'input')
        target = as_vector(target, self.output_size, 'target')

        with self._lock:
            self._step(vector, target)

    def _step(self, vector, target):
        forward_result = forward(self.layers, vector)
        backward_result = backward(self.layers, forward_result, target)

        apply_gradient_step(
            self.layers, forward_result, backward_result,
            learning_rate=self.learning_rate,
            learn_bias=self.config.learn_bias)

        self.last_forward = forward_result
        self.last_backward = backward_result
        self.total_error = backward_result.total_error

    def learn(self, examples, iterations=None, on_iterate=None):
        """ Train the network by repeatedly presenting every example, in
        order, to `learn_single`.

        Parameters
        ----------
        examples: sequence
            Each example is either an `(input, target)` pair or a mapping
            like `{'input': [...], 'target': [...]}` ('output' is accepted
            in place of 'target').

        iterations: int, default=None
            Number of passes over `examples`. Defaults to
            `config.iterations`.

        on_iterate: callable or list of callables, default=None
            Each is called as `func(iteration, epoch_error)` after every
            pass. Training stops after the pass if any of them returns
            True.
        """
        if iterations is None:
            iterations = self.config.iterations
        elif not is_positive_int(iterations):
            msg = "`iterations` ({!r}) must be a positive integer"
            raise ValueError(msg.format(iterations))

        if on_iterate is None:
            on_iterate = []
        elif callable(on_iterate):
            on_iterate = [on_iterate]

        for func in on_iterate:
            if not callable(func):
                msg = "`on_iterate` entry {!r} is not callable"
                raise TypeError(msg.format(func))

        # Every example is checked before the first update is made.
        pairs = prepare_examples(
            examples, self.input_size, self.output_size)

        if not pairs:
            logger.warning("No training examples given, nothing to learn")
            return

        stop_history_len = self.config.stop_history_len
        log_interval = self.config.log_interval
        run_errors = []

        msg = "Training on {:d} examples for up to {:d} passes"
        logger.info(msg.format(len(pairs), iterations))

        with self._lock:
            for iteration in range(iterations):
                epoch_error = 0.0
                for vector, target in pairs:
                    self._step(vector, target)
                    epoch_error += self.total_error

                run_errors.append(epoch_error)
                self._error_history.append(epoch_error)

                if (iteration + 1) % log_interval == 0:
                    msg = "(Iteration = {:0{}d}) epoch error = {:.7f}"
                    logger.debug(msg.format(
                        iteration + 1, len(str(iterations)), epoch_error))

                cancelled = [func(iteration, epoch_error)
                             for func in on_iterate]
                if any(cancelled):
                    msg = "Training stopped by `on_iterate` after {:d} passes"
                    logger.info(msg.format(iteration + 1))
                    break

                if stop_history_len is not None and stop_early(
                        run_errors, hist_len=stop_history_len,
                        tol=self.config.stop_history_tol):
                    msg = "Error stopped decreasing, stopping after {:d} passes"
                    logger.info(msg.format(iteration + 1))
                    break

        msg = "Finished training, last epoch error = {:.7f}"
        logger.info(msg.format(run_errors[-1]))

    def get_params(self):
        """
        Returns
        -------
        weights, biases: list of ndarray, list of ndarray
            Copies of the weight matrix and bias vector of every layer
            with outgoing weights, input layer first.
        """
        with self._lock:
            weights = [layer.weights.copy() for layer in self.layers[:-1]]
            biases = [layer.bias.copy() for layer in self.layers[:-1]]
        return weights, biases

    def set_params(self, weights, biases=None):
        """ Set the weights (and optionally the biases) to those provided.
        Nothing is changed unless every array has the right shape.
        """
        connected = self.layers[:-1]

        if len(weights) != len(connected):
            msg = "Got {} weight matrices but the network has {}"
            raise DimensionError(msg.format(len(weights), len(connected)))

        if biases is None:
            biases = [None] * len(connected)
        elif len(biases) != len(connected):
            msg = "Got {} bias vectors but the network has {}"
            raise DimensionError(msg.format(len(biases), len(connected)))

        try:
            weights = [numpy.array(w, dtype=float) for w in weights]
            biases = [None if b is None else numpy.array(b, dtype=float)
                      for b in biases]
        except (TypeError, ValueError):
            msg = "Parameters could not be converted to arrays of floats"
            raise DimensionError(msg)

        for layer, w, b in zip(connected, weights, biases):
            if w.shape != layer.weights.shape:
                msg = "weights are shape {} but should be {}"
                raise DimensionError(msg.format(w.shape, layer.weights.shape))
            if b is not None and b.shape != layer.bias.shape:
                msg = "bias is shape {} but should be {}"
                raise DimensionError(msg.format(b.shape, layer.bias.shape))

        with self._lock:
            for layer, w, b in zip(connected, weights, biases):
                layer.set_params(w, b)

    def to_dict(self):
        """ The state of the network as plain Python types """
        with self._lock:
            return {
                'input_size': self.input_size,
                'output_size': self.output_size,
                'hidden_layer_sizes': list(self.hidden_layer_sizes),
                'learning_rate': self.learning_rate,
                'learn_bias': self.config.learn_bias,
                'total_error': self.total_error,
                'layers': [layer.to_dict() for layer in self.layers],
            }

    def to_json(self, indent=4):
        """ A JSON representation of the network, for inspection """
        return json.dumps(self.to_dict(), indent=indent)

    def dump(self):
        return self.to_json()
