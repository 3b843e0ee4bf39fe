""" Forward and backward propagation written as functions of the layers.

None of these functions keep state between calls: the forward pass returns
freshly allocated activations, the backward pass returns freshly allocated
deltas, and only :func:`apply_gradient_step` mutates the layers.
"""
from collections import namedtuple

import numpy

from bpnn.activation import sigmoid, sigmoid_derivative
from .exception import DimensionError


class ForwardResult(namedtuple('ForwardResult', ['activations'])):
    """ activations[l] is the activation vector of layers[l] (the input
    vector itself for the input layer)
    """
    __slots__ = ()

    @property
    def output(self):
        return self.activations[-1]


class BackwardResult(namedtuple('BackwardResult', ['deltas', 'total_error'])):
    """ deltas[l] is the derivative of the total error with respect to the
    net input of each neuron of layers[l]
    """
    __slots__ = ()


def as_vector(values, size, name='input'):
    """ Convert `values` to a float vector, raising DimensionError unless
    it is one dimensional with length `size`
    """
    try:
        vector = numpy.array(values, dtype=float)
    except (TypeError, ValueError):
        msg = "`{}` could not be converted to a vector of floats"
        raise DimensionError(msg.format(name))

    if vector.ndim != 1:
        msg = "`{}` should be one dimensional but has shape {}"
        raise DimensionError(msg.format(name, vector.shape))

    if vector.shape[0] != size:
        msg = "`{}` has length {} but should have length {}"
        raise DimensionError(msg.format(name, vector.shape[0], size))

    return vector


def total_error(output, target):
    """ Half the sum of squared differences between `output` and `target`
    """
    diff = numpy.asarray(target, dtype=float) - output
    return 0.5 * float(numpy.dot(diff, diff))


def forward(layers, inputs):
    """ Run `inputs` through the network

    Parameters
    ----------
    layers: list
        FullyConnectedLayer instances followed by an OutputLayer.

    inputs: ndarray, shape=(layers[0].size,)
        An already validated input vector.

    Returns
    -------
    result: ForwardResult
    """
    activations = [numpy.array(inputs, dtype=float)]

    for layer in layers[:-1]:
        activations.append(sigmoid(layer.net_input(activations[-1])))

    return ForwardResult(activations=activations)


def backward(layers, forward_result, target):
    """ Compute the delta of every neuron, from the output layer down to
    the input layer, using the weights as they are now

    Parameters
    ----------
    layers: list
        The layers `forward_result` was computed with.

    forward_result: ForwardResult
        The activations of the forward pass for the current example.

    target: ndarray, shape=(layers[-1].size,)
        An already validated target vector.

    Returns
    -------
    result: BackwardResult
    """
    activations = forward_result.activations
    output = forward_result.output

    deltas = [None] * len(layers)
    deltas[-1] = (output - target) * sigmoid_derivative(output)

    for index in range(len(layers) - 2, -1, -1):
        error = numpy.dot(layers[index].weights, deltas[index + 1])
        deltas[index] = error * sigmoid_derivative(activations[index])

    return BackwardResult(
        deltas=deltas, total_error=total_error(output, target))


def apply_gradient_step(layers, forward_result, backward_result,
                        learning_rate, learn_bias=False):
    """ Take one gradient descent step in place:
    `weights[i, j] -= learning_rate * delta_next[j] * activation[i]`
    (and `bias[j] -= learning_rate * delta_next[j]` if `learn_bias`)
    """
    activations = forward_result.activations
    deltas = backward_result.deltas

    for index, layer in enumerate(layers[:-1]):
        delta_next = deltas[index + 1]
        layer.weights -= learning_rate * numpy.outer(
            activations[index], delta_next)
        if learn_bias:
            layer.bias -= learning_rate * delta_next
