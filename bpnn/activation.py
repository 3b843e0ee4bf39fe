""" The logistic sigmoid activation used by every neuron in the network
"""
import numpy
from scipy.special import expit


def sigmoid(x):
    """ Compute `1 / (1 + exp(-x))` elementwise

    Computed with `scipy.special.expit`, which does not overflow for large
    negative arguments.
    """
    return expit(x)


def sigmoid_derivative(activation):
    """ The derivative of the sigmoid written in terms of its output,
    i.e., `s * (1 - s)` where `s = sigmoid(x)`
    """
    activation = numpy.asarray(activation, dtype=float)
    return activation * (1.0 - activation)
