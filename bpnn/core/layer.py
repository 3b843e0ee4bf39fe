""" Layers of a feedforward network.

Every layer but the last is a :class:`FullyConnectedLayer`, which owns the
weights and bias feeding the next layer. The last layer is an
:class:`OutputLayer`, which has neither.
"""
import numpy

from .exception import DimensionError


class LayerBase(object):
    """ A row of `size` neurons """

    def __init__(self, size):
        self.size = int(size)

    def to_dict(self):
        return {'type': self.__class__.__name__, 'size': self.size}


class FullyConnectedLayer(LayerBase):
    """ A layer connected to every neuron of the next layer

    Attributes
    ----------
    weights: ndarray, shape=(size, next_size)
        weights[i, j] = weight from neuron i of this layer to neuron j of
        the next layer.

    bias: ndarray, shape=(next_size,)
        bias[j] = offset added to the net input of neuron j of the next
        layer.
    """

    def __init__(self, size, next_size, weights, bias=0.0):
        super().__init__(size)
        self.next_size = int(next_size)

        self.weights = numpy.empty((self.size, self.next_size))
        self.bias = numpy.empty(self.next_size)
        self.set_params(weights, bias)

    def __repr__(self):
        return "<FullyConnectedLayer size=%d, next_size=%d>" % (
            self.size, self.next_size)

    def set_params(self, weights, bias=None):
        """ Replace the weights (and the bias, if given) after checking
        their shapes. A scalar bias is broadcast to every next neuron.
        """
        weights = numpy.array(weights, dtype=float)
        if weights.shape != (self.size, self.next_size):
            msg = "weights are shape {} but should be {}"
            raise DimensionError(
                msg.format(weights.shape, (self.size, self.next_size)))

        if bias is not None:
            bias = numpy.array(bias, dtype=float)
            if bias.ndim == 0:
                bias = numpy.full(self.next_size, float(bias))
            if bias.shape != (self.next_size,):
                msg = "bias is shape {} but should be {}"
                raise DimensionError(
                    msg.format(bias.shape, (self.next_size,)))
            self.bias = bias

        self.weights = weights

    def net_input(self, activation):
        """ The net input to the next layer given this layer's activation
        """
        return numpy.dot(activation, self.weights) + self.bias

    def to_dict(self):
        data = super().to_dict()
        data['next_size'] = self.next_size
        data['weights'] = self.weights.tolist()
        data['bias'] = self.bias.tolist()
        return data


class OutputLayer(LayerBase):
    """ The last layer: activations only, no outgoing edges """

    def __repr__(self):
        return "<OutputLayer size=%d>" % self.size


def build_layers(input_size, hidden_layer_sizes, output_size,
                 initializer, bias):
    """ Allocate the layers of a network in order, drawing each weight
    matrix from `initializer`

    Parameters
    ----------
    input_size, output_size: int
        Number of neurons in the input and output layers.

    hidden_layer_sizes: list of int
        Number of neurons in each hidden layer.

    initializer: InitializerBase
        Called with the shape of each weight matrix.

    bias: list of float
        The bias of each non-output layer, input layer first.

    Returns
    -------
    layers: list
        `len(hidden_layer_sizes) + 1` instances of FullyConnectedLayer
        followed by one OutputLayer.
    """
    sizes = [input_size] + list(hidden_layer_sizes) + [output_size]

    if len(bias) != len(sizes) - 1:
        msg = "Got {} bias values for {} layers with outgoing weights"
        raise ValueError(msg.format(len(bias), len(sizes) - 1))

    layers = []
    for size, next_size, layer_bias in zip(sizes[:-1], sizes[1:], bias):
        weights = initializer((size, next_size))
        layers.append(FullyConnectedLayer(
            size, next_size, weights=weights, bias=layer_bias))

    layers.append(OutputLayer(output_size))

    return layers
