import unittest

import numpy as np

from bpnn.core.exception import DimensionError
from bpnn.core.layer import FullyConnectedLayer, OutputLayer, build_layers
from bpnn.initializer import UniformInitializer


class TestFullyConnectedLayer(unittest.TestCase):

    def test_scalar_bias_broadcast(self):
        layer = FullyConnectedLayer(2, 3, weights=np.zeros((2, 3)), bias=0.4)

        self.assertEqual((3,), layer.bias.shape)
        self.assertTrue((layer.bias == 0.4).all())

    def test_net_input(self):
        weights = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        layer = FullyConnectedLayer(3, 2, weights=weights, bias=[0.5, -0.5])

        net = layer.net_input(np.array([1.0, 0.0, 2.0]))
        self.assertTrue(np.allclose([11.5, 13.5], net))

    def test_bad_shapes(self):
        with self.assertRaises(DimensionError):
            FullyConnectedLayer(2, 3, weights=np.zeros((3, 2)))

        with self.assertRaises(DimensionError):
            FullyConnectedLayer(2, 3, weights=np.zeros((2, 3)),
                                bias=[0.0, 1.0])

    def test_to_dict(self):
        layer = FullyConnectedLayer(1, 2, weights=[[0.5, -0.5]])
        data = layer.to_dict()

        self.assertEqual('FullyConnectedLayer', data['type'])
        self.assertEqual([[0.5, -0.5]], data['weights'])
        self.assertEqual([0.0, 0.0], data['bias'])

    def test_output_layer(self):
        layer = OutputLayer(3)
        self.assertEqual({'type': 'OutputLayer', 'size': 3}, layer.to_dict())


class TestBuildLayers(unittest.TestCase):

    def test_build_layers(self):
        initializer = UniformInitializer(random_state=np.random.RandomState(0))
        layers = build_layers(
            input_size=2, hidden_layer_sizes=[3, 4], output_size=1,
            initializer=initializer, bias=[0.1, 0.2, 0.3])

        self.assertEqual([2, 3, 4, 1], [layer.size for layer in layers])
        self.assertEqual([(2, 3), (3, 4), (4, 1)],
                         [layer.weights.shape for layer in layers[:-1]])
        self.assertTrue((layers[1].bias == 0.2).all())
        self.assertIsInstance(layers[-1], OutputLayer)

    def test_wrong_bias_count(self):
        initializer = UniformInitializer()

        with self.assertRaises(ValueError):
            build_layers(2, [3], 1, initializer=initializer, bias=[0.0])


if __name__ == '__main__':
    unittest.main()
