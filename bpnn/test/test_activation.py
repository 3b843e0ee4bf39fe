import unittest

import numpy as np

from bpnn.activation import sigmoid, sigmoid_derivative


class TestSigmoid(unittest.TestCase):

    def test_values(self):
        x = np.array([-2.0, 0.0, 0.5, 3.0])
        self.assertTrue(np.allclose(1 / (1 + np.exp(-x)), sigmoid(x)))
        self.assertEqual(0.5, sigmoid(0.0))

    def test_no_overflow(self):
        with np.errstate(over='raise'):
            values = sigmoid(np.array([-1000.0, 1000.0]))
        self.assertTrue(np.allclose([0.0, 1.0], values))

    def test_derivative(self):
        x = np.linspace(-4, 4, 9)
        eps = 1e-6
        numeric = (sigmoid(x + eps) - sigmoid(x - eps)) / (2 * eps)

        self.assertTrue(np.allclose(numeric, sigmoid_derivative(sigmoid(x))))


if __name__ == '__main__':
    unittest.main()
