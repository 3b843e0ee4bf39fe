import unittest

import numpy as np

from bpnn.initializer.initializer_base import InitializerBase


class TestInitializerBase(unittest.TestCase):

    def test_call(self):

        # Mock an initializer class
        class MyInitializer(InitializerBase):

            def initialize(self, shape):
                return np.ones(shape, dtype=int)

        initializer = MyInitializer(random_state=np.random.RandomState(0))
        weights = initializer((2, 3))

        self.assertEqual((2, 3), weights.shape)
        self.assertEqual(float, weights.dtype)

    def test_bad_return(self):

        class WrongShape(InitializerBase):

            def initialize(self, shape):
                return np.ones((1,))

        class WrongType(InitializerBase):

            def initialize(self, shape):
                return [[1.0]]

        with self.assertRaises(ValueError):
            WrongShape()((2, 2))

        with self.assertRaises(TypeError):
            WrongType()((1, 1))

    def test_bad_arguments(self):

        class MyInitializer(InitializerBase):

            def initialize(self, shape):
                return np.zeros(shape)

        with self.assertRaises(TypeError):
            MyInitializer(random_state=123)

        with self.assertRaises(ValueError):
            MyInitializer()((0, 3))


if __name__ == '__main__':
    unittest.main()
