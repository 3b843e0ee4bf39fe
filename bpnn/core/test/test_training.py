import unittest

import numpy as np

from bpnn.core.exception import DimensionError
from bpnn.core.training import prepare_examples, stop_early, unpack_example


class TestStopEarly(unittest.TestCase):

    def test_short_history(self):
        self.assertFalse(stop_early([3.0, 4.0], hist_len=5))

    def test_decreasing(self):
        history = list(np.linspace(10, 1, 20))
        self.assertFalse(stop_early(history, hist_len=10))

    def test_increasing(self):
        history = list(np.linspace(1, 10, 20))
        self.assertTrue(stop_early(history, hist_len=10))

    def test_flat(self):
        self.assertTrue(stop_early([2.0] * 10, hist_len=10, tol=-1e-3))

    def test_only_recent_history(self):
        # Rising at first, then falling over the window
        history = list(np.linspace(1, 10, 20)) + list(np.linspace(10, 1, 10))
        self.assertFalse(stop_early(history, hist_len=10))

    def test_increasing_direction(self):
        history = list(np.linspace(10, 1, 10))
        self.assertTrue(stop_early(history, hist_len=10, dec=False))


class TestExamples(unittest.TestCase):

    def test_unpack(self):
        self.assertEqual(([1], [2]), unpack_example(([1], [2])))
        self.assertEqual(([1], [2]),
                         unpack_example({'input': [1], 'target': [2]}))
        self.assertEqual(([1], [2]),
                         unpack_example({'input': [1], 'output': [2]}))

    def test_unpack_errors(self):
        bad = [([1],), ([1], [2], [3]), 5, {'target': [1]}, {'input': [1]}]

        for example in bad:
            with self.assertRaises(ValueError):
                unpack_example(example)

    def test_prepare(self):
        pairs = prepare_examples([([0, 1], [1]), ([1, 1], [0])], 2, 1)

        self.assertEqual(2, len(pairs))
        self.assertTrue((pairs[0][0] == [0.0, 1.0]).all())
        self.assertEqual((1,), pairs[1][1].shape)

    def test_prepare_empty(self):
        self.assertEqual([], prepare_examples([], 2, 1))

    def test_prepare_errors(self):
        with self.assertRaises(ValueError):
            prepare_examples(None, 2, 1)

        with self.assertRaises(DimensionError):
            prepare_examples([([0, 1], [1, 0])], 2, 1)


if __name__ == '__main__':
    unittest.main()
