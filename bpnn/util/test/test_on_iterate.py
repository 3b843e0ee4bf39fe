import unittest

from bpnn.util.on_iterate import collect_errors, stop_below


class TestOnIterate(unittest.TestCase):

    def test_collect_errors(self):
        errors = []
        on_iterate = collect_errors(errors)

        self.assertIsNone(on_iterate(0, 0.5))
        on_iterate(1, 0.25)

        self.assertEqual([0.5, 0.25], errors)

    def test_stop_below(self):
        on_iterate = stop_below(0.1)

        self.assertFalse(on_iterate(0, 0.2))
        self.assertTrue(on_iterate(1, 0.05))

        with self.assertRaises(ValueError):
            stop_below(0)


if __name__ == '__main__':
    unittest.main()
