import unittest

import numpy as np

from ffnn.core.unit import Unit


class TestUnit(unittest.TestCase):

    def test_weights_in_range(self):
        random_state = np.random.RandomState(1234)
        unit = Unit(n_weights=500, weight_range=0.3,
                    random_state=random_state)

        self.assertEqual(unit.weights.shape, (500,))
        self.assertTrue((np.abs(unit.weights) <= 0.3).all())
        self.assertEqual(unit.gradient.shape, (500,))
        self.assertEqual(unit.accumulator.shape, (500,))

    def test_bias_output_is_one(self):
        unit = Unit(n_weights=2, bias=True)
        self.assertEqual(unit.output, 1.0)

    def test_output_unit_has_no_weights(self):
        unit = Unit(n_weights=0, n_inputs=4)
        self.assertEqual(len(unit.weights), 0)
        self.assertEqual(unit.inputs.shape, (4,))


if __name__ == '__main__':
    unittest.main()
