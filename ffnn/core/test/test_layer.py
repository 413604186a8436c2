import unittest

import numpy as np

from ffnn.activation import Argmax, Sigmoid, Softmax
from ffnn.core.layer import Layer


class TestLayer(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)
        self.previous = Layer(n_units=3, n_weights=2, bias=True,
                              random_state=self.random_state)
        self.previous.set_outputs([0.5, -1.0, 2.0])

    def test_bias_unit_is_last(self):
        self.assertEqual(len(self.previous), 4)
        self.assertEqual(self.previous.n_units, 3)
        self.assertTrue(self.previous.units[-1].bias)
        self.assertEqual(self.previous.outputs[-1], 1.0)

    def test_set_outputs_skips_bias(self):
        self.previous.set_outputs([7.0, 8.0, 9.0])
        self.assertTrue(np.array_equal(self.previous.outputs,
                                       [7.0, 8.0, 9.0, 1.0]))

    def test_propagate(self):
        layer = Layer(n_units=2, n_weights=0, n_inputs=4,
                      activation=Sigmoid(), random_state=self.random_state)
        layer.propagate(self.previous)

        inputs = np.array([0.5, -1.0, 2.0, 1.0])
        nets = inputs.dot(self.previous.weight_matrix())

        self.assertTrue(np.allclose(layer.nets, nets))
        self.assertTrue(np.allclose(layer.outputs, 1 / (1 + np.exp(-nets))))
        self.assertTrue(np.array_equal(layer.units[0].inputs, inputs))

    def test_bias_output_is_never_recomputed(self):
        layer = Layer(n_units=2, n_weights=1, n_inputs=4, bias=True,
                      activation=Sigmoid(), random_state=self.random_state)
        layer.propagate(self.previous)
        self.assertEqual(layer.units[-1].output, 1.0)
        self.assertEqual(len(layer.nets), 2)

    def test_argmax_layer(self):
        layer = Layer(n_units=2, n_weights=0, n_inputs=4,
                      activation=Argmax(), random_state=self.random_state)
        layer.propagate(self.previous)

        outputs = layer.outputs
        self.assertEqual(outputs.sum(), 1.0)
        self.assertEqual(outputs[np.argmax(layer.nets)], 1.0)

    def test_softmax_layer(self):
        layer = Layer(n_units=2, n_weights=0, n_inputs=4,
                      activation=Softmax(), random_state=self.random_state)
        layer.propagate(self.previous)
        self.assertAlmostEqual(layer.outputs.sum(), 1.0)


if __name__ == '__main__':
    unittest.main()
