import unittest

import numpy as np

from ffnn.core.config import NetworkConfig
from ffnn.core.exception import (
    AlreadyCompiled, ConfigurationError, NotCompiled, ShapeMismatch)
from ffnn.core.network import Network


XOR_INPUTS = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=float)
XOR_OUTPUTS = np.array([[0], [1], [1], [0]], dtype=float)


def make_network(architecture=(2, 3, 1), **kwargs):
    config = NetworkConfig(**kwargs)
    network = Network(architecture, config=config,
                      random_state=np.random.RandomState(1234))
    network.compile()
    return network


class TestConstruction(unittest.TestCase):

    def test_architecture(self):
        network = Network([4, 5, 5, 5, 2])
        self.assertEqual(network.architecture, [4, 5, 5, 5, 2])
        self.assertEqual(network.hidden_layer_count, 3)
        self.assertFalse(network.is_compiled)

    def test_from_sizes(self):
        network = Network.from_sizes(3, 6, 2, hidden_layer_count=2)
        self.assertEqual(network.architecture, [3, 6, 6, 2])

    def test_invalid_architectures(self):
        for architecture in [[2, 1], [2], [], [0, 3, 1], [2, 3, -1],
                             [2, 3, 4, 1], [2, 2.5, 1], [2, True, 1]]:
            with self.assertRaises(ConfigurationError, msg=architecture):
                Network(architecture)

        with self.assertRaises(ConfigurationError):
            Network.from_sizes(2, 3, 1, hidden_layer_count=0)

        with self.assertRaises(ConfigurationError):
            Network([2, 3, 1], config={'learning_rate': 0.1})


class TestCompile(unittest.TestCase):

    def test_layer_layout_with_bias(self):
        network = make_network((2, 3, 3, 4))

        self.assertEqual([len(layer) for layer in network.layers],
                         [3, 4, 4, 4])
        self.assertEqual([layer.bias for layer in network.layers],
                         [True, True, True, False])

        # Outbound weights reach the non-bias units of the next layer
        self.assertEqual([w.shape for w in network.weights()],
                         [(3, 3), (4, 3), (4, 4)])
        for unit in network.output_layer.units:
            self.assertEqual(len(unit.weights), 0)

    def test_layer_layout_without_bias(self):
        network = make_network((2, 3, 1), bias=False)
        self.assertEqual([len(layer) for layer in network.layers], [2, 3, 1])

    def test_weights_in_range(self):
        network = make_network((3, 8, 2), weight_range=0.25)
        for weights in network.weights():
            self.assertTrue((np.abs(weights) <= 0.25).all())

    def test_compile_only_once(self):
        network = make_network()
        with self.assertRaises(AlreadyCompiled):
            network.compile()

    def test_entry_points_need_compile(self):
        network = Network([2, 3, 1])
        calls = [
            lambda: network.forward([0, 1]),
            lambda: network.predict(XOR_INPUTS),
            lambda: network.cost(XOR_INPUTS, XOR_OUTPUTS),
            lambda: network.accuracy(XOR_INPUTS, XOR_OUTPUTS),
            lambda: network.backpropagate([0, 1], [1]),
            lambda: network.train(XOR_INPUTS, XOR_OUTPUTS, 1),
            lambda: network.finite_difference(XOR_INPUTS, XOR_OUTPUTS),
            lambda: network.weights(),
            lambda: network.output,
        ]
        for call in calls:
            with self.assertRaises(NotCompiled):
                call()


class TestForward(unittest.TestCase):

    def test_matches_manual_computation(self):
        network = make_network((2, 3, 1), hidden_activation='tanh',
                               output_activation='sigmoid')
        x = np.array([0.3, -0.8])
        w0, w1 = network.weights()

        hidden = np.tanh(np.r_[x, 1.0].dot(w0))
        expected = 1 / (1 + np.exp(-np.r_[hidden, 1.0].dot(w1)))

        self.assertTrue(np.allclose(network.forward(x), expected))
        self.assertTrue(np.allclose(network.output, expected))

    def test_deterministic(self):
        network = make_network((3, 5, 5, 2))
        x = [0.1, 0.2, -0.7]
        first = network.forward(x)
        for _ in range(5):
            self.assertTrue(np.array_equal(network.forward(x), first))

    def test_predict(self):
        network = make_network()
        predictions = network.predict(XOR_INPUTS)
        self.assertEqual(predictions.shape, (4, 1))
        for x, p in zip(XOR_INPUTS, predictions):
            self.assertTrue(np.array_equal(network.forward(x), p))

    def test_softmax_output(self):
        network = make_network((4, 6, 3), output_activation='softmax')
        random_state = np.random.RandomState(4321)

        for x in random_state.randn(20, 4):
            output = network.forward(x)
            self.assertAlmostEqual(output.sum(), 1.0)
            self.assertTrue(((output >= 0) & (output <= 1)).all())

    def test_argmax_output(self):
        network = make_network((4, 6, 3), output_activation='argmax')
        random_state = np.random.RandomState(4321)

        for x in random_state.randn(20, 4):
            output = network.forward(x)
            self.assertEqual((output == 1.0).sum(), 1)
            self.assertEqual((output == 0.0).sum(), 2)
            self.assertEqual(np.argmax(output),
                             np.argmax(network.output_layer.nets))


class TestCostAndAccuracy(unittest.TestCase):

    def test_cost(self):
        network = make_network()
        predictions = network.predict(XOR_INPUTS)
        expected = ((XOR_OUTPUTS - predictions)**2).sum() / 4
        self.assertAlmostEqual(network.cost(XOR_INPUTS, XOR_OUTPUTS),
                               expected)

    def test_accuracy(self):
        network = make_network((2, 4, 3), output_activation='argmax')
        predictions = network.predict(XOR_INPUTS)

        self.assertEqual(network.accuracy(XOR_INPUTS, predictions), 1.0)
        self.assertEqual(network.accuracy(XOR_INPUTS, 1 - predictions), 0.0)

        half = predictions.copy()
        half[:2] = 1 - half[:2]
        self.assertEqual(network.accuracy(XOR_INPUTS, half), 0.5)


class TestValidation(unittest.TestCase):

    def test_width_mismatch_raises_and_keeps_weights(self):
        network = make_network()
        before = network.weights()

        bad_inputs = np.ones((4, 3))
        calls = [
            lambda: network.forward([1, 2, 3]),
            lambda: network.predict(bad_inputs),
            lambda: network.cost(bad_inputs, XOR_OUTPUTS),
            lambda: network.accuracy(bad_inputs, XOR_OUTPUTS),
            lambda: network.backpropagate([1, 2, 3], [1]),
            lambda: network.backpropagate([1, 2], [1, 0]),
            lambda: network.train(bad_inputs, XOR_OUTPUTS, 5),
            lambda: network.train(XOR_INPUTS, np.ones((4, 2)), 5),
            lambda: network.train(XOR_INPUTS, XOR_OUTPUTS[:3], 5),
            lambda: network.finite_difference(bad_inputs, XOR_OUTPUTS),
        ]
        for call in calls:
            with self.assertRaises(ShapeMismatch):
                call()
            # Shape errors are configuration errors too
            with self.assertRaises(ConfigurationError):
                call()

        for weights, weights_before in zip(network.weights(), before):
            self.assertTrue(np.array_equal(weights, weights_before))

    def test_invalid_training_parameters(self):
        network = make_network()
        before = network.weights()

        with self.assertRaises(ConfigurationError):
            network.train(XOR_INPUTS, XOR_OUTPUTS, 0)
        with self.assertRaises(ConfigurationError):
            network.finite_difference(XOR_INPUTS, XOR_OUTPUTS, epochs=0)
        with self.assertRaises(ConfigurationError):
            network.finite_difference(XOR_INPUTS, XOR_OUTPUTS, eps=0)

        for weights, weights_before in zip(network.weights(), before):
            self.assertTrue(np.array_equal(weights, weights_before))


class TestClone(unittest.TestCase):

    def test_clone_is_identical(self):
        network = make_network((3, 4, 2))
        clone = network.clone()

        self.assertEqual(clone.architecture, network.architecture)
        self.assertEqual(clone.config, network.config)
        for w0, w1 in zip(network.weights(), clone.weights()):
            self.assertTrue(np.array_equal(w0, w1))

        x = [0.2, -0.1, 0.9]
        self.assertTrue(np.array_equal(network.forward(x), clone.forward(x)))

    def test_clone_is_independent(self):
        network = make_network((3, 4, 2))
        clone = network.clone()

        original = network.layers[1].units[2].weights[1]
        clone.layers[1].units[2].weights[1] += 10.0
        clone.layers[0].units[0].gradient[:] = 5.0

        self.assertEqual(network.layers[1].units[2].weights[1], original)
        self.assertTrue((network.layers[0].units[0].gradient == 0).all())
        self.assertIsNot(clone.layers[0], network.layers[0])


if __name__ == '__main__':
    unittest.main()
