import numpy

from ffnn.optimizer.optimizer_base import (
    OptimizerBase, iterate_trainable_units)


class RMSProp(OptimizerBase):
    """ Root mean square propagation.

    Keeps a decaying average of the squared gradient of every weight and
    divides the step by its square root, so that weights with a history of
    large gradients take smaller steps::

        accumulator = beta * accumulator + (1 - beta) * gradient^2
        weight -= learning_rate / sqrt(accumulator + epsilon) * gradient
    """
    name = 'rmsprop'
    applies_learning_rate = True

    def __init__(self, beta=0.9, epsilon=1e-8):
        """
        Parameters
        ----------
        beta: float, default=0.9
            Decay factor of the running average, in [0, 1).

        epsilon: float, default=1e-8
            Added under the square root to avoid division by zero.
        """
        if not 0 <= beta < 1:
            raise ValueError("`beta` must be in [0, 1)")
        if epsilon <= 0:
            raise ValueError("`epsilon` must be positive")

        self.beta = beta
        self.epsilon = epsilon

    def __repr__(self):
        return "<RMSProp beta={}, epsilon={}>".format(self.beta, self.epsilon)

    def update(self, layers, learning_rate, momentum=0.0):
        for unit in iterate_trainable_units(layers):
            unit.accumulator *= self.beta
            unit.accumulator += (1 - self.beta) * unit.gradient**2
            step = learning_rate / numpy.sqrt(unit.accumulator + self.epsilon)
            unit.weights -= step * unit.gradient
