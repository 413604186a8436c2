from ffnn.optimizer.optimizer_base import (
    OptimizerBase, iterate_trainable_units)


class GradientDescent(OptimizerBase):
    """ Applies the accumulated gradient directly, `weight += gradient`.
    The gradient must already be signed and scaled by the learning rate.
    """
    name = 'gradient_descent'
    applies_learning_rate = False

    def update(self, layers, learning_rate, momentum=0.0):
        for unit in iterate_trainable_units(layers):
            unit.weights += unit.gradient
