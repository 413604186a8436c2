from dataclasses import dataclass

import numpy

from ffnn.activation import get_activation
from ffnn.core.exception import ConfigurationError
from ffnn.optimizer import get_optimizer


DEFAULT_WEIGHT_RANGE = 1.0
DEFAULT_LEARNING_RATE = 0.01


@dataclass(frozen=True)
class NetworkConfig:
    """ Hyperparameters of a network, validated on construction

    Attributes
    ----------
    weight_range: float, default=1.0
        Initial weights are drawn uniformly from
        `[-weight_range, weight_range]`. Must be positive and finite.

    bias: bool, default=True
        If True, the input and hidden layers carry an extra bias unit
        whose output is always 1.

    learning_rate: float, default=0.01
        The step size of the trainers. Must be non-zero.

    momentum: float, default=0.0
        Forwarded to the optimizer on every update. Neither provided
        optimizer reads it; it exists for custom `OptimizerBase` subclasses.

    hidden_activation: ActivationBase, str or int, default='relu'
        Activation of every hidden layer. Layer-wide modes are rejected.

    output_activation: ActivationBase, str or int, default='sigmoid'
        Activation of the output layer. May be 'argmax' or 'softmax'.

    optimizer: OptimizerBase or str, default='gradient_descent'
        The optimizer used by backpropagation.
    """
    weight_range: float = DEFAULT_WEIGHT_RANGE
    bias: bool = True
    learning_rate: float = DEFAULT_LEARNING_RATE
    momentum: float = 0.0
    hidden_activation: object = 'relu'
    output_activation: object = 'sigmoid'
    optimizer: object = 'gradient_descent'

    def __post_init__(self):
        if not 0 < self.weight_range < numpy.inf:
            msg = "`weight_range` must be positive and finite (got {})"
            raise ConfigurationError(msg.format(self.weight_range))

        if not numpy.isfinite(self.learning_rate) or self.learning_rate == 0:
            msg = "`learning_rate` must be finite and non-zero (got {})"
            raise ConfigurationError(msg.format(self.learning_rate))

        # These raise for invalid selectors
        get_activation(self.hidden_activation, layer_wide_ok=False)
        get_activation(self.output_activation)
        get_optimizer(self.optimizer)

    def make_hidden_activation(self):
        return get_activation(self.hidden_activation, layer_wide_ok=False)

    def make_output_activation(self):
        return get_activation(self.output_activation)

    def make_optimizer(self):
        return get_optimizer(self.optimizer)
