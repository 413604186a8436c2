# flake8: noqa

from ffnn.core.exception import ConfigurationError

from .optimizer_base import OptimizerBase
from .provided.gradient_descent import GradientDescent
from .provided.rmsprop import RMSProp


_BY_NAME = {
    'gradient_descent': GradientDescent,
    'gd': GradientDescent,
    'sgd': GradientDescent,
    'rmsprop': RMSProp,
}


def get_optimizer(selector):
    """ Resolve an optimizer instance or case-insensitive name (e.g.,
    'rmsprop') into an optimizer instance
    """
    if isinstance(selector, OptimizerBase):
        return selector

    if isinstance(selector, str):
        key = selector.strip().lower().replace('-', '_')
        if key in _BY_NAME:
            return _BY_NAME[key]()
        msg = "Unknown optimizer '{}'; expected one of {}"
        raise ConfigurationError(msg.format(selector, sorted(_BY_NAME)))

    msg = "Optimizer selector type {} is not supported"
    raise ConfigurationError(msg.format(type(selector)))
