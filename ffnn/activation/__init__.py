# flake8: noqa

from ffnn.core.exception import ConfigurationError

from .activation_base import ActivationBase, LayerWideMode

from .provided.layer_wide import (
    Argmax,
    Softmax,
)

from .provided.pointwise import (
    ELU,
    GELU,
    LeakyReLU,
    Linear,
    ReLU,
    ReLUDerivative,
    Sigmoid,
    Sine,
    SoftPlus,
    Swish,
    Tanh,
)


ACTIVATIONS = (
    ReLU, Sigmoid, Tanh, LeakyReLU, ELU, Swish, GELU, Linear, Sine,
    Argmax, Softmax, SoftPlus, ReLUDerivative,
)

_BY_NAME = {cls.name: cls for cls in ACTIVATIONS}
_BY_CODE = {cls.code: cls for cls in ACTIVATIONS}

# Alternative spellings accepted by `get_activation`
_BY_NAME.update({
    'identity': Linear,
    'leakyrelu': LeakyReLU,
    'relu_dx': ReLUDerivative,
    'sin': Sine,
})


def get_activation(selector, layer_wide_ok=True):
    """ Resolve an activation selector into an activation instance

    Parameters
    ----------
    selector: ActivationBase, str or int
        An activation instance, a case-insensitive registry name
        (e.g., 'tanh') or an integer code (e.g., 3).

    layer_wide_ok: bool, default=True
        If False, the layer-wide modes (argmax, softmax) are rejected.
        This is the case for every layer except the output layer.

    Returns
    -------
    activation: ActivationBase
    """
    if isinstance(selector, ActivationBase):
        activation = selector
    elif isinstance(selector, bool):
        msg = "Activation selector can't be a bool ({})"
        raise ConfigurationError(msg.format(selector))
    elif isinstance(selector, int):
        if selector not in _BY_CODE:
            msg = "Activation code {} is out of range ({} to {})"
            raise ConfigurationError(
                msg.format(selector, min(_BY_CODE), max(_BY_CODE)))
        activation = _BY_CODE[selector]()
    elif isinstance(selector, str):
        key = selector.strip().lower().replace('-', '_')
        if key not in _BY_NAME:
            msg = "Unknown activation '{}'; expected one of {}"
            raise ConfigurationError(
                msg.format(selector, sorted(_BY_NAME)))
        activation = _BY_NAME[key]()
    else:
        msg = "Activation selector type {} is not supported"
        raise ConfigurationError(msg.format(type(selector)))

    if not layer_wide_ok and isinstance(activation, LayerWideMode):
        msg = "Layer-wide mode '{}' is only legal on the output layer"
        raise ConfigurationError(msg.format(activation.name))

    return activation
