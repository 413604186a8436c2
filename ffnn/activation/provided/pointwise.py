import numpy

from ffnn.activation.activation_base import ActivationBase


# Slope of the negative branch of the leaky ReLU and ELU activations
NEGATIVE_SLOPE = 0.001

# Constant of the tanh approximation of GELU
GELU_SCALE = numpy.sqrt(2.0 / numpy.pi)
GELU_CUBIC = 0.044715


def _sigmoid(x):
    return 1.0 / (1.0 + numpy.exp(-x))


class ReLU(ActivationBase):
    name = 'relu'
    code = 1

    def activate(self, x):
        return numpy.maximum(0.0, x)

    def derivative(self, x):
        return numpy.where(numpy.asarray(x) < 0, 0.0, 1.0)


class Sigmoid(ActivationBase):
    name = 'sigmoid'
    code = 2

    def activate(self, x):
        return _sigmoid(x)

    def derivative(self, x):
        s = _sigmoid(x)
        return s * (1.0 - s)


class Tanh(ActivationBase):
    name = 'tanh'
    code = 3

    def activate(self, x):
        return numpy.tanh(x)

    def derivative(self, x):
        return 1.0 - numpy.tanh(x)**2


class LeakyReLU(ActivationBase):
    name = 'leaky_relu'
    code = 4

    def activate(self, x):
        x = numpy.asarray(x, dtype=float)
        return numpy.where(x > 0, x, NEGATIVE_SLOPE * x)

    def derivative(self, x):
        return numpy.where(numpy.asarray(x) > 0, 1.0, NEGATIVE_SLOPE)


class ELU(ActivationBase):
    name = 'elu'
    code = 5

    def activate(self, x):
        x = numpy.asarray(x, dtype=float)
        # Clip the exponent so the unused branch can't overflow
        return numpy.where(
            x > 0, x, NEGATIVE_SLOPE * (numpy.exp(numpy.minimum(x, 0)) - 1))

    def derivative(self, x):
        x = numpy.asarray(x, dtype=float)
        return numpy.where(
            x > 0, 1.0, NEGATIVE_SLOPE * numpy.exp(numpy.minimum(x, 0)))


class Swish(ActivationBase):
    """ x * sigmoid(x)
    """
    name = 'swish'
    code = 6

    def activate(self, x):
        return x * _sigmoid(x)

    def derivative(self, x):
        s = _sigmoid(x)
        return s + x * s * (1.0 - s)


class GELU(ActivationBase):
    """ Gaussian error linear unit, using the tanh approximation::

        0.5 * x * (1 + tanh(sqrt(2/pi) * (x + 0.044715 * x^3)))
    """
    name = 'gelu'
    code = 7

    def activate(self, x):
        inner = GELU_SCALE * (x + GELU_CUBIC * x**3)
        return 0.5 * x * (1.0 + numpy.tanh(inner))

    def derivative(self, x):
        inner = GELU_SCALE * (x + GELU_CUBIC * x**3)
        t = numpy.tanh(inner)
        dinner = GELU_SCALE * (1.0 + 3.0 * GELU_CUBIC * x**2)
        return 0.5 * (1.0 + t) + 0.5 * x * (1.0 - t**2) * dinner


class Linear(ActivationBase):
    """ The identity activation
    """
    name = 'linear'
    code = 8

    def activate(self, x):
        return 1.0 * x

    def derivative(self, x):
        return numpy.ones_like(numpy.asarray(x, dtype=float))


class Sine(ActivationBase):
    name = 'sine'
    code = 9

    def activate(self, x):
        return numpy.sin(x)

    def derivative(self, x):
        return numpy.cos(x)


class SoftPlus(ActivationBase):
    """ log(1 + e^x)
    """
    name = 'softplus'
    code = 12

    def activate(self, x):
        return numpy.logaddexp(0.0, x)

    def derivative(self, x):
        return _sigmoid(x)


class ReLUDerivative(ActivationBase):
    """ The step function 0 if x < 0 else 1, i.e., the derivative of ReLU
    used as an activation in its own right. Its derivative is zero
    everywhere, so an output layer using it does not learn with
    backpropagation.
    """
    name = 'relu_derivative'
    code = 13

    def activate(self, x):
        return numpy.where(numpy.asarray(x) < 0, 0.0, 1.0)

    def derivative(self, x):
        return numpy.zeros_like(numpy.asarray(x, dtype=float))
