import abc

import numpy


class ActivationBase(abc.ABC):
    """ The abstract base class for per-unit activation functions.

    Activations are stateless. Both member functions accept either a scalar
    or a numpy array of raw weighted sums and compute element-wise.
    """

    #: The registry name of the activation, e.g., 'relu'
    name = None

    #: The integer selector of the activation
    code = None

    @abc.abstractmethod
    def activate(self, x):
        """ Compute the activation of the raw weighted sum `x`
        """
        raise NotImplementedError

    @abc.abstractmethod
    def derivative(self, x):
        """ Compute the derivative of the activation evaluated at the raw
        weighted sum `x`
        """
        raise NotImplementedError

    def __repr__(self):
        return "<{}>".format(self.__class__.__name__)

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))


class LayerWideMode(ActivationBase):
    """ An activation that normalizes the outputs of an entire layer instead
    of acting on each unit separately. Only legal on the output layer.
    """

    @abc.abstractmethod
    def apply(self, sums):
        """ Compute the outputs of the layer from the vector of raw sums
        """
        raise NotImplementedError

    def activate(self, x):
        return self.apply(x)

    def derivative(self, x):
        # The post-pass is treated as a pass-through during backpropagation
        return numpy.ones_like(numpy.asarray(x, dtype=float))
