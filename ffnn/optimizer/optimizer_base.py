import abc


class OptimizerBase(abc.ABC):
    """ The abstract base class for optimizers.

    An optimizer turns the gradients stored on each unit into weight
    updates. Weights are held by the sending unit, so the connections
    feeding the non-bias units of `layers[1:]` are the outbound weight
    vectors of every unit (bias included) in `layers[:-1]`.
    """

    #: If False, the caller must store `-learning_rate * dcost/dweight`
    #: in the gradient buffers rather than the raw gradient.
    applies_learning_rate = True

    @abc.abstractmethod
    def update(self, layers, learning_rate, momentum=0.0):
        """ Mutate the weights of `layers` in place

        Parameters
        ----------
        layers: list of Layer
            The layers of the network, input layer first. The `gradient`
            buffer of each unit must already be populated.

        learning_rate: float
            The step size.

        momentum: float, default=0.0
            Reserved for optimizers that use it.
        """
        raise NotImplementedError

    def __repr__(self):
        return "<{}>".format(self.__class__.__name__)


def iterate_trainable_units(layers):
    """ Yield every unit that holds weights feeding a later layer
    """
    for layer in layers[:-1]:
        for unit in layer.units:
            yield unit
