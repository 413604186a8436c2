import numpy

from ffnn.activation import LayerWideMode
from ffnn.activation.provided.pointwise import Linear
from ffnn.core.unit import Unit


class Layer:
    """ An ordered collection of units sharing one activation.

    If the layer has a bias unit it is the last element of `units`, its
    output is pinned to 1 and it is never recomputed.
    """
    def __init__(self, n_units, n_weights, n_inputs=0, activation=None,
                 bias=False, weight_range=1.0, random_state=None):
        """
        Parameters
        ----------
        n_units: int
            Number of units, not counting the bias unit.

        n_weights: int
            Outbound weights per unit, i.e., the number of non-bias units
            of the next layer (0 for the output layer).

        n_inputs: int, default=0
            Number of units (bias included) of the previous layer.

        activation: ActivationBase, default=None
            The activation of the layer (identity if None).

        bias: bool, default=False
            Whether to append a bias unit.

        weight_range: float, default=1.0
            Weights are drawn uniformly from [-weight_range, weight_range].

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        random_state = random_state or numpy.random.RandomState()

        self.activation = activation or Linear()
        self.units = [
            Unit(n_weights=n_weights, n_inputs=n_inputs,
                 weight_range=weight_range, random_state=random_state)
            for _ in range(n_units)
        ]
        self.bias = bias
        if bias:
            self.units.append(
                Unit(n_weights=n_weights, weight_range=weight_range,
                     bias=True, random_state=random_state))

    def __repr__(self):
        return "<Layer n_units={:d}, bias={}, activation={}>".format(
            self.n_units, self.bias, self.activation.name)

    def __len__(self):
        return len(self.units)

    @property
    def n_units(self):
        """ Number of units, not counting the bias unit """
        return len(self.units) - int(self.bias)

    @property
    def active_units(self):
        """ The units whose output is computed, i.e., all but the bias """
        return self.units[:self.n_units]

    @property
    def outputs(self):
        return numpy.array([unit.output for unit in self.units])

    @property
    def nets(self):
        return numpy.array([unit.net for unit in self.active_units])

    def weight_matrix(self):
        """ Returns the outbound weights as an array with shape
        `(len(self), n_weights)`, where row `i` belongs to unit `i`
        """
        return numpy.array([unit.weights for unit in self.units])

    def set_outputs(self, values):
        """ Copy `values` into the outputs of the non-bias units """
        for unit, value in zip(self.active_units, values):
            unit.output = float(value)

    def propagate(self, previous):
        """ Compute the weighted sum of every non-bias unit from the outputs
        of `previous` and apply the activation of the layer
        """
        inputs = previous.outputs
        nets = inputs.dot(previous.weight_matrix())

        for unit, net in zip(self.active_units, nets):
            unit.inputs = inputs.copy()
            unit.net = float(net)

        if isinstance(self.activation, LayerWideMode):
            outputs = self.activation.apply(nets)
        else:
            outputs = self.activation.activate(nets)

        self.set_outputs(outputs)

    def derivatives(self):
        """ The activation derivative of each non-bias unit

        The derivative is evaluated at the raw weighted sum `net`, not at
        the unit output.
        """
        return numpy.asarray(self.activation.derivative(self.nets),
                             dtype=float)
