import numpy


class Unit:
    """ A single node of a layer.

    The unit holds its outbound weights, one per non-bias unit of the next
    layer, together with the buffers the trainers need.

    Attributes
    ----------
    inputs: ndarray, shape=(n_inputs,)
        The upstream outputs seen during the last weighted sum.

    net: float
        The raw weighted sum.

    output: float
        The activated value (always 1 for a bias unit).

    weights: ndarray, shape=(n_weights,)
        Outbound weights.

    error: float
        Error term computed by backpropagation.

    gradient: ndarray, shape=(n_weights,)
        Per-weight gradient buffer consumed by the optimizers.

    accumulator: ndarray, shape=(n_weights,)
        Running average of squared gradients for adaptive optimizers.
    """
    def __init__(self, n_weights, n_inputs=0, weight_range=1.0,
                 bias=False, random_state=None):
        random_state = random_state or numpy.random.RandomState()

        self.bias = bias
        self.inputs = numpy.zeros(n_inputs)
        self.net = 0.0
        self.output = 1.0 if bias else 0.0
        self.weights = random_state.uniform(
            -weight_range, weight_range, size=n_weights)
        self.error = 0.0
        self.gradient = numpy.zeros(n_weights)
        self.accumulator = numpy.zeros(n_weights)

    def __repr__(self):
        kind = "bias unit" if self.bias else "unit"
        return "<{} n_weights={:d}, output={:.5f}>".format(
            kind, len(self.weights), self.output)
