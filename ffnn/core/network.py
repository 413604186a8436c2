import copy
import logging

import numpy

from ffnn.core.config import NetworkConfig
from ffnn.core.exception import (
    AlreadyCompiled, ConfigurationError, NotCompiled, ShapeMismatch)
from ffnn.core.layer import Layer
from ffnn.optimizer import GradientDescent, get_optimizer
from ffnn.util.logger import progress


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


class Network:
    """ A feed-forward network with one input layer, one or more hidden
    layers of identical width and one output layer.

    Layers are kept in a list, `[input, hidden_1, ..., hidden_n, output]`,
    and each unit holds its outbound weights to the non-bias units of the
    following layer.

    Example
    -------
    ::

        config = NetworkConfig(learning_rate=0.5,
                               hidden_activation='sigmoid',
                               output_activation='sigmoid')
        network = Network([2, 3, 1], config=config)
        network.compile()
        network.train(inputs, outputs, epochs=2000)
    """
    def __init__(self, architecture, config=None, random_state=None):
        """
        Parameters
        ----------
        architecture: sequence of int
            The widths of the layers, input first. At least three entries,
            all at least one, and the interior (hidden) entries equal.

        config: NetworkConfig, default=None
            Hyperparameters. The defaults of `NetworkConfig` are used
            if None.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        architecture = list(architecture)

        if len(architecture) < 3:
            msg = ("The architecture needs at least three layer sizes "
                   "(got {})")
            raise ConfigurationError(msg.format(len(architecture)))

        for size in architecture:
            if (isinstance(size, bool) or
                    not isinstance(size, (int, numpy.integer)) or size < 1):
                msg = "Layer sizes must be integers >= 1 (got {})"
                raise ConfigurationError(msg.format(architecture))

        if len(set(architecture[1:-1])) != 1:
            msg = "Hidden layer sizes must be equal (got {})"
            raise ConfigurationError(msg.format(architecture[1:-1]))

        if config is None:
            config = NetworkConfig()
        elif not isinstance(config, NetworkConfig):
            msg = "`config` must be a NetworkConfig (got {})"
            raise ConfigurationError(msg.format(type(config)))

        self.input_size = int(architecture[0])
        self.hidden_size = int(architecture[1])
        self.output_size = int(architecture[-1])
        self.hidden_layer_count = len(architecture) - 2

        self.config = config
        self.random_state = (numpy.random.RandomState()
                             if random_state is None else random_state)
        self.optimizer = config.make_optimizer()

        self.layers = []
        self._is_compiled = False

    @classmethod
    def from_sizes(cls, input_size, hidden_size, output_size,
                   hidden_layer_count=1, config=None, random_state=None):
        """ Build a network from the layer widths and the number of hidden
        layers instead of an explicit width list
        """
        if hidden_layer_count < 1:
            msg = "`hidden_layer_count` must be >= 1 (got {})"
            raise ConfigurationError(msg.format(hidden_layer_count))

        architecture = ([input_size] + [hidden_size] * hidden_layer_count +
                        [output_size])
        return cls(architecture, config=config, random_state=random_state)

    def __repr__(self):
        return "<Network architecture={}, compiled={}>".format(
            self.architecture, self._is_compiled)

    @property
    def architecture(self):
        return ([self.input_size] +
                [self.hidden_size] * self.hidden_layer_count +
                [self.output_size])

    @property
    def is_compiled(self):
        return self._is_compiled

    @property
    def input_layer(self):
        self._check_compiled()
        return self.layers[0]

    @property
    def hidden_layers(self):
        self._check_compiled()
        return self.layers[1:-1]

    @property
    def output_layer(self):
        self._check_compiled()
        return self.layers[-1]

    @property
    def output(self):
        """ The outputs of the output layer from the last forward pass """
        return self.output_layer.outputs

    def compile(self):
        """ Allocate the layers and units and randomize the weights
        """
        if self._is_compiled:
            raise AlreadyCompiled("This network has already been compiled")

        sizes = self.architecture
        n_layers = len(sizes)
        bias = bool(self.config.bias)

        layers = []
        for i, size in enumerate(sizes):
            is_output = i == n_layers - 1

            if i == 0:
                activation = None
            elif is_output:
                activation = self.config.make_output_activation()
            else:
                activation = self.config.make_hidden_activation()

            layers.append(Layer(
                n_units=size,
                n_weights=0 if is_output else sizes[i+1],
                n_inputs=len(layers[-1]) if layers else 0,
                activation=activation,
                bias=bias and not is_output,
                weight_range=self.config.weight_range,
                random_state=self.random_state,
            ))

        self.layers = layers
        self._is_compiled = True

        logger.info("Compiled network with architecture {}".format(sizes))

    def clone(self):
        """ Returns a deep, independent copy of the network, weights and
        buffers included
        """
        return copy.deepcopy(self)

    def weights(self):
        """ Returns a copy of the outbound weight matrix of every layer
        except the output layer
        """
        self._check_compiled()
        return [layer.weight_matrix() for layer in self.layers[:-1]]

    def forward(self, x):
        """ Propagate a single input vector through the network

        Parameters
        ----------
        x: array-like, shape=(input_size,)

        Returns
        -------
        output: ndarray, shape=(output_size,)
        """
        self._check_compiled()
        x = self._validate_row(x, self.input_size, 'input')
        return self._forward(x)

    def predict(self, inputs):
        """ Forward propagate every row of `inputs`

        Returns
        -------
        outputs: ndarray, shape=(n_rows, output_size)
        """
        self._check_compiled()
        inputs = self._validate_matrix(inputs, self.input_size, 'input')
        return numpy.array([self._forward(x) for x in inputs])

    def cost(self, inputs, outputs):
        """ Mean over the rows of the summed squared error between the
        expected `outputs` and the network's outputs
        """
        self._check_compiled()
        inputs, outputs = self._validate_dataset(inputs, outputs)
        return self._cost(inputs, outputs)

    def accuracy(self, inputs, outputs):
        """ Fraction of rows for which every output of the network exactly
        equals the expected output. Meant for one-hot targets, e.g., with
        an argmax output layer.
        """
        self._check_compiled()
        inputs, outputs = self._validate_dataset(inputs, outputs)

        correct = 0
        for x, y in zip(inputs, outputs):
            if numpy.array_equal(self._forward(x), y):
                correct += 1

        return correct / len(inputs)

    def backpropagate(self, x, y):
        """ Perform one backpropagation update from a single row

        The error terms of every layer are computed from the output layer
        backwards and turned into gradients for every connection, which
        the optimizer then applies.
        """
        self._check_compiled()
        x = self._validate_row(x, self.input_size, 'input')
        y = self._validate_row(y, self.output_size, 'output')
        self._backpropagate(x, y)

    def train(self, inputs, outputs, epochs, verbose=False):
        """ Train with backpropagation, one update per row, per epoch, in
        row order

        Parameters
        ----------
        inputs: array-like, shape=(n_rows, input_size)

        outputs: array-like, shape=(n_rows, output_size)

        epochs: int
            Number of passes over the dataset. Must be >= 1.

        verbose: bool, default=False
            If True, the cost after each epoch is logged and returned.

        Returns
        -------
        costs: list of float or None
            The cost after each epoch if `verbose`, otherwise None.
        """
        self._check_compiled()
        inputs, outputs = self._validate_dataset(inputs, outputs)
        self._validate_epochs(epochs)

        logger.info("Backpropagation: {:d} epochs over {:d} rows".format(
            epochs, len(inputs)))

        costs = [] if verbose else None

        for epoch in range(epochs):
            for x, y in zip(inputs, outputs):
                self._backpropagate(x, y)

            if verbose:
                costs.append(self._cost(inputs, outputs))
                progress(logger, "cost = {:.7f}".format(costs[-1]),
                         epoch+1, epochs)

        return costs

    def finite_difference(self, inputs, outputs, eps=1e-3, epochs=1,
                          optimizer=None, verbose=False):
        """ Train by estimating each weight's gradient with a forward
        difference of the dataset cost

        Each estimate is measured on a scratch copy of the network so the
        live weights only change in the update applied at the end of each
        epoch. This is slow: every epoch costs one dataset pass per weight.

        Parameters
        ----------
        inputs: array-like, shape=(n_rows, input_size)

        outputs: array-like, shape=(n_rows, output_size)

        eps: float, default=1e-3
            The perturbation added to each weight. Must be non-zero.

        epochs: int, default=1
            Number of gradient steps. Must be >= 1.

        optimizer: OptimizerBase or str, default=None
            Applies the estimated gradients; plain gradient descent,
            `weight -= learning_rate * gradient`, if None.

        verbose: bool, default=False
            If True, the cost after each epoch is logged and returned.

        Returns
        -------
        costs: list of float or None
            The cost after each epoch if `verbose`, otherwise None.
        """
        self._check_compiled()
        inputs, outputs = self._validate_dataset(inputs, outputs)
        self._validate_epochs(epochs)
        if eps == 0:
            raise ConfigurationError("The perturbation `eps` can't be zero")

        optimizer = (GradientDescent() if optimizer is None
                     else get_optimizer(optimizer))

        logger.info("Finite difference: {:d} epochs over {:d} rows, "
                    "eps = {}".format(epochs, len(inputs), eps))

        costs = [] if verbose else None
        scratch = self.clone()

        for epoch in range(epochs):
            baseline = self._cost(inputs, outputs)

            for layer, scratch_layer in zip(self.layers, scratch.layers):
                for unit, scratch_unit in zip(layer.units,
                                              scratch_layer.units):
                    for k in range(len(unit.weights)):
                        scratch_unit.weights[k] = unit.weights[k] + eps
                        perturbed = scratch._cost(inputs, outputs)
                        scratch_unit.weights[k] = unit.weights[k]

                        unit.gradient[k] = (perturbed - baseline) / eps

            self._apply_gradients(optimizer)

            # Keep the scratch copy in step with the live weights
            for layer, scratch_layer in zip(self.layers, scratch.layers):
                for unit, scratch_unit in zip(layer.units,
                                              scratch_layer.units):
                    scratch_unit.weights[:] = unit.weights

            if verbose:
                costs.append(self._cost(inputs, outputs))
                progress(logger, "cost = {:.7f}".format(costs[-1]),
                         epoch+1, epochs)

        return costs

    def save(self, filename):
        """ Pickle the network to `filename` """
        from ffnn.util.persistence import save_network
        save_network(self, filename)

    def _forward(self, x):
        self.layers[0].set_outputs(x)

        for previous, layer in zip(self.layers[:-1], self.layers[1:]):
            layer.propagate(previous)

        return self.layers[-1].outputs

    def _cost(self, inputs, outputs):
        total = 0.0
        for x, y in zip(inputs, outputs):
            diff = y - self._forward(x)
            total += diff.dot(diff)
        return total / len(inputs)

    def _backpropagate(self, x, y):
        self._forward(x)

        # Output layer errors
        output_layer = self.layers[-1]
        errors = (y - output_layer.outputs) * output_layer.derivatives()
        for unit, error in zip(output_layer.units, errors):
            unit.error = float(error)

        # Hidden layer errors, from the last hidden layer to the first
        for i in range(len(self.layers)-2, 0, -1):
            layer = self.layers[i]
            downstream = numpy.array(
                [unit.error for unit in self.layers[i+1].active_units])
            weights = layer.weight_matrix()[:layer.n_units]
            errors = layer.derivatives() * weights.dot(downstream)

            for unit, error in zip(layer.active_units, errors):
                unit.error = float(error)
            if layer.bias:
                layer.units[-1].error = 0.0

        # d(cost)/d(weight i->k) = -error_k * output_i
        for layer, following in zip(self.layers[:-1], self.layers[1:]):
            downstream = numpy.array(
                [unit.error for unit in following.active_units])
            for unit in layer.units:
                unit.gradient[:] = -downstream * unit.output

        self._apply_gradients(self.optimizer)

    def _apply_gradients(self, optimizer):
        """ Hand the raw gradients stored on each unit to `optimizer`,
        scaling them first if the optimizer expects a ready-made step
        """
        learning_rate = self.config.learning_rate

        if not optimizer.applies_learning_rate:
            for layer in self.layers[:-1]:
                for unit in layer.units:
                    unit.gradient *= -learning_rate

        optimizer.update(self.layers, learning_rate, self.config.momentum)

    def _check_compiled(self):
        if not self._is_compiled:
            raise NotCompiled("The network hasn't been compiled yet")

    def _validate_epochs(self, epochs):
        if (isinstance(epochs, bool) or
                not isinstance(epochs, (int, numpy.integer)) or epochs < 1):
            msg = "`epochs` must be an integer >= 1 (got {})"
            raise ConfigurationError(msg.format(epochs))

    def _validate_row(self, row, width, kind):
        try:
            row = numpy.asarray(row, dtype=float)
        except (TypeError, ValueError):
            msg = "The {} row must be numeric".format(kind)
            raise ShapeMismatch(msg)

        if row.ndim != 1 or row.shape[0] != width:
            msg = "The {} row has shape {} but the network expects ({},)"
            raise ShapeMismatch(msg.format(kind, row.shape, width))

        return row

    def _validate_matrix(self, data, width, kind):
        try:
            data = numpy.asarray(data, dtype=float)
        except (TypeError, ValueError):
            msg = "The {} data must be a numeric matrix".format(kind)
            raise ShapeMismatch(msg)

        if data.ndim != 2 or data.shape[0] == 0:
            msg = "The {} data must be a non-empty matrix (got shape {})"
            raise ShapeMismatch(msg.format(kind, data.shape))

        if data.shape[1] != width:
            msg = "The {} data has {} columns but the network expects {}"
            raise ShapeMismatch(msg.format(kind, data.shape[1], width))

        return data

    def _validate_dataset(self, inputs, outputs):
        inputs = self._validate_matrix(inputs, self.input_size, 'input')
        outputs = self._validate_matrix(outputs, self.output_size, 'output')

        if inputs.shape[0] != outputs.shape[0]:
            msg = "Row count mismatch: {} input rows, {} output rows"
            raise ShapeMismatch(msg.format(inputs.shape[0], outputs.shape[0]))

        return inputs, outputs
