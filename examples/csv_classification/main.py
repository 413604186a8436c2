""" Fit a softmax classifier to a CSV file whose last `n_classes` columns
are one-hot class labels, then report the test accuracy with an argmax
copy of the network.

Usage: python main.py data.csv n_classes
"""
import dataclasses
import logging
import sys

import numpy as np

from ffnn import Network, NetworkConfig
from ffnn.data import dataset
from ffnn.util.logger import setup_logging


logger = logging.getLogger('main')

setup_logging(filename='csv-classification-log.txt')

random_state = np.random.RandomState(1234)

filename, n_classes = sys.argv[1], int(sys.argv[2])

# Load and split the data #####################################################

data = dataset.load_csv(filename, skip_header=1)
n_inputs = data.shape[1] - n_classes

for column in range(n_inputs):
    logger.info("Column {:d}: {}".format(
        column, dataset.column_summary(data, column)))

# One-hot label columns already span [0, 1] and are unchanged
data = dataset.normalize(data)

train, test = dataset.train_test_split(data, 0.25, random_state=random_state)
x_train, y_train = dataset.split_columns(train, n_inputs)
x_test, y_test = dataset.split_columns(test, n_inputs)

# Fit the model ###############################################################

config = NetworkConfig(
    weight_range=0.5,
    learning_rate=0.001,
    hidden_activation='tanh',
    output_activation='softmax',
    optimizer='rmsprop',
)
network = Network.from_sizes(n_inputs, 16, n_classes, hidden_layer_count=2,
                             config=config, random_state=random_state)
network.compile()
network.train(x_train, y_train, epochs=100, verbose=True)

# Swap the softmax for an argmax so the outputs are one-hot ###################

argmax_config = dataclasses.replace(config, output_activation='argmax')
argmax_network = Network(network.architecture, config=argmax_config)
argmax_network.compile()
for layer, trained in zip(argmax_network.layers, network.layers):
    for unit, trained_unit in zip(layer.units, trained.units):
        unit.weights[:] = trained_unit.weights

logger.info("Train accuracy: {:.3f}".format(
    argmax_network.accuracy(x_train, y_train)))
logger.info("Test accuracy: {:.3f}".format(
    argmax_network.accuracy(x_test, y_test)))
