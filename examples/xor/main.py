""" Train two copies of the same XOR network, one with backpropagation and
one with finite differences, and compare the results.
"""
import logging

import numpy as np

from ffnn import Network, NetworkConfig
from ffnn.util.logger import setup_logging
from ffnn.util.report import compare_outputs, describe, format_float


logger = logging.getLogger('main')

setup_logging(filename='xor-log.txt')

random_state = np.random.RandomState(1234)


# The XOR dataset #############################################################

inputs = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=float)
outputs = np.array([[0], [1], [1], [0]], dtype=float)

# Build the network and a copy with identical weights #########################

config = NetworkConfig(
    weight_range=2.0,
    learning_rate=0.1,
    hidden_activation='tanh',
    output_activation='sigmoid',
)

network_bp = Network([2, 2, 1], config=config, random_state=random_state)
network_bp.compile()
network_fd = network_bp.clone()

print(describe(network_bp))

# Train #######################################################################

cost_bp = [network_bp.cost(inputs, outputs)]
cost_fd = [network_fd.cost(inputs, outputs)]

network_bp.train(inputs, outputs, epochs=20000)
network_fd.finite_difference(inputs, outputs, eps=1e-3, epochs=2000)

cost_bp.append(network_bp.cost(inputs, outputs))
cost_fd.append(network_fd.cost(inputs, outputs))

logger.info("Backpropagation cost: {:.7f} -> {:.7f}".format(*cost_bp))
logger.info("Finite difference cost: {:.7f} -> {:.7f}".format(*cost_fd))

print(compare_outputs(network_bp, inputs, outputs,
                      title="\nBackpropagation"))
print(compare_outputs(network_fd, inputs, outputs,
                      title="\nFinite difference"))

# Exact equality only holds once the outputs are rounded to the targets
for name, network in [('backpropagation', network_bp),
                      ('finite difference', network_fd)]:
    accuracy = np.mean(
        (network.predict(inputs).round() == outputs).all(axis=1))
    print("Accuracy with {} = {}%".format(
        name, format_float(100 * accuracy)))

network_bp.save('xor-network.pkl')
