import matplotlib.pyplot as plt

from ffnn import load_network
from ffnn.visualize import draw_network


network = load_network('xor-network.pkl')
network.forward([1, 0])

ax = draw_network(network)
ax.set_title("XOR network, input (1, 0)")

plt.show()
