import matplotlib.pyplot as plt
import numpy as np


def draw_network(
        network, ax=None,
        unit_kwargs=dict(s=400, cmap=plt.cm.viridis, edgecolors='k',
                         zorder=2),
        positive_color='tab:blue', negative_color='tab:red',
        max_linewidth=4.0):
    """ Draw the units and connections of a compiled network. The network
    is only read, never modified.

    Parameters
    ----------
    network: Network
        A compiled network.

    ax: matplotlib Axes, default=None
        The axes to draw on. A new figure is created if None.

    unit_kwargs: args
        Any keyword arguments that can be passed to
        `matplotlib.pyplot.scatter`. Units are colored by their output.

    positive_color, negative_color: str
        Colors of connections with positive and negative weights.

    max_linewidth: float, default=4.0
        Line width of the connection with the largest absolute weight.

    Returns
    -------
    ax: matplotlib Axes
    """
    if not network.is_compiled:
        raise ValueError("Only compiled networks can be drawn.")

    if ax is None:
        fig = plt.figure(figsize=(8, 6))
        ax = fig.add_subplot(111)

    layers = network.layers
    max_len = max(len(layer) for layer in layers)

    # Unit coordinates, each layer centered vertically
    positions = []
    for i, layer in enumerate(layers):
        n = len(layer)
        y = np.arange(n)[::-1] - (n - 1) / 2.0 + (max_len - 1) / 2.0
        positions.append(np.c_[np.full(n, float(i)), y])

    weights = network.weights()
    wmax = max([np.abs(w).max() for w in weights if w.size] + [1e-12])

    for i, w in enumerate(weights):
        following = layers[i+1]
        for j in range(w.shape[0]):
            for k in range(following.n_units):
                x0, y0 = positions[i][j]
                x1, y1 = positions[i+1][k]
                color = positive_color if w[j, k] >= 0 else negative_color
                ax.plot([x0, x1], [y0, y1], c=color, zorder=1,
                        lw=max_linewidth * abs(w[j, k]) / wmax)

    for i, layer in enumerate(layers):
        outputs = layer.outputs
        ax.scatter(positions[i][:, 0], positions[i][:, 1], c=outputs,
                   **unit_kwargs)

        if layer.bias:
            x, y = positions[i][-1]
            ax.annotate('bias', (x, y), textcoords='offset points',
                        xytext=(0, -22), ha='center', fontsize=8)

    names = (['input'] +
             ['hidden {}'.format(i+1) for i in range(len(layers) - 2)] +
             ['output'])
    ax.set_xticks(np.arange(len(layers)))
    ax.set_xticklabels(names)
    ax.set_yticks([])
    ax.set_xlim(-0.5, len(layers) - 0.5)
    ax.set_ylim(-1, max_len)
    for spine in ax.spines.values():
        spine.set_visible(False)

    return ax
