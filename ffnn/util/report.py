import numpy


INDENT = "    "


def format_float(value, decimals=6):
    """ Format `value` with at most `decimals` decimals and no trailing
    zeros, e.g., 0.5 -> '0.5', 1.0 -> '1'
    """
    text = "{:.{}f}".format(value, decimals).rstrip('0').rstrip('.')
    return "0" if text in ("-0", "") else text


def describe(network):
    """ Returns a multi-line description of the network's hyperparameters
    and architecture
    """
    config = network.config

    if network.is_compiled:
        hidden = network.hidden_layers[0].activation.name
        output = network.output_layer.activation.name
    else:
        hidden = config.make_hidden_activation().name
        output = config.make_output_activation().name

    lines = [
        "Network = [",
        INDENT + "Bias: {}".format(bool(config.bias)),
        INDENT + "Learning rate: {}".format(config.learning_rate),
        INDENT + "Weight range: {}".format(config.weight_range),
        INDENT + "Hidden activation: {}".format(hidden),
        INDENT + "Output activation: {}".format(output),
        INDENT + "Optimizer: {}".format(network.optimizer),
        INDENT + "Architecture: {{{}}}".format(
            ", ".join(str(size) for size in network.architecture)),
        INDENT + "Compiled: {}".format(network.is_compiled),
        "]",
    ]
    return "\n".join(lines)


def compare_outputs(network, inputs, outputs, title=None):
    """ Returns a table with one line per row of the dataset showing the
    inputs, the expected outputs and the network's outputs
    """
    inputs = numpy.atleast_2d(numpy.asarray(inputs, dtype=float))
    outputs = numpy.atleast_2d(numpy.asarray(outputs, dtype=float))
    predictions = network.predict(inputs)

    width = len(str(len(inputs) - 1))
    lines = [] if title is None else [title]

    for i, (x, y, p) in enumerate(zip(inputs, outputs, predictions)):
        lines.append("Row {:0{}d} | {} - {} | Network -> {}".format(
            i, width,
            " ".join(format_float(v) for v in x),
            " ".join(format_float(v) for v in y),
            " ".join(format_float(v) for v in p),
        ))

    return "\n".join(lines)
