import numpy

from ffnn.activation.activation_base import LayerWideMode


class Argmax(LayerWideMode):
    """ Sets the output of the unit with the largest raw sum to 1 and all
    others to 0. The first occurrence wins on ties.
    """
    name = 'argmax'
    code = 10

    def apply(self, sums):
        sums = numpy.asarray(sums, dtype=float)
        outputs = numpy.zeros_like(sums)
        outputs[numpy.argmax(sums)] = 1.0
        return outputs


class Softmax(LayerWideMode):
    """ Normalizes the raw sums of the layer into a probability
    distribution, exp(s_i) / sum_j exp(s_j)
    """
    name = 'softmax'
    code = 11

    def apply(self, sums):
        sums = numpy.asarray(sums, dtype=float)
        # Shift by the max for stability; the ratio is unchanged
        e = numpy.exp(sums - sums.max())
        return e / e.sum()
