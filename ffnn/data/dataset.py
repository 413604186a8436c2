""" Dataset utilities: reading numeric CSV files, column statistics,
splitting a dataset into network inputs and outputs, and train/test
partitions.

A dataset is a 2D float array with one example per row, the input columns
first and the output columns last.
"""
from collections import namedtuple
import logging
import os

import numpy


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


ColumnSummary = namedtuple(
    'ColumnSummary',
    ['mean', 'median', 'mode', 'maximum', 'minimum', 'std'])


def load_csv(path, delimiter=',', skip_header=0):
    """ Read a numeric CSV file into a 2D float array

    Parameters
    ----------
    path: str
        Location of the file.

    delimiter: str, default=','

    skip_header: int, default=0
        Number of lines to skip at the top of the file, e.g., 1 for a
        header line.

    Returns
    -------
    data: ndarray, shape=(n_rows, n_columns)
        Rows holding any non-numeric field are dropped.
    """
    if not os.path.exists(path):
        msg = "Provided `path` {} doesn't exist"
        raise ValueError(msg.format(path))

    data = numpy.genfromtxt(path, delimiter=delimiter,
                            skip_header=skip_header, dtype=float, ndmin=2)

    n_rows = data.shape[0]
    data = drop_non_numeric(data)

    if data.shape[0] < n_rows:
        logger.info("Dropped {:d} non-numeric rows from {}".format(
            n_rows - data.shape[0], path))

    return data


def drop_non_numeric(data):
    """ Remove the rows of `data` holding a NaN, which is how non-numeric
    CSV fields are parsed
    """
    data = numpy.asarray(data, dtype=float)
    if data.ndim != 2:
        raise ValueError("`data` must be 2D (got {}D)".format(data.ndim))

    return data[~numpy.isnan(data).any(axis=1)]


def _check_data(data):
    data = numpy.asarray(data, dtype=float)
    if data.ndim != 2 or data.shape[0] == 0:
        msg = "`data` must be a non-empty 2D array (got shape {})"
        raise ValueError(msg.format(data.shape))
    return data


def split_columns(data, n_inputs):
    """ Split a dataset into network inputs and expected outputs

    Parameters
    ----------
    data: ndarray, shape=(n_rows, n_columns)

    n_inputs: int
        The first `n_inputs` columns are inputs and the rest are outputs.
        Must be in `[1, n_columns - 1]`.

    Returns
    -------
    inputs, outputs: ndarray, ndarray
    """
    data = _check_data(data)
    n_columns = data.shape[1]

    if not 1 <= n_inputs <= n_columns - 1:
        msg = "`n_inputs` must be in [1, {}] (got {})"
        raise ValueError(msg.format(n_columns - 1, n_inputs))

    return data[:, :n_inputs].copy(), data[:, n_inputs:].copy()


def shuffle(data, random_state=None):
    """ Returns a copy of `data` with its rows randomly permuted
    """
    data = _check_data(data)
    random_state = random_state or numpy.random.RandomState()
    return data[random_state.permutation(data.shape[0])]


def train_test_split(data, test_size, random_state=None):
    """ Randomly partition the rows of `data` into a training and a
    testing set

    Parameters
    ----------
    data: ndarray, shape=(n_rows, n_columns)

    test_size: float
        The fraction of rows used for testing, in the open interval (0, 1).

    random_state: numpy.random.RandomState, default=None
        Provide a RandomState object for reproducible results.

    Returns
    -------
    train, test: ndarray, ndarray
        Both hold at least one row.
    """
    data = _check_data(data)

    if not 0 < test_size < 1:
        msg = "`test_size` must be in (0, 1) (got {})"
        raise ValueError(msg.format(test_size))

    n_rows = data.shape[0]
    if n_rows < 2:
        raise ValueError("At least two rows are needed to split `data`")

    n_test = int(round(test_size * n_rows))
    n_test = min(max(n_test, 1), n_rows - 1)

    shuffled = shuffle(data, random_state=random_state)
    return shuffled[n_test:], shuffled[:n_test]


def normalize(data):
    """ Returns a copy of `data` with each column min-max scaled to [0, 1]

    Constant columns can't be scaled and are copied unchanged.
    """
    data = _check_data(data)

    minimum = data.min(axis=0)
    spread = data.max(axis=0) - minimum
    constant = spread == 0

    scaled = (data - minimum) / numpy.where(constant, 1.0, spread)
    scaled[:, constant] = data[:, constant]

    if constant.any():
        logger.info("Left {:d} constant columns unscaled".format(
            int(constant.sum())))

    return scaled


def column_summary(data, column):
    """ Compute summary statistics of one column of `data`

    The mode is the smallest of the most frequent values and the standard
    deviation is the population one.

    Returns
    -------
    summary: ColumnSummary
    """
    data = _check_data(data)

    if not -data.shape[1] <= column < data.shape[1]:
        msg = "Column index {} is out of range for {} columns"
        raise IndexError(msg.format(column, data.shape[1]))

    values = data[:, column]
    unique, counts = numpy.unique(values, return_counts=True)

    return ColumnSummary(
        mean=float(values.mean()),
        median=float(numpy.median(values)),
        mode=float(unique[numpy.argmax(counts)]),
        maximum=float(values.max()),
        minimum=float(values.min()),
        std=float(values.std()),
    )
