import logging
import os
import pickle

from ffnn.core.exception import PersistenceError


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


def dumps(network):
    """ Serialize a network (architecture, hyperparameters and every
    weight) into bytes
    """
    _check_network(network)
    try:
        return pickle.dumps(network)
    except (pickle.PicklingError, TypeError, AttributeError) as e:
        raise PersistenceError("Couldn't serialize the network") from e


def loads(data):
    """ Restore a network from the bytes produced by `dumps`
    """
    try:
        network = pickle.loads(data)
    except (pickle.UnpicklingError, EOFError, AttributeError,
            ImportError, IndexError, TypeError, ValueError) as e:
        raise PersistenceError("Couldn't read a network from the stream") \
            from e

    _check_network(network)
    return network


def save_network(network, filename):
    """ Pickle `network` to `filename`
    """
    data = dumps(network)
    try:
        with open(filename, 'wb') as f:
            f.write(data)
    except OSError as e:
        msg = "Couldn't write the network to {}".format(filename)
        raise PersistenceError(msg) from e

    logger.info("Saved network to {}".format(filename))


def load_network(filename):
    """ Unpickle a network from `filename`
    """
    if not os.path.exists(filename):
        msg = "Network file {} doesn't exist".format(filename)
        raise PersistenceError(msg)

    try:
        with open(filename, 'rb') as f:
            data = f.read()
    except OSError as e:
        msg = "Couldn't read the network from {}".format(filename)
        raise PersistenceError(msg) from e

    network = loads(data)
    logger.info("Loaded network from {}".format(filename))
    return network


def _check_network(obj):
    from ffnn.core.network import Network

    if not isinstance(obj, Network):
        msg = "Expected a Network but got {}"
        raise PersistenceError(msg.format(type(obj)))
