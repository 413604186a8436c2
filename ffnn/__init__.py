# flake8: noqa

from ffnn.core.config import NetworkConfig
from ffnn.core.exception import (
    AlreadyCompiled,
    ConfigurationError,
    NotCompiled,
    PersistenceError,
    ShapeMismatch,
)
from ffnn.core.network import Network
from ffnn.util.persistence import load_network, save_network
