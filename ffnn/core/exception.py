class ConfigurationError(ValueError):
    """ Raised when a network, its hyperparameters or the data supplied to
    it are invalid
    """


class NotCompiled(ConfigurationError):
    """ Raised when trying to use a network before `compile` was called
    """


class AlreadyCompiled(ConfigurationError):
    """ Raised when compiling a network that has already been compiled
    """


class ShapeMismatch(ConfigurationError):
    """ Raised when the width of the supplied data doesn't match the
    compiled layer sizes
    """


class PersistenceError(Exception):
    """ Raised when a network can't be written to or read from storage
    """
