import logging
import os


LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting, file location, etc

    Parameters
    ----------
    filename: str, default=None
        If given, the log is (over)written to this file.

    stdout: bool, default=True
        If True, log records are also written to the console.

    level: int, default=logging.INFO
        The level of the root logger.
    """
    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    if filename is not None:
        if os.path.exists(filename):
            os.remove(filename)

        fhandler = logging.FileHandler(filename, mode='w')
        fhandler.setFormatter(formatter)
        root.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        root.addHandler(shandler)

    return root


def progress(logger, msg, i, n):
    """ Log `msg` at info level with an `(i / n)` counter prepended
    """
    fmt = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
    logger.info(fmt % i)
