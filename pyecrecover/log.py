import logging

# The library never installs handlers. Applications decide where records go, see main.py.
logger = logging.getLogger('pyecrecover')


def get_logger(name: str) -> logging.Logger:
    if name.startswith('pyecrecover.'):
        name = name[12:]
    return logger.getChild(name)
