"""Logging helpers for the parser."""
import logging
import sys


class _StderrStream:
    """Writes to whatever ``sys.stderr`` is at the time of the call.

    Looked up lazily so a swapped stream (test runners, CLI capture) still
    receives the records.
    """

    def write(self, data):
        return sys.stderr.write(data)

    def flush(self):
        return sys.stderr.flush()


stderr_stream = _StderrStream()

default_handler = logging.StreamHandler(stderr_stream)
default_handler.setFormatter(
    logging.Formatter("[%(asctime)s] %(levelname)s in %(module)s: %(message)s")
)


def _logger_chain(logger):
    """Yield ``logger`` and the ancestors its records propagate to."""
    while logger is not None:
        yield logger
        if not logger.propagate:
            return
        logger = logger.parent


def has_level_handler(logger):
    """Check whether some handler on the propagation chain would emit
    records at the logger's effective level.
    """
    level = logger.getEffectiveLevel()
    return any(
        handler.level <= level
        for current in _logger_chain(logger)
        for handler in current.handlers
    )


def create_logger(parser):
    """Return the logger named by ``parser.config["LOGGER_NAME"]``.

    With ``DEBUG`` set and no explicit level, the level becomes DEBUG. The
    :data:`default_handler` is only added when nothing in the chain would
    emit the records already.
    """
    logger = logging.getLogger(str(parser.config["LOGGER_NAME"]))
    if parser.debug and not logger.level:
        logger.setLevel(logging.DEBUG)
    if not has_level_handler(logger):
        logger.addHandler(default_handler)
    return logger
