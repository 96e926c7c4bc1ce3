import sys

from loguru import logger

from .config import Config


VERBOSE = Config.VERBOSE
LOG_PATH = Config.LOG_PATH
LOG_LEVEL = Config.LOG_LEVEL
LOG_ROTATION = Config.LOG_ROTATION
LOG_RETENTION = Config.LOG_RETENTION

PACKAGE = "transmission_session_rpc"


def configure_logging(verbose=VERBOSE, log_path=LOG_PATH, level=LOG_LEVEL):
    """
    Replace the loguru sinks with the configured ones.

    Records from this package are disabled when neither a log file nor
    console output is configured. Returns the ids of the added handlers.
    """
    logger.remove()
    handler_ids = []

    # Log to a file
    if log_path:
        handler_ids.append(logger.add(
            log_path,
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            level=level,
        ))

    # Log to console
    if verbose:
        handler_ids.append(logger.add(
            sink=sys.stderr,
            level=level,
        ))

    if handler_ids:
        logger.enable(PACKAGE)
    else:
        logger.disable(PACKAGE)
    return handler_ids


configure_logging()
