import logging
import sys

LOGGER_NAME: str = "polyline_codec"
STDOUT_HANDLER_NAME: str = "polyline_codec.stdout"

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure logging for applications that want to see library output.

    Sends records from the package logger to stdout with timestamps, log levels, and module names.
    Calling it again replaces the stdout handler, so it can be used to change the level.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(STDOUT_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    package_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in package_logger.handlers if h.get_name() == STDOUT_HANDLER_NAME]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


# Library default: stay silent unless the application configures logging
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
