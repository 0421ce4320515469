import sys
import logging

from loguru import logger as loguru_logger


LOG_FORMAT = "%(levelname)1.1s %(asctime)s %(name)s:%(lineno)-4d %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGURU_LOG_FORMAT = (
    "<level>{level:1.1s}</level> "
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> "
    "<cyan>{name}:{line:<4d}</cyan> <level>{message}</level>"
)


def _stderr_sink(message):
    # resolved on every write, stdout carries command output
    sys.stderr.write(message)


def _loguru_handler(sink=None) -> dict:
    return {
        "sink": sink or _stderr_sink,
        "colorize": sink is None and sys.stderr.isatty(),
        "format": LOGURU_LOG_FORMAT,
        "diagnose": False,
        "backtrace": False,
    }


class InterceptHandler(logging.Handler):
    """
    Forward stdlib logging records to loguru:
        https://github.com/Delgan/loguru#entirely-compatible-with-standard-logging
    """

    def emit(self, record):
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        loguru_logger.opt(depth=depth, exception=record.exc_info)\
            .log(level, record.getMessage())


def configure_logging(level=logging.INFO, enable_loguru=True, sink=None):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if enable_loguru:
        logging.basicConfig(handlers=[InterceptHandler()], level=level, force=True)
        loguru_logger.configure(handlers=[
            dict(_loguru_handler(sink), level=level),
        ])
    else:
        logging.basicConfig(
            level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT,
            stream=sink or sys.stderr, force=True)


if __name__ == '__main__':
    configure_logging(logging.DEBUG)
    LOG = logging.getLogger(__name__)
    LOG.debug('debug log')
    LOG.info('info log')
    LOG.warning('warning log')
    LOG.error('error log')
