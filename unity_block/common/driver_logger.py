import logging
import sys

from unity_block.common.config import config

logger_properties = {
    'log_level': config.logging.level,
    'entry': config.logging.entry
}


def get_stdout_logger():
    driver_logger = logging.getLogger(config.logging.name)

    if not getattr(driver_logger, 'handler_set', None):
        driver_logger.setLevel(logger_properties['log_level'])
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(logger_properties['entry'])
        handler.setFormatter(formatter)
        driver_logger.addHandler(handler)

        driver_logger.handler_set = True

    return driver_logger


def set_log_level(log_level_to_set):
    """
    In order to set non-default log level this function should be called before first cal of get_stdout_logger
    :param log_level_to_set:
    """
    if log_level_to_set:
        logger_properties['log_level'] = log_level_to_set.upper()
        driver_logger = logging.getLogger(config.logging.name)
        driver_logger.setLevel(logger_properties['log_level'])
