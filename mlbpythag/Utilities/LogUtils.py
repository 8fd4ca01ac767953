'''
LogUtils Module

Logging setup for scripts. Library modules only create module-level loggers.
'''

import logging
import sys


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    '''
    Configure the package logger to write to stdout

    Parameters:
    * level: Logging level (default INFO)

    Returns:
    * The configured package logger
    '''
    logger = logging.getLogger('mlbpythag')
    logger.setLevel(level)
    ## avoid duplicate handlers if called multiple times ##
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
