"""
Logging configuration for the rewards updater.
"""

import logging
import sys

# Create logger
logger = logging.getLogger('rocket_pass')
logger.setLevel(logging.INFO)

# Console handler with formatting
console = logging.StreamHandler(sys.stdout)
console.setLevel(logging.DEBUG)

formatter = logging.Formatter(
    '%(asctime)s | %(levelname)-5s | %(name)s | %(message)s',
    datefmt='%H:%M:%S'
)
console.setFormatter(formatter)

logger.addHandler(console)


def configure(verbose: bool = False):
    """Switch the package logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


# Component-specific loggers
def get_component_logger(name):
    """Get a child logger for a specific component."""
    return logger.getChild(name)
