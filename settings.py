"""
Project-wide constants and logging setup.
"""

import logging

# A reported segment joins at least this many collinear points
MIN_SEGMENT_POINTS = 4

# Random input generation for the command line front end
DEFAULT_GRID_SIZE = 20  # coordinates drawn from [0, grid)
DEFAULT_SEED = 42

DETECTION_METHODS = ["fast", "brute"]
DEFAULT_DETECTION_METHOD = "fast"

LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


def configure_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else LOGGING_CONFIG["level"]
    logging.basicConfig(level=level, format=LOGGING_CONFIG["format"])
