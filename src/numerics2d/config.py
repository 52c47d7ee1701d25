"""
Configuration & Numeric Constants
=================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (thresholds, minimum sizes)
   scattered throughout the numerical code.
2. Environment: It resolves the default logging level from the
   ``NUMERICS2D_LOG_LEVEL`` environment variable.

Exports:
    SMALLEST_NONZERO_FLOAT (float): Smallest positive (subnormal) float64.
    DEGENERATE_VARIANCE_THRESHOLD (float): Below this x-variance a regression is undefined.
    MIN_SPLINE_KNOTS (int): Minimum number of knots for a cubic spline.
    DEFAULT_LOG_LEVEL (int): Logging level used by `setup_logging` when none is given.
"""
import logging
import os

import numpy as np

LOG_LEVEL_ENV_VAR: str = "NUMERICS2D_LOG_LEVEL"


def get_log_level(default: int = logging.INFO) -> int:
    """
    Resolve the logging level from the environment.

    Args:
        default: Level returned when the variable is unset or unknown.

    Returns:
        A logging level as an integer.
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not name:
        return default

    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return default


# Global Constants
SMALLEST_NONZERO_FLOAT: float = float(np.finfo(np.float64).smallest_subnormal)
DEGENERATE_VARIANCE_THRESHOLD: float = 10 * SMALLEST_NONZERO_FLOAT
MIN_SPLINE_KNOTS: int = 3
DEFAULT_LOG_LEVEL: int = get_log_level()
