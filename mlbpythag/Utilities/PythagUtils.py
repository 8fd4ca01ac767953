'''
PythagUtils Module

Utility functions for Pythagorean win expectation calculations.
'''

import math
from typing import Optional


def pythagorean_win_pct(runs: float, runs_allowed: float, exponent: float) -> float:
    '''
    Calculate expected win percentage from runs scored and allowed

    Uses the Pythagorean formula: R^k / (R^k + RA^k), evaluated on the
    ratio RA/R so the result depends only on the run ratio

    Parameters:
    * runs: Runs scored
    * runs_allowed: Runs allowed
    * exponent: Pythagorean exponent (k)

    Returns:
    * Expected win percentage (0 to 1). NaN when both inputs are zero,
      which callers must treat as undefined
    '''
    if runs == 0 and runs_allowed == 0:
        return float('nan')
    if runs_allowed == 0:
        return 1.0
    if runs == 0:
        return 0.0
    return 1.0 / (1.0 + (runs_allowed / runs) ** exponent)


def log_ratio(numerator: float, denominator: float) -> Optional[float]:
    '''
    Natural log of numerator / denominator

    Returns None when the ratio or its log is undefined (either side is zero)
    '''
    if numerator <= 0 or denominator <= 0:
        return None
    return math.log(numerator / denominator)
