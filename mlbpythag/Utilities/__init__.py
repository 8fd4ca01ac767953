'''
Utilities Module

Contains helper functions for the Pythagorean model.
'''

from .PythagUtils import pythagorean_win_pct, log_ratio
from .LogUtils import configure_logging

__all__ = [
    'pythagorean_win_pct',
    'log_ratio',
    'configure_logging',
]
