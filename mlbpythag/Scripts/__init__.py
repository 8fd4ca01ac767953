'''
Scripts Module

Convenience functions for running standard workflows.
'''

from .optimize_models import optimize_exponent
from .run_models import run, load_game_logs

__all__ = [
    'optimize_exponent',
    'run',
    'load_game_logs',
]
