'''
Optimizer Module

Classes for configuration and direct exponent optimization.
'''

from .ModelConfig import ModelConfig, ModelParam
from .ExponentOptimizer import ExponentOptimizer

__all__ = [
    'ModelConfig',
    'ModelParam',
    'ExponentOptimizer'
]
