'''
Performance Module

Contains classes for grading model predictions.
'''

from .PredictionGrader import PredictionGrader

__all__ = [
    'PredictionGrader'
]
