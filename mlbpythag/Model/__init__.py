'''
Model Module

Contains the record types, the exponent estimator, and the prediction classes.
'''

from .Types import Outcome
from .Errors import PythagoreanError, MalformedRecord, InsufficientData, UndefinedPrediction
from .GameLogRecord import GameLogRecord
from .TeamSeasonSummary import TeamSeasonSummary
from .PythagoreanModel import PythagoreanModel
from .PredictionResult import PredictionResult
from .WinPredictor import WinPredictor, predict_summary, mean_absolute_error
from .ExponentEstimator import ExponentEstimator
from .OneRunGameRecord import OneRunGameRecord
from .OneRunAnalyzer import OneRunAnalyzer

__all__ = [
    'Outcome',
    'PythagoreanError',
    'MalformedRecord',
    'InsufficientData',
    'UndefinedPrediction',
    'GameLogRecord',
    'TeamSeasonSummary',
    'PythagoreanModel',
    'PredictionResult',
    'WinPredictor',
    'predict_summary',
    'mean_absolute_error',
    'ExponentEstimator',
    'OneRunGameRecord',
    'OneRunAnalyzer'
]
