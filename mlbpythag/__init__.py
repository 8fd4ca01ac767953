'''
mlbpythag - Pythagorean Win Expectation for MLB Team Seasons

A Python package that rolls team game logs up to season totals, fits a single
league-wide Pythagorean exponent with a zero-intercept log-linear regression,
and measures how well the fitted formula predicts actual win totals. One-run
game records are broken out to help explain the residuals.
'''

__version__ = '0.1.0'

## import main classes for easy access ##
from .Data import GameLogIngestor, SeasonAggregator, DataSplitter
from .Model import (
    Outcome, GameLogRecord, TeamSeasonSummary, PythagoreanModel, PredictionResult,
    OneRunGameRecord, ExponentEstimator, WinPredictor, OneRunAnalyzer,
    PythagoreanError, MalformedRecord, InsufficientData, UndefinedPrediction
)
from .Performance import PredictionGrader
from .Optimizer import ModelConfig, ModelParam, ExponentOptimizer
from .Utilities import pythagorean_win_pct, configure_logging
from .Scripts import optimize_exponent, run

__all__ = [
    ## data classes ##
    'GameLogIngestor',
    'SeasonAggregator',
    'DataSplitter',
    ## model classes ##
    'Outcome',
    'GameLogRecord',
    'TeamSeasonSummary',
    'PythagoreanModel',
    'PredictionResult',
    'OneRunGameRecord',
    'ExponentEstimator',
    'WinPredictor',
    'OneRunAnalyzer',
    ## errors ##
    'PythagoreanError',
    'MalformedRecord',
    'InsufficientData',
    'UndefinedPrediction',
    ## performance classes ##
    'PredictionGrader',
    ## optimizer classes ##
    'ModelConfig',
    'ModelParam',
    'ExponentOptimizer',
    ## utility functions ##
    'pythagorean_win_pct',
    'configure_logging',
    ## convenience scripts ##
    'optimize_exponent',
    'run',
]
