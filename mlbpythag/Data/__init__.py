'''
Data Module

Contains classes for normalizing game logs, aggregating team-seasons, and splitting data.
'''

from .GameLogIngestor import GameLogIngestor
from .SeasonAggregator import SeasonAggregator
from .DataSplitter import DataSplitter

__all__ = [
    'GameLogIngestor',
    'SeasonAggregator',
    'DataSplitter'
]
