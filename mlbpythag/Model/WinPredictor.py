'''
WinPredictor Class

Applies a fitted exponent to team-season run totals to estimate wins.
'''

import logging
from typing import Iterable, List, Sequence
import numpy as np
import pandas as pd

from .Errors import UndefinedPrediction
from .PythagoreanModel import PythagoreanModel
from .PredictionResult import PredictionResult
from .TeamSeasonSummary import TeamSeasonSummary
from ..Utilities import pythagorean_win_pct

logger = logging.getLogger(__name__)


def predict_summary(summary: TeamSeasonSummary, exponent: float) -> PredictionResult:
    '''
    Estimate wins for a single team-season

    Estimated wins use round-half-to-even (Python's round), the same
    convention pandas and numpy use, so 80.5 -> 80 and 81.5 -> 82

    Parameters:
    * summary: Team-season to predict (validity flag is not required)
    * exponent: Pythagorean exponent

    Returns:
    * PredictionResult for the team-season
    '''
    if summary.runs == 0 and summary.runs_allowed == 0:
        raise UndefinedPrediction(
            f'{summary.team} {summary.season}: no runs scored or allowed'
        )
    win_pct = pythagorean_win_pct(summary.runs, summary.runs_allowed, exponent)
    return PredictionResult(
        team=summary.team,
        season=summary.season,
        estimated_win_pct=win_pct,
        estimated_wins=int(round(win_pct * summary.total_games)),
        actual_wins=summary.wins,
        total_games=summary.total_games,
    )


def mean_absolute_error(results: Sequence[PredictionResult]) -> float:
    '''
    Mean absolute residual across a prediction set

    Returns NaN for an empty set
    '''
    if len(results) == 0:
        return float('nan')
    return float(np.mean([abs(r.residual) for r in results]))


class WinPredictor:
    '''Estimates win totals and residuals from a fitted PythagoreanModel'''

    def __init__(self, model: PythagoreanModel):
        '''
        Initialize predictor

        Parameters:
        * model: Fitted PythagoreanModel
        '''
        self.model = model
        ## storage ##
        self.results: List[PredictionResult] = []
        self.undefined: List[TeamSeasonSummary] = []

    @property
    def exponent(self) -> float:
        return self.model.exponent

    def predict(self, summary: TeamSeasonSummary) -> PredictionResult:
        '''Predict one team-season, raising UndefinedPrediction when 0 runs both ways'''
        return predict_summary(summary, self.exponent)

    def predict_all(self, summaries: Iterable[TeamSeasonSummary]) -> List[PredictionResult]:
        '''
        Predict every team-season in the batch

        Undefined predictions are logged and kept in self.undefined
        rather than aborting the batch

        Returns:
        * List of PredictionResult for the rows that could be predicted
        '''
        self.results = []
        self.undefined = []
        for summary in summaries:
            try:
                self.results.append(self.predict(summary))
            except UndefinedPrediction as e:
                logger.warning('Skipping prediction: %s', e)
                self.undefined.append(summary)
        return self.results

    def mean_absolute_error(self) -> float:
        '''Headline error statistic over the last predict_all batch'''
        return mean_absolute_error(self.results)

    def get_results_df(self) -> pd.DataFrame:
        '''Return results as DataFrame'''
        return pd.DataFrame(
            [r.as_record() for r in self.results],
            columns=[
                'team', 'season', 'total_games', 'estimated_win_pct',
                'estimated_wins', 'actual_wins', 'residual'
            ]
        )
