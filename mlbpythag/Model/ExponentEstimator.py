'''
ExponentEstimator Class

Fits the league-wide Pythagorean exponent with a zero-intercept log-linear regression.
'''

import logging
from typing import Iterable, List
import numpy as np

from .Errors import InsufficientData
from .PythagoreanModel import PythagoreanModel
from .TeamSeasonSummary import TeamSeasonSummary
from .WinPredictor import predict_summary, mean_absolute_error

logger = logging.getLogger(__name__)

MIN_FIT_ROWS = 2


class ExponentEstimator:
    '''
    Fits k in ln(W/L) = k * ln(R/RA) by ordinary least squares through the origin

    A team that scores and allows the same number of runs is expected to
    play .500 ball, so the regression has no intercept and the solution is
    k = sum(x * y) / sum(x^2)
    '''

    def __init__(self):
        self.model: PythagoreanModel = None

    @staticmethod
    def select_rows(summaries: Iterable[TeamSeasonSummary]) -> List[TeamSeasonSummary]:
        '''
        Keep only rows with defined log-ratios, ordered by (team, season)

        The fixed order makes the floating point sums, and so the fit,
        independent of input order
        '''
        return sorted(
            [s for s in summaries if s.is_valid],
            key=lambda s: (s.team, s.season)
        )

    def fit(self, summaries: Iterable[TeamSeasonSummary]) -> PythagoreanModel:
        '''
        Fit the exponent over all valid team-seasons

        Parameters:
        * summaries: League-wide team-season summaries. Invalid rows are ignored

        Returns:
        * PythagoreanModel with the exponent, fit rows, and win MAE
        '''
        ## a failed fit leaves no model behind ##
        self.model = None
        rows = self.select_rows(summaries)
        if len(rows) < MIN_FIT_ROWS:
            raise InsufficientData(
                f'Need at least {MIN_FIT_ROWS} valid team-seasons to fit, got {len(rows)}'
            )
        x = np.array([r.log_run_ratio for r in rows], dtype=float)
        y = np.array([r.log_win_ratio for r in rows], dtype=float)
        sxx = float(np.dot(x, x))
        if sxx == 0.0:
            raise InsufficientData(
                'Run ratios have no variance (every team scored exactly as many runs as it allowed)'
            )
        exponent = float(np.dot(x, y)) / sxx
        ## standard error of a no-intercept slope ##
        resid = y - exponent * x
        standard_error = float(np.sqrt(np.dot(resid, resid) / (len(rows) - 1) / sxx))
        ## score the fit in wins ##
        predictions = [predict_summary(r, exponent) for r in rows]
        mae = mean_absolute_error(predictions)
        self.model = PythagoreanModel(
            exponent=exponent,
            fit_rows=tuple(rows),
            mean_absolute_error=mae,
            standard_error=standard_error,
        )
        logger.info(
            'Fit exponent %.4f (se %.4f) on %d team-seasons, MAE %.3f wins',
            exponent, standard_error, len(rows), mae
        )
        return self.model
