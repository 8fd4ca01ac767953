'''
PythagoreanModel Class

Result of one league-wide exponent fit.
'''

from dataclasses import dataclass
from typing import Dict, Any, Tuple
from .TeamSeasonSummary import TeamSeasonSummary


@dataclass(frozen=True)
class PythagoreanModel:
    '''
    A fitted Pythagorean exponent and the rows it was fit on

    * exponent: fitted exponent (k)
    * fit_rows: team-seasons used as regression input
    * mean_absolute_error: mean |actual wins - estimated wins| over fit_rows
    * standard_error: standard error of the exponent estimate
    '''
    exponent: float
    fit_rows: Tuple[TeamSeasonSummary, ...]
    mean_absolute_error: float
    standard_error: float = 0.0

    @property
    def n_rows(self) -> int:
        return len(self.fit_rows)

    def as_record(self) -> Dict[str, Any]:
        '''Return model summary as dictionary'''
        return {
            'exponent': round(self.exponent, 4),
            'standard_error': round(self.standard_error, 4),
            'mean_absolute_error': round(self.mean_absolute_error, 3),
            'n_rows': self.n_rows,
        }
