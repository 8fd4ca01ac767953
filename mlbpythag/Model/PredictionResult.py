'''
PredictionResult Class

Estimated versus actual wins for one team-season.
'''

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class PredictionResult:
    '''Represents the model's estimate for one team-season'''
    team: str
    season: int
    estimated_win_pct: float
    estimated_wins: int
    actual_wins: int
    total_games: int

    @property
    def residual(self) -> int:
        '''Actual wins minus estimated wins'''
        return self.actual_wins - self.estimated_wins

    def as_record(self) -> Dict[str, Any]:
        '''Return prediction as dictionary'''
        return {
            'team': self.team,
            'season': self.season,
            'total_games': self.total_games,
            'estimated_win_pct': round(self.estimated_win_pct, 4),
            'estimated_wins': self.estimated_wins,
            'actual_wins': self.actual_wins,
            'residual': self.residual,
        }
