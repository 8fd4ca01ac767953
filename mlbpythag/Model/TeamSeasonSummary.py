'''
TeamSeasonSummary Class

Season totals for one team, plus the log-ratios used by the exponent fit.
'''

from dataclasses import dataclass
from typing import Dict, Any, Optional
from ..Utilities import log_ratio


@dataclass(frozen=True)
class TeamSeasonSummary:
    '''
    Represents one team's aggregated record for one season

    Rows whose log-ratios are undefined (no losses, no wins, no runs,
    or no runs allowed) are kept for display but flagged invalid so the
    estimator skips them
    '''
    team: str
    season: int
    runs: int
    runs_allowed: int
    wins: int
    losses: int

    @property
    def total_games(self) -> int:
        return self.wins + self.losses

    @property
    def win_pct(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.wins / self.total_games

    @property
    def log_win_ratio(self) -> Optional[float]:
        '''ln(wins / losses), None when undefined'''
        return log_ratio(self.wins, self.losses)

    @property
    def log_run_ratio(self) -> Optional[float]:
        '''ln(runs / runs_allowed), None when undefined'''
        return log_ratio(self.runs, self.runs_allowed)

    @property
    def is_valid(self) -> bool:
        '''Whether the row can be used as regression input'''
        return self.log_win_ratio is not None and self.log_run_ratio is not None

    def as_record(self) -> Dict[str, Any]:
        '''Return summary as dictionary'''
        return {
            'team': self.team,
            'season': self.season,
            'runs': self.runs,
            'runs_allowed': self.runs_allowed,
            'wins': self.wins,
            'losses': self.losses,
            'total_games': self.total_games,
            'win_pct': self.win_pct,
            'log_win_ratio': self.log_win_ratio,
            'log_run_ratio': self.log_run_ratio,
            'is_valid': self.is_valid,
        }
