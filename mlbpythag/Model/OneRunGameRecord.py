'''
OneRunGameRecord Class

A team's record in games decided by exactly one run, for one season.
'''

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class OneRunGameRecord:
    '''Represents one season of one-run games for a team'''
    team: str
    season: int
    one_run_wins: int = 0
    one_run_losses: int = 0

    @property
    def record(self) -> str:
        '''Formatted "W-L" record'''
        return f'{self.one_run_wins}-{self.one_run_losses}'

    @property
    def games(self) -> int:
        return self.one_run_wins + self.one_run_losses

    @property
    def win_pct(self) -> Optional[float]:
        if self.games == 0:
            return None
        return self.one_run_wins / self.games

    def as_record(self) -> Dict[str, Any]:
        '''Return one-run record as dictionary'''
        return {
            'team': self.team,
            'season': self.season,
            'one_run_wins': self.one_run_wins,
            'one_run_losses': self.one_run_losses,
            'record': self.record,
        }
