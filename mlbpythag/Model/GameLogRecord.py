'''
GameLogRecord Class

One game from one team's perspective, normalized from a raw game log entry.
'''

from dataclasses import dataclass
from typing import Dict, Any, Optional
from .Types import Outcome


@dataclass(frozen=True)
class GameLogRecord:
    '''Represents a single played game for a team'''
    team: str
    season: int
    game_number: int
    runs: int
    runs_allowed: int
    outcome: Outcome
    ## marker suffix such as 'wo' for walk-offs ##
    result_detail: Optional[str] = None
    opponent: Optional[str] = None
    is_home: Optional[bool] = None
    date: Optional[str] = None

    @property
    def margin(self) -> int:
        '''Run margin from this team's perspective'''
        return self.runs - self.runs_allowed

    def as_record(self) -> Dict[str, Any]:
        '''Return game as dictionary'''
        return {
            'team': self.team,
            'season': self.season,
            'game_number': self.game_number,
            'date': self.date,
            'opponent': self.opponent,
            'is_home': self.is_home,
            'runs': self.runs,
            'runs_allowed': self.runs_allowed,
            'outcome': self.outcome.value,
            'result_detail': self.result_detail,
        }
