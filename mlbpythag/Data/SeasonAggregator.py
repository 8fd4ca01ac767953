'''
SeasonAggregator Class

Rolls normalized game records up to one summary row per team-season.
'''

import logging
from typing import Iterable, List

import pandas as pd

from ..Model import GameLogRecord, Outcome, TeamSeasonSummary

logger = logging.getLogger(__name__)


class SeasonAggregator:
    '''Aggregate games to team-season totals'''

    def __init__(self, games: Iterable[GameLogRecord]):
        '''
        Initialize aggregator and aggregate the full input

        Parameters:
        * games: Every GameLogRecord across all teams and seasons
        '''
        self.games: pd.DataFrame = pd.DataFrame(
            [g.as_record() for g in games],
            columns=[
                'team', 'season', 'game_number', 'date', 'opponent', 'is_home',
                'runs', 'runs_allowed', 'outcome', 'result_detail'
            ]
        )
        self.summaries: List[TeamSeasonSummary] = self.aggregate()

    def aggregate(self) -> List[TeamSeasonSummary]:
        '''
        Group games by (team, season) and total runs, wins, and losses

        Returns:
        * One TeamSeasonSummary per team-season, sorted by (team, season)
        '''
        if len(self.games) == 0:
            return []
        games = self.games.copy()
        games['win'] = (games['outcome'] == Outcome.WIN.value).astype(int)
        games['loss'] = (games['outcome'] == Outcome.LOSS.value).astype(int)
        agg = games.groupby(['team', 'season'], sort=True).agg(
            runs=('runs', 'sum'),
            runs_allowed=('runs_allowed', 'sum'),
            wins=('win', 'sum'),
            losses=('loss', 'sum'),
        ).reset_index()
        summaries = [
            TeamSeasonSummary(
                team=row['team'],
                season=int(row['season']),
                runs=int(row['runs']),
                runs_allowed=int(row['runs_allowed']),
                wins=int(row['wins']),
                losses=int(row['losses']),
            )
            for row in agg.to_dict(orient='records')
        ]
        n_invalid = sum(1 for s in summaries if not s.is_valid)
        if n_invalid > 0:
            logger.info('%d of %d team-seasons have undefined log-ratios', n_invalid, len(summaries))
        return summaries

    def valid_summaries(self) -> List[TeamSeasonSummary]:
        '''Team-seasons usable as regression input'''
        return [s for s in self.summaries if s.is_valid]

    def for_team(self, team: str) -> List[TeamSeasonSummary]:
        '''All seasons for one team'''
        return [s for s in self.summaries if s.team == team]

    def to_frame(self) -> pd.DataFrame:
        '''Return summaries as DataFrame'''
        return pd.DataFrame(
            [s.as_record() for s in self.summaries],
            columns=[
                'team', 'season', 'runs', 'runs_allowed', 'wins', 'losses',
                'total_games', 'win_pct', 'log_win_ratio', 'log_run_ratio', 'is_valid'
            ]
        )
