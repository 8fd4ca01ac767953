'''
OneRunAnalyzer Class

Breaks down a single team's one-run games by season. Teams that win a lot of
close games tend to beat their Pythagorean estimate, so this is used to help
explain residuals.
'''

import logging
from typing import Dict, Iterable, List, Optional, Tuple
import pandas as pd

from .GameLogRecord import GameLogRecord
from .OneRunGameRecord import OneRunGameRecord
from .PredictionResult import PredictionResult

logger = logging.getLogger(__name__)


class OneRunAnalyzer:
    '''Counts one-run wins and losses per season for one team'''

    def __init__(self, team: Optional[str] = None):
        '''
        Initialize analyzer

        Parameters:
        * team: Team to analyze. When None, the input must contain a single team
        '''
        self.team = team
        ## team of the last analyze() call ##
        self.analyzed_team: Optional[str] = team
        self.records: List[OneRunGameRecord] = []

    def filter_team(self, games: Iterable[GameLogRecord]) -> Tuple[Optional[str], List[GameLogRecord]]:
        '''
        Restrict games to the analyzed team

        Without a configured team, the team is resolved from each call's games

        Returns:
        * (team, games for that team)
        '''
        games = list(games)
        if self.team is not None:
            return self.team, [g for g in games if g.team == self.team]
        teams = {g.team for g in games}
        if len(teams) > 1:
            raise ValueError(f'One-run analysis covers one team, got {sorted(teams)}')
        return (teams.pop() if teams else None), games

    def analyze(self, games: Iterable[GameLogRecord]) -> List[OneRunGameRecord]:
        '''
        Build one OneRunGameRecord per season present in the games

        A margin of +1 is a one-run win, -1 a one-run loss; anything else
        is not counted

        Returns:
        * Records sorted by season
        '''
        team, games = self.filter_team(games)
        self.analyzed_team = team
        counts: Dict[int, Dict[str, int]] = {}
        for game in games:
            season_counts = counts.setdefault(game.season, {'wins': 0, 'losses': 0})
            if game.margin == 1:
                season_counts['wins'] += 1
            elif game.margin == -1:
                season_counts['losses'] += 1
        self.records = [
            OneRunGameRecord(
                team=team,
                season=season,
                one_run_wins=c['wins'],
                one_run_losses=c['losses'],
            )
            for season, c in sorted(counts.items())
        ]
        logger.debug('One-run records for %s: %s', team, [r.record for r in self.records])
        return self.records

    def get_results_df(self) -> pd.DataFrame:
        '''Return one-run records as DataFrame'''
        return pd.DataFrame(
            [r.as_record() for r in self.records],
            columns=['team', 'season', 'one_run_wins', 'one_run_losses', 'record']
        )

    def compare_to_residuals(self, predictions: Iterable[PredictionResult]) -> pd.DataFrame:
        '''
        Join per-season one-run records with the team's prediction residuals

        Parameters:
        * predictions: Prediction results (any teams; filtered to this team)

        Returns:
        * DataFrame with season, record, one_run_net (wins - losses), and residual
        '''
        one_run = self.get_results_df()
        one_run['one_run_net'] = one_run['one_run_wins'] - one_run['one_run_losses']
        residuals = pd.DataFrame(
            [
                {'season': p.season, 'residual': p.residual}
                for p in predictions if p.team == self.analyzed_team
            ],
            columns=['season', 'residual']
        )
        ## align key dtypes so empty frames still merge ##
        one_run['season'] = one_run['season'].astype('int64')
        residuals['season'] = residuals['season'].astype('int64')
        return pd.merge(
            one_run[['season', 'record', 'one_run_net']],
            residuals,
            on=['season'],
            how='left'
        )
