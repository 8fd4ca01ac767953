'''
GameLogIngestor Class

Normalizes raw team schedule-and-results entries into GameLogRecords.
'''

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import pandas as pd

from ..Model import GameLogRecord, MalformedRecord, Outcome

logger = logging.getLogger(__name__)

## upstream game log column names -> canonical names ##
RAW_COLUMNS = {
    'Gm#': 'game_number',
    'Date': 'date',
    'Tm': 'team',
    'Home_Away': 'home_away',
    'Opp': 'opponent',
    'W/L': 'result',
    'R': 'runs',
    'RA': 'runs_allowed',
    'W-L': 'record',
    'GB': 'games_back',
    'Year': 'season',
}

DEFAULT_MAX_GAME_NUMBER = 162

RawLog = Union[pd.DataFrame, Iterable[Mapping[str, Any]]]


def is_missing(value: Any) -> bool:
    '''Check for None, NaN, or blank text'''
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ''
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def coerce_int(value: Any, field: str, entry: Mapping[str, Any]) -> Optional[int]:
    '''
    Coerce a possibly-text numeric field to int

    Returns None for missing values. Raises MalformedRecord for anything
    non-numeric, fractional, or negative
    '''
    if is_missing(value):
        return None
    numeric = pd.to_numeric(str(value).strip(), errors='coerce')
    if pd.isna(numeric) or not math.isfinite(numeric) or numeric < 0 or numeric != int(numeric):
        raise MalformedRecord(f'Unparseable {field}: {value!r}', entry=entry)
    return int(numeric)


class GameLogIngestor:
    '''Normalize raw game log entries'''

    def __init__(self, config: Dict[str, Any] = None, strict: bool = False):
        '''
        Initialize ingestor

        Parameters:
        * config: Nested config values (ModelConfig.values). Uses ingest_config.max_game_number
        * strict: If True, the first malformed entry aborts the batch. Otherwise
                  malformed entries are logged and kept in self.rejected
        '''
        config = config or {}
        self.max_game_number: int = int(
            config.get('ingest_config', {}).get('max_game_number', DEFAULT_MAX_GAME_NUMBER)
        )
        self.strict: bool = strict
        ## storage ##
        self.rejected: List[Tuple[Dict[str, Any], MalformedRecord]] = []
        self.n_filtered: int = 0

    def prepare(self, raw: RawLog) -> pd.DataFrame:
        '''
        Convert raw input to a DataFrame with canonical column names

        Parameters:
        * raw: DataFrame or iterable of mappings using upstream or canonical names

        Returns:
        * DataFrame with canonical column names
        '''
        df = raw.copy() if isinstance(raw, pd.DataFrame) else pd.DataFrame(list(raw))
        return df.rename(columns=RAW_COLUMNS)

    def parse_outcome(self, result: Any, entry: Mapping[str, Any]) -> Tuple[Outcome, Optional[str]]:
        '''
        Classify the result marker by its leading character

        Markers look like 'W', 'L', 'W-wo', 'L-wo'. Anything else, including
        ties, is malformed

        Returns:
        * (outcome, detail suffix or None)
        '''
        if is_missing(result):
            raise MalformedRecord('Missing result marker', entry=entry)
        marker = str(result).strip()
        try:
            outcome = Outcome(marker[0])
        except ValueError:
            raise MalformedRecord(f'Unrecognized result marker: {marker!r}', entry=entry)
        detail = marker[1:].lstrip('-').strip()
        return outcome, detail or None

    def parse_entry(self,
        entry: Mapping[str, Any],
        team: Optional[str] = None,
        season: Optional[int] = None
    ) -> Optional[GameLogRecord]:
        '''
        Normalize one raw entry

        Parameters:
        * entry: Mapping with canonical column names
        * team: Team of the request this entry came from (overrides the entry)
        * season: Season of the request this entry came from (overrides the entry)

        Returns:
        * GameLogRecord, or None for entries that are silently dropped
          (unplayed games and rows past max_game_number)
        '''
        ## unplayed games have no result and no score ##
        if all(is_missing(entry.get(f)) for f in ['result', 'runs', 'runs_allowed']):
            logger.debug('Dropping unplayed game: %s', entry.get('game_number'))
            return None
        game_number = coerce_int(entry.get('game_number'), 'game_number', entry)
        if game_number is None:
            raise MalformedRecord('Missing game number', entry=entry)
        if game_number < 1:
            raise MalformedRecord(f'Game number {game_number} is not an in-season index', entry=entry)
        ## overflow rows past the schedule are an artifact of the source ##
        if game_number > self.max_game_number:
            logger.debug('Dropping game %s beyond game %s', game_number, self.max_game_number)
            return None
        runs = coerce_int(entry.get('runs'), 'runs', entry)
        runs_allowed = coerce_int(entry.get('runs_allowed'), 'runs_allowed', entry)
        if runs is None or runs_allowed is None:
            raise MalformedRecord('Missing score for a played game', entry=entry)
        outcome, detail = self.parse_outcome(entry.get('result'), entry)
        ## resolve identity ##
        team = team if team is not None else entry.get('team')
        if is_missing(team):
            raise MalformedRecord('Missing team', entry=entry)
        season = season if season is not None else coerce_int(entry.get('season'), 'season', entry)
        if season is None:
            raise MalformedRecord('Missing season', entry=entry)
        ## upstream marks road games with '@' ##
        home_away = entry.get('home_away')
        is_home = None
        if not is_missing(home_away):
            is_home = str(home_away).strip() != '@'
        return GameLogRecord(
            team=str(team),
            season=int(season),
            game_number=game_number,
            runs=runs,
            runs_allowed=runs_allowed,
            outcome=outcome,
            result_detail=detail,
            opponent=None if is_missing(entry.get('opponent')) else str(entry.get('opponent')),
            is_home=is_home,
            date=None if is_missing(entry.get('date')) else str(entry.get('date')),
        )

    def ingest(self,
        raw: RawLog,
        team: Optional[str] = None,
        season: Optional[int] = None
    ) -> List[GameLogRecord]:
        '''
        Normalize a batch of raw entries, usually one team-season

        Parameters:
        * raw: Raw entries
        * team: Team for the batch (default: read from each entry)
        * season: Season for the batch (default: read from each entry)

        Returns:
        * List of GameLogRecords in input order
        '''
        records = []
        for entry in self.prepare(raw).to_dict(orient='records'):
            try:
                record = self.parse_entry(entry, team=team, season=season)
            except MalformedRecord as e:
                if self.strict:
                    raise
                logger.warning('Rejected entry (%s): %s', e, entry)
                self.rejected.append((entry, e))
                continue
            if record is None:
                self.n_filtered += 1
                continue
            records.append(record)
        return records

    def ingest_many(self, logs: Mapping[Tuple[str, int], RawLog]) -> List[GameLogRecord]:
        '''
        Normalize raw logs keyed by (team, season)

        Parameters:
        * logs: Mapping of (team, season) -> raw entries for that team-season

        Returns:
        * All GameLogRecords, in mapping order
        '''
        records = []
        for (team, season), raw in logs.items():
            records.extend(self.ingest(raw, team=team, season=season))
        logger.info(
            'Ingested %d games from %d team-seasons (%d rejected, %d dropped)',
            len(records), len(logs), len(self.rejected), self.n_filtered
        )
        return records
