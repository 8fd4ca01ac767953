"""Tests for raw game log normalization."""

import math

import pandas as pd
import pytest

from mlbpythag.Data import GameLogIngestor
from mlbpythag.Model import MalformedRecord, Outcome

from conftest import make_game_log


def entry(**overrides):
    """A canonical-name entry for one played game."""
    base = {
        "game_number": 1,
        "date": "Thursday, Mar 31",
        "team": "CHW",
        "home_away": "Home",
        "opponent": "OAK",
        "result": "W",
        "runs": 4,
        "runs_allowed": 3,
        "season": 2016,
    }
    base.update(overrides)
    return base


def test_parses_upstream_columns():
    """Upstream column names are mapped and every field is normalized."""
    records = GameLogIngestor().ingest(make_game_log([(4, 3), (2, 6)]), team="CHW", season=2016)

    assert len(records) == 2
    first, second = records
    assert first.team == "CHW"
    assert first.season == 2016
    assert first.game_number == 1
    assert first.outcome == Outcome.WIN
    assert first.is_home is True
    assert second.outcome == Outcome.LOSS
    assert second.is_home is False
    assert second.margin == -4


def test_runs_allowed_text_is_coerced():
    """Text scores are converted to integers."""
    record = GameLogIngestor().parse_entry(entry(runs="7", runs_allowed=" 2 "))

    assert record.runs == 7
    assert record.runs_allowed == 2


def test_float_scores_from_dataframe_are_coerced():
    """Scores read as floats (NaN-bearing columns) become ints."""
    df = pd.DataFrame([entry(runs=5.0, runs_allowed=1.0), entry(game_number=2, runs=math.nan, runs_allowed=math.nan, result=None)])
    records = GameLogIngestor().ingest(df)

    assert len(records) == 1
    assert records[0].runs == 5
    assert isinstance(records[0].runs, int)


@pytest.mark.parametrize("bad_value", ["abc", "4.5", "-1", "inf"])
def test_non_numeric_runs_allowed_is_malformed(bad_value):
    """Unparseable scores raise MalformedRecord."""
    with pytest.raises(MalformedRecord):
        GameLogIngestor().parse_entry(entry(runs_allowed=bad_value))


def test_missing_score_on_played_game_is_malformed():
    """A game with a result but no score cannot be aggregated."""
    with pytest.raises(MalformedRecord):
        GameLogIngestor().parse_entry(entry(runs_allowed=None))


def test_unplayed_game_is_dropped():
    """Scheduled games without a result or score are skipped silently."""
    ingestor = GameLogIngestor()
    assert ingestor.parse_entry(entry(result=None, runs=None, runs_allowed=None)) is None


def test_games_past_schedule_are_dropped():
    """Rows beyond game 162 are filtered without error."""
    log = make_game_log([(4, 3)] * 163)
    ingestor = GameLogIngestor()
    records = ingestor.ingest(log, team="CHW", season=2016)

    assert len(records) == 162
    assert records[-1].game_number == 162
    assert ingestor.n_filtered == 1
    assert ingestor.rejected == []


def test_max_game_number_comes_from_config():
    """The season length is configurable."""
    ingestor = GameLogIngestor({"ingest_config": {"max_game_number": 60}})
    records = ingestor.ingest(make_game_log([(4, 3)] * 62), team="CHW", season=2020)

    assert len(records) == 60


def test_walk_off_marker_is_a_win():
    """The outcome comes from the leading character; the suffix is kept."""
    record = GameLogIngestor().parse_entry(entry(result="W-wo"))

    assert record.outcome == Outcome.WIN
    assert record.result_detail == "wo"


@pytest.mark.parametrize("marker", ["T", "X", "win", ""])
def test_unknown_result_marker_is_malformed(marker):
    """Anything other than a leading W or L is rejected."""
    with pytest.raises(MalformedRecord):
        GameLogIngestor().parse_entry(entry(result=marker))


def test_lenient_ingest_skips_malformed_entries():
    """By default malformed entries are collected and the batch continues."""
    log = make_game_log([(4, 3), (2, 6), (5, 1)])
    log[1]["RA"] = "six"
    ingestor = GameLogIngestor()
    records = ingestor.ingest(log, team="CHW", season=2016)

    assert [r.game_number for r in records] == [1, 3]
    assert len(ingestor.rejected) == 1
    assert isinstance(ingestor.rejected[0][1], MalformedRecord)


def test_strict_ingest_aborts_on_malformed_entry():
    """Strict mode propagates the first MalformedRecord."""
    log = make_game_log([(4, 3), (2, 6)])
    log[1]["W/L"] = "T"

    with pytest.raises(MalformedRecord):
        GameLogIngestor(strict=True).ingest(log, team="CHW", season=2016)


def test_season_is_read_from_year_column():
    """Without an explicit season, the Year column is used."""
    records = GameLogIngestor().ingest(make_game_log([(4, 3)], year=2017))

    assert records[0].season == 2017


def test_missing_season_is_malformed():
    """A record must resolve to a season."""
    with pytest.raises(MalformedRecord):
        GameLogIngestor().parse_entry(entry(season=None))


def test_ingest_many_uses_request_keys():
    """Logs keyed by (team, season) take identity from the key."""
    logs = {
        ("CHW", 2016): make_game_log([(4, 3), (1, 2)], team="CHW"),
        ("DET", 2016): make_game_log([(6, 0)], team="DET"),
    }
    records = GameLogIngestor().ingest_many(logs)

    assert [(r.team, r.season) for r in records] == [("CHW", 2016), ("CHW", 2016), ("DET", 2016)]


@pytest.mark.parametrize("game_number", [0, -3])
def test_game_number_below_one_rejected(game_number):
    with pytest.raises(MalformedRecord):
        GameLogIngestor().parse_entry(entry(game_number=game_number))
