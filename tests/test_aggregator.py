"""Tests for team-season aggregation."""

import math

import pytest

from mlbpythag.Data import GameLogIngestor, SeasonAggregator
from mlbpythag.Model import GameLogRecord, Outcome, TeamSeasonSummary

from conftest import make_game_log, make_team_season


def ingest(log, team, season):
    return GameLogIngestor().ingest(log, team=team, season=season)


@pytest.fixture
def games():
    """Two teams over two seasons."""
    records = []
    records += ingest(make_game_log([(4, 3), (2, 6), (5, 1)]), "CHW", 2016)
    records += ingest(make_game_log([(3, 2), (3, 2)]), "CHW", 2017)
    records += ingest(make_game_log([(0, 1), (8, 2), (1, 9), (3, 4)]), "DET", 2016)
    return records


def test_one_summary_per_team_season(games):
    """Every (team, season) pair present in the input gets exactly one row."""
    summaries = SeasonAggregator(games).summaries

    assert [(s.team, s.season) for s in summaries] == [
        ("CHW", 2016), ("CHW", 2017), ("DET", 2016)
    ]


def test_totals(games):
    """Runs, runs allowed, wins, and losses are summed per team-season."""
    chw_2016 = SeasonAggregator(games).summaries[0]

    assert chw_2016.runs == 11
    assert chw_2016.runs_allowed == 10
    assert chw_2016.wins == 2
    assert chw_2016.losses == 1
    assert chw_2016.win_pct == pytest.approx(2 / 3)
    assert chw_2016.log_win_ratio == pytest.approx(math.log(2))
    assert chw_2016.log_run_ratio == pytest.approx(math.log(11 / 10))


def test_wins_plus_losses_equals_total_games(games):
    """Derived total games always equals wins + losses."""
    for summary in SeasonAggregator(games).summaries:
        assert summary.wins + summary.losses == summary.total_games
        assert 0.0 <= summary.win_pct <= 1.0


def test_undefeated_season_is_kept_but_invalid(games):
    """A season without losses stays for display but is excluded from fitting."""
    aggregator = SeasonAggregator(games)
    chw_2017 = aggregator.summaries[1]

    assert chw_2017.losses == 0
    assert chw_2017.log_win_ratio is None
    assert chw_2017.is_valid is False
    assert chw_2017 not in aggregator.valid_summaries()
    assert len(aggregator.valid_summaries()) == 2


def test_shutout_defense_is_invalid():
    """Zero runs allowed makes the run log-ratio undefined."""
    summary = TeamSeasonSummary(team="X", season=2016, runs=10, runs_allowed=0, wins=3, losses=1)

    assert summary.log_run_ratio is None
    assert summary.is_valid is False


def test_order_does_not_matter(games):
    """Grouping is stable regardless of input order."""
    forward = SeasonAggregator(games).summaries
    backward = SeasonAggregator(list(reversed(games))).summaries

    assert forward == backward


def test_full_season_totals():
    """A generated 162-game season totals correctly."""
    games = GameLogIngestor().ingest(make_team_season("CHW", 2016, wins=78, losses=84, one_run_wins=10, one_run_losses=5))
    summary = SeasonAggregator(games).summaries[0]

    assert summary.total_games == 162
    assert summary.runs == 5 * 68 + 4 * 10 + 3 * 79 + 3 * 5
    assert summary.runs_allowed == 3 * 68 + 3 * 10 + 5 * 79 + 4 * 5


def test_empty_input():
    """No games means no summaries."""
    aggregator = SeasonAggregator([])

    assert aggregator.summaries == []
    assert aggregator.to_frame().empty


def test_to_frame_and_for_team(games):
    """Display table holds every row, including invalid ones."""
    aggregator = SeasonAggregator(games)
    frame = aggregator.to_frame()

    assert len(frame) == 3
    assert frame["is_valid"].tolist() == [True, False, True]
    assert [s.season for s in aggregator.for_team("CHW")] == [2016, 2017]


def test_accepts_records_built_directly():
    """The aggregator only needs GameLogRecords, not the ingestor."""
    games = [
        GameLogRecord(team="SEA", season=2019, game_number=1, runs=2, runs_allowed=1, outcome=Outcome.WIN),
        GameLogRecord(team="SEA", season=2019, game_number=2, runs=0, runs_allowed=3, outcome=Outcome.LOSS),
    ]
    summary = SeasonAggregator(games).summaries[0]

    assert (summary.wins, summary.losses, summary.runs, summary.runs_allowed) == (1, 1, 2, 4)
