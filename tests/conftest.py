"""Shared fixtures for building raw game logs and summaries."""

import pytest

from mlbpythag.Model import TeamSeasonSummary


def make_game_log(scores, team="CHW", year=None, start=1):
    """Build raw schedule-and-results rows from (runs, runs_allowed) pairs."""
    rows = []
    wins = losses = 0
    for i, (runs, runs_allowed) in enumerate(scores, start=start):
        won = runs > runs_allowed
        wins += int(won)
        losses += int(not won)
        row = {
            "Gm#": i,
            "Date": f"Game {i}",
            "Tm": team,
            "Home_Away": "Home" if i % 2 else "@",
            "Opp": "OPP",
            "W/L": "W" if won else "L",
            "R": runs,
            "RA": runs_allowed,
            "W-L": f"{wins}-{losses}",
            "GB": "",
        }
        if year is not None:
            row["Year"] = year
        rows.append(row)
    return rows


def make_team_season(team, year, wins, losses, one_run_wins=0, one_run_losses=0):
    """Build a season log: ordinary wins 5-3, losses 3-5, one-run games 4-3 / 3-4."""
    scores = (
        [(5, 3)] * (wins - one_run_wins)
        + [(4, 3)] * one_run_wins
        + [(3, 5)] * (losses - one_run_losses)
        + [(3, 4)] * one_run_losses
    )
    return make_game_log(scores, team=team, year=year)


# League rows generated from k = 1.71 over 162 games (runs + runs_allowed = 1400)
LEAGUE_ROWS = [
    (600, 800, 61, 101),
    (620, 780, 65, 97),
    (640, 760, 69, 93),
    (660, 740, 73, 89),
    (680, 720, 77, 85),
    (700, 700, 81, 81),
    (720, 680, 85, 77),
    (740, 660, 89, 73),
    (760, 640, 93, 69),
    (780, 620, 97, 65),
    (800, 600, 101, 61),
]

CHW_ROWS = {
    2014: (660, 686, 73, 89),
    2015: (676, 716, 76, 86),
    2016: (686, 748, 78, 84),
    2017: (686, 706, 78, 84),
    2018: (706, 715, 62, 73),
}


@pytest.fixture
def league_summaries():
    """League-wide summaries generated at k = 1.71, all in 2016."""
    return [
        TeamSeasonSummary(team=f"T{i:02d}", season=2016, runs=r, runs_allowed=ra, wins=w, losses=l)
        for i, (r, ra, w, l) in enumerate(LEAGUE_ROWS)
    ]


@pytest.fixture
def chw_summaries():
    """White Sox 2014-2018 summaries."""
    return [
        TeamSeasonSummary(team="CHW", season=season, runs=r, runs_allowed=ra, wins=w, losses=l)
        for season, (r, ra, w, l) in CHW_ROWS.items()
    ]
