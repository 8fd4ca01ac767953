"""Tests for season-based train/test labeling."""

import pandas as pd
import pytest

from mlbpythag.Data import DataSplitter
from mlbpythag.Model import TeamSeasonSummary


@pytest.fixture
def summaries():
    return [
        TeamSeasonSummary(team=team, season=season, runs=700, runs_allowed=650, wins=85, losses=77)
        for team in ["CHW", "DET"]
        for season in [2014, 2015, 2016]
    ]


@pytest.fixture
def frame(summaries):
    return pd.DataFrame([s.as_record() for s in summaries])


def test_label_train_test(frame):
    labeled = DataSplitter(frame).label_train_test(n_test_seasons=1)

    assert set(labeled[labeled["data_set"] == "test"]["season"]) == {2016}
    assert set(labeled[labeled["data_set"] == "train"]["season"]) == {2014, 2015}


def test_not_enough_seasons(frame):
    with pytest.raises(ValueError):
        DataSplitter(frame).label_train_test(n_test_seasons=3)


def test_label_by_season(frame):
    labeled = DataSplitter(frame).label_by_season(train_through_season=2014)

    assert (labeled["data_set"] == "train").sum() == 2
    assert (labeled["data_set"] == "test").sum() == 4


def test_split_summaries(frame, summaries):
    splitter = DataSplitter(frame)
    split = splitter.split_summaries(splitter.label_train_test(n_test_seasons=2), summaries)

    assert len(split["train"]) == 2
    assert len(split["test"]) == 4
    assert all(s.season == 2014 for s in split["train"])


def test_original_frame_is_untouched(frame):
    DataSplitter(frame).label_train_test()

    assert "data_set" not in frame.columns
