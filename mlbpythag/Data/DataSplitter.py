"""
DataSplitter Class

Label team-season summaries for train/test splits by season.
"""

import pandas as pd


class DataSplitter:
    """Label summaries for chronological train/test splits"""
    
    def __init__(self, df: pd.DataFrame):
        """
        Initialize splitter
        
        Parameters:
        * df: DataFrame with 'season' column (e.g. SeasonAggregator.to_frame())
        """
        self.df = df
    
    def label_train_test(self, n_test_seasons: int = 1) -> pd.DataFrame:
        """
        Label data with 'data_set' column, holding out the latest seasons
        
        Parameters:
        * n_test_seasons: Number of seasons to hold out for testing (default 1)
        
        Returns:
        * DataFrame with 'data_set' column added ('train' or 'test')
        """
        df = self.df.copy()
        seasons = sorted(df['season'].unique())
        
        if len(seasons) <= n_test_seasons:
            raise ValueError(f'Not enough seasons ({len(seasons)}) to hold out {n_test_seasons} for testing')
        
        test_seasons = seasons[-n_test_seasons:]
        df['data_set'] = 'train'
        df.loc[df['season'].isin(test_seasons), 'data_set'] = 'test'
        
        return df
    
    def label_by_season(self, train_through_season: int) -> pd.DataFrame:
        """
        Label data by specific season cutoff
        
        Parameters:
        * train_through_season: Last season to include in training set
        
        Returns:
        * DataFrame with 'data_set' column added ('train' or 'test')
        """
        df = self.df.copy()
        df['data_set'] = 'train'
        df.loc[df['season'] > train_through_season, 'data_set'] = 'test'
        
        return df

    def split_summaries(self, labeled: pd.DataFrame, summaries: list) -> dict:
        """
        Partition TeamSeasonSummary objects using a labeled frame

        Parameters:
        * labeled: Output of label_train_test or label_by_season
        * summaries: TeamSeasonSummary objects to partition

        Returns:
        * dict with 'train' and 'test' lists
        """
        labels = {
            (row['team'], row['season']): row['data_set']
            for row in labeled[['team', 'season', 'data_set']].to_dict(orient='records')
        }
        split = {'train': [], 'test': []}
        for s in summaries:
            data_set = labels.get((s.team, s.season))
            if data_set in split:
                split[data_set].append(s)
        return split
