'''
Exponent Optimization Script

Compares the log-linear exponent fit with a direct win percentage fit
on a chronological train/test split.
'''

import pathlib
from typing import Union

import pandas as pd

from ..Data import DataSplitter, GameLogIngestor, SeasonAggregator
from ..Model import ExponentEstimator, WinPredictor
from ..Optimizer import ExponentOptimizer, ModelConfig
from .run_models import load_game_logs


def optimize_exponent(
    game_logs: Union[str, pathlib.Path, pd.DataFrame],
    n_test_seasons: int = 1,
    n_rounds: int = 5,
    config: ModelConfig = None,
    update_config: bool = False
) -> dict:
    '''
    Fit the exponent both ways on training seasons and score both on test seasons
    
    Parameters:
    * game_logs: CSV path or DataFrame of raw game logs
    * n_test_seasons: Number of latest seasons to hold out (default 1)
    * n_rounds: Number of random-start optimizer rounds (default 5)
    * config: ModelConfig (defaults to package config.json)
    * update_config: Write the best direct-fit exponent back to config.json
    
    Returns:
    * dict with both exponents and their train/test metrics
    '''
    print("=" * 80)
    print("EXPONENT OPTIMIZATION")
    print("=" * 80)
    if config is None:
        config = ModelConfig.from_file()
    ## Load and aggregate
    print("\n1. Loading data...")
    games = GameLogIngestor(config.values).ingest(load_game_logs(game_logs))
    aggregator = SeasonAggregator(games)
    print(f"   ✓ {len(aggregator.summaries):,} team-seasons")
    ## Label for train/test
    print("\n2. Labeling data for train/test split...")
    splitter = DataSplitter(aggregator.to_frame())
    labeled = splitter.label_train_test(n_test_seasons=n_test_seasons)
    split = splitter.split_summaries(labeled, aggregator.summaries)
    print(f"   ✓ Train: {len(split['train']):,} team-seasons")
    print(f"   ✓ Test: {len(split['test']):,} team-seasons")
    ## Log-linear fit
    print("\n3. Log-linear fit...")
    model = ExponentEstimator().fit(split['train'])
    predictor = WinPredictor(model)
    predictor.predict_all(split['test'])
    log_linear = {
        'exponent': model.exponent,
        'train_rmse': ExponentOptimizer.win_pct_rmse(list(model.fit_rows), model.exponent),
        'test_rmse': ExponentOptimizer.win_pct_rmse(
            ExponentEstimator.select_rows(split['test']), model.exponent
        ),
        'test_mae_wins': predictor.mean_absolute_error(),
    }
    print(f"   ✓ Exponent: {log_linear['exponent']:.4f}")
    ## Direct fit with random starts
    print("\n4. Direct fit...")
    best_records = []
    for round_num in range(1, n_rounds + 1):
        optimizer = ExponentOptimizer(
            train=split['train'],
            config=config,
            test=split['test'],
            randomize_bgs=round_num > 1
        )
        optimizer.optimize(update_config=False)
        best_record = optimizer.get_best_record()
        best_records.append({**best_record, 'round_num': round_num})
        print(f"  Round {round_num}/{n_rounds}: exponent {best_record[ExponentOptimizer.feature]:.4f}, train RMSE {best_record['train_rmse']:.5f}")
    best_result = pd.DataFrame(best_records).sort_values('train_rmse').iloc[0].to_dict()
    direct = {
        'exponent': best_result[ExponentOptimizer.feature],
        'train_rmse': best_result['train_rmse'],
        'test_rmse': best_result['test_rmse'],
    }
    print(f"   ✓ Exponent: {direct['exponent']:.4f}")
    if update_config:
        config.update_config({ExponentOptimizer.feature: round(direct['exponent'], 4)})
        config.to_file()
        print("   ✓ Config saved")
    return {
        'log_linear': log_linear,
        'direct': direct,
    }
