'''
Run Models Script

Convenience function to run the full pipeline on a table of raw game logs.
'''
import logging
import pathlib
from typing import Any, Dict, Optional, Union

import pandas as pd

from ..Data import GameLogIngestor, SeasonAggregator
from ..Model import ExponentEstimator, InsufficientData, OneRunAnalyzer, WinPredictor
from ..Optimizer import ModelConfig
from ..Performance import PredictionGrader
from ..Utilities import configure_logging


def load_game_logs(game_logs: Union[str, pathlib.Path, pd.DataFrame]) -> pd.DataFrame:
    '''
    Read raw game logs from a CSV path, or pass a DataFrame through

    The table holds concatenated per-team-season logs with a 'Year'
    (or 'season') column identifying the season of each row
    '''
    if isinstance(game_logs, pd.DataFrame):
        return game_logs.copy()
    return pd.read_csv(game_logs)


def run(
    game_logs: Union[str, pathlib.Path, pd.DataFrame],
    team: Optional[str] = None,
    config: Optional[ModelConfig] = None,
    strict: bool = False,
    log_level: int = logging.WARNING
) -> Dict[str, Any]:
    '''
    Run ingestion, aggregation, the exponent fit, predictions, and one-run analysis
    
    Parameters:
    * game_logs: CSV path or DataFrame of raw game logs for the whole league
    * team: Team to break down one-run games for (optional)
    * config: ModelConfig (defaults to package config.json)
    * strict: Abort on the first malformed entry instead of skipping it
    * log_level: Package log level for the run (rejected rows log at WARNING)
    
    Returns:
    * dict with:
      - exponent: fitted exponent, or None if the fit failed
      - fit_error: failure message when the fit failed, else None
      - model: PythagoreanModel or None
      - summaries, predictions, one_run, one_run_vs_residuals: DataFrames
      - grades: prediction metrics (empty if the fit failed)
    '''
    print("=" * 80)
    print("RUNNING PYTHAGOREAN MODEL")
    print("=" * 80)
    configure_logging(log_level)
    if config is None:
        config = ModelConfig.from_file()
    ## Ingest
    print("\n1. Ingesting game logs...")
    ingestor = GameLogIngestor(config.values, strict=strict)
    games = ingestor.ingest(load_game_logs(game_logs))
    print(f"   ✓ {len(games):,} games ({len(ingestor.rejected):,} rejected, {ingestor.n_filtered:,} dropped)")
    ## Aggregate
    print("\n2. Aggregating team-seasons...")
    aggregator = SeasonAggregator(games)
    print(f"   ✓ {len(aggregator.summaries):,} team-seasons ({len(aggregator.valid_summaries()):,} valid for fitting)")
    results: Dict[str, Any] = {
        'exponent': None,
        'fit_error': None,
        'model': None,
        'summaries': aggregator.to_frame(),
        'predictions': pd.DataFrame(),
        'grades': {},
        'one_run': pd.DataFrame(),
        'one_run_vs_residuals': pd.DataFrame(),
    }
    ## Fit
    print("\n3. Fitting exponent...")
    predictor = None
    try:
        model = ExponentEstimator().fit(aggregator.summaries)
    except InsufficientData as e:
        ## a failed fit is reported as a failure, never as a poor fit ##
        results['fit_error'] = str(e)
        print(f"   ✗ Fit failed: {e}")
    else:
        results['model'] = model
        results['exponent'] = model.exponent
        print(f"   ✓ Exponent {model.exponent:.4f} on {model.n_rows:,} team-seasons (MAE {model.mean_absolute_error:.3f} wins)")
        ## Predict
        print("\n4. Predicting wins...")
        predictor = WinPredictor(model)
        predictor.predict_all(aggregator.summaries)
        results['predictions'] = predictor.get_results_df()
        if len(predictor.results) > 0:
            grader = PredictionGrader(results['predictions'])
            results['grades'] = grader.grade()
            grader.print_grades()
    ## One-run breakdown
    if team is not None:
        print(f"\n5. One-run games for {team}...")
        analyzer = OneRunAnalyzer(team=team)
        analyzer.analyze(games)
        results['one_run'] = analyzer.get_results_df()
        if predictor is not None:
            results['one_run_vs_residuals'] = analyzer.compare_to_residuals(predictor.results)
        for record in analyzer.records:
            print(f"   {record.season}: {record.record}")
    return results
