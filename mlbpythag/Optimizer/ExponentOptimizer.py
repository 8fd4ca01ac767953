'''
ExponentOptimizer Class

Fits the Pythagorean exponent directly by minimizing win percentage error,
as a cross-check on the log-linear estimate.
'''

import time
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd
from scipy.optimize import minimize

from .ModelConfig import ModelConfig, ModelParam
from ..Model import ExponentEstimator, InsufficientData, TeamSeasonSummary
from ..Model.ExponentEstimator import MIN_FIT_ROWS


class ExponentOptimizer:
    '''
    Optimizer that returns the exponent minimizing win percentage RMSE

    The exponent is searched in normalized [0, 1] space mapped onto the
    optimizer_config.exponent bounds
    '''
    feature: str = 'optimizer_config.exponent'

    def __init__(self,
        train: Iterable[TeamSeasonSummary],
        config: ModelConfig = None,
        test: Iterable[TeamSeasonSummary] = (),
        tol: float = 0.000001,
        step: float = 0.00001,
        method: str = 'SLSQP',
        randomize_bgs: bool = False,
    ):
        '''
        Initialize optimizer

        Parameters:
        * train: Team-seasons to fit on. Rows with undefined log-ratios are ignored
        * config: ModelConfig with optimizer_config.exponent (defaults to package config)
        * test: Optional held-out team-seasons to score each round on
        * tol: Tolerance for optimization convergence
        * step: Step size for numerical gradient
        * method: Optimization method (default 'SLSQP')
        * randomize_bgs: Whether to randomize the initial guess
        '''
        self.config: ModelConfig = config if config is not None else ModelConfig.from_file()
        self.param: ModelParam = self.config.params[self.feature]
        self.train: List[TeamSeasonSummary] = ExponentEstimator.select_rows(train)
        self.test: List[TeamSeasonSummary] = ExponentEstimator.select_rows(test)
        if len(self.train) < MIN_FIT_ROWS:
            raise InsufficientData(
                f'Need at least {MIN_FIT_ROWS} valid team-seasons to fit, got {len(self.train)}'
            )
        ## optimizer setup ##
        self.tol: float = tol
        self.step: float = step
        self.method: str = method
        self.bgs: List[float] = [
            self.normalize_param(self.param.value) if not randomize_bgs
            else np.random.uniform(0, 1)
        ]
        self.bounds = [(0, 1)]
        ## in-optimization data ##
        self.round_number: int = 0
        self.optimization_records: List[dict] = []
        self.best_obj: Optional[float] = None
        ## post optimization data ##
        self.solution = None
        self.optimization_results: dict = {}

    def normalize_param(self, value: float) -> float:
        '''Normalize the exponent to a value between 0 and 1'''
        return (value - self.param.opti_min) / (self.param.opti_max - self.param.opti_min)

    def denormalize_param(self, value: float) -> float:
        '''Denormalize the exponent from a value between 0 and 1'''
        return value * (self.param.opti_max - self.param.opti_min) + self.param.opti_min

    @staticmethod
    def win_pct_rmse(rows: List[TeamSeasonSummary], exponent: float) -> float:
        '''RMSE between Pythagorean and actual win percentage'''
        if len(rows) == 0:
            return float('nan')
        runs = np.array([r.runs for r in rows], dtype=float)
        runs_allowed = np.array([r.runs_allowed for r in rows], dtype=float)
        actual = np.array([r.win_pct for r in rows], dtype=float)
        expected = 1.0 / (1.0 + (runs_allowed / runs) ** exponent)
        return float(np.sqrt(np.mean((expected - actual) ** 2)))

    def objective(self, x: List[float]) -> float:
        '''Win percentage RMSE objective function for the optimizer'''
        self.round_number += 1
        exponent = self.denormalize_param(x[0])
        train_rmse = self.win_pct_rmse(self.train, exponent)
        test_rmse = self.win_pct_rmse(self.test, exponent) if self.test else None
        self.optimization_records.append({
            'round': self.round_number,
            'train_rmse': train_rmse,
            'test_rmse': test_rmse,
            self.feature: exponent,
        })
        if self.best_obj is None or train_rmse < self.best_obj:
            self.best_obj = train_rmse
        return train_rmse

    def optimize(self, update_config: bool = False) -> float:
        '''
        Core optimization function

        Parameters:
        * update_config: Whether to write the optimal exponent back to the config (in memory)

        Returns:
        * The optimal exponent
        '''
        start_time = float(time.time())
        solution = minimize(
            self.objective,
            self.bgs,
            bounds=self.bounds,
            method=self.method,
            options={
                'ftol': self.tol,
                'eps': self.step
            }
        )
        end_time = float(time.time())
        self.solution = solution
        exponent = self.denormalize_param(float(solution.x[0]))
        self.optimization_results = {
            'train_rmse': float(solution.fun),
            'runtime': end_time - start_time,
            self.feature: exponent,
        }
        if self.test:
            self.optimization_results['test_rmse'] = self.win_pct_rmse(self.test, exponent)
        if update_config:
            self.config.update_config({self.feature: round(exponent, 6)})
        return exponent

    def get_best_record(self) -> dict:
        '''Gets the best record from the stored optimization records'''
        df = pd.DataFrame(self.optimization_records)
        return df.sort_values(
            by=['train_rmse'],
            ascending=[True]
        ).reset_index(drop=True).to_dict(orient='records')[0]
