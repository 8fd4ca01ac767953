"""
PredictionGrader Class

Calculate performance metrics for Pythagorean win predictions.
"""

import numpy as np
import pandas as pd
from typing import Dict


class PredictionGrader:
    """Calculate performance metrics for a prediction set"""
    
    def __init__(self, results: pd.DataFrame):
        """
        Initialize grader
        
        Parameters:
        * results: DataFrame from WinPredictor.get_results_df()
        """
        self.results = results
        self.grades: Dict[str, float] = {}
    
    def grade(self) -> Dict[str, float]:
        """
        Calculate all performance metrics
        
        Returns:
        * dict with mae, rmse, r_squared (wins) and win_pct_mae
        """
        if len(self.results) == 0:
            raise ValueError('No predictions to grade')
        expected = self.results['estimated_wins'].astype(float)
        observed = self.results['actual_wins'].astype(float)
        
        # Calculate metrics
        squared_error = (expected - observed) ** 2
        abs_error = np.abs(expected - observed)
        
        # R² calculation
        ss_res = squared_error.sum()
        ss_tot = ((observed - observed.mean()) ** 2).sum()
        
        # Win percentage error
        actual_pct = observed / self.results['total_games']
        
        self.grades = {
            'n': len(self.results),
            'mae': abs_error.mean(),
            'rmse': np.sqrt(squared_error.mean()),
            'r_squared': 1 - (ss_res / ss_tot) if ss_tot > 0 else 0.0,
            'win_pct_mae': np.abs(self.results['estimated_win_pct'] - actual_pct).mean(),
        }
        return self.grades
    
    def print_grades(self) -> None:
        """Print formatted performance metrics"""
        print('\nPythagorean Model Performance:')
        print(f"  Team-seasons: {self.grades['n']}")
        print(f"  MAE (wins): {self.grades['mae']:.3f}")
        print(f"  RMSE (wins): {self.grades['rmse']:.3f}")
        print(f"  R²: {self.grades['r_squared']:.3f}")
        print(f"  MAE (win %): {self.grades['win_pct_mae']:.4f}")
