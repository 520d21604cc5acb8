"""Reporting module for simulation results."""

from .report import (
    compare_goals,
    axis_gaps,
    summarize_results,
    compute_outcome_distribution_stats,
    sanity_check_monotonicity,
    BatchReport,
    create_batch_report
)

__all__ = [
    "compare_goals",
    "axis_gaps",
    "summarize_results",
    "compute_outcome_distribution_stats",
    "sanity_check_monotonicity",
    "BatchReport",
    "create_batch_report"
]
