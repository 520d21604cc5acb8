"""
Result reporting for career simulations.

Turns simulation results into tables and summaries:
1. Goal comparison (predicted salary/overtime against the user's goals)
2. Per-axis gaps between the projected profile and the industry norm
3. Outcome distribution over a batch of sessions
4. Sanity check that the predictors respond monotonically to speed/worklife

The predictions are fixed formulas; these reports describe them and make
no claim of real-world accuracy.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Sequence
import json

import numpy as np
import pandas as pd

from ..inference.schema import GoalComparison, SimulationResult, UserState
from ..reference import AXES
from ..scoring.combiner import ProjectedProfile
from ..scoring.predictors import predict_overtime, predict_salary

logger = logging.getLogger(__name__)


@dataclass
class OutcomeDistributionStats:
    """Statistics about one predicted outcome over a batch."""
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 380.0, "p50": 450.0, "p90": 520.0}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


@dataclass
class MonotonicityCheck:
    """Results of sweeping one axis while holding the others fixed."""
    axis: str
    outcome: str
    expected: str  # "non_decreasing" or "non_increasing"
    n_steps: int
    n_violations: int

    @property
    def is_monotonic(self) -> bool:
        return self.n_violations == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "axis": self.axis,
            "outcome": self.outcome,
            "expected": self.expected,
            "n_steps": int(self.n_steps),
            "n_violations": int(self.n_violations),
            "is_monotonic": bool(self.is_monotonic)
        }


@dataclass
class BatchReport:
    """
    Report over a batch of simulated sessions.

    Sessions without an industry/size selection are counted but not scored.
    """
    n_sessions: int
    n_scored: int
    salary_stats: Optional[OutcomeDistributionStats]
    overtime_stats: Optional[OutcomeDistributionStats]
    salary_goal_rate: float
    overtime_goal_rate: float
    additional_metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "n_sessions": self.n_sessions,
            "n_scored": self.n_scored,
            "salary_goal_rate": float(self.salary_goal_rate),
            "overtime_goal_rate": float(self.overtime_goal_rate),
            "additional_metrics": self.additional_metrics
        }
        if self.salary_stats:
            result["salary_stats"] = self.salary_stats.to_dict()
        if self.overtime_stats:
            result["overtime_stats"] = self.overtime_stats.to_dict()
        return result

    def save(self, filepath: str) -> None:
        """Save report to JSON file."""
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Saved batch report to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the report."""
        lines = [
            f"Simulation Report ({self.n_scored}/{self.n_sessions} sessions scored)",
            "=" * 50,
        ]
        for name, stats, unit in [
            ("Salary", self.salary_stats, "万円"),
            ("Overtime", self.overtime_stats, "h/month"),
        ]:
            if stats is None:
                continue
            lines.extend([
                "",
                f"{name} ({unit}):",
                f"  Mean: {stats.mean:.1f}",
                f"  Std:  {stats.std:.1f}",
                f"  Min:  {stats.min:.0f}",
                f"  Max:  {stats.max:.0f}",
            ])
            for q_name, q_value in stats.quantiles.items():
                lines.append(f"  {q_name}: {q_value:.1f}")

        lines.extend([
            "",
            f"Salary goal met:   {self.salary_goal_rate:.1%}",
            f"Overtime goal met: {self.overtime_goal_rate:.1%}",
        ])
        return "\n".join(lines)


def compare_goals(state: UserState, predicted_salary: int, predicted_overtime: int) -> GoalComparison:
    """Put predictions next to the goals stored in the session."""
    return GoalComparison.from_state(state, predicted_salary, predicted_overtime)


def axis_gaps(profile: ProjectedProfile, reference: str = "average") -> Dict[str, float]:
    """
    Per-axis difference between the projected profile and a reference overlay.

    Args:
        profile: Combined profile
        reference: "average" (industry norm) or "target" (star ratings)

    Returns:
        Axis -> projected minus reference
    """
    if reference not in ("average", "target"):
        raise ValueError(f"reference must be 'average' or 'target', got {reference!r}")
    other = getattr(profile, reference)
    return {axis: float(profile.projected[i] - other[i]) for i, axis in enumerate(AXES)}


def summarize_results(results: Sequence[Optional[SimulationResult]]) -> pd.DataFrame:
    """
    Tabulate results, one row per scored session.

    Columns: industry, size_index, size_label, role, predicted_salary,
    predicted_overtime, salary_gap, overtime_gap and one ``you_<axis>``
    column per axis. Unscored sessions (None) are skipped.
    """
    rows = []
    for result in results:
        if result is None:
            continue
        row = {
            "industry": result.industry,
            "size_index": result.size_index,
            "size_label": result.size_label,
            "role": result.role,
            "predicted_salary": result.predicted_salary,
            "predicted_overtime": result.predicted_overtime,
            "salary_gap": result.goals.salary_gap,
            "overtime_gap": result.goals.overtime_gap,
        }
        for i, axis in enumerate(AXES):
            row[f"you_{axis}"] = float(result.profile.projected[i])
        rows.append(row)

    columns = [
        "industry", "size_index", "size_label", "role",
        "predicted_salary", "predicted_overtime", "salary_gap", "overtime_gap",
    ] + [f"you_{axis}" for axis in AXES]
    return pd.DataFrame(rows, columns=columns)


def compute_outcome_distribution_stats(
    values: np.ndarray,
    quantiles: List[float] = [0.1, 0.25, 0.5, 0.75, 0.9]
) -> OutcomeDistributionStats:
    """
    Compute distribution statistics for one predicted outcome.

    Args:
        values: Array of predicted values
        quantiles: Quantile values to compute (default: p10, p25, p50, p75, p90)

    Returns:
        OutcomeDistributionStats instance
    """
    values = np.asarray(values, dtype=float)
    quantile_dict = {
        f"p{int(q * 100)}": float(np.percentile(values, q * 100))
        for q in quantiles
    }

    return OutcomeDistributionStats(
        mean=float(np.mean(values)),
        std=float(np.std(values)),
        min=float(np.min(values)),
        max=float(np.max(values)),
        quantiles=quantile_dict
    )


def create_batch_report(results: Sequence[Optional[SimulationResult]]) -> BatchReport:
    """
    Build a BatchReport from simulator output.

    Args:
        results: Output of CareerSimulator.simulate_batch

    Returns:
        BatchReport instance
    """
    df = summarize_results(results)
    n_sessions = len(results)
    n_scored = len(df)

    if n_scored == 0:
        logger.warning("No scored sessions in batch")
        return BatchReport(
            n_sessions=n_sessions,
            n_scored=0,
            salary_stats=None,
            overtime_stats=None,
            salary_goal_rate=0.0,
            overtime_goal_rate=0.0
        )

    report = BatchReport(
        n_sessions=n_sessions,
        n_scored=n_scored,
        salary_stats=compute_outcome_distribution_stats(df["predicted_salary"].values),
        overtime_stats=compute_outcome_distribution_stats(df["predicted_overtime"].values),
        salary_goal_rate=float((df["salary_gap"] >= 0).mean()),
        overtime_goal_rate=float((df["overtime_gap"] <= 0).mean()),
        additional_metrics={
            "sessions_per_industry": {k: int(v) for k, v in df["industry"].value_counts().items()}
        }
    )
    logger.info(f"Batch report: {n_scored}/{n_sessions} sessions scored")
    return report


def sanity_check_monotonicity(
    industry: str,
    size_index: int,
    axis: str = "speed",
    outcome: str = "salary",
    base_level: float = 0.5,
    n_steps: int = 21
) -> MonotonicityCheck:
    """
    Sweep one axis of the projected profile from 0 to 1 and count ordering
    violations of the chosen predictor.

    Salary and overtime are expected to be non-decreasing in speed;
    overtime is expected to be non-increasing in worklife.

    Args:
        industry: Industry name or slug
        size_index: Size bucket
        axis: Axis to sweep
        outcome: "salary" or "overtime"
        base_level: Value used for all other axes
        n_steps: Number of sweep points

    Returns:
        MonotonicityCheck instance
    """
    predictors = {"salary": predict_salary, "overtime": predict_overtime}
    if outcome not in predictors:
        raise ValueError(f"outcome must be 'salary' or 'overtime', got {outcome!r}")
    predictor = predictors[outcome]

    expected = "non_increasing" if (outcome == "overtime" and axis == "worklife") else "non_decreasing"
    idx = AXES.index(axis)

    values = []
    for level in np.linspace(0.0, 1.0, n_steps):
        vec = np.full(len(AXES), base_level)
        vec[idx] = level
        values.append(predictor(vec, industry, size_index))

    diffs = np.diff(values)
    if expected == "non_decreasing":
        n_violations = int(np.sum(diffs < 0))
    else:
        n_violations = int(np.sum(diffs > 0))

    if n_violations:
        logger.warning(f"{outcome} is not {expected} in {axis}: {n_violations} violations")

    return MonotonicityCheck(
        axis=axis,
        outcome=outcome,
        expected=expected,
        n_steps=n_steps,
        n_violations=n_violations
    )
