"""
Inference module for career simulation.

This module provides the session schema and the simulator that turns
wizard input into a projected third-year profile and outcome predictions.
"""

from .schema import UserState, GoalComparison, SimulationResult
from .simulate import CareerSimulator, create_simulator

__all__ = [
    "UserState",
    "GoalComparison",
    "SimulationResult",
    "CareerSimulator",
    "create_simulator",
]
