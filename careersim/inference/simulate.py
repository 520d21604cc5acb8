"""
Career simulation from wizard session state.

This module provides the simulation step that:
1. Builds the preference vector from star ratings and scenario answers
2. Combines it with the selected industry and size profiles
3. Predicts third-year salary and overtime from the projected profile
4. Compares the predictions with the user's goals

The simulator holds no state besides its blend configuration; every call is
a pure function of the session it is given.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..configs import load_config, validate_config
from ..reference import AXES, get_industry, get_size
from ..scoring.combiner import ProjectedProfile, combine_profile
from ..scoring.predictors import predict_overtime, predict_salary
from ..scoring.vector_builder import BlendConfig, build_base_vector, build_preference_vector
from .schema import GoalComparison, SimulationResult, UserState

logger = logging.getLogger(__name__)


class CareerSimulator:
    """
    Third-year career profile simulator.

    Attributes:
        blend_config: Constants used to build preference vectors
    """

    def __init__(self, blend_config: Optional[BlendConfig] = None):
        """
        Initialize the simulator.

        Args:
            blend_config: Blend constants (defaults to BlendConfig())
        """
        self.blend_config = blend_config or BlendConfig()
        self.blend_config.validate()
        logger.info(f"Initialized CareerSimulator with blend={self.blend_config.to_dict()}")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "CareerSimulator":
        """Create from main config dictionary."""
        return cls(BlendConfig.from_config(config))

    def preference(self, state: UserState):
        """Preference vector for a session (6 floats in [0, 1])."""
        return build_preference_vector(state.star_ratings, state.answers, self.blend_config)

    def project(self, state: UserState) -> Optional[ProjectedProfile]:
        """
        Projected, average and target profiles for a session.

        Returns:
            ProjectedProfile, or None while industry or size is unselected
        """
        if not state.has_selection():
            return None
        return combine_profile(
            state.industry,
            state.size_index,
            self.preference(state),
            target=build_base_vector(state.star_ratings)
        )

    def simulate(self, state: UserState) -> Optional[SimulationResult]:
        """
        Run the full simulation for one session.

        Args:
            state: Current user state

        Returns:
            SimulationResult, or None while industry or size is unselected
        """
        if not state.has_selection():
            logger.debug("Selection incomplete (industry or size unset); no result")
            return None

        preference = self.preference(state)
        profile = self.project(state)

        salary = predict_salary(profile.projected, state.industry, state.size_index)
        overtime = predict_overtime(profile.projected, state.industry, state.size_index)

        goals = GoalComparison.from_state(state, salary, overtime)

        return SimulationResult(
            industry=get_industry(state.industry).name,
            size_index=state.size_index,
            size_label=get_size(state.size_index).label,
            role=state.role,
            preference=dict(zip(AXES, map(float, preference))),
            profile=profile,
            predicted_salary=salary,
            predicted_overtime=overtime,
            goals=goals,
        )

    def simulate_batch(self, states: Iterable[UserState]) -> List[Optional[SimulationResult]]:
        """
        Simulate multiple sessions.

        Args:
            states: Iterable of UserState

        Returns:
            List of results in input order (None for incomplete selections)
        """
        results = []
        for state in states:
            results.append(self.simulate(state))
        skipped = sum(1 for r in results if r is None)
        if skipped:
            logger.warning(f"{skipped} of {len(results)} sessions have no industry/size selection")
        return results


def create_simulator(config_path: Optional[str] = None) -> CareerSimulator:
    """
    Factory function to create a CareerSimulator.

    Args:
        config_path: Optional path to a YAML configuration file; defaults
            are used when omitted

    Returns:
        Configured CareerSimulator instance
    """
    if config_path is None:
        return CareerSimulator()

    config = load_config(config_path)
    for issue in validate_config(config):
        logger.warning(f"Config issue: {issue}")
    return CareerSimulator.from_config(config)
