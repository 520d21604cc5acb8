"""Scoring engine: preference vector, profile combination and outcome predictors."""

from .vector_builder import (
    BlendConfig,
    build_preference_vector,
    build_base_vector,
    normalize_stars,
)
from .combiner import ProjectedProfile, combine_profile, combine_vectors
from .predictors import predict_salary, predict_overtime

__all__ = [
    "BlendConfig",
    "build_preference_vector",
    "build_base_vector",
    "normalize_stars",
    "ProjectedProfile",
    "combine_profile",
    "combine_vectors",
    "predict_salary",
    "predict_overtime",
]
