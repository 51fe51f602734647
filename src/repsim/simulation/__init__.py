"""Stochastic simulation package: random streams and the replication engine."""

from .stochastics import (
    RandomStream,
    default_stream,
    sample_binomial,
    sample_choice,
    sample_normal,
    sample_uniform,
    set_seed,
)
from .engine import ExperimentRunner, replicate, run_experiment

__all__ = [
    "RandomStream",
    "default_stream",
    "set_seed",
    "sample_normal",
    "sample_uniform",
    "sample_binomial",
    "sample_choice",
    "ExperimentRunner",
    "replicate",
    "run_experiment",
]
