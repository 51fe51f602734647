"""repsim: replicated stochastic experiments for simulated teaching data."""

from .entities import CollectionMode, Rectangular, ReplicationRequest, Sequence
from .errors import InvalidArgument, ShapeMismatch
from .sequences import rep
from .tables import make_table
from .simulation import (
    ExperimentRunner,
    RandomStream,
    default_stream,
    replicate,
    run_experiment,
    sample_binomial,
    sample_choice,
    sample_normal,
    sample_uniform,
    set_seed,
)
from .datasets import simulate_groups
from .config import ReplicationSettings, load_settings
from .reporting import export_results, summarize, to_frame, trial_statistics

SIMPLIFY = CollectionMode.SIMPLIFY
LIST = CollectionMode.LIST

__version__ = "0.1.0"

__all__ = [
    "CollectionMode",
    "SIMPLIFY",
    "LIST",
    "Rectangular",
    "Sequence",
    "ReplicationRequest",
    "InvalidArgument",
    "ShapeMismatch",
    "ExperimentRunner",
    "replicate",
    "run_experiment",
    "RandomStream",
    "default_stream",
    "set_seed",
    "sample_normal",
    "sample_uniform",
    "sample_binomial",
    "sample_choice",
    "rep",
    "make_table",
    "simulate_groups",
    "ReplicationSettings",
    "load_settings",
    "trial_statistics",
    "summarize",
    "to_frame",
    "export_results",
]
