from .power import (
    InvalidParameter,
    PowerQuery,
    achieved_power,
    compute_sample_size,
    required_sample_size,
    treatment_rate_from_mde,
)
from .grid import build_grid, evaluate_grid, sweep

__all__ = [
    "InvalidParameter",
    "PowerQuery",
    "achieved_power",
    "build_grid",
    "compute_sample_size",
    "evaluate_grid",
    "required_sample_size",
    "sweep",
    "treatment_rate_from_mde",
]
