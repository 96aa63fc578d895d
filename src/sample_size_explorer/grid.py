from typing import Optional, Sequence
import numpy as np
import pandas as pd

from .config import (
    ALPHA_RANGE,
    BASELINE_RANGE,
    DEFAULT_ALPHA,
    DEFAULT_BASELINE,
    DEFAULT_MDE,
    DEFAULT_POWER,
    MDE_RANGE,
)
from .logger import setup_logger
from .power import InvalidParameter, PowerQuery, treatment_rate_from_mde

logger = setup_logger(__name__)

DEFAULTS = {
    "baseline_rate": DEFAULT_BASELINE,
    "mde": DEFAULT_MDE,
    "alpha": DEFAULT_ALPHA,
    "power": DEFAULT_POWER,
}

RANGES = {
    "mde": MDE_RANGE,
    "alpha": ALPHA_RANGE,
    "baseline_rate": BASELINE_RANGE,
}

COLUMNS = ["baseline_rate", "mde", "treatment_rate", "alpha", "power"]


def build_grid(vary: str, values: Optional[Sequence[float]] = None, **fixed: float) -> pd.DataFrame:
    if vary not in RANGES:
        raise InvalidParameter("vary", vary, f"must be one of {sorted(RANGES)}.")
    unknown = set(fixed) - set(DEFAULTS)
    if unknown:
        raise InvalidParameter("fixed", sorted(unknown), f"unknown parameter(s); expected {sorted(DEFAULTS)}.")
    if vary in fixed:
        raise InvalidParameter(vary, fixed[vary], "cannot be both varied and held fixed.")

    values = np.atleast_1d(np.asarray(RANGES[vary] if values is None else values, dtype=float))
    if values.ndim != 1:
        raise InvalidParameter("values", values.tolist(), "must be a flat sequence of values.")
    if values.size == 0:
        raise InvalidParameter("values", [], "need at least one value to sweep.")

    params = {**DEFAULTS, **fixed}
    grid = pd.DataFrame({vary: values})
    for name, value in params.items():
        if name != vary:
            grid[name] = value
    grid["treatment_rate"] = treatment_rate_from_mde(grid["baseline_rate"], grid["mde"])
    return grid[COLUMNS]


def evaluate_grid(grid: pd.DataFrame) -> pd.DataFrame:
    queries = [
        PowerQuery(row.baseline_rate, row.treatment_rate, row.alpha, row.power)
        for row in grid.itertuples(index=False)
    ]
    raw = np.array([q.sample_size() for q in queries], dtype=float)

    out = grid.copy()
    out["sample_size_raw"] = raw
    out["sample_size"] = np.ceil(raw).astype(int)
    if len(out):
        logger.debug("Evaluated %d grid rows (n from %.0f to %.0f)", len(out), raw.min(), raw.max())
    return out


def sweep(vary: str, values: Optional[Sequence[float]] = None, **fixed: float) -> pd.DataFrame:
    return evaluate_grid(build_grid(vary, values, **fixed))
