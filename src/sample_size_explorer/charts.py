import os
from typing import Optional
from matplotlib.axes import Axes
from matplotlib.figure import Figure
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter, PercentFormatter
import pandas as pd

from .config import DPI, FIGSIZE

AXIS_LABELS = {
    "mde": "Minimum detectable effect (relative)",
    "alpha": "Significance level",
    "baseline_rate": "Baseline conversion rate",
}


def format_thousands(n: float) -> str:
    return f"{n / 1000:.1f}K"


def plot_sample_size(frame: pd.DataFrame,
                     vary: str,
                     ax: Optional[Axes] = None,
                     title: Optional[str] = None,
                     ) -> Axes:
    """
    Line chart of required per-group sample size against one swept parameter.

    Each point is labelled with its sample size in thousands; the x-axis is
    rendered as a percentage.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=FIGSIZE)

    x = frame[vary].to_numpy()
    y = frame["sample_size_raw"].to_numpy()
    ax.plot(x, y, "o-", color="tab:blue")

    for xi, yi in zip(x, y):
        ax.annotate(format_thousands(yi),
                    xy=(xi, yi),
                    xytext=(0, 8),
                    textcoords="offset points",
                    ha="center",
                    fontsize=9)

    ax.xaxis.set_major_formatter(PercentFormatter(xmax=1))
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: f"{v:,.0f}"))
    ax.set_xlabel(AXIS_LABELS.get(vary, vary))
    ax.set_ylabel("Required sample size per group")
    ax.set_title(title or f"Sample size by {AXIS_LABELS.get(vary, vary).lower()}")
    ax.grid(True, linestyle="--", alpha=0.7)
    return ax


def save_chart(fig: Figure, path: str) -> str:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=DPI)
    return path
