import os
from typing import List, Optional
import matplotlib.pyplot as plt

from .charts import plot_sample_size, save_chart
from .config import FIGSIZE, OUTPUT_DIR
from .grid import sweep
from .logger import setup_logger

logger = setup_logger(__name__)

# varying parameter -> (chart file, title)
ANALYSES = {
    "mde": ("sample_size_by_mde.png", "Required sample size vs. minimum detectable effect"),
    "alpha": ("sample_size_by_alpha.png", "Required sample size vs. significance level"),
    "baseline_rate": ("sample_size_by_baseline_rate.png", "Required sample size vs. baseline conversion rate"),
}


def run(output_dir: Optional[str] = None) -> List[str]:
    output_dir = output_dir or OUTPUT_DIR
    os.makedirs(output_dir, exist_ok=True)

    paths = []
    for vary, (filename, title) in ANALYSES.items():
        frame = sweep(vary)
        logger.info("Sample size by %s:\n%s", vary,
                    frame[[vary, "treatment_rate", "sample_size"]].to_string(index=False))

        fig, ax = plt.subplots(figsize=FIGSIZE)
        try:
            plot_sample_size(frame, vary, ax=ax, title=title)
            paths.append(save_chart(fig, os.path.join(output_dir, filename)))
        finally:
            plt.close(fig)
    return paths


def main():
    for path in run():
        print(f"Wrote: {path}")


if __name__ == "__main__":
    main()
