import os
import numpy as np

# ---------------------
# Fixed parameters (held constant while another one varies)
# ---------------------
DEFAULT_POWER = 0.8
DEFAULT_ALPHA = 0.05         # two-sided significance level
DEFAULT_BASELINE = 0.5       # 50% control conversion rate
DEFAULT_MDE = 0.05           # +5% relative lift on baseline

# ---------------------
# Ranges swept by the three analyses
# ---------------------
MDE_RANGE = np.round(np.arange(0.01, 0.101, 0.01), 2)
ALPHA_RANGE = np.array([0.01, 0.025, 0.05, 0.075, 0.10, 0.15, 0.20])
BASELINE_RANGE = np.round(np.arange(0.05, 0.501, 0.05), 2)

# ---------------------
# Output
# ---------------------
OUTPUT_DIR = os.environ.get("SAMPLE_SIZE_EXPLORER_OUTPUT_DIR", "charts")
LOG_LEVEL = os.environ.get("SAMPLE_SIZE_EXPLORER_LOG_LEVEL", "INFO")
FIGSIZE = (10, 6)
DPI = 150
