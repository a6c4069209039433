"""
Fixed statistical constants shared across trialstats.

These values define the numeric contract of every displayed statistic.
They are intentionally not configurable at runtime: downstream charts
compare against values computed with exactly these settings.
"""

# Normal quantile used for every 95% interval (normal approximation,
# not a t quantile).
Z_95 = 1.96

# Three-bucket p-value approximation for the Welch t statistic.
P_BUCKET_05 = 1.96
P_BUCKET_01 = 2.58
P_ABOVE_05 = ">0.05"
P_BELOW_05 = "<0.05"
P_BELOW_01 = "<0.01"

# Percent change from baseline at or below which a patient is a responder.
RESPONDER_THRESHOLD = -20.0

# Kaplan-Meier median is the first time survival falls strictly below this.
MEDIAN_SURVIVAL_LEVEL = 0.5

# Equal-width bins on [0, 1] for calibration curves.
CALIBRATION_BINS = 10

# Default threshold-probability grid for decision curves: 0.01, 0.03, ..., 0.99.
DECISION_GRID_START = 0.01
DECISION_GRID_STEP = 0.02
DECISION_GRID_STOP = 0.99

# Default classification threshold for confusion counts.
DEFAULT_THRESHOLD = 0.5
