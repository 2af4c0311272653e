from __future__ import annotations

"""
Fixed parameters of the wine quality experiment. PipelineConfig picks these up
as defaults; nothing else should read them directly.
"""

from pathlib import Path

PROJECT_DIR = Path(__file__).resolve().parent.parent
DATA_PATH = PROJECT_DIR / "Data" / "wine.csv"

# ----- CSV -----
SEPARATOR = ";"
HAS_HEADER = True
INFER_SCHEMA_ROWS = 10000

# ----- Label -----
TARGET_COLUMN = "quality"
QUALITY_THRESHOLD = 5  # quality > 5 is a "good" wine
# "class" mirrors quality in the wine dataset, keep it out of the features
NON_FEATURE_COLUMNS = ("quality", "class")

# ----- Split / model -----
TRAIN_RATIO = 0.9
MAX_ITER = 150
LEARNING_RATE = 0.1
TOLERANCE = 1e-6
L2 = 0.0

# ----- Report -----
PREVIEW_ROWS = 10
TOP_K_COEFFICIENTS = 5
