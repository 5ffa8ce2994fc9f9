"""Central configuration for the Employee Data Generator project."""

from pathlib import Path
from dotenv import load_dotenv
import os

load_dotenv()

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# Data paths
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
EXPORTS_DIR = DATA_DIR / "exports"

# Ensure data directories exist
for d in [RAW_DATA_DIR, EXPORTS_DIR]:
    d.mkdir(parents=True, exist_ok=True)

# Random seed for reproducibility (unset = fresh entropy on every run)
_seed = os.getenv("RANDOM_SEED", "").strip()
RANDOM_SEED = int(_seed) if _seed else None

# Where first names and surnames come from: "profile" or "faker"
NAME_SOURCE = os.getenv("NAME_SOURCE", "profile").strip().lower()
FAKER_LOCALE = os.getenv("FAKER_LOCALE", "en_US")

# Write the generated batch to data/raw/<generator>/ as CSV
SAVE_RAW_DATA = os.getenv("SAVE_RAW_DATA", "").strip().lower() in ("1", "true", "yes")
