"""Configuration for the language tutor.

Algorithm constants live here as module-level values; per-session settings
that a user may override from the command line live on GameConfig.
"""

from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, Field

DATA_DIR = Path(__file__).parent / "data"

# Progression
XP_THRESHOLDS = [0, 100, 250, 500, 1000, 2000, 4000, 8000]  # index i -> level i+1

# Scoring
BASE_POINTS = {"easy": 5, "medium": 10, "hard": 15}
FIRST_TRY_BONUS = 5
FUZZY_MATCH_THRESHOLD = 0.85  # minimum similarity for a translation typo to pass

# Combo multipliers, checked from the highest tier down: (min_combo, multiplier)
COMBO_TIERS = [(5, 2.0), (3, 1.5)]

# Energy
DEFAULT_MAX_ENERGY = 5
ENERGY_REGEN_INTERVAL = timedelta(hours=1)  # one point per whole interval


class GameConfig(BaseModel):
    """Per-session game settings."""

    max_energy: int = Field(default=DEFAULT_MAX_ENERGY, ge=1)
    data_dir: Path = DATA_DIR
