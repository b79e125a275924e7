"""Configuration management for the budget dashboard.

This module centralizes configuration values including paths, labels,
projection constants, and environment variable overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base project root - assumes this file is in budget_dashboard/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directories
DATA_DIR = Path(os.getenv("BUDGET_DATA_DIR", _PROJECT_ROOT / "data"))
SAVINGS_GOALS_PATH = Path(
    os.getenv("BUDGET_SAVINGS_GOALS_PATH", DATA_DIR / "savings_goals.json")
)

# Presentation
FORECAST_LOCALE = os.getenv("BUDGET_LOCALE", "nb_NO")
DEFAULT_CATEGORY_COLOR = "#94a3b8"

# Logging
LOG_LEVEL = os.getenv("BUDGET_LOG_LEVEL", "WARNING").upper()

# Derivation constants
BINDING_WINDOW_DAYS = 90
FORECAST_MONTHS = 12

# Sentinel buckets for expenses without a category or priority level
UNCATEGORIZED_LABEL = "Uncategorized"
UNSPECIFIED_LEVEL_LABEL = "Unspecified"

