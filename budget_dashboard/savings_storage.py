"""Read savings goals kept by the local goal store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from . import config
from .models import SavingsGoal, as_savings_goals

logger = logging.getLogger(__name__)


def load_savings_goals(path: Path | None = None) -> List[SavingsGoal]:
    target = Path(path) if path is not None else config.SAVINGS_GOALS_PATH
    if not target.exists():
        return []
    try:
        with target.open('r', encoding='utf-8') as handle:
            data = json.load(handle)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read savings goals from %s: %s", target, exc)
        return []
    if isinstance(data, dict):
        data = data.get('goals')
    if not isinstance(data, list):
        return []
    return as_savings_goals(data)
