"""Savings goal progress statistics."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable

from .models import SavingsGoal, as_savings_goals, valid_amount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavingsProgress:
    goal_count: int = 0
    total_saved: float = 0.0
    total_target: float = 0.0
    avg_progress: int = 0

    def as_dict(self) -> Dict[str, float]:
        return {
            'goalCount': self.goal_count,
            'totalSaved': self.total_saved,
            'totalTarget': self.total_target,
            'avgProgress': self.avg_progress,
        }


def progress_percent(saved: float, target: float) -> int:
    """Whole-number percentage, rounded half up; 0 when there is no target."""
    if not target:
        return 0
    return int(math.floor(100.0 * saved / target + 0.5))


def summarize_savings_goals(goals: Iterable[SavingsGoal]) -> SavingsProgress:
    """Aggregate saved and target amounts across ``goals``.

    Every goal counts towards ``goal_count``; amounts that are negative,
    non-finite or non-numeric are left out of the sums.  The progress is
    not capped, so over-saved goals can push it past 100.
    """
    records = as_savings_goals(goals)
    total_saved = 0.0
    total_target = 0.0
    for goal in records:
        saved = valid_amount(goal.saved_amount)
        target = valid_amount(goal.target_amount)
        if saved is None or target is None:
            logger.debug("Savings goal %r has an invalid amount", goal.id)
        total_saved += saved or 0.0
        total_target += target or 0.0

    goal_count = len(records)
    avg_progress = progress_percent(total_saved, total_target) if goal_count else 0
    return SavingsProgress(
        goal_count=goal_count,
        total_saved=total_saved,
        total_target=total_target,
        avg_progress=avg_progress,
    )
