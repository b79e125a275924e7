"""Dashboard controller tying the derivation steps together.

The controller owns the inputs of one dashboard session: the latest
summary, the hidden-category set and the savings goals.  Whenever one
of them changes the caller simply reads the derived values again; every
property recomputes from the current inputs, so there is no cache to
invalidate.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd

from . import config
from .forecast import project_forecast
from .models import CategoryTotal, SavingsGoal, Summary, as_savings_goals
from .savings import SavingsProgress, summarize_savings_goals
from .summary import normalize_summary
from .visibility import VisibilityFilter, VisibleTotals


class DashboardController:
    """Recompute dashboard figures from the current summary, hidden set and goals."""

    def __init__(
        self,
        summary: Union[Summary, Mapping[str, Any], None] = None,
        goals: Optional[Iterable[SavingsGoal]] = None,
        locale: str = config.FORECAST_LOCALE,
    ) -> None:
        self.visibility = VisibilityFilter()
        self.locale = locale
        self.summary = Summary()
        self.goals: List[SavingsGoal] = as_savings_goals(goals)
        if summary is not None:
            self.ingest_summary(summary)

    # Inputs -----------------------------------------------------------------

    def ingest_summary(self, summary: Union[Summary, Mapping[str, Any]]) -> Summary:
        """Replace the current summary and prune stale hidden categories."""
        if not isinstance(summary, Summary):
            summary = normalize_summary(summary)
        self.summary = summary
        self.visibility.prune(summary.category_totals)
        return summary

    def toggle_category(self, label: str) -> None:
        self.visibility.toggle(label)

    def reload_goals(self, goals: Iterable[SavingsGoal]) -> None:
        self.goals = as_savings_goals(goals)

    # Derived values -----------------------------------------------------------

    @property
    def hidden_categories(self) -> List[str]:
        return sorted(self.visibility.hidden)

    @property
    def visible_totals(self) -> VisibleTotals:
        return self.visibility.apply(self.summary)

    @property
    def visible_category_totals(self) -> List[CategoryTotal]:
        return self.visible_totals.category_totals

    @property
    def visible_fixed_total(self) -> float:
        return self.visible_totals.fixed_total

    @property
    def visible_free_after_fixed(self) -> float:
        return self.visible_totals.free_after_fixed

    @property
    def savings_stats(self) -> SavingsProgress:
        return summarize_savings_goals(self.goals)

    def forecast(self, now: Optional[Any] = None) -> pd.DataFrame:
        totals = self.visible_totals
        return project_forecast(totals.fixed_total, totals.free_after_fixed, now=now, locale=self.locale)

    def snapshot(self, now: Optional[Any] = None) -> Dict[str, Any]:
        """Everything the presentation layer renders, as plain data."""
        totals = self.visible_totals
        forecast = project_forecast(totals.fixed_total, totals.free_after_fixed, now=now, locale=self.locale)
        return {
            'visibleCategoryTotals': [asdict(item) for item in totals.category_totals],
            'visibleFixedTotal': totals.fixed_total,
            'visibleFreeAfterFixed': totals.free_after_fixed,
            'hiddenCategories': self.hidden_categories,
            'categoryBadge': self.visibility.category_badge(self.summary.category_totals),
            'levelTotals': [asdict(item) for item in self.summary.level_totals],
            'bindingExpirations': [asdict(item) for item in self.summary.binding_expirations],
            'tagTotals': dict(self.summary.tag_totals),
            'fixedExpensesCount': self.summary.fixed_expenses_count,
            'forecast': forecast.to_dict(orient='records'),
            'savings': self.savings_stats.as_dict(),
        }
