"""Category visibility toggling for the fixed-expense breakdown.

The user can hide categories from the breakdown chart.  Hiding a
category removes it from the visible totals and, when the active income
is known, from the free-after-fixed figure too.  When the income is
unknown the free-after-fixed figure is passed through from the summary
unchanged even though the visible fixed total moves; callers rely on
that behaviour, so it is kept as is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set

from .models import CategoryTotal, Summary, finite_number


@dataclass(frozen=True)
class VisibleTotals:
    category_totals: List[CategoryTotal]
    fixed_total: float
    free_after_fixed: float


def _sum_totals(totals: Iterable[CategoryTotal]) -> float:
    return float(sum(finite_number(item.total) or 0.0 for item in totals))


@dataclass
class VisibilityFilter:
    """Holds the hidden-category set of one dashboard session."""

    hidden: Set[str] = field(default_factory=set)

    def toggle(self, label: str) -> None:
        if label in self.hidden:
            self.hidden.discard(label)
        else:
            self.hidden.add(label)

    def is_hidden(self, label: str) -> bool:
        return label in self.hidden

    def prune(self, category_totals: Sequence[CategoryTotal]) -> None:
        """Drop hidden labels that no longer name a current category."""
        present = {item.category for item in category_totals}
        self.hidden &= present

    def visible_category_totals(self, category_totals: Sequence[CategoryTotal]) -> List[CategoryTotal]:
        return [item for item in category_totals if item.category not in self.hidden]

    def visible_fixed_total(
        self,
        category_totals: Sequence[CategoryTotal],
        default_total: float,
    ) -> float:
        """Sum of visible categories; ``default_total`` when there are no categories."""
        if not category_totals:
            return default_total
        return _sum_totals(self.visible_category_totals(category_totals))

    def visible_free_after_fixed(
        self,
        category_totals: Sequence[CategoryTotal],
        visible_fixed_total: float,
        free_after_fixed: float,
        active_income: Optional[float],
    ) -> float:
        if not category_totals:
            return free_after_fixed
        if active_income is not None:
            return active_income - visible_fixed_total
        # Income unknown: keep the supplied figure even if visible_fixed_total moved.
        return free_after_fixed

    def apply(self, summary: Summary) -> VisibleTotals:
        """Prune against ``summary`` and compute all visible figures from it."""
        self.prune(summary.category_totals)
        fixed_total = self.visible_fixed_total(summary.category_totals, summary.fixed_expense_total)
        return VisibleTotals(
            category_totals=self.visible_category_totals(summary.category_totals),
            fixed_total=fixed_total,
            free_after_fixed=self.visible_free_after_fixed(
                summary.category_totals,
                fixed_total,
                summary.free_after_fixed,
                summary.active_monthly_net_income,
            ),
        )

    def category_badge(self, category_totals: Sequence[CategoryTotal]) -> str:
        """Short "n categories" caption, "visible/total" while some are hidden."""
        if not category_totals:
            return ''
        total = len(category_totals)
        visible = len(self.visible_category_totals(category_totals))
        if visible < total:
            return f"{visible}/{total} categories"
        return f"{total} categories"
