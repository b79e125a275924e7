"""Category and priority-level totals for fixed expenses.

Each expense with a valid monthly amount lands in exactly one category
bucket and exactly one level bucket, so both total lists always sum to
the same figure.  Bucket order follows the first appearance of each
label in the input.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from . import config
from .models import CategoryTotal, FixedExpense, LevelTotal, as_fixed_expenses, valid_amount

logger = logging.getLogger(__name__)

EXPENSE_COLUMNS = ['Category', 'Level', 'Amount']


def expense_frame(expenses: Iterable[FixedExpense]) -> pd.DataFrame:
    """Build a DataFrame of the summable expenses with sentinel labels applied."""
    rows = []
    for expense in as_fixed_expenses(expenses):
        amount = valid_amount(expense.amount_per_month)
        if amount is None:
            logger.debug(
                "Skipping fixed expense %r: invalid amountPerMonth %r",
                expense.id,
                expense.amount_per_month,
            )
            continue
        rows.append({
            'Category': expense.category or config.UNCATEGORIZED_LABEL,
            'Level': expense.level or config.UNSPECIFIED_LEVEL_LABEL,
            'Amount': amount,
        })
    return pd.DataFrame(rows, columns=EXPENSE_COLUMNS)


def _grouped_totals(frame: pd.DataFrame, column: str) -> pd.Series:
    if frame.empty:
        return pd.Series(dtype=float)
    return frame.groupby(column, sort=False)['Amount'].sum()


def category_totals(
    expenses: Iterable[FixedExpense],
    category_colors: Optional[Mapping[str, str]] = None,
) -> List[CategoryTotal]:
    """Sum monthly amounts per category in first-seen order."""
    return aggregate_fixed_expenses(expenses, category_colors)[0]


def level_totals(expenses: Iterable[FixedExpense]) -> List[LevelTotal]:
    """Sum monthly amounts per priority level in first-seen order."""
    return aggregate_fixed_expenses(expenses)[1]


def aggregate_fixed_expenses(
    expenses: Iterable[FixedExpense],
    category_colors: Optional[Mapping[str, str]] = None,
) -> Tuple[List[CategoryTotal], List[LevelTotal]]:
    """Return ``(category_totals, level_totals)`` from a single pass over ``expenses``.

    Example:
        >>> cats, levels = aggregate_fixed_expenses([
        ...     {'id': 1, 'category': 'Housing', 'level': 'Must', 'amountPerMonth': 900},
        ...     {'id': 2, 'category': '', 'level': 'Must', 'amountPerMonth': 100},
        ... ])
        >>> [(c.category, c.total) for c in cats]
        [('Housing', 900.0), ('Uncategorized', 100.0)]
        >>> [(lv.level, lv.total) for lv in levels]
        [('Must', 1000.0)]
    """
    colors = category_colors or {}
    frame = expense_frame(expenses)
    cats = [
        CategoryTotal(category=str(label), total=float(total), color=colors.get(label))
        for label, total in _grouped_totals(frame, 'Category').items()
    ]
    levels = [
        LevelTotal(level=str(label), total=float(total))
        for label, total in _grouped_totals(frame, 'Level').items()
    ]
    return cats, levels


def fixed_expense_total(expenses: Iterable[FixedExpense]) -> float:
    """Sum of all valid monthly amounts."""
    frame = expense_frame(expenses)
    return float(frame['Amount'].sum()) if not frame.empty else 0.0
