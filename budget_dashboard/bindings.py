"""Track fixed expenses whose binding period ends soon."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, List, Optional

import pandas as pd

from . import config
from .models import BindingExpiration, FixedExpense, as_fixed_expenses, finite_number

logger = logging.getLogger(__name__)

_ONE_DAY = pd.Timedelta(days=1)


def parse_binding_date(value: Any) -> Optional[pd.Timestamp]:
    """Parse a binding end date into a naive timestamp, or ``None`` when unparseable."""
    if not isinstance(value, (str, date, datetime, pd.Timestamp)):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        parsed = pd.to_datetime(value, errors='coerce')
    except (TypeError, ValueError, OverflowError):
        return None
    if not isinstance(parsed, pd.Timestamp) or pd.isna(parsed):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.tz_convert('UTC').tz_localize(None)
    return parsed


def days_until(end: pd.Timestamp, now: pd.Timestamp) -> int:
    """Whole days from ``now`` to ``end``, floored."""
    return int((end - now) // _ONE_DAY)


def upcoming_binding_expirations(
    expenses: Iterable[FixedExpense],
    now: Optional[Any] = None,
    window_days: int = config.BINDING_WINDOW_DAYS,
) -> List[BindingExpiration]:
    """Return expenses whose binding ends within ``[0, window_days]`` days of ``now``.

    Results are ordered by ``days_left`` and then by name.  Records with a
    missing or unparseable binding date are left out, as are records whose
    end date lies in the past or beyond the window.
    """
    if window_days < 0:
        raise ValueError("window_days must be non-negative")

    reference = parse_binding_date(now) if now is not None else pd.Timestamp.now()
    if reference is None:
        raise ValueError(f"Unparseable reference time: {now!r}")

    upcoming: List[BindingExpiration] = []
    for expense in as_fixed_expenses(expenses):
        if expense.binding_end_date is None:
            continue
        end = parse_binding_date(expense.binding_end_date)
        if end is None:
            logger.debug(
                "Ignoring unparseable binding date %r on expense %r",
                expense.binding_end_date,
                expense.id,
            )
            continue
        days_left = days_until(end, reference)
        if days_left < 0 or days_left > window_days:
            continue
        upcoming.append(
            BindingExpiration(
                expense_id=expense.id,
                name=expense.name,
                binding_end_date=end.date(),
                days_left=days_left,
                amount_per_month=finite_number(expense.amount_per_month) or 0.0,
            )
        )

    upcoming.sort(key=lambda item: (item.days_left, item.name))
    return upcoming
