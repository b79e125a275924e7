"""Forward month-by-month projection of the visible fixed-cost figures.

The projection is flat: every month repeats today's visible fixed total
and free-after-fixed figure.  There is no trend or seasonality model.
"""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd
from babel.dates import format_date

from . import config

FORECAST_COLUMNS = ['Month', 'Label', 'Fixed Costs', 'Available After Fixed']


def month_label(period: pd.Period, locale: str = config.FORECAST_LOCALE) -> str:
    """Localised short month and year, e.g. ``okt. 2026`` for ``nb_NO``."""
    return format_date(period.to_timestamp().date(), format='MMM y', locale=locale)


def project_forecast(
    visible_fixed_total: float,
    visible_free_after_fixed: float,
    now: Optional[Any] = None,
    months: int = config.FORECAST_MONTHS,
    locale: str = config.FORECAST_LOCALE,
) -> pd.DataFrame:
    """Return one row per calendar month starting at the month of ``now``.

    Parameters
    ----------
    visible_fixed_total : float
        Fixed costs after category visibility has been applied.
    visible_free_after_fixed : float
        Income left after the visible fixed costs.
    now : date-like, optional
        Reference time; defaults to the current time.
    months : int
        Number of months to project.
    locale : str
        Babel locale used for the month labels.

    Returns
    -------
    pandas.DataFrame
        Columns ``Month`` (``YYYY-MM``), ``Label``, ``Fixed Costs`` and
        ``Available After Fixed``.
    """
    if months < 0:
        raise ValueError("months must be non-negative")
    reference = pd.Timestamp(now) if now is not None else pd.Timestamp.now()
    periods = pd.period_range(start=reference.to_period('M'), periods=months, freq='M')
    rows = [
        {
            'Month': str(period),
            'Label': month_label(period, locale),
            'Fixed Costs': visible_fixed_total,
            'Available After Fixed': visible_free_after_fixed,
        }
        for period in periods
    ]
    return pd.DataFrame(rows, columns=FORECAST_COLUMNS)
