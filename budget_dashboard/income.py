"""Income resolution and owner helpers.

The dashboard shows one "active" monthly net income.  It comes from an
explicit override when the data service supplies one, otherwise from the
aggregate income of all owners, otherwise it is unknown.  Unknown is a
normal state: the visibility filter reacts to it by passing the
service's free-after-fixed figure through untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .models import FixedExpense, SettingsState, as_fixed_expenses, is_real_number, valid_amount

logger = logging.getLogger(__name__)


def resolve_active_income(active_override: Any = None, monthly_net_income: Any = None) -> Optional[float]:
    """Pick the first numeric income source; ``None`` when neither is numeric."""
    if is_real_number(active_override):
        return float(active_override)
    if is_real_number(monthly_net_income):
        return float(monthly_net_income)
    if active_override is not None or monthly_net_income is not None:
        logger.debug(
            "No numeric income among override=%r aggregate=%r",
            active_override,
            monthly_net_income,
        )
    return None


def owner_income_total(settings: Optional[SettingsState]) -> Optional[float]:
    """Sum of the owners' valid monthly incomes, ``None`` when no owner has one."""
    if settings is None:
        return None
    incomes = [
        amount
        for amount in (valid_amount(p.monthly_net_income) for p in settings.owner_profiles.values())
        if amount is not None
    ]
    if not incomes:
        return None
    return float(sum(incomes))


def default_owner_income(settings: Optional[SettingsState]) -> Optional[float]:
    """Income of the default fixed-expense owner, if that name resolves to a profile."""
    if settings is None or not settings.default_fixed_expenses_owner:
        return None
    profile = settings.owner_profiles.get(settings.default_fixed_expenses_owner)
    if profile is None:
        return None
    return valid_amount(profile.monthly_net_income)


def collect_owner_names(
    expenses: Iterable[FixedExpense],
    settings: Optional[SettingsState] = None,
) -> List[str]:
    """Every owner name known from expenses, profiles and the default owner."""
    names = set()
    for expense in as_fixed_expenses(expenses):
        names.update(name for name in expense.owners if name.strip())
    if settings is not None:
        names.update(name for name in settings.owner_profiles if name.strip())
        default_owner = (settings.default_fixed_expenses_owner or '').strip()
        if default_owner:
            names.add(default_owner)
    return sorted(names, key=lambda name: (name.casefold(), name))
