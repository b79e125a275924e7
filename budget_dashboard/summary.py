"""Summary ingestion and construction.

Two ways produce a :class:`~budget_dashboard.models.Summary`:

* :func:`normalize_summary` reads the payload returned by the data
  service.  The service has published the fixed-expense total and the
  income under several field names over time; they are folded into one
  canonical field here so nothing downstream needs to know which alias
  was present.
* :func:`build_summary` derives the same structure directly from raw
  fixed-expense records and settings, which is what the data service
  does on its side.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional

from . import config
from .aggregation import aggregate_fixed_expenses, fixed_expense_total
from .bindings import parse_binding_date, upcoming_binding_expirations
from .income import default_owner_income, owner_income_total, resolve_active_income
from .models import (
    BindingExpiration,
    CategoryTotal,
    FixedExpense,
    LevelTotal,
    OwnerProfile,
    SettingsState,
    Summary,
    as_fixed_expenses,
    finite_number,
    valid_amount,
)

logger = logging.getLogger(__name__)

# Precedence order: the first key holding a non-null value wins.
FIXED_TOTAL_ALIASES = ('effectiveFixedExpenseTotal', 'fixedExpenseTotal', 'fixedExpensesTotal')


# ---------------------------------------------------------------------------
# Payload normalisation
# ---------------------------------------------------------------------------


def _first_present(payload: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def _label(value: Any, fallback: str) -> str:
    text = '' if value is None else str(value).strip()
    return text or fallback


def _category_totals(items: Any) -> List[CategoryTotal]:
    return [
        CategoryTotal(
            category=_label(item.get('category'), config.UNCATEGORIZED_LABEL),
            total=finite_number(item.get('total')) or 0.0,
            color=item.get('color') or None,
        )
        for item in _as_list(items)
        if isinstance(item, Mapping)
    ]


def _level_totals(items: Any) -> List[LevelTotal]:
    return [
        LevelTotal(
            level=_label(item.get('level'), config.UNSPECIFIED_LEVEL_LABEL),
            total=finite_number(item.get('total')) or 0.0,
        )
        for item in _as_list(items)
        if isinstance(item, Mapping)
    ]


def _binding_expirations(
    items: Any,
    window_days: int = config.BINDING_WINDOW_DAYS,
) -> List[BindingExpiration]:
    """Apply the tracking window and ordering to the service's candidates."""
    expirations: List[BindingExpiration] = []
    for item in _as_list(items):
        if not isinstance(item, Mapping):
            continue
        end = parse_binding_date(item.get('bindingEndDate'))
        days_left = finite_number(item.get('daysLeft'))
        if end is None or days_left is None:
            logger.debug("Dropping malformed binding expiration %r", item)
            continue
        days_left = math.floor(days_left)
        if days_left < 0 or days_left > window_days:
            continue
        expirations.append(
            BindingExpiration(
                expense_id=item.get('id'),
                name=_label(item.get('name'), ''),
                binding_end_date=end.date(),
                days_left=days_left,
                amount_per_month=finite_number(item.get('amountPerMonth')) or 0.0,
            )
        )
    expirations.sort(key=lambda item: (item.days_left, item.name))
    return expirations


def _tag_totals(value: Any) -> Dict[str, float]:
    if not isinstance(value, Mapping):
        return {}
    totals: Dict[str, float] = {}
    for tag, total in value.items():
        number = finite_number(total)
        if number is None:
            logger.debug("Dropping non-numeric tag total %r=%r", tag, total)
            continue
        totals[str(tag)] = number
    return totals


def normalize_summary(payload: Optional[Mapping[str, Any]]) -> Summary:
    """Map a data-service summary payload onto the canonical :class:`Summary`."""
    payload = payload or {}
    count = finite_number(payload.get('fixedExpensesCount'))
    return Summary(
        category_totals=_category_totals(payload.get('fixedExpenseCategoryTotals')),
        level_totals=_level_totals(payload.get('fixedExpenseLevelTotals')),
        binding_expirations=_binding_expirations(payload.get('bindingExpirations')),
        fixed_expense_total=finite_number(_first_present(payload, FIXED_TOTAL_ALIASES)) or 0.0,
        active_monthly_net_income=resolve_active_income(
            payload.get('activeMonthlyNetIncome'),
            payload.get('monthlyNetIncome'),
        ),
        free_after_fixed=finite_number(payload.get('freeAfterFixed')) or 0.0,
        tag_totals=_tag_totals(payload.get('tagTotals')),
        fixed_expenses_count=int(count) if count is not None else 0,
    )


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


def settings_from_dict(payload: Optional[Mapping[str, Any]]) -> SettingsState:
    """Parse owner profiles and the default owner from a settings payload.

    Profiles without a name or with a negative/non-numeric income are
    dropped.  The default owner is kept as given even when no profile
    carries that name.
    """
    payload = payload or {}
    profiles: Dict[str, OwnerProfile] = {}
    for item in _as_list(payload.get('ownerProfiles')):
        if not isinstance(item, Mapping):
            continue
        name = _label(item.get('name'), '')
        if not name:
            continue
        income = valid_amount(item.get('monthlyNetIncome'))
        if income is None:
            logger.warning("Ignoring owner %r: invalid monthlyNetIncome %r", name, item.get('monthlyNetIncome'))
            continue
        profiles[name] = OwnerProfile(name=name, monthly_net_income=income)

    default_owner = payload.get('defaultFixedExpensesOwner')
    default_owner = default_owner.strip() if isinstance(default_owner, str) else ''
    return SettingsState(
        owner_profiles=profiles,
        default_fixed_expenses_owner=default_owner or None,
    )


# ---------------------------------------------------------------------------
# Building from raw records
# ---------------------------------------------------------------------------


def build_summary(
    expenses: Iterable[FixedExpense],
    settings: Optional[SettingsState] = None,
    *,
    now: Optional[Any] = None,
    tag_totals: Optional[Mapping[str, Any]] = None,
    category_colors: Optional[Mapping[str, str]] = None,
    window_days: int = config.BINDING_WINDOW_DAYS,
) -> Summary:
    """Derive a :class:`Summary` from raw fixed expenses and owner settings.

    The default fixed-expense owner's income acts as the active-income
    override and the sum of all owner incomes as the aggregate; see
    :func:`~budget_dashboard.income.resolve_active_income`.  Without any
    known income the free-after-fixed figure is ``-fixed_expense_total``.
    """
    records = as_fixed_expenses(expenses)
    category_totals, level_totals = aggregate_fixed_expenses(records, category_colors)
    total = fixed_expense_total(records)
    income = resolve_active_income(default_owner_income(settings), owner_income_total(settings))
    return Summary(
        category_totals=category_totals,
        level_totals=level_totals,
        binding_expirations=upcoming_binding_expirations(records, now=now, window_days=window_days),
        fixed_expense_total=total,
        active_monthly_net_income=income,
        free_after_fixed=(income or 0.0) - total,
        tag_totals=_tag_totals(tag_totals),
        fixed_expenses_count=sum(1 for record in records if valid_amount(record.amount_per_month) is not None),
    )
