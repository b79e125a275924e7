"""Record types shared by the derivation engine.

Raw records (fixed expenses, owner profiles, savings goals) arrive as
camelCase mappings from the data service; the ``from_dict`` constructors
map them onto the dataclasses below without validating amounts.  Amount
validation happens where the amounts are summed, through
:func:`valid_amount`, so one bad record only drops out of a total.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

import numpy as np

# ---------------------------------------------------------------------------
# Amount helpers
# ---------------------------------------------------------------------------


def finite_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float when it is numeric and finite."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not np.isfinite(number):
        return None
    return number


def valid_amount(value: Any) -> Optional[float]:
    """Return a summable amount, or ``None`` for negative/non-finite/non-numeric input."""
    number = finite_number(value)
    if number is None or number < 0:
        return None
    return number


def is_real_number(value: Any) -> bool:
    """True for finite real numbers and decimals; strings and booleans are not numbers here."""
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return bool(np.isfinite(float(value)))


def _text(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip()


def _owner_set(value: Any) -> FrozenSet[str]:
    if not isinstance(value, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(_text(name) for name in value if _text(name))


# ---------------------------------------------------------------------------
# Raw records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FixedExpense:
    id: Any
    name: str
    category: str = ''
    level: str = ''
    amount_per_month: Any = 0.0
    owners: FrozenSet[str] = field(default_factory=frozenset)
    binding_end_date: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'FixedExpense':
        return cls(
            id=data.get('id'),
            name=_text(data.get('name')),
            category=_text(data.get('category')),
            level=_text(data.get('level')),
            amount_per_month=data.get('amountPerMonth'),
            owners=_owner_set(data.get('owners')),
            binding_end_date=data.get('bindingEndDate'),
        )


@dataclass(frozen=True)
class OwnerProfile:
    name: str
    monthly_net_income: float


@dataclass
class SettingsState:
    owner_profiles: Dict[str, OwnerProfile] = field(default_factory=dict)
    # Weak reference: may name an owner that is not in ``owner_profiles``.
    default_fixed_expenses_owner: Optional[str] = None


@dataclass(frozen=True)
class SavingsGoal:
    id: Any
    name: str
    target_amount: Any = 0.0
    saved_amount: Any = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SavingsGoal':
        return cls(
            id=data.get('id'),
            name=_text(data.get('name')),
            target_amount=data.get('targetAmount'),
            saved_amount=data.get('savedAmount'),
        )


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CategoryTotal:
    category: str
    total: float
    color: Optional[str] = None


@dataclass(frozen=True)
class LevelTotal:
    level: str
    total: float


@dataclass(frozen=True)
class BindingExpiration:
    expense_id: Any
    name: str
    binding_end_date: date
    days_left: int
    amount_per_month: float


@dataclass
class Summary:
    """Derived dashboard snapshot; rebuilt on every input change, never persisted."""

    category_totals: List[CategoryTotal] = field(default_factory=list)
    level_totals: List[LevelTotal] = field(default_factory=list)
    binding_expirations: List[BindingExpiration] = field(default_factory=list)
    fixed_expense_total: float = 0.0
    active_monthly_net_income: Optional[float] = None
    free_after_fixed: float = 0.0
    tag_totals: Dict[str, float] = field(default_factory=dict)
    fixed_expenses_count: int = 0


def as_fixed_expenses(records: Any) -> List[FixedExpense]:
    """Accept dataclasses or raw payload mappings; anything else is skipped."""
    expenses: List[FixedExpense] = []
    for record in records or []:
        if isinstance(record, FixedExpense):
            expenses.append(record)
        elif isinstance(record, Mapping):
            expenses.append(FixedExpense.from_dict(record))
    return expenses


def as_savings_goals(records: Any) -> List[SavingsGoal]:
    goals: List[SavingsGoal] = []
    for record in records or []:
        if isinstance(record, SavingsGoal):
            goals.append(record)
        elif isinstance(record, Mapping):
            goals.append(SavingsGoal.from_dict(record))
    return goals
