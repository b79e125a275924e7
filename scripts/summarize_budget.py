#!/usr/bin/env python3
"""Print dashboard figures for a JSON budget snapshot."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from budget_dashboard import config
from budget_dashboard.dashboard import DashboardController
from budget_dashboard.log import setup_logging
from budget_dashboard.savings_storage import load_savings_goals
from budget_dashboard.summary import build_summary, settings_from_dict


def _frame(items: List[Any]) -> pd.DataFrame:
    return pd.DataFrame([asdict(item) for item in items])


def main(
    input_path: Path,
    hidden: Optional[List[str]] = None,
    goals_path: Optional[Path] = None,
    locale: str = config.FORECAST_LOCALE,
) -> int:
    with input_path.open('r', encoding='utf-8') as handle:
        snapshot: Dict[str, Any] = json.load(handle)

    summary = build_summary(
        snapshot.get('fixedExpenses') or [],
        settings_from_dict(snapshot.get('settings')),
        tag_totals=snapshot.get('tagTotals'),
    )
    goals = load_savings_goals(goals_path) if goals_path else snapshot.get('savingsGoals') or []
    controller = DashboardController(summary, goals=goals, locale=locale)
    for label in hidden or []:
        controller.toggle_category(label)

    if not summary.category_totals:
        print("No fixed expenses registered.")
    else:
        print(f"Categories ({controller.visibility.category_badge(summary.category_totals)}):")
        print(_frame(controller.visible_category_totals).to_string(index=False))
        print("\nPriority levels:")
        print(_frame(summary.level_totals).to_string(index=False))

    print(f"\nBindings ending within {config.BINDING_WINDOW_DAYS} days:")
    if summary.binding_expirations:
        print(_frame(summary.binding_expirations).to_string(index=False))
    else:
        print("  none")

    income = summary.active_monthly_net_income
    print(f"\nActive monthly net income: {income if income is not None else 'unknown'}")
    print(f"Fixed costs per month:     {controller.visible_fixed_total:,.2f}")
    print(f"Free after fixed costs:    {controller.visible_free_after_fixed:,.2f}")

    print("\nForecast:")
    print(controller.forecast().to_string(index=False))

    stats = controller.savings_stats
    print("\nSavings goals:")
    if stats.goal_count:
        print(f"  {stats.avg_progress}% ({stats.total_saved:,.2f} of {stats.total_target:,.2f})")
    else:
        print("  none")
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Summarise a budget snapshot.')
    parser.add_argument('--input', type=Path, required=True, help='JSON snapshot with fixedExpenses and settings')
    parser.add_argument('--hide', action='append', default=[], help='Category to hide (repeatable)')
    parser.add_argument('--goals', type=Path, default=None, help='JSON file with savings goals')
    parser.add_argument('--locale', default=config.FORECAST_LOCALE, help='Locale for month labels')
    parser.add_argument('--log-level', default=None, help='Logging level, e.g. DEBUG')
    args = parser.parse_args()
    setup_logging(args.log_level)
    raise SystemExit(main(args.input, hidden=args.hide, goals_path=args.goals, locale=args.locale))
