from decimal import Decimal

from budget_dashboard.dashboard import DashboardController
from budget_dashboard.models import CategoryTotal, Summary


def _payload(categories, **extra):
    payload = {
        'fixedExpenseCategoryTotals': [{'category': name, 'total': total} for name, total in categories],
        'fixedExpenseTotal': sum(total for _, total in categories),
        'freeAfterFixed': 200,
    }
    payload.update(extra)
    return payload


def test_toggle_flows_through_visible_figures():
    controller = DashboardController(_payload([('A', 100), ('B', 50)], monthlyNetIncome=1000))
    assert controller.visible_fixed_total == 150.0
    assert controller.visible_free_after_fixed == 850.0

    controller.toggle_category('A')
    assert controller.visible_category_totals == [CategoryTotal('B', 50.0)]
    assert controller.visible_fixed_total == 50.0
    assert controller.visible_free_after_fixed == 950.0


def test_new_summary_discards_stale_hidden_categories():
    controller = DashboardController(_payload([('A', 100), ('B', 50)]))
    controller.toggle_category('B')
    assert controller.hidden_categories == ['B']

    controller.ingest_summary(_payload([('A', 100)]))
    assert controller.hidden_categories == []

    # B coming back later is visible again rather than remembered as hidden.
    controller.ingest_summary(_payload([('A', 100), ('B', 50)]))
    assert controller.visible_fixed_total == 150.0


def test_unknown_income_keeps_supplied_free_figure():
    controller = DashboardController(_payload([('A', 100), ('B', 50)]))
    controller.toggle_category('A')
    assert controller.visible_fixed_total == 50.0
    assert controller.visible_free_after_fixed == 200.0


def test_forecast_repeats_visible_figures():
    controller = DashboardController(_payload([('A', 100), ('B', 50)], monthlyNetIncome=1000), locale='en_US')
    controller.toggle_category('B')
    forecast = controller.forecast(now='2026-10-19')

    assert len(forecast) == 12
    assert (forecast['Fixed Costs'] == 100.0).all()
    assert (forecast['Available After Fixed'] == 900.0).all()


def test_goals_reload():
    controller = DashboardController(Summary())
    assert controller.savings_stats.goal_count == 0

    controller.reload_goals([{'id': 1, 'savedAmount': 50, 'targetAmount': 100}])
    assert controller.savings_stats.avg_progress == 50


def test_snapshot_contains_presentation_fields():
    controller = DashboardController(
        _payload([('A', 100), ('B', 50)], monthlyNetIncome=1000, tagTotals={'x': 1}),
        goals=[{'id': 1, 'savedAmount': 50, 'targetAmount': 100}],
        locale='en_US',
    )
    controller.toggle_category('A')
    snapshot = controller.snapshot(now='2026-10-19')

    assert snapshot['visibleCategoryTotals'] == [{'category': 'B', 'total': 50.0, 'color': None}]
    assert snapshot['visibleFixedTotal'] == 50.0
    assert snapshot['visibleFreeAfterFixed'] == 950.0
    assert snapshot['hiddenCategories'] == ['A']
    assert snapshot['categoryBadge'] == '1/2 categories'
    assert snapshot['tagTotals'] == {'x': 1.0}
    assert snapshot['forecast'][0]['Label'] == 'Oct 2026'
    assert len(snapshot['forecast']) == 12
    assert snapshot['savings'] == {'goalCount': 1, 'totalSaved': 50.0, 'totalTarget': 100.0, 'avgProgress': 50}


def test_empty_controller():
    controller = DashboardController()
    assert controller.visible_fixed_total == 0.0
    assert controller.visible_free_after_fixed == 0.0
    assert controller.visible_category_totals == []


def test_decimal_income_recomputes_free_after_fixed():
    controller = DashboardController(_payload([('A', 100), ('B', 50)], monthlyNetIncome=Decimal('1000')))
    controller.toggle_category('A')
    assert controller.summary.active_monthly_net_income == 1000.0
    assert controller.visible_free_after_fixed == 950.0
