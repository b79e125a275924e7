import math

from budget_dashboard import config
from budget_dashboard.aggregation import (
    aggregate_fixed_expenses,
    category_totals,
    fixed_expense_total,
    level_totals,
)
from budget_dashboard.models import FixedExpense


def _expenses():
    return [
        {'id': 1, 'name': 'Rent', 'category': 'Housing', 'level': 'Must', 'amountPerMonth': 9000},
        {'id': 2, 'name': 'Streaming', 'category': 'Media', 'level': 'Nice', 'amountPerMonth': 129.5},
        {'id': 3, 'name': 'Power', 'category': 'Housing', 'level': 'Must', 'amountPerMonth': 700},
        {'id': 4, 'name': 'Gym', 'category': 'Health', 'level': 'Nice', 'amountPerMonth': 399},
    ]


def test_totals_agree_with_sum_of_amounts():
    cats, levels = aggregate_fixed_expenses(_expenses())
    expected = 9000 + 129.5 + 700 + 399

    assert math.isclose(sum(item.total for item in cats), expected)
    assert math.isclose(sum(item.total for item in levels), expected)
    assert math.isclose(fixed_expense_total(_expenses()), expected)


def test_buckets_follow_first_seen_order():
    cats, levels = aggregate_fixed_expenses(_expenses())

    assert [item.category for item in cats] == ['Housing', 'Media', 'Health']
    assert [item.total for item in cats] == [9700.0, 129.5, 399.0]
    assert [item.level for item in levels] == ['Must', 'Nice']
    assert [item.total for item in levels] == [9700.0, 528.5]


def test_invalid_amounts_are_excluded():
    rows = _expenses() + [
        {'id': 5, 'name': 'Refund', 'category': 'Media', 'level': 'Nice', 'amountPerMonth': -50},
        {'id': 6, 'name': 'Broken', 'category': 'Media', 'level': 'Nice', 'amountPerMonth': float('nan')},
        {'id': 7, 'name': 'Huge', 'category': 'Other', 'level': 'Nice', 'amountPerMonth': float('inf')},
        {'id': 8, 'name': 'Text', 'category': 'Other', 'level': 'Nice', 'amountPerMonth': 'abc'},
        {'id': 9, 'name': 'Missing', 'category': 'Other', 'level': 'Nice'},
    ]
    cats, levels = aggregate_fixed_expenses(rows)

    assert [item.category for item in cats] == ['Housing', 'Media', 'Health']
    assert math.isclose(sum(item.total for item in levels), 10228.5)


def test_numeric_strings_count_as_amounts():
    rows = [{'id': 1, 'name': 'Insurance', 'category': 'Insurance', 'level': 'Must', 'amountPerMonth': '250.5'}]
    assert category_totals(rows)[0].total == 250.5


def test_missing_category_and_level_use_sentinels():
    rows = [
        FixedExpense(id=1, name='Mystery', category='', level='', amount_per_month=10),
        {'id': 2, 'name': 'Other mystery', 'amountPerMonth': 5},
    ]
    cats, levels = aggregate_fixed_expenses(rows)

    assert [(item.category, item.total) for item in cats] == [(config.UNCATEGORIZED_LABEL, 15.0)]
    assert [(item.level, item.total) for item in levels] == [(config.UNSPECIFIED_LEVEL_LABEL, 15.0)]


def test_category_colors_are_attached():
    cats = category_totals(_expenses(), {'Housing': '#ff0000'})
    colors = {item.category: item.color for item in cats}
    assert colors == {'Housing': '#ff0000', 'Media': None, 'Health': None}


def test_empty_input_yields_empty_totals():
    assert aggregate_fixed_expenses([]) == ([], [])
    assert level_totals(None) == []
    assert fixed_expense_total([]) == 0.0
