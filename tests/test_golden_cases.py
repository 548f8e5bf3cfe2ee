"""
Golden test cases for basket pricing regression testing.
These tests capture the expected totals for the default configuration and
should fail if pricing logic changes unexpectedly.
"""
import csv
import os
from decimal import Decimal

import pytest

from widget_basket.engine import initialize_with_items


def load_golden_cases():
    """Load golden test cases from CSV."""
    cases_path = os.path.join(os.path.dirname(__file__), 'golden_cases.csv')

    cases = []
    with open(cases_path, 'r', newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row in reader:
            cases.append(row)

    return cases


@pytest.mark.parametrize("case", load_golden_cases(), ids=lambda c: c['case'])
def test_golden_case_from_string(case):
    """Pricing a comma separated item string matches the golden totals."""
    result = initialize_with_items(case['items']).calculate()

    assert result.subtotal == Decimal(case['expected_subtotal']), \
        f"Subtotal mismatch for {case['items']!r}: expected {case['expected_subtotal']}, got {result.subtotal}"
    assert result.delivery_cost == Decimal(case['expected_delivery']), \
        f"Delivery mismatch for {case['items']!r}: expected {case['expected_delivery']}, got {result.delivery_cost}"
    assert result.total == Decimal(case['expected_total']), \
        f"Total mismatch for {case['items']!r}: expected {case['expected_total']}, got {result.total}"


@pytest.mark.parametrize("case", load_golden_cases(), ids=lambda c: c['case'])
def test_golden_case_from_list(case):
    """The list form of the same items prices identically."""
    items = [code.strip() for code in case['items'].split(',') if code.strip()]

    total = initialize_with_items(items).calculate_total()

    assert total == Decimal(case['expected_total'])
    assert str(total) == case['expected_total']
