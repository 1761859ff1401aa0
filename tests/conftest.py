"""Canonical test fixtures used across engine and dashboard tests.

Fixture: $800K loan, 6% annual rate, 30yr fixed (the form's defaults).
"""

import pytest
from decimal import Decimal

from mortgage_calc.engine.amortization import calculate
from mortgage_calc.models.loan import LoanInputs, ScheduleResult


@pytest.fixture
def canonical_inputs() -> LoanInputs:
    """$800K at 6% over 30 years."""
    return LoanInputs(principal=Decimal("800000"), rate=Decimal("6"), years=30)


@pytest.fixture
def canonical_result(canonical_inputs) -> ScheduleResult:
    return calculate(canonical_inputs)


@pytest.fixture
def one_year_inputs() -> LoanInputs:
    """$12K at 6% over a single year."""
    return LoanInputs(principal=Decimal("12000"), rate=Decimal("6"), years=1)


@pytest.fixture
def empty_result() -> ScheduleResult:
    return ScheduleResult.empty()
