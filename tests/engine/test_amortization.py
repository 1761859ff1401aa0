from decimal import Decimal, ROUND_HALF_UP

import pytest

from mortgage_calc.engine.amortization import (
    BALANCE_EPSILON,
    MAX_TERM_YEARS,
    aggregate_to_annual,
    calculate,
    generate_monthly_schedule,
    monthly_payment,
)
from mortgage_calc.models.loan import LoanInputs

CENTS = Decimal("0.01")


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        """$800K at 6% for 30 years: r = 0.005, n = 360."""
        pmt = monthly_payment(Decimal("800000"), Decimal("0.005"), 360)
        # Expected: ~$4,796.40
        assert pmt.quantize(CENTS, ROUND_HALF_UP) == Decimal("4796.40")

    def test_one_year_loan(self):
        pmt = monthly_payment(Decimal("12000"), Decimal("0.005"), 12)
        assert pmt.quantize(CENTS, ROUND_HALF_UP) == Decimal("1032.80")

    def test_tiny_rate_approaches_straight_line(self):
        pmt = monthly_payment(Decimal("360000"), Decimal("0.0000001"), 360)
        assert abs(pmt - Decimal("1000")) < Decimal("0.05")


class TestEmptyResult:
    @pytest.mark.parametrize("principal,rate,years", [
        (Decimal("0"), Decimal("6"), 30),
        (Decimal("-1000"), Decimal("6"), 30),
        (Decimal("800000"), Decimal("0"), 30),
        (Decimal("800000"), Decimal("-2"), 30),
        (Decimal("800000"), Decimal("6"), 0),
        (Decimal("800000"), Decimal("6"), -5),
        (Decimal("NaN"), Decimal("6"), 30),
        (Decimal("800000"), Decimal("Infinity"), 30),
        (float("nan"), 6.0, 30),
    ])
    def test_insufficient_inputs_return_zeroed_result(self, principal, rate, years):
        result = calculate(LoanInputs(principal=principal, rate=rate, years=years))
        assert result.monthly_payment == 0
        assert result.annual_payment == 0
        assert result.total_interest == 0
        assert result.total_paid == 0
        assert result.monthly_schedule == ()
        assert result.annual_schedule == ()
        assert result.is_empty

    def test_none_inputs_do_not_raise(self):
        result = calculate(LoanInputs(principal=None, rate=None, years=None))
        assert result.is_empty

    @pytest.mark.parametrize("years", [Decimal("1e9"), 10**7, Decimal("1E+999999"), MAX_TERM_YEARS + 1])
    def test_term_beyond_cap(self, years):
        result = calculate(LoanInputs(principal=Decimal("1000"), rate=Decimal("6"), years=years))
        assert result.is_empty
        assert result.monthly_payment == 0

    def test_term_at_cap(self):
        result = calculate(LoanInputs(principal=Decimal("1000"), rate=Decimal("6"), years=MAX_TERM_YEARS))
        assert len(result.monthly_schedule) == MAX_TERM_YEARS * 12
        assert result.monthly_schedule[-1].remaining_balance == 0

    def test_rate_too_large_to_compound(self):
        result = calculate(LoanInputs(principal=Decimal("1000"), rate=Decimal("1E+5000"), years=30))
        assert result.is_empty

    def test_rate_too_small_to_register(self):
        result = calculate(LoanInputs(principal=Decimal("1000"), rate=Decimal("1E-40"), years=30))
        assert result.is_empty


class TestCalculate:
    def test_end_to_end(self, canonical_result):
        result = canonical_result
        assert result.monthly_payment.quantize(CENTS, ROUND_HALF_UP) == Decimal("4796.40")
        assert len(result.monthly_schedule) == 360
        assert len(result.annual_schedule) == 30
        assert result.monthly_schedule[-1].remaining_balance == 0
        # Closed form: 360 payments less the principal, ~$926,705
        expected_interest = result.monthly_payment * 360 - Decimal("800000")
        assert abs(result.total_interest - expected_interest) < CENTS
        assert Decimal("926700") < result.total_interest < Decimal("926710")

    def test_annual_payment_is_nominal(self, canonical_result):
        assert canonical_result.annual_payment == canonical_result.monthly_payment * 12

    def test_first_payment_mostly_interest(self, canonical_result):
        first = canonical_result.monthly_schedule[0]
        # 800000 * 0.06 / 12 = $4,000.00
        assert first.interest_portion == Decimal("4000")
        assert first.principal_portion.quantize(CENTS, ROUND_HALF_UP) == Decimal("796.40")

    def test_conservation(self, canonical_inputs, canonical_result):
        r = canonical_result
        assert r.total_paid == canonical_inputs.principal + r.total_interest
        assert r.total_interest == sum(m.interest_portion for m in r.monthly_schedule)

    def test_annual_interest_matches_total(self, canonical_result):
        yearly = sum(y.interest_portion for y in canonical_result.annual_schedule)
        assert abs(yearly - canonical_result.total_interest) < Decimal("1e-12")

    def test_payment_invariance(self, canonical_result):
        for m in canonical_result.monthly_schedule:
            assert m.total_payment == canonical_result.monthly_payment
            assert abs(m.principal_portion + m.interest_portion - m.total_payment) < Decimal("1e-6")

    def test_monotonic_split(self, canonical_result):
        months = canonical_result.monthly_schedule
        for prev, cur in zip(months, months[1:]):
            assert cur.interest_portion <= prev.interest_portion
            assert cur.principal_portion >= prev.principal_portion
            assert cur.remaining_balance <= prev.remaining_balance

    def test_period_numbering(self, canonical_result):
        months = canonical_result.monthly_schedule
        assert [m.period for m in months] == list(range(1, 361))
        assert months[0].year == 1 and months[0].month_in_year == 1
        assert months[11].year == 1 and months[11].month_in_year == 12
        assert months[12].year == 2 and months[12].month_in_year == 1
        assert months[-1].year == 30 and months[-1].month_in_year == 12

    def test_one_year_term(self, one_year_inputs):
        result = calculate(one_year_inputs)
        assert len(result.monthly_schedule) == 12
        assert len(result.annual_schedule) == 1
        assert result.annual_schedule[0].remaining_balance == 0

    def test_float_inputs_accepted(self):
        result = calculate(LoanInputs(principal=100000.0, rate=5.0, years=15))
        assert len(result.monthly_schedule) == 180
        assert result.monthly_schedule[-1].remaining_balance == 0

    def test_tiny_positive_rate_fully_amortizes(self):
        result = calculate(LoanInputs(principal=Decimal("360000"), rate=Decimal("0.0001"), years=30))
        assert result.monthly_schedule[-1].remaining_balance == 0
        assert result.total_interest > 0

    def test_deterministic(self, canonical_inputs):
        assert calculate(canonical_inputs) == calculate(canonical_inputs)


class TestCrossGranularity:
    def test_annual_sums_equal_monthly_sums(self, canonical_result):
        months = canonical_result.monthly_schedule
        for y in canonical_result.annual_schedule:
            in_year = months[12 * (y.year - 1): 12 * y.year]
            assert y.principal_portion == sum(m.principal_portion for m in in_year)
            assert y.interest_portion == sum(m.interest_portion for m in in_year)
            assert y.total_payment == sum(m.total_payment for m in in_year)

    def test_annual_balance_is_last_month_balance(self, canonical_result):
        months = canonical_result.monthly_schedule
        for y in canonical_result.annual_schedule:
            assert y.remaining_balance == months[12 * y.year - 1].remaining_balance

    def test_annual_rows_have_no_month(self, canonical_result):
        for y in canonical_result.annual_schedule:
            assert y.period == y.year
            assert y.month_in_year is None

    def test_aggregate_empty(self):
        assert aggregate_to_annual(()) == ()


class TestBalanceClamp:
    def test_epsilon_is_one_cent(self):
        assert BALANCE_EPSILON == Decimal("0.01")

    def test_residue_below_epsilon_clamped(self):
        # A payment a fraction of a cent too small leaves residue under the epsilon
        rate = Decimal("0.005")
        pmt = monthly_payment(Decimal("12000"), rate, 12) - Decimal("0.0001")
        months = generate_monthly_schedule(Decimal("12000"), rate, 12, pmt)
        assert months[-1].remaining_balance == 0

    def test_residue_above_epsilon_kept(self):
        rate = Decimal("0.005")
        pmt = monthly_payment(Decimal("12000"), rate, 12) - Decimal("1")
        months = generate_monthly_schedule(Decimal("12000"), rate, 12, pmt)
        assert months[-1].remaining_balance > BALANCE_EPSILON

    def test_overpayment_never_negative(self):
        rate = Decimal("0.005")
        pmt = monthly_payment(Decimal("12000"), rate, 12) + Decimal("5")
        months = generate_monthly_schedule(Decimal("12000"), rate, 12, pmt)
        assert all(m.remaining_balance >= 0 for m in months)
        assert months[-1].remaining_balance == 0
