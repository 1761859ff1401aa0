"""Amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O.

The monthly schedule is the single source of truth; the annual schedule is
always aggregated from it, never recomputed independently.
"""

import logging
from decimal import Decimal, DivisionByZero, InvalidOperation, Overflow

from mortgage_calc.models.loan import LoanInputs, PeriodEntry, ScheduleResult, ZERO

logger = logging.getLogger(__name__)

# Balances below one cent are reported as fully paid
BALANCE_EPSILON = Decimal("0.01")
MONTHS_PER_YEAR = 12
# Longest term the schedule walk will carry
MAX_TERM_YEARS = 100


def _as_decimal(value) -> Decimal | None:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def _is_positive(value: Decimal | None) -> bool:
    return value is not None and value.is_finite() and value > 0


def monthly_payment(principal: Decimal, monthly_rate: Decimal, total_months: int) -> Decimal:
    """Fixed level payment that retires ``principal`` in ``total_months`` payments.

    Requires ``monthly_rate > 0`` and ``total_months > 0``.
    """
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + monthly_rate) ** total_months
    return principal * (monthly_rate * factor) / (factor - 1)


def generate_monthly_schedule(
    principal: Decimal,
    monthly_rate: Decimal,
    total_months: int,
    payment: Decimal,
) -> tuple[PeriodEntry, ...]:
    """Walk the loan month by month, carrying the remaining balance."""
    rows: list[PeriodEntry] = []
    balance = principal

    for month in range(1, total_months + 1):
        interest = balance * monthly_rate
        principal_paid = payment - interest
        balance -= principal_paid

        # Absorb the final payment's residue
        if balance < BALANCE_EPSILON:
            balance = ZERO

        rows.append(PeriodEntry(
            period=month,
            year=(month - 1) // MONTHS_PER_YEAR + 1,
            month_in_year=(month - 1) % MONTHS_PER_YEAR + 1,
            principal_portion=principal_paid,
            interest_portion=interest,
            total_payment=payment,
            remaining_balance=balance,
        ))

    return tuple(rows)


def aggregate_to_annual(monthly_schedule: tuple[PeriodEntry, ...]) -> tuple[PeriodEntry, ...]:
    """Roll monthly rows up into one row per year.

    Each year's balance is the balance after its last month.
    """
    yearly: list[PeriodEntry] = []
    year_principal = ZERO
    year_interest = ZERO
    year_payment = ZERO

    for i, m in enumerate(monthly_schedule):
        year_principal += m.principal_portion
        year_interest += m.interest_portion
        year_payment += m.total_payment

        is_last = i == len(monthly_schedule) - 1
        if is_last or monthly_schedule[i + 1].year != m.year:
            yearly.append(PeriodEntry(
                period=m.year,
                year=m.year,
                principal_portion=year_principal,
                interest_portion=year_interest,
                total_payment=year_payment,
                remaining_balance=m.remaining_balance,
            ))
            year_principal = ZERO
            year_interest = ZERO
            year_payment = ZERO

    return tuple(yearly)


def calculate(inputs: LoanInputs) -> ScheduleResult:
    """Compute the payment and both schedules for a fixed-rate loan.

    Non-positive or non-finite inputs mean the form is incomplete; the
    zeroed result is returned instead of raising. So is a term longer than
    ``MAX_TERM_YEARS`` or a rate the payment formula cannot carry.
    """
    principal = _as_decimal(inputs.principal)
    rate = _as_decimal(inputs.rate)
    term = _as_decimal(inputs.years)
    # Sub-year terms truncate to zero months
    if not (_is_positive(principal) and _is_positive(rate) and _is_positive(term)) or term < 1:
        logger.debug("Insufficient loan inputs, returning empty schedule: %s", inputs)
        return ScheduleResult.empty()
    if term > MAX_TERM_YEARS:
        logger.debug("Loan term beyond %s years, returning empty schedule: %s", MAX_TERM_YEARS, inputs)
        return ScheduleResult.empty()

    monthly_rate = rate / 100 / MONTHS_PER_YEAR
    total_months = int(term) * MONTHS_PER_YEAR

    try:
        pmt = monthly_payment(principal, monthly_rate, total_months)
    except (Overflow, DivisionByZero):
        # Rate too large to compound, or too small to register against 1
        logger.debug("Payment formula out of range, returning empty schedule: %s", inputs)
        return ScheduleResult.empty()

    months = generate_monthly_schedule(principal, monthly_rate, total_months, pmt)
    years = aggregate_to_annual(months)

    total_interest = ZERO
    for m in months:
        total_interest += m.interest_portion

    return ScheduleResult(
        monthly_payment=pmt,
        annual_payment=pmt * MONTHS_PER_YEAR,
        total_interest=total_interest,
        total_paid=principal + total_interest,
        monthly_schedule=months,
        annual_schedule=years,
    )
