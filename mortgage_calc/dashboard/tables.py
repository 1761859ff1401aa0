"""Rows for the annual schedule table with monthly drill-down."""

from dataclasses import dataclass
from decimal import Decimal

from mortgage_calc.models.loan import ScheduleResult

COLUMNS = (
    "Year",
    "Principal amortization (PRN)",
    "Interest cash flows (INT)",
    "Total mortgage cash flows (PMT)",
    "Remaining balance",
)


@dataclass(frozen=True)
class TableRow:
    kind: str  # "year" or "month"
    year: int
    label: str
    principal: Decimal
    interest: Decimal
    total_payment: Decimal
    remaining_balance: Decimal
    expanded: bool = False


def schedule_rows(result: ScheduleResult, expanded_years=()) -> list[TableRow]:
    """One row per year, each followed by its months when expanded."""
    expanded = set(expanded_years)
    rows: list[TableRow] = []
    for y in result.annual_schedule:
        is_open = y.year in expanded
        rows.append(TableRow(
            kind="year",
            year=y.year,
            label=f"Year {y.year}",
            principal=y.principal_portion,
            interest=y.interest_portion,
            total_payment=y.total_payment,
            remaining_balance=y.remaining_balance,
            expanded=is_open,
        ))
        if is_open:
            rows.extend(
                TableRow(
                    kind="month",
                    year=m.year,
                    label=f"Month {m.month_in_year}",
                    principal=m.principal_portion,
                    interest=m.interest_portion,
                    total_payment=m.total_payment,
                    remaining_balance=m.remaining_balance,
                )
                for m in result.months_in_year(y.year)
            )
    return rows


def toggle_year(expanded_years, year: int) -> list[int]:
    """Flip a year's drill-down state; returns a sorted list for the store."""
    expanded = set(expanded_years or ())
    expanded.symmetric_difference_update({year})
    return sorted(expanded)
