"""Terminal mortgage report: payment summary, worked formulas and schedule.

Usage:
    mortgage-calc --principal 800,000 --rate 6 --years 30
    mortgage-calc --principal 250000 --rate 5.25 --years 15 --monthly
"""

import argparse
import logging
import sys
from decimal import Decimal

from mortgage_calc.config import settings
from mortgage_calc.dashboard.equations import build_equations
from mortgage_calc.dashboard.summary import build_summary
from mortgage_calc.dashboard.tables import schedule_rows
from mortgage_calc.engine.amortization import calculate
from mortgage_calc.engine.inputs import parse_inputs
from mortgage_calc.engine.validation import validate_all
from mortgage_calc.formatting import dollar, pct, plain, years_label
from mortgage_calc.models.loan import LoanInputs, ScheduleResult

logger = logging.getLogger(__name__)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _header(title: str) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}")


def _money(v) -> str:
    return f"{float(v):>14,.2f}"


# ── Report sections ──────────────────────────────────────────────────────────

def print_summary(result: ScheduleResult, inputs: LoanInputs) -> None:
    s = build_summary(result, inputs)
    monthly_rate = s.monthly_rate.quantize(Decimal("0.0001"))
    _header("Loan Summary")
    print(f"  Loan Amount:      {dollar(s.principal, 0)}")
    print(f"  Interest Rate:    {pct(s.rate)} ({pct(monthly_rate)} monthly)")
    print(f"  Loan Term:        {years_label(inputs.years)}")
    print(f"  Monthly Payment:  {dollar(s.monthly_payment)}")
    print(f"  Annual Payment:   {dollar(s.annual_payment)}")
    print(f"  Total Interest:   {dollar(s.total_interest)}")
    print(f"  Total Paid:       {dollar(s.total_paid)}")


def print_equations(result: ScheduleResult, inputs: LoanInputs) -> None:
    _header("How It's Calculated")
    monthly_rate = (inputs.rate / 100 / 12).quantize(Decimal("0.000001"))
    for eq in build_equations(result, inputs):
        print(f"  {eq.name}: {eq.display_value}  ({eq.caption})")
    print(f"  r = {plain(inputs.rate)}% / 12 = {plain(monthly_rate)}, n = {inputs.years * 12}")


def print_schedule(result: ScheduleResult, monthly: bool = False) -> None:
    _header("Amortization Schedule")
    expanded = [y.year for y in result.annual_schedule] if monthly else []
    print(f"  {'Period':<10}  {'Principal':>14}  {'Interest':>14}  {'Payment':>14}  {'Balance':>14}")
    print(f"  {'-' * 10}  {'-' * 14}  {'-' * 14}  {'-' * 14}  {'-' * 14}")
    for row in schedule_rows(result, expanded):
        label = row.label if row.kind == "year" else f"  {row.label}"
        print(
            f"  {label:<10}  {_money(row.principal)}  {_money(row.interest)}"
            f"  {_money(row.total_payment)}  {_money(row.remaining_balance)}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mortgage-calc",
        description="Fixed-rate mortgage payment and amortization schedule",
    )
    parser.add_argument("--principal", default=str(settings.default_principal),
                        help="Loan amount; thousands separators allowed (default: %(default)s)")
    parser.add_argument("--rate", default=str(settings.default_rate),
                        help="Annual interest rate in percent, e.g. 6 for 6%% (default: %(default)s)")
    parser.add_argument("--years", default=str(settings.default_years),
                        help="Loan term in years (default: %(default)s)")
    parser.add_argument("--monthly", action="store_true", help="Include monthly rows under each year")
    parser.add_argument("--no-schedule", action="store_true", help="Print the summary only")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    raw = {"principal": args.principal, "rate": args.rate, "years": args.years}
    errors = validate_all(raw)
    if errors:
        logger.warning("Invalid loan inputs: %s", errors)
        for message in errors.values():
            print(f"Error: {message}", file=sys.stderr)
        return 2

    inputs = parse_inputs(**raw)
    result = calculate(inputs)

    print_summary(result, inputs)
    print_equations(result, inputs)
    if not args.no_schedule:
        print_schedule(result, monthly=args.monthly)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
