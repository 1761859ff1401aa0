"""Payment summary figures and screen-reader announcements."""

from dataclasses import dataclass
from decimal import Decimal

from mortgage_calc.dashboard.schemas import InputSnapshot, SummarySnapshot
from mortgage_calc.formatting import dollar, pct, years_label
from mortgage_calc.models.loan import LoanInputs, ScheduleResult, ZERO

# Changes at or below one cent are not worth announcing
ANNOUNCE_THRESHOLD = Decimal("0.01")

FIELD_LABELS = {
    "principal": "Loan Amount",
    "rate": "Interest Rate",
    "years": "Loan Term",
}


@dataclass(frozen=True)
class SummaryFigures:
    monthly_payment: Decimal
    annual_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal
    principal: Decimal
    rate: Decimal          # Annual percent
    monthly_rate: Decimal  # Monthly percent


def _finite_or_zero(value) -> Decimal:
    d = Decimal(str(value))
    return d if d.is_finite() else ZERO


def build_summary(result: ScheduleResult, inputs: LoanInputs) -> SummaryFigures:
    rate = _finite_or_zero(inputs.rate)
    return SummaryFigures(
        monthly_payment=result.monthly_payment,
        annual_payment=result.annual_payment,
        total_interest=result.total_interest,
        total_paid=result.total_paid,
        principal=_finite_or_zero(inputs.principal),
        rate=rate,
        monthly_rate=rate / 12,
    )


def announce_changes(previous: SummarySnapshot | None, current: ScheduleResult) -> list[str]:
    """Announcements for a recalculation, given the previously shown summary.

    Nothing is announced on the first render.
    """
    if previous is None:
        return []
    messages = []
    if abs(current.monthly_payment - previous.monthly_payment) > ANNOUNCE_THRESHOLD:
        messages.append(f"Monthly payment updated to {dollar(current.monthly_payment, 0)}")
    return messages


def describe_input_change(field: str, value) -> str:
    if field == "principal":
        shown = dollar(value, 0)
    elif field == "rate":
        shown = pct(value)
    else:
        shown = years_label(value)
    return f"{FIELD_LABELS.get(field, field)} changed to {shown}"


def changed_fields(previous: InputSnapshot | None, current: InputSnapshot) -> list[str]:
    """Fields whose value moved by more than the announce threshold."""
    if previous is None:
        return []
    changed = []
    for field in FIELD_LABELS:
        old = getattr(previous, field)
        new = getattr(current, field)
        if new is None or new <= 0:
            continue
        if old is None or abs(new - old) > ANNOUNCE_THRESHOLD:
            changed.append(field)
    return changed
