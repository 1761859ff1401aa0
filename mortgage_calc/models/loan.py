from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class LoanInputs:
    principal: Decimal
    rate: Decimal  # Annual percent, e.g. 6 means 6%
    years: int


@dataclass(frozen=True)
class PeriodEntry:
    """One row of a schedule.

    Monthly rows carry the month index in ``period`` and its position in the
    year in ``month_in_year``. Annual rows have ``period == year`` and no
    ``month_in_year``.
    """
    period: int
    year: int
    principal_portion: Decimal
    interest_portion: Decimal
    total_payment: Decimal
    remaining_balance: Decimal
    month_in_year: int | None = None


@dataclass(frozen=True)
class ScheduleResult:
    monthly_payment: Decimal
    annual_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal
    monthly_schedule: tuple[PeriodEntry, ...] = ()
    annual_schedule: tuple[PeriodEntry, ...] = ()

    @classmethod
    def empty(cls) -> "ScheduleResult":
        """Zeroed result: not enough input to compute anything."""
        return cls(
            monthly_payment=ZERO,
            annual_payment=ZERO,
            total_interest=ZERO,
            total_paid=ZERO,
        )

    @property
    def is_empty(self) -> bool:
        return not self.monthly_schedule

    @property
    def first_month(self) -> PeriodEntry | None:
        return self.monthly_schedule[0] if self.monthly_schedule else None

    def months_in_year(self, year: int) -> tuple[PeriodEntry, ...]:
        return tuple(m for m in self.monthly_schedule if m.year == year)
