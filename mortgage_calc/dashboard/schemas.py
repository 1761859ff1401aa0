"""Pydantic models for values kept in the browser session store.

The dashboard holds no server-side state between callbacks; the previous
summary and the last announced inputs round-trip through ``dcc.Store`` as
JSON and are validated back into these models.
"""

from decimal import Decimal

from pydantic import BaseModel

from mortgage_calc.models.loan import ScheduleResult


class SummarySnapshot(BaseModel):
    monthly_payment: Decimal = Decimal("0")
    annual_payment: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")

    @classmethod
    def from_result(cls, result: ScheduleResult) -> "SummarySnapshot":
        return cls(
            monthly_payment=result.monthly_payment,
            annual_payment=result.annual_payment,
            total_interest=result.total_interest,
            total_paid=result.total_paid,
        )


class InputSnapshot(BaseModel):
    principal: Decimal | None = None
    rate: Decimal | None = None
    years: Decimal | None = None
