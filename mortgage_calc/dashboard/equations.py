"""Worked mortgage formulas with the current loan's numbers substituted in.

Three equations are shown:
  PMT   - level monthly payment, constant over the life of the loan
  INT_1 - interest portion of month 1 (decreases each month)
  PRN_1 - principal portion of month 1 (increases each month)

Formulas are emitted as LaTeX for MathJax rendering in ``dcc.Markdown``.
"""

from dataclasses import dataclass
from decimal import Decimal

from mortgage_calc.formatting import plain, usd
from mortgage_calc.models.loan import LoanInputs, ScheduleResult

COLORS = {
    "PMT": "#3c6ae5",
    "INT": "#0079a6",
    "PRN": "#b82937",
    "PV": "#b95b1d",
    "r": "#7a46ff",
    "t": "#047857",
}

RATE_DISPLAY_PLACES = Decimal("0.000001")


@dataclass(frozen=True)
class Equation:
    name: str
    symbolic: str
    substituted: str
    value: Decimal
    caption: str

    @property
    def display_value(self) -> str:
        return f"= {usd(self.value)}"


def _latex_amount(v: Decimal, places: int = 0) -> str:
    return f"{v:,.{places}f}".replace(",", "{,}")


def _colored(key: str, text: str) -> str:
    return rf"\color{{{COLORS[key]}}}{{{text}}}"


def build_equations(result: ScheduleResult, inputs: LoanInputs) -> list[Equation]:
    if result.is_empty:
        return []

    monthly_rate = inputs.rate / 100 / 12
    r = _colored("r", plain(monthly_rate.quantize(RATE_DISPLAY_PLACES)))
    r_annual = _colored("r", plain(inputs.rate / 100))
    n = _colored("t", str(inputs.years * 12))
    pv = _colored("PV", _latex_amount(inputs.principal))
    first = result.first_month
    pmt_shown = _colored("PMT", _latex_amount(result.monthly_payment, places=2))
    int_shown = _colored("INT", _latex_amount(first.interest_portion, places=2))

    pmt = Equation(
        name="PMT",
        symbolic=r"\mathrm{PMT} = \frac{r \times PV}{1 - (1 + r)^{-n}}",
        substituted=_colored("PMT", r"\mathbf{PMT}") + rf" = \frac{{{r} \times {pv}}}{{1 - (1 + {r})^{{-{n}}}}}",
        value=result.monthly_payment,
        caption="Constant over the life of the loan",
    )
    interest = Equation(
        name="INT",
        symbolic=r"\mathrm{INT}_t = B_{t-1} \times \frac{r_{annual}}{12}",
        substituted=_colored("INT", r"\mathrm{INT}_1") + rf" = {pv} \times \frac{{{r_annual}}}{{12}}",
        value=first.interest_portion,
        caption="For Month 1 (decreases each month)",
    )
    principal = Equation(
        name="PRN",
        symbolic=r"\mathrm{PRN}_t = \mathrm{PMT} - \mathrm{INT}_t",
        substituted=_colored("PRN", r"\mathrm{PRN}_1") + f" = {pmt_shown} - {int_shown}",
        value=first.principal_portion,
        caption="For Month 1 (increases each month)",
    )
    return [pmt, interest, principal]
