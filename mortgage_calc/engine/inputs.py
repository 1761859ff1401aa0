"""Raw form input parsing.

Form fields arrive as text ("800,000", "$250 000", "6.5"); the engine wants
Decimals. Parsing never raises: anything unusable comes back as ``None``.
"""

from decimal import Decimal, InvalidOperation

from mortgage_calc.models.loan import LoanInputs

_SEPARATORS = (",", "_", " ", "\u00a0")


def parse_number(raw) -> Decimal | None:
    """Parse a form value into a finite Decimal, or ``None``."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float)):
        value = Decimal(str(raw))
    else:
        text = str(raw).strip().lstrip("$")
        for sep in _SEPARATORS:
            text = text.replace(sep, "")
        if not text:
            return None
        try:
            value = Decimal(text)
        except InvalidOperation:
            return None
    return value if value.is_finite() else None


def parse_inputs(principal, rate, years) -> LoanInputs:
    """Build LoanInputs from raw values.

    Unusable principal/rate become NaN and an unusable or fractional term
    becomes 0, both of which the engine treats as "no computation".
    """
    p = parse_number(principal)
    r = parse_number(rate)
    y = parse_number(years)
    term = int(y) if y is not None and y == y.to_integral_value() else 0
    return LoanInputs(
        principal=p if p is not None else Decimal("NaN"),
        rate=r if r is not None else Decimal("NaN"),
        years=term,
    )
