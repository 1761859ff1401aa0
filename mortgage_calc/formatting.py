"""Display formatting shared by the dashboard and the terminal report."""

from decimal import Decimal


def dollar(v, places: int = 2) -> str:
    """Format a value as US currency, e.g. ``$4,796.40``."""
    return f"${Decimal(str(v)):,.{places}f}"


def usd(v) -> str:
    return f"USD {Decimal(str(v)):,.2f}"


def plain(v) -> str:
    """Drop trailing zeros: 6.00 -> 6, 0.005000 -> 0.005."""
    d = Decimal(str(v)).normalize()
    return format(d, "f")


def pct(v) -> str:
    """Percent-unit value (6 means 6%) as a display string."""
    return f"{plain(v)}%"


def years_label(v) -> str:
    return f"{plain(v)} years"
