"""Per-field bounds checks for the loan form."""

from dataclasses import dataclass
from decimal import Decimal

from mortgage_calc.config import Settings, settings as default_settings
from mortgage_calc.engine.inputs import parse_number

FIELDS = ("principal", "rate", "years")


@dataclass(frozen=True)
class FieldRule:
    label: str
    min: Decimal
    max: Decimal
    whole: bool = False


def field_rules(config: Settings | None = None) -> dict[str, FieldRule]:
    """Build the inclusive bounds for each form field from settings."""
    cfg = config or default_settings
    return {
        "principal": FieldRule("Loan Amount", cfg.principal_min, cfg.principal_max),
        "rate": FieldRule("Interest Rate", cfg.rate_min, cfg.rate_max),
        "years": FieldRule("Loan Term", cfg.years_min, cfg.years_max, whole=True),
    }


def _format_bound(value: Decimal) -> str:
    # Plain notation: 10000000, not 1E+7
    return format(value.normalize(), "f")


def validate_field(field: str, value, rules: dict[str, FieldRule] | None = None) -> str | None:
    """Return an error message for ``value``, or None if it is acceptable.

    Unknown fields have no rule and always pass.
    """
    if rules is None:
        rules = field_rules()
    rule = rules.get(field)
    if rule is None:
        return None

    number = parse_number(value)
    if number is None:
        return f"{rule.label} is required"
    if rule.whole and number != number.to_integral_value():
        return f"{rule.label} must be a whole number"
    if number < rule.min:
        return f"{rule.label} must be at least {_format_bound(rule.min)}"
    if number > rule.max:
        return f"{rule.label} must be no more than {_format_bound(rule.max)}"
    return None


def validate_all(values: dict, rules: dict[str, FieldRule] | None = None) -> dict[str, str]:
    """Validate every form field; only failures are returned, in form order."""
    if rules is None:
        rules = field_rules()
    errors: dict[str, str] = {}
    for field in FIELDS:
        message = validate_field(field, values.get(field), rules)
        if message:
            errors[field] = message
    return errors
