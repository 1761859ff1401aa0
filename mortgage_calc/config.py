from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MORTGAGE_"}

    # Validation bounds (product choices, inclusive)
    principal_min: Decimal = Decimal("1000")
    principal_max: Decimal = Decimal("10000000")
    rate_min: Decimal = Decimal("0.1")
    rate_max: Decimal = Decimal("20")
    years_min: Decimal = Decimal("1")
    years_max: Decimal = Decimal("40")

    # Form defaults
    default_principal: Decimal = Decimal("800000")
    default_rate: Decimal = Decimal("6")  # Percent
    default_years: int = 30
    input_debounce_ms: int = 300

    # App
    debug: bool = False
    log_level: str = "INFO"
    dashboard_host: str = "127.0.0.1"
    dashboard_port: int = 8050


settings = Settings()
