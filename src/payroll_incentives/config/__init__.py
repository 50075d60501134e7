import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, default is development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "payroll_incentives.config.production"

    if env in {"test", "testing"}:
        return "payroll_incentives.config.testing"

    return "payroll_incentives.config.development"


def parse_rate_options(value: str) -> tuple[str, ...]:
    """"1, 2,5" -> ("1", "2", "5"); validation happens in DistributionRules."""
    return tuple(part.strip() for part in (value or "").split(",") if part.strip())
