import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

logger = logging.getLogger(__name__)

# sentry_sdk.init keyword -> environment variable
SAMPLE_RATE_VARS = {
    "traces_sample_rate": "SENTRY_TRACES_SAMPLE_RATE",
    "profiles_sample_rate": "SENTRY_PROFILES_SAMPLE_RATE",
}


def parse_sample_rate(env_var: str, default: float = 0.0) -> float:
    """Read a non-negative float from ``env_var``, warning and falling back
    to ``default`` when it is malformed."""
    raw_value = os.getenv(env_var)
    if raw_value is None:
        return default

    try:
        value = float(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid float (got %r); defaulting to %.2f",
            env_var,
            raw_value,
            default,
        )
        return default

    if value >= 0:
        return value
    logger.warning("%s cannot be negative; defaulting to %.2f", env_var, default)
    return default


def init_sentry() -> bool:
    """Initialise Sentry from ``SENTRY_*`` variables; ``False`` when disabled."""
    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        logger.info("SENTRY_DSN not provided; skipping Sentry initialization.")
        return False

    environment = (os.getenv("SENTRY_ENVIRONMENT") or "").strip() or None
    rates = {key: parse_sample_rate(var) for key, var in SAMPLE_RATE_VARS.items()}
    sentry_sdk.init(
        dsn=dsn,
        integrations=[FastApiIntegration()],
        environment=environment,
        **rates,
    )
    logger.info("Initialized Sentry (environment=%s)", environment or "default")
    return True
