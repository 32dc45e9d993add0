"""
Optional Sentry reporting for billing jobs
"""

import logging

from ispadmin.core.config import Config


logger = logging.getLogger(__name__)


def init_sentry(dsn: str | None = None, environment: str | None = None) -> bool:
    """
    Report ERROR log records (e.g. failed overdue sweeps) to Sentry

    Args:
        dsn: Sentry DSN, Config.SENTRY_DSN by default
        environment: Environment tag, Config.ENVIRONMENT by default

    Returns:
        True if Sentry was enabled
    """
    dsn = dsn or Config.SENTRY_DSN
    if not dsn:
        logger.info("SENTRY_DSN is not set, error reporting disabled")
        return False

    try:
        import sentry_sdk
        from sentry_sdk.integrations.logging import LoggingIntegration
    except ImportError:
        logger.warning("SENTRY_DSN is set but sentry-sdk is missing, install ispadmin-lifecycle[monitoring]")
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=environment or Config.ENVIRONMENT,
        integrations=[LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)],
        send_default_pii=False,
    )
    logger.info("Sentry error reporting enabled")
    return True
