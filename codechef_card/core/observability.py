import logging

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from codechef_card.core.logging import setup_logger
from codechef_card.settings import Settings


def init_logging(app_settings: Settings) -> logging.Logger:
    """Configure the package logger that every module logger propagates to."""

    return setup_logger("codechef_card", level=app_settings.log_level.upper())


def init_sentry(app_settings: Settings) -> None:
    """Initialize Sentry SDK when DSN is configured.

    Warnings logged on the fallback path become breadcrumbs; only unhandled
    errors are sent as events.
    """

    if not app_settings.sentry_dsn:
        return

    sentry_sdk.init(
        dsn=app_settings.sentry_dsn,
        environment=app_settings.environment,
        release=app_settings.release,
        traces_sample_rate=app_settings.sentry_traces_sample_rate,
        send_default_pii=False,
        integrations=[
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)
        ],
    )
