"""Composition root for the checkout system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Logging configuration
- Adapter instantiation
- Core service initialization
"""

import logging
import sys

from checkout.adapters.notification.markdown import MarkdownNotifierAdapter
from checkout.adapters.notification.stdout import StdoutNotifierAdapter
from checkout.adapters.payment.http import HttpPaymentGatewayAdapter
from checkout.adapters.store.sqlite import SQLiteOrderRepository
from checkout.config import Settings, load_settings
from checkout.core.checkout_service import CheckoutService
from checkout.core.ports import NotifierPort


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def _build_notifier(settings: Settings) -> NotifierPort:
    if settings.notification_backend == "stdout":
        return StdoutNotifierAdapter(verbose=settings.debug)
    if settings.notification_backend == "markdown":
        return MarkdownNotifierAdapter(outbox_dir=settings.notification_output_dir)
    raise ValueError(f"Unknown notification backend: {settings.notification_backend}")


def build_checkout_service(settings: Settings) -> CheckoutService:
    """Instantiate adapters from settings and wire them into CheckoutService.

    The caller owns the returned adapters and should close the gateway
    client and repository connection when done.

    Raises:
        ValueError: If a configured backend is unknown.
    """
    logger = logging.getLogger(__name__)

    gateway = HttpPaymentGatewayAdapter(
        api_url=settings.payment_gateway_url,
        api_key=settings.payment_api_key,
        timeout_seconds=settings.payment_timeout_seconds,
    )
    logger.info(f"Payment gateway: {settings.payment_gateway_url}")

    repository = SQLiteOrderRepository(db_path=settings.store_sqlite_path)
    logger.info(f"Order repository initialized: {settings.store_sqlite_path}")

    notifier = _build_notifier(settings)
    logger.info(f"Notifier: {settings.notification_backend}")

    return CheckoutService(
        gateway=gateway,
        repository=repository,
        notifier=notifier,
        premium_discount=settings.premium_discount,
        currency_symbol=settings.currency_symbol,
        confirmation_subject=settings.confirmation_subject,
    )


def bootstrap(settings: Settings | None = None) -> CheckoutService:
    """Load configuration, configure logging and wire the checkout service.

    This is the composition root: the single place where all components
    are instantiated and wired together.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading checkout system...")

    return build_checkout_service(settings)
