"""
Billing worker: runs the periodic invoice lifecycle jobs

The host application owns storage, so it builds the InvoiceService over its
own repository and hands it in:

    setup_logging()
    await main(InvoiceService(repo), stop_event)
"""

import asyncio
import logging

from ispadmin.core.config import Config
from ispadmin.services import BillingScheduler, InvoiceService
from ispadmin.utils.sentry import init_sentry


logger = logging.getLogger(__name__)


async def main(invoice_service: InvoiceService, stop_event: asyncio.Event | None = None):
    """
    Start the billing scheduler and run until stopped

    Args:
        invoice_service: Service over the host application's invoice repository
        stop_event: Event that ends the worker, runs forever by default

    Raises:
        ValueError: If the configuration is invalid
    """
    stop_event = stop_event or asyncio.Event()
    scheduler = None

    try:
        init_sentry()

        try:
            Config.validate()
        except ValueError as e:
            logger.error("Configuration error: %s", e)
            raise

        scheduler = BillingScheduler(invoice_service)
        scheduler.start()

        await stop_event.wait()

    except Exception as e:
        logger.exception("Billing worker failed: %s", e)
        raise
    finally:
        if scheduler:
            try:
                scheduler.stop()
            except Exception as e:
                logger.error("Error stopping scheduler: %s", e)

        logger.info("Billing worker stopped")
