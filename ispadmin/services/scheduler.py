"""
Billing job scheduler
"""

import logging
from datetime import datetime

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from ispadmin.core.config import Config
from ispadmin.domain.lifecycle import InvalidTransitionError
from ispadmin.repositories import ConcurrentModificationError
from ispadmin.services.invoice_service import InvoiceService
from ispadmin.utils.helpers import get_now


logger = logging.getLogger(__name__)


class BillingScheduler:
    """Periodic billing jobs"""

    def __init__(self, invoice_service: InvoiceService, scheduler: AsyncIOScheduler | None = None):
        """
        Args:
            invoice_service: Service applying invoice transitions
            scheduler: APScheduler instance, a new AsyncIOScheduler by default
        """
        self.invoice_service = invoice_service
        self.scheduler = scheduler or AsyncIOScheduler()

    def start(self):
        """Register jobs and start the scheduler (needs a running event loop)"""
        self.scheduler.add_job(
            self.mark_overdue_invoices,
            trigger=IntervalTrigger(minutes=Config.OVERDUE_CHECK_INTERVAL),
            id="mark_overdue_invoices",
            name="Mark overdue invoices",
            replace_existing=True,
        )

        self.scheduler.start()
        logger.info(
            f"Billing scheduler started (overdue check every {Config.OVERDUE_CHECK_INTERVAL} min)"
        )

    def stop(self):
        """Stop the scheduler and wait for running jobs"""
        self.scheduler.shutdown(wait=True)
        logger.info("Billing scheduler stopped")

    async def mark_overdue_invoices(self, now: datetime | None = None) -> list[int]:
        """
        Move issued invoices past their due date to Overdue

        An invoice that fails is logged and skipped so one bad record does not
        stop the sweep.

        Args:
            now: Reference time, current UTC time by default

        Returns:
            Ids of invoices marked as overdue
        """
        now = now or get_now()
        candidates = await self.invoice_service.invoice_repo.get_overdue_candidates(now)
        logger.info(f"Found {len(candidates)} invoices past due date")

        marked: list[int] = []
        for invoice in candidates:
            try:
                await self.invoice_service.mark_overdue(invoice.id)
                marked.append(invoice.id)
            except (InvalidTransitionError, ConcurrentModificationError) as e:
                # Status changed after the candidate query (e.g. paid meanwhile)
                logger.warning(f"Skipping invoice #{invoice.id}: {e}")
            except Exception as e:
                logger.error(f"Error marking invoice #{invoice.id} as overdue: {e}", exc_info=True)

        return marked
