"""Business logic services"""

from ispadmin.services.invoice_service import InvoiceService
from ispadmin.services.scheduler import BillingScheduler


__all__ = [
    "BillingScheduler",
    "InvoiceService",
]
