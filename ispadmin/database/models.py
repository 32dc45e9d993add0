"""
Data models
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ispadmin.core.constants import InvoiceStatus


@dataclass
class Invoice:
    """Invoice model"""
    id: int | None = None
    invoice_number: str = ""
    customer_id: int | None = None
    status: str = InvoiceStatus.DRAFT
    total_amount: Decimal = Decimal("0")
    amount_paid: Decimal = Decimal("0")
    due_date: datetime | None = None
    issued_at: datetime | None = None
    paid_at: datetime | None = None
    version: int = 1  # Optimistic locking counter
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def amount_due(self) -> Decimal:
        """Outstanding amount, never negative"""
        return max(self.total_amount - self.amount_paid, Decimal("0"))
