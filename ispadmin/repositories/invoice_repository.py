"""
In-memory invoice repository

Reference collaborator for the lifecycle services: it keeps invoices in a dict
and enforces optimistic locking on status writes the same way a database
backed repository would (UPDATE ... WHERE version = ?).
"""

import logging
from dataclasses import replace
from datetime import datetime

from ispadmin.core.constants import InvoiceStatus
from ispadmin.database.models import Invoice
from ispadmin.repositories.exceptions import ConcurrentModificationError, EntityNotFoundError
from ispadmin.utils.helpers import as_utc, get_now


logger = logging.getLogger(__name__)


class InvoiceRepository:
    """Invoice storage with versioned status updates"""

    def __init__(self):
        self._invoices: dict[int, Invoice] = {}
        self._status_history: list[dict] = []
        self._next_id = 1

    async def add(self, invoice: Invoice) -> Invoice:
        """
        Store a new invoice

        Args:
            invoice: Invoice without an id

        Returns:
            Stored copy with id, version and timestamps filled in
        """
        now = get_now()
        stored = replace(
            invoice,
            id=self._next_id,
            version=1,
            due_date=as_utc(invoice.due_date),
            created_at=invoice.created_at or now,
            updated_at=now,
        )
        if not stored.invoice_number:
            stored.invoice_number = f"INV-{stored.id:06d}"

        self._invoices[stored.id] = stored
        self._next_id += 1

        logger.debug(f"Invoice #{stored.id} stored with status {stored.status}")
        return replace(stored)

    async def get_by_id(self, invoice_id: int) -> Invoice | None:
        """Invoice by id or None"""
        invoice = self._invoices.get(invoice_id)
        return replace(invoice) if invoice else None

    async def get_all(self, status: str | None = None) -> list[Invoice]:
        """
        All invoices, optionally filtered by status

        Args:
            status: Status filter

        Returns:
            Invoices ordered by id
        """
        return [
            replace(invoice)
            for invoice in sorted(self._invoices.values(), key=lambda i: i.id)
            if status is None or invoice.status == status
        ]

    async def get_overdue_candidates(self, now: datetime) -> list[Invoice]:
        """
        Issued invoices whose due date has passed

        Args:
            now: Reference time

        Returns:
            Invoices that should be marked as overdue
        """
        return [
            invoice
            for invoice in await self.get_all(status=InvoiceStatus.ISSUED)
            if invoice.due_date is not None and as_utc(invoice.due_date) < as_utc(now)
        ]

    async def update_status(
        self,
        invoice_id: int,
        new_status: str,
        expected_version: int,
        changed_by: int | None = None,
        **fields,
    ) -> Invoice:
        """
        Update the invoice status with optimistic locking

        Args:
            invoice_id: Invoice id
            new_status: New status
            expected_version: Version the caller read
            changed_by: Id of the user making the change
            **fields: Other invoice fields to update together with the status

        Returns:
            Updated invoice

        Raises:
            EntityNotFoundError: If the invoice does not exist
            ConcurrentModificationError: If the invoice was changed since it was read
        """
        invoice = self._invoices.get(invoice_id)
        if invoice is None:
            raise EntityNotFoundError("Invoice", invoice_id)

        if invoice.version != expected_version:
            logger.warning(
                f"Optimistic locking conflict for Invoice #{invoice_id}: "
                f"expected version {expected_version}, got {invoice.version}"
            )
            raise ConcurrentModificationError(
                "Invoice", invoice_id, expected_version, actual_version=invoice.version
            )

        if "due_date" in fields:
            fields["due_date"] = as_utc(fields["due_date"])

        now = get_now()
        old_status = invoice.status
        updated = replace(
            invoice,
            **fields,
            status=new_status,
            version=expected_version + 1,
            updated_at=now,
        )
        self._invoices[invoice_id] = updated

        if old_status != new_status:
            self._status_history.append(
                {
                    "invoice_id": invoice_id,
                    "old_status": old_status,
                    "new_status": new_status,
                    "changed_by": changed_by,
                    "changed_at": now,
                }
            )

        logger.debug(
            f"Invoice #{invoice_id} status updated: {old_status} → {new_status} "
            f"(version: {expected_version} → {expected_version + 1})"
        )
        return replace(updated)

    async def get_status_history(self, invoice_id: int) -> list[dict]:
        """Status changes of an invoice, oldest first"""
        return [dict(entry) for entry in self._status_history if entry["invoice_id"] == invoice_id]
