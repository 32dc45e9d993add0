"""
Invoice lifecycle service (business logic)
"""

import logging
from decimal import Decimal

from ispadmin.core.constants import InvoiceStatus, InvoiceTransition
from ispadmin.database.models import Invoice
from ispadmin.domain.invoice_state_machine import InvoiceStateMachine, invoice_state_machine
from ispadmin.domain.lifecycle import InvalidTransitionError
from ispadmin.repositories import EntityNotFoundError, InvoiceRepository
from ispadmin.schemas import InvoicePaymentSchema, InvoiceStatusFilterSchema, InvoiceTransitionSchema
from ispadmin.utils.helpers import format_amount, get_now


logger = logging.getLogger(__name__)

# Written by update_status itself
RESERVED_FIELDS = frozenset({"id", "status", "version"})


class InvoiceService:
    """
    Invoice lifecycle management

    Loads the invoice, asks the state machine for the new status and writes it
    back with the version it read, so a stale write is rejected by the
    repository.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        state_machine: InvoiceStateMachine | None = None,
    ):
        """
        Args:
            invoice_repo: Invoice repository
            state_machine: State machine validating status transitions
        """
        self.invoice_repo = invoice_repo
        self.state_machine = state_machine or invoice_state_machine

    async def _get_invoice(self, invoice_id: int) -> Invoice:
        invoice = await self.invoice_repo.get_by_id(invoice_id)
        if not invoice:
            raise EntityNotFoundError("Invoice", invoice_id)
        return invoice

    async def get_invoices(self, status: str | None = None) -> list[Invoice]:
        """
        Invoices filtered by status

        Raises:
            pydantic.ValidationError: If status is not an invoice status
        """
        status_filter = InvoiceStatusFilterSchema(status=status)
        return await self.invoice_repo.get_all(status=status_filter.status)

    async def apply_transition(
        self,
        invoice_id: int,
        transition: str,
        changed_by: int | None = None,
        **fields,
    ) -> Invoice:
        """
        Apply a lifecycle transition to an invoice

        Args:
            invoice_id: Invoice id
            transition: Transition verb
            changed_by: Id of the user making the change
            **fields: Invoice fields to store together with the new status

        Returns:
            Updated invoice

        Raises:
            EntityNotFoundError: If the invoice does not exist
            ValueError: If fields contain id, status or version
            InvalidTransitionError: If the transition is not allowed from the current status
            ConcurrentModificationError: If the invoice was changed concurrently
        """
        reserved = RESERVED_FIELDS.intersection(fields)
        if reserved:
            raise ValueError(
                f"Fields managed by the lifecycle cannot be set directly: {', '.join(sorted(reserved))}"
            )

        invoice = await self._get_invoice(invoice_id)

        try:
            new_status = self.state_machine.transition(invoice.status, transition)
        except InvalidTransitionError as e:
            logger.error(f"Cannot apply {transition} to invoice #{invoice_id}: {e}")
            raise

        updated = await self.invoice_repo.update_status(
            invoice_id, new_status, invoice.version, changed_by, **fields
        )

        logger.info(
            f"Invoice #{invoice_id} ({invoice.invoice_number}): "
            f"{invoice.status} → {new_status} via {transition}"
        )
        return updated

    async def send_invoice(self, invoice_id: int, changed_by: int | None = None) -> Invoice:
        """Issue a draft invoice to the customer"""
        return await self.apply_transition(
            invoice_id, InvoiceTransition.SEND, changed_by, issued_at=get_now()
        )

    async def void_invoice(self, invoice_id: int, changed_by: int | None = None) -> Invoice:
        """Cancel an unpaid invoice"""
        return await self.apply_transition(invoice_id, InvoiceTransition.VOID, changed_by)

    async def refund_invoice(self, invoice_id: int, changed_by: int | None = None) -> Invoice:
        """Credit a paid invoice"""
        return await self.apply_transition(invoice_id, InvoiceTransition.REFUND, changed_by)

    async def mark_overdue(self, invoice_id: int, changed_by: int | None = None) -> Invoice:
        """Flag an issued invoice as overdue"""
        return await self.apply_transition(invoice_id, InvoiceTransition.MARK_OVERDUE, changed_by)

    async def record_payment(
        self, invoice_id: int, amount: Decimal, changed_by: int | None = None
    ) -> Invoice:
        """
        Register a payment

        A payment covering the outstanding amount moves the invoice to Paid.
        A smaller payment is added to amount_paid and the status is kept, since
        there is no partially paid status.

        Args:
            invoice_id: Invoice id
            amount: Paid amount
            changed_by: Id of the user registering the payment

        Returns:
            Updated invoice

        Raises:
            ValueError: If the amount is not positive
            InvalidTransitionError: If the invoice cannot be paid in its current status
            ConcurrentModificationError: If the invoice was changed since it was read
        """
        if amount <= 0:
            raise ValueError(f"Payment amount must be positive, got {amount}")

        invoice = await self._get_invoice(invoice_id)

        try:
            result = self.state_machine.validate_transition(invoice.status, InvoiceTransition.PAY)
        except InvalidTransitionError as e:
            logger.error(f"Cannot register payment for invoice #{invoice_id}: {e}")
            raise

        amount_paid = invoice.amount_paid + amount

        # Both paths write with the version amount_paid was computed from
        if amount_paid >= invoice.total_amount:
            updated = await self.invoice_repo.update_status(
                invoice_id,
                result.new_state,
                invoice.version,
                changed_by,
                amount_paid=amount_paid,
                paid_at=get_now(),
            )
            logger.info(
                f"Invoice #{invoice_id} ({invoice.invoice_number}): "
                f"{invoice.status} → {result.new_state} via {InvoiceTransition.PAY}"
            )
            return updated

        updated = await self.invoice_repo.update_status(
            invoice_id, invoice.status, invoice.version, changed_by, amount_paid=amount_paid
        )
        logger.info(
            f"Partial payment {format_amount(amount)} for invoice #{invoice_id}, "
            f"still due {format_amount(updated.amount_due)} (status kept: {invoice.status})"
        )
        return updated

    async def process_transition_request(self, data: dict) -> Invoice:
        """
        Validate a raw transition request and apply it

        Raises:
            pydantic.ValidationError: If the request is malformed
        """
        request = InvoiceTransitionSchema(**data)
        return await self.apply_transition(request.invoice_id, request.transition, request.changed_by)

    async def process_payment_request(self, data: dict) -> Invoice:
        """
        Validate a raw payment request and register it

        Raises:
            pydantic.ValidationError: If the request is malformed
        """
        request = InvoicePaymentSchema(**data)
        return await self.record_payment(request.invoice_id, request.amount, request.changed_by)

    async def can_apply(self, invoice_id: int, transition: str) -> bool:
        """
        Check whether a transition can be applied to an invoice

        Returns:
            True if the transition is allowed, False for unknown invoices
        """
        invoice = await self.invoice_repo.get_by_id(invoice_id)
        if not invoice:
            return False
        return self.state_machine.can_transition(invoice.status, transition)

    async def get_available_transitions(self, invoice_id: int) -> list[str]:
        """
        Transitions allowed for the current status of an invoice

        Raises:
            EntityNotFoundError: If the invoice does not exist
        """
        invoice = await self._get_invoice(invoice_id)
        return self.state_machine.get_valid_transitions(invoice.status)

    async def get_status_history(self, invoice_id: int) -> list[dict]:
        """Status changes of an invoice"""
        return await self.invoice_repo.get_status_history(invoice_id)

    async def get_open_invoices(self) -> list[Invoice]:
        """Invoices still awaiting payment"""
        invoices = await self.invoice_repo.get_all()
        return [
            invoice
            for invoice in invoices
            if invoice.status in (InvoiceStatus.ISSUED, InvoiceStatus.OVERDUE)
        ]
