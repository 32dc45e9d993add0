"""
Pytest fixtures and test configuration
"""
from datetime import timedelta
from decimal import Decimal

import pytest

from ispadmin.core.constants import InvoiceStatus
from ispadmin.database.models import Invoice
from ispadmin.domain.invoice_state_machine import InvoiceStateMachine
from ispadmin.repositories import InvoiceRepository
from ispadmin.services import BillingScheduler, InvoiceService
from ispadmin.utils.helpers import get_now


@pytest.fixture
def state_machine() -> InvoiceStateMachine:
    """
    Fixture for the invoice state machine
    """
    return InvoiceStateMachine()


@pytest.fixture
def invoice_repo() -> InvoiceRepository:
    """
    Fixture for an empty invoice repository
    """
    return InvoiceRepository()


@pytest.fixture
def invoice_service(invoice_repo: InvoiceRepository) -> InvoiceService:
    """
    Fixture for the invoice service
    """
    return InvoiceService(invoice_repo)


@pytest.fixture
def billing_scheduler(invoice_service: InvoiceService) -> BillingScheduler:
    """
    Fixture for the billing scheduler (not started)
    """
    return BillingScheduler(invoice_service)


@pytest.fixture
def make_invoice(invoice_repo: InvoiceRepository):
    """
    Factory fixture storing an invoice with the given status
    """

    async def _make_invoice(
        status: str = InvoiceStatus.DRAFT,
        total_amount: str = "100.00",
        due_in_days: int | None = 14,
    ) -> Invoice:
        due_date = get_now() + timedelta(days=due_in_days) if due_in_days is not None else None
        return await invoice_repo.add(
            Invoice(
                customer_id=1,
                status=status,
                total_amount=Decimal(total_amount),
                due_date=due_date,
            )
        )

    return _make_invoice
