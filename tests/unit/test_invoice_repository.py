"""
Tests for InvoiceRepository
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from ispadmin.core.constants import InvoiceStatus
from ispadmin.database.models import Invoice
from ispadmin.repositories import ConcurrentModificationError, EntityNotFoundError
from ispadmin.utils.helpers import get_now


async def test_add_assigns_id_and_number(invoice_repo):
    """Stored invoices get an id, a number and version 1"""
    invoice = await invoice_repo.add(Invoice(customer_id=5, total_amount=Decimal("10")))

    assert invoice.id == 1
    assert invoice.invoice_number == "INV-000001"
    assert invoice.version == 1
    assert invoice.created_at is not None


async def test_returned_objects_are_copies(invoice_repo):
    """Changing a returned invoice does not change storage"""
    invoice = await invoice_repo.add(Invoice())
    invoice.status = InvoiceStatus.PAID

    stored = await invoice_repo.get_by_id(invoice.id)
    assert stored.status == InvoiceStatus.DRAFT


async def test_update_status_increments_version(invoice_repo):
    """A write with the current version succeeds"""
    invoice = await invoice_repo.add(Invoice())

    updated = await invoice_repo.update_status(invoice.id, InvoiceStatus.ISSUED, 1, changed_by=2)

    assert updated.status == InvoiceStatus.ISSUED
    assert updated.version == 2
    history = await invoice_repo.get_status_history(invoice.id)
    assert history[0]["old_status"] == InvoiceStatus.DRAFT
    assert history[0]["changed_by"] == 2


async def test_update_status_with_stale_version(invoice_repo):
    """A write with an old version is rejected"""
    invoice = await invoice_repo.add(Invoice())
    await invoice_repo.update_status(invoice.id, InvoiceStatus.ISSUED, 1)

    with pytest.raises(ConcurrentModificationError) as exc_info:
        await invoice_repo.update_status(invoice.id, InvoiceStatus.CANCELLED, 1)

    assert exc_info.value.expected_version == 1
    assert exc_info.value.actual_version == 2
    assert "Invoice #1" in str(exc_info.value)


async def test_update_missing_invoice(invoice_repo):
    """Unknown ids raise EntityNotFoundError"""
    with pytest.raises(EntityNotFoundError, match="Invoice #42 not found"):
        await invoice_repo.update_status(42, InvoiceStatus.PAID, 1)


async def test_overdue_candidates(invoice_repo):
    """Only issued invoices past their due date"""
    now = get_now()
    late = await invoice_repo.add(
        Invoice(status=InvoiceStatus.ISSUED, due_date=now - timedelta(days=1))
    )
    await invoice_repo.add(Invoice(status=InvoiceStatus.ISSUED, due_date=now + timedelta(days=1)))
    await invoice_repo.add(Invoice(status=InvoiceStatus.ISSUED))
    await invoice_repo.add(Invoice(status=InvoiceStatus.DRAFT, due_date=now - timedelta(days=1)))

    candidates = await invoice_repo.get_overdue_candidates(now)

    assert [invoice.id for invoice in candidates] == [late.id]


async def test_naive_due_date_is_stored_as_utc(invoice_repo):
    """Naive due dates are read as UTC so they compare with aware ones"""
    naive = datetime(2024, 3, 1, 12, 0)

    invoice = await invoice_repo.add(Invoice(status=InvoiceStatus.ISSUED, due_date=naive))
    updated = await invoice_repo.update_status(
        invoice.id, InvoiceStatus.ISSUED, invoice.version, due_date=naive
    )

    assert invoice.due_date == naive.replace(tzinfo=timezone.utc)
    assert updated.due_date.tzinfo is not None


async def test_overdue_candidates_with_naive_due_date(invoice_repo):
    """A naive due date does not break the candidate query"""
    now = get_now()
    naive = await invoice_repo.add(
        Invoice(status=InvoiceStatus.ISSUED, due_date=datetime(2000, 1, 1))
    )
    aware = await invoice_repo.add(
        Invoice(status=InvoiceStatus.ISSUED, due_date=now - timedelta(days=1))
    )

    candidates = await invoice_repo.get_overdue_candidates(now.replace(tzinfo=None))

    assert [invoice.id for invoice in candidates] == [naive.id, aware.id]
