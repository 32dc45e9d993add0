"""Tests for pydantic validation schemas"""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ispadmin.schemas import InvoicePaymentSchema, InvoiceStatusFilterSchema, InvoiceTransitionSchema


class TestInvoiceTransitionSchema:
    """Transition request validation"""

    def test_valid_request(self):
        """Known verb is accepted and stripped"""
        request = InvoiceTransitionSchema(invoice_id=1, transition="  MarkOverdue ")
        assert request.transition == "MarkOverdue"
        assert request.changed_by is None

    def test_partial_pay_is_a_known_verb(self):
        """PartialPay is part of the vocabulary even without table rows"""
        request = InvoiceTransitionSchema(invoice_id=1, transition="PartialPay")
        assert request.transition == "PartialPay"

    def test_unknown_verb(self):
        """Domain verbs are not invoice verbs"""
        with pytest.raises(ValidationError) as exc_info:
            InvoiceTransitionSchema(invoice_id=1, transition="TransferIn")

        assert "Unknown invoice transition" in str(exc_info.value)

    def test_invalid_invoice_id(self):
        """Invoice id must be positive"""
        with pytest.raises(ValidationError):
            InvoiceTransitionSchema(invoice_id=0, transition="Send")


class TestInvoicePaymentSchema:
    """Payment request validation"""

    def test_valid_payment(self):
        """String amounts become Decimal"""
        payment = InvoicePaymentSchema(invoice_id=3, amount="19.99")
        assert payment.amount == Decimal("19.99")

    @pytest.mark.parametrize("amount", ["0", "-5", "1.234"])
    def test_invalid_amount(self, amount):
        """Non-positive amounts and extra decimals are rejected"""
        with pytest.raises(ValidationError):
            InvoicePaymentSchema(invoice_id=3, amount=amount)


class TestInvoiceStatusFilterSchema:
    """Status filter validation"""

    def test_empty_filter(self):
        """No status means no filter"""
        assert InvoiceStatusFilterSchema().status is None

    def test_unknown_status(self):
        """Only invoice statuses are accepted"""
        with pytest.raises(ValidationError, match="Unknown invoice status"):
            InvoiceStatusFilterSchema(status="Expired")
