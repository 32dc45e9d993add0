"""Pydantic schemas for invoice lifecycle requests"""
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from ispadmin.core.constants import InvoiceStatus, InvoiceTransition


class InvoiceTransitionSchema(BaseModel):
    """Request to apply a lifecycle transition to an invoice"""

    invoice_id: int = Field(..., gt=0, description="Invoice id")
    transition: str = Field(..., min_length=1, max_length=50, description="Transition verb")
    changed_by: int | None = Field(None, gt=0, description="Id of the user making the change")

    @field_validator("transition")
    @classmethod
    def validate_transition(cls, v: str) -> str:
        """Transition must be one of the invoice verbs"""
        v = v.strip()
        valid = InvoiceTransition.all_transitions()
        if v not in valid:
            raise ValueError(f"Unknown invoice transition. Allowed: {', '.join(valid)}")
        return v


class InvoicePaymentSchema(BaseModel):
    """Payment registered against an invoice"""

    invoice_id: int = Field(..., gt=0, description="Invoice id")
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Paid amount")
    changed_by: int | None = Field(None, gt=0, description="Id of the user registering the payment")


class InvoiceStatusFilterSchema(BaseModel):
    """Status filter for invoice listings"""

    status: str | None = Field(None, description="Invoice status")

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str | None) -> str | None:
        """Status must be one of the invoice statuses"""
        if v is None:
            return v
        valid = InvoiceStatus.all_statuses()
        if v not in valid:
            raise ValueError(f"Unknown invoice status. Allowed: {', '.join(valid)}")
        return v
