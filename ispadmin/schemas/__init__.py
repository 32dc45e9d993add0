"""
Pydantic schemas for input validation
"""

from ispadmin.schemas.invoice import (
    InvoicePaymentSchema,
    InvoiceStatusFilterSchema,
    InvoiceTransitionSchema,
)


__all__ = [
    "InvoicePaymentSchema",
    "InvoiceStatusFilterSchema",
    "InvoiceTransitionSchema",
]
