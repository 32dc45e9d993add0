"""
Repository layer
"""

from ispadmin.repositories.exceptions import (
    ConcurrentModificationError,
    EntityNotFoundError,
    RepositoryError,
)
from ispadmin.repositories.invoice_repository import InvoiceRepository


__all__ = [
    "ConcurrentModificationError",
    "EntityNotFoundError",
    "InvoiceRepository",
    "RepositoryError",
]
