"""Application core - configuration and constants"""

from ispadmin.core.config import Config
from ispadmin.core.constants import DomainStatus, DomainTransition, InvoiceStatus, InvoiceTransition


__all__ = [
    "Config",
    "DomainStatus",
    "DomainTransition",
    "InvoiceStatus",
    "InvoiceTransition",
]
