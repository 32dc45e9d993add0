"""
Application constants - lifecycle statuses and transition verbs
"""


class InvoiceStatus:
    """Invoice statuses"""

    DRAFT = "Draft"  # Being prepared, not sent to the customer
    ISSUED = "Issued"  # Sent, awaiting payment
    OVERDUE = "Overdue"  # Past due date, still unpaid
    PAID = "Paid"  # Fully paid
    CANCELLED = "Cancelled"  # Voided
    CREDITED = "Credited"  # Refunded after payment

    @classmethod
    def all_statuses(cls) -> list[str]:
        """List of all statuses"""
        return [cls.DRAFT, cls.ISSUED, cls.OVERDUE, cls.PAID, cls.CANCELLED, cls.CREDITED]

    @classmethod
    def get_status_name(cls, status: str) -> str:
        """Human readable status name"""
        names = {
            cls.DRAFT: "Draft",
            cls.ISSUED: "Issued",
            cls.OVERDUE: "Overdue",
            cls.PAID: "Paid",
            cls.CANCELLED: "Cancelled",
            cls.CREDITED: "Credited",
        }
        return names.get(status, status)


class InvoiceTransition:
    """Invoice lifecycle events"""

    SEND = "Send"
    PAY = "Pay"
    PARTIAL_PAY = "PartialPay"  # Vocabulary only, no table entry
    VOID = "Void"
    MARK_OVERDUE = "MarkOverdue"
    REFUND = "Refund"

    @classmethod
    def all_transitions(cls) -> list[str]:
        """List of all invoice transitions"""
        return [cls.SEND, cls.PAY, cls.PARTIAL_PAY, cls.VOID, cls.MARK_OVERDUE, cls.REFUND]

    @classmethod
    def get_transition_name(cls, transition: str) -> str:
        """Human readable transition name"""
        names = {
            cls.SEND: "Send to customer",
            cls.PAY: "Register payment",
            cls.PARTIAL_PAY: "Register partial payment",
            cls.VOID: "Void",
            cls.MARK_OVERDUE: "Mark as overdue",
            cls.REFUND: "Refund",
        }
        return names.get(transition, transition)


class DomainStatus:
    """Domain registration statuses"""

    PENDING_REGISTRATION = "PendingRegistration"
    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    EXPIRED = "Expired"
    CANCELLED = "Cancelled"
    PENDING_TRANSFER = "PendingTransfer"

    @classmethod
    def all_statuses(cls) -> list[str]:
        """List of all statuses"""
        return [
            cls.PENDING_REGISTRATION,
            cls.ACTIVE,
            cls.SUSPENDED,
            cls.EXPIRED,
            cls.CANCELLED,
            cls.PENDING_TRANSFER,
        ]


class DomainTransition:
    """Domain lifecycle events"""

    REGISTER = "Register"
    ACTIVATE = "Activate"
    SUSPEND = "Suspend"
    RENEW = "Renew"
    EXPIRE = "Expire"
    CANCEL = "Cancel"
    TRANSFER_IN = "TransferIn"
    TRANSFER_OUT = "TransferOut"
    REACTIVATE = "Reactivate"

    @classmethod
    def all_transitions(cls) -> list[str]:
        """List of all domain transitions"""
        return [
            cls.REGISTER,
            cls.ACTIVATE,
            cls.SUSPEND,
            cls.RENEW,
            cls.EXPIRE,
            cls.CANCEL,
            cls.TRANSFER_IN,
            cls.TRANSFER_OUT,
            cls.REACTIVATE,
        ]
