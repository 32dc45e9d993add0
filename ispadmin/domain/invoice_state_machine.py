"""
State machine for invoice status transitions
"""

from ispadmin.core.constants import InvoiceStatus, InvoiceTransition
from ispadmin.domain.lifecycle import LifecycleStateMachine, TransitionRule


class InvoiceStateMachine(LifecycleStateMachine):
    """
    Invoice lifecycle

    Transition graph:

    Draft ──Send──→ Issued ──Pay──→ Paid ──Refund──→ Credited
      │               │  ↑
      │          MarkOverdue
      │               ↓  │Pay
      │             Overdue
      ↓               │
    Cancelled ←──Void─┘ (also from Draft and Issued)

    PartialPay has no rows: partially paid invoices keep their status.
    """

    RULES: tuple[TransitionRule, ...] = (
        TransitionRule(InvoiceStatus.DRAFT, InvoiceTransition.SEND, InvoiceStatus.ISSUED),
        TransitionRule(InvoiceStatus.DRAFT, InvoiceTransition.VOID, InvoiceStatus.CANCELLED),
        TransitionRule(InvoiceStatus.ISSUED, InvoiceTransition.PAY, InvoiceStatus.PAID),
        TransitionRule(InvoiceStatus.ISSUED, InvoiceTransition.MARK_OVERDUE, InvoiceStatus.OVERDUE),
        TransitionRule(InvoiceStatus.ISSUED, InvoiceTransition.VOID, InvoiceStatus.CANCELLED),
        TransitionRule(InvoiceStatus.OVERDUE, InvoiceTransition.PAY, InvoiceStatus.PAID),
        TransitionRule(InvoiceStatus.OVERDUE, InvoiceTransition.VOID, InvoiceStatus.CANCELLED),
        TransitionRule(InvoiceStatus.PAID, InvoiceTransition.REFUND, InvoiceStatus.CREDITED),
    )

    def __init__(self):
        super().__init__(self.RULES)


invoice_state_machine = InvoiceStateMachine()
