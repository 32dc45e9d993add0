"""
Domain layer for lifecycle rules
"""

from ispadmin.domain.domain_state_machine import DomainStateMachine
from ispadmin.domain.invoice_state_machine import InvoiceStateMachine, invoice_state_machine
from ispadmin.domain.lifecycle import (
    InvalidTransitionError,
    LifecycleStateMachine,
    TransitionResult,
    TransitionRule,
    build_transition_table,
)


__all__ = [
    "DomainStateMachine",
    "InvalidTransitionError",
    "InvoiceStateMachine",
    "LifecycleStateMachine",
    "TransitionResult",
    "TransitionRule",
    "build_transition_table",
    "invoice_state_machine",
]
