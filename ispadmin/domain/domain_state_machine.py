"""
State machine for domain registration status transitions
"""

from collections.abc import Iterable

from ispadmin.core.constants import DomainTransition
from ispadmin.domain.lifecycle import LifecycleStateMachine, TransitionRule


class DomainStateMachine(LifecycleStateMachine):
    """
    Domain lifecycle over a table supplied by the integrating application

    Only the transition vocabulary (DomainTransition) is fixed here. There is
    no built-in domain table: with no rules every transition is rejected.
    """

    def __init__(self, rules: Iterable[TransitionRule | tuple[str, str, str]] = ()):
        rules = [rule if isinstance(rule, TransitionRule) else TransitionRule(*rule) for rule in rules]

        known = DomainTransition.all_transitions()
        for rule in rules:
            if rule.transition not in known:
                raise ValueError(
                    f"Unknown domain transition '{rule.transition}'. "
                    f"Allowed: {', '.join(known)}"
                )

        super().__init__(rules)
