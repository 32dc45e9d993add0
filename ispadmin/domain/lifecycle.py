"""
Lifecycle state machine over a fixed transition table

A table maps (state, transition) pairs to the resulting state. A missing key
means the transition is illegal from that state. Tables are built once and
are read-only afterwards, so engines can be shared freely between threads
and tasks.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType


logger = logging.getLogger(__name__)


class InvalidTransitionError(Exception):
    """Raised when a transition is not allowed from the current state"""

    def __init__(self, from_state: str, transition: str, reason: str = ""):
        self.from_state = from_state
        self.transition = transition
        self.reason = reason
        message = f"Invalid transition '{transition}' from state '{from_state}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


@dataclass(frozen=True)
class TransitionRule:
    """One row of a transition table: (from_state, transition) -> to_state"""

    from_state: str
    transition: str
    to_state: str


@dataclass
class TransitionResult:
    """Outcome of a transition validation"""

    is_valid: bool
    new_state: str | None = None
    error_message: str | None = None


def build_transition_table(
    rules: Iterable[TransitionRule | tuple[str, str, str]],
) -> Mapping[tuple[str, str], str]:
    """
    Build a read-only transition table

    Args:
        rules: TransitionRule objects or (from_state, transition, to_state) tuples

    Returns:
        Read-only mapping (from_state, transition) -> to_state, in declaration order

    Raises:
        ValueError: If two rules share the same (from_state, transition) key
    """
    table: dict[tuple[str, str], str] = {}
    for rule in rules:
        if not isinstance(rule, TransitionRule):
            rule = TransitionRule(*rule)

        key = (rule.from_state, rule.transition)
        if key in table:
            raise ValueError(
                f"Ambiguous rule for '{rule.transition}' from '{rule.from_state}': "
                f"'{table[key]}' and '{rule.to_state}'"
            )
        table[key] = rule.to_state

    return MappingProxyType(table)


class LifecycleStateMachine:
    """
    Stateless lifecycle engine

    The caller owns the entity and its persisted status, passes the current
    status on every call and stores whatever new status it gets back.
    """

    def __init__(self, rules: Iterable[TransitionRule | tuple[str, str, str]] = ()):
        self._table = build_transition_table(rules)

        by_state: dict[str, list[str]] = {}
        for from_state, transition in self._table:
            verbs = by_state.setdefault(from_state, [])
            if transition not in verbs:
                verbs.append(transition)
        self._transitions_by_state = MappingProxyType(
            {state: tuple(verbs) for state, verbs in by_state.items()}
        )

    @property
    def table(self) -> Mapping[tuple[str, str], str]:
        """Read-only transition table"""
        return self._table

    @property
    def rules(self) -> tuple[TransitionRule, ...]:
        """Table rows in declaration order"""
        return tuple(
            TransitionRule(from_state, transition, to_state)
            for (from_state, transition), to_state in self._table.items()
        )

    @property
    def states(self) -> tuple[str, ...]:
        """All states mentioned by the table, in order of first appearance"""
        seen: dict[str, None] = {}
        for (from_state, _), to_state in self._table.items():
            seen.setdefault(from_state, None)
            seen.setdefault(to_state, None)
        return tuple(seen)

    def can_transition(self, state: str, transition: str) -> bool:
        """
        Check whether a transition is allowed

        Args:
            state: Current status
            transition: Requested transition

        Returns:
            True if the table has a row for (state, transition)
        """
        return (state, transition) in self._table

    def transition(self, state: str, transition: str) -> str:
        """
        Apply a transition

        Args:
            state: Current status
            transition: Requested transition

        Returns:
            New status

        Raises:
            InvalidTransitionError: If the transition is not allowed from state
        """
        try:
            return self._table[(state, transition)]
        except KeyError:
            logger.debug("Rejected transition %s from %s", transition, state)
            raise InvalidTransitionError(state, transition) from None

    def get_valid_transitions(self, state: str) -> list[str]:
        """
        Transitions allowed from a status

        Args:
            state: Current status

        Returns:
            Allowed transitions in table order, empty for terminal or unknown states
        """
        return list(self._transitions_by_state.get(state, ()))

    def validate_transition(
        self,
        state: str,
        transition: str,
        raise_exception: bool = True,
    ) -> TransitionResult:
        """
        Validate a transition and explain a rejection

        Args:
            state: Current status
            transition: Requested transition
            raise_exception: Raise instead of returning an invalid result

        Returns:
            TransitionResult with the new status or the reason of the rejection

        Raises:
            InvalidTransitionError: If the transition is not allowed and raise_exception=True
        """
        new_state = self._table.get((state, transition))
        if new_state is not None:
            return TransitionResult(is_valid=True, new_state=new_state)

        allowed = self.get_valid_transitions(state)
        if allowed:
            reason = f"allowed transitions: {', '.join(allowed)}"
        else:
            reason = f"state '{state}' is terminal"

        if raise_exception:
            raise InvalidTransitionError(state, transition, reason)

        return TransitionResult(
            is_valid=False,
            error_message=str(InvalidTransitionError(state, transition, reason)),
        )

    def is_terminal_state(self, state: str) -> bool:
        """
        Check whether a status has no outgoing transitions

        Args:
            state: Status to check

        Returns:
            True if nothing can be applied from this status
        """
        return state not in self._transitions_by_state

    def get_transition_description(self, state: str, transition: str) -> str:
        """Short description of a transition, e.g. "Issued → Paid (Pay)" """
        new_state = self._table.get((state, transition))
        if new_state is None:
            return f"{transition} is not allowed from {state}"
        return f"{state} → {new_state} ({transition})"
