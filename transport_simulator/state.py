"""State machine implementation for validated lifecycle transitions.

This module provides a small finite state machine that enforces transition rules and can
execute an associated action when a transition occurs. Missions use it to move from
PENDING to COMPLETED, announcing the arrival as the transition's effect, and to
refuse any way back.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import IllegalTransitionError

ActionFn = Callable[..., Any]
"""Type alias for action effect functions."""

StateGraph = dict[Enum, tuple["Action", ...]]
"""Mapping from each state to the actions allowed out of it."""


@dataclass(frozen=True)
class Action:
    """Represents a state transition action with an optional effect function.

    Attributes:
        state: The target state this action transitions to.
        effect: Optional function to execute when this action is performed.
    """

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        """Execute the action's effect function if it exists.

        Returns:
            The result of the effect function, or None if no effect is defined.
        """
        if self.effect:
            return self.effect(*args, **kwargs)
        return None


class StateMachine:
    """A finite state machine that manages state transitions with validation.

    Attributes:
        _state: The current state of the state machine.
        _allowed: Dictionary mapping states to their allowed transitions.
    """

    _allowed: StateGraph
    _state: Enum

    def __init__(self, initial_state: Enum, nodes_graph: StateGraph):
        """Initialize the state machine with an initial state and transition rules.

        Args:
            initial_state: The starting state for the state machine.
            nodes_graph: Dictionary mapping each state to its allowed actions.
        """
        self._state = initial_state
        self._allowed = nodes_graph

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Request a state transition to the specified next state.

        Validates that the transition is allowed, updates the current state and
        executes the action's effect.

        Args:
            next_state: The target state to transition to.

        Returns:
            The result of the transition action's effect function, or None.

        Raises:
            IllegalTransitionError: If the graph has no action from the current
                state to next_state.
        """
        next_action = self._validate_transition(self._state, next_state)
        self._state = next_action.state
        return next_action(*args, **kwargs)

    @property
    def current(self) -> Enum:
        """The current state enumeration value."""
        return self._state

    def _validate_transition(self, frm: Enum, to: Enum) -> Action:
        for action in self._allowed.get(frm, ()):
            if action.state == to:
                return action

        msg = f"Illegal transition {frm.name} → {to.name}"
        raise IllegalTransitionError(msg)
