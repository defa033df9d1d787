"""Two small event-driven state machines: a handler table and a switch-based controller."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from enum import Enum, IntEnum
from typing import TextIO


class EventId(IntEnum):
    """Events understood by the handler-table state machine."""

    NOTHING = 0
    START_SENSORS_CMD = 1
    STOP_SENSORS_CMD = 2


EventHandler = Callable[[EventId], bool]


class StateMachine:
    """Dispatches events to registered handlers.

    A handler returns ``True`` when it handled the event.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventId, EventHandler] = {}

    def register_handler(self, event: EventId, handler: EventHandler) -> None:
        """Register ``handler`` for ``event``, replacing any earlier one."""
        self._handlers[event] = handler

    def handle_event(self, event: EventId) -> bool:
        """Run the handler for ``event``; ``False`` when none is registered."""
        handler = self._handlers.get(event)
        if handler is None:
            return False
        return handler(event)


class Event(Enum):
    """Events driving the application state controller."""

    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"

    def __str__(self) -> str:
        return self.value


class State(Enum):
    """States an application can be in."""

    NONE = "none"
    BACKGROUND = "background"
    LIMITED = "limited"
    FULL = "full"

    def __str__(self) -> str:
        return self.value


_TRANSITIONS = {
    Event.ACTIVATE: State.FULL,
    Event.DEACTIVATE: State.BACKGROUND,
}


class StateController:
    """Moves between application states in response to events, reporting each move."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.state = State.NONE
        self._out = out

    def _transition(self, new_state: State) -> None:
        self.state = new_state
        print(f"State transitioned to {self.state}", file=self._out or sys.stdout)

    def handle_event(self, event: Event) -> State:
        """Apply ``event`` and return the resulting state."""
        new_state = _TRANSITIONS.get(event)
        if new_state is not None:
            self._transition(new_state)
        return self.state


def main(argv: list[str] | None = None) -> int:
    """Run both state machines through a short demonstration."""
    parser = argparse.ArgumentParser(
        prog="fsm", description="Demonstrate the two state machines."
    )
    parser.parse_args(argv)

    def on_nothing(event: EventId) -> bool:
        print("nothing handler")
        return True

    def on_start(event: EventId) -> bool:
        print("starting sensors now")
        return True

    machine = StateMachine()
    machine.register_handler(EventId.NOTHING, on_nothing)
    machine.register_handler(EventId.START_SENSORS_CMD, on_start)
    machine.handle_event(EventId.START_SENSORS_CMD)
    machine.handle_event(EventId.NOTHING)
    handled = machine.handle_event(EventId.STOP_SENSORS_CMD)
    print(f"handled? {str(handled).lower()}")

    controller = StateController()
    controller.handle_event(Event.ACTIVATE)
    controller.handle_event(Event.DEACTIVATE)
    return 0