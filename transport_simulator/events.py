"""
Event sinks: the observer channel vehicles, missions and the environment
report what they are doing to.
"""

from typing import List, Protocol, runtime_checkable

from rich.console import Console

CONSOLE = Console()


@runtime_checkable
class EventSink(Protocol):
    """Anything that accepts narrative event strings."""

    def emit(self, message: str) -> None: ...


class ConsoleSink:
    """Prints every event on a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or CONSOLE

    def emit(self, message: str) -> None:
        # User-typed origins/destinations must not be parsed as rich markup
        self.console.print(message, markup=False, highlight=False)


class RecordingSink:
    """Keeps every event in memory, in emission order."""

    def __init__(self):
        self.messages: List[str] = []

    def emit(self, message: str) -> None:
        self.messages.append(message)

    def clear(self):
        self.messages = []

    def __contains__(self, message: str) -> bool:
        return message in self.messages

    def __len__(self) -> int:
        return len(self.messages)


DEFAULT_SINK = ConsoleSink()
