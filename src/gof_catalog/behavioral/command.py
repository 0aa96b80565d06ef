"""
Command - requests as objects.

A command wraps a receiver action behind execute/undo so it can be
passed around, queued, and reverted. The microwave is the receiver,
the remote is the invoker.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gof_catalog.harness.sink import OutputSink


class Command(ABC):
    """A reversible request."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the request."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the request. Does nothing if it was never executed."""


class Microwave:
    """Receiver: knows how to actually heat food."""

    def __init__(self, sink: OutputSink):
        self.sink = sink

    def start_cooking(self) -> None:
        self.sink.emit("Heating the food")

    def stop_cooking(self) -> None:
        self.sink.emit("The food is heated!")

    def cancel_cooking(self) -> None:
        self.sink.emit("Cancel heating!")


class MicrowaveCommand(Command):
    """Heats food in a microwave; undo cancels the heating."""

    def __init__(self, microwave: Microwave):
        self.microwave = microwave
        self._executed = False

    def execute(self) -> None:
        self.microwave.start_cooking()
        self.microwave.stop_cooking()
        self._executed = True

    def undo(self) -> None:
        if not self._executed:
            return
        self.microwave.cancel_cooking()
        self._executed = False

    @property
    def executed(self) -> bool:
        """True while the last execute() has not been undone."""
        return self._executed


class Remote:
    """
    Invoker: holds the current command and a history of executed ones.

    The remote never talks to a receiver directly.
    """

    def __init__(self) -> None:
        self._command: Command | None = None
        self._history: list[Command] = []

    def set_command(self, command: Command) -> None:
        """Bind the command triggered by the button."""
        self._command = command

    def press_button(self) -> bool:
        """Execute the bound command. Returns False if nothing is bound."""
        if self._command is None:
            return False
        self._command.execute()
        self._history.append(self._command)
        return True

    def press_undo(self) -> bool:
        """Undo the most recent command. Returns False if history is empty."""
        if not self._history:
            return False
        self._history.pop().undo()
        return True

    @property
    def history_size(self) -> int:
        return len(self._history)


def run_scenario(sink: OutputSink) -> None:
    """Heat food directly, then through the remote with undo."""
    microwave = Microwave(sink)
    command = MicrowaveCommand(microwave)
    command.execute()
    command.undo()

    remote = Remote()
    remote.set_command(MicrowaveCommand(microwave))
    remote.press_button()
    remote.press_undo()
    # Nothing left to undo
    remote.press_undo()
