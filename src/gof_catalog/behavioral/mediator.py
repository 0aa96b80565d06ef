"""
Mediator - colleagues talk through a go-between instead of each other.

The manager routes each message by the sender's role to exactly one
other colleague:

    customer -> programmer -> tester -> customer
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from gof_catalog.harness.sink import OutputSink


class ColleagueRole(str, Enum):
    """Roles known to the manager's routing table."""

    CUSTOMER = "customer"
    PROGRAMMER = "programmer"
    TESTER = "tester"


class Mediator(ABC):
    """Routes messages between colleagues."""

    @abstractmethod
    def send(self, message: str, sender: Colleague) -> None:
        """Deliver a message on behalf of a colleague."""


class Colleague(ABC):
    """
    A participant that only knows its mediator.

    Sending is shared by every colleague and always goes through the
    mediator; only how a colleague reacts to a message varies.
    """

    role: ColleagueRole

    def __init__(self, mediator: Mediator, sink: OutputSink):
        self.mediator = mediator
        self.sink = sink

    def send(self, message: str) -> None:
        self.mediator.send(message, self)

    @abstractmethod
    def notify(self, message: str) -> None:
        """React to a message routed to this colleague."""


class CustomerColleague(Colleague):
    role = ColleagueRole.CUSTOMER

    def notify(self, message: str) -> None:
        self.sink.emit(f"Message to customer: {message}")


class ProgrammerColleague(Colleague):
    role = ColleagueRole.PROGRAMMER

    def notify(self, message: str) -> None:
        self.sink.emit(f"Message to programmer: {message}")


class TesterColleague(Colleague):
    role = ColleagueRole.TESTER

    def notify(self, message: str) -> None:
        self.sink.emit(f"Message to tester: {message}")


# Sender role -> recipient role
ROUTES: dict[ColleagueRole, ColleagueRole] = {
    ColleagueRole.CUSTOMER: ColleagueRole.PROGRAMMER,
    ColleagueRole.PROGRAMMER: ColleagueRole.TESTER,
    ColleagueRole.TESTER: ColleagueRole.CUSTOMER,
}


class ManagerMediator(Mediator):
    """Project manager forwarding work along the fixed routing table."""

    def __init__(self) -> None:
        self._participants: dict[ColleagueRole, Colleague] = {}

    def assign(self, colleague: Colleague) -> None:
        """Make a colleague the participant for its role, replacing any previous one."""
        self._participants[colleague.role] = colleague

    def send(self, message: str, sender: Colleague) -> None:
        recipient = self._participants.get(ROUTES[sender.role])
        # An unassigned recipient means the message goes nowhere
        if recipient is not None:
            recipient.notify(message)


def run_scenario(sink: OutputSink) -> None:
    """Pass an order from customer to programmer to tester and back."""
    manager = ManagerMediator()
    customer = CustomerColleague(manager, sink)
    programmer = ProgrammerColleague(manager, sink)
    tester = TesterColleague(manager, sink)

    for colleague in (customer, programmer, tester):
        manager.assign(colleague)

    customer.send("There is an order, we need to build a program")
    programmer.send("The program is ready, it needs testing")
    tester.send("The program is tested and ready for sale")
