"""
Visitor - add operations to a structure without changing its elements.

Bank accounts accept a visitor and call back the visit method for their
own type (double dispatch). Serializers are visitors, so a new output
format needs no change to the account classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from gof_catalog.harness.sink import OutputSink


class Visitor(ABC):
    @abstractmethod
    def visit_person(self, account: PersonAccount) -> str: ...

    @abstractmethod
    def visit_company(self, account: CompanyAccount) -> str: ...


class Account(ABC):
    """Element."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> str: ...


@dataclass
class PersonAccount(Account):
    name: str
    number: str

    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_person(self)


@dataclass
class CompanyAccount(Account):
    name: str
    reg_number: str
    number: str

    def accept(self, visitor: Visitor) -> str:
        return visitor.visit_company(self)


class HtmlVisitor(Visitor):
    def visit_person(self, account: PersonAccount) -> str:
        return (
            "<table><tr><td>Property<td><td>Value</td></tr>"
            f"<tr><td>Name<td><td>{account.name}</td></tr>"
            f"<tr><td>Number<td><td>{account.number}</td></tr></table>"
        )

    def visit_company(self, account: CompanyAccount) -> str:
        return (
            "<table><tr><td>Property<td><td>Value</td></tr>"
            f"<tr><td>Name<td><td>{account.name}</td></tr>"
            f"<tr><td>Registration number<td><td>{account.reg_number}</td></tr>"
            f"<tr><td>Number<td><td>{account.number}</td></tr></table>"
        )


class XmlVisitor(Visitor):
    def visit_person(self, account: PersonAccount) -> str:
        return f"<Person><Name>{account.name}</Name><Number>{account.number}</Number></Person>"

    def visit_company(self, account: CompanyAccount) -> str:
        return (
            f"<Company><Name>{account.name}</Name>"
            f"<RegNumber>{account.reg_number}</RegNumber>"
            f"<Number>{account.number}</Number></Company>"
        )


class Bank:
    """Object structure holding the accounts."""

    def __init__(self) -> None:
        self.accounts: list[Account] = []

    def add(self, account: Account) -> None:
        self.accounts.append(account)

    def remove(self, account: Account) -> None:
        self.accounts.remove(account)

    def accept(self, visitor: Visitor) -> list[str]:
        """Apply a visitor to every account in order."""
        return [account.accept(visitor) for account in self.accounts]


def run_scenario(sink: OutputSink) -> None:
    """Render the same bank as HTML and as XML."""
    bank = Bank()
    bank.add(PersonAccount(name="John Smith", number="82184931"))
    bank.add(CompanyAccount(name="Microsoft", reg_number="ewuir32141324", number="3424131445"))
    for visitor in (HtmlVisitor(), XmlVisitor()):
        for rendered in bank.accept(visitor):
            sink.emit(rendered)
