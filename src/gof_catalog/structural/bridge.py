"""
Bridge - separate an abstraction from its implementation.

Programmers (abstraction) do their work through a language
(implementor). Either side can vary, and a programmer can switch
language at runtime without any code change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gof_catalog.harness.sink import OutputSink


class Language(ABC):
    """Implementor."""

    @abstractmethod
    def build(self, sink: OutputSink) -> None: ...

    @abstractmethod
    def execute(self, sink: OutputSink) -> None: ...


class CppLanguage(Language):
    def build(self, sink: OutputSink) -> None:
        sink.emit("Compiling the program to binary code with a C++ compiler")

    def execute(self, sink: OutputSink) -> None:
        sink.emit("Running the program's executable")


class SwiftLanguage(Language):
    def build(self, sink: OutputSink) -> None:
        sink.emit("Compiling the source code with Apple LLVM")

    def execute(self, sink: OutputSink) -> None:
        sink.emit("Running the .ipa file")


class Programmer(ABC):
    """
    Abstraction.

    do_work() is shared by all programmers and only uses the primitive
    operations of whatever language is currently assigned.
    """

    def __init__(self, language: Language, sink: OutputSink):
        self.language = language
        self.sink = sink

    def do_work(self) -> None:
        self.language.build(self.sink)
        self.language.execute(self.sink)

    @abstractmethod
    def earn_money(self) -> None: ...


class FreelanceProgrammer(Programmer):
    def earn_money(self) -> None:
        self.sink.emit("Getting paid for the completed order")


class CorporateProgrammer(Programmer):
    def earn_money(self) -> None:
        self.sink.emit("Getting the salary at the end of the month")


def run_scenario(sink: OutputSink) -> None:
    """A freelancer works in C++, then takes an order that needs Swift."""
    freelancer = FreelanceProgrammer(CppLanguage(), sink)
    freelancer.do_work()
    freelancer.earn_money()

    freelancer.language = SwiftLanguage()
    freelancer.do_work()
    freelancer.earn_money()

    employee = CorporateProgrammer(SwiftLanguage(), sink)
    employee.do_work()
    employee.earn_money()
