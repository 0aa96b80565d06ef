"""
Template Method - a fixed algorithm with replaceable steps.

Education.learn() is the skeleton. Subclasses supply the steps but may
not replace the skeleton itself; trying to do so fails at class
creation time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, final

from gof_catalog.harness.sink import OutputSink


class Education(ABC):
    """Abstract education path."""

    def __init__(self, sink: OutputSink):
        self.sink = sink

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "learn" in cls.__dict__:
            raise TypeError(f"{cls.__name__} may not override the template method learn()")

    @final
    def learn(self) -> None:
        """Run every step in the fixed order."""
        self.enter()
        self.study()
        self.pass_exams()
        self.get_document()

    @abstractmethod
    def enter(self) -> None: ...

    @abstractmethod
    def study(self) -> None: ...

    def pass_exams(self) -> None:
        self.sink.emit("Passing the final exams!")

    @abstractmethod
    def get_document(self) -> None: ...


class School(Education):
    def enter(self) -> None:
        self.sink.emit("Going to the first grade")

    def study(self) -> None:
        self.sink.emit("Attending lessons, doing homework")

    def get_document(self) -> None:
        self.sink.emit("Receiving a secondary school certificate")


class University(Education):
    def enter(self) -> None:
        self.sink.emit("Passing entrance exams and enrolling")

    def study(self) -> None:
        self.sink.emit("Attending lectures, passing sessions")

    def pass_exams(self) -> None:
        self.sink.emit("Defending the graduation thesis")

    def get_document(self) -> None:
        self.sink.emit("Receiving a diploma of higher education")


def run_scenario(sink: OutputSink) -> None:
    """Go through school, then university."""
    School(sink).learn()
    University(sink).learn()
