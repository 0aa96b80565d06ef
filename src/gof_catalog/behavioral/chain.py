"""
Chain of Responsibility - pass a request along until someone handles it.

A payment request carries flags for the transfer methods the receiver
accepts. Handlers are tried in chain order; the first that can handle
the request does so and the chain stops. A request nobody can handle
is dropped without error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from gof_catalog.harness.sink import OutputSink


@dataclass(frozen=True)
class Receiver:
    """Payment request: which transfer methods are acceptable."""

    bank_transfer: bool = False
    money_transfer: bool = False
    paypal_transfer: bool = False


class PaymentHandler(ABC):
    """A link in the chain."""

    def __init__(self, sink: OutputSink, successor: PaymentHandler | None = None):
        self.sink = sink
        self.successor = successor

    def handle(self, receiver: Receiver) -> bool:
        """
        Handle the request here or forward it.

        Returns:
            True if some handler in the chain processed the request
        """
        if self.can_handle(receiver):
            self.process(receiver)
            return True
        if self.successor is not None:
            return self.successor.handle(receiver)
        return False

    @abstractmethod
    def can_handle(self, receiver: Receiver) -> bool: ...

    @abstractmethod
    def process(self, receiver: Receiver) -> None: ...


class BankPaymentHandler(PaymentHandler):
    def can_handle(self, receiver: Receiver) -> bool:
        return receiver.bank_transfer

    def process(self, receiver: Receiver) -> None:
        self.sink.emit("Making a bank transfer")


class PayPalPaymentHandler(PaymentHandler):
    def can_handle(self, receiver: Receiver) -> bool:
        return receiver.paypal_transfer

    def process(self, receiver: Receiver) -> None:
        self.sink.emit("Making a PayPal transfer")


class MoneyPaymentHandler(PaymentHandler):
    def can_handle(self, receiver: Receiver) -> bool:
        return receiver.money_transfer

    def process(self, receiver: Receiver) -> None:
        self.sink.emit("Making a transfer through a money transfer system")


def build_chain(*handlers: PaymentHandler) -> PaymentHandler:
    """Link handlers in the given order and return the head of the chain."""
    if not handlers:
        raise ValueError("A chain needs at least one handler")
    for current, following in zip(handlers, handlers[1:]):
        current.successor = following
    return handlers[0]


def run_scenario(sink: OutputSink) -> None:
    """Send three requests through Bank -> PayPal -> Money."""
    chain = build_chain(
        BankPaymentHandler(sink),
        PayPalPaymentHandler(sink),
        MoneyPaymentHandler(sink),
    )
    requests = [
        Receiver(bank_transfer=False, money_transfer=True, paypal_transfer=True),
        Receiver(money_transfer=True),
        Receiver(),
    ]
    for request in requests:
        if not chain.handle(request):
            sink.emit("No handler accepted the request")
