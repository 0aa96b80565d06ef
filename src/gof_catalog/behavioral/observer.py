"""
Observer - a publisher pushes state changes to registered subscribers.

A stock exchange publishes currency rates; a bank and a broker follow
them. The broker stops trading (unsubscribes) once the dollar rises
above its limit, possibly in the middle of a notification round.
"""

from __future__ import annotations

import logging
import random
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass

from gof_catalog.harness.sink import OutputSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockInfo:
    """The state delivered to observers."""

    usd: int
    euro: int


class Observer(ABC):
    """Subscriber interface."""

    @abstractmethod
    def update(self, info: StockInfo) -> None:
        """Receive the publisher's current state."""


class Stock:
    """
    Publisher.

    Observers are notified in registration order. Removal is by identity,
    so two observers that compare equal are still distinct subscriptions.
    """

    def __init__(self, rng: random.Random | None = None):
        self._observers: list[Observer] = []
        self._rng = rng or random.Random()
        self.info = StockInfo(usd=0, euro=0)

    def register(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove(self, observer: Observer) -> bool:
        """Unsubscribe an observer. Returns False if it was not registered."""
        for index, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[index]
                return True
        return False

    def notify_all(self) -> None:
        # Iterate over a snapshot, skipping anyone removed mid-round
        for observer in list(self._observers):
            if any(observer is current for current in self._observers):
                observer.update(self.info)

    def market(self) -> StockInfo:
        """Trade: roll new rates and notify everyone."""
        self.info = StockInfo(usd=self._rng.randint(20, 40), euro=self._rng.randint(30, 50))
        logger.debug("New rates: %s", self.info)
        self.notify_all()
        return self.info

    @property
    def observers(self) -> list[Observer]:
        return list(self._observers)


class _Participant(Observer):
    """Observer carrying a random unique id; equality compares ids only."""

    def __init__(self, name: str, stock: Stock, sink: OutputSink):
        self.id = uuid.uuid4()
        self.name = name
        self.stock = stock
        self.sink = sink

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Participant):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class Bank(_Participant):
    """Buys euros when the euro is cheap."""

    def __init__(self, name: str, stock: Stock, sink: OutputSink, euro_limit: int = 40):
        super().__init__(name, stock, sink)
        self.euro_limit = euro_limit
        stock.register(self)

    def update(self, info: StockInfo) -> None:
        if info.euro > self.euro_limit:
            self.sink.emit(f"Bank {self.name} sells euros; rate: {info.euro}")
        else:
            self.sink.emit(f"Bank {self.name} buys euros; rate: {info.euro}")


class Broker(_Participant):
    """Trades dollars until the dollar gets too expensive, then leaves."""

    def __init__(self, name: str, stock: Stock, sink: OutputSink, usd_limit: int = 30):
        super().__init__(name, stock, sink)
        self.usd_limit = usd_limit
        stock.register(self)

    def update(self, info: StockInfo) -> None:
        if info.usd > self.usd_limit:
            self.sink.emit(f"Broker {self.name} sells dollars; rate: {info.usd}")
            self.stop_trade()
        else:
            self.sink.emit(f"Broker {self.name} buys dollars; rate: {info.usd}")

    def stop_trade(self) -> None:
        if self.stock.remove(self):
            self.sink.emit(f"Broker {self.name} stops trading")


def run_scenario(sink: OutputSink) -> None:
    """Trade a few rounds with a fixed seed so the output is reproducible."""
    stock = Stock(rng=random.Random(7))
    Broker("Ivan Ivanovich", stock, sink)
    Bank("UnitBank", stock, sink)
    for _ in range(3):
        stock.market()
    sink.emit(f"Observers left: {len(stock.observers)}")
