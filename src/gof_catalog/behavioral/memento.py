"""
Memento - save and restore an object's state without exposing it.

The hero (originator) produces immutable snapshots; the game history
(caretaker) only stores and hands them back.
"""

from __future__ import annotations

from dataclasses import dataclass

from gof_catalog.constants import ErrorMessages
from gof_catalog.errors import InvalidArgumentError
from gof_catalog.harness.sink import OutputSink


@dataclass(frozen=True)
class HeroMemento:
    """
    Immutable snapshot of a hero's state.

    The fields are private to Hero; the caretaker only stores snapshots.
    """

    _patrons: int
    _lives: int


class Hero:
    """Originator."""

    def __init__(self, sink: OutputSink, patrons: int = 10, lives: int = 5):
        self.sink = sink
        self.patrons = patrons
        self.lives = lives

    def shoot(self) -> bool:
        """Fire once. Returns False when out of patrons."""
        if self.patrons <= 0:
            self.sink.emit("No more patrons")
            return False
        self.patrons -= 1
        self.sink.emit(f"Shooting. {self.patrons} patrons left")
        return True

    def save_state(self) -> HeroMemento:
        self.sink.emit(f"Saving the game. State: {self.patrons} patrons, {self.lives} lives")
        return HeroMemento(self.patrons, self.lives)

    def restore_state(self, memento: HeroMemento | None) -> None:
        """
        Overwrite the whole state from a snapshot.

        Raises:
            InvalidArgumentError: If no snapshot is given
        """
        if memento is None:
            raise InvalidArgumentError(ErrorMessages.MISSING_SNAPSHOT)
        self.patrons = memento._patrons
        self.lives = memento._lives
        self.sink.emit(f"Restoring the game. State: {self.patrons} patrons, {self.lives} lives")


class GameHistory:
    """Caretaker: keeps snapshots without looking inside them."""

    def __init__(self) -> None:
        self._history: list[HeroMemento] = []

    def push(self, memento: HeroMemento) -> None:
        self._history.append(memento)

    def pop(self) -> HeroMemento | None:
        """Remove and return the latest snapshot, or None if there is none."""
        return self._history.pop() if self._history else None

    def last(self) -> HeroMemento | None:
        return self._history[-1] if self._history else None

    def __len__(self) -> int:
        return len(self._history)


def run_scenario(sink: OutputSink) -> None:
    """Shoot, save, shoot, restore, shoot."""
    hero = Hero(sink)
    hero.shoot()  # 9 left
    game = GameHistory()
    game.push(hero.save_state())
    hero.shoot()  # 8 left
    hero.restore_state(game.last())
    hero.shoot()  # 8 left again
