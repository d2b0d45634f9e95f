"""Per-hole verdicts between the two compared golfers, and their totals."""

from dataclasses import dataclass
from enum import Enum
from functools import reduce


class Outcome(Enum):
    """Result of a hole from the first golfer's point of view."""
    WIN = 'win'
    LOSS = 'loss'
    DRAW = 'draw'

    def mirror(self) -> 'Outcome':
        if self is Outcome.WIN:
            return Outcome.LOSS
        if self is Outcome.LOSS:
            return Outcome.WIN
        return Outcome.DRAW


def compare(a: int | None, b: int | None) -> Outcome:
    """Shorter wins; a score beats no score; equal or both missing draws."""
    if a == b:
        return Outcome.DRAW
    if b is None:
        return Outcome.WIN
    if a is None:
        return Outcome.LOSS
    return Outcome.WIN if a < b else Outcome.LOSS


@dataclass(frozen=True)
class Tally:
    wins: int = 0
    losses: int = 0
    draws: int = 0

    def add(self, outcome: Outcome) -> 'Tally':
        if outcome is Outcome.WIN:
            return Tally(self.wins + 1, self.losses, self.draws)
        if outcome is Outcome.LOSS:
            return Tally(self.wins, self.losses + 1, self.draws)
        return Tally(self.wins, self.losses, self.draws + 1)

    def mirror(self) -> 'Tally':
        """The same totals from the other golfer's point of view."""
        return Tally(self.losses, self.wins, self.draws)


def tally(outcomes) -> Tally:
    return reduce(Tally.add, outcomes, Tally())
