"""Reduce raw solution logs to best lengths per golfer as of a cutoff.

Gold is the shortest qualifying length across the whole log, not only
across the golfers being compared. Which languages count towards gold is
a policy:
  - 'lang' (default): only solutions in the configured language
  - 'all': every solution in the log, whatever its language
"""

from dataclasses import dataclass, field

from .cutoff import Cutoff
from .models import Hole, ReportConfig, Submission


@dataclass(frozen=True)
class HoleStanding:
    """Best lengths for one hole as of the cutoff."""
    hole: Hole
    best: dict = field(default_factory=dict)   # golfer -> length or None
    gold: int | None = None

    def length(self, golfer: str) -> int | None:
        return self.best.get(golfer)


def reduce_hole(hole: Hole, submissions: list[Submission], cutoff: Cutoff,
                scoring: str, golfers, lang: str | None = None,
                gold_scope: str = 'lang') -> HoleStanding:
    """Compute each golfer's best length and the hole's gold.

    Args:
        hole: The hole being reduced.
        submissions: Every logged solution for the hole, in any order.
        cutoff: Only solutions it admits are considered.
        scoring: 'bytes' or 'chars'.
        golfers: Names to report best lengths for.
        lang: Language the golfers are compared in; None accepts any.
        gold_scope: 'lang' or 'all', see module docstring.

    Returns:
        A HoleStanding; golfers with nothing qualifying map to None and
        gold is None when nothing qualifies at all.
    """
    best = {golfer: None for golfer in golfers}
    gold = None

    for sub in submissions:
        # code.golf logs bytes- and chars-optimized solutions separately
        if sub.scoring and sub.scoring != scoring:
            continue
        if not cutoff.admits(sub.submitted):
            continue
        length = sub.length(scoring)
        if length is None:
            continue

        in_lang = not lang or not sub.lang or sub.lang == lang
        if in_lang or gold_scope == 'all':
            gold = length if gold is None else min(gold, length)
        if in_lang and sub.golfer in best:
            current = best[sub.golfer]
            if current is None or length < current:
                best[sub.golfer] = length

    return HoleStanding(hole=hole, best=best, gold=gold)


def reduce_holes(holes: list[Hole], logs: dict, cutoff: Cutoff,
                 config: ReportConfig) -> list[HoleStanding]:
    """Reduce every hole in canonical catalog order.

    Holes absent from ``logs`` are reduced as having no solutions.
    """
    return [
        reduce_hole(hole, logs.get(hole.id, []), cutoff, config.scoring,
                    config.golfers, lang=config.lang,
                    gold_scope=config.gold_scope)
        for hole in sorted(holes, key=lambda h: h.position)
    ]
