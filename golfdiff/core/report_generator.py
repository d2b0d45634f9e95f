"""Assemble the head-to-head report.

Output is a list of plain-text lines:
  - a header with both golfers' win/draw/loss totals
  - one row per hole: name, bar, signed delta and (A, B, gold) lengths

Everything is computed in catalog order; ``reverse`` only flips the
emitted rows at the very end.
"""

import logging
from dataclasses import dataclass

from .bar_renderer import BarRenderer
from .cutoff import Cutoff, resolve_cutoff
from .layout import NAME_MARGIN, fit_name
from .models import Hole, ReportConfig
from .outcome import Outcome, Tally, compare, tally
from .reducer import HoleStanding, reduce_holes

logger = logging.getLogger(__name__)

MISSING = '-'


@dataclass(frozen=True)
class RenderedRow:
    hole: Hole
    name: str                 # Already fitted to the name column
    bar: str
    length_a: int | None
    length_b: int | None
    gold: int | None
    outcome: Outcome

    @property
    def delta(self) -> str:
        if self.length_a is None or self.length_b is None:
            return MISSING
        diff = self.length_a - self.length_b
        return f'{diff:+d}' if diff else '0'

    def render(self) -> str:
        lengths = ', '.join(_length_text(n) for n in
                            (self.length_a, self.length_b, self.gold))
        return f'{self.name}{self.bar} {self.delta} ({lengths})'


def _length_text(length: int | None) -> str:
    return MISSING if length is None else str(length)


def build_rows(standings: list[HoleStanding], config: ReportConfig,
               renderer: BarRenderer) -> list[RenderedRow]:
    """Render one row per standing, in the order given."""
    rows = []
    for standing in standings:
        a = standing.length(config.golfer_a)
        b = standing.length(config.golfer_b)
        ref = standing.length(config.reference) if config.reference else None
        rows.append(RenderedRow(
            hole=standing.hole,
            name=fit_name(standing.hole.name, config.hole_name_width),
            bar=renderer.render(a, b, standing.gold, ref),
            length_a=a,
            length_b=b,
            gold=standing.gold,
            outcome=compare(a, b),
        ))
    return rows


def _count(n: int, noun: str, plural: str | None = None) -> str:
    if n == 1:
        return f'{n} {noun}'
    return f"{n} {plural or noun + 's'}"


def _record(golfer: str, totals: Tally) -> str:
    return (f"{golfer}: {_count(totals.wins, 'win')}, "
            f"{_count(totals.draws, 'draw')}, "
            f"{_count(totals.losses, 'loss', 'losses')}")


def summary_line(config: ReportConfig, totals: Tally, cutoff: Cutoff) -> str:
    """Header line, e.g.

    acotis: 3 wins, 1 draw, 2 losses | lynn: 2 wins, 1 draw, 3 losses (rust, bytes, through 2024)
    """
    context = [config.lang, config.scoring, cutoff.describe()]
    if config.reference:
        context.append(f'reference {config.reference}')
    return (f"{_record(config.golfer_a, totals)} | "
            f"{_record(config.golfer_b, totals.mirror())} "
            f"({', '.join(context)})")


def _warn_truncation(holes: list[Hole], width: int):
    limit = width - NAME_MARGIN
    long_names = [h.name for h in holes if len(h.name) > limit]
    if long_names:
        logger.warning(
            f"Hole name width {width} truncates {len(long_names)} name(s) "
            f"to {limit} characters, e.g. {long_names[0]!r}")


def generate_report(holes: list[Hole], logs: dict, config: ReportConfig,
                    cutoff: Cutoff | None = None) -> list[str]:
    """Build the full report.

    Args:
        holes: The hole catalog, in any order (sorted by position here).
        logs: {hole_id: [Submission, ...]}; missing holes count as empty.
        config: Report settings, validated here before any work is done.
        cutoff: Resolved cutoff; resolved from ``config.cutoff`` if None.

    Returns:
        Header line followed by one line per hole.

    Raises:
        ConfigurationError: for invalid settings; no lines are produced.
    """
    config.validate()
    if cutoff is None:
        cutoff = resolve_cutoff(config.cutoff)
    renderer = BarRenderer.for_width(config.score_bar_width)
    _warn_truncation(holes, config.hole_name_width)

    standings = reduce_holes(holes, logs, cutoff, config)
    rows = build_rows(standings, config, renderer)
    totals = tally(row.outcome for row in rows)

    if config.reverse:
        rows = rows[::-1]

    return [summary_line(config, totals, cutoff)] + [row.render() for row in rows]
