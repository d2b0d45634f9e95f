"""Fixed-width ASCII bars comparing two golfers against gold.

A row's bar is golfer A's segment mirrored on the left and golfer B's
segment on the right, joined at the seam:

    ...#################..
               ^ seam

Each segment has ``width // 2`` cells filled from the seam outwards in
proportion to gold / length. Only a gold score fills a whole segment and
any real score fills at least one cell; a missing score is all empty.
A reference golfer is drawn as a marker on the cell where its own
segment would end, in both halves, without changing the width. The
marker is ``|`` over an empty cell and ``+`` over a filled one, so a golfer
who reaches the reference cell is never mistaken for one who stops
short of it:

    ###|.    golfer fills 3 cells, reference ends on cell 4
    ###+.    golfer and reference both end on cell 4
"""

from dataclasses import dataclass

from .layout import effective_bar_width


FILLED = '#'
EMPTY = '.'
REFERENCE_MARK = '|'
REFERENCE_ON_FILLED = '+'


@dataclass(frozen=True)
class BarRenderer:
    width: int    # Effective width, always even

    @classmethod
    def for_width(cls, configured: int) -> 'BarRenderer':
        """Build a renderer, adjusting an odd configured width upwards."""
        return cls(effective_bar_width(configured))

    @property
    def half(self) -> int:
        return self.width // 2

    @property
    def seam(self) -> int:
        """Offset of the seam within every rendered bar."""
        return self.half

    def cells(self, length: int | None, gold: int | None) -> int:
        """Number of filled cells in one golfer's segment."""
        if length is None or gold is None:
            return 0
        if length <= gold:
            return self.half
        filled = self.half * gold // length
        return max(1, min(self.half - 1, filled))

    def segment(self, length: int | None, gold: int | None,
                reference: int | None = None) -> str:
        """One golfer's segment, reading outwards from the seam."""
        filled = self.cells(length, gold)
        chars = [FILLED] * filled + [EMPTY] * (self.half - filled)
        ref_cells = self.cells(reference, gold)
        if ref_cells:
            chars[ref_cells - 1] = REFERENCE_ON_FILLED if ref_cells <= filled else REFERENCE_MARK
        return ''.join(chars)

    def render(self, length_a: int | None, length_b: int | None,
               gold: int | None, reference: int | None = None) -> str:
        left = self.segment(length_a, gold, reference)[::-1]
        right = self.segment(length_b, gold, reference)
        return left + right
