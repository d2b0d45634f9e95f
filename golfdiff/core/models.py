"""Data models for the head-to-head code.golf scoreboard."""

from dataclasses import dataclass
from datetime import datetime

from .errors import ConfigurationError
from .layout import check_hole_name_width, effective_bar_width


SCORINGS = ('bytes', 'chars')
GOLD_SCOPES = ('lang', 'all')
DEFAULT_LANG = 'rust'
DEFAULT_SCORE_BAR_WIDTH = 20
DEFAULT_HOLE_NAME_WIDTH = 33


@dataclass(frozen=True)
class Hole:
    """One challenge in the code.golf catalog."""
    id: str                   # "catalan-numbers"
    name: str                 # "Catalan Numbers"
    position: int             # Index in the catalog as served by the API
    category: str = ''        # "Sequence", "Transform", ...


@dataclass(frozen=True)
class Submission:
    """One entry of a hole's solution log."""
    golfer: str
    hole: str
    submitted: datetime       # Timezone-aware, UTC
    bytes: int | None = None
    chars: int | None = None
    lang: str = ''
    scoring: str = ''         # Leaderboard the solution was submitted to
    code: str | None = None

    def length(self, scoring: str) -> int | None:
        """Length under a scoring mode, or None when it cannot be known.

        Characters are counted as code points and bytes as UTF-8, so the
        two only agree for ASCII solutions.
        """
        if scoring == 'chars':
            if self.chars is not None:
                return self.chars
            return len(self.code) if self.code is not None else None
        if self.bytes is not None:
            return self.bytes
        return len(self.code.encode('utf-8')) if self.code is not None else None


@dataclass
class ReportConfig:
    """Settings for a single head-to-head report."""
    golfer_a: str
    golfer_b: str
    reference: str | None = None
    lang: str = DEFAULT_LANG
    cutoff: str = ''                              # "2024", "2024-06-01 12:00", ...
    scoring: str = 'bytes'                        # "bytes" or "chars"
    score_bar_width: int = DEFAULT_SCORE_BAR_WIDTH
    hole_name_width: int = DEFAULT_HOLE_NAME_WIDTH
    reverse: bool = False
    gold_scope: str = 'lang'                      # "lang" or "all"

    @property
    def golfers(self) -> tuple:
        """Every participant, the reference golfer last when present."""
        if self.reference:
            return (self.golfer_a, self.golfer_b, self.reference)
        return (self.golfer_a, self.golfer_b)

    def validate(self):
        """Check everything that can be checked without fetching data.

        Raises:
            ConfigurationError: on the first problem found.
        """
        if not self.golfer_a.strip() or not self.golfer_b.strip():
            raise ConfigurationError('Golfer names must not be empty')
        if self.reference is not None and not self.reference.strip():
            raise ConfigurationError('Reference golfer name must not be empty')
        if len(set(self.golfers)) != len(self.golfers):
            raise ConfigurationError(
                f"Golfers must be distinct, got {', '.join(self.golfers)}")
        if not self.lang.strip():
            raise ConfigurationError('Language must not be empty')
        if self.scoring not in SCORINGS:
            raise ConfigurationError(
                f"Unknown scoring {self.scoring!r} (expected one of {', '.join(SCORINGS)})")
        if self.gold_scope not in GOLD_SCOPES:
            raise ConfigurationError(
                f"Unknown gold scope {self.gold_scope!r} (expected one of {', '.join(GOLD_SCOPES)})")
        effective_bar_width(self.score_bar_width)
        check_hole_name_width(self.hole_name_width)
