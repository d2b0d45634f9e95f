"""Abstract base adapter for fetching holes and solution logs."""

import logging
from abc import ABC, abstractmethod

from ..core.cutoff import parse_timestamp
from ..core.errors import ConfigurationError
from ..core.models import Hole, Submission

logger = logging.getLogger(__name__)


class BaseAdapter(ABC):
    @abstractmethod
    def fetch_langs(self) -> list[str]:
        """Return the identifiers of every language the source knows."""
        pass

    @abstractmethod
    def fetch_holes(self) -> list[Hole]:
        """Return the hole catalog in the order the source serves it."""
        pass

    @abstractmethod
    def fetch_submissions(self, hole_id: str, lang: str | None) -> list[Submission]:
        """Return the solution log for one hole.

        A lang of None asks for every language.
        """
        pass

    def validate_lang(self, lang: str):
        """Fail fast on a language the source does not know."""
        known = self.fetch_langs()
        if lang not in known:
            raise ConfigurationError(
                f"Unknown language {lang!r} ({len(known)} known, e.g. "
                f"{', '.join(sorted(known)[:5])})")

    @staticmethod
    def _parse_holes(raw_holes: list) -> list[Hole]:
        holes = []
        skipped = 0
        for position, raw in enumerate(raw_holes):
            hole_id = str(raw.get('id') or '').strip() if isinstance(raw, dict) else ''
            if not hole_id:
                skipped += 1
                continue
            holes.append(Hole(
                id=hole_id,
                name=str(raw.get('name') or hole_id).strip(),
                position=position,
                category=str(raw.get('category') or '').strip(),
            ))
        if skipped:
            logger.warning(f"Skipped {skipped} malformed hole(s)")
        return holes

    @staticmethod
    def _parse_langs(raw_langs: list) -> list[str]:
        """Accept both [{"id": "rust", ...}] and ["rust", ...]."""
        langs = []
        for raw in raw_langs:
            lang = raw.get('id') if isinstance(raw, dict) else raw
            if lang:
                langs.append(str(lang))
        return langs

    @classmethod
    def _parse_submissions(cls, raw_log: list, hole_id: str) -> list[Submission]:
        """Parse a solution log, skipping records that cannot be used."""
        submissions = []
        skipped = 0
        for raw in raw_log:
            sub = cls._extract_submission(raw, hole_id)
            if sub is None:
                skipped += 1
            else:
                submissions.append(sub)
        if skipped:
            logger.warning(f"Skipped {skipped} malformed solution(s) for {hole_id}")
        return submissions

    @classmethod
    def _extract_submission(cls, raw, hole_id: str) -> Submission | None:
        if not isinstance(raw, dict):
            return None
        golfer = str(raw.get('golfer') or '').strip()
        if not golfer or not raw.get('submitted'):
            return None
        try:
            submitted = parse_timestamp(raw['submitted'])
        except ValueError:
            return None

        return Submission(
            golfer=golfer,
            hole=str(raw.get('hole') or hole_id),
            submitted=submitted,
            bytes=cls._parse_length(raw.get('bytes')),
            chars=cls._parse_length(raw.get('chars')),
            lang=str(raw.get('lang') or ''),
            scoring=str(raw.get('scoring') or ''),
            code=raw.get('code') if isinstance(raw.get('code'), str) else None,
        )

    @staticmethod
    def _parse_length(val):
        """Parse a length value. Returns None for null, empty, or invalid."""
        if val is None or isinstance(val, bool):
            return None
        if isinstance(val, int):
            return val if val >= 0 else None
        try:
            n = int(str(val).strip())
        except ValueError:
            return None
        return n if n >= 0 else None
